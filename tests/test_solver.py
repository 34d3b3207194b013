import pytest

from lamp_fuel import LampGraph, Link, LinkStatus, PropagationSolver, SourceNotFoundError, solve, verify


def radii(graph):
    return {source.id: source.radius for source in graph}


def statuses(graph):
    return [link.status for link in verify(graph).links]


class RecordingSolver(PropagationSolver):
    """Snapshots the graph after every forcing move."""

    def __init__(self, graph, **kwargs):
        super().__init__(graph, **kwargs)
        self.snapshots = []

    def _force(self, source, link):
        move = super()._force(source, link)
        self.snapshots.append(
            {
                "forced_total": link.total_satisfied(),
                "forced_required": link.required,
                "radii": radii(self.graph),
                "satisfied": [(item.satisfied_a, item.satisfied_b) for item in self.graph.links],
                "within_radius": all(
                    item.satisfied_a <= self.graph.get_source(item.endpoint_a).radius
                    and item.satisfied_b <= self.graph.get_source(item.endpoint_b).radius
                    for item in self.graph.links
                ),
            }
        )
        return move


def test_single_link_fuels_from_one_endpoint(single_link_graph):
    result = solve(single_link_graph)

    assert radii(single_link_graph) == {1: 0, 2: 5}
    assert single_link_graph.total_fuel() == 5
    assert statuses(single_link_graph) == [LinkStatus.EXACT]
    assert result.move_count == 1
    assert not result.stalled


def test_path_graph(path_graph):
    result = solve(path_graph)

    assert radii(path_graph) == {1: 0, 2: 3, 3: 4}
    assert path_graph.total_fuel() == 7
    assert statuses(path_graph) == [LinkStatus.EXACT, LinkStatus.EXACT]
    assert [(move.scanned_source, move.fueled_source, move.deficit) for move in result.moves] == [
        (1, 2, 3),
        (2, 3, 4),
    ]


def test_triangle_stalls_without_moves(triangle_graph):
    result = solve(triangle_graph)

    assert result.moves == []
    assert result.passes == 1
    assert result.stalled
    assert not result.hit_pass_limit
    assert statuses(triangle_graph) == [LinkStatus.DEFICIENT] * 3
    assert triangle_graph.total_fuel() == 0


def test_hub_radius_overlaps_a_smaller_link():
    graph = LampGraph.from_triples([(1, 2, 3), (2, 3, 1)])

    solve(graph)

    assert radii(graph) == {1: 0, 2: 3, 3: 0}
    assert statuses(graph) == [LinkStatus.EXACT, LinkStatus.OVERLAPPING]


def test_later_pass_unlocks_forcing_move(two_pass_chain_graph):
    result = solve(two_pass_chain_graph)

    assert result.passes == 3
    assert [move.pass_no for move in result.moves] == [1, 1, 2]
    assert radii(two_pass_chain_graph) == {2: 1, 3: 9, 1: 0, 4: 0}
    assert two_pass_chain_graph.total_fuel() == 10
    assert statuses(two_pass_chain_graph) == [
        LinkStatus.EXACT,
        LinkStatus.EXACT,
        LinkStatus.OVERLAPPING,
    ]


def test_max_passes_stops_early(two_pass_chain_graph):
    result = PropagationSolver(two_pass_chain_graph, max_passes=1).solve()

    assert result.passes == 1
    assert result.hit_pass_limit
    assert not result.stalled
    assert result.move_count == 2


def test_capped_solve_resumes_to_full_fueling(two_pass_chain_graph):
    PropagationSolver(two_pass_chain_graph, max_passes=1).solve()

    result = solve(two_pass_chain_graph)

    assert not result.stalled
    assert verify(two_pass_chain_graph).all_fueled


def test_cap_on_final_productive_pass_is_not_reported(single_link_graph):
    result = PropagationSolver(single_link_graph, max_passes=1).solve()

    assert result.passes == 1
    assert result.move_count == 1
    assert not result.hit_pass_limit
    assert not result.stalled
    assert verify(single_link_graph).all_fueled


def test_cap_with_no_forcing_move_left_is_a_stall():
    # Pass 1 fuels 1-2; the triangle 2-3-4 then has no forcing move.
    graph = LampGraph.from_triples([(1, 2, 1), (2, 3, 5), (3, 4, 5), (4, 2, 5)])

    result = PropagationSolver(graph, max_passes=1).solve()

    assert result.move_count == 1
    assert not result.hit_pass_limit
    assert result.stalled


def test_max_passes_must_be_positive(single_link_graph):
    with pytest.raises(ValueError):
        PropagationSolver(single_link_graph, max_passes=0)


def test_fixed_point_is_idempotent(tree_graph):
    solver = PropagationSolver(tree_graph)
    solver.solve()
    before = radii(tree_graph)
    satisfied = [(link.satisfied_a, link.satisfied_b) for link in tree_graph.links]

    assert solver.scan_pass() == []
    assert radii(tree_graph) == before
    assert [(link.satisfied_a, link.satisfied_b) for link in tree_graph.links] == satisfied


def test_tree_is_fully_fueled(tree_graph):
    result = solve(tree_graph)

    assert not result.stalled
    assert verify(tree_graph).all_fueled


def test_each_forcing_move_saturates_its_link_exactly(tree_graph):
    solver = RecordingSolver(tree_graph)
    solver.solve()

    assert solver.snapshots
    for snapshot in solver.snapshots:
        assert snapshot["forced_total"] == snapshot["forced_required"]


def test_radii_and_satisfied_values_never_decrease(tree_graph):
    solver = RecordingSolver(tree_graph)
    solver.solve()

    for earlier, later in zip(solver.snapshots, solver.snapshots[1:]):
        for source_id, radius in earlier["radii"].items():
            assert later["radii"][source_id] >= radius
        for (a_before, b_before), (a_after, b_after) in zip(earlier["satisfied"], later["satisfied"]):
            assert a_after >= a_before
            assert b_after >= b_before


def test_satisfied_value_never_exceeds_source_radius(tree_graph):
    solver = RecordingSolver(tree_graph)
    solver.solve()

    assert solver.snapshots
    assert all(snapshot["within_radius"] for snapshot in solver.snapshots)

    for link in tree_graph.links:
        assert link.satisfied_a <= tree_graph.get_source(link.endpoint_a).radius
        assert link.satisfied_b <= tree_graph.get_source(link.endpoint_b).radius


@pytest.mark.parametrize(
    "triples",
    [
        [(1, 2, 3), (2, 3, 7)],
        [(2, 3, 7), (1, 2, 3)],
    ],
)
def test_path_is_fueled_for_any_ingest_order(triples):
    graph = LampGraph.from_triples(triples)

    solve(graph)

    assert verify(graph).all_fueled
    assert graph.total_fuel() == 7


def test_triangle_stalls_for_any_ingest_order():
    graph = LampGraph.from_triples([(3, 1, 1), (2, 3, 1), (1, 2, 1)])

    solve(graph)

    assert statuses(graph) == [LinkStatus.DEFICIENT] * 3


def test_self_loop_is_fueled_by_its_own_source():
    graph = LampGraph.from_triples([(1, 1, 4)])

    solve(graph)

    assert radii(graph) == {1: 4}
    assert statuses(graph) == [LinkStatus.EXACT]


def test_negative_lamp_count_is_never_open():
    graph = LampGraph.from_triples([(1, 2, -3)])

    result = solve(graph)

    assert result.moves == []
    assert statuses(graph) == [LinkStatus.OVERLAPPING]


def test_unknown_neighbour_fails_fast():
    graph = LampGraph()
    source = graph.ensure_source(1)
    dangling = Link(index=0, endpoint_a=1, endpoint_b=99, required=3)
    graph.links.append(dangling)
    source.links.append(dangling)

    with pytest.raises(SourceNotFoundError):
        PropagationSolver(graph).scan_pass()


def test_independent_solves_do_not_share_state(path_graph):
    other = LampGraph.from_triples([(1, 2, 3), (2, 3, 7)])

    solve(path_graph)

    assert other.total_fuel() == 0
    assert all(link.is_open() for link in other.links)
