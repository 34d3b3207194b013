import pytest

from lamp_fuel import LampGraph


@pytest.fixture
def single_link_graph():
    return LampGraph.from_triples([(1, 2, 5)])


@pytest.fixture
def path_graph():
    return LampGraph.from_triples([(1, 2, 3), (2, 3, 7)])


@pytest.fixture
def triangle_graph():
    return LampGraph.from_triples([(1, 2, 1), (2, 3, 1), (3, 1, 1)])


@pytest.fixture
def two_pass_chain_graph():
    # Registry order 2, 3, 1, 4: link 2-3 only opens up for a move in pass 2.
    return LampGraph.from_triples([(2, 3, 10), (1, 2, 1), (3, 4, 1)])


@pytest.fixture
def tree_graph():
    return LampGraph.from_triples(
        [(1, 2, 4), (2, 3, 6), (3, 4, 2), (3, 5, 9), (5, 6, 1), (6, 7, 3), (2, 8, 5)]
    )
