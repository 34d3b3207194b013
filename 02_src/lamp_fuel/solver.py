"""Fixed-point propagation of source radii, driven by a LangGraph loop."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from . import fueling
from .graph_model import LampGraph, Link, Source

logger = logging.getLogger(__name__)

# Supersteps LangGraph allows on top of the productive-pass bound.
_RECURSION_HEADROOM = 25


@dataclass(frozen=True)
class ForcingMove:
    pass_no: int
    scanned_source: int
    fueled_source: int
    link_index: int
    deficit: int
    new_radius: int


@dataclass
class SolveResult:
    passes: int = 0
    moves: List[ForcingMove] = field(default_factory=list)
    stalled: bool = False
    hit_pass_limit: bool = False

    @property
    def move_count(self) -> int:
        return len(self.moves)


class PropagationState(TypedDict):
    passes: int
    progress: bool


class PropagationSolver:
    """Grows radii by forcing moves until a pass makes no progress.

    A forcing move happens when a scanned source has exactly one open link:
    the source at the other end grows by exactly the link's deficit and its
    new radius is applied to every link it touches. Sources with zero or
    several open links are skipped for the pass.
    """

    def __init__(self, graph: LampGraph, max_passes: Optional[int] = None) -> None:
        if max_passes is not None and max_passes < 1:
            raise ValueError("max_passes must be a positive integer")
        self.graph = graph
        self.max_passes = max_passes
        self._moves: List[ForcingMove] = []
        self._passes = 0

    def solve(self) -> SolveResult:
        workflow = self._build_workflow()
        # Every productive pass closes at least one link for good.
        recursion_limit = len(self.graph.links) + _RECURSION_HEADROOM
        final_state = workflow.invoke(
            {"passes": self._passes, "progress": True},
            config={"recursion_limit": recursion_limit},
        )

        # A capped productive pass only counts as cut short if a move remains.
        hit_limit = bool(final_state["progress"]) and self.has_forcing_move()
        result = SolveResult(
            passes=final_state["passes"],
            moves=list(self._moves),
            stalled=not hit_limit and any(link.is_open() for link in self.graph.links),
            hit_pass_limit=hit_limit,
        )
        if hit_limit:
            logger.warning("Stopped at max_passes=%s before reaching a fixed point", self.max_passes)
        elif result.stalled:
            open_count = sum(1 for link in self.graph.links if link.is_open())
            logger.warning(
                "Solve stalled after %d passes with %d open links", result.passes, open_count
            )
        else:
            logger.info(
                "Solve converged after %d passes with %d forcing moves",
                result.passes,
                result.move_count,
            )
        return result

    def scan_pass(self) -> List[ForcingMove]:
        """Run one full scan over the registry and return the moves it made."""
        self._passes += 1
        moves: List[ForcingMove] = []
        for source in self.graph:
            open_links = source.open_links()
            if len(open_links) != 1:
                continue
            moves.append(self._force(source, open_links[0]))
        self._moves.extend(moves)
        logger.info("Pass %d made %d forcing moves", self._passes, len(moves))
        return moves

    def has_forcing_move(self) -> bool:
        return any(len(source.open_links()) == 1 for source in self.graph)

    def _force(self, source: Source, link: Link) -> ForcingMove:
        neighbour = self.graph.get_source(link.other(source.id))
        deficit = link.deficit()
        neighbour.radius += deficit
        fueling.apply_to_all(neighbour)
        move = ForcingMove(
            pass_no=self._passes,
            scanned_source=source.id,
            fueled_source=neighbour.id,
            link_index=link.index,
            deficit=deficit,
            new_radius=neighbour.radius,
        )
        logger.debug(
            "Source %s forces %s by %d to radius %d on link %d",
            source.id,
            neighbour.id,
            deficit,
            neighbour.radius,
            link.index,
        )
        return move

    def _build_workflow(self):
        graph = StateGraph(PropagationState)
        graph.add_node("scan_pass", self._scan_node)
        graph.add_edge(START, "scan_pass")
        graph.add_conditional_edges(
            "scan_pass",
            self._route,
            {"scan_pass": "scan_pass", "done": END},
        )
        return graph.compile()

    def _scan_node(self, state: PropagationState) -> Dict[str, Any]:
        moves = self.scan_pass()
        return {"passes": self._passes, "progress": bool(moves)}

    def _route(self, state: PropagationState) -> str:
        if not state["progress"]:
            return "done"
        if self.max_passes is not None and state["passes"] >= self.max_passes:
            return "done"
        return "scan_pass"


def solve(graph: LampGraph, max_passes: Optional[int] = None) -> SolveResult:
    return PropagationSolver(graph, max_passes=max_passes).solve()
