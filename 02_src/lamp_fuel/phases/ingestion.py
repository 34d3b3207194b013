"""Edge-list ingestion phase: text triples into a lamp graph."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from ..errors import EdgeListFormatError
from ..graph_model import EdgeTriple
from ..graph_orchestrator import GraphOrchestrator
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


def parse_edge_list(text: str) -> List[EdgeTriple]:
    """Group whitespace separated integers into ``(a, b, lamps)`` triples.

    Tokens may span lines. ``#`` starts a comment that runs to end of line.
    """
    triples: List[EdgeTriple] = []
    pending: List[Tuple[int, int]] = []

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split("#", 1)[0]
        for token in line.split():
            try:
                value = int(token)
            except ValueError:
                raise EdgeListFormatError(f"expected an integer, got {token!r}", line_no) from None
            pending.append((value, line_no))
            if len(pending) == 3:
                triples.append((pending[0][0], pending[1][0], pending[2][0]))
                pending = []

    if pending:
        raise EdgeListFormatError(
            f"incomplete record with {len(pending)} of 3 values", pending[0][1]
        )
    return triples


def read_edge_list(input_path: Path) -> List[EdgeTriple]:
    return parse_edge_list(input_path.read_text(encoding="utf-8"))


class EdgeListIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        orchestrator: GraphOrchestrator = context.get("orchestrator") or GraphOrchestrator()
        triples = self._load_triples(context)

        for endpoint_a, endpoint_b, required in triples:
            orchestrator.add_link(endpoint_a, endpoint_b, required)

        graph = orchestrator.graph
        logger.info("Ingested %d links over %d sources", len(graph.links), len(graph))
        return {
            "orchestrator": orchestrator,
            "ingestion_output": {
                "triples": [list(triple) for triple in triples],
                "source_count": len(graph),
                "link_count": len(graph.links),
            },
        }

    @staticmethod
    def _load_triples(context: Dict[str, Any]) -> List[EdgeTriple]:
        if context.get("triples") is not None:
            return _coerce_triples(context["triples"])
        if context.get("input_text") is not None:
            return parse_edge_list(str(context["input_text"]))
        input_path = context.get("input_path")
        if input_path:
            return read_edge_list(Path(str(input_path)))
        return []


def _coerce_triples(records: Iterable[Any]) -> List[EdgeTriple]:
    triples: List[EdgeTriple] = []
    for position, record in enumerate(records, start=1):
        values = tuple(record)
        if len(values) != 3:
            raise EdgeListFormatError(f"record {position} has {len(values)} values, expected 3")
        triples.append((int(values[0]), int(values[1]), int(values[2])))
    return triples
