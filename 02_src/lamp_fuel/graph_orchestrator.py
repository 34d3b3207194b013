"""Deterministic orchestrator for lamp graph mutations."""

from dataclasses import asdict
from typing import Any, Dict

from .graph_model import LampGraph, Link, Source


class GraphOrchestrator:
    """Owns source identifiers and safe updates of a lamp graph."""

    def __init__(self, graph: LampGraph | None = None) -> None:
        self.graph = graph if graph is not None else LampGraph()

    def add_or_get_source(self, source_id: int) -> Source:
        return self.graph.ensure_source(int(source_id))

    def add_link(
        self,
        endpoint_a: int,
        endpoint_b: int,
        required: int,
        create_missing: bool = True,
    ) -> Link:
        endpoint_a, endpoint_b = int(endpoint_a), int(endpoint_b)
        if not create_missing:
            # Fail fast on ids the caller promised were already registered.
            self.graph.get_source(endpoint_a)
            self.graph.get_source(endpoint_b)
        return self.graph.add_link(endpoint_a, endpoint_b, int(required))

    def to_json(self) -> Dict[str, Any]:
        return {
            "sources": [
                {
                    "id": source.id,
                    "radius": source.radius,
                    "links": [link.index for link in source.links],
                }
                for source in self.graph
            ],
            "links": [
                {**asdict(link), "total_satisfied": link.total_satisfied()}
                for link in self.graph.links
            ],
            "total_fuel": self.graph.total_fuel(),
        }
