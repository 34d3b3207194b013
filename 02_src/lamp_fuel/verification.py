"""Post-solve classification of every link against its lamp demand."""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .graph_model import LampGraph, Link


class LinkStatus(str, Enum):
    DEFICIENT = "deficient"
    EXACT = "exact"
    OVERLAPPING = "overlapping"


@dataclass(frozen=True)
class SourceReport:
    id: int
    radius: int


@dataclass(frozen=True)
class LinkReport:
    index: int
    endpoint_a: int
    endpoint_b: int
    required: int
    satisfied: int
    status: LinkStatus


@dataclass
class VerificationReport:
    sources: List[SourceReport] = field(default_factory=list)
    links: List[LinkReport] = field(default_factory=list)
    total_fuel: int = 0

    @property
    def deficient_links(self) -> List[LinkReport]:
        return [link for link in self.links if link.status is LinkStatus.DEFICIENT]

    @property
    def all_fueled(self) -> bool:
        return not self.deficient_links

    def status_counts(self) -> Dict[str, int]:
        counts = {status.value: 0 for status in LinkStatus}
        for link in self.links:
            counts[link.status.value] += 1
        return counts

    def to_json(self) -> Dict[str, Any]:
        return {
            "sources": [asdict(source) for source in self.sources],
            "links": [{**asdict(link), "status": link.status.value} for link in self.links],
            "total_fuel": self.total_fuel,
            "all_fueled": self.all_fueled,
            "status_counts": self.status_counts(),
        }


def classify(link: Link) -> LinkStatus:
    satisfied = link.total_satisfied()
    if satisfied < link.required:
        return LinkStatus.DEFICIENT
    if satisfied == link.required:
        return LinkStatus.EXACT
    return LinkStatus.OVERLAPPING


def verify(graph: LampGraph) -> VerificationReport:
    return VerificationReport(
        sources=[SourceReport(id=source.id, radius=source.radius) for source in graph],
        links=[
            LinkReport(
                index=link.index,
                endpoint_a=link.endpoint_a,
                endpoint_b=link.endpoint_b,
                required=link.required,
                satisfied=link.total_satisfied(),
                status=classify(link),
            )
            for link in graph.links
        ],
        total_fuel=graph.total_fuel(),
    )
