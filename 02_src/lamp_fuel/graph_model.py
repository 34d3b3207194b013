"""Sources, links and the registry that owns them."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .errors import SourceNotFoundError

EdgeTriple = Tuple[int, int, int]


@dataclass(eq=False)
class Link:
    """Lamp-carrying edge shared by both endpoint sources.

    ``satisfied_a`` and ``satisfied_b`` hold the largest radius each endpoint
    has reached so far. Both endpoints reference this same object.
    """

    index: int
    endpoint_a: int
    endpoint_b: int
    required: int
    satisfied_a: int = 0
    satisfied_b: int = 0

    def total_satisfied(self) -> int:
        return self.satisfied_a + self.satisfied_b

    def deficit(self) -> int:
        return self.required - self.total_satisfied()

    def is_open(self) -> bool:
        return self.total_satisfied() < self.required

    def has_endpoint(self, source_id: int) -> bool:
        return source_id in (self.endpoint_a, self.endpoint_b)

    def other(self, source_id: int) -> int:
        if self.endpoint_a == source_id:
            return self.endpoint_b
        return self.endpoint_a

    def satisfied_by(self, source_id: int) -> int:
        if self.endpoint_a == source_id:
            return self.satisfied_a
        if self.endpoint_b == source_id:
            return self.satisfied_b
        return 0


@dataclass(eq=False)
class Source:
    id: int
    radius: int = 0
    links: List[Link] = field(default_factory=list, repr=False)

    def open_links(self) -> List[Link]:
        return [link for link in self.links if link.is_open()]


@dataclass
class LampGraph:
    """Explicit source registry plus the canonical link arena."""

    _sources: Dict[int, Source] = field(default_factory=dict)
    links: List[Link] = field(default_factory=list)

    @classmethod
    def from_triples(cls, triples: Iterable[EdgeTriple]) -> "LampGraph":
        graph = cls()
        for endpoint_a, endpoint_b, required in triples:
            graph.add_link(int(endpoint_a), int(endpoint_b), int(required))
        return graph

    def ensure_source(self, source_id: int) -> Source:
        source = self._sources.get(source_id)
        if source is None:
            source = Source(id=source_id)
            self._sources[source_id] = source
        return source

    def find_source(self, source_id: int) -> Optional[Source]:
        return self._sources.get(source_id)

    def get_source(self, source_id: int) -> Source:
        source = self._sources.get(source_id)
        if source is None:
            raise SourceNotFoundError(source_id)
        return source

    def add_link(self, endpoint_a: int, endpoint_b: int, required: int) -> Link:
        source_a = self.ensure_source(endpoint_a)
        source_b = self.ensure_source(endpoint_b)
        link = Link(
            index=len(self.links),
            endpoint_a=endpoint_a,
            endpoint_b=endpoint_b,
            required=required,
        )
        self.links.append(link)
        source_a.links.append(link)
        # A self-loop is listed once on its only source.
        if source_b is not source_a:
            source_b.links.append(link)
        return link

    def sources(self) -> List[Source]:
        return list(self._sources.values())

    def __iter__(self) -> Iterator[Source]:
        return iter(self._sources.values())

    def __len__(self) -> int:
        return len(self._sources)

    def __contains__(self, source_id: object) -> bool:
        return source_id in self._sources

    def total_fuel(self) -> int:
        return sum(source.radius for source in self._sources.values())
