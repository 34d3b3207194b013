"""How a source's radius fuels the lamps on its incident links."""

from .graph_model import Link, Source


def apply(link: Link, source: Source) -> bool:
    """Raise ``source``'s side of ``link`` to the source radius.

    Uses max, not addition: a radius is one illumination extent, so applying
    it twice changes nothing. Returns True when the satisfied value grew. A
    source that is not an endpoint of the link leaves it untouched.
    """
    if link.endpoint_a == source.id:
        if source.radius > link.satisfied_a:
            link.satisfied_a = source.radius
            return True
        return False
    if link.endpoint_b == source.id:
        if source.radius > link.satisfied_b:
            link.satisfied_b = source.radius
            return True
        return False
    return False


def apply_to_all(source: Source) -> int:
    return sum(1 for link in source.links if apply(link, source))
