"""Plain-text edge list parsing and serialization."""

from __future__ import annotations

from typing import Iterable, List, Optional, Union

from floorpaths.errors import MalformedEdgeError
from floorpaths.model.edge import Edge
from floorpaths.types.base import Location, Weight


def parse_location(token: str) -> Location:
    """Return ``token`` as an int when it looks like one, else the raw string."""
    try:
        return int(token)
    except ValueError:
        return token


def _parse_weight(token: str) -> Weight:
    try:
        return int(token)
    except ValueError:
        return float(token)


def edgelist_to_edges(
    lines: Iterable[str],
    separator: Optional[str] = None,
    default_weight: Optional[Weight] = None,
) -> List[Edge]:
    """Build edges from an edge list.

    Each non-empty line holds ``id entry exit [weight]``. Text after ``#`` is
    ignored.

    Args:
        lines: Lines of text.
        separator: Field separator. None splits on any whitespace.
        default_weight: Weight for lines without one. Falls back to the Edge default.

    Returns:
        Edges in line order.

    Raises:
        MalformedEdgeError: If a line has the wrong number of fields or a
            field cannot be parsed.
    """
    edges: List[Edge] = []
    for line_no, raw in enumerate(lines, start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        tokens = line.split(separator)
        if len(tokens) not in (3, 4):
            raise MalformedEdgeError(
                f"Line {line_no}: expected 'id entry exit [weight]', got {raw.strip()!r}"
            )
        try:
            edge_id = int(tokens[0])
            weight: Union[Weight, None] = (
                _parse_weight(tokens[3]) if len(tokens) == 4 else default_weight
            )
        except ValueError as exc:
            raise MalformedEdgeError(f"Line {line_no}: {exc}") from exc
        entry, exit_ = parse_location(tokens[1]), parse_location(tokens[2])
        if weight is None:
            edges.append(Edge(edge_id, entry, exit_))
        else:
            edges.append(Edge(edge_id, entry, exit_, weight))
    return edges


def edges_to_edgelist(edges: Iterable[Edge], separator: str = " ") -> List[str]:
    """Render edges as ``id entry exit weight`` lines (inverse of ``edgelist_to_edges``)."""
    return [
        separator.join(str(v) for v in (edge.id, edge.entry, edge.exit, edge.weight))
        for edge in edges
    ]
