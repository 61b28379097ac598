"""Persistent path of edges with an incrementally tracked weight.

A ``Path`` stores only its last edge and a reference to the path it was
extended from. Branching a path into several successors therefore shares the
common prefix instead of copying it. The full edge sequence and the id set are
materialized on first access and cached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Dict, FrozenSet, Iterator, Optional, Tuple

from floorpaths.model.edge import Edge
from floorpaths.types.base import Location, Weight


@dataclass(frozen=True, eq=False)
class Path:
    """An ordered, edge-simple walk through the graph.

    Create paths with ``Path.start(edge)`` and grow them with ``extend``;
    paths are never shortened.

    Attributes:
        last_edge: Most recently appended edge.
        weight: Sum of all edge weights on the path.
        parent: Path this one was extended from, or None for a singleton.
    """

    last_edge: Edge
    weight: Weight
    parent: Optional[Path] = field(default=None, repr=False)
    _length: int = field(default=1, repr=False)

    @classmethod
    def start(cls, edge: Edge) -> Path:
        """Return a singleton path consisting of ``edge``."""
        return cls(last_edge=edge, weight=edge.weight)

    def extend(self, edge: Edge) -> Path:
        """Return a new path with ``edge`` appended.

        Args:
            edge: Edge to append.

        Returns:
            A new Path sharing this path as its prefix.

        Raises:
            ValueError: If an edge with the same id is already on the path.
        """
        if edge.id in self:
            raise ValueError(f"Edge {edge.id} is already on the path.")
        return Path(
            last_edge=edge,
            weight=self.weight + edge.weight,
            parent=self,
            _length=self._length + 1,
        )

    @property
    def location(self) -> Location:
        """Return the frontier location (exit of the last edge)."""
        return self.last_edge.exit

    @property
    def first_edge(self) -> Edge:
        """Return the edge the path started from."""
        return self.edges[0]

    @cached_property
    def edges(self) -> Tuple[Edge, ...]:
        """Return the edges in traversal order."""
        reversed_edges = []
        node: Optional[Path] = self
        while node is not None:
            reversed_edges.append(node.last_edge)
            node = node.parent
        return tuple(reversed(reversed_edges))

    @cached_property
    def edge_ids(self) -> FrozenSet[int]:
        """Return the ids of all edges on the path."""
        return frozenset(edge.id for edge in self.edges)

    def __contains__(self, edge_id: object) -> bool:
        node: Optional[Path] = self
        while node is not None:
            if node.last_edge.id == edge_id:
                return True
            node = node.parent
        return False

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def __len__(self) -> int:
        return self._length

    def __lt__(self, other: Any) -> bool:
        """Order paths by weight."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.weight < other.weight

    def __eq__(self, other: Any) -> bool:
        """Paths are equal when they traverse the same edge ids with the same weight."""
        if not isinstance(other, Path):
            return NotImplemented
        if len(self) != len(other):
            return False
        return self.id_sequence == other.id_sequence and self.weight == other.weight

    def __hash__(self) -> int:
        return hash((self.id_sequence, self.weight))

    @property
    def id_sequence(self) -> Tuple[int, ...]:
        """Return the edge ids in traversal order."""
        return tuple(edge.id for edge in self.edges)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly mapping of this path."""
        return {
            "edges": [edge.to_dict() for edge in self.edges],
            "edge_ids": list(self.id_sequence),
            "weight": self.weight,
        }

    def __str__(self) -> str:
        return " -> ".join(str(edge.id) for edge in self.edges) + f" (w={self.weight})"
