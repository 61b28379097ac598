"""Immutable directed edge record.

Edges are the only graph entity: locations exist only as the ``entry`` and
``exit`` values edges carry. Two edges are adjacent when the first one's
``exit`` equals the second one's ``entry``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Mapping, Optional

from floorpaths.errors import MalformedEdgeError
from floorpaths.types.base import Location, Weight


@dataclass(frozen=True)
class Edge:
    """A directed, weighted, uniquely identified connection between locations.

    Attributes:
        id: Integer identifier, unique within an edge set.
        entry: Location at which the edge may be entered.
        exit: Location at which the edge terminates.
        weight: Non-negative traversal cost (int or float).
    """

    id: int
    entry: Location
    exit: Location
    weight: Weight = 1

    def __post_init__(self) -> None:
        """Reject malformed edge data.

        Raises:
            MalformedEdgeError: If the id is not an integer, a location is
                unhashable, or the weight is not a finite non-negative number.
        """
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise MalformedEdgeError(
                f"Edge id must be an integer, got {type(self.id).__name__}: {self.id!r}"
            )
        for side in ("entry", "exit"):
            value = getattr(self, side)
            try:
                hash(value)
            except TypeError:
                raise MalformedEdgeError(
                    f"Edge {self.id}: {side} location must be hashable, got {value!r}"
                ) from None
        if isinstance(self.weight, bool) or not isinstance(self.weight, Real):
            raise MalformedEdgeError(
                f"Edge {self.id}: weight must be numeric, got {self.weight!r}"
            )
        if not math.isfinite(self.weight):
            raise MalformedEdgeError(
                f"Edge {self.id}: weight must be finite, got {self.weight!r}"
            )
        if self.weight < 0:
            raise MalformedEdgeError(
                f"Edge {self.id}: weight must be non-negative, got {self.weight!r}"
            )

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], default_weight: Optional[Weight] = None
    ) -> Edge:
        """Build an Edge from a mapping with ``id``, ``entry``, ``exit`` and optional ``weight``.

        Args:
            data: Source mapping.
            default_weight: Weight used when the mapping has none. Falls back
                to the dataclass default.

        Returns:
            A validated Edge.

        Raises:
            MalformedEdgeError: If a required key is missing or a value is invalid.
        """
        missing = [key for key in ("id", "entry", "exit") if key not in data]
        if missing:
            raise MalformedEdgeError(
                f"Edge definition {dict(data)!r} is missing: {', '.join(missing)}"
            )
        extra = set(data) - {"id", "entry", "exit", "weight"}
        if extra:
            raise MalformedEdgeError(
                f"Unrecognized key(s) in edge {data['id']!r}: {', '.join(sorted(extra))}"
            )
        if "weight" in data:
            return cls(data["id"], data["entry"], data["exit"], data["weight"])
        if default_weight is not None:
            return cls(data["id"], data["entry"], data["exit"], default_weight)
        return cls(data["id"], data["entry"], data["exit"])

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly mapping of this edge."""
        return {
            "id": self.id,
            "entry": self.entry,
            "exit": self.exit,
            "weight": self.weight,
        }

    def __str__(self) -> str:
        return f"edge {self.id}: ({self.entry} -> {self.exit}) w={self.weight}"
