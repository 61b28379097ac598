"""Base aliases and enums for edge pruning and path enumeration."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Hashable, Union

#: Numeric cost of traversing an edge or a whole path.
Weight = Union[int, float]

#: A location is any value that appears as an edge entry or exit.
Location = Hashable


class SearchStrategy(IntEnum):
    """How the solver combines pruning and enumeration."""

    #: Prune the edge set to a fixed point, then enumerate paths on what is left.
    PRUNE_FIRST = 1
    #: Skip upfront pruning; dead ends are dropped by the enumerator as it goes.
    INLINE = 2

    @classmethod
    def from_string(cls, value: str) -> "SearchStrategy":
        """Parse a string into a SearchStrategy enum value.

        Args:
            value: Case-insensitive name (e.g., "prune_first", "INLINE").
                Dashes are accepted in place of underscores.

        Returns:
            The corresponding SearchStrategy member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.strip().upper().replace("-", "_")]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise ValueError(
                f"Invalid strategy '{value}'. Valid values are: {valid}"
            ) from None


class PruneReason(str, Enum):
    """Why the normalizer removed an edge."""

    DEAD_END = "dead end"
    UNREACHABLE = "unreachable"


class PathState(str, Enum):
    """Per-path state during enumeration."""

    GROWING = "growing"
    REACHED = "reached"
    DEAD_END = "dead end"
    #: Every successor edge is already on the path; it can never grow again.
    EXHAUSTED = "exhausted"
