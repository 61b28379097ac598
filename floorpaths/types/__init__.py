"""Shared type aliases and enums."""

from floorpaths.types.base import (
    Location,
    PathState,
    PruneReason,
    SearchStrategy,
    Weight,
)

__all__ = ["Location", "PathState", "PruneReason", "SearchStrategy", "Weight"]
