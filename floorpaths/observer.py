"""Optional narration hooks for pruning and path search.

Algorithms call these hooks as they work; they never print on their own.
``SearchObserver`` ignores everything, ``LoggingObserver`` narrates through the
package logger.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from floorpaths.logging import get_logger
from floorpaths.model.edge import Edge
from floorpaths.model.path import Path
from floorpaths.types.base import PruneReason

if TYPE_CHECKING:
    from floorpaths.solver import SearchResult

logger = get_logger(__name__)


class SearchObserver:
    """No-op observer. Subclass and override the hooks of interest."""

    def on_edges(self, edges: Sequence[Edge]) -> None:
        """Called once with the validated input edge set."""

    def on_prune_pass(self, pass_number: int) -> None:
        """Called at the start of each single pruning pass."""

    def on_edge_pruned(self, edge: Edge, reason: PruneReason) -> None:
        """Called for every edge a pruning pass removes."""

    def on_prune_complete(self, remaining: Sequence[Edge]) -> None:
        """Called with the edge set left at the pruning fixed point."""

    def on_seed(self, edge: Edge) -> None:
        """Called for every edge that starts at the start location."""

    def on_generation(self, generation: int, frontier: Sequence[Path]) -> None:
        """Called after each frontier generation has been built."""

    def on_path_dropped(self, path: Path) -> None:
        """Called when a path is removed as a dead end during search."""

    def on_result(self, result: "SearchResult") -> None:
        """Called with the final search result."""


class LoggingObserver(SearchObserver):
    """Narrate progress through the floorpaths logger.

    Args:
        level: Level used for the narration; per-generation detail is always
            logged at DEBUG.
    """

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def on_edges(self, edges: Sequence[Edge]) -> None:
        logger.log(self.level, f"Current edges ({len(edges)}):")
        for edge in edges:
            logger.log(self.level, f"  {edge}")

    def on_prune_pass(self, pass_number: int) -> None:
        logger.debug(f"Pruning pass {pass_number}")

    def on_edge_pruned(self, edge: Edge, reason: PruneReason) -> None:
        logger.log(self.level, f"pruning {reason.value + ':':<13} {edge}")

    def on_prune_complete(self, remaining: Sequence[Edge]) -> None:
        logger.log(self.level, f"Remaining edges ({len(remaining)}):")
        for edge in remaining:
            logger.log(self.level, f"  {edge}")

    def on_seed(self, edge: Edge) -> None:
        logger.log(self.level, f"We can start at {edge}")

    def on_generation(self, generation: int, frontier: Sequence[Path]) -> None:
        logger.debug(f"Generation {generation}: {len(frontier)} path(s) in frontier")
        for path in frontier:
            logger.debug(f"  {path}")

    def on_path_dropped(self, path: Path) -> None:
        logger.log(self.level, f"dropping dead-end path: {path}")

    def on_result(self, result: "SearchResult") -> None:
        logger.log(
            self.level,
            f"{len(result.paths)} minimum-weight path(s) from {result.start} "
            f"to {result.end} with weight {result.weight}",
        )
        for path in result.paths:
            logger.log(self.level, f"  {path}")
