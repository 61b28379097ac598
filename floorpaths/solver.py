"""Minimum-weight path search over an edge list.

``find_min_weight_paths`` is the main entry point. It validates the input,
optionally prunes it to a fixed point, enumerates paths and returns a
``SearchResult``. Invalid input raises ``InvalidInputError``; a graph without
any start-to-end path raises ``NoPathError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from floorpaths.algorithms.enumerate import enumerate_paths, select_min_weight
from floorpaths.algorithms.prune import prune, verify_edges
from floorpaths.config import DEFAULT_CONFIG, SearchConfig
from floorpaths.errors import NoPathError
from floorpaths.logging import get_logger
from floorpaths.model.edge import Edge
from floorpaths.model.path import Path
from floorpaths.observer import SearchObserver
from floorpaths.types.base import Location, PruneReason, SearchStrategy, Weight

logger = get_logger(__name__)

EdgeLike = Union[Edge, Mapping[str, Any]]


@dataclass
class SearchResult:
    """Outcome of a successful search.

    Attributes:
        start: Start location.
        end: End location.
        strategy: Strategy used.
        paths: Minimum-weight paths, in discovery order.
        weight: Weight shared by all ``paths``.
        reached: Every discovered path that reached ``end``.
        pruned: Edges removed before the search, with the reason.
        remaining_edges: Edge set the enumerator searched.
        generations: Number of frontier generations run.
    """

    start: Location
    end: Location
    strategy: SearchStrategy
    paths: List[Path]
    weight: Weight
    reached: List[Path] = field(default_factory=list)
    pruned: List[Tuple[Edge, PruneReason]] = field(default_factory=list)
    remaining_edges: Tuple[Edge, ...] = ()
    generations: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly mapping of the result."""
        return {
            "start": self.start,
            "end": self.end,
            "strategy": self.strategy.name.lower(),
            "weight": self.weight,
            "paths": [path.to_dict() for path in self.paths],
            "reached": [path.to_dict() for path in self.reached],
            "pruned": [
                {"edge": edge.to_dict(), "reason": reason.value}
                for edge, reason in self.pruned
            ],
            "remaining_edges": [edge.to_dict() for edge in self.remaining_edges],
            "generations": self.generations,
        }


def coerce_edges(
    edges: Iterable[EdgeLike], default_weight: Optional[Weight] = None
) -> Tuple[Edge, ...]:
    """Return ``edges`` as a tuple of Edge, building any mappings with ``Edge.from_dict``."""
    return tuple(
        edge if isinstance(edge, Edge) else Edge.from_dict(edge, default_weight)
        for edge in edges
    )


def find_min_weight_paths(
    edges: Iterable[EdgeLike],
    start: Location,
    end: Location,
    strategy: Optional[SearchStrategy] = None,
    observer: Optional[SearchObserver] = None,
    config: Optional[SearchConfig] = None,
) -> SearchResult:
    """Find all minimum-weight edge-simple paths from ``start`` to ``end``.

    Args:
        edges: Edge records, as Edge instances or mappings.
        start: Start location.
        end: End location.
        strategy: PRUNE_FIRST or INLINE. Defaults to ``config.strategy``.
        observer: Optional narration hooks.
        config: Search defaults. Defaults to ``DEFAULT_CONFIG``.

    Returns:
        SearchResult with every tied minimum-weight path.

    Raises:
        InvalidInputError: If two edges share an id or an edge is malformed.
        NoPathError: If no path connects ``start`` to ``end``.
    """
    config = config or DEFAULT_CONFIG
    strategy = strategy if strategy is not None else config.strategy
    edge_set = coerce_edges(edges, config.default_weight)

    verify_edges(edge_set)
    if observer is not None:
        observer.on_edges(edge_set)

    pruned: List[Tuple[Edge, PruneReason]] = []
    if strategy is SearchStrategy.PRUNE_FIRST:
        report = prune(edge_set, start, end, observer)
        pruned = report.removed
        searched = report.edges
    else:
        searched = edge_set

    if not searched:
        raise NoPathError("No edges left to traverse.")

    frontier = enumerate_paths(searched, start, end, observer)
    winners = select_min_weight(frontier.paths, end)
    if not winners:
        raise NoPathError(f"No path leads from {start!r} to {end!r}.")

    result = SearchResult(
        start=start,
        end=end,
        strategy=strategy,
        paths=winners,
        weight=min(path.weight for path in winners),
        reached=frontier.reached,
        pruned=pruned,
        remaining_edges=searched,
        generations=frontier.generations,
    )
    logger.debug(
        f"Found {len(winners)} minimum-weight path(s) of weight {result.weight} "
        f"among {len(result.reached)} complete path(s)"
    )
    if observer is not None:
        observer.on_result(result)
    return result
