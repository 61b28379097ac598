"""Fixed-point pruning of edges that cannot lie on a start-to-end walk.

A single pass removes dead ends (the exit is nobody's entry and not the end
location) and unreachable edges (the entry is nobody's exit and not the start
location). Removing an edge can expose new candidates, so ``prune`` repeats
passes until two consecutive passes keep the same number of edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from floorpaths.errors import InvalidInputError
from floorpaths.logging import get_logger
from floorpaths.model.edge import Edge
from floorpaths.observer import SearchObserver
from floorpaths.types.base import Location, PruneReason

logger = get_logger(__name__)


@dataclass(frozen=True)
class PrunePass:
    """Outcome of one pruning pass.

    Attributes:
        edges: Edges kept, in input order.
        removed: ``(edge, reason)`` pairs removed by this pass, in input order.
    """

    edges: Tuple[Edge, ...]
    removed: Tuple[Tuple[Edge, PruneReason], ...] = ()


@dataclass
class PruneReport:
    """Outcome of pruning to a fixed point.

    Attributes:
        edges: Edges left at the fixed point, in input order.
        removed: Every ``(edge, reason)`` removal across all passes.
        passes: Number of single passes run.
    """

    edges: Tuple[Edge, ...]
    removed: List[Tuple[Edge, PruneReason]] = field(default_factory=list)
    passes: int = 0


def verify_edges(edges: Iterable[Edge]) -> None:
    """Ensure no two edges share an id.

    Raises:
        InvalidInputError: On the first repeated id.
    """
    seen: Set[int] = set()
    for edge in edges:
        if edge.id in seen:
            raise InvalidInputError(f"2 edges with identical ID found: {edge.id}")
        seen.add(edge.id)


def prune_once(
    edges: Sequence[Edge],
    start: Location,
    end: Location,
    observer: Optional[SearchObserver] = None,
) -> PrunePass:
    """Run a single pruning pass.

    Args:
        edges: Current edge set.
        start: Start location; edges entering here are never unreachable.
        end: End location; edges exiting here are never dead ends.
        observer: Optional narration hooks.

    Returns:
        PrunePass with the kept edges and the removals.

    Raises:
        InvalidInputError: If two edges share an id.
    """
    verify_edges(edges)

    entries = {edge.entry for edge in edges}
    exits = {edge.exit for edge in edges}

    kept: List[Edge] = []
    removed: List[Tuple[Edge, PruneReason]] = []
    for edge in edges:
        if edge.exit not in entries and edge.exit != end:
            reason = PruneReason.DEAD_END
        elif edge.entry not in exits and edge.entry != start:
            reason = PruneReason.UNREACHABLE
        else:
            kept.append(edge)
            continue
        removed.append((edge, reason))
        if observer is not None:
            observer.on_edge_pruned(edge, reason)

    return PrunePass(edges=tuple(kept), removed=tuple(removed))


def prune(
    edges: Iterable[Edge],
    start: Location,
    end: Location,
    observer: Optional[SearchObserver] = None,
) -> PruneReport:
    """Prune repeatedly until two consecutive passes keep the same edge count.

    The edge count never grows between passes, so the loop terminates.

    Args:
        edges: Input edge set.
        start: Start location.
        end: End location.
        observer: Optional narration hooks.

    Returns:
        PruneReport with the fixed-point edge set. It may be empty; callers
        decide whether that is an error.

    Raises:
        InvalidInputError: If two edges share an id (checked before any pruning).
    """
    current: Tuple[Edge, ...] = tuple(edges)
    report = PruneReport(edges=current)

    while True:
        previous_count = len(current)
        report.passes += 1
        if observer is not None:
            observer.on_prune_pass(report.passes)
        single = prune_once(current, start, end, observer)
        report.removed.extend(single.removed)
        current = single.edges
        if len(current) == previous_count:
            break

    report.edges = current
    logger.debug(
        f"Pruning reached fixed point after {report.passes} pass(es): "
        f"{len(report.removed)} removed, {len(current)} remaining"
    )
    if observer is not None:
        observer.on_prune_complete(current)
    return report
