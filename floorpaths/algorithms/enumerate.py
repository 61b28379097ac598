"""Generational enumeration of edge-simple paths and minimum-weight selection.

Every edge leaving the start location seeds one path. Each generation extends
every growing path by one successor edge (an edge whose entry is the path's
current location and whose id is not on the path yet). Paths that reach the
end location stop growing and are carried forward unchanged.

After a generation is built, each path not at the end is checked:

- its location is no edge's entry: it is a dead end and is dropped;
- it was extended in this generation: it keeps searching;
- otherwise every successor is already on the path: it is exhausted and is
  kept, but no longer searching.

The search stops once no path is searching. Because a growing path gains an
edge per generation and never repeats one, this takes at most
``len(edges) + 1`` generations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import isclose
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from floorpaths.errors import NoPathError
from floorpaths.logging import get_logger
from floorpaths.model.edge import Edge
from floorpaths.model.path import Path
from floorpaths.observer import SearchObserver
from floorpaths.types.base import Location, PathState, Weight

logger = get_logger(__name__)


@dataclass
class Frontier:
    """Final state of a search.

    Attributes:
        paths: Surviving paths in discovery order.
        states: State of each path in ``paths`` (same order).
        dropped: Paths removed as dead ends during the search.
        generations: Number of expansion generations run.
    """

    paths: List[Path] = field(default_factory=list)
    states: List[PathState] = field(default_factory=list)
    dropped: List[Path] = field(default_factory=list)
    generations: int = 0

    @property
    def reached(self) -> List[Path]:
        """Return the paths that ended at the end location."""
        return [
            path
            for path, state in zip(self.paths, self.states)
            if state is PathState.REACHED
        ]

    @property
    def incomplete(self) -> List[Path]:
        """Return leftover paths that never reached the end location."""
        return [
            path
            for path, state in zip(self.paths, self.states)
            if state is not PathState.REACHED
        ]


def build_successor_index(edges: Iterable[Edge]) -> Dict[Location, List[Edge]]:
    """Map each entry location to the edges entering there, in input order."""
    successors: Dict[Location, List[Edge]] = {}
    for edge in edges:
        successors.setdefault(edge.entry, []).append(edge)
    return successors


def _classify(
    path: Path,
    extended: bool,
    end: Location,
    successors: Dict[Location, List[Edge]],
) -> PathState:
    if path.location == end:
        return PathState.REACHED
    if path.location not in successors:
        return PathState.DEAD_END
    if extended:
        return PathState.GROWING
    return PathState.EXHAUSTED


def enumerate_paths(
    edges: Sequence[Edge],
    start: Location,
    end: Location,
    observer: Optional[SearchObserver] = None,
) -> Frontier:
    """Enumerate every edge-simple path from ``start`` towards ``end``.

    Args:
        edges: Edge set to search (usually already pruned).
        start: Start location.
        end: End location.
        observer: Optional narration hooks.

    Returns:
        Frontier with all surviving paths. Paths that reached ``end`` are in
        ``Frontier.reached``; the rest are leftovers kept for diagnostics.

    Raises:
        NoPathError: If ``edges`` is empty or no edge enters at ``start``.
    """
    if not edges:
        raise NoPathError("No edges left to traverse.")

    successors = build_successor_index(edges)
    seeds = successors.get(start, [])
    if not seeds:
        raise NoPathError(f"No edge starts at location {start!r}.")

    if observer is not None:
        for edge in seeds:
            observer.on_seed(edge)

    frontier = Frontier()
    pending: List[Tuple[Path, bool]] = [(Path.start(edge), True) for edge in seeds]

    while True:
        paths: List[Path] = []
        states: List[PathState] = []
        for path, extended in pending:
            state = _classify(path, extended, end, successors)
            if state is PathState.DEAD_END:
                frontier.dropped.append(path)
                if observer is not None:
                    observer.on_path_dropped(path)
                continue
            paths.append(path)
            states.append(state)
        frontier.paths = paths
        frontier.states = states

        if observer is not None:
            observer.on_generation(frontier.generations, paths)
        if PathState.GROWING not in states:
            break

        frontier.generations += 1
        pending = []
        for path, state in zip(paths, states):
            if state is PathState.GROWING:
                children = [
                    path.extend(edge)
                    for edge in successors[path.location]
                    if edge.id not in path
                ]
                if children:
                    pending.extend((child, True) for child in children)
                    continue
            pending.append((path, False))

    logger.debug(
        f"Search from {start!r} to {end!r} finished after {frontier.generations} "
        f"generation(s): {len(frontier.reached)} reached, "
        f"{len(frontier.dropped)} dropped"
    )
    return frontier


def weights_tie(a: Weight, b: Weight) -> bool:
    """Return True if two path weights are equal, allowing float rounding."""
    if isinstance(a, float) or isinstance(b, float):
        return isclose(a, b, abs_tol=1e-12)
    return a == b


def select_min_weight(paths: Iterable[Path], end: Location) -> List[Path]:
    """Return every path ending at ``end`` whose weight equals the minimum.

    Paths not ending at ``end`` are ignored. Ties are all returned, in input
    order, each path once. Float weights within ``abs_tol=1e-12`` of the
    minimum count as ties, so 0.1 + 0.2 ties with 0.3.

    Args:
        paths: Candidate paths in discovery order.
        end: End location.

    Returns:
        Minimum-weight paths; empty if no path ends at ``end``.
    """
    reached = [path for path in paths if path.location == end]
    if not reached:
        return []

    minimum = min(path.weight for path in reached)
    winners: List[Path] = []
    seen: Set[Tuple[int, ...]] = set()
    for path in reached:
        if not weights_tie(path.weight, minimum) or path.id_sequence in seen:
            continue
        seen.add(path.id_sequence)
        winners.append(path)
    return winners
