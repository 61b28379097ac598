"""Pruning and path enumeration algorithms."""

from floorpaths.algorithms.enumerate import (
    Frontier,
    enumerate_paths,
    select_min_weight,
    weights_tie,
)
from floorpaths.algorithms.prune import (
    PrunePass,
    PruneReport,
    prune,
    prune_once,
    verify_edges,
)

__all__ = [
    "Frontier",
    "PrunePass",
    "PruneReport",
    "enumerate_paths",
    "prune",
    "prune_once",
    "select_min_weight",
    "verify_edges",
    "weights_tie",
]
