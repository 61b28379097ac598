"""floorpaths: minimum-weight path enumeration over implicit-location edge lists.

Locations exist only as the entry/exit values of edges. The package prunes
edges that cannot lie on a start-to-end walk, enumerates every edge-simple
path from start to end, and returns all paths of minimum total weight.

Primary API:
    find_min_weight_paths() - Prune, enumerate and select in one call
    prune(), enumerate_paths(), select_min_weight() - The individual stages
    Edge, Path - Data model
    Scenario - YAML-backed search problem

Example:
    from floorpaths import Edge, find_min_weight_paths

    edges = [Edge(1, 0, 5), Edge(2, 5, 10), Edge(3, 0, 7), Edge(4, 7, 10)]
    result = find_min_weight_paths(edges, start=0, end=10)
    result.weight          # 2
    len(result.paths)      # 2 (tied)
"""

from __future__ import annotations

from floorpaths import cli, logging
from floorpaths._version import __version__
from floorpaths.algorithms.enumerate import (
    Frontier,
    enumerate_paths,
    select_min_weight,
)
from floorpaths.algorithms.prune import PruneReport, prune, prune_once, verify_edges
from floorpaths.config import DEFAULT_CONFIG, SearchConfig
from floorpaths.errors import (
    FloorPathsError,
    InvalidInputError,
    MalformedEdgeError,
    NoPathError,
)
from floorpaths.io import edgelist_to_edges, edges_to_edgelist
from floorpaths.lib.nx import from_networkx, to_networkx
from floorpaths.model.edge import Edge
from floorpaths.model.path import Path
from floorpaths.observer import LoggingObserver, SearchObserver
from floorpaths.scenario import Scenario
from floorpaths.solver import SearchResult, find_min_weight_paths
from floorpaths.types.base import PathState, PruneReason, SearchStrategy

__all__ = [
    # Version
    "__version__",
    # Model
    "Edge",
    "Path",
    "Scenario",
    # Search (primary API)
    "find_min_weight_paths",
    "SearchResult",
    "prune",
    "prune_once",
    "verify_edges",
    "PruneReport",
    "enumerate_paths",
    "select_min_weight",
    "Frontier",
    # Types
    "SearchStrategy",
    "PruneReason",
    "PathState",
    "SearchConfig",
    "DEFAULT_CONFIG",
    # Errors
    "FloorPathsError",
    "InvalidInputError",
    "MalformedEdgeError",
    "NoPathError",
    # Observers
    "SearchObserver",
    "LoggingObserver",
    # I/O and integrations
    "edgelist_to_edges",
    "edges_to_edgelist",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
