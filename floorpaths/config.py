"""Configuration classes for floorpaths components."""

from dataclasses import dataclass

from floorpaths.types.base import SearchStrategy, Weight


@dataclass
class SearchConfig:
    """Defaults applied by the solver and scenario loaders."""

    # Strategy used when the caller or scenario does not pick one
    strategy: SearchStrategy = SearchStrategy.PRUNE_FIRST

    # Weight assigned to edge records that omit one; 1 ranks paths by edge count
    default_weight: Weight = 1


# Global configuration instance
DEFAULT_CONFIG = SearchConfig()
