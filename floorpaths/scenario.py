"""Scenario: an edge set plus start/end locations, loadable from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path as FilePath
from typing import Optional, Tuple, Union

from floorpaths.config import DEFAULT_CONFIG, SearchConfig
from floorpaths.dsl.loader import load_scenario_yaml
from floorpaths.logging import get_logger
from floorpaths.model.edge import Edge
from floorpaths.observer import SearchObserver
from floorpaths.solver import SearchResult, find_min_weight_paths
from floorpaths.types.base import Location, SearchStrategy

logger = get_logger(__name__)


@dataclass
class Scenario:
    """A single search problem.

    Typical usage example:

        scenario = Scenario.from_file("tower.yaml")
        result = scenario.run()
    """

    edges: Tuple[Edge, ...]
    start: Location
    end: Location
    name: str = "scenario"
    strategy: Optional[SearchStrategy] = None
    config: SearchConfig = field(default_factory=lambda: replace(DEFAULT_CONFIG))

    @classmethod
    def from_yaml(cls, yaml_str: str, name: Optional[str] = None) -> Scenario:
        """Build a Scenario from a YAML document.

        Args:
            yaml_str: Scenario YAML text.
            name: Fallback name when the document has none.

        Returns:
            Scenario with validated edges.

        Raises:
            ValueError: On shape errors, unknown keys, unknown strategy names
                or malformed edges (``MalformedEdgeError`` is a ValueError).
            jsonschema.ValidationError: If the document fails schema validation.
        """
        data = load_scenario_yaml(yaml_str)

        config = replace(DEFAULT_CONFIG)
        if "default_weight" in data:
            config.default_weight = data["default_weight"]
        strategy = None
        if data.get("strategy") is not None:
            strategy = SearchStrategy.from_string(data["strategy"])

        edges = tuple(
            Edge.from_dict(entry, config.default_weight) for entry in data["edges"]
        )
        return cls(
            edges=edges,
            start=data["start"],
            end=data["end"],
            name=data.get("name") or name or "scenario",
            strategy=strategy,
            config=config,
        )

    @classmethod
    def from_file(cls, path: Union[str, FilePath]) -> Scenario:
        """Read and parse a scenario YAML file (the file stem is the fallback name)."""
        file_path = FilePath(path)
        text = file_path.read_text(encoding="utf-8")
        return cls.from_yaml(text, name=file_path.stem)

    def run(
        self,
        observer: Optional[SearchObserver] = None,
        strategy: Optional[SearchStrategy] = None,
    ) -> SearchResult:
        """Search this scenario.

        Args:
            observer: Optional narration hooks.
            strategy: Overrides the scenario's strategy when given.

        Returns:
            SearchResult of ``find_min_weight_paths``.
        """
        effective = strategy or self.strategy or self.config.strategy
        logger.debug(
            f"Running scenario '{self.name}' ({len(self.edges)} edges, "
            f"{self.start!r} -> {self.end!r}, strategy={effective.name.lower()})"
        )
        return find_min_weight_paths(
            self.edges,
            self.start,
            self.end,
            strategy=effective,
            observer=observer,
            config=self.config,
        )
