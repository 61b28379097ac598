"""Scenario file parsing."""

from floorpaths.dsl.loader import load_scenario_yaml

__all__ = ["load_scenario_yaml"]
