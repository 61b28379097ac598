"""YAML loader + schema validation for scenario files.

Provides a single entrypoint to parse a YAML string, run early shape checks
with readable messages, validate against the packaged JSON schema, and return
a canonical dictionary for ``Scenario`` to consume.
"""

from __future__ import annotations

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
import yaml

RECOGNIZED_KEYS = {
    "name",
    "description",
    "start",
    "end",
    "strategy",
    "default_weight",
    "edges",
}


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("floorpaths.schemas")
        .joinpath("scenario.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_scenario_yaml(yaml_str: str) -> Dict[str, Any]:
    """Load, check and validate a scenario YAML string.

    Args:
        yaml_str: YAML document text.

    Returns:
        The scenario as a dictionary.

    Raises:
        ValueError: If the document is not a mapping, has unknown top-level
            keys, or has a malformed ``edges`` section.
        jsonschema.ValidationError: If the document does not match the schema.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    extra = set(data.keys()) - RECOGNIZED_KEYS
    if extra:
        raise ValueError(
            f"Unrecognized top-level key(s) in scenario: {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(RECOGNIZED_KEYS)}"
        )

    for key in ("start", "end", "edges"):
        if key not in data:
            raise ValueError(f"Scenario is missing required key '{key}'")

    # Early shape checks give better messages than schema validation
    if not isinstance(data["edges"], list):
        raise ValueError("'edges' must be a list")
    for entry in data["edges"]:
        if not isinstance(entry, dict):
            raise ValueError("Each edge definition must be a mapping")
        missing = [k for k in ("id", "entry", "exit") if k not in entry]
        if missing:
            raise ValueError(
                f"Edge definition {entry!r} must include {', '.join(missing)}"
            )

    jsonschema.validate(data, _load_schema())
    return data
