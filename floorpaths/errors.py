"""Exception hierarchy for edge validation and path search.

Duplicate or malformed input and "no path" outcomes are kept as separate
branches so callers (and the CLI exit codes) can tell them apart.
"""

from __future__ import annotations


class FloorPathsError(Exception):
    """Base class for all floorpaths errors."""


class InvalidInputError(FloorPathsError, ValueError):
    """The supplied edge set violates an input invariant (e.g. duplicate ids)."""


class MalformedEdgeError(InvalidInputError):
    """A single edge record carries unusable data (bad id, weight or location)."""


class NoPathError(FloorPathsError, LookupError):
    """No viable edge or path connects the start location to the end location."""
