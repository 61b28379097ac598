"""Edge and path data model."""

from floorpaths.model.edge import Edge
from floorpaths.model.path import Path

__all__ = ["Edge", "Path"]
