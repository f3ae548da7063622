# link_planner/application/services/__init__.py
from .projector import ViewportProjector
from .link_geometry import LinkGeometryService
from .coordinate_parser import CoordinateParser

__all__ = [
    "ViewportProjector",
    "LinkGeometryService",
    "CoordinateParser",
]
