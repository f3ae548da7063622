# link_planner/domain/models/__init__.py
from .units import Meters, Degrees, Pixels, GigaHertz, Hertz
from .geo import Coordinates, PixelPoint
from .planner import Tower, Link, LinkGeometry, EllipseGeometry

__all__ = [
    "Meters",
    "Degrees",
    "Pixels",
    "GigaHertz",
    "Hertz",
    "Coordinates",
    "PixelPoint",
    "Tower",
    "Link",
    "LinkGeometry",
    "EllipseGeometry",
]
