import math
from typing import NamedTuple

from .units import Pixels


class Coordinates(NamedTuple):
    lat: float
    lon: float


class PixelPoint(NamedTuple):
    """A point in some pixel space (layer, world or viewport)."""

    x: float
    y: float

    def __sub__(self, other: "PixelPoint") -> "PixelPoint":  # type: ignore[override]
        return PixelPoint(self.x - other.x, self.y - other.y)

    def __add__(self, other: "PixelPoint") -> "PixelPoint":  # type: ignore[override]
        return PixelPoint(self.x + other.x, self.y + other.y)

    def distance_to(self, other: "PixelPoint") -> Pixels:
        return Pixels(math.hypot(other.x - self.x, other.y - self.y))
