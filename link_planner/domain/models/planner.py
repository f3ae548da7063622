from dataclasses import dataclass, fields
from typing import Any

import numpy as np

from .geo import Coordinates, PixelPoint
from .units import Bearing, Degrees, GigaHertz, Hertz, Meters, Pixels, Wavelength


class BaseModel:
    def to_dict(self):
        """Converts a dataclass instance to a dictionary, handling nested dataclasses,
        NamedTuples, and numpy scalars.
        """
        result = {}
        for f in fields(self):
            value = self._convert_value(getattr(self, f.name))
            result[f.name] = value
        return result

    def _convert_value(self, value: Any) -> Any:
        if hasattr(value, "to_dict"):
            return value.to_dict()
        if isinstance(value, tuple) and hasattr(value, "_asdict"):  # Handle NamedTuple
            return {k: self._convert_value(v) for k, v in value._asdict().items()}
        if isinstance(value, np.generic):
            return value.item()
        if isinstance(value, (list, tuple)):
            return [self._convert_value(v) for v in value]
        return value


@dataclass(slots=True)
class Tower(BaseModel):
    """A radio tower placed on the map."""

    id: str
    position: Coordinates
    frequency_ghz: GigaHertz


@dataclass(slots=True, frozen=True)
class Link(BaseModel):
    """
    Point-to-point link between two distinct towers.

    Holds tower IDs only; towers are owned by the planner state.
    """

    id: str
    tower_a_id: str
    tower_b_id: str


@dataclass(slots=True, frozen=True)
class LinkGeometry(BaseModel):
    """Viewport-independent values of a link."""

    distance_m: Meters
    bearing: Bearing
    midpoint: Coordinates
    frequency_hz: Hertz
    wavelength_m: Wavelength
    fresnel_radius_m: Meters


@dataclass(slots=True, frozen=True)
class EllipseGeometry(BaseModel):
    """Viewport-dependent attributes of the rendered clearance ellipse."""

    center: PixelPoint
    rotation: Degrees
    semi_major_px: Pixels
    semi_minor_px: Pixels

    @property
    def area_px(self) -> float:
        return float(np.pi * self.semi_major_px * self.semi_minor_px)
