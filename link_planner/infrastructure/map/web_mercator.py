"""Spherical Web-Mercator viewport (the map engine the overlay is drawn on)."""

import numpy as np

from link_planner.domain.constants import (
    DEFAULT_MAP_CENTER,
    DEFAULT_MAP_ZOOM,
    DEFAULT_VIEWPORT_SIZE,
    MAX_ZOOM,
    MERCATOR_MAX_LATITUDE,
    MERCATOR_RADIUS_M,
    MIN_ZOOM,
    TILE_SIZE_PX,
)
from link_planner.domain.interfaces import BaseMapProjection, ViewportCallback
from link_planner.domain.models.geo import Coordinates, PixelPoint
from link_planner.domain.validators import validate_coordinates
from link_planner.logging_config import get_logger

logger = get_logger(__name__)


class WebMercatorViewport(BaseMapProjection):
    """
    EPSG:3857 viewport with the same pixel conventions as slippy-map tiles.

    World pixel space at zoom z is 256 * 2**z pixels wide with (0, 0) at the
    north-west corner. `project` returns world pixels, `pixel_origin` the
    world pixel under the viewport's top-left corner. Longitudes are
    projected onto the copy of the world nearest the view center, so points
    across the antimeridian stay next to the view.

    Every pan/zoom call is one completed gesture and notifies listeners once.
    """

    def __init__(
        self,
        center: Coordinates = Coordinates(*DEFAULT_MAP_CENTER),
        zoom: float = DEFAULT_MAP_ZOOM,
        size: tuple[int, int] = DEFAULT_VIEWPORT_SIZE,
    ):
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {size}")
        validate_coordinates(center)

        self.size = (int(width), int(height))
        self._center = center
        self._zoom = self._clamp_zoom(zoom)
        self._listeners: list[ViewportCallback] = []

    @property
    def center(self) -> Coordinates:
        return self._center

    @property
    def zoom(self) -> float:
        return self._zoom

    def scale(self) -> float:
        """World size in pixels at the current zoom."""
        return TILE_SIZE_PX * 2.0**self._zoom

    def project(self, coord: Coordinates) -> PixelPoint:
        lat = np.clip(coord.lat, -MERCATOR_MAX_LATITUDE, MERCATOR_MAX_LATITUDE)
        x = MERCATOR_RADIUS_M * np.radians(self._nearest_lon(coord.lon))
        y = MERCATOR_RADIUS_M * np.log(np.tan(np.pi / 4 + np.radians(lat) / 2))

        # Affine transform from projected meters to world pixels
        k = 0.5 / (np.pi * MERCATOR_RADIUS_M)
        scale = self.scale()
        return PixelPoint(
            float(scale * (k * x + 0.5)),
            float(scale * (-k * y + 0.5)),
        )

    def unproject(self, point: PixelPoint) -> Coordinates:
        scale = self.scale()
        k = 0.5 / (np.pi * MERCATOR_RADIUS_M)
        x = (point.x / scale - 0.5) / k
        y = (0.5 - point.y / scale) / k

        lon = np.degrees(x / MERCATOR_RADIUS_M)
        lat = np.degrees(2 * np.arctan(np.exp(y / MERCATOR_RADIUS_M)) - np.pi / 2)
        return Coordinates(lat=float(lat), lon=float(lon))

    def pixel_origin(self) -> PixelPoint:
        width, height = self.size
        center = self.project(self._center)
        return PixelPoint(center.x - width / 2, center.y - height / 2)

    def unproject_viewport_pixel(self, point: PixelPoint) -> Coordinates:
        """Geographic position under a viewport pixel, e.g. a click."""
        return self._wrap(self.unproject(point + self.pixel_origin()))

    def on_viewport_settled(self, callback: ViewportCallback) -> None:
        self._listeners.append(callback)

    def pan_by(self, dx: float, dy: float) -> None:
        """Move the view by a pixel offset (positive dx pans east, dy south)."""
        center = self.project(self._center)
        new_center = self.unproject(PixelPoint(center.x + dx, center.y + dy))
        self._center = self._wrap(new_center)
        self._settled()

    def set_zoom(self, zoom: float) -> None:
        self._zoom = self._clamp_zoom(zoom)
        self._settled()

    def set_view(self, center: Coordinates, zoom: float) -> None:
        validate_coordinates(center)
        self._center = center
        self._zoom = self._clamp_zoom(zoom)
        self._settled()

    def _settled(self) -> None:
        logger.debug(f"Viewport settled: center={self._center}, zoom={self._zoom}")
        for callback in list(self._listeners):
            callback()

    def _nearest_lon(self, lon: float) -> float:
        offset = lon - self._center.lon
        if abs(offset) > 180.0:
            lon -= 360.0 * round(offset / 360.0)
        return lon

    @staticmethod
    def _clamp_zoom(zoom: float) -> float:
        return float(np.clip(zoom, MIN_ZOOM, MAX_ZOOM))

    @staticmethod
    def _wrap(coord: Coordinates) -> Coordinates:
        lat = float(np.clip(coord.lat, -MERCATOR_MAX_LATITUDE, MERCATOR_MAX_LATITUDE))
        lon = ((coord.lon + 180.0) % 360.0) - 180.0
        return Coordinates(lat=lat, lon=lon)
