from link_planner.domain.interfaces import BaseMapProjection
from link_planner.domain.models.geo import Coordinates, PixelPoint
from link_planner.domain.models.units import Pixels


class ViewportProjector:
    """
    Converts geographic coordinates into overlay-surface pixels.

    The map engine projects into its layer pixel space, whose origin moves
    while the map is panned. The overlay surface does not move with the
    layer pane, so the current pixel origin is subtracted from every
    projected point. Nothing is cached: both terms depend on viewport state.
    """

    def __init__(self, map_projection: BaseMapProjection):
        self.map_projection = map_projection

    def to_viewport_pixel(self, coord: Coordinates) -> PixelPoint:
        layer_point = self.map_projection.project(coord)
        origin = self.map_projection.pixel_origin()
        return PixelPoint(layer_point.x - origin.x, layer_point.y - origin.y)

    def pixel_length(self, coord_a: Coordinates, coord_b: Coordinates) -> Pixels:
        """Projected on-screen length between two coordinates."""
        return self.to_viewport_pixel(coord_a).distance_to(
            self.to_viewport_pixel(coord_b)
        )
