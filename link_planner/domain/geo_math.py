import math

from link_planner.domain.constants import EARTH_RADIUS_M
from link_planner.domain.models.geo import Coordinates
from link_planner.domain.models.units import Bearing, Degrees, Meters


def distance(coord_a: Coordinates, coord_b: Coordinates) -> Meters:
    """
    Great-circle distance between two coordinates (haversine).

    Uses the mean Earth radius so the value matches what the map engine
    reports for the same pair of points.

    Args:
        coord_a: First point in decimal degrees.
        coord_b: Second point in decimal degrees.

    Returns:
        Distance in meters.
    """
    lat_1 = math.radians(coord_a.lat)
    lat_2 = math.radians(coord_b.lat)
    d_lat = lat_2 - lat_1
    d_lon = math.radians(coord_b.lon - coord_a.lon)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat_1) * math.cos(lat_2) * math.sin(d_lon / 2) ** 2
    )
    # Floating-point noise can push h slightly above 1 for antipodal points
    h = min(1.0, h)
    return Meters(2 * EARTH_RADIUS_M * math.asin(math.sqrt(h)))


def initial_bearing(coord_a: Coordinates, coord_b: Coordinates) -> Bearing:
    """
    Initial bearing (forward azimuth) from point A to point B.

    Bearing is measured in degrees from North (0°) clockwise, in [0, 360).
    The bearing between identical points is undefined; 0 is returned.

    Returns:
        Bearing in decimal degrees.
    """
    if coord_a == coord_b:
        return Bearing(Degrees(0.0))

    lat_1 = math.radians(coord_a.lat)
    lat_2 = math.radians(coord_b.lat)
    d_lon = math.radians(coord_b.lon - coord_a.lon)

    y = math.sin(d_lon) * math.cos(lat_2)
    x = math.cos(lat_1) * math.sin(lat_2) - math.sin(lat_1) * math.cos(
        lat_2
    ) * math.cos(d_lon)

    bearing = (math.degrees(math.atan2(y, x)) + 360.0) % 360.0
    # (-tiny + 360.0) % 360.0 can round to 360.0
    if bearing >= 360.0:
        bearing = 0.0
    return Bearing(Degrees(bearing))


def midpoint(coord_a: Coordinates, coord_b: Coordinates) -> Coordinates:
    """
    Arithmetic mean of latitudes and longitudes.

    Not the spherical midpoint: the error is negligible for typical outdoor
    links (< ~50 km) but grows with span length and near the antimeridian.
    """
    return Coordinates(
        lat=(coord_a.lat + coord_b.lat) / 2,
        lon=(coord_a.lon + coord_b.lon) / 2,
    )
