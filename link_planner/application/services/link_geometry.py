from link_planner.domain import fresnel, geo_math
from link_planner.domain.models.planner import LinkGeometry, Tower
from link_planner.domain.models.units import Meters, Wavelength


class LinkGeometryService:
    """
    Computes the viewport-independent geometry of a link between two towers.

    The operating frequency is taken from the first tower. Both towers matched
    when the link was created; a later edit of either one is tolerated and
    not re-validated here.
    """

    def calculate(self, tower_a: Tower, tower_b: Tower) -> LinkGeometry:
        coord_a, coord_b = tower_a.position, tower_b.position

        distance_m = geo_math.distance(coord_a, coord_b)
        frequency_hz = fresnel.ghz_to_hz(tower_a.frequency_ghz)

        return LinkGeometry(
            distance_m=distance_m,
            bearing=geo_math.initial_bearing(coord_a, coord_b),
            midpoint=geo_math.midpoint(coord_a, coord_b),
            frequency_hz=frequency_hz,
            wavelength_m=(
                fresnel.wavelength(frequency_hz)
                if frequency_hz > 0
                else Wavelength(Meters(0.0))
            ),
            fresnel_radius_m=fresnel.max_fresnel_radius(frequency_hz, distance_m),
        )
