import pytest

from link_planner.application.services.link_geometry import LinkGeometryService
from link_planner.domain.models.geo import Coordinates
from link_planner.domain.models.planner import Tower


class TestLinkGeometryService:
    def test_one_kilometer_north(self):
        """A 1 km link due north at 5.8 GHz has r_max ≈ 3.596 m."""
        # 1000 m of latitude on a 6371 km sphere
        dlat = 1000.0 / 6371000.0 * 180.0 / 3.141592653589793
        a = Tower("T1", Coordinates(13.0, 77.5), 5.8)
        b = Tower("T2", Coordinates(13.0 + dlat, 77.5), 5.8)

        geometry = LinkGeometryService().calculate(a, b)

        assert geometry.distance_m == pytest.approx(1000.0)
        assert geometry.bearing == pytest.approx(0.0, abs=1e-9)
        assert geometry.midpoint.lat == pytest.approx(13.0 + dlat / 2)
        assert geometry.midpoint.lon == pytest.approx(77.5)
        assert geometry.frequency_hz == pytest.approx(5.8e9)
        assert geometry.wavelength_m == pytest.approx(0.05172, abs=1e-5)
        assert geometry.fresnel_radius_m == pytest.approx(3.596, rel=1e-3)

    def test_reverse_direction(self):
        a = Tower("T1", Coordinates(13.027, 77.545), 5.8)
        b = Tower("T2", Coordinates(13.035, 77.560), 5.8)
        service = LinkGeometryService()

        forward = service.calculate(a, b)
        backward = service.calculate(b, a)

        assert forward.distance_m == pytest.approx(backward.distance_m)
        assert forward.fresnel_radius_m == pytest.approx(backward.fresnel_radius_m)
        assert (forward.bearing + 180.0) % 360.0 == pytest.approx(
            backward.bearing, abs=0.01
        )

    def test_identical_positions(self):
        a = Tower("T1", Coordinates(13.027, 77.545), 5.8)
        b = Tower("T2", Coordinates(13.027, 77.545), 5.8)

        geometry = LinkGeometryService().calculate(a, b)

        assert geometry.distance_m == 0.0
        assert geometry.bearing == 0.0
        assert geometry.fresnel_radius_m == 0.0
