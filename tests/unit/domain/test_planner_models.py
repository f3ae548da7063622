import math

import numpy as np
import pytest

from link_planner.domain.exceptions import FrequencyMismatchError, TowerNotFoundError
from link_planner.domain.models import (
    Coordinates,
    EllipseGeometry,
    Link,
    LinkGeometry,
    PixelPoint,
    Tower,
)


class TestPixelPoint:
    def test_subtraction(self):
        assert PixelPoint(10.0, 5.0) - PixelPoint(3.0, 7.0) == PixelPoint(7.0, -2.0)

    def test_addition(self):
        assert PixelPoint(1.0, 2.0) + PixelPoint(3.0, 4.0) == PixelPoint(4.0, 6.0)

    def test_distance_to(self):
        assert PixelPoint(0.0, 0.0).distance_to(PixelPoint(3.0, 4.0)) == 5.0


def test_link_is_immutable():
    link = Link("L3", "T1", "T2")
    with pytest.raises(AttributeError):
        link.tower_a_id = "T9"


def test_link_geometry_to_dict():
    geometry = LinkGeometry(
        distance_m=1000.0,
        bearing=45.0,
        midpoint=Coordinates(13.0, 77.0),
        frequency_hz=5.8e9,
        wavelength_m=0.0517,
        fresnel_radius_m=np.float64(3.597),
    )
    data = geometry.to_dict()
    assert data["midpoint"] == {"lat": 13.0, "lon": 77.0}
    assert type(data["fresnel_radius_m"]) is float


def test_ellipse_area():
    ellipse = EllipseGeometry(PixelPoint(0, 0), 0.0, 10.0, 2.0)
    assert ellipse.area_px == pytest.approx(math.pi * 20.0)
    assert EllipseGeometry(PixelPoint(0, 0), -90.0, 0.0, 0.0).area_px == 0.0


def test_frequency_mismatch_message():
    a = Tower("T1", Coordinates(13.0, 77.0), 5.8)
    b = Tower("T2", Coordinates(13.1, 77.1), 2.4)
    error = FrequencyMismatchError(a, b)
    assert "T1: 5.8 GHz vs T2: 2.4 GHz" in str(error)
    assert error.tower_a is a and error.tower_b is b


def test_not_found_errors_are_key_errors():
    with pytest.raises(KeyError):
        raise TowerNotFoundError("Unknown tower: T7")
