import pytest

from link_planner.application.services.coordinate_parser import CoordinateParser
from link_planner.domain.exceptions import ValidationError
from link_planner.domain.models.geo import Coordinates


@pytest.fixture
def parser():
    return CoordinateParser()


@pytest.mark.parametrize(
    "text, expected",
    [
        ("13.027 77.545", (13.027, 77.545)),
        ("13.027, 77.545", (13.027, 77.545)),
        ("-33.86 151.21", (-33.86, 151.21)),
        ("13.027N 77.545E", (13.027, 77.545)),
        ("33.86 S 151.21 E", (-33.86, 151.21)),
        ("40.7128N 74.0060W", (40.7128, -74.006)),
        ("55°45'25.4\"N 37°37'6.2\"E", (55.757056, 37.618389)),
        ("55 45 25.4 37 37 6.2", (55.757056, 37.618389)),
        ("13.0N 77.5", (13.0, 77.5)),
    ],
)
def test_parse_formats(parser, text, expected):
    coord = parser.parse(text)
    assert isinstance(coord, Coordinates)
    assert coord.lat == pytest.approx(expected[0], abs=1e-6)
    assert coord.lon == pytest.approx(expected[1], abs=1e-6)


def test_parse_many(parser):
    coords = parser.parse_many("13.027 77.545; 13.035 77.560\n13.040 77.530")
    assert coords == [
        Coordinates(13.027, 77.545),
        Coordinates(13.035, 77.560),
        Coordinates(13.040, 77.530),
    ]


@pytest.mark.parametrize("text", ["13.027", "1 2 3", "N 77.5"])
def test_invalid_input(parser, text):
    with pytest.raises(ValueError):
        parser.parse(text)


def test_out_of_range_minutes(parser):
    with pytest.raises(ValueError, match="minutes or seconds out of range"):
        parser.parse("55 75 0 N 37 0 0 E")


def test_out_of_range_latitude(parser):
    with pytest.raises(ValidationError, match="Invalid latitude"):
        parser.parse("95.0 10.0")


def test_empty_input(parser):
    with pytest.raises(ValueError, match="empty"):
        parser.parse_many("  ;  ")


def test_format():
    assert (
        CoordinateParser.format(Coordinates(-33.86, 151.21), precision=2)
        == "33.86° S, 151.21° E"
    )
