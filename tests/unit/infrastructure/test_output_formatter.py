import json

import pytest

from link_planner.application.services.link_geometry import LinkGeometryService
from link_planner.domain.models.geo import Coordinates, PixelPoint
from link_planner.domain.models.planner import EllipseGeometry
from link_planner.infrastructure.output.formatters import (
    ConsoleOutputFormatter,
    JSONOutputFormatter,
)


@pytest.fixture
def populated_state(planner_state):
    a = planner_state.add_tower(Coordinates(13.027, 77.545))
    b = planner_state.add_tower(Coordinates(13.035, 77.560))
    planner_state.create_link(a.id, b.id)
    return planner_state


@pytest.fixture
def selection(populated_state):
    link = populated_state.get_link("L3")
    a, b = populated_state.link_towers(link)
    geometry = LinkGeometryService().calculate(a, b)
    ellipse = EllipseGeometry(PixelPoint(512.25, 380.5), -28.7, 120.4, 0.89)
    return link, geometry, ellipse


def test_console_lists_towers_and_links(populated_state):
    text = ConsoleOutputFormatter().render(populated_state)
    assert "Towers (2):" in text
    assert "T1 - 5.8 GHz  Lat/Lng: 13.027, 77.545" in text
    assert "Links (1):" in text
    assert "L3: T1 <-> T2  Dist: 1.85 km" in text
    assert "Selected link" not in text


def test_console_selected_link(populated_state, selection):
    text = ConsoleOutputFormatter().render(populated_state, *selection)
    assert "Selected link L3:" in text
    assert "Max Fresnel radius:" in text
    assert "Midpoint: 13.03100° N, 77.55250° E" in text
    assert "rx=120.4 px" in text
    assert "rotate=-28.70°" in text


def test_console_format_result_prints(populated_state, capsys):
    ConsoleOutputFormatter().format_result(populated_state)
    assert "Towers (2):" in capsys.readouterr().out


def test_json_output(populated_state, selection):
    output = json.loads(JSONOutputFormatter().format_result(populated_state, *selection))

    assert [t["id"] for t in output["towers"]] == ["T1", "T2"]
    assert output["towers"][0]["frequency_ghz"] == 5.8
    assert output["links"] == [
        {"id": "L3", "tower_a_id": "T1", "tower_b_id": "T2", "distance_km": 1.85}
    ]
    selected = output["selected_link"]
    assert selected["id"] == "L3"
    assert selected["geometry"]["midpoint"] == {"lat": 13.031, "lon": 77.5525}
    assert selected["geometry"]["fresnel_radius_m"] == pytest.approx(4.9, abs=0.1)
    assert selected["ellipse"]["center"] == {"x": 512.25, "y": 380.5}
    assert selected["ellipse"]["semi_minor_px"] == 0.89


def test_json_without_selection(populated_state):
    output = json.loads(JSONOutputFormatter().format_result(populated_state))
    assert output["selected_link"] is None
