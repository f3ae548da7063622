"""Output formatting services for tower/link listings and the selected link."""

import json
from typing import Protocol

from link_planner.application.services.coordinate_parser import CoordinateParser
from link_planner.application.state import PlannerState
from link_planner.domain.models.planner import EllipseGeometry, Link, LinkGeometry


def _format_dict_floats(d, precision):
    for k, v in d.items():
        if isinstance(v, float):
            d[k] = round(v, precision)
        elif isinstance(v, dict):
            _format_dict_floats(v, precision)
    return d


def _build_output_dict(
    state: PlannerState,
    selected_link: Link | None = None,
    link_geometry: LinkGeometry | None = None,
    ellipse_geometry: EllipseGeometry | None = None,
) -> dict:
    output_dict: dict = {
        "towers": [
            {
                "id": tower.id,
                "lat": tower.position.lat,
                "lon": tower.position.lon,
                "frequency_ghz": tower.frequency_ghz,
            }
            for tower in state.towers.values()
        ],
        "links": [
            {
                "id": link.id,
                "tower_a_id": link.tower_a_id,
                "tower_b_id": link.tower_b_id,
                "distance_km": round(state.link_distance(link) / 1000, 2),
            }
            for link in state.links.values()
        ],
        "selected_link": None,
    }

    if selected_link is not None:
        selected = {"id": selected_link.id}
        if link_geometry is not None:
            selected["geometry"] = _format_dict_floats(link_geometry.to_dict(), 4)
        if ellipse_geometry is not None:
            selected["ellipse"] = _format_dict_floats(ellipse_geometry.to_dict(), 2)
        output_dict["selected_link"] = selected

    return output_dict


class OutputFormatter(Protocol):
    """Protocol for output formatters"""

    def format_result(
        self,
        state: PlannerState,
        selected_link: Link | None = None,
        link_geometry: LinkGeometry | None = None,
        ellipse_geometry: EllipseGeometry | None = None,
    ) -> str | None:
        """Format and output planner state"""
        ...


class ConsoleOutputFormatter:
    """Formats planner state for console display"""

    def format_result(
        self,
        state: PlannerState,
        selected_link: Link | None = None,
        link_geometry: LinkGeometry | None = None,
        ellipse_geometry: EllipseGeometry | None = None,
    ) -> None:
        print(self.render(state, selected_link, link_geometry, ellipse_geometry))

    def render(
        self,
        state: PlannerState,
        selected_link: Link | None = None,
        link_geometry: LinkGeometry | None = None,
        ellipse_geometry: EllipseGeometry | None = None,
    ) -> str:
        lines = [f"Towers ({len(state.towers)}):"]
        for tower in state.towers.values():
            lines.append(
                f"  {tower.id} - {tower.frequency_ghz} GHz  "
                f"Lat/Lng: {tower.position.lat:.3f}, {tower.position.lon:.3f}"
            )

        lines.append(f"Links ({len(state.links)}):")
        for link in state.links.values():
            distance_km = state.link_distance(link) / 1000
            lines.append(
                f"  {link.id}: {link.tower_a_id} <-> {link.tower_b_id}  "
                f"Dist: {distance_km:.2f} km"
            )

        if selected_link is not None and link_geometry is not None:
            lines += [
                f"Selected link {selected_link.id}:",
                f"  Distance: {link_geometry.distance_m:.1f} m",
                f"  Bearing: {link_geometry.bearing:.2f}°",
                f"  Midpoint: {CoordinateParser.format(link_geometry.midpoint, precision=5)}",
                f"  Wavelength: {link_geometry.wavelength_m:.5f} m",
                f"  Max Fresnel radius: {link_geometry.fresnel_radius_m:.3f} m",
            ]
            if ellipse_geometry is not None:
                lines.append(
                    f"  Ellipse: center=({ellipse_geometry.center.x:.1f}, "
                    f"{ellipse_geometry.center.y:.1f}) px, "
                    f"rx={ellipse_geometry.semi_major_px:.1f} px, "
                    f"ry={ellipse_geometry.semi_minor_px:.2f} px, "
                    f"rotate={ellipse_geometry.rotation:.2f}°"
                )
        return "\n".join(lines)


class JSONOutputFormatter:
    """Formats planner state as JSON."""

    def format_result(
        self,
        state: PlannerState,
        selected_link: Link | None = None,
        link_geometry: LinkGeometry | None = None,
        ellipse_geometry: EllipseGeometry | None = None,
    ) -> str:
        output_dict = _build_output_dict(
            state, selected_link, link_geometry, ellipse_geometry
        )
        return json.dumps(output_dict, indent=2, ensure_ascii=False)
