"""Link visualization controller (keeps the Fresnel ellipse in sync with the map)"""

from typing import Optional

from link_planner.application.services.link_geometry import LinkGeometryService
from link_planner.application.services.projector import ViewportProjector
from link_planner.application.state import PlannerState
from link_planner.domain.interfaces import BaseEllipseRenderer, BaseLinkStyler
from link_planner.domain.models.planner import EllipseGeometry, Link, LinkGeometry
from link_planner.domain.models.units import Degrees, Pixels
from link_planner.logging_config import get_logger

logger = get_logger(__name__)


def ellipse_rotation(bearing: float) -> Degrees:
    """
    Screen rotation for an ellipse whose unrotated major axis is horizontal.

    Bearing 90 (east) needs no rotation; bearing 0 (north) needs -90 on a
    y-down surface so the major axis points up.
    """
    return Degrees(bearing - 90.0)


class LinkVisualizationController:
    """
    Orchestrates the render pipeline for the selected link.

    States: Idle (no selection) and Selected(link). Selecting another link
    moves the single ellipse to it. A viewport change re-runs the whole
    pipeline without changing state.

    All dependencies are injected; the controller never touches the map
    engine except through the projector.
    """

    def __init__(
        self,
        state: PlannerState,
        projector: ViewportProjector,
        renderer: BaseEllipseRenderer,
        link_styler: Optional[BaseLinkStyler] = None,
        geometry_service: Optional[LinkGeometryService] = None,
    ):
        self.planner_state = state
        self.projector = projector
        self.renderer = renderer
        self.link_styler = link_styler
        self.geometry_service = geometry_service or LinkGeometryService()

        self._selected_link: Link | None = None
        self._link_geometry: LinkGeometry | None = None
        self._ellipse_geometry: EllipseGeometry | None = None

    @property
    def selected_link(self) -> Link | None:
        return self._selected_link

    @property
    def link_geometry(self) -> LinkGeometry | None:
        """Geometry of the last successful render."""
        return self._link_geometry

    @property
    def ellipse_geometry(self) -> EllipseGeometry | None:
        return self._ellipse_geometry

    def select_link(self, link: Link) -> None:
        previous = self._selected_link
        if previous is not None and previous.id != link.id and self.link_styler:
            self.link_styler.set_link_selected(previous.id, False)

        self._selected_link = link
        if self.link_styler:
            self.link_styler.set_link_selected(link.id, True)

        logger.debug(f"Selected link {link.id}")
        self._render()

    def clear_selection(self) -> None:
        if self._selected_link is None:
            return
        if self.link_styler:
            self.link_styler.set_link_selected(self._selected_link.id, False)
        self._selected_link = None
        self._link_geometry = None
        self._ellipse_geometry = None
        self.renderer.hide()

    def on_viewport_changed(self) -> None:
        if self._selected_link is not None:
            self._render()

    def _render(self) -> None:
        link = self._selected_link
        if link is None:
            return

        tower_a, tower_b = self.planner_state.link_towers(link)
        if tower_a is None or tower_b is None:
            logger.debug(f"Link {link.id} references a missing tower, deselecting")
            self.clear_selection()
            return

        geometry = self.geometry_service.calculate(tower_a, tower_b)

        center = self.projector.to_viewport_pixel(geometry.midpoint)
        length_px = self.projector.pixel_length(tower_a.position, tower_b.position)

        # Scale from the projected endpoints, valid at any zoom level.
        # Degenerate links collapse to a zero-area ellipse.
        if geometry.distance_m > 0 and length_px > 0:
            pixels_per_meter = length_px / geometry.distance_m
        else:
            pixels_per_meter = 0.0

        ellipse = EllipseGeometry(
            center=center,
            rotation=ellipse_rotation(geometry.bearing),
            semi_major_px=Pixels(length_px / 2),
            semi_minor_px=Pixels(geometry.fresnel_radius_m * pixels_per_meter),
        )

        self.renderer.render_ellipse(
            ellipse.center,
            ellipse.rotation,
            ellipse.semi_major_px,
            ellipse.semi_minor_px,
        )
        self._link_geometry = geometry
        self._ellipse_geometry = ellipse
        logger.debug(
            "Rendered link %s: %.1f m, bearing %.2f°, r=%.3f m -> %s",
            link.id,
            geometry.distance_m,
            geometry.bearing,
            geometry.fresnel_radius_m,
            ellipse,
        )
