"""Facade adapter wiring the planner, the map and the overlay together."""

from typing import Optional

from environs import Env

from link_planner.application.controller import LinkVisualizationController
from link_planner.application.interaction import (
    LinkCreationOutcome,
    LinkCreationResult,
    LinkCreationStateMachine,
)
from link_planner.application.services.projector import ViewportProjector
from link_planner.application.state import PlannerState
from link_planner.domain.constants import (
    DEFAULT_FREQUENCY_GHZ,
    DEFAULT_MAP_CENTER,
    DEFAULT_MAP_ZOOM,
    DEFAULT_VIEWPORT_SIZE,
)
from link_planner.domain.models.geo import Coordinates, PixelPoint
from link_planner.domain.models.planner import Link, Tower
from link_planner.infrastructure.map.web_mercator import WebMercatorViewport
from link_planner.infrastructure.visualization.ellipse import MatplotlibEllipseRenderer
from link_planner.infrastructure.visualization.markers import MarkerLayer
from link_planner.infrastructure.visualization.surface import MapFigure
from link_planner.logging_config import get_logger

logger = get_logger(__name__)


class LinkPlannerAPI:
    """
    Simplified facade for driving the planner from a UI or a script.

    Owns the planner state and translates discrete input events (map click,
    tower click, link click, pan, zoom) into calls on the state machine and
    the visualization controller.
    """

    def __init__(
        self,
        viewport: WebMercatorViewport,
        state: Optional[PlannerState] = None,
        surface: Optional[MapFigure] = None,
    ):
        """
        Initialize facade with required dependencies.

        Args:
            viewport: Map engine providing projection and viewport notifications
            state: Planner state, a fresh one if omitted
            surface: Figure the markers and the ellipse are drawn on
        """
        self.viewport = viewport
        self.state = state or PlannerState()
        self.surface = surface or MapFigure(size=viewport.size)

        self.projector = ViewportProjector(viewport)
        self.markers = MarkerLayer(self.surface, self.projector, self.state)
        self.renderer = MatplotlibEllipseRenderer(self.surface)
        self.controller = LinkVisualizationController(
            self.state, self.projector, self.renderer, link_styler=self.markers
        )
        self.link_creation = LinkCreationStateMachine(
            self.state, highlighter=self.markers
        )

        # Markers first so the ellipse is drawn over up-to-date lines
        self.viewport.on_viewport_settled(self.markers.refresh)
        self.viewport.on_viewport_settled(self.controller.on_viewport_changed)

    @classmethod
    def create_from_env(cls, env: Env) -> "LinkPlannerAPI":
        """
        Factory method: one-line initialization from environment.

        Example:
            >>> from environs import Env
            >>> env = Env()
            >>> env.read_env()
            >>> planner = LinkPlannerAPI.create_from_env(env)
        """
        center = Coordinates(
            lat=env.float("MAP_CENTER_LAT", DEFAULT_MAP_CENTER[0]),
            lon=env.float("MAP_CENTER_LON", DEFAULT_MAP_CENTER[1]),
        )
        size = (
            env.int("VIEWPORT_WIDTH", DEFAULT_VIEWPORT_SIZE[0]),
            env.int("VIEWPORT_HEIGHT", DEFAULT_VIEWPORT_SIZE[1]),
        )
        viewport = WebMercatorViewport(
            center=center, zoom=env.float("MAP_ZOOM", DEFAULT_MAP_ZOOM), size=size
        )
        state = PlannerState(
            default_frequency_ghz=env.float(
                "DEFAULT_FREQUENCY_GHZ", DEFAULT_FREQUENCY_GHZ
            )
        )
        return cls(viewport, state=state)

    @property
    def selected_link(self) -> Link | None:
        return self.controller.selected_link

    def place_tower(
        self, position: Coordinates, frequency_ghz: float | None = None
    ) -> Tower:
        tower = self.state.add_tower(position, frequency_ghz)
        self.markers.add_tower(tower)
        return tower

    def handle_map_click(self, point: PixelPoint) -> Tower | None:
        """
        A click on empty map: cancels a pending link, otherwise places a tower.
        """
        if self.link_creation.map_clicked():
            logger.info("Link creation cancelled")
            return None
        return self.place_tower(self.viewport.unproject_viewport_pixel(point))

    def handle_tower_click(self, tower_id: str) -> LinkCreationResult:
        result = self.link_creation.tower_clicked(tower_id)
        if result.outcome is LinkCreationOutcome.CREATED and result.link:
            self.markers.add_link(result.link)
        return result

    def handle_link_click(self, link_id: str) -> None:
        self.controller.select_link(self.state.get_link(link_id))

    def edit_frequency(self, tower_id: str, new_frequency_ghz: object) -> Tower:
        tower = self.state.edit_frequency(tower_id, new_frequency_ghz)
        selected = self.controller.selected_link
        if selected and tower_id in (selected.tower_a_id, selected.tower_b_id):
            # Ellipse width depends on the frequency
            self.controller.on_viewport_changed()
        return tower

    def link_towers(self, tower_a_id: str, tower_b_id: str) -> LinkCreationResult:
        """Two tower clicks in a row, as a single call."""
        self.link_creation.map_clicked()
        self.handle_tower_click(tower_a_id)
        return self.handle_tower_click(tower_b_id)

    def pan(self, dx: float, dy: float) -> None:
        self.viewport.pan_by(dx, dy)

    def zoom(self, zoom: float) -> None:
        self.viewport.set_zoom(zoom)

    def save_plot(self, save_path: str) -> None:
        self.surface.save(save_path)

    def close(self) -> None:
        self.surface.close()
