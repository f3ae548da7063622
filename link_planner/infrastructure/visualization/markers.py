from matplotlib.lines import Line2D
from matplotlib.text import Text

from link_planner.application.services.projector import ViewportProjector
from link_planner.application.state import PlannerState
from link_planner.domain.interfaces import BaseLinkStyler, BaseTowerHighlighter
from link_planner.domain.models.planner import Link, Tower
from link_planner.infrastructure.visualization.surface import MapFigure

LINK_STYLE = {"color": "blue", "linewidth": 3.0}
SELECTED_LINK_STYLE = {"color": "orange", "linewidth": 5.0}
TOWER_EDGE_COLOR = "white"
PENDING_TOWER_EDGE_COLOR = "yellow"


class MarkerLayer(BaseLinkStyler, BaseTowerHighlighter):
    """
    Tower markers and link lines on the base layer of the map figure.

    Positions are re-projected on `refresh`, which is meant to be hooked to
    the map's viewport-settled notification.
    """

    def __init__(
        self,
        surface: MapFigure,
        projector: ViewportProjector,
        state: PlannerState,
    ):
        self.surface = surface
        self.projector = projector
        self.planner_state = state

        self.tower_markers: dict[str, Line2D] = {}
        self.tower_labels: dict[str, Text] = {}
        self.link_lines: dict[str, Line2D] = {}

    def add_tower(self, tower: Tower) -> Line2D:
        axes = self.surface.base_axes
        point = self.projector.to_viewport_pixel(tower.position)
        (marker,) = axes.plot(
            [point.x],
            [point.y],
            marker="o",
            markersize=9,
            markerfacecolor="crimson",
            markeredgecolor=TOWER_EDGE_COLOR,
            markeredgewidth=2.0,
            linestyle="None",
            zorder=4,
        )
        label = axes.text(
            point.x + 8, point.y - 8, tower.id, fontsize=8, zorder=4
        )
        self.tower_markers[tower.id] = marker
        self.tower_labels[tower.id] = label
        return marker

    def add_link(self, link: Link) -> Line2D | None:
        tower_a, tower_b = self.planner_state.link_towers(link)
        if tower_a is None or tower_b is None:
            return None

        point_a = self.projector.to_viewport_pixel(tower_a.position)
        point_b = self.projector.to_viewport_pixel(tower_b.position)
        (line,) = self.surface.base_axes.plot(
            [point_a.x, point_b.x],
            [point_a.y, point_b.y],
            solid_capstyle="round",
            zorder=3,
            **LINK_STYLE,
        )
        self.link_lines[link.id] = line
        return line

    def set_link_selected(self, link_id: str, selected: bool) -> None:
        line = self.link_lines.get(link_id)
        if line is None:
            return
        style = SELECTED_LINK_STYLE if selected else LINK_STYLE
        line.set_color(style["color"])
        line.set_linewidth(style["linewidth"])

    def is_link_selected(self, link_id: str) -> bool:
        line = self.link_lines.get(link_id)
        return line is not None and line.get_color() == SELECTED_LINK_STYLE["color"]

    def set_tower_pending(self, tower_id: str, pending: bool) -> None:
        marker = self.tower_markers.get(tower_id)
        if marker is None:
            return
        marker.set_markeredgecolor(
            PENDING_TOWER_EDGE_COLOR if pending else TOWER_EDGE_COLOR
        )

    def refresh(self) -> None:
        for tower_id, marker in self.tower_markers.items():
            tower = self.planner_state.find_tower(tower_id)
            if tower is None:
                continue
            point = self.projector.to_viewport_pixel(tower.position)
            marker.set_data([point.x], [point.y])
            self.tower_labels[tower_id].set_position((point.x + 8, point.y - 8))

        for link_id, line in self.link_lines.items():
            link = self.planner_state.links.get(link_id)
            if link is None:
                continue
            tower_a, tower_b = self.planner_state.link_towers(link)
            if tower_a is None or tower_b is None:
                continue
            point_a = self.projector.to_viewport_pixel(tower_a.position)
            point_b = self.projector.to_viewport_pixel(tower_b.position)
            line.set_data([point_a.x, point_b.x], [point_a.y, point_b.y])
