"""Fresnel clearance ellipse drawn as a single persistent matplotlib patch."""

from typing import Optional

from matplotlib.axes import Axes
from matplotlib.patches import Ellipse

from link_planner.domain.interfaces import BaseEllipseRenderer
from link_planner.domain.models.geo import PixelPoint
from link_planner.domain.models.planner import EllipseGeometry
from link_planner.domain.models.units import Degrees, Pixels
from link_planner.infrastructure.visualization.surface import MapFigure


class MatplotlibEllipseRenderer(BaseEllipseRenderer):
    """
    Owns one overlay axes and one Ellipse patch, both created on first render.

    Later renders update the same patch in place, so at most one ellipse
    exists per surface. The unrotated patch has its major axis along x;
    rotation is applied about the center in the y-down pixel frame, so a
    positive angle turns clockwise on screen.
    """

    def __init__(
        self,
        surface: MapFigure,
        facecolor: str = "gold",
        edgecolor: str = "darkorange",
        alpha: float = 0.35,
    ):
        self.surface = surface
        self.facecolor = facecolor
        self.edgecolor = edgecolor
        self.alpha = alpha

        self._overlay: Optional[Axes] = None
        self._ellipse: Optional[Ellipse] = None
        self._geometry: Optional[EllipseGeometry] = None

    @property
    def ellipse(self) -> Optional[Ellipse]:
        return self._ellipse

    @property
    def geometry(self) -> Optional[EllipseGeometry]:
        return self._geometry

    @property
    def visible(self) -> bool:
        return self._overlay is not None and self._overlay.get_visible()

    def render_ellipse(
        self,
        center: PixelPoint,
        rotation_degrees: Degrees,
        semi_major_px: Pixels,
        semi_minor_px: Pixels,
    ) -> None:
        if self._overlay is None:
            self._overlay = self.surface.add_overlay_axes()
        if self._ellipse is None:
            self._ellipse = Ellipse(
                (0.0, 0.0),
                width=0.0,
                height=0.0,
                facecolor=self.facecolor,
                edgecolor=self.edgecolor,
                linewidth=1.5,
                alpha=self.alpha,
            )
            self._overlay.add_patch(self._ellipse)

        self._ellipse.set_center((center.x, center.y))
        self._ellipse.set_width(2 * semi_major_px)
        self._ellipse.set_height(2 * semi_minor_px)
        self._ellipse.set_angle(rotation_degrees)

        self._geometry = EllipseGeometry(
            center=PixelPoint(center.x, center.y),
            rotation=rotation_degrees,
            semi_major_px=semi_major_px,
            semi_minor_px=semi_minor_px,
        )
        self._overlay.set_visible(True)

    def hide(self) -> None:
        if self._overlay is not None:
            self._overlay.set_visible(False)
