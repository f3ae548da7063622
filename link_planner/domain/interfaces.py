from abc import ABC, abstractmethod
from collections.abc import Callable

from link_planner.domain.models.geo import Coordinates, PixelPoint
from link_planner.domain.models.units import Degrees, Pixels

ViewportCallback = Callable[[], None]


class BaseMapProjection(ABC):
    """
    Abstract base class for the map engine the overlay is drawn on.

    Pan, zoom and the projection math itself belong to the implementation.
    """

    @abstractmethod
    def project(self, coord: Coordinates) -> PixelPoint:
        """
        Project a geographic coordinate into the map layer's current pixel space.
        """
        pass

    @abstractmethod
    def pixel_origin(self) -> PixelPoint:
        """
        Current top-left anchor of the layer pixel space relative to the
        overlay's coordinate frame.
        """
        pass

    @abstractmethod
    def on_viewport_settled(self, callback: ViewportCallback) -> None:
        """
        Register a callback fired once per completed pan/zoom gesture.
        """
        pass


class BaseEllipseRenderer(ABC):
    @abstractmethod
    def render_ellipse(
        self,
        center: PixelPoint,
        rotation_degrees: Degrees,
        semi_major_px: Pixels,
        semi_minor_px: Pixels,
    ) -> None:
        """
        Create the ellipse on first use, update it in place afterwards.
        This method must be implemented by subclasses.
        """
        pass

    @abstractmethod
    def hide(self) -> None:
        pass


class BaseLinkStyler(ABC):
    @abstractmethod
    def set_link_selected(self, link_id: str, selected: bool) -> None:
        """
        Switch a link between its normal and selected appearance.
        """
        pass


class BaseTowerHighlighter(ABC):
    @abstractmethod
    def set_tower_pending(self, tower_id: str, pending: bool) -> None:
        """
        Mark a tower as the pending first end of a link being created.
        """
        pass
