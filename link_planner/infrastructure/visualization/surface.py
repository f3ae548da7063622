import os
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure


class MapFigure:
    """
    Matplotlib figure standing in for the map container.

    Axes use viewport pixel coordinates: x to the right, y down, (0, 0) at
    the top-left corner, so anything drawn with viewport pixels lines up
    with the map. The figure is created on first access.
    """

    def __init__(self, size: tuple[int, int], dpi: int = 100):
        self.size = size
        self.dpi = dpi

        self._figure: Optional[Figure] = None
        self._base_axes: Optional[Axes] = None

    @property
    def created(self) -> bool:
        return self._figure is not None

    @property
    def figure(self) -> Figure:
        return self._ensure()[0]

    @property
    def base_axes(self) -> Axes:
        return self._ensure()[1]

    def _ensure(self) -> tuple[Figure, Axes]:
        if self._figure is None or self._base_axes is None:
            width, height = self.size
            self._figure, self._base_axes = plt.subplots(
                figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi
            )
            self._figure.subplots_adjust(left=0, right=1, bottom=0, top=1)
            self._configure(self._base_axes)
            self._base_axes.set_facecolor("whitesmoke")
        return self._figure, self._base_axes

    def add_overlay_axes(self) -> Axes:
        """Transparent axes stacked above the base layer, same pixel frame."""
        axes = self.figure.add_axes((0.0, 0.0, 1.0, 1.0), zorder=2)
        self._configure(axes)
        axes.patch.set_alpha(0.0)
        return axes

    def save(self, save_path: str) -> None:
        output_dir = os.path.dirname(save_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        self.figure.savefig(save_path, dpi=self.dpi, facecolor="mintcream")

    def close(self) -> None:
        if self._figure is not None:
            plt.close(self._figure)
            self._figure = None
            self._base_axes = None

    def _configure(self, axes: Axes) -> None:
        width, height = self.size
        axes.set_xlim(0, width)
        axes.set_ylim(height, 0)  # y grows downwards like screen pixels
        axes.set_axis_off()
