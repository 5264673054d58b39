"""
Drawing surfaces for the renderer.

A surface exposes a canvas-like capability set: clear, an affine transform
built from scale and translate calls, and stroking of polylines. Path
coordinates are mapped through the current transform into device pixels
(origin top-left, y down) before they reach the backend.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol

import numpy as np
from matplotlib.axes import Axes
from matplotlib.lines import Line2D
from numpy.typing import ArrayLike, NDArray


class DrawingSurface(Protocol):
    """Protocol for a target the renderer can draw on."""

    def set_device_size(self, width: float, height: float) -> None:
        """Resize the backing store, in device pixels."""
        ...

    def clear(self) -> None:
        """Erase everything drawn so far."""
        ...

    def reset_transform(self) -> None:
        """Return to the identity transform."""
        ...

    def scale(self, sx: float, sy: float) -> None: ...

    def translate(self, dx: float, dy: float) -> None: ...

    def stroke_path(
        self,
        xy: ArrayLike,
        closed: bool = False,
        width: float = 1.0,
        color: str = "k",
    ) -> None:
        """Stroke the polyline through ``xy`` (moveTo first point, lineTo the rest)."""
        ...


class AffineSurface(ABC):
    """Surface base class holding the current transform as a 3x3 matrix."""

    def __init__(self) -> None:
        self.transform = np.eye(3)
        self.device_size = (1.0, 1.0)

    def set_device_size(self, width: float, height: float) -> None:
        self.device_size = (float(width), float(height))

    def reset_transform(self) -> None:
        self.transform = np.eye(3)

    def scale(self, sx: float, sy: float) -> None:
        self.transform = self.transform @ np.diag([sx, sy, 1.0])

    def translate(self, dx: float, dy: float) -> None:
        shift = np.eye(3)
        shift[:2, 2] = dx, dy
        self.transform = self.transform @ shift

    def to_device(self, xy: ArrayLike) -> NDArray:
        xy = np.atleast_2d(np.asarray(xy, dtype=float))
        homogeneous = np.c_[xy, np.ones(len(xy))]
        return (homogeneous @ self.transform.T)[:, :2]

    @property
    def line_scale(self) -> float:
        """Factor applied to stroke widths, taken from the x scale."""
        return float(np.hypot(*self.transform[:2, 0]))

    def stroke_path(
        self,
        xy: ArrayLike,
        closed: bool = False,
        width: float = 1.0,
        color: str = "k",
    ) -> None:
        device = self.to_device(xy)
        if closed and len(device):
            device = np.r_[device, device[:1]]
        self._stroke_device(device, closed, width * self.line_scale, color)

    @abstractmethod
    def clear(self) -> None: ...

    @abstractmethod
    def _stroke_device(
        self, xy: NDArray, closed: bool, width: float, color: str
    ) -> None: ...


@dataclass(frozen=True)
class Stroke:
    xy: NDArray  # Device pixel coordinates, closing point included if closed
    closed: bool
    width: float  # Device pixels
    color: str


class RecordingSurface(AffineSurface):
    """Headless surface that keeps every stroke since the last clear."""

    def __init__(self) -> None:
        super().__init__()
        self.strokes: list[Stroke] = []
        self.clear_count = 0

    def clear(self) -> None:
        self.strokes = []
        self.clear_count += 1

    def _stroke_device(self, xy, closed, width, color) -> None:
        self.strokes.append(Stroke(xy, closed, width, color))


class MatplotlibSurface(AffineSurface):
    """Surface drawing onto a matplotlib Axes used as a pixel canvas.

    The axes limits are set to the backing store size so one data unit is
    one device pixel, with the origin at the top-left corner.
    """

    def __init__(self, ax: Axes, background: str = "white") -> None:
        super().__init__()
        self.ax = ax
        self.background = background

    def clear(self) -> None:
        ax = self.ax
        for line in list(ax.lines):
            line.remove()
        width, height = self.device_size
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_facecolor(self.background)
        ax.set_axis_off()

    def _stroke_device(self, xy, closed, width, color) -> None:
        # Device pixels to points for matplotlib line widths
        dpi = self.ax.figure.dpi
        line = Line2D(
            xy[:, 0],
            xy[:, 1],
            linewidth=width * 72 / dpi,
            color=color,
            solid_joinstyle="round",
            antialiased=True,
        )
        self.ax.add_line(line)

    def flush(self) -> None:
        self.ax.figure.canvas.draw_idle()
