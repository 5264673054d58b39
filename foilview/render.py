from dataclasses import dataclass
import logging

import numpy as np
from numpy.typing import NDArray

from . import config
from .naca import Profile
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    width: float  # Logical pixels
    height: float  # Logical pixels
    pixel_ratio: float = 1.0  # Device pixels per logical pixel
    margin: float = config.MARGIN

    @property
    def device_size(self) -> tuple[float, float]:
        """Size of the backing store in device pixels."""
        return self.width * self.pixel_ratio, self.height * self.pixel_ratio

    @property
    def inner_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def inner_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


@dataclass(frozen=True)
class ViewTransform:
    """Linear map from profile coordinates to logical pixels."""

    scale_x: float
    scale_y: float
    origin: tuple[float, float]

    def scale(self, xy: NDArray) -> NDArray:
        """Scale profile coordinates about the origin, positive y drawn upward."""
        xy = np.asarray(xy, dtype=float)
        return np.c_[xy[:, 0] * self.scale_x, -xy[:, 1] * self.scale_y]

    def apply(self, xy: NDArray) -> NDArray:
        """Map profile coordinates to logical pixels."""
        return self.scale(xy) + np.asarray(self.origin)


def compute_transform(
    thickness: float, chord: float, viewport: Viewport
) -> ViewTransform:
    """Fit the chord to the inset width and the thickness band to the inset height.

    The two scales differ in general, so the drawn section is stretched
    vertically rather than drawn at true aspect ratio.
    """
    scale_x = viewport.inner_width / chord
    scale_y = viewport.inner_height / (
        2 * thickness * chord + config.CAMBER_HEADROOM * chord
    )
    return ViewTransform(scale_x, scale_y, (viewport.margin, viewport.height / 2))


def grid_lines(viewport: Viewport, divisions: int = config.GRID_DIVISIONS) -> NDArray:
    """
    Segments of the reference grid in logical pixels.

    Returns
    -------
    NDArray
        Array of shape (2 * (divisions + 1), 2, 2): vertical lines first,
        then horizontal lines, each as [[x0, y0], [x1, y1]].
    """
    m = viewport.margin
    left, right = m, viewport.width - m
    top, bottom = m, viewport.height - m

    xs = left + np.arange(divisions + 1) * viewport.inner_width / divisions
    ys = top + np.arange(divisions + 1) * viewport.inner_height / divisions

    vertical = [[[x, top], [x, bottom]] for x in xs]
    horizontal = [[[left, y], [right, y]] for y in ys]
    return np.array(vertical + horizontal, dtype=float)


def axis_lines(viewport: Viewport) -> NDArray:
    """Horizontal then vertical axis through the centre of the surface."""
    cx, cy = viewport.center
    return np.array(
        [
            [[0, cy], [viewport.width, cy]],
            [[cx, 0], [cx, viewport.height]],
        ],
        dtype=float,
    )


def draw_grid(surface: DrawingSurface, viewport: Viewport) -> None:
    for segment in grid_lines(viewport):
        surface.stroke_path(segment, width=config.GRID_WIDTH, color=config.GRID_COLOR)
    for segment in axis_lines(viewport):
        surface.stroke_path(segment, width=config.AXIS_WIDTH, color=config.AXIS_COLOR)


def draw_profile(
    surface: DrawingSurface, profile: Profile, viewport: Viewport
) -> ViewTransform:
    p = profile.params
    view = compute_transform(p.thickness, p.chord, viewport)
    # Leading edge at the left margin, chord line vertically centred
    surface.translate(*view.origin)
    surface.stroke_path(
        view.scale(profile.xy),
        closed=True,
        width=config.PROFILE_WIDTH,
        color=config.PROFILE_COLOR,
    )
    return view


def render(
    surface: DrawingSurface, profile: Profile, viewport: Viewport
) -> ViewTransform:
    """Clear the surface and redraw the grid and the profile outline."""
    surface.set_device_size(*viewport.device_size)
    surface.reset_transform()
    surface.clear()
    surface.scale(viewport.pixel_ratio, viewport.pixel_ratio)

    draw_grid(surface, viewport)
    view = draw_profile(surface, profile, viewport)

    logger.debug(
        "Rendered %d points at %gx%g (ratio %g), scale=(%.2f, %.2f)",
        len(profile),
        viewport.width,
        viewport.height,
        viewport.pixel_ratio,
        view.scale_x,
        view.scale_y,
    )
    return view
