from collections import deque
from dataclasses import dataclass
from functools import cached_property
import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.optimize import fmin

from . import config, geom
from .params import FoilParams
from .plotting import create_multi_view_plot

logger = logging.getLogger(__name__)

# NACA 4-digit thickness polynomial, sqrt term first then xc^1..xc^4.
THICKNESS_COEFFS = (0.2969, -0.1260, -0.3516, 0.2843, -0.1015)


################################################################################
########################### Analytic distributions #############################
################################################################################


def thickness_distribution(x: ArrayLike, thickness: float, chord: float) -> NDArray:
    """
    Half-thickness of the NACA 4-digit section.

    Parameters
    ----------
    x : ArrayLike
        Chordwise position(s), 0 at the leading edge and ``chord`` at the
        trailing edge.
    thickness : float
        Maximum thickness as a fraction of chord.
    chord : float
        Chord length.

    Returns
    -------
    NDArray
        Half-thickness at each position. Not zero at the trailing edge.
    """
    xc = np.asarray(x, dtype=float) / chord
    a0, a1, a2, a3, a4 = THICKNESS_COEFFS
    poly = a0 * np.sqrt(xc) + a1 * xc + a2 * xc**2 + a3 * xc**3 + a4 * xc**4
    return (thickness / 0.2) * chord * poly


def camber_line(
    x: ArrayLike,
    camber: float,
    chord: float,
    position: float = config.CAMBER_POSITION,
) -> NDArray:
    """Height of the mean camber line, piecewise about the camber peak."""
    xc = np.asarray(x, dtype=float) / chord
    p = position
    front = (camber / p**2) * (2 * p * xc - xc**2) * chord
    back = (camber / (1 - p) ** 2) * ((1 - 2 * p) + 2 * p * xc - xc**2) * chord
    return np.where(xc <= p, front, back)


def camber_slope(
    x: ArrayLike,
    camber: float,
    chord: float,
    position: float = config.CAMBER_POSITION,
) -> NDArray:
    """Analytic derivative dyc/dx of the camber line."""
    xc = np.asarray(x, dtype=float) / chord
    p = position
    front = (2 * camber / p**2) * (p - xc)
    back = (2 * camber / (1 - p) ** 2) * (p - xc)
    return np.where(xc <= p, front, back)


def max_thickness_position() -> float:
    """Chordwise fraction at which the continuous thickness formula peaks."""
    (xc_max,) = fmin(
        lambda xc: -float(thickness_distribution(xc[0], 0.2, 1.0)),
        x0=0.3,
        xtol=1e-10,
        ftol=1e-12,
        disp=False,
    )
    return float(xc_max)


def max_thickness(params: FoilParams) -> float:
    """Maximum full thickness of the continuous section."""
    x = max_thickness_position() * params.chord
    return float(2 * thickness_distribution(x, params.thickness, params.chord))


def max_camber(params: FoilParams) -> float:
    """Maximum camber line height of the continuous section."""
    return params.camber * params.chord


################################################################################
############################## Profile assembly ################################
################################################################################


@dataclass(frozen=True)
class Point:
    x: float
    y: float
    is_upper: bool


@dataclass(frozen=True)
class Profile:
    """Closed airfoil outline.

    Points run from the lower trailing edge to the leading edge, then along
    the upper surface back to the trailing edge. Drawing returns to the first
    point to close the path.
    """

    points: tuple[Point, ...]
    params: FoilParams

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, i):
        return self.points[i]

    @cached_property
    def xy(self) -> NDArray:
        """Coordinates as an (N, 2) array, in path order."""
        return np.array([(pt.x, pt.y) for pt in self.points], dtype=float)

    @property
    def n_stations(self) -> int:
        return self.params.resolution + 1

    @property
    def upper(self) -> NDArray:
        """Upper surface from leading to trailing edge."""
        return self.xy[self.n_stations :]

    @property
    def lower(self) -> NDArray:
        """Lower surface from leading to trailing edge."""
        return self.xy[: self.n_stations][::-1]

    @cached_property
    def stations(self) -> NDArray:
        return _stations(self.params)

    @cached_property
    def half_thickness(self) -> NDArray:
        p = self.params
        return thickness_distribution(self.stations, p.thickness, p.chord)

    @cached_property
    def camber_line(self) -> NDArray:
        """Camber line sampled at the stations, as an (n+1, 2) array."""
        p = self.params
        yc = camber_line(self.stations, p.camber, p.chord, p.camber_position)
        return np.c_[self.stations, yc]

    @property
    def max_thickness(self) -> float:
        """Largest sampled full thickness."""
        return float(2 * np.max(self.half_thickness))

    @property
    def max_camber(self) -> float:
        """Largest sampled camber line height."""
        return float(np.max(self.camber_line[:, 1]))

    @property
    def perimeter(self) -> float:
        return geom.closed_length(self.xy)

    @property
    def area(self) -> float:
        return abs(geom.signed_area(self.xy))

    @property
    def centroid(self) -> NDArray:
        """Area centroid, or the mean camber line point for a flat section."""
        if abs(geom.signed_area(self.xy)) < geom.AREA_TOL:
            return self.camber_line.mean(axis=0)
        return geom.centroid(self.xy)

    @property
    def designation(self) -> str:
        return self.params.designation

    def plot(self, show_camber_line: bool = True, show_closeups: bool = True):
        """Plot the outline at true aspect ratio.

        Parameters
        ----------
        show_camber_line : bool, optional
            Whether to show the camber line. Default is True.
        show_closeups : bool, optional
            Whether to show close-up views of LE and TE. Default is True.

        Returns
        -------
        tuple
            Tuple from create_multi_view_plot containing figure and axes objects.
        """
        upper, lower = self.upper, self.lower

        plot_functions = [
            lambda ax: ax.plot(*upper.T, color="b", linewidth=2, label="Upper surface"),
            lambda ax: ax.plot(*lower.T, color="r", linewidth=2, label="Lower surface"),
        ]

        if show_camber_line:
            camber = self.camber_line
            plot_functions.append(
                lambda ax: ax.plot(
                    *camber.T,
                    color="k",
                    linestyle="--",
                    linewidth=1,
                    alpha=0.7,
                    label="Camber line",
                )
            )

        def format_axes(ax):
            ax.set_xlabel("x")
            ax.set_ylabel("y")
            ax.grid(True, alpha=0.3)

        plot_functions.append(format_axes)

        return create_multi_view_plot(
            plot_functions=plot_functions,
            chord=self.params.chord,
            title=self.designation,
            show_closeups=show_closeups,
        )


def _stations(params: FoilParams) -> NDArray:
    n = params.resolution
    return (np.arange(n + 1) / n) * params.chord


def generate_profile(params: FoilParams) -> Profile:
    """Generate the closed outline of a NACA 4-digit section.

    Each station is offset from the camber line along its normal by the
    half-thickness. Upper points are appended and lower points prepended, so
    the result reads lower TE -> LE -> upper TE with ``2n + 2`` points.
    """
    x = _stations(params)
    yt = thickness_distribution(x, params.thickness, params.chord)
    yc = camber_line(x, params.camber, params.chord, params.camber_position)
    theta = np.arctan(
        camber_slope(x, params.camber, params.chord, params.camber_position)
    )

    sin, cos = np.sin(theta), np.cos(theta)
    xu, yu = x - yt * sin, yc + yt * cos
    xl, yl = x + yt * sin, yc - yt * cos

    points: deque[Point] = deque()
    for i in range(params.resolution + 1):
        points.append(Point(float(xu[i]), float(yu[i]), True))
        points.appendleft(Point(float(xl[i]), float(yl[i]), False))

    logger.debug(
        "Generated %s profile with %d points (chord=%s)",
        params.designation,
        len(points),
        params.chord,
    )
    return Profile(tuple(points), params)
