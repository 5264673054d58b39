import numpy as np
from numpy.typing import ArrayLike, NDArray

# Below this a polygon is treated as degenerate
AREA_TOL = 1e-12


# ------------------
# Geometry functions
# ------------------


def length(xy: ArrayLike) -> float:
    dxy = np.diff(xy, axis=0)
    ds = np.linalg.norm(dxy, axis=1)
    return float(np.sum(ds))


def closed_length(xy: ArrayLike) -> float:
    """Perimeter of the polygon, including the closing segment."""
    xy = np.asarray(xy)
    return length(np.r_[xy, xy[:1]])


def _cross_terms(xy: ArrayLike) -> tuple[NDArray, NDArray, NDArray, NDArray, NDArray]:
    xy = np.asarray(xy, dtype=float)
    x = xy[:, 0]
    y = xy[:, 1]

    # Shift arrays to get next points (wrapping around)
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return x, y, x_next, y_next, x * y_next - x_next * y


def signed_area(xy: ArrayLike) -> float:
    """Shoelace area; positive for counter-clockwise polygons."""
    *_, cross_products = _cross_terms(xy)
    return float(0.5 * np.sum(cross_products))


def centroid(xy: ArrayLike) -> NDArray:
    """Centroid of the area enclosed by a closed polygon.

    Uses the shoelace formula for area and first moments.

    Returns:
        NDArray: [x_centroid, y_centroid] coordinates
    """
    x, y, x_next, y_next, cross_products = _cross_terms(xy)
    area = 0.5 * np.sum(cross_products)

    if abs(area) < AREA_TOL:
        raise ValueError("Polygon area is too small for reliable centroid calculation")

    cx = np.sum((x + x_next) * cross_products) / (6.0 * area)
    cy = np.sum((y + y_next) * cross_products) / (6.0 * area)
    return np.array([cx, cy])
