"""Containment tests in the xy chromaticity plane.

Each function answers whether a target point lies on the figure spanned by
one, two or three primaries, and if so returns its barycentric coordinates
with respect to that figure's vertices (non-negative, summing to 1).
None means the point is outside the figure.
"""

import math
from typing import Optional

import numpy as np

Point = tuple[float, float]


def point_coordinates(p: Point, a: Point, tolerance: float) -> Optional[tuple[float]]:
    """Coordinates of p on the single point a: (1.0,) if they coincide."""
    if abs(p[0] - a[0]) <= tolerance and abs(p[1] - a[1]) <= tolerance:
        return (1.0,)
    return None


def segment_coordinates(
    p: Point, a: Point, b: Point, tolerance: float
) -> Optional[tuple[float, float]]:
    """
    Coordinates of p on the segment a-b.

    The point must lie within `tolerance` of the line through a and b, and
    its projection must fall between the endpoints.
    """
    dx, dy = b[0] - a[0], b[1] - a[1]
    length = math.hypot(dx, dy)
    if length <= tolerance:
        return None

    px, py = p[0] - a[0], p[1] - a[1]
    distance = abs(dx * py - dy * px) / length
    if distance > tolerance:
        return None

    t = (px * dx + py * dy) / (length * length)
    slack = tolerance / length
    if t < -slack or t > 1.0 + slack:
        return None

    t = min(max(t, 0.0), 1.0)
    return (1.0 - t, t)


def triangle_coordinates(
    p: Point, a: Point, b: Point, c: Point, tolerance: float
) -> Optional[tuple[float, float, float]]:
    """
    Barycentric coordinates of p in the triangle a-b-c.

    Degenerate (collinear) triangles contain nothing: their points are
    already covered by the segments between their vertices.
    """
    system = np.array(
        [
            [a[0], b[0], c[0]],
            [a[1], b[1], c[1]],
            [1.0, 1.0, 1.0],
        ]
    )
    # Twice the signed area of the triangle
    if abs(np.linalg.det(system)) <= tolerance:
        return None

    weights = np.linalg.solve(system, np.array([p[0], p[1], 1.0]))
    if np.any(weights < -tolerance):
        return None

    weights = np.clip(weights, 0.0, None)
    weights = weights / weights.sum()
    return (float(weights[0]), float(weights[1]), float(weights[2]))
