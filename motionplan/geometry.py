"""Planar geometry: polygons, transforms and intersection tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Sequence

import numpy as np

ArrayLike2 = Sequence[float] | np.ndarray


def _vec(point: ArrayLike2) -> np.ndarray:
    return np.asarray(point, dtype=float).reshape(2)


@dataclass(eq=False)
class Polygon:
    """Convex polygon whose vertices are stored in counter-clockwise order."""

    vertices_ccw: list[np.ndarray] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.vertices_ccw = [_vec(v) for v in self.vertices_ccw]

    def vertices_cw(self) -> list[np.ndarray]:
        """Return a new list of the vertices in clockwise order."""
        return [v.copy() for v in reversed(self.vertices_ccw)]

    def edges(self) -> Iterable[tuple[np.ndarray, np.ndarray]]:
        """Yield each edge as a pair of consecutive vertices, wrapping around."""
        n = len(self.vertices_ccw)
        for i, start in enumerate(self.vertices_ccw):
            yield start, self.vertices_ccw[(i + 1) % n]


Obstacle2D = Polygon


class Orientation(IntEnum):
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def link_transform(theta: float, link_length: float) -> np.ndarray:
    """Homogeneous 3x3 transform: rotate by ``theta`` after translating by ``link_length`` along x."""
    c, s = np.cos(theta), np.sin(theta)
    return np.array(
        [
            [c, -s, link_length],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ]
    )


def rotation_matrix(theta: float) -> np.ndarray:
    """2x2 rotation matrix for angle ``theta`` (radians)."""
    c, s = np.cos(theta), np.sin(theta)
    return np.array([[c, -s], [s, c]])


def orientation(p: ArrayLike2, q: ArrayLike2, r: ArrayLike2) -> Orientation:
    """Orientation of the ordered triple of points (p, q, r)."""
    p, q, r = _vec(p), _vec(q), _vec(r)
    val = (q[1] - p[1]) * (r[0] - q[0]) - (q[0] - p[0]) * (r[1] - q[1])
    if val == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if val > 0 else Orientation.COUNTERCLOCKWISE


def is_intersecting(a1: ArrayLike2, a2: ArrayLike2, b1: ArrayLike2, b2: ArrayLike2) -> bool:
    """Whether segment a1-a2 intersects segment b1-b2.

    Any collinear triple is reported as an intersection.
    """
    o1 = orientation(a1, a2, b1)
    o2 = orientation(a1, a2, b2)
    o3 = orientation(b1, b2, a1)
    o4 = orientation(b1, b2, a2)
    if o1 != o2 and o3 != o4:
        return True
    return Orientation.COLLINEAR in (o1, o2, o3, o4)


def _in_half_plane(point: np.ndarray, p1: np.ndarray, p2: np.ndarray) -> bool:
    if p1[0] != p2[0]:
        value = (p1[1] - p2[1]) / (p1[0] - p2[0]) * (point[0] - p1[0]) + p1[1] - point[1]
        return value <= 0 if p1[0] < p2[0] else value >= 0
    if p1[1] < p2[1]:
        return point[0] <= p1[0]
    return point[0] >= p1[0]


def is_in_obstacle(point: ArrayLike2, obstacle: Polygon) -> bool:
    """Whether ``point`` lies inside (or on the boundary of) the convex obstacle."""
    pt = _vec(point)
    return all(_in_half_plane(pt, p1, p2) for p1, p2 in obstacle.edges())


def polygon_intersecting(a: Polygon, b: Polygon) -> bool:
    """Whether two polygons overlap."""
    if any(is_in_obstacle(v, b) for v in a.vertices_ccw):
        return True
    if any(is_in_obstacle(v, a) for v in b.vertices_ccw):
        return True
    return any(
        is_intersecting(a1, a2, b1, b2)
        for a1, a2 in a.edges()
        for b1, b2 in b.edges()
    )


def line_intersecting_polygon(obstacle: Polygon, a1: ArrayLike2, a2: ArrayLike2) -> bool:
    """Whether the segment a1-a2 crosses any edge of ``obstacle``."""
    return any(is_intersecting(a1, a2, b1, b2) for b1, b2 in obstacle.edges())