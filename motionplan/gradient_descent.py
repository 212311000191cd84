"""Gradient-descent planning over an attractive/repulsive potential field."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from motionplan.environment import Path2D, Problem2D
from motionplan.geometry import Polygon, is_intersecting

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 2000
STALL_THRESHOLD = 1e-6


def _vec(point: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(point, dtype=float).reshape(2)


@dataclass(frozen=True)
class GradientDescent:
    """Point-agent planner that follows the potential gradient towards the goal.

    ``xi`` and ``d_star`` shape the attractive potential, ``eta`` and ``q_star``
    the repulsive one, and ``epsilon`` is the distance at which the goal counts
    as reached.
    """

    xi: float
    eta: float
    d_star: float
    q_star: float
    epsilon: float

    def plan(self, problem: Problem2D) -> Path2D:
        """Descend the potential from ``q_init`` and return the visited waypoints.

        Gives up after a fixed number of steps; the goal is always appended last.
        """
        path = Path2D()
        current = _vec(problem.q_init).copy()
        goal = _vec(problem.q_goal)
        path.waypoints.append(current.copy())

        dist_to_goal = float(np.linalg.norm(current - goal))
        count = 0
        nudges = 0
        while dist_to_goal > self.epsilon and count < MAX_ITERATIONS:
            gradient = self.attract_gradient(current, goal) + self.repulse_gradient(
                problem.obstacles, current
            )
            current = current + gradient
            if np.linalg.norm(gradient) < STALL_THRESHOLD:
                sign = -1.0 if nudges % 2 else 1.0
                nudges += 1
                current = current + np.array([0.05 * sign, 0.01]) * self.q_star * 0.25
            dist_to_goal = float(np.linalg.norm(current - goal))
            path.waypoints.append(current.copy())
            count += 1

        path.waypoints.append(goal.copy())
        logger.debug("path finished after %d steps", count)
        return path

    def attract_gradient(self, q: Sequence[float], q_goal: Sequence[float]) -> np.ndarray:
        """Step towards the goal: quadratic near it, conic beyond ``d_star``."""
        to_goal = _vec(q_goal) - _vec(q)
        dist = float(np.linalg.norm(to_goal))
        if dist <= self.d_star:
            return self.xi * to_goal
        return self.d_star * self.xi * to_goal / dist

    def closest_point(self, q: Sequence[float], obstacle: Polygon) -> np.ndarray:
        """Closest point of ``obstacle`` to ``q``, found from the nearest visible vertex."""
        q = _vec(q)
        vertices = obstacle.vertices_ccw
        n = len(vertices)
        closest_index = 0
        smallest = float(np.linalg.norm(vertices[0] - q))

        for i, vertex in enumerate(vertices):
            blocked = any(
                is_intersecting(q, vertex, vertices[j], vertices[(j + 1) % n])
                for j in range(n)
                if j != i and (j + 1) % n != i
            )
            if blocked:
                continue
            dist = float(np.linalg.norm(q - vertex))
            if dist < smallest:
                smallest = dist
                closest_index = i

        neighbours = [
            vertices[(closest_index - 1) % n],
            vertices[closest_index],
            vertices[(closest_index + 1) % n],
        ]
        return self.check_projections(neighbours, q)

    def check_projections(
        self, verts: Sequence[Sequence[float]], q: Sequence[float]
    ) -> np.ndarray:
        """Given three consecutive vertices, return the closest point on their two edges.

        Falls back to the middle vertex when ``q`` projects onto neither edge.
        """
        q = _vec(q)
        points = [_vec(v) for v in verts]
        for start, end in zip(points, points[1:]):
            edge = end - start
            dot = float((q - start) @ edge)
            if dot < 0:
                continue
            projection = (dot / float(edge @ edge)) * edge
            if np.linalg.norm(edge) > np.linalg.norm(projection):
                return start + projection
        return points[1].copy()

    def repulse_gradient(self, obstacles: Sequence[Polygon], q: Sequence[float]) -> np.ndarray:
        """Sum of the pushes away from every obstacle closer than ``q_star``."""
        q = _vec(q)
        total = np.zeros(2)
        for obstacle in obstacles:
            away = q - self.closest_point(q, obstacle)
            dist = float(np.linalg.norm(away))
            if dist > self.q_star:
                continue
            total += self.eta * (1.0 / dist - 1.0 / self.q_star) * (1.0 / dist**2) * (away / dist)
        return total