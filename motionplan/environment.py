"""Workspaces, planning problems and paths."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from motionplan.geometry import Polygon


def _zero2() -> np.ndarray:
    return np.zeros(2)


@dataclass(eq=False)
class Environment2D:
    """Rectangular 2D workspace with polygonal obstacles."""

    x_min: float = 0.0
    x_max: float = 10.0
    y_min: float = 0.0
    y_max: float = 10.0
    obstacles: list[Polygon] = field(default_factory=list)


@dataclass(eq=False)
class Problem2D(Environment2D):
    """Environment together with an initial and a goal location."""

    q_init: np.ndarray = field(default_factory=_zero2)
    q_goal: np.ndarray = field(default_factory=_zero2)

    def __post_init__(self) -> None:
        self.q_init = np.asarray(self.q_init, dtype=float).reshape(2)
        self.q_goal = np.asarray(self.q_goal, dtype=float).reshape(2)


@dataclass(eq=False)
class CircularAgentProperties:
    """Radius and start/goal locations of a circular agent."""

    radius: float = 1.0
    q_init: np.ndarray = field(default_factory=_zero2)
    q_goal: np.ndarray = field(default_factory=_zero2)

    def __post_init__(self) -> None:
        self.q_init = np.asarray(self.q_init, dtype=float).reshape(2)
        self.q_goal = np.asarray(self.q_goal, dtype=float).reshape(2)


@dataclass(eq=False)
class MultiAgentProblem2D(Environment2D):
    """Environment with a set of circular agents."""

    agent_properties: list[CircularAgentProperties] = field(default_factory=list)

    def num_agents(self) -> int:
        return len(self.agent_properties)


@dataclass(eq=False)
class Path2D:
    """Sequence of 2D waypoints; ``valid`` tells whether a solution was found."""

    waypoints: list[np.ndarray] = field(default_factory=list)
    valid: bool = False

    def __post_init__(self) -> None:
        self.waypoints = [np.asarray(w, dtype=float).reshape(2) for w in self.waypoints]

    def length(self) -> float:
        """Total Euclidean length of the path."""
        if len(self.waypoints) < 2:
            return 0.0
        points = np.stack(self.waypoints)
        return float(np.linalg.norm(np.diff(points, axis=0), axis=1).sum())


@dataclass(eq=False)
class MultiAgentPath2D:
    """One path per agent, ordered like the problem's agent properties."""

    agent_paths: list[Path2D] = field(default_factory=list)
    valid: bool = False

    @classmethod
    def for_agents(cls, n_agents: int) -> "MultiAgentPath2D":
        """Create an empty path for each of ``n_agents`` agents."""
        return cls([Path2D() for _ in range(n_agents)])

    def num_agents(self) -> int:
        return len(self.agent_paths)