# motionplan

Tools for planning the motion of a point robot in a 2D workspace with convex
polygon obstacles.

## Modules

- `motionplan.geometry`: `Polygon` (alias `Obstacle2D`) holding vertices in
  counter-clockwise order, with `vertices_cw()` and `edges()`;
  `orientation` (returns an `Orientation`: `COLLINEAR`, `CLOCKWISE`,
  `COUNTERCLOCKWISE`), `is_intersecting` for two segments (any collinear
  triple counts as an intersection), `is_in_obstacle` (inside or on the
  boundary of a convex polygon), `polygon_intersecting`,
  `line_intersecting_polygon`, and the transforms `link_transform` (3x3
  homogeneous) and `rotation_matrix` (2x2).
- `motionplan.environment`: `Environment2D` (bounds default to 0..10 on both
  axes, plus `obstacles`), `Problem2D` (adds `q_init` and `q_goal`),
  `CircularAgentProperties`, `MultiAgentProblem2D` with `num_agents()`,
  `Path2D` with `waypoints`, `valid` and `length()`, and `MultiAgentPath2D`
  with `for_agents(n)` and `num_agents()`.
- `motionplan.graph`: a directed multigraph `Graph` with `connect`, `nodes`,
  `children`, `outgoing_edges`, `parents`, `incoming_edges` (the last two
  raise `ValueError` unless the graph is `reversible`), `edges`,
  `disconnect`, `reverse` and `clear`; `SearchHeuristic` (always 0),
  `LookupSearchHeuristic` (table lookup, `KeyError` for unknown nodes) and
  `ShortestPathProblem`.
- `motionplan.gradient_descent`: `GradientDescent(xi, eta, d_star, q_star, epsilon)`,
  a planner that follows the sum of an attractive and a repulsive gradient.
  It stops when within `epsilon` of the goal or after 2000 steps, nudges
  sideways when the gradient vanishes, and always appends the goal as the last
  waypoint. `attract_gradient`, `repulse_gradient`, `closest_point` and
  `check_projections` are available on their own.
- `motionplan.timing`: `Timer(key)` usable as a context manager or stopped
  with `stop()`, read with `now(unit)`; `Profiler.get_most_recent_profile`
  and `Profiler.get_total_profile` report durations per key in a `TimeUnit`
  (`us`, `ms`, `s`).
- `motionplan.serialization`: `Serializer(filepath, mode="w")` whose `get()`
  mapping is written as YAML by `done()` (parent directories are created);
  `Deserializer(filepath)` or `Deserializer(node=...)`, whose `get()` returns
  the parsed data. A file that is not valid YAML raises
  `DeserializationError`.

## Installing

```
pip install .
pip install ".[test]"   # with the test requirements
```

## Example

```python
import numpy as np
from motionplan.geometry import Polygon
from motionplan.environment import Problem2D
from motionplan.gradient_descent import GradientDescent

square = Polygon([(4, 4), (6, 4), (6, 6), (4, 6)])
problem = Problem2D(
    obstacles=[square],
    q_init=np.array([0.0, 0.0]),
    q_goal=np.array([10.0, 10.0]),
)

planner = GradientDescent(0.05, 0.05, 0.2, 1.0, 0.25)
path = planner.plan(problem)
print(len(path.waypoints), path.length())
```

Building a graph:

```python
from motionplan.graph import Graph, LookupSearchHeuristic, ShortestPathProblem

graph = Graph()
graph.connect(0, 1, 1.0)
graph.connect(1, 2, 2.0)
graph.connect(0, 2, 5.0)

print(graph.children(0), graph.outgoing_edges(0))   # [1, 2] [1.0, 5.0]
print(graph.parents(2))                              # [1, 0]

problem = ShortestPathProblem(graph, init_node=0, goal_node=2)
heuristic = LookupSearchHeuristic({0: 3.0, 1: 2.0, 2: 0.0})
```

Timing a section:

```python
from motionplan.timing import Profiler, Timer, TimeUnit

with Timer("plan"):
    planner.plan(problem)
print(Profiler.get_total_profile("plan", TimeUnit.ms))
```

## What it does not do

- It has no graph search algorithm: `ShortestPathProblem` and the heuristics
  describe a problem but nothing here solves it.
- It has no arm model: there are no forward or inverse kinematics, no
  configuration-space grids and no grid (wavefront) planner. `link_transform`
  is provided only as a building block.
- It draws nothing and offers no command-line program; it is used as a
  library.

## Running the tests

```
pytest
```