import numpy as np
import pytest

from motionplan.environment import Problem2D
from motionplan.geometry import Polygon
from motionplan.gradient_descent import MAX_ITERATIONS, GradientDescent


def unit_square(offset=(0.0, 0.0)):
    ox, oy = offset
    return Polygon([(ox, oy), (ox + 1, oy), (ox + 1, oy + 1), (ox, oy + 1)])


@pytest.fixture
def planner():
    return GradientDescent(xi=0.5, eta=0.05, d_star=2.0, q_star=1.0, epsilon=0.25)


def test_attract_gradient_within_d_star_scales_with_distance(planner):
    grad = planner.attract_gradient([0.0, 0.0], [1.0, 0.0])
    assert np.linalg.norm(grad) == pytest.approx(planner.xi * 1.0)
    assert grad[0] > 0
    assert grad[1] == pytest.approx(0.0)


def test_attract_gradient_beyond_d_star_has_constant_magnitude(planner):
    for goal in ([10.0, 0.0], [0.0, -50.0], [30.0, 40.0]):
        grad = planner.attract_gradient([0.0, 0.0], goal)
        assert np.linalg.norm(grad) == pytest.approx(planner.d_star * planner.xi)
        direction = np.asarray(goal) / np.linalg.norm(goal)
        assert np.allclose(grad / np.linalg.norm(grad), direction)


def test_check_projections_onto_edge(planner):
    verts = [np.array([0.0, 0.0]), np.array([1.0, 0.0]), np.array([1.0, 1.0])]
    result = planner.check_projections(verts, [0.5, -1.0])
    assert np.allclose(result, [0.5, 0.0])


def test_check_projections_falls_back_to_middle_vertex(planner):
    verts = [np.array([0.0, 0.0]), np.array([1.0, 0.0]), np.array([1.0, 1.0])]
    result = planner.check_projections(verts, [2.0, -1.0])
    assert np.allclose(result, verts[1])


def test_closest_point_below_square(planner):
    result = planner.closest_point([0.5, -1.0], unit_square())
    assert np.allclose(result, [0.5, 0.0])


def test_closest_point_lies_on_boundary(planner):
    square = unit_square()
    result = planner.closest_point([3.0, 0.5], square)
    on_boundary = (
        np.isclose(result[0], 0.0) or np.isclose(result[0], 1.0)
        or np.isclose(result[1], 0.0) or np.isclose(result[1], 1.0)
    )
    assert on_boundary
    assert 0.0 <= result[0] <= 1.0 and 0.0 <= result[1] <= 1.0


def test_repulse_gradient_ignores_far_obstacles(planner):
    grad = planner.repulse_gradient([unit_square((10.0, 10.0))], [0.0, 0.0])
    assert np.allclose(grad, [0.0, 0.0])


def test_repulse_gradient_without_obstacles_is_zero(planner):
    assert np.allclose(planner.repulse_gradient([], [3.0, 3.0]), [0.0, 0.0])


def test_repulse_gradient_points_away_from_near_obstacle(planner):
    q = np.array([0.5, -0.5])
    square = unit_square()
    grad = planner.repulse_gradient([square], q)
    away = q - planner.closest_point(q, square)
    assert grad @ away > 0
    assert np.linalg.norm(grad) > 0


def test_plan_reaches_goal_in_free_space(planner):
    problem = Problem2D(q_init=[0.0, 0.0], q_goal=[5.0, 0.0])
    path = planner.plan(problem)
    assert np.allclose(path.waypoints[0], problem.q_init)
    assert np.allclose(path.waypoints[-1], problem.q_goal)
    assert np.linalg.norm(path.waypoints[-2] - problem.q_goal) <= planner.epsilon
    assert len(path.waypoints) < MAX_ITERATIONS + 2


def test_plan_gives_up_after_iteration_limit():
    stuck = GradientDescent(xi=0.0, eta=0.05, d_star=2.0, q_star=1.0, epsilon=0.25)
    problem = Problem2D(q_init=[0.0, 0.0], q_goal=[100.0, 100.0])
    path = stuck.plan(problem)
    assert len(path.waypoints) == MAX_ITERATIONS + 2
    assert np.allclose(path.waypoints[-1], problem.q_goal)
    assert np.linalg.norm(path.waypoints[-2] - problem.q_goal) > stuck.epsilon


def test_plan_nudges_alternate_sideways_when_stalled():
    stuck = GradientDescent(xi=0.0, eta=0.05, d_star=2.0, q_star=1.0, epsilon=0.25)
    path = stuck.plan(Problem2D(q_init=[0.0, 0.0], q_goal=[100.0, 100.0]))
    first_step = path.waypoints[1] - path.waypoints[0]
    second_step = path.waypoints[2] - path.waypoints[1]
    assert first_step[0] == pytest.approx(-second_step[0])
    assert first_step[1] == pytest.approx(second_step[1])
    assert first_step[1] > 0