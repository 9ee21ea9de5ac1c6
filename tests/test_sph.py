import math

import pytest

from fluidsim.sph import SPHState
from fluidsim.vector import AABB, Vector

H = 0.1


def _state(*positions):
    state = SPHState(AABB(Vector(-5, -5, -5), Vector(5, 5, 5)), H, "fluid")
    state.add(len(positions))
    for i, p in enumerate(positions):
        state.positions[i] = p
    state.populate()
    return state


def test_name_and_defaults():
    state = _state()
    assert state.name == "fluidSPHStateData"
    assert state.density0 == 1000.0
    assert state.max_iter == 100
    assert state.particle_radius == pytest.approx(H / 4)


def test_weight_at_centre():
    state = _state(Vector())
    assert state.weight(0, Vector()) == pytest.approx(8.0 / (math.pi * H ** 3))


def test_weight_zero_outside_support():
    state = _state(Vector())
    assert state.weight(0, Vector(1.01 * H, 0, 0)) == 0.0


def test_weight_continuous_at_half_radius():
    state = _state(Vector())
    inner = state.weight(0, Vector(0.5 * H - 1e-9, 0, 0))
    outer = state.weight(0, Vector(0.5 * H + 1e-9, 0, 0))
    assert inner == pytest.approx(outer, rel=1e-6)


def test_grad_weight_zero_at_centre_and_outside():
    state = _state(Vector())
    assert state.grad_weight(0, Vector()) == Vector()
    assert state.grad_weight(0, Vector(2 * H, 0, 0)) == Vector()


def test_grad_weight_antisymmetric_and_radial():
    state = _state(Vector())
    a = state.grad_weight(0, Vector(0.3 * H, 0, 0))
    b = state.grad_weight(0, Vector(-0.3 * H, 0, 0))
    assert a.x == pytest.approx(-b.x)
    assert a.y == 0.0 and a.z == 0.0
    assert a.x < 0


def test_neighbors_within_radius():
    state = _state(Vector(), Vector(0.5 * H, 0, 0), Vector(3 * H, 0, 0))
    assert state.neighbors(Vector()) == [0, 1]


def test_single_particle_density():
    state = _state(Vector())
    state.compute_density()
    expected = state.density0 * state.attr("volume")[0] * state.weight(0, Vector())
    assert state.attr("density")[0] == pytest.approx(expected)


def test_density_increases_with_neighbour():
    lone = _state(Vector())
    pair = _state(Vector(), Vector(0.4 * H, 0, 0))
    lone.compute_density()
    pair.compute_density()
    assert pair.attr("density")[0] > lone.attr("density")[0]


def test_predicted_density_at_rest_equals_density():
    state = _state(Vector(), Vector(0.4 * H, 0, 0))
    state.compute_density()
    predicted = state.compute_predicted_density(0, 0.01)
    assert predicted == pytest.approx(state.attr("density")[0])
    assert state.attr("predicted_density")[0] == predicted


def test_density_derivative_uniform_motion_is_zero():
    state = _state(Vector(), Vector(0.4 * H, 0, 0))
    state.velocities[0] = Vector(1, 2, 3)
    state.velocities[1] = Vector(1, 2, 3)
    assert state.compute_density_derivative(0) == 0.0


def test_density_derivative_approaching_is_positive():
    state = _state(Vector(), Vector(0.4 * H, 0, 0))
    state.velocities[1] = Vector(-1, 0, 0)
    assert state.compute_density_derivative(0) > 0


def test_factor_lone_particle_zero_pair_positive():
    lone = _state(Vector())
    lone.compute_factor()
    assert lone.attr("factor")[0] == 0.0
    pair = _state(Vector(), Vector(0.4 * H, 0, 0))
    pair.compute_factor()
    assert pair.attr("factor")[0] > 0
    assert pair.attr("factor")[0] == pytest.approx(pair.attr("factor")[1])


def test_max_velocity():
    assert _state().max_velocity() == 0.0
    state = _state(Vector(), Vector(1, 0, 0))
    state.velocities[1] = Vector(3, 4, 0)
    assert state.max_velocity() == pytest.approx(Vector(3, 4, 0).magnitude())


def test_setter_clamps():
    state = _state()
    state.max_iter = 1
    state.density0 = 0
    state.max_error = 0.05
    state.m_max_error = 0.001
    assert state.max_iter == 2
    assert state.density0 == 1.0
    assert state.max_error == 0.1
    assert state.m_max_error == 0.01


def test_radius_setter_updates_volume():
    state = _state(Vector())
    before = state.attr("volume")[0]
    state.radius = 2 * H
    assert state.particle_radius == pytest.approx(2 * H / 4)
    assert state.attr("volume")[0] == pytest.approx(before * 8)
    state.add(1)
    assert state.attr("volume")[1] == state.attr("volume")[0]