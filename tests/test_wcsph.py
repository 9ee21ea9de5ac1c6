import pytest

from fluidsim.gisolver import Solver
from fluidsim.sph import SPHState
from fluidsim.vector import AABB, Vector
from fluidsim.viscosity import ExplicitViscosity
from fluidsim.wcsph import WCSPHSolver

BOUNDS = AABB(Vector(-5, -5, -5), Vector(5, 5, 5))


class Recorder(Solver):
    def __init__(self, state):
        self.state = state
        self.steps = []
        self.densities = []

    def init(self):
        pass

    def solve(self, dt):
        self.steps.append(dt)
        self.densities.append(self.state.attr("density")[0])


def _setup(speed=0.0):
    state = SPHState(BOUNDS, 0.1)
    state.add(2)
    state.positions[0] = Vector(0, 0, 0)
    state.positions[1] = Vector(0.05, 0, 0)
    state.velocities[0] = Vector(speed, 0, 0)
    inner = Recorder(state)
    solver = WCSPHSolver(state, ExplicitViscosity(0.01), 0, 0, None, inner)
    return state, inner, solver


def test_init_computes_densities():
    state, _, solver = _setup()
    assert state.attr("density")[0] == 0.0
    solver.init()
    assert state.attr("density")[0] > 0.0


def test_first_step_uses_initial_dt_and_fresh_densities():
    _, inner, solver = _setup()
    solver.solve(0.01)
    assert inner.steps[0] == pytest.approx(0.001)
    assert inner.densities[0] > 0.0


def test_user_dt_is_used_when_requested():
    state, inner, solver = _setup(speed=100.0)
    state.use_user_dt = True
    solver.solve(0.02)
    assert solver.dt == pytest.approx(0.02)
    solver.solve(0.03)
    assert inner.steps[1] == pytest.approx(0.02)
    assert solver.dt == pytest.approx(0.03)


def test_still_fluid_takes_user_dt_clamped_to_maximum():
    _, _, solver = _setup()
    solver.solve(0.01)
    assert solver.dt == pytest.approx(0.005)


def test_still_fluid_takes_user_dt_clamped_to_minimum():
    _, _, solver = _setup()
    solver.solve(1.0e-6)
    assert solver.dt == pytest.approx(0.0001)


def test_still_fluid_takes_user_dt_inside_range():
    _, _, solver = _setup()
    solver.solve(0.003)
    assert solver.dt == pytest.approx(0.003)


def test_fast_fluid_hits_minimum():
    _, _, solver = _setup(speed=1000.0)
    assert solver.update_timestep() == pytest.approx(0.0001)


def test_cfl_timestep_in_range():
    _, _, solver = _setup(speed=10.0)
    assert solver.update_timestep() == pytest.approx(0.002)


def test_cfl_timestep_shrinks_with_speed():
    _, _, slow = _setup(speed=5.0)
    _, _, fast = _setup(speed=10.0)
    assert fast.update_timestep() == pytest.approx(slow.update_timestep() / 2)


def test_clamps_are_stored():
    _, _, solver = _setup()
    solver.velocity_clamp = 3.0
    solver.acceleration_clamp = 4.0
    assert (solver.velocity_clamp, solver.acceleration_clamp) == (3.0, 4.0)