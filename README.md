# fluidsim

Building blocks for particle-based physics simulation in pure Python.
The package uses only the standard library.

## Modules

- `fluidsim.vector`: `Vector` is an immutable 3D vector. `a * b` between two vectors gives the dot product. `a ^ b` gives the cross product. It also has `magnitude()`, `unit_vector()`, `is_zero()`, `is_parallel()` and `rotate(axis, theta)`. Ordering comparisons compare magnitudes. `AABB` is an axis-aligned box given by its corners `llc` and `urc`.
- `fluidsim.color`: `Color` is an immutable RGBA colour with component-wise arithmetic.
- `fluidsim.gisolver`: the `Solver` interface (`init()`, `solve(dt)`) and the integrators built on it.
  - `ForwardEulerSolver`, `BackwardEulerSolver` and `LeapFrogSolver` each combine a position step and a velocity step.
  - `SubstepSolver`, `FourthOrderSolver` and `SixthOrderSolver` each wrap another solver.
- `fluidsim.objloader`: `load_obj(path)` returns the faces of a Wavefront OBJ file as `Triangle` objects. `load_obj_vertices(path)` returns its vertices. A face that refers to a missing vertex raises `ValueError`.
- `fluidsim.state`: `DynamicalState` holds named per-particle `Attribute`s.
  - Every state has `positions`, `velocities`, `accelerations`, `masses`, `radii`, `ids` and `colors`.
  - `create_attr(name, default)` adds more attributes, and `attr(name)` returns one.
  - `add(count)` and `clear()` change the number of particles.
- `fluidsim.softbody`: `SoftBodyState` adds edge slots.
  - `set_num_pairs(n)` appends `n` empty slots.
  - `add_pair(i, j, index)` stores a `SoftEdge` whose rest length is the current distance between particles `i` and `j`.
  - `clear_pairs()` removes every slot, and `pairs` returns them.
- `fluidsim.sph`: `SPHState` is a fluid state.
  - It provides the cubic-spline `weight`, its gradient `grad_weight` and a uniform-grid neighbour search (`populate()`, `neighbors(point)`).
  - It computes density (`compute_density()`), predicted density, the density derivative, the pressure factor (`compute_factor()`) and `max_velocity()`.
  - Properties `radius`, `density0`, `max_iter`, `max_error` and `m_max_error` enforce their lower limits.
- `fluidsim.viscosity`: the `Force` interface and `ExplicitViscosity`. `ExplicitViscosity` adds a viscous acceleration to the particles of an `SPHState` and leaves other states alone. A particle with zero mass or zero density raises `ValueError`.
- `fluidsim.wcsph`: `WCSPHSolver` is a weakly compressible SPH step.
  - On each step it rebuilds the grid, recomputes densities and runs an inner solver with the current timestep.
  - It then chooses the next timestep from the CFL condition, clamped to [0.0001, 0.005].
  - If the state's `use_user_dt` is set, it uses the caller's timestep instead.
- `fluidsim.ppm`: `write_ppm`, `flip_vertical` and `frame_filename` (`<base>.NNNN.ppm`) write plain-text (P3) images. `ScreenCapture` counts frames. While it is recording, it writes each pixel buffer it is given to a numbered file.
- `fluidsim.randomwalk`: `RandomWalkSystem` is a small demo. On each step its `Particle`s move, and their velocities are turned perpendicular to the line to the cloud's centre at constant speed. Optionally, new particles are emitted on each step.

## Examples

Density of two nearby fluid particles:

```python
from fluidsim.vector import Vector, AABB
from fluidsim.sph import SPHState

state = SPHState(AABB(Vector(-5, -5, -5), Vector(5, 5, 5)), 0.1)
state.add(2)
state.positions[0] = Vector(0.0, 0.0, 0.0)
state.positions[1] = Vector(0.02, 0.0, 0.0)
state.populate()
state.compute_density()
print(state.attr("density")[0])
```

The integrators need the position and velocity steps to be written as `Solver` subclasses:

```python
from fluidsim.gisolver import Solver, LeapFrogSolver, SubstepSolver
from fluidsim.state import DynamicalState
from fluidsim.vector import Vector


class AdvancePosition(Solver):
    def __init__(self, state):
        self.state = state

    def init(self):
        pass

    def solve(self, dt):
        for p in range(len(self.state)):
            self.state.positions[p] = self.state.positions[p] + self.state.velocities[p] * dt


class AdvanceVelocity(Solver):
    def __init__(self, state, gravity):
        self.state = state
        self.gravity = gravity

    def init(self):
        pass

    def solve(self, dt):
        for p in range(len(self.state)):
            self.state.velocities[p] = self.state.velocities[p] + self.gravity * dt


state = DynamicalState("ball")
state.add(1)
stepper = SubstepSolver(
    LeapFrogSolver(AdvancePosition(state), AdvanceVelocity(state, Vector(0, -9.81, 0))), 7
)
stepper.init()
stepper.solve(0.005)
print(state.positions[0])
```

## What the package does not do

- It has no window, renderer or command-line program. `ScreenCapture` only writes the pixels it is handed.
- It provides no ready-made position or velocity steps.
- The only force it provides is `ExplicitViscosity`. There is no gravity, pressure or spring force.
- It does no collision handling. `WCSPHSolver` accepts a `collisions` object and stores it, but never uses it.

## Tests

The tests live in `tests/` and use pytest, which the `test` extra installs.