"""Geometric integrators composed from position and velocity sub-solvers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Solver(ABC):
    """A step of the integration that can be initialised and advanced by dt."""

    @abstractmethod
    def init(self) -> None:
        """Prepare the solver before the first step."""

    @abstractmethod
    def solve(self, dt: float) -> None:
        """Advance the state by ``dt``."""


class _PairSolver(Solver):
    """Combines a position update ``a`` and a velocity update ``b``."""

    def __init__(self, a: Solver, b: Solver) -> None:
        self.a = a
        self.b = b

    def init(self) -> None:
        self.a.init()
        self.b.init()


class ForwardEulerSolver(_PairSolver):
    """Position first, then velocity."""

    def init(self) -> None:
        super().init()

    def solve(self, dt: float) -> None:
        self.a.solve(dt)
        self.b.solve(dt)


class BackwardEulerSolver(_PairSolver):
    """Velocity first, then position."""

    def init(self) -> None:
        super().init()

    def solve(self, dt: float) -> None:
        self.b.solve(dt)
        self.a.solve(dt)


class LeapFrogSolver(_PairSolver):
    """Half velocity step, full position step, half velocity step."""

    def init(self) -> None:
        super().init()

    def solve(self, dt: float) -> None:
        half = 0.5 * dt
        self.b.solve(half)
        self.a.solve(dt)
        self.b.solve(half)


class SubstepSolver(Solver):
    """Runs the wrapped solver ``steps`` times with ``dt / steps`` each."""

    def __init__(self, solver: Solver, steps: int) -> None:
        if steps < 1:
            raise ValueError(f"number of substeps must be positive, got {steps}")
        self.solver = solver
        self.steps = steps

    def init(self) -> None:
        self.solver.init()

    def solve(self, dt: float) -> None:
        sub = dt / self.steps
        for _ in range(self.steps):
            self.solver.solve(sub)


class FourthOrderSolver(Solver):
    """Fourth-order composition of a second-order solver."""

    def __init__(self, solver: Solver) -> None:
        self.solver = solver
        self.a = 1.0 / (2.0 - 2.0 ** (1.0 / 3.0))
        self.b = 1.0 - 2.0 * self.a

    def init(self) -> None:
        self.solver.init()

    def solve(self, dt: float) -> None:
        dta = self.a * dt
        dtb = self.b * dt
        self.solver.solve(dta)
        self.solver.solve(dtb)
        self.solver.solve(dta)


class SixthOrderSolver(Solver):
    """Sixth-order composition of a second-order solver."""

    def __init__(self, solver: Solver) -> None:
        self.solver = solver
        self.a = 1.0 / (4.0 - 4.0 ** (1.0 / 3.0))
        self.b = 1.0 - 4.0 * self.a

    def init(self) -> None:
        self.solver.init()

    def solve(self, dt: float) -> None:
        dta = self.a * dt
        dtb = self.b * dt
        self.solver.solve(dta)
        self.solver.solve(dta)
        self.solver.solve(dtb)
        self.solver.solve(dta)
        self.solver.solve(dta)