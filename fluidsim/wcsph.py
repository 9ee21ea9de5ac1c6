"""Weakly compressible SPH stepping with a CFL-limited timestep."""

from __future__ import annotations

import logging
from typing import Any

from fluidsim.gisolver import Solver
from fluidsim.sph import SPHState
from fluidsim.viscosity import Force

logger = logging.getLogger(__name__)

_CFL_LAMBDA = 0.4
_MAX_DT = 0.005
_MIN_DT = 0.0001


class WCSPHSolver(Solver):
    """Refreshes the neighbour grid and densities, then runs an inner integrator.

    After each step the timestep for the next one is chosen from the CFL
    condition, clamped to [0.0001, 0.005], or taken from the caller when the
    state asks for the user timestep.
    """

    def __init__(
        self,
        state: SPHState,
        force: Force,
        velocity_clamp: float,
        acceleration_clamp: float,
        collisions: Any,
        solver: Solver,
    ) -> None:
        self.state = state
        self.force = force
        self.collisions = collisions
        self.solver = solver
        self.velocity_clamp = float(velocity_clamp)
        self.acceleration_clamp = float(acceleration_clamp)
        self.dt = 0.001
        self.user_dt = 0.001

    def init(self) -> None:
        """Build the neighbour grid and compute initial densities."""
        self.state.populate()
        self.state.compute_density()

    def solve(self, user_dt: float) -> None:
        """Take one step with the current timestep, then choose the next one."""
        self.user_dt = float(user_dt)
        self.state.populate()
        self.state.compute_density()
        self.solver.solve(self.dt)
        self.update_timestep()

    def update_timestep(self) -> float:
        """Choose the next timestep and return it."""
        if self.state.use_user_dt:
            self.dt = self.user_dt
            logger.debug("Dt: %g", self.dt)
            return self.dt
        particle_diameter = self.state.radius / 2.0
        max_vel = self.state.max_velocity()
        if max_vel != 0:
            dt = _CFL_LAMBDA * (particle_diameter / max_vel)
        else:
            dt = self.user_dt
        self.dt = min(max(dt, _MIN_DT), _MAX_DT)
        logger.debug("Dt: %g", self.dt)
        return self.dt