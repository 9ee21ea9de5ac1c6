"""Forces acting on particle states, including explicit SPH viscosity."""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from fluidsim.sph import SPHState
from fluidsim.state import DynamicalState

logger = logging.getLogger(__name__)

_DIMENSIONS = 3


class Force(ABC):
    """Computes forces on a state and updates its accelerations."""

    @abstractmethod
    def compute(self, state: DynamicalState, dt: float) -> None:
        """Add this force's contribution to the accelerations of ``state``."""


class ExplicitViscosity(Force):
    """Laplacian-based viscosity for SPH fluids; other states are left untouched."""

    def __init__(self, dynamic_viscosity: float) -> None:
        self.dynamic_viscosity = float(dynamic_viscosity)

    def compute(self, state: DynamicalState, dt: float) -> None:
        """Add the viscous acceleration to every particle of an SPH state."""
        if not isinstance(state, SPHState):
            return
        densities = state.attr("density")
        masses = state.masses
        positions = state.positions
        velocities = state.velocities
        accelerations = state.accelerations
        h = state.radius
        softening = 0.01 * h * h

        for p in range(len(state)):
            density = densities[p]
            mass = masses[p]
            if mass == 0:
                raise ValueError(f"particle {p} has zero mass")
            if density == 0:
                raise ValueError(f"particle {p} has zero density")
            kinematic_viscosity = self.dynamic_viscosity / density
            position = positions[p]
            velocity = velocities[p]

            laplacian_x = laplacian_y = laplacian_z = 0.0
            for j in state.neighbors(position):
                density_j = densities[j]
                if density_j == 0:
                    raise ValueError(f"particle {j} has zero density")
                v_ij = velocity - velocities[j]
                x_ij = position - positions[j]
                distance = x_ij.magnitude()
                scale = (masses[j] / density_j) * (
                    v_ij.dot(x_ij) / (distance * distance + softening)
                )
                grad = state.grad_weight(j, position)
                laplacian_x += scale * grad.x
                laplacian_y += scale * grad.y
                laplacian_z += scale * grad.z

            factor = 2 * (_DIMENSIONS + 2) * mass * kinematic_viscosity / mass
            acceleration = accelerations[p]
            updated = type(acceleration)(
                acceleration.x + factor * laplacian_x,
                acceleration.y + factor * laplacian_y,
                acceleration.z + factor * laplacian_z,
            )
            if any(math.isnan(c) for c in updated):
                logger.warning("viscous acceleration of particle %d is NaN", p)
            accelerations[p] = updated