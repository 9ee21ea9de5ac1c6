"""Smoothed-particle hydrodynamics state with cubic-spline kernel and grid search."""

from __future__ import annotations

import logging
import math
from collections import defaultdict
from itertools import product

from fluidsim.state import DynamicalState
from fluidsim.vector import AABB, Vector

logger = logging.getLogger(__name__)

_Cell = tuple[int, int, int]


def _particle_volume(kernel_radius: float) -> float:
    diameter = 2.0 * (kernel_radius / 4.0)
    return 0.8 * diameter ** 3


class SPHState(DynamicalState):
    """Fluid particles with density-related attributes and a neighbour grid."""

    def __init__(self, bounds: AABB, h: float, name: str = "SPHDataNoName") -> None:
        super().__init__(name + "SPHStateData")
        self.bounds = bounds
        self._radius = float(h)
        self._density0 = 1000.0
        self.eps = 1.0e-5
        self._max_error = 0.1
        self._m_max_error = 0.01
        self._max_iter = 100
        self.dd_clamp = True
        self.use_user_dt = False
        self.neighbor_parallel = False
        self._grid: dict[_Cell, list[int]] = {}

        for attr_name in ("density", "predicted_density", "density_derivative",
                          "pressure", "divergence", "factor", "k_i", "kv_i"):
            self.create_attr(attr_name, 0.0)
        self.create_attr("volume", _particle_volume(self._radius))
        self.create_attr("pressure_acc", Vector())

    @property
    def radius(self) -> float:
        """Kernel support radius."""
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = float(value)
        volumes = self.attr("volume")
        volume = _particle_volume(self._radius)
        volumes.default = volume
        for p in range(len(self)):
            volumes[p] = volume
        self._grid = {}

    @property
    def particle_radius(self) -> float:
        return self._radius / 4.0

    @property
    def density0(self) -> float:
        """Rest density; setting zero gives one."""
        return self._density0

    @density0.setter
    def density0(self, value: float) -> None:
        self._density0 = 1.0 if value == 0 else float(value)

    @property
    def max_iter(self) -> int:
        """Solver iteration limit, at least two."""
        return self._max_iter

    @max_iter.setter
    def max_iter(self, value: int) -> None:
        self._max_iter = max(int(value), 2)

    @property
    def max_error(self) -> float:
        """Divergence error tolerance, at least 0.1."""
        return self._max_error

    @max_error.setter
    def max_error(self, value: float) -> None:
        self._max_error = max(float(value), 0.1)

    @property
    def m_max_error(self) -> float:
        """Density error tolerance, at least 0.01."""
        return self._m_max_error

    @m_max_error.setter
    def m_max_error(self, value: float) -> None:
        self._m_max_error = max(float(value), 0.01)

    def weight(self, p: int, point: Vector) -> float:
        """Cubic spline kernel between particle ``p`` and ``point``."""
        x = (point - self.positions[p]).magnitude()
        h = self._radius
        m_k = 8.0 / (math.pi * h ** 3)
        q = x / h
        if q > 1.0:
            return 0.0
        if q <= 0.5:
            return m_k * (6.0 * q ** 3 - 6.0 * q * q + 1.0)
        return m_k * 2.0 * (1.0 - q) ** 3

    def grad_weight(self, p: int, point: Vector) -> Vector:
        """Gradient of the kernel with respect to ``point``."""
        diff = point - self.positions[p]
        x = diff.magnitude()
        h = self._radius
        q = x / h
        if x <= 1.0e-9 or q > 1.0:
            return Vector()
        m_l = 48.0 / (math.pi * h ** 3)
        gradq = diff / x / h
        if q <= 0.5:
            return gradq * (m_l * q * (3.0 * q - 2.0))
        return gradq * (m_l * -((1.0 - q) ** 2))

    def _cell(self, point: Vector) -> _Cell:
        h = self._radius
        return (math.floor(point.x / h), math.floor(point.y / h), math.floor(point.z / h))

    def populate(self) -> None:
        """Rebuild the neighbour grid from current positions."""
        grid: dict[_Cell, list[int]] = defaultdict(list)
        for p, position in enumerate(self.positions):
            grid[self._cell(position)].append(p)
        self._grid = dict(grid)

    def neighbors(self, point: Vector) -> list[int]:
        """Indices of particles within the kernel radius of ``point``, from the last populate."""
        cx, cy, cz = self._cell(point)
        found: list[int] = []
        for dx, dy, dz in product((-1, 0, 1), repeat=3):
            found.extend(self._grid.get((cx + dx, cy + dy, cz + dz), ()))
        h = self._radius
        return sorted(p for p in found
                      if p < len(self) and (point - self.positions[p]).magnitude() <= h)

    def compute_density(self) -> None:
        """Set each particle's density from its neighbours."""
        volumes = self.attr("volume")
        densities = self.attr("density")
        for p, position in enumerate(self.positions):
            total = sum(volumes[j] * self.weight(j, position) for j in self.neighbors(position))
            densities[p] = total * self._density0

    def _velocity_divergence(self, p: int) -> float:
        position = self.positions[p]
        velocity = self.velocities[p]
        return sum((velocity - self.velocities[j]).dot(self.grad_weight(j, position))
                   for j in self.neighbors(position))

    def compute_predicted_density(self, p: int, dt: float) -> float:
        """Predict the density of ``p`` after ``dt`` from the current velocities."""
        change = self._velocity_divergence(p) * self.attr("volume")[p] * self._density0
        predicted = self.attr("density")[p] + dt * change
        self.attr("predicted_density")[p] = predicted
        return predicted

    def compute_density_derivative(self, p: int) -> float:
        """Set the rate of density change of ``p``."""
        change = self._velocity_divergence(p) * self.masses[p]
        if not math.isfinite(change):
            logger.warning("density derivative of particle %d is not finite", p)
        self.attr("density_derivative")[p] = change
        return change

    def compute_factor(self) -> None:
        """Set the pressure solve factor of every particle."""
        volumes = self.attr("volume")
        factors = self.attr("factor")
        for p, position in enumerate(self.positions):
            sum_sq = 0.0
            grad_i = Vector()
            for j in self.neighbors(position):
                grad_j = self.grad_weight(j, position) * (volumes[j] * self._density0)
                sum_sq += grad_j.dot(grad_j)
                grad_i = grad_i + grad_j
            sum_sq += grad_i.dot(grad_i)
            factor = 1.0 / sum_sq if sum_sq > self.eps else 0.0
            factors[p] = factor

    def max_velocity(self) -> float:
        """Largest particle speed, zero when there are no particles."""
        return max((v.magnitude() for v in self.velocities), default=0.0)