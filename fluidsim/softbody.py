"""Particle state with spring edges connecting pairs of particles."""

from __future__ import annotations

from dataclasses import dataclass

from fluidsim.state import DynamicalState


@dataclass(frozen=True)
class SoftEdge:
    """An edge between particles ``first`` and ``second`` with rest ``length``."""

    first: int
    second: int
    length: float


class SoftBodyState(DynamicalState):
    """Particles plus a list of edge slots; empty slots hold None."""

    def __init__(self, name: str = "SoftBodyDataNoName") -> None:
        super().__init__(name + "SoftBodyStateData")
        self._pairs: list[SoftEdge | None] = []

    def set_num_pairs(self, n: int) -> None:
        """Append ``n`` empty edge slots."""
        if n < 0:
            raise ValueError(f"cannot add a negative number of pairs: {n}")
        self._pairs.extend([None] * n)

    def add_pair(self, i: int, j: int, index: int) -> SoftEdge:
        """Connect particles ``i`` and ``j`` in slot ``index``, using their current distance."""
        if not 0 <= index < len(self._pairs):
            raise IndexError(f"pair slot {index} out of range")
        length = (self.positions[j] - self.positions[i]).magnitude()
        edge = SoftEdge(i, j, length)
        self._pairs[index] = edge
        return edge

    def clear_pairs(self) -> None:
        """Remove every edge slot."""
        self._pairs.clear()

    @property
    def pairs(self) -> tuple[SoftEdge | None, ...]:
        return tuple(self._pairs)