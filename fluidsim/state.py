"""Particle state stored as named per-particle attributes."""

from __future__ import annotations

from typing import Any, Iterator

from fluidsim.color import Color
from fluidsim.vector import Vector

POSITION = "pos"
VELOCITY = "vel"
ACCELERATION = "accel"
MASS = "mass"
RADIUS = "radius"
ID = "id"
COLOR = "ci"


class Attribute:
    """One named per-particle value with a default used for new particles."""

    def __init__(self, name: str, default: Any) -> None:
        self.name = name
        self.default = default
        self._data: list[Any] = []

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __setitem__(self, index: int, value: Any) -> None:
        self._data[index] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def expand_to(self, n: int) -> None:
        """Grow to ``n`` entries, filling new ones with the default; never shrinks."""
        if len(self._data) < n:
            self._data.extend([self.default] * (n - len(self._data)))

    def erase(self, index: int) -> Any:
        """Remove the entry at ``index`` and return it; raises IndexError if out of range."""
        size = len(self._data)
        if not -size <= index < size:
            raise IndexError(
                f"attribute {self.name!r} has no entry {index} (size {size})"
            )
        return self._data.pop(index)

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, size={len(self._data)})"


class DynamicalState:
    """A set of particles, each carrying the same named attributes."""

    def __init__(self, name: str = "DynamicDataNoName") -> None:
        self.name = name
        self.time = 0.0
        self._count = 0
        self._attributes: dict[str, Attribute] = {}
        self.create_attr(POSITION, Vector())
        self.create_attr(VELOCITY, Vector())
        self.create_attr(ACCELERATION, Vector())
        self.create_attr(MASS, 1.0)
        self.create_attr(RADIUS, 1.0)
        self.create_attr(ID, 0)
        self.create_attr(COLOR, Color(1.0, 1.0, 1.0, 1.0))

    def create_attr(self, name: str, default: Any) -> Attribute:
        """Create (or replace) an attribute filled with ``default`` for every particle."""
        attribute = Attribute(name, default)
        attribute.expand_to(self._count)
        self._attributes[name] = attribute
        return attribute

    def attr(self, name: str) -> Attribute:
        """Return the attribute called ``name``; raises KeyError if there is none."""
        try:
            return self._attributes[name]
        except KeyError:
            raise KeyError(f"no attribute named {name!r}") from None

    def add(self, count: int = 1) -> int:
        """Add ``count`` particles with default values and return the new total."""
        if count < 0:
            raise ValueError(f"cannot add a negative number of particles: {count}")
        self._count += count
        for attribute in self._attributes.values():
            attribute.expand_to(self._count)
        return self._count

    def clear(self) -> None:
        """Remove every particle, keeping the attribute definitions."""
        self._count = 0
        for attribute in self._attributes.values():
            attribute.clear()

    def __len__(self) -> int:
        return self._count

    @property
    def positions(self) -> Attribute:
        return self._attributes[POSITION]

    @property
    def velocities(self) -> Attribute:
        return self._attributes[VELOCITY]

    @property
    def accelerations(self) -> Attribute:
        return self._attributes[ACCELERATION]

    @property
    def masses(self) -> Attribute:
        return self._attributes[MASS]

    @property
    def radii(self) -> Attribute:
        return self._attributes[RADIUS]

    @property
    def ids(self) -> Attribute:
        return self._attributes[ID]

    @property
    def colors(self) -> Attribute:
        return self._attributes[COLOR]