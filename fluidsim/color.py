"""Four-component float colours."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Iterator


@dataclass(frozen=True)
class Color:
    """An immutable RGBA colour with component-wise arithmetic."""

    red: float = 0.0
    green: float = 0.0
    blue: float = 0.0
    alpha: float = 0.0

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            object.__setattr__(self, name, float(getattr(self, name)))

    def __iter__(self) -> Iterator[float]:
        yield self.red
        yield self.green
        yield self.blue
        yield self.alpha

    def __getitem__(self, index: int) -> float:
        return (self.red, self.green, self.blue, self.alpha)[index]

    def _zip(self, other: Color, op) -> Color:
        return Color(*(op(a, b) for a, b in zip(self, other)))

    def __add__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return self._zip(other, lambda a, b: a + b)

    def __sub__(self, other: object) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return self._zip(other, lambda a, b: a - b)

    def __neg__(self) -> Color:
        return Color(*(-c for c in self))

    def __mul__(self, other: object) -> Color:
        if isinstance(other, Color):
            return self._zip(other, lambda a, b: a * b)
        if isinstance(other, Real):
            s = float(other)
            return Color(*(c * s for c in self))
        return NotImplemented

    def __rmul__(self, other: object) -> Color:
        if isinstance(other, Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other: object) -> Color:
        if isinstance(other, Color):
            return self._zip(other, lambda a, b: a / b)
        if isinstance(other, Real):
            s = float(other)
            return Color(*(c / s for c in self))
        return NotImplemented

    def __str__(self) -> str:
        return "Color(%g,%g,%g,%g)" % tuple(self)