"""Reading vertices and triangles from Wavefront OBJ files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

from fluidsim.vector import Vector


@dataclass(frozen=True)
class Triangle:
    """A triangle with its three vertices and the edges v2-v1, v3-v1, v3-v2."""

    v1: Vector = field(default_factory=Vector)
    v2: Vector = field(default_factory=Vector)
    v3: Vector = field(default_factory=Vector)
    e1: Vector = field(init=False)
    e2: Vector = field(init=False)
    e3: Vector = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "e1", self.v2 - self.v1)
        object.__setattr__(self, "e2", self.v3 - self.v1)
        object.__setattr__(self, "e3", self.v3 - self.v2)


def _face_index(token: str, vertices: list[Vector]) -> int:
    index = int(token.split("/", 1)[0])
    if not 1 <= index <= len(vertices):
        raise ValueError(f"face refers to missing vertex {index}")
    return index - 1


def _parse(lines: Iterable[str]) -> tuple[list[Vector], list[Triangle]]:
    vertices: list[Vector] = []
    triangles: list[Triangle] = []
    for lineno, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        kind, args = tokens[0], tokens[1:]
        if kind == "v":
            if len(args) < 3:
                raise ValueError(f"line {lineno}: vertex needs three coordinates")
            vertices.append(Vector(float(args[0]), float(args[1]), float(args[2])))
        elif kind == "f":
            if len(args) < 3:
                raise ValueError(f"line {lineno}: face needs three vertices")
            i, j, k = (_face_index(t, vertices) for t in args[:3])
            triangles.append(Triangle(vertices[i], vertices[j], vertices[k]))
    return vertices, triangles


def _read(path: str | os.PathLike) -> tuple[list[Vector], list[Triangle]]:
    with open(path, encoding="utf-8") as handle:
        return _parse(handle)


def load_obj(path: str | os.PathLike) -> list[Triangle]:
    """Return the triangular faces of an OBJ file."""
    return _read(path)[1]


def load_obj_vertices(path: str | os.PathLike) -> list[Vector]:
    """Return the vertices of an OBJ file."""
    return _read(path)[0]