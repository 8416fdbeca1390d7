"""Basic value types: 2D/3D vectors, colours and mesh vertices."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """A 2D vector, used mainly for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vector3:
    """A 3D vector, used for positions and normals."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def as_tuple(self) -> tuple[float, float, float]:
        """Return the components as an ``(x, y, z)`` tuple."""
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Color:
    """An RGBA colour; opaque white by default."""

    r: float = 1.0
    g: float = 1.0
    b: float = 1.0
    a: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex: position, normal and texture coordinates."""

    position: Vector3 = field(default_factory=Vector3)
    normal: Vector3 = field(default_factory=Vector3)
    tex_coords: Vector2 = field(default_factory=Vector2)

    def flatten(self) -> tuple[float, ...]:
        """Return the eight floats in buffer order: position, normal, UV."""
        return (*self.position, *self.normal, *self.tex_coords)