"""Vertex record as laid out in a vertex buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from zenengine.vectors import Vector2, Vector3


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex with position, texture coordinate and normal."""

    position: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))
    texture: Vector2 = field(default_factory=lambda: Vector2(0, 0))
    normal: Vector3 = field(default_factory=lambda: Vector3(0, 0, 0))

    def as_floats(self) -> Tuple[float, ...]:
        """Return position, texture and normal as eight interleaved floats."""
        return tuple(
            float(value) for part in (self.position, self.texture, self.normal) for value in part
        )