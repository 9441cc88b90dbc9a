"""Integer 2D vectors used for grid positions and offsets."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2D:
    """An immutable pair of integer grid coordinates."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)