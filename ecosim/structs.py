"""Small value types shared by the simulation: vectors, colours and food."""

from __future__ import annotations

import math
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector2D:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: Vector2D) -> float:
        """Euclidean distance to another vector."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __add__(self, other: object) -> Vector2D:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return Vector2D(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: object) -> Vector2D:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2D(self.x * scalar, self.y * scalar)

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels; white by default."""

    r: int = 255
    g: int = 255
    b: int = 255
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range 0-255: {channel!r}")

    @classmethod
    def red(cls) -> Color:
        return cls(255, 0, 0)

    @classmethod
    def green(cls) -> Color:
        return cls(0, 255, 0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0, 0, 255)

    @classmethod
    def yellow(cls) -> Color:
        return cls(255, 255, 0)


@dataclass
class Food:
    """A food item lying in the world."""

    position: Vector2D
    energy_value: float = 25.0
    color: Color = field(default_factory=Color.green)