"""Two-dimensional integer and real vectors and rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class IntVector2D:
    """Integer 2D vector."""

    x: int = 0
    y: int = 0

    def __isub__(self, other: IntVector2D) -> IntVector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass
class RealVector2D:
    """Real-valued 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: RealVector2D) -> RealVector2D:
        return RealVector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: RealVector2D) -> RealVector2D:
        return RealVector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> RealVector2D:
        return RealVector2D(self.x * factor, self.y * factor)

    def __truediv__(self, divisor: float) -> RealVector2D:
        return RealVector2D(self.x / divisor, self.y / divisor)

    def __iadd__(self, other: RealVector2D) -> RealVector2D:
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: RealVector2D) -> RealVector2D:
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, factor: float) -> RealVector2D:
        self.x *= factor
        self.y *= factor
        return self

    def __itruediv__(self, divisor: float) -> RealVector2D:
        self.x /= divisor
        self.y /= divisor
        return self


@dataclass
class RealRect:
    """Axis-aligned rectangle given by two corners."""

    top_left: RealVector2D = field(default_factory=RealVector2D)
    bottom_right: RealVector2D = field(default_factory=RealVector2D)