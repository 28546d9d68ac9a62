from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Vector:
    x: float = 0.0
    y: float = 0.0

    def __sub__(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def __truediv__(self, k: float) -> "Vector":
        return Vector(self.x / k, self.y / k)

    def magnitude(self) -> float: return math.hypot(self.x, self.y)

    @classmethod
    def of(cls, xy) -> "Vector":
        """Build from any (x, y) pair, e.g. a pygame window position."""
        x, y = xy
        return cls(float(x), float(y))
