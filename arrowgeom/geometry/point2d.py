from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from arrowgeom.geometry.primitives import Circle


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def __add__(self, o: "Point2D") -> "Point2D":
        return Point2D(self.x + o.x, self.y + o.y)

    def distance(self, o: "Point2D") -> float:
        """Squared Euclidean distance to `o` (no square root is taken)."""
        dx = o.x - self.x
        dy = o.y - self.y
        return dx * dx + dy * dy

    def copy(self, x: Optional[float] = None, y: Optional[float] = None) -> "Point2D":
        return Point2D(self.x if x is None else x, self.y if y is None else y)

    def as_circle(self, diameter: float) -> Circle:
        return Circle(center=self.as_tuple(), diameter=diameter)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> "Point2D":
        if len(t) != 2:
            raise ValueError(f"expected an (x, y) pair, got {len(t)} values")
        return cls(float(t[0]), float(t[1]))
