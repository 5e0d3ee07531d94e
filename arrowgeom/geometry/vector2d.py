from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from arrowgeom.geometry.point2d import Point2D

logger = logging.getLogger(__name__)

_ORIGIN = Point2D(0.0, 0.0)


def _sign(v: float) -> float:
    # -0.0 counts as positive
    return 1.0 if v >= 0.0 else -1.0


@dataclass
class Vector2D:
    """Free 2D displacement.

    Equality is exact component comparison. The only mutating operation is
    :meth:`set_magnitude`; everything else returns a new vector.
    """

    x: float
    y: float

    def __add__(self, o: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + o.x, self.y + o.y)

    def __mul__(self, s: float) -> "Vector2D":
        return self.scaled(s)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector2D":
        return self.negated()

    @property
    def magnitude(self) -> float:
        """Squared length, measured with :meth:`Point2D.distance` from the origin."""
        return _ORIGIN.distance(Point2D(self.x, self.y))

    @property
    def normalized(self) -> "Vector2D":
        """Components divided by :attr:`magnitude` (which is squared)."""
        m = self.magnitude
        if m == 0:
            return Vector2D(0.0, 0.0)
        return Vector2D(self.x / m, self.y / m)

    def set_magnitude(self, magnitude: float) -> None:
        """Rescale in place, see :meth:`with_magnitude`."""
        v = self.with_magnitude(magnitude)
        self.x = v.x
        self.y = v.y

    def with_magnitude(self, magnitude: float) -> "Vector2D":
        """Return a vector of true Euclidean length `magnitude`.

        The x:y ratio and the sign of each component are preserved, so the
        result solves ``ratio² y² + y² = m²`` with ``ratio = |x| / |y|``.
        Each component is taken as its share of ``hypot(x, y)``, which stays
        finite when the ratio itself would overflow.

        A vector with ``y == 0`` is rescaled along the x axis; the zero vector
        therefore ends up pointing along +x.
        """
        x_sign = _sign(self.x)
        y_sign = _sign(self.y)
        if self.y == 0:
            logger.debug("Rescaling %r with y == 0 along the x axis", self)
            return Vector2D(x_sign * magnitude, 0.0)

        h = math.hypot(self.x, self.y)
        new_x = (abs(self.x) / h) * magnitude
        new_y = (abs(self.y) / h) * magnitude
        return Vector2D(x_sign * new_x, y_sign * new_y)

    def copy(self, x: Optional[float] = None, y: Optional[float] = None) -> "Vector2D":
        return Vector2D(self.x if x is None else x, self.y if y is None else y)

    def scaled(self, k: float) -> "Vector2D":
        return Vector2D(self.x * k, self.y * k)

    def negated(self) -> "Vector2D":
        return self.scaled(-1.0)

    def dot(self, o: "Vector2D") -> float:
        return self.x * o.x + self.y * o.y

    def perpendicular(self) -> "Vector2D":
        return Vector2D(-self.y, self.x)

    def rotated(self, radians: float) -> "Vector2D":
        c = math.cos(radians)
        s = math.sin(radians)
        return Vector2D(self.x * c - self.y * s, self.x * s + self.y * c)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> "Vector2D":
        if len(t) != 2:
            raise ValueError(f"expected an (x, y) pair, got {len(t)} values")
        return cls(float(t[0]), float(t[1]))
