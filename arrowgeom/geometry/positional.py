from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Union

from arrowgeom.geometry.point2d import Point2D
from arrowgeom.geometry.primitives import Circle, Segment
from arrowgeom.geometry.vector2d import Vector2D

logger = logging.getLogger(__name__)

# Arrowhead proportions relative to the trunk.
HEAD_BASE_FRACTION = 0.9
HEAD_WING_FRACTION = 0.05
ORIGIN_MARKER_DIAMETER = 3.0


@dataclass
class PositionalVector2D:
    """A :class:`Vector2D` anchored at an origin point.

    Transformations return new instances. :meth:`set_magnitude` is the one
    exception and rewrites the owned vector in place.
    """

    origin: Point2D
    vector: Vector2D

    @classmethod
    def from_components(
        cls, origin_x: float, origin_y: float, vector_x: float, vector_y: float
    ) -> "PositionalVector2D":
        return cls(Point2D(origin_x, origin_y), Vector2D(vector_x, vector_y))

    @classmethod
    def from_points(cls, start: Point2D, end: Point2D) -> "PositionalVector2D":
        return cls(start, Vector2D(end.x - start.x, end.y - start.y))

    def __rmul__(self, k: float) -> "PositionalVector2D":
        return self.scaled(k)

    def __neg__(self) -> "PositionalVector2D":
        return self.negated()

    @property
    def tip(self) -> Point2D:
        return Point2D(self.origin.x + self.vector.x, self.origin.y + self.vector.y)

    @property
    def perpendicular(self) -> "PositionalVector2D":
        """Same origin, vector turned +90 degrees."""
        return PositionalVector2D(self.origin, self.vector.perpendicular())

    @property
    def magnitude(self) -> float:
        return self.vector.magnitude

    def set_magnitude(self, magnitude: float) -> None:
        self.vector.set_magnitude(magnitude)

    def with_magnitude(self, magnitude: float) -> "PositionalVector2D":
        return PositionalVector2D(self.origin, self.vector.with_magnitude(magnitude))

    def rotated(self, radians: float) -> "PositionalVector2D":
        """Rotate the vector about the origin. 2π is one full turn."""
        return PositionalVector2D(self.origin, self.vector.rotated(radians))

    def copy(
        self,
        origin_x: Optional[float] = None,
        origin_y: Optional[float] = None,
        vector_x: Optional[float] = None,
        vector_y: Optional[float] = None,
    ) -> "PositionalVector2D":
        return PositionalVector2D(
            self.origin.copy(x=origin_x, y=origin_y),
            self.vector.copy(x=vector_x, y=vector_y),
        )

    def scaled(self, k: float) -> "PositionalVector2D":
        return PositionalVector2D(self.origin, self.vector.scaled(k))

    def negated(self) -> "PositionalVector2D":
        return self.scaled(-1.0)

    def with_origin(self, origin: Point2D) -> "PositionalVector2D":
        return PositionalVector2D(origin, Vector2D(self.vector.x, self.vector.y))

    def intercept_x(self, target: float) -> Optional[Point2D]:
        """Point where the forward ray meets the vertical line ``x = target``.

        Returns None when the line is behind the origin or the vector is
        vertical.
        """
        dist = target - self.origin.x
        if self.vector.x == 0:
            logger.debug("Vertical vector %r against x=%s", self.vector, target)
            return None
        t = dist / self.vector.x
        if t < 0:
            return None
        y = self.origin.y + t * self.vector.y
        # crossing too far away to represent
        if not math.isfinite(y):
            return None
        return Point2D(target, y)

    def intercept_y(self, target: float) -> Optional[Point2D]:
        """Point where the forward ray meets the horizontal line ``y = target``."""
        dist = target - self.origin.y
        if self.vector.y == 0:
            logger.debug("Horizontal vector %r against y=%s", self.vector, target)
            return None
        t = dist / self.vector.y
        if t < 0:
            return None
        x = self.origin.x + t * self.vector.x
        if not math.isfinite(x):
            return None
        return Point2D(x, target)

    def arrow_head_segments(self) -> List[Segment]:
        """Two wings meeting at the tip, symmetric about the trunk."""
        tip = self.tip.as_tuple()
        head_base = self.scaled(HEAD_BASE_FRACTION).tip
        mini_perp = self.perpendicular.scaled(HEAD_WING_FRACTION).with_origin(head_base)
        return [
            Segment(mini_perp.tip.as_tuple(), tip),
            Segment(mini_perp.negated().tip.as_tuple(), tip),
        ]

    def as_segments(
        self, with_arrow_head: bool = True, marker_diameter: float = ORIGIN_MARKER_DIAMETER
    ) -> List[Union[Circle, Segment]]:
        """Origin marker, trunk, then the arrowhead wings if requested."""
        out: List[Union[Circle, Segment]] = [
            self.origin.as_circle(marker_diameter),
            Segment(self.origin.as_tuple(), self.tip.as_tuple()),
        ]
        if with_arrow_head:
            out.extend(self.arrow_head_segments())
        return out
