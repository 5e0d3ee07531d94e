"""Drawable primitives handed to the renderer.

Coordinates are plain ``(x, y)`` tuples in the same space as the geometry that
produced them. Styling (color, stroke width, fill) is left to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

XY = Tuple[float, float]


@dataclass(frozen=True)
class Segment:
    start: XY
    end: XY

    def to_dict(self) -> Dict:
        return {"kind": "segment", "start": list(self.start), "end": list(self.end)}


@dataclass(frozen=True)
class Circle:
    center: XY
    diameter: float

    def to_dict(self) -> Dict:
        return {"kind": "circle", "center": list(self.center), "diameter": self.diameter}
