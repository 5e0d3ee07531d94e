from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

import numpy as np

from arrowgeom.geometry.point2d import Point2D
from arrowgeom.geometry.positional import PositionalVector2D
from arrowgeom.geometry.primitives import Circle
from arrowgeom.geometry.schema import SceneRequest, SettingsModel, SweepRequest
from arrowgeom.geometry.vector2d import Vector2D

logger = logging.getLogger(__name__)


def _point(p) -> Point2D:
    return Point2D(float(p.x), float(p.y))


def _vector(v) -> Vector2D:
    return Vector2D(float(v.x), float(v.y))


def frame_intercepts(pv: PositionalVector2D, width: float, height: float) -> List[Point2D]:
    """Forward intercepts of `pv` with the four edges of a ``width × height`` frame."""
    hits = [pv.intercept_x(x) for x in (0.0, width)]
    hits += [pv.intercept_y(y) for y in (0.0, height)]
    return [h for h in hits if h is not None]


def closest_point(anchor: Point2D, points: Iterable[Point2D]) -> Optional[Point2D]:
    points = list(points)
    if not points:
        return None
    d = np.array([anchor.distance(p) for p in points], dtype=float)
    return points[int(np.argmin(d))]


def _render(pv: PositionalVector2D, settings: SettingsModel) -> Dict:
    primitives = pv.as_segments(
        with_arrow_head=settings.arrow_head, marker_diameter=settings.origin_marker
    )

    hit = closest_point(pv.origin, frame_intercepts(pv, settings.width, settings.height))
    markers: List[Circle] = []
    if hit is not None:
        markers = [hit.as_circle(settings.hit_outer), hit.as_circle(settings.hit_inner)]
    else:
        logger.debug("No frame intercept for %r", pv)

    return {
        "vector": {
            "origin": list(pv.origin.as_tuple()),
            "vector": list(pv.vector.as_tuple()),
            "tip": list(pv.tip.as_tuple()),
        },
        "primitives": [p.to_dict() for p in primitives],
        "hit": None if hit is None else list(hit.as_tuple()),
        "markers": [m.to_dict() for m in markers],
    }


def _base_vector(origin, vector, settings: SettingsModel) -> PositionalVector2D:
    if origin is None:
        anchor = Point2D(settings.width / 2, settings.height / 2)
    else:
        anchor = _point(origin)
    return PositionalVector2D(anchor, _vector(vector))


def build_scene(req: SceneRequest) -> Dict:
    base = _base_vector(req.origin, req.vector, req.settings)
    pv = base.rotated(float(req.radians))
    out = _render(pv, req.settings)
    out["radians"] = float(req.radians)
    return out


def sweep(req: SweepRequest) -> Dict:
    base = _base_vector(req.origin, req.vector, req.settings)
    angles = np.linspace(req.angle_min, req.angle_max, int(req.steps))
    frames = []
    for a in angles:
        frame = _render(base.rotated(float(a)), req.settings)
        frame["radians"] = float(a)
        frames.append(frame)
    logger.info("Swept %d angles in [%g, %g]", len(frames), req.angle_min, req.angle_max)
    return {"frames": frames}
