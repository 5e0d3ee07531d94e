from __future__ import annotations

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _FiniteModel(BaseModel):
    # no inf/nan in any float field
    model_config = ConfigDict(allow_inf_nan=False)


class Point2DModel(_FiniteModel):
    x: float
    y: float


class Vector2DModel(_FiniteModel):
    x: float
    y: float


class SettingsModel(_FiniteModel):
    width: float = Field(default=200.0, gt=0.0, description="Frame width in scene units.")
    height: float = Field(default=200.0, gt=0.0, description="Frame height in scene units.")
    arrow_head: bool = True
    origin_marker: float = Field(default=3.0, ge=0.0, description="Diameter of the origin marker.")
    hit_outer: float = Field(default=25.0, ge=0.0, description="Outer ring diameter at the closest intercept.")
    hit_inner: float = Field(default=5.0, ge=0.0, description="Inner dot diameter at the closest intercept.")


class SceneRequest(_FiniteModel):
    # Defaults to the centre of the frame.
    origin: Optional[Point2DModel] = None
    vector: Vector2DModel = Field(default_factory=lambda: Vector2DModel(x=0.0, y=-30.0))
    radians: float = Field(default=0.0, description="Rotation applied to the vector (radians).")
    settings: SettingsModel = Field(default_factory=SettingsModel)


class SweepRequest(_FiniteModel):
    origin: Optional[Point2DModel] = None
    vector: Vector2DModel = Field(default_factory=lambda: Vector2DModel(x=0.0, y=-30.0))
    angle_min: float = 0.0
    angle_max: float = Field(default=4.0 * math.pi)
    steps: int = Field(default=60, ge=2, le=720)
    settings: SettingsModel = Field(default_factory=SettingsModel)

    @model_validator(mode="after")
    def _check_range(self) -> "SweepRequest":
        if self.angle_max < self.angle_min:
            raise ValueError("angle_max must not be smaller than angle_min")
        return self
