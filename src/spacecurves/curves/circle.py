"""Circle in the XY plane, centred on the origin.

    r(t)  = (R cos t, R sin t, 0)
    r'(t) = (-R sin t, R cos t, 0)
"""

from __future__ import annotations

import math
from typing import Tuple

from spacecurves.core.vectors import Point3D, Vector3D

from .base import Curve, require_finite


class Circle(Curve):
    """Circle of constant radius. The radius is the shape parameter used for sorting."""

    kind = "Circle"

    __slots__ = ("_radius",)

    def __init__(self, radius: float) -> None:
        self._init_fields(_radius=require_finite("radius", radius))

    @property
    def radius(self) -> float:
        """Distance from the origin, the shape parameter used for sorting."""
        return self._radius

    def position_at(self, t: float) -> Point3D:
        t = require_finite("t", t)
        return Point3D(self._radius * math.cos(t), self._radius * math.sin(t), 0.0)

    def tangent_at(self, t: float) -> Vector3D:
        t = require_finite("t", t)
        return Vector3D(-self._radius * math.sin(t), self._radius * math.cos(t), 0.0)

    def parameters(self) -> Tuple[float, ...]:
        """Constructor arguments: ``(radius,)``."""
        return (self._radius,)

    def __repr__(self) -> str:
        return f"Circle(radius={self._radius})"
