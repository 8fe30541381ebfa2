"""Axis-aligned ellipse in the XY plane, centred on the origin.

    r(t)  = (Rx cos t, Ry sin t, 0)
    r'(t) = (-Rx sin t, Ry cos t, 0)

With Rx == Ry the ellipse coincides with a Circle of that radius.
"""

from __future__ import annotations

import math
from typing import Tuple

from spacecurves.core.vectors import Point3D, Vector3D

from .base import Curve, require_finite


class Ellipse(Curve):
    """Ellipse with independent semi-axes along X and Y."""

    kind = "Ellipse"

    __slots__ = ("_radius_x", "_radius_y")

    def __init__(self, radius_x: float, radius_y: float) -> None:
        self._init_fields(
            _radius_x=require_finite("radius_x", radius_x),
            _radius_y=require_finite("radius_y", radius_y),
        )

    @property
    def radius_x(self) -> float:
        """Semi-axis along X."""
        return self._radius_x

    @property
    def radius_y(self) -> float:
        """Semi-axis along Y."""
        return self._radius_y

    @property
    def radii(self) -> Tuple[float, float]:
        """Both semi-axes as ``(radius_x, radius_y)``."""
        return (self._radius_x, self._radius_y)

    def position_at(self, t: float) -> Point3D:
        t = require_finite("t", t)
        return Point3D(self._radius_x * math.cos(t), self._radius_y * math.sin(t), 0.0)

    def tangent_at(self, t: float) -> Vector3D:
        t = require_finite("t", t)
        return Vector3D(-self._radius_x * math.sin(t), self._radius_y * math.cos(t), 0.0)

    def parameters(self) -> Tuple[float, ...]:
        """Constructor arguments: ``(radius_x, radius_y)``."""
        return (self._radius_x, self._radius_y)

    def __repr__(self) -> str:
        return f"Ellipse(radius_x={self._radius_x}, radius_y={self._radius_y})"
