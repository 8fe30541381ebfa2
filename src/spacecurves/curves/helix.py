"""Circular helix around the Z axis — parametric 3D spiral of constant radius.

Mathematical Foundation:
    Position vector r(t) = (R cos(t), R sin(t), z(t))
    Parameter t is the rotation angle in radians and may be any finite real.
    Height z(t) = step * t / (2*pi)  -- rises by exactly `step` per full turn
    Derivative r'(t) = (-R sin(t), R cos(t), step / (2*pi))
"""

from __future__ import annotations

import math
from typing import Tuple

from spacecurves.core.vectors import Point3D, Vector3D

from .base import Curve, require_finite

FULL_TURN: float = 2.0 * math.pi
"""Parameter increment for one complete revolution."""


class Helix(Curve):
    """Constant-radius helix rising `step` units along Z per revolution."""

    kind = "Helix"

    __slots__ = ("_radius", "_step")

    def __init__(self, radius: float, step: float) -> None:
        """Initialize helix with geometric parameters.

        Args:
            radius: Distance from the Z axis.
            step: Vertical rise per full turn. Negative values descend.

        Raises:
            InvalidParameterError: If either argument is not a finite real.
        """
        self._init_fields(
            _radius=require_finite("radius", radius),
            _step=require_finite("step", step),
        )

    @property
    def radius(self) -> float:
        """Radial distance from the helix axis."""
        return self._radius

    @property
    def step(self) -> float:
        """Rise along Z for one full turn."""
        return self._step

    @property
    def rise_per_radian(self) -> float:
        """Rise along Z per unit of t, i.e. dz/dt."""
        return self._step / FULL_TURN

    def position_at(self, t: float) -> Point3D:
        """Calculate 3D position along the helix.

        Parametric equations:
            x(t) = radius * cos(t)
            y(t) = radius * sin(t)
            z(t) = step * t / (2*pi)
        """
        t = require_finite("t", t)

        x = self._radius * math.cos(t)
        y = self._radius * math.sin(t)
        z = self._step * t / FULL_TURN

        return Point3D(x, y, z)

    def tangent_at(self, t: float) -> Vector3D:
        """Analytic derivative of position_at(); the Z component is constant."""
        t = require_finite("t", t)

        dx = -self._radius * math.sin(t)
        dy = self._radius * math.cos(t)
        dz = self.rise_per_radian

        return Vector3D(dx, dy, dz)

    def parameters(self) -> Tuple[float, ...]:
        """Constructor arguments: ``(radius, step)``."""
        return (self._radius, self._step)

    def __repr__(self) -> str:
        return f"Helix(radius={self._radius}, step={self._step})"
