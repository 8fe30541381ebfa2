"""Spacecurves curve variants.

Exposes the Curve base class, the built-in Circle, Ellipse and Helix
variants, the error hierarchy and the kind-name registry.

Usage:
    from spacecurves.curves import Circle, Helix

    helix = Helix(radius=2.0, step=1.0)
    point = helix.position_at(0.5)
"""

from spacecurves.curves.errors import CurveError, CurveTypeError, InvalidParameterError
from spacecurves.curves.base import Curve, CurveSample
from spacecurves.curves.circle import Circle
from spacecurves.curves.ellipse import Ellipse
from spacecurves.curves.helix import FULL_TURN, Helix
from spacecurves.curves.registry import CurveRegistry

__all__ = [
    # Base
    "Curve",
    "CurveSample",
    # Variants
    "Circle",
    "Ellipse",
    "Helix",
    "FULL_TURN",
    # Registry
    "CurveRegistry",
    # Errors
    "CurveError",
    "InvalidParameterError",
    "CurveTypeError",
]
