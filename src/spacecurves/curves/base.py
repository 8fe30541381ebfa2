"""Curve abstract class: the contract every parametric space curve fulfills."""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Tuple

from spacecurves.core.vectors import Point3D, Vector3D

from .errors import InvalidParameterError


def require_finite(name: str, value: Any) -> float:
    """Return *value* as a float, rejecting non-numeric and non-finite input.

    Raises:
        InvalidParameterError: If *value* is not a finite real number.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(
            f"{name} must be a real number, got {type(value).__name__}",
            parameter=name,
            value=value,
        )
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}", parameter=name, value=value)
    return value


@dataclass(frozen=True)
class CurveSample:
    """Position and tangent of one curve at one parameter value.

    Attributes:
        kind_name: Variant identifier of the sampled curve.
        t: Parameter value the curve was evaluated at.
        position: Point on the curve at ``t``.
        tangent: Analytic derivative of position at ``t`` (not normalized).
    """

    kind_name: str
    t: float
    position: Point3D
    tangent: Vector3D


class Curve(ABC):
    """Abstract base class for parametric space curves.

    Every curve must implement two methods:
    - position_at(): Point on the curve at parameter t
    - tangent_at(): First derivative of position with respect to t

    Curves are read-only after construction: variants store their parameters
    once through _init_fields() and every later assignment or deletion raises
    AttributeError, so a curve can be evaluated from any number of threads
    without locking.
    """

    __slots__ = ()

    kind: ClassVar[str] = ""
    """Stable human-readable identifier, overridden by each variant."""

    @property
    def kind_name(self) -> str:
        """Variant identifier ("Circle", "Ellipse", "Helix")."""
        return self.kind or self.__class__.__name__

    def _init_fields(self, **fields: float) -> None:
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name!r}")

    # --- Core interface (required) ---

    @abstractmethod
    def position_at(self, t: float) -> Point3D:
        """Calculate the 3D position at parameter t.

        Args:
            t: Any finite real parameter value.

        Returns:
            The point on the curve.

        Raises:
            InvalidParameterError: If t is not a finite real.
        """
        ...

    @abstractmethod
    def tangent_at(self, t: float) -> Vector3D:
        """Calculate the analytic derivative of position at parameter t.

        The result is not normalized; its magnitude is the speed of travel.

        Raises:
            InvalidParameterError: If t is not a finite real.
        """
        ...

    @abstractmethod
    def parameters(self) -> Tuple[float, ...]:
        """Constructor arguments in declaration order."""
        ...

    # --- Derived helpers ---

    def unit_tangent_at(self, t: float) -> Vector3D:
        """Normalized direction of travel at t."""
        return self.tangent_at(t).normalized()

    def speed_at(self, t: float) -> float:
        """Magnitude of the tangent vector at t."""
        return self.tangent_at(t).norm()

    def evaluate(self, t: float) -> CurveSample:
        """Sample position and tangent together at t."""
        t = require_finite("t", t)
        return CurveSample(
            kind_name=self.kind_name,
            t=t,
            position=self.position_at(t),
            tangent=self.tangent_at(t),
        )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.parameters() == other.parameters()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.parameters()))


__all__ = ["Curve", "CurveSample", "require_finite"]
