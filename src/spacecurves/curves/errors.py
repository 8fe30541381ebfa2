"""Curve error hierarchy."""

from __future__ import annotations

from typing import Any


class CurveError(Exception):
    """Base exception for curve-related errors."""

    pass


class InvalidParameterError(CurveError, ValueError):
    """Raised when a curve parameter or evaluation argument is not a finite real.

    Attributes:
        parameter: Name of the offending argument (e.g. ``"radius"``, ``"t"``).
        value: The rejected value.
    """

    def __init__(self, message: str, parameter: str = "", value: Any = None):
        self.parameter = parameter
        self.value = value
        super().__init__(message)


class CurveTypeError(CurveError, TypeError):
    """Raised when an object is narrowed to a curve type it does not have."""

    pass


__all__ = [
    "CurveError",
    "InvalidParameterError",
    "CurveTypeError",
]
