"""Curve registry for resolving variant classes by kind name.

Used when curves are requested or filtered by their human-readable name
rather than by class.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Type, Union

from .base import Curve

logger = logging.getLogger("spacecurves.curves")


class CurveRegistry:
    """Registry mapping kind names to curve classes.

    Supports the built-in variants and user-registered custom curves.
    """

    _curves: Dict[str, Type[Curve]] = {}

    @classmethod
    def register(cls, name: str, curve_class: type) -> None:
        """Register a curve class under *name*.

        Args:
            name: Kind name (e.g. ``"Circle"``).
            curve_class: The curve class (must inherit from Curve).
        """
        if not isinstance(curve_class, type) or not issubclass(curve_class, Curve):
            raise TypeError(f"{curve_class} must inherit from Curve")
        cls._curves[name] = curve_class
        logger.debug(f"Registered curve kind: {name}")

    @classmethod
    def get(cls, name: str) -> Type[Curve]:
        """Get a curve class by kind name.

        Raises:
            KeyError: If the name is not registered.
        """
        if name not in cls._curves:
            available = ", ".join(cls._curves.keys())
            raise KeyError(
                f"Unknown curve kind '{name}'. Available: {available}. "
                f"Register custom curves with CurveRegistry.register()."
            )
        return cls._curves[name]

    @classmethod
    def resolve(cls, kind: Union[str, Type[Curve]]) -> Type[Curve]:
        """Accept either a kind name or a Curve subclass and return the class."""
        if isinstance(kind, str):
            return cls.get(kind)
        if isinstance(kind, type) and issubclass(kind, Curve):
            return kind
        raise TypeError(f"Expected a kind name or Curve subclass, got {kind!r}")

    @classmethod
    def list_available(cls) -> List[str]:
        """List all registered kind names."""
        return list(cls._curves.keys())

    @classmethod
    def create(cls, name: str, *args: Any, **kwargs: Any) -> Curve:
        """Instantiate the curve registered as *name*."""
        return cls.get(name)(*args, **kwargs)


# ---------------------------------------------------------------------------
# Register built-in curves
# ---------------------------------------------------------------------------

from .circle import Circle  # noqa: E402
from .ellipse import Ellipse  # noqa: E402
from .helix import Helix  # noqa: E402

CurveRegistry.register("Circle", Circle)
CurveRegistry.register("Ellipse", Ellipse)
CurveRegistry.register("Helix", Helix)


__all__ = ["CurveRegistry"]
