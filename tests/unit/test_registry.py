"""Tests for CurveRegistry."""

from __future__ import annotations

import pytest

from spacecurves.curves import Circle, Ellipse, Helix
from spacecurves.curves.base import Curve
from spacecurves.curves.registry import CurveRegistry
from spacecurves.core.vectors import Point3D, Vector3D


# ---------------------------------------------------------------------------
# Concrete test curve
# ---------------------------------------------------------------------------


class _Line(Curve):
    kind = "Line"

    def position_at(self, t):
        return Point3D(t, 0.0, 0.0)

    def tangent_at(self, t):
        return Vector3D(1.0, 0.0, 0.0)

    def parameters(self):
        return ()


class _NotACurve:
    """Not a Curve subclass, so registration must fail."""
    pass


# ---------------------------------------------------------------------------
# Fixtures to isolate registry state
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_registry():
    """Save and restore registry state around each test."""
    original = CurveRegistry._curves.copy()
    yield
    CurveRegistry._curves = original


# ---------------------------------------------------------------------------
# Built-ins
# ---------------------------------------------------------------------------


class TestBuiltins:
    def test_builtins_registered(self):
        assert CurveRegistry.list_available() == ["Circle", "Ellipse", "Helix"]

    def test_get_builtin(self):
        assert CurveRegistry.get("Circle") is Circle
        assert CurveRegistry.get("Ellipse") is Ellipse
        assert CurveRegistry.get("Helix") is Helix

    def test_registered_names_match_kind_names(self):
        for name in CurveRegistry.list_available():
            assert CurveRegistry.get(name).kind == name


# ---------------------------------------------------------------------------
# register() / get()
# ---------------------------------------------------------------------------


class TestRegister:
    def test_register_custom_curve(self):
        CurveRegistry.register("Line", _Line)
        assert CurveRegistry.get("Line") is _Line
        assert "Line" in CurveRegistry.list_available()

    def test_register_rejects_non_curve(self):
        with pytest.raises(TypeError, match="must inherit from Curve"):
            CurveRegistry.register("bad", _NotACurve)

    def test_register_rejects_instance(self):
        with pytest.raises(TypeError, match="must inherit from Curve"):
            CurveRegistry.register("bad", Circle(1.0))  # type: ignore[arg-type]

    def test_get_unknown_lists_available(self):
        with pytest.raises(KeyError, match="Unknown curve kind 'Spiral'.*Circle"):
            CurveRegistry.get("Spiral")


# ---------------------------------------------------------------------------
# resolve() / create()
# ---------------------------------------------------------------------------


class TestResolveAndCreate:
    def test_resolve_name(self):
        assert CurveRegistry.resolve("Helix") is Helix

    def test_resolve_class(self):
        assert CurveRegistry.resolve(Circle) is Circle

    def test_resolve_rejects_other(self):
        with pytest.raises(TypeError, match="Expected a kind name or Curve subclass"):
            CurveRegistry.resolve(42)  # type: ignore[arg-type]

    def test_create_positional(self):
        assert CurveRegistry.create("Ellipse", 3.0, 4.0) == Ellipse(3.0, 4.0)

    def test_create_keyword(self):
        assert CurveRegistry.create("Helix", radius=2.0, step=1.0) == Helix(2.0, 1.0)
