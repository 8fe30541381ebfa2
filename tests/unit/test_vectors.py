"""Tests for spacecurves.core.vectors — Point3D and Vector3D."""

from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import pytest

from spacecurves.core.vectors import Point3D, Vector3D


class TestVector3D:
    def test_fields(self):
        v = Vector3D(1.0, 2.0, 3.0)
        assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)

    def test_frozen(self):
        v = Vector3D(1.0, 2.0, 3.0)
        with pytest.raises(FrozenInstanceError):
            v.x = 9.0  # type: ignore[misc]

    def test_iter_and_as_tuple(self):
        v = Vector3D(1.0, -2.0, 0.5)
        assert tuple(v) == (1.0, -2.0, 0.5)
        assert v.as_tuple() == (1.0, -2.0, 0.5)

    def test_arithmetic(self):
        a = Vector3D(1.0, 2.0, 3.0)
        b = Vector3D(0.5, -1.0, 2.0)
        assert a + b == Vector3D(1.5, 1.0, 5.0)
        assert a - b == Vector3D(0.5, 3.0, 1.0)
        assert a * 2 == Vector3D(2.0, 4.0, 6.0)
        assert 2 * a == Vector3D(2.0, 4.0, 6.0)
        assert -a == Vector3D(-1.0, -2.0, -3.0)

    def test_vector_times_vector_is_type_error(self):
        with pytest.raises(TypeError):
            Vector3D(1.0, 2.0, 3.0) * Vector3D(1.0, 1.0, 1.0)  # type: ignore[operator]

    def test_non_scalar_multipliers_rejected(self):
        v = Vector3D(1.0, 2.0, 3.0)
        for other in ("2", None, True, 1 + 2j):
            with pytest.raises(TypeError):
                v * other  # type: ignore[operator]

    def test_int_scalar(self):
        assert Vector3D(1.0, 2.0, 3.0) * 3 == Vector3D(3.0, 6.0, 9.0)

    def test_dot(self):
        assert Vector3D(1.0, 2.0, 3.0).dot(Vector3D(4.0, -5.0, 6.0)) == 12.0

    def test_cross_of_axes(self):
        x = Vector3D(1.0, 0.0, 0.0)
        y = Vector3D(0.0, 1.0, 0.0)
        assert x.cross(y) == Vector3D(0.0, 0.0, 1.0)
        assert y.cross(x) == Vector3D(0.0, 0.0, -1.0)

    def test_norm(self):
        assert Vector3D(3.0, 4.0, 12.0).norm() == 13.0

    def test_normalized(self):
        u = Vector3D(0.0, 3.0, 4.0).normalized()
        assert math.isclose(u.norm(), 1.0)
        assert math.isclose(u.y, 0.6)
        assert math.isclose(u.z, 0.8)

    def test_zero_normalizes_to_zero(self):
        assert Vector3D(0.0, 0.0, 0.0).normalized() == Vector3D(0.0, 0.0, 0.0)


class TestPoint3D:
    def test_frozen(self):
        p = Point3D(1.0, 2.0, 3.0)
        with pytest.raises(FrozenInstanceError):
            p.z = 0.0  # type: ignore[misc]

    def test_difference_is_vector(self):
        d = Point3D(4.0, 6.0, 8.0) - Point3D(1.0, 2.0, 3.0)
        assert isinstance(d, Vector3D)
        assert d == Vector3D(3.0, 4.0, 5.0)

    def test_offset_by_vector(self):
        assert Point3D(1.0, 1.0, 1.0) + Vector3D(1.0, 0.0, -1.0) == Point3D(2.0, 1.0, 0.0)

    def test_points_do_not_add(self):
        with pytest.raises(TypeError):
            Point3D(1.0, 1.0, 1.0) + Point3D(1.0, 1.0, 1.0)  # type: ignore[operator]

    def test_distance_to(self):
        assert Point3D(0.0, 0.0, 0.0).distance_to(Point3D(2.0, 3.0, 6.0)) == 7.0

    def test_to_vector(self):
        assert Point3D(1.0, 2.0, 3.0).to_vector() == Vector3D(1.0, 2.0, 3.0)
