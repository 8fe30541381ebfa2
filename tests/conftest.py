"""Pytest configuration and shared fixtures for the spacecurves test suite."""

from __future__ import annotations

import math

import pytest

from spacecurves.curves import Circle, Ellipse, Helix
from spacecurves.pipeline import CurveList, PipelineConfig


REFERENCE_T0 = math.pi / 4


# ---------------------------------------------------------------------------
# Curves
# ---------------------------------------------------------------------------


@pytest.fixture
def circle():
    return Circle(5.0)


@pytest.fixture
def ellipse():
    return Ellipse(3.0, 4.0)


@pytest.fixture
def helix():
    return Helix(2.0, 1.0)


@pytest.fixture
def reference_curves(circle, ellipse, helix):
    """The reference scenario: one curve of each kind."""
    return CurveList.build(circle, ellipse, helix)


@pytest.fixture
def mixed_curves():
    """Several circles interleaved with other kinds, radii out of order."""
    return CurveList.build(
        Circle(3.0),
        Helix(10.0, 2.0),
        Circle(1.5),
        Ellipse(7.0, 2.0),
        Circle(4.25),
        Circle(1.5),
    )


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def parallel_config():
    """Config that always fans the reduction out to worker threads."""
    return PipelineConfig(max_workers=4, parallel_threshold=0)


@pytest.fixture(params=[-10.0, -math.pi, 0.0, 0.3, REFERENCE_T0, 1.0, 2.5, 7.0, 123.456])
def t(request):
    """A spread of parameter values, including negatives and several turns."""
    return request.param
