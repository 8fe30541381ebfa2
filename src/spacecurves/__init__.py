"""Spacecurves — parametric space curves and a parallel-reducible aggregation pipeline.

Every curve answers the same three questions: where it is at parameter t,
which way (and how fast) it is moving there, and what kind of curve it is.
The pipeline evaluates a mixed collection, narrows it to one kind, sorts
it by a shape parameter and sums that parameter.

Quickstart:
    from spacecurves import Circle, CurveList, CurvePipeline, Ellipse, Helix

    curves = CurveList.build(Circle(5.0), Ellipse(3.0, 4.0), Helix(2.0, 1.0))
    result = CurvePipeline().run(curves)
    result.total_sum  # 5.0
"""

from spacecurves._version import __version__
from spacecurves.core import Point3D, Vector3D
from spacecurves.curves import (
    Circle,
    Curve,
    CurveError,
    CurveRegistry,
    CurveSample,
    CurveTypeError,
    Ellipse,
    Helix,
    InvalidParameterError,
)
from spacecurves.pipeline import (
    CurveList,
    CurvePipeline,
    PipelineConfig,
    PipelineResult,
    parallel_sum,
)

__all__ = [
    "__version__",
    # Vectors
    "Point3D",
    "Vector3D",
    # Curves
    "Curve",
    "CurveSample",
    "Circle",
    "Ellipse",
    "Helix",
    "CurveRegistry",
    # Pipeline
    "CurveList",
    "CurvePipeline",
    "PipelineConfig",
    "PipelineResult",
    "parallel_sum",
    # Errors
    "CurveError",
    "InvalidParameterError",
    "CurveTypeError",
]
