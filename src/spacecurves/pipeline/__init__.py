"""Spacecurves aggregation pipeline.

Builds on the curve interface to evaluate a heterogeneous collection,
narrow it to one variant, sort it by a shape parameter and reduce it.

Usage:
    from spacecurves.pipeline import CurveList, CurvePipeline

    result = CurvePipeline().run(curves)
    print(result.total_sum)
"""

from spacecurves.pipeline.config import PipelineConfig
from spacecurves.pipeline.collection import CurveList
from spacecurves.pipeline.reduce import parallel_sum, split_ranges
from spacecurves.pipeline.aggregation import (
    CurvePipeline,
    PipelineResult,
    evaluate_curves,
    select_kind,
    shape_parameter,
    sort_by_shape_parameter,
)

__all__ = [
    # Config
    "PipelineConfig",
    # Collection
    "CurveList",
    # Stages
    "evaluate_curves",
    "select_kind",
    "shape_parameter",
    "sort_by_shape_parameter",
    "parallel_sum",
    "split_ranges",
    # Pipeline
    "CurvePipeline",
    "PipelineResult",
]
