"""Evaluate → filter → sort → reduce pipeline over a heterogeneous curve list.

The pipeline only talks to curves through the Curve interface. Narrowing to
one variant happens in :func:`select_kind` by exact type match; the shape
parameter is read by attribute name and checked before use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Type, Union

from spacecurves.curves.base import Curve, CurveSample, require_finite
from spacecurves.curves.errors import CurveTypeError
from spacecurves.curves.registry import CurveRegistry

from .config import PipelineConfig
from .reduce import parallel_sum

logger = logging.getLogger("spacecurves.pipeline")


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def evaluate_curves(curves: Iterable[Curve], t: float) -> List[CurveSample]:
    """Sample every curve at *t*, preserving input order."""
    t = require_finite("t", t)
    return [curve.evaluate(t) for curve in curves]


def select_kind(curves: Iterable[Curve], kind: Union[str, Type[Curve]]) -> List[Curve]:
    """Keep only curves whose exact type is *kind*, preserving relative order.

    A Helix has a radius too, but is never selected when *kind* is Circle.
    """
    curve_class = CurveRegistry.resolve(kind)
    return [curve for curve in curves if type(curve) is curve_class]


def shape_parameter(curve: Curve, key: str) -> float:
    """Read the shape parameter *key* from *curve*.

    Raises:
        CurveTypeError: If the curve has no such attribute or it is not a real number.
    """
    try:
        value = getattr(curve, key)
    except AttributeError:
        raise CurveTypeError(f"{curve.kind_name} has no shape parameter {key!r}") from None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise CurveTypeError(
            f"{curve.kind_name} shape parameter {key!r} is not a real number: {value!r}"
        ) from None


def sort_by_shape_parameter(index: Iterable[Curve], key: str = "radius") -> List[Curve]:
    """Order *index* ascending by its shape parameter. Tie order is unspecified."""
    return sorted(index, key=lambda curve: shape_parameter(curve, key))


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of a pipeline run.

    Attributes:
        report: One sample per input curve, in input order.
        index: Selected curves sorted ascending by shape parameter.
        total_sum: Sum of the shape parameters of ``index``.
    """

    report: Tuple[CurveSample, ...]
    index: Tuple[Curve, ...]
    total_sum: float

    @property
    def kind_names(self) -> List[str]:
        return [sample.kind_name for sample in self.report]


class CurvePipeline:
    """Runs the evaluate/filter/sort/reduce stages with a shared config.

    Example::

        pipeline = CurvePipeline()
        result = pipeline.run(CurveList.build(Circle(5.0), Helix(2.0, 1.0)))
        result.total_sum  # 5.0
    """

    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        self._config = config or PipelineConfig()
        self._kind = CurveRegistry.resolve(self._config.kind)

    @property
    def config(self) -> PipelineConfig:
        return self._config

    def run(self, curves: Sequence[Curve], t0: Optional[float] = None) -> PipelineResult:
        """Run every stage over *curves*.

        Args:
            curves: Ordered curve collection, typically a CurveList.
            t0: Evaluation parameter. Falls back to ``config.t0``.

        Returns:
            PipelineResult. Empty input yields an empty report and 0.0.
        """
        t = self._config.t0 if t0 is None else t0
        key = self._config.shape_key

        report = evaluate_curves(curves, t)
        selected = select_kind(curves, self._kind)
        index = sort_by_shape_parameter(selected, key)
        total = self.reduce(index)

        logger.debug(
            f"Pipeline evaluated {len(report)} curves, selected {len(index)} "
            f"{self._kind.kind}, total {key}={total}"
        )
        return PipelineResult(report=tuple(report), index=tuple(index), total_sum=total)

    def reduce(self, index: Sequence[Curve]) -> float:
        """Sum the configured shape parameter over *index*."""
        values = [shape_parameter(curve, self._config.shape_key) for curve in index]
        return parallel_sum(
            values,
            max_workers=self._config.max_workers,
            threshold=self._config.parallel_threshold,
        )


__all__ = [
    "CurvePipeline",
    "PipelineResult",
    "evaluate_curves",
    "select_kind",
    "shape_parameter",
    "sort_by_shape_parameter",
]
