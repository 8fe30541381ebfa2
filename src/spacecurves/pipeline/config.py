"""Configuration for the curve aggregation pipeline."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_T0: float = math.pi / 4
"""Evaluation parameter used by the reference scenario."""

DEFAULT_PARALLEL_THRESHOLD: int = 4096
"""Index sizes below this are reduced on the calling thread."""


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for a CurvePipeline instance.

    Attributes:
        t0: Parameter value every curve is evaluated at.
        kind: Kind name of the variant selected for sorting and reduction.
        shape_key: Attribute of the selected variant used as sort and sum key.
        max_workers: Worker threads for the reduction. None lets the
            executor choose.
        parallel_threshold: Minimum index size before the reduction fans
            out to worker threads.
    """

    t0: float = DEFAULT_T0
    kind: str = "Circle"
    shape_key: str = "radius"
    max_workers: Optional[int] = None
    parallel_threshold: int = DEFAULT_PARALLEL_THRESHOLD

    def __post_init__(self) -> None:
        """Validate config parameters at construction time."""
        if not math.isfinite(self.t0):
            raise ValueError("t0 must be finite")
        if not self.kind:
            raise ValueError("kind must be a non-empty name")
        if not self.shape_key:
            raise ValueError("shape_key must be a non-empty attribute name")
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError("max_workers must be positive")
        if self.parallel_threshold < 0:
            raise ValueError("parallel_threshold must be non-negative")

    @classmethod
    def from_env(cls) -> PipelineConfig:
        """Build a config from environment variables, falling back to defaults.

        Environment variables:
            SPACECURVES_T0: Evaluation parameter (float)
            SPACECURVES_MAX_WORKERS: Reduction worker count (int)
            SPACECURVES_PARALLEL_THRESHOLD: Fan-out threshold (int)
        """
        t0 = os.getenv("SPACECURVES_T0")
        workers = os.getenv("SPACECURVES_MAX_WORKERS")
        threshold = os.getenv("SPACECURVES_PARALLEL_THRESHOLD")
        return cls(
            t0=float(t0) if t0 else DEFAULT_T0,
            max_workers=int(workers) if workers else None,
            parallel_threshold=int(threshold) if threshold else DEFAULT_PARALLEL_THRESHOLD,
        )


__all__ = ["PipelineConfig", "DEFAULT_T0", "DEFAULT_PARALLEL_THRESHOLD"]
