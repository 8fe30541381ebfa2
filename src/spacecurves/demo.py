"""Reference driver: evaluate one curve of each kind and sum the circle radii.

Run with ``python -m spacecurves`` or the ``spacecurves-demo`` script.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import List, Optional, Sequence

from spacecurves.curves import Circle, Ellipse, Helix
from spacecurves.pipeline import CurveList, CurvePipeline, PipelineConfig, PipelineResult


def reference_curves() -> CurveList:
    """One instance of each built-in variant."""
    return CurveList.build(Circle(5.0), Ellipse(3.0, 4.0), Helix(2.0, 1.0))


def _fmt(values: Sequence[float]) -> str:
    return ", ".join(f"{v:g}" for v in values)


def format_report(result: PipelineResult) -> str:
    """Render a pipeline result as console text."""
    lines: List[str] = []
    for sample in result.report:
        lines.append(f"Curve: {sample.kind_name}")
        lines.append(f"Point: ({_fmt(sample.position)})")
        lines.append(f"Derivative: ({_fmt(sample.tangent)})")
        lines.append("")
    lines.append(f"Total sum of radii: {result.total_sum:g}")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacecurves",
        description="Evaluate a circle, an ellipse and a helix, then sum the circle radii.",
    )
    parser.add_argument("--t0", type=float, default=None, help="evaluation parameter (default: pi/4)")
    parser.add_argument("--workers", type=int, default=None, help="worker threads for the reduction")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.workers is not None and args.workers < 1:
        parser.error("--workers must be a positive integer")
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")

    config = PipelineConfig.from_env()
    if args.workers is not None:
        config = dataclasses.replace(config, max_workers=args.workers)

    result = CurvePipeline(config).run(reference_curves(), t0=args.t0)
    print(format_report(result))
    return 0
