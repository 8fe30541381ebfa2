"""Spacecurves core value types.

Exports the 3D point and vector types produced by curve evaluation.
"""

from spacecurves.core.vectors import Point3D, Vector3D

__all__ = [
    "Point3D",
    "Vector3D",
]
