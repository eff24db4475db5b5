"""Curve construction and evaluation."""

from ccrider.core.curves.builder import build_segments
from ccrider.core.curves.evaluator import (
    DEFAULT_LOOKUP_RESOLUTION,
    BezierCurve,
    CurveEvaluator,
    LookupTable,
)
from ccrider.core.curves.models import Segment
from ccrider.core.curves.sampling import resample_points, sample_curve, sample_uniform_grid

__all__ = [
    "DEFAULT_LOOKUP_RESOLUTION",
    "BezierCurve",
    "CurveEvaluator",
    "LookupTable",
    "Segment",
    "build_segments",
    "resample_points",
    "sample_curve",
    "sample_uniform_grid",
]
