"""Curve evaluation with a memoized lookup table.

Two evaluation paths are provided and kept consistent:
- BezierCurve.at: exact analytic evaluation of the piecewise curve
- CurveEvaluator.memoized_at: lookup-table samples of the exact path,
  linearly interpolated between neighbouring samples

The lookup table belongs to exactly one evaluator, and every evaluator is
built around exactly one curve. Rebuilding a curve therefore always yields
a fresh table.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from ccrider.core.curves.bezier import interpolate, sliced
from ccrider.core.curves.builder import build_segments
from ccrider.core.curves.models import Segment
from ccrider.core.utils.math import clamp

logger = logging.getLogger(__name__)

# 0-127 is the most common MIDI value range, hence 128 table samples.
DEFAULT_LOOKUP_RESOLUTION = 128


class BezierCurve(BaseModel):
    """Immutable piecewise cubic curve through evenly spaced control points.

    Attributes:
        points: The control values the curve was built from.
        segments: One cubic segment per neighbouring pair of points.

    Example:
        >>> curve = BezierCurve.from_points([0.0, 1.0])
        >>> curve.at(1.0)
        1.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    points: tuple[float, ...] = Field(..., min_length=2)
    segments: tuple[Segment, ...] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _validate_segment_count(self) -> BezierCurve:
        if len(self.segments) != len(self.points) - 1:
            raise ValueError("BezierCurve needs exactly one segment per pair of points")
        return self

    @classmethod
    def from_points(cls, points: Sequence[float]) -> BezierCurve:
        """Build a curve through the given control values."""
        return cls(points=tuple(points), segments=tuple(build_segments(points)))

    @property
    def segment_count(self) -> int:
        return len(self.segments)

    def at(self, t: float) -> float:
        """Evaluate the curve exactly at t.

        Parameters at or beyond the ends return the end control points
        verbatim, bypassing interpolation.
        """
        if t >= 1.0:
            return self.points[-1]
        if t <= 0.0:
            return self.points[0]

        # segment_count + 1 points are represented by the segments
        index, remainder = sliced(t, self.segment_count + 1)
        index = min(index, self.segment_count - 1)
        return interpolate(remainder, self.segments[index].control_values)


class LookupTable:
    """Fixed-size table of lazily computed curve samples.

    Slot ``i`` caches the curve at ``i / (resolution - 1)``. Empty slots
    hold NaN.
    """

    def __init__(self, resolution: int = DEFAULT_LOOKUP_RESOLUTION) -> None:
        if resolution < 2:
            raise ValueError("resolution must be >= 2")
        self._values = np.full(resolution, np.nan, dtype=np.float64)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def resolution(self) -> int:
        return len(self._values)

    @property
    def filled_count(self) -> int:
        """Number of slots computed so far."""
        return int(np.count_nonzero(~np.isnan(self._values)))

    def lookup(self, index: int, compute: Callable[[float], float]) -> float:
        """Return slot ``index``, computing and caching it on first access.

        Args:
            index: Table slot in [0, resolution).
            compute: Exact evaluator called with the slot's parameter value.
        """
        cached = self._values[index]
        if not np.isnan(cached):
            return float(cached)

        value = compute(index / (len(self._values) - 1))
        self._values[index] = value
        return value


class CurveEvaluator:
    """Fast repeated evaluation of one BezierCurve.

    Args:
        curve: The curve to evaluate. Never replaced for the lifetime of
            the evaluator.
        resolution: Number of lookup table samples.

    Example:
        >>> evaluator = CurveEvaluator(BezierCurve.from_points([0.0, 1.0]))
        >>> evaluator(0.0)
        0.0
    """

    def __init__(self, curve: BezierCurve, resolution: int = DEFAULT_LOOKUP_RESOLUTION) -> None:
        self._curve = curve
        self._table = LookupTable(resolution)
        logger.debug(
            "Created evaluator for %d segments with %d-sample table",
            curve.segment_count,
            resolution,
        )

    @classmethod
    def from_points(
        cls, points: Sequence[float], resolution: int = DEFAULT_LOOKUP_RESOLUTION
    ) -> CurveEvaluator:
        return cls(BezierCurve.from_points(points), resolution)

    @property
    def curve(self) -> BezierCurve:
        return self._curve

    @property
    def table(self) -> LookupTable:
        return self._table

    @property
    def resolution(self) -> int:
        return self._table.resolution

    def at(self, t: float) -> float:
        """Exact evaluation, bypassing the lookup table."""
        return self._curve.at(t)

    def memoized_at(self, t: float) -> float:
        """Evaluate at t through the lookup table.

        Out-of-range parameters are clamped to [0, 1].
        """
        t = clamp(t, 0.0, 1.0)
        index, remainder = sliced(t, self.resolution)
        value = self._table.lookup(index, self._curve.at)

        # The last slot has no right neighbour to interpolate toward
        if index >= self.resolution - 1:
            return value

        next_value = self._table.lookup(index + 1, self._curve.at)
        return interpolate(remainder, (value, next_value))

    def __call__(self, t: float) -> float:
        return self.memoized_at(t)
