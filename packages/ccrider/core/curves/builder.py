"""Piecewise cubic Bezier construction with automatic tangent handles.

Given an ordered sequence of control values evenly spaced across [0, 1],
builds one cubic segment per neighbouring pair. Handles are derived from
the neighbouring slopes, Catmull-Rom style, and flattened at local peaks
and valleys so the curve never overshoots an extremum.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from ccrider.core.curves.models import Segment

logger = logging.getLogger(__name__)

HANDLE_DIVISOR = 3.0


def is_local_extremum(prev_slope: float, next_slope: float) -> bool:
    """Return True when the curve turns around (or flattens) at a point.

    A point is treated as an extremum when exactly one of its neighbouring
    slopes is rising. Peaks, valleys and points with a flat side all count.

    Example:
        >>> is_local_extremum(1.0, -1.0)
        True
        >>> is_local_extremum(0.5, 0.5)
        False
    """
    return (prev_slope > 0) != (next_slope > 0)


def tangent_offset(prev_point: float, point: float, next_point: float) -> float:
    """Compute the handle offset for an interior control point.

    Args:
        prev_point: Control value before ``point``.
        point: The interior control value.
        next_point: Control value after ``point``.

    Returns:
        Signed offset applied symmetrically around ``point``: the incoming
        handle sits at ``point - offset`` and the outgoing one at
        ``point + offset``. Zero at local extrema.
    """
    prev_slope = point - prev_point
    next_slope = next_point - point
    if is_local_extremum(prev_slope, next_slope):
        return 0.0

    average_slope = (prev_slope + next_slope) / 2
    magnitude = min(abs(prev_slope), abs(next_slope), abs(average_slope / HANDLE_DIVISOR))
    return math.copysign(magnitude, average_slope) if average_slope else 0.0


def build_segments(points: Sequence[float]) -> list[Segment]:
    """Build the piecewise cubic representation of a control point list.

    The curve passes exactly through every control point. End handles sit
    a third of the way toward the neighbouring point, so two points give
    a straight line.

    Args:
        points: Ordered control values. Must contain at least 2 values.

    Returns:
        Exactly ``len(points) - 1`` segments.

    Raises:
        ValueError: If fewer than 2 points are given.

    Example:
        >>> [s.control_values for s in build_segments([0.0, 1.0])]
        [(0.0, 0.3333333333333333, 0.6666666666666667, 1.0)]
    """
    if len(points) < 2:
        raise ValueError("At least 2 points are required to build a curve")

    last = len(points) - 1
    outgoing: list[float] = [points[0] + (points[1] - points[0]) / HANDLE_DIVISOR]
    incoming: list[float] = []

    for i in range(1, last):
        offset = tangent_offset(points[i - 1], points[i], points[i + 1])
        incoming.append(points[i] - offset)
        outgoing.append(points[i] + offset)

    incoming.append(points[last] - (points[last] - points[last - 1]) / HANDLE_DIVISOR)

    segments = [
        Segment(p0=points[i], h0=outgoing[i], h1=incoming[i], p1=points[i + 1])
        for i in range(last)
    ]
    logger.debug("Built %d segments from %d points", len(segments), len(points))
    return segments
