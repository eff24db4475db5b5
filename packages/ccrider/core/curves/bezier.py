"""One-dimensional Bezier interpolation primitives.

Provides the slice mapping used to locate a segment (or lookup table
bracket) for a parameter value, the general De Casteljau evaluator, and
the closed-form cubic Bernstein fast path.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from ccrider.core.utils.math import clamp, lerp


def sliced(t: float, point_count: int) -> tuple[int, float]:
    """Map t onto the slices between ``point_count`` evenly spaced points.

    Args:
        t: Parameter in [0, 1].
        point_count: Number of points spanning [0, 1]. The number of
            slices is ``point_count - 1``.

    Returns:
        Tuple of (slice index, t re-normalized to [0, 1] within the slice).

    Example:
        >>> sliced(0.75, 3)
        (1, 0.5)
        >>> sliced(0.3, 1)
        (0, 0.3)
    """
    if point_count == 1:
        return 0, t

    slice_count = point_count - 1
    index = math.floor(t * slice_count)
    remainder = (t - (index / slice_count)) * slice_count
    return index, remainder


def de_casteljau(t: float, values: Sequence[float] | None) -> float:
    """Evaluate a 1D Bezier curve of any degree by repeated interpolation.

    With no values (or a single value) the parameter is returned unchanged,
    which makes an absent control polygon behave like the identity curve.

    Args:
        t: Parameter in [0, 1].
        values: Control values of the curve.

    Returns:
        Curve value at t. Not clamped.
    """
    if values is None or len(values) < 2:
        return t
    if len(values) == 2:
        return lerp(values[0], values[1], t)

    reduced = [de_casteljau(t, (values[i], values[i + 1])) for i in range(len(values) - 1)]
    return de_casteljau(t, reduced)


def cubic_bernstein(t: float, p0: float, p1: float, p2: float, p3: float) -> float:
    """Evaluate a cubic Bezier using the Bernstein closed form.

    The result is clamped to [0, 1]: when every control value is 1.0 the
    sum can land a hair above 1.

    Example:
        >>> cubic_bernstein(0.5, 0.0, 0.0, 1.0, 1.0)
        0.5
    """
    u = 1 - t
    result = (u**3) * p0 + 3 * t * (u**2) * p1 + 3 * (t**2) * u * p2 + (t**3) * p3
    return clamp(result, 0.0, 1.0)


def interpolate(t: float, values: Sequence[float] | None) -> float:
    """Evaluate a Bezier control polygon at t.

    Four control values take the cubic fast path; anything else falls back
    to De Casteljau.
    """
    if values is not None and len(values) == 4:
        return cubic_bernstein(t, values[0], values[1], values[2], values[3])
    return de_casteljau(t, values)
