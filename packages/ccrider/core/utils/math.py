"""Math utilities for common operations."""

from __future__ import annotations

from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)

DEFAULT_EPSILON = 0.001


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def lerp(a: Number, b: Number, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t


def approximately_equal(a: float | None, b: float | None, epsilon: float = DEFAULT_EPSILON) -> bool:
    """Return True when two values differ by less than epsilon.

    A missing value is never equal to anything, including another
    missing value.

    Example:
        >>> approximately_equal(0.5, 0.5004)
        True
        >>> approximately_equal(None, 0.0)
        False
    """
    if a is None or b is None:
        return False
    return abs(a - b) < epsilon


def step(value: float, min_val: float, max_val: float, steps: int) -> float:
    """Quantize a value to the notches of a linear slider.

    Mirrors how a host slider with ``steps`` notches between ``min_val``
    and ``max_val`` rounds a value written to it.

    Args:
        value: Value to quantize
        min_val: Slider minimum
        max_val: Slider maximum
        steps: Number of notches across the range

    Returns:
        Value snapped to the nearest notch

    Example:
        >>> step(50.3, 0, 100, 100)
        50.0
    """
    value_range = max_val - min_val
    normalized = (value - min_val) / value_range
    normalized_step = round(normalized * steps) / steps
    return normalized_step * value_range + min_val
