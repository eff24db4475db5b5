"""Curve sampling infrastructure.

This module provides functions for sampling curves at evenly spaced
parameter values, including the curve-preserving resample used when the
number of control points changes.
"""

from __future__ import annotations

from collections.abc import Callable

import numpy as np


def sample_uniform_grid(n: int) -> list[float]:
    """Generate N evenly-spaced samples in [0, 1].

    Returns N samples: [0.0, 1/(N-1), ..., 1.0]

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values, both ends included.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_uniform_grid(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]


def sample_curve(curve: Callable[[float], float], n: int) -> np.ndarray:
    """Evaluate a curve at N evenly-spaced parameter values.

    Args:
        curve: Any callable mapping [0, 1] to a value.
        n: Number of samples. Must be >= 2.

    Returns:
        Array of N curve values.
    """
    return np.array([curve(t) for t in sample_uniform_grid(n)], dtype=np.float64)


def resample_points(curve: Callable[[float], float], count: int) -> list[float]:
    """Regenerate ``count`` control points that follow an existing curve.

    Point ``i`` takes the curve's value at ``i / (count - 1)``, so the new
    point set keeps the shape of the old curve rather than truncating or
    padding the old points.

    Raises:
        ValueError: If count < 2.

    Example:
        >>> resample_points(lambda t: t * t, 3)
        [0.0, 0.25, 1.0]
    """
    if count < 2:
        raise ValueError("count must be >= 2")
    return [float(curve(t)) for t in sample_uniform_grid(count)]
