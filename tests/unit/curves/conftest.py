"""Shared pytest fixtures for curve tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def ramp_up_points() -> list[float]:
    """Two-point ascending ramp."""
    return [0.0, 1.0]


@pytest.fixture
def ramp_down_points() -> list[float]:
    """Two-point descending ramp."""
    return [1.0, 0.0]


@pytest.fixture
def peak_points() -> list[float]:
    """Single peak in the middle."""
    return [0.0, 1.0, 0.0]


@pytest.fixture
def valley_points() -> list[float]:
    """Single valley in the middle."""
    return [1.0, 0.0, 1.0]


@pytest.fixture
def zigzag_points() -> list[float]:
    """Unevenly valued points with several direction changes."""
    return [0.43, 0.67, 0.43, 0.67, 0.0, 0.43, 0.67, 0.0, 1.0]


@pytest.fixture
def uneven_rise_points() -> list[float]:
    """Monotonic rise with uneven steps."""
    return [0.0, 0.1, 0.6, 0.7, 1.0]
