"""Shared pytest fixtures for ccrider tests."""

from __future__ import annotations

import pytest

from ccrider.core.config.models import RiderConfig

# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture
def rider_config() -> RiderConfig:
    """Default rider configuration (9 slots, 3 active, 128-sample table)."""
    return RiderConfig()


@pytest.fixture
def dense_grid() -> list[float]:
    """Dense set of inputs covering [0, 1] inclusive."""
    return [i / 400 for i in range(401)]
