"""Shared pytest fixtures for rider tests."""

from __future__ import annotations

import pytest


class RecordingSink:
    """Output sink that records every emitted value."""

    def __init__(self) -> None:
        self.events: list[tuple[str, float]] = []

    def emit(self, key: str, value: float) -> None:
        self.events.append((key, value))

    def values(self, key: str | None = None) -> list[float]:
        return [v for k, v in self.events if key is None or k == key]


class RecordingRefreshListener:
    """Refresh listener that counts requests."""

    def __init__(self) -> None:
        self.count = 0

    def request_refresh(self) -> None:
        self.count += 1


@pytest.fixture
def sink() -> RecordingSink:
    """Fresh recording output sink."""
    return RecordingSink()


@pytest.fixture
def refresh_listener() -> RecordingRefreshListener:
    """Fresh recording refresh listener."""
    return RecordingRefreshListener()


@pytest.fixture
def five_points() -> list[float]:
    """Five-point curve with a dip and a rise."""
    return [0.0, 0.6, 0.3, 0.9, 1.0]
