"""Tests for curve models."""

from __future__ import annotations

import math

from pydantic import ValidationError
import pytest

from ccrider.core.curves.models import Segment


class TestSegment:
    """Tests for Segment model."""

    def test_control_values_order(self) -> None:
        """control_values returns p0, h0, h1, p1."""
        segment = Segment(p0=0.1, h0=0.2, h1=0.3, p1=0.4)
        assert segment.control_values == (0.1, 0.2, 0.3, 0.4)

    def test_is_frozen(self) -> None:
        """Segments cannot be mutated."""
        segment = Segment(p0=0.0, h0=0.0, h1=1.0, p1=1.0)
        with pytest.raises(ValidationError):
            segment.p0 = 0.5  # type: ignore[misc]

    def test_handles_may_leave_unit_range(self) -> None:
        """Values are not range checked."""
        segment = Segment(p0=0.0, h0=-0.1, h1=1.1, p1=1.0)
        assert segment.h0 == -0.1

    def test_rejects_nan(self) -> None:
        """Non-finite values are rejected."""
        with pytest.raises(ValidationError, match="finite"):
            Segment(p0=math.nan, h0=0.0, h1=1.0, p1=1.0)

    def test_rejects_extra_fields(self) -> None:
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Segment(p0=0.0, h0=0.0, h1=1.0, p1=1.0, p2=2.0)  # type: ignore[call-arg]
