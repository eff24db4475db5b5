"""Curve schema models for the rider curve engine.

This module defines the piecewise primitive produced by the curve builder:
- Segment: One cubic Bezier piece spanning two consecutive control points

Segments are immutable and validate on construction.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Segment(BaseModel):
    """A single cubic Bezier segment of a piecewise curve.

    ``p0`` and ``p1`` are consecutive control points, ``h0`` and ``h1``
    are the tangent handles derived for them. Values are conceptually in
    [0, 1] but are not range-checked; handles may sit slightly outside.
    This model is immutable (frozen=True).

    Attributes:
        p0: Start control point.
        h0: Outgoing handle of the start point.
        h1: Incoming handle of the end point.
        p1: End control point.

    Example:
        >>> seg = Segment(p0=0.0, h0=1 / 3, h1=2 / 3, p1=1.0)
        >>> seg.control_values
        (0.0, 0.3333333333333333, 0.6666666666666666, 1.0)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    p0: float = Field(..., description="Start control point")
    h0: float = Field(..., description="Outgoing handle of p0")
    h1: float = Field(..., description="Incoming handle of p1")
    p1: float = Field(..., description="End control point")

    @field_validator("p0", "h0", "h1", "p1")
    @classmethod
    def _validate_finite(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("Segment values must be finite")
        return value

    @property
    def control_values(self) -> tuple[float, float, float, float]:
        """The four Bezier control values in curve order."""
        return (self.p0, self.h0, self.h1, self.p1)
