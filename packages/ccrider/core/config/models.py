"""Configuration models for CCRider."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ccrider.core.curves.evaluator import DEFAULT_LOOKUP_RESOLUTION


class RiderConfig(BaseModel):
    """Per-rider curve and display settings.

    Shared by every rider in a bank. Immutable after creation.

    Example:
        >>> config = RiderConfig()
        >>> config.max_point_count
        9
        >>> config.slider_max
        100.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_point_count: int = Field(
        default=9, ge=2, le=9, description="Maximum number of control points per rider"
    )

    default_point_count: int = Field(
        default=3, ge=2, description="Number of active control points at start-up"
    )

    slider_max: float = Field(
        default=100.0, gt=0.0, description="Top of the display range for point values (percent)"
    )

    slider_resolution: int = Field(
        default=128, ge=2, description="Number of notches on each point slider"
    )

    lookup_resolution: int = Field(
        default=DEFAULT_LOOKUP_RESOLUTION,
        ge=2,
        description="Number of samples in each curve lookup table",
    )

    epsilon: float = Field(
        default=0.001,
        gt=0.0,
        le=0.1,
        description="Tolerance below which two values are treated as equal",
    )

    @model_validator(mode="after")
    def _validate_default_point_count(self) -> RiderConfig:
        if self.default_point_count > self.max_point_count:
            raise ValueError("default_point_count cannot exceed max_point_count")
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")


class AppConfig(BaseModel):
    """Application-level configuration.

    Each key names one rider; all riders share one input and one
    rider configuration.
    """

    model_config = ConfigDict(extra="ignore")

    keys: list[str] = Field(
        default_factory=lambda: ["e", "d"],
        min_length=1,
        description="Unique rider keys (e.g. e -> expression, d -> dynamics)",
    )
    rider: RiderConfig = RiderConfig()
    logging: LoggingConfig = LoggingConfig()

    @field_validator("keys")
    @classmethod
    def _validate_keys(cls, keys: list[str]) -> list[str]:
        if any(not key.strip() for key in keys):
            raise ValueError("Rider keys cannot be empty")
        if len(set(keys)) != len(keys):
            raise ValueError("Rider keys must be unique")
        return keys

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("ccrider.json")
