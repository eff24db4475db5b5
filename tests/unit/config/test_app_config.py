"""Tests for configuration models."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError
import pytest

from ccrider.core.config.models import AppConfig, LoggingConfig, RiderConfig


class TestRiderConfig:
    """Tests for RiderConfig."""

    def test_defaults(self):
        """Defaults match a nine-point rider with percent sliders."""
        config = RiderConfig()

        assert config.max_point_count == 9
        assert config.default_point_count == 3
        assert config.slider_max == 100.0
        assert config.slider_resolution == 128
        assert config.lookup_resolution == 128
        assert config.epsilon == 0.001

    def test_frozen(self):
        """Config is immutable."""
        config = RiderConfig()
        with pytest.raises(ValidationError):
            config.max_point_count = 4

    def test_extra_fields_rejected(self):
        """Unknown fields are rejected."""
        with pytest.raises(ValidationError):
            RiderConfig(point_count=4)

    @pytest.mark.parametrize("value", [1, 10])
    def test_max_point_count_bounds(self, value):
        """Max point count must be between 2 and 9."""
        with pytest.raises(ValidationError):
            RiderConfig(max_point_count=value, default_point_count=2)

    def test_default_point_count_cannot_exceed_max(self):
        """Start-up point count must fit in the available slots."""
        with pytest.raises(ValidationError, match="cannot exceed max_point_count"):
            RiderConfig(max_point_count=4, default_point_count=5)

    def test_epsilon_must_be_positive(self):
        """Zero epsilon is rejected."""
        with pytest.raises(ValidationError):
            RiderConfig(epsilon=0.0)

    def test_lookup_resolution_minimum(self):
        """A lookup table needs at least two samples."""
        with pytest.raises(ValidationError):
            RiderConfig(lookup_resolution=1)


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.structured is False

    def test_invalid_level(self):
        """Only standard level names are accepted."""
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self):
        """Default bank has an expression and a dynamics rider."""
        config = AppConfig()

        assert config.keys == ["e", "d"]
        assert config.rider == RiderConfig()
        assert config.logging == LoggingConfig()

    def test_nested_rider_config_from_dict(self):
        """Nested dictionaries validate into RiderConfig."""
        config = AppConfig.model_validate(
            {"keys": ["x"], "rider": {"max_point_count": 5, "epsilon": 0.01}}
        )

        assert config.keys == ["x"]
        assert config.rider.max_point_count == 5
        assert config.rider.epsilon == 0.01

    def test_unknown_top_level_keys_ignored(self):
        """Unrelated top-level sections do not fail validation."""
        config = AppConfig.model_validate({"keys": ["e"], "notes": "scratch"})
        assert config.keys == ["e"]

    def test_empty_keys_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig(keys=[])

    def test_blank_key_rejected(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            AppConfig(keys=["e", " "])

    def test_duplicate_keys_rejected(self):
        with pytest.raises(ValidationError, match="must be unique"):
            AppConfig(keys=["e", "e"])

    def test_default_path(self):
        assert AppConfig.default_path() == Path("ccrider.json")
