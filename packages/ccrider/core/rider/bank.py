"""A group of riders driven by one shared input.

Typical use pairs an "expression" rider with a "dynamics" rider so a
single controller moves both along their own curves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from ccrider.core.config.models import AppConfig, RiderConfig
from ccrider.core.rider.protocols import OutputSink, RefreshListener
from ccrider.core.rider.rider import Rider

logger = logging.getLogger(__name__)


class RiderBank:
    """Fans one input value and one curve resolution out to several riders.

    Args:
        keys: Unique rider keys, in output order.
        config: Settings shared by every rider.
        output_sink: Receives every rider's output, tagged with its key.
        refresh_listener: Receives every rider's refresh requests.

    Raises:
        ValueError: If keys is empty or contains duplicates.

    Example:
        >>> bank = RiderBank(["e", "d"])
        >>> [rider.key for rider in bank]
        ['e', 'd']
    """

    def __init__(
        self,
        keys: Sequence[str],
        config: RiderConfig | None = None,
        output_sink: OutputSink | None = None,
        refresh_listener: RefreshListener | None = None,
    ) -> None:
        if not keys:
            raise ValueError("At least one rider key is required")
        if len(set(keys)) != len(keys):
            raise ValueError(f"Rider keys must be unique, got {list(keys)}")

        self._riders = {
            key: Rider(
                key,
                config=config,
                output_sink=output_sink,
                refresh_listener=refresh_listener,
            )
            for key in keys
        }
        logger.debug("Created rider bank with keys %s", list(keys))

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        output_sink: OutputSink | None = None,
        refresh_listener: RefreshListener | None = None,
    ) -> RiderBank:
        """Build a bank from an application config."""
        return cls(
            config.keys,
            config=config.rider,
            output_sink=output_sink,
            refresh_listener=refresh_listener,
        )

    def __iter__(self) -> Iterator[Rider]:
        return iter(self._riders.values())

    def __len__(self) -> int:
        return len(self._riders)

    @property
    def keys(self) -> list[str]:
        return list(self._riders)

    def rider(self, key: str) -> Rider:
        """Return the rider for key.

        Raises:
            KeyError: If no rider has that key.
        """
        try:
            return self._riders[key]
        except KeyError:
            raise KeyError(f"Unknown rider {key!r}; available: {self.keys}") from None

    def set_input(self, value: float) -> None:
        """Send one input value to every rider."""
        for rider in self._riders.values():
            rider.set_input(value)

    def set_curve_resolution(self, count: int) -> None:
        """Set the active point count of every rider."""
        for rider in self._riders.values():
            rider.set_active_count(count)

    def set_point(self, key: str, index: int, display_value: float) -> None:
        """Set one point of one rider, in display units."""
        self.rider(key).set_point(index, display_value)

    def outputs(self) -> dict[str, float | None]:
        """Current output of every rider, without emitting."""
        result: dict[str, float | None] = {}
        for key, rider in self._riders.items():
            evaluator = rider.curve()
            value = rider.input_value
            result[key] = None if evaluator is None or value is None else evaluator(value)
        return result
