"""Collaborator interfaces for riders.

The host runtime implements these to receive rider output and UI refresh
requests. Riders only ever call into them; they never read back.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class OutputSink(Protocol):
    """Receives the scalar output of a rider after every flush.

    Example:
        >>> class PrintSink:
        ...     def emit(self, key: str, value: float) -> None:
        ...         print(key, round(value, 3))
    """

    def emit(self, key: str, value: float) -> None:
        """Deliver one output value.

        Args:
            key: Key of the rider that produced the value
            value: Output value in [0, 1]
        """
        ...


@runtime_checkable
class RefreshListener(Protocol):
    """Asked to re-read every display parameter of a rider.

    Sent after a resample rewrites point values programmatically.
    """

    def request_refresh(self) -> None:
        """Re-read all display parameters."""
        ...


class NullOutputSink:
    """Output sink that discards values."""

    def emit(self, key: str, value: float) -> None:
        logger.debug("Discarding output %s=%.4f", key, value)


class NullRefreshListener:
    """Refresh listener that ignores requests."""

    def request_refresh(self) -> None:
        pass
