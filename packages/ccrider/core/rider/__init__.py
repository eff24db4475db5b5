"""Riders: stateful input-to-output mapping along editable curves."""

from ccrider.core.rider.bank import RiderBank
from ccrider.core.rider.protocols import (
    NullOutputSink,
    NullRefreshListener,
    OutputSink,
    RefreshListener,
)
from ccrider.core.rider.rider import Rider, default_points

__all__ = [
    "NullOutputSink",
    "NullRefreshListener",
    "OutputSink",
    "RefreshListener",
    "Rider",
    "RiderBank",
    "default_points",
]
