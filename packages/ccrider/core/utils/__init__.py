"""Shared utilities for CCRider."""

from ccrider.core.utils.json import read_json, write_json
from ccrider.core.utils.math import approximately_equal, clamp, lerp, step

__all__ = [
    "approximately_equal",
    "clamp",
    "lerp",
    "read_json",
    "step",
    "write_json",
]
