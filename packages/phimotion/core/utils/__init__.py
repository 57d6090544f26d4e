"""Shared utilities for phimotion."""

from phimotion.core.utils.math import clamp, clamp01, non_negative, seconds_to_ms

__all__ = [
    "clamp",
    "clamp01",
    "non_negative",
    "seconds_to_ms",
]
