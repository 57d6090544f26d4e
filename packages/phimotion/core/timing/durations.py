"""Semantic duration keywords and golden-ratio duration scaling."""

from __future__ import annotations

from enum import Enum
import logging
import math
from typing import TYPE_CHECKING, Union

from phimotion.core.sequence.constants import FIBONACCI, PHI, PHI_INVERSE
from phimotion.core.utils.math import non_negative, seconds_to_ms

if TYPE_CHECKING:
    from phimotion.core.accessibility.gate import MotionAccessibilityGate

logger = logging.getLogger(__name__)


class DurationKeyword(str, Enum):
    """Closed set of semantic durations."""

    INSTANT = "instant"
    FASTER = "faster"
    FAST = "fast"
    NORMAL = "normal"
    SLOW = "slow"
    SLOWER = "slower"
    GLACIAL = "glacial"


# Seconds, rounded to the millisecond timer granularity
DURATIONS: dict[DurationKeyword, float] = {
    DurationKeyword.INSTANT: 0.0,
    DurationKeyword.FASTER: round(PHI_INVERSE / (FIBONACCI[2] * FIBONACCI[4]), 3),
    DurationKeyword.FAST: round(PHI_INVERSE / FIBONACCI[4], 3),
    DurationKeyword.NORMAL: round(PHI_INVERSE / FIBONACCI[2], 3),
    DurationKeyword.SLOW: round(PHI_INVERSE / FIBONACCI[1], 3),
    DurationKeyword.SLOWER: 1.0,
    DurationKeyword.GLACIAL: round(PHI, 3),
}

DurationSpec = Union[DurationKeyword, str, float, int]


def resolve_duration(
    spec: DurationSpec,
    gate: MotionAccessibilityGate | None = None,
) -> float:
    """Resolve a duration keyword or raw number to seconds.

    Numbers pass through unchanged (negative or NaN clamps to 0). Unknown
    keywords resolve to ``normal``. When a gate is given and reduced motion
    is active, the result is shortened by the gate.

    Example:
        >>> resolve_duration("normal")
        0.309
        >>> resolve_duration(0.25)
        0.25
    """
    if isinstance(spec, (DurationKeyword, str)):
        try:
            seconds = DURATIONS[DurationKeyword(spec)]
        except ValueError:
            logger.debug("Unknown duration keyword %r, using normal", spec)
            seconds = DURATIONS[DurationKeyword.NORMAL]
    else:
        seconds = non_negative(spec)

    if gate is not None:
        return gate.adapt_duration(seconds)
    return seconds


def apply_golden_ratio(seconds: float) -> float:
    """Scale a duration by 1/phi.

    Not idempotent: applying twice compounds, so apply at most once.
    """
    if isinstance(seconds, float) and math.isnan(seconds):
        return 0.0
    return seconds * PHI_INVERSE


def duration_to_ms(seconds: float) -> int:
    return seconds_to_ms(seconds)
