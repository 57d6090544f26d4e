"""Reduced-motion gate consulted by every timing component.

The gate wraps a :class:`MotionPreference` source and applies a fixed
de-amplification when reduced motion is active:

- durations are halved
- distances shrink to 30%
- scale deltas keep 25% of their distance from 1.0
- stagger delays collapse to a uniform 50ms

The signal is re-read on every query; nothing caches it.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from phimotion.core.accessibility.preference import (
    MotionPreference,
    PreferenceListener,
    StaticMotionPreference,
    Unsubscribe,
)

logger = logging.getLogger(__name__)

REDUCED_DURATION_FACTOR = 0.5
REDUCED_DISTANCE_FACTOR = 0.3
REDUCED_SCALE_FACTOR = 0.25
REDUCED_STAGGER_DELAY = 0.05


class AdaptedMotion(BaseModel):
    """Duration/distance/scale triple after accessibility adaptation."""

    model_config = ConfigDict(frozen=True)

    duration: float
    distance: float
    scale: float


class AccessibleSettings(BaseModel):
    """Duration and distance to use, plus whether to animate at all."""

    model_config = ConfigDict(frozen=True)

    duration: float
    distance: float
    should_animate: bool


class MotionAccessibilityGate:
    """Reads the reduced-motion signal and de-amplifies motion values.

    Args:
        preference: Signal source. Defaults to a static "motion is fine" source.
        animations_enabled: Global switch; when False nothing animates even if
            the user has no reduced-motion preference.
    """

    def __init__(
        self,
        preference: MotionPreference | None = None,
        animations_enabled: bool = True,
    ) -> None:
        self.preference: MotionPreference = preference or StaticMotionPreference()
        self.animations_enabled = animations_enabled

    def is_reduced_motion_preferred(self) -> bool:
        """Current reduced-motion signal; an unavailable signal reads as False."""
        try:
            return bool(self.preference.prefers_reduced_motion())
        except Exception as e:
            logger.warning("Reduced motion signal unavailable (%s), assuming motion is allowed", e)
            return False

    def should_animate(self) -> bool:
        return self.animations_enabled and not self.is_reduced_motion_preferred()

    def adapt_duration(self, seconds: float) -> float:
        if self.is_reduced_motion_preferred():
            return seconds * REDUCED_DURATION_FACTOR
        return seconds

    def adapt(self, duration: float, distance: float, scale: float = 1.0) -> AdaptedMotion:
        """Shorten duration, shrink distance and flatten scale toward 1.

        Identity when reduced motion is not preferred.

        Example:
            >>> gate = MotionAccessibilityGate(StaticMotionPreference(True))
            >>> gate.adapt(0.4, 30.0).duration
            0.2
        """
        if not self.is_reduced_motion_preferred():
            return AdaptedMotion(duration=duration, distance=distance, scale=scale)

        return AdaptedMotion(
            duration=duration * REDUCED_DURATION_FACTOR,
            distance=distance * REDUCED_DISTANCE_FACTOR,
            scale=1.0 + (scale - 1.0) * REDUCED_SCALE_FACTOR,
        )

    def accessible_settings(
        self, duration: float = 0.309, distance: float = 30.0
    ) -> AccessibleSettings:
        if self.is_reduced_motion_preferred():
            return AccessibleSettings(
                duration=duration * REDUCED_DURATION_FACTOR,
                distance=distance * REDUCED_DISTANCE_FACTOR,
                should_animate=False,
            )
        return AccessibleSettings(
            duration=duration, distance=distance, should_animate=self.animations_enabled
        )

    def subscribe(self, listener: PreferenceListener) -> Unsubscribe:
        """Listen for preference changes on the underlying source."""
        return self.preference.subscribe(listener)
