"""Reduced-motion accessibility gate and preference sources."""

from phimotion.core.accessibility.gate import (
    REDUCED_DISTANCE_FACTOR,
    REDUCED_DURATION_FACTOR,
    REDUCED_SCALE_FACTOR,
    REDUCED_STAGGER_DELAY,
    AccessibleSettings,
    AdaptedMotion,
    MotionAccessibilityGate,
)
from phimotion.core.accessibility.preference import (
    DEFAULT_ENV_VAR,
    EnvironmentMotionPreference,
    MotionPreference,
    StaticMotionPreference,
)

__all__ = [
    "DEFAULT_ENV_VAR",
    "REDUCED_DISTANCE_FACTOR",
    "REDUCED_DURATION_FACTOR",
    "REDUCED_SCALE_FACTOR",
    "REDUCED_STAGGER_DELAY",
    "AccessibleSettings",
    "AdaptedMotion",
    "EnvironmentMotionPreference",
    "MotionAccessibilityGate",
    "MotionPreference",
    "StaticMotionPreference",
]
