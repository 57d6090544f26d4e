"""Duration, easing and golden-ratio timing resolution."""

from phimotion.core.timing.durations import (
    DURATIONS,
    DurationKeyword,
    DurationSpec,
    apply_golden_ratio,
    duration_to_ms,
    resolve_duration,
)
from phimotion.core.timing.easing import (
    EASINGS,
    ControlPoints,
    EasingFunction,
    EasingName,
    EasingSpec,
    resolve_easing,
    to_css_cubic_bezier,
)
from phimotion.core.timing.golden import (
    SpringConfig,
    golden_keyframes,
    golden_ratio_delays,
    golden_spiral_points,
    golden_spring,
    responsive_delays,
)

__all__ = [
    "DURATIONS",
    "EASINGS",
    "ControlPoints",
    "DurationKeyword",
    "DurationSpec",
    "EasingFunction",
    "EasingName",
    "EasingSpec",
    "SpringConfig",
    "apply_golden_ratio",
    "duration_to_ms",
    "golden_keyframes",
    "golden_ratio_delays",
    "golden_spiral_points",
    "golden_spring",
    "resolve_duration",
    "resolve_easing",
    "responsive_delays",
    "to_css_cubic_bezier",
]
