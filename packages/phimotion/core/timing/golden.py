"""Golden-ratio timing helpers.

Secondary generators used alongside the stagger distributor: exponential
golden delays, keyframe stops, spring parameters and spiral paths.
"""

from __future__ import annotations

import math

import numpy as np
from pydantic import BaseModel, ConfigDict

from phimotion.core.sequence.constants import PHI, PHI_INVERSE

# Highest phi power used by golden_ratio_delays
_MAX_DELAY_POWER = 7


class SpringConfig(BaseModel):
    """Spring physics parameters for a spring-driven transition."""

    model_config = ConfigDict(frozen=True)

    damping: float
    stiffness: float
    rest_delta: float = 0.001


def golden_ratio_delays(count: int, base: float = 0.1) -> list[float]:
    """Delays growing as powers of phi: ``base * (phi**min(i, 7) - 1)``.

    The first delay is always 0. Non-positive counts return an empty list.
    """
    if count <= 0:
        return []
    return [base * (PHI ** min(i, _MAX_DELAY_POWER) - 1) for i in range(count)]


def golden_keyframes(steps: int) -> list[float]:
    """Keyframe stops in [0, 1] converging on 1 by powers of 1/phi.

    Example:
        >>> [round(k, 3) for k in golden_keyframes(4)]
        [0.0, 0.382, 0.618, 1.0]
    """
    safe_steps = max(1, steps)
    keyframes = [0.0]
    for i in range(1, safe_steps):
        keyframes.append(min(1 - PHI_INVERSE**i, 1.0))

    keyframes[-1] = 1.0
    return keyframes


def golden_spring(damping: float | None = None, stiffness: float | None = None) -> SpringConfig:
    """Spring config with golden defaults (damping 10/phi, stiffness 100*phi)."""
    return SpringConfig(
        damping=damping if damping is not None else 10 * PHI_INVERSE,
        stiffness=stiffness if stiffness is not None else 100 * PHI,
    )


def golden_spiral_points(steps: int, max_angle: float = 4 * math.pi) -> np.ndarray:
    """Points along a golden spiral, shape ``(max(2, steps), 2)``.

    Radius grows as ``phi ** (2 * angle / pi) / 4``.
    """
    safe_steps = max(2, steps)
    angles = np.arange(safe_steps) * (max_angle / safe_steps)
    radius = np.power(PHI, 2 * angles / math.pi) / 4
    return np.column_stack((radius * np.cos(angles), radius * np.sin(angles)))


def responsive_delays(base: float = 0.2) -> dict[str, float]:
    """Per-breakpoint delay variants of ``base``."""
    return {
        "xs": base * 0.5,
        "sm": base * 0.6,
        "md": base * 0.8,
        "lg": base,
        "xl": base * PHI_INVERSE,
    }
