"""Named easing curves as cubic-Bezier control points.

Every named curve is built from the golden ratio. Control points follow the
CSS convention: P0=(0,0), P1=(x1,y1), P2=(x2,y2), P3=(1,1), with x1 and x2
restricted to [0, 1] so the curve stays a function of time. y values may
overshoot (bounce/spring curves).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
import logging
from typing import Union

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from phimotion.core.sequence.constants import PHI_INVERSE
from phimotion.core.utils.math import clamp01

logger = logging.getLogger(__name__)

EasingFunction = Callable[[float], float]


class EasingName(str, Enum):
    """Closed set of named golden-ratio easing curves."""

    STANDARD = "standard"
    ENTRANCE = "entrance"
    EXIT = "exit"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    GOLDEN = "golden"
    GOLDEN_ACCELERATE = "golden_accelerate"
    GOLDEN_DECELERATE = "golden_decelerate"
    NATURAL_SPRING = "natural_spring"
    NATURAL_BOUNCE = "natural_bounce"
    SHARP_IN = "sharp_in"
    SHARP_OUT = "sharp_out"


class ControlPoints(BaseModel):
    """Cubic-Bezier control points ``(x1, y1, x2, y2)``.

    Example:
        >>> cp = ControlPoints(x1=0.42, y1=0.0, x2=0.58, y2=1.0)
        >>> cp.to_css()
        'cubic-bezier(0.42, 0, 0.58, 1)'
        >>> round(cp.ease(0.5), 3)
        0.5
    """

    model_config = ConfigDict(frozen=True)

    x1: float = Field(ge=0.0, le=1.0)
    y1: float
    x2: float = Field(ge=0.0, le=1.0)
    y2: float

    @classmethod
    def from_sequence(cls, values: Sequence[float]) -> ControlPoints:
        """Build from a 4-item sequence, raising ValueError on bad length."""
        if len(values) != 4:
            raise ValueError(f"Expected 4 control point values, got {len(values)}")
        x1, y1, x2, y2 = (float(v) for v in values)
        return cls(x1=x1, y1=y1, x2=x2, y2=y2)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x1, self.y1, self.x2, self.y2)

    def to_css(self) -> str:
        return to_css_cubic_bezier(self)

    # Polynomial coefficients for B(t) = ((a*t + b)*t + c)*t
    def _coefficients(self, p1: float, p2: float) -> tuple[float, float, float]:
        c = 3.0 * p1
        b = 3.0 * (p2 - p1) - c
        a = 1.0 - c - b
        return a, b, c

    def _sample(self, t: float, p1: float, p2: float) -> float:
        a, b, c = self._coefficients(p1, p2)
        return ((a * t + b) * t + c) * t

    def _sample_derivative_x(self, t: float) -> float:
        a, b, c = self._coefficients(self.x1, self.x2)
        return (3.0 * a * t + 2.0 * b) * t + c

    def _solve_t_for_x(self, x: float, epsilon: float = 1e-7) -> float:
        # Newton-Raphson first, bisection fallback
        t = x
        for _ in range(8):
            error = self._sample(t, self.x1, self.x2) - x
            if abs(error) < epsilon:
                return t
            slope = self._sample_derivative_x(t)
            if abs(slope) < 1e-6:
                break
            t -= error / slope

        lo, hi = 0.0, 1.0
        t = x
        for _ in range(64):
            x_at_t = self._sample(t, self.x1, self.x2)
            if abs(x_at_t - x) < epsilon:
                break
            if x > x_at_t:
                lo = t
            else:
                hi = t
            t = (lo + hi) / 2.0
        return t

    def ease(self, t: float) -> float:
        """Evaluate eased progress at normalized time ``t`` (clamped to [0, 1])."""
        x = clamp01(t)
        if x in (0.0, 1.0):
            return x
        return self._sample(self._solve_t_for_x(x), self.y1, self.y2)

    def __call__(self, t: float) -> float:
        return self.ease(t)

    def sample(self, n_samples: int) -> np.ndarray:
        """Sample the curve on a uniform time grid, shape ``(n_samples, 2)``."""
        if n_samples < 2:
            raise ValueError("n_samples must be >= 2")
        t_grid = np.linspace(0.0, 1.0, n_samples)
        values = np.array([self.ease(float(t)) for t in t_grid])
        return np.column_stack((t_grid, values))


EASINGS: dict[EasingName, ControlPoints] = {
    EasingName.STANDARD: ControlPoints(x1=PHI_INVERSE, y1=0.0, x2=1 - PHI_INVERSE, y2=1.0),
    EasingName.ENTRANCE: ControlPoints(x1=PHI_INVERSE / 2, y1=0.0, x2=PHI_INVERSE, y2=1.0),
    EasingName.EXIT: ControlPoints(x1=1 - PHI_INVERSE, y1=0.0, x2=1.0, y2=1.0),
    EasingName.EASE_IN: ControlPoints(x1=PHI_INVERSE, y1=0.0, x2=1.0, y2=1.0),
    EasingName.EASE_OUT: ControlPoints(x1=0.0, y1=0.0, x2=1 - PHI_INVERSE, y2=1.0),
    EasingName.EASE_IN_OUT: ControlPoints(x1=PHI_INVERSE, y1=0.0, x2=1 - PHI_INVERSE, y2=1.0),
    EasingName.GOLDEN: ControlPoints(x1=0.0, y1=PHI_INVERSE, x2=1 - PHI_INVERSE, y2=1.0),
    EasingName.GOLDEN_ACCELERATE: ControlPoints(x1=PHI_INVERSE, y1=0.0, x2=PHI_INVERSE, y2=1.0),
    EasingName.GOLDEN_DECELERATE: ControlPoints(x1=1 - PHI_INVERSE, y1=0.0, x2=1.0, y2=1.0),
    EasingName.NATURAL_SPRING: ControlPoints(x1=0.5, y1=1.6 * PHI_INVERSE, x2=0.4, y2=0.8),
    EasingName.NATURAL_BOUNCE: ControlPoints(x1=0.5, y1=1.8 * PHI_INVERSE, x2=0.65, y2=1.15),
    EasingName.SHARP_IN: ControlPoints(x1=0.75, y1=0.0, x2=0.9, y2=PHI_INVERSE),
    EasingName.SHARP_OUT: ControlPoints(x1=0.1, y1=1 - PHI_INVERSE, x2=0.25, y2=1.0),
}

EasingSpec = Union[EasingName, str, ControlPoints, Sequence[float], EasingFunction]


def _lookup(name: EasingName | str) -> ControlPoints:
    try:
        return EASINGS[EasingName(name)]
    except ValueError:
        logger.debug("Unknown easing %r, falling back to standard", name)
        return EASINGS[EasingName.STANDARD]


def resolve_easing(spec: EasingSpec) -> ControlPoints | EasingFunction:
    """Resolve an easing spec to control points or a custom function.

    Args:
        spec: Curve name, ControlPoints, a raw ``(x1, y1, x2, y2)`` sequence,
            or a custom ``[0,1] -> [0,1]`` callable.

    Returns:
        ControlPoints for names and sequences; the callable unchanged for
        custom functions. Unknown names and invalid sequences resolve to the
        ``standard`` curve.
    """
    if isinstance(spec, ControlPoints):
        return spec
    if isinstance(spec, (EasingName, str)):
        return _lookup(spec)
    if callable(spec):
        return spec
    try:
        return ControlPoints.from_sequence(spec)
    except (TypeError, ValueError, ValidationError) as e:
        logger.warning("Invalid control points %r (%s), using standard easing", spec, e)
        return EASINGS[EasingName.STANDARD]


def _format_number(value: float) -> str:
    return f"{round(float(value), 4):g}"


def to_css_cubic_bezier(points: ControlPoints | Sequence[float]) -> str:
    """Format control points as a CSS ``cubic-bezier(...)`` string."""
    values = points.as_tuple() if isinstance(points, ControlPoints) else tuple(points)
    return f"cubic-bezier({', '.join(_format_number(v) for v in values)})"
