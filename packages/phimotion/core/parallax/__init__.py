"""Scroll-coupled parallax transforms."""

from phimotion.core.parallax.calculator import (
    ParallaxTransformCalculator,
    compute_parallax,
    effective_range,
    effective_speed,
)
from phimotion.core.parallax.models import (
    ElementGeometry,
    ParallaxFrame,
    ParallaxOptions,
    ViewportGeometry,
)
from phimotion.core.parallax.tracker import ParallaxTracker

__all__ = [
    "ElementGeometry",
    "ParallaxFrame",
    "ParallaxOptions",
    "ParallaxTracker",
    "ParallaxTransformCalculator",
    "ViewportGeometry",
    "compute_parallax",
    "effective_range",
    "effective_speed",
]
