"""Scroll-coupled parallax offset calculation.

Pure given its inputs, except for one rule: when the element is out of view
the previous frame's offset is kept, so the caller passes the last frame
back in (see :class:`~phimotion.core.parallax.tracker.ParallaxTracker`).
"""

from __future__ import annotations

from easing_functions import SineEaseInOut

from phimotion.core.accessibility.gate import MotionAccessibilityGate
from phimotion.core.parallax.models import (
    ElementGeometry,
    ParallaxFrame,
    ParallaxOptions,
    ViewportGeometry,
)
from phimotion.core.sequence.constants import (
    DEFAULT_PARALLAX_RANGE_INDEX,
    FIBONACCI,
    PHI,
    PHI_INVERSE,
)
from phimotion.core.utils.math import clamp01

# sin((p - 0.5) * pi) * 0.5 + 0.5 on [0, 1]
_S_CURVE = SineEaseInOut(start=0.0, end=1.0, duration=1.0)


def effective_range(options: ParallaxOptions) -> float:
    range_px = options.range_pixels or FIBONACCI[DEFAULT_PARALLAX_RANGE_INDEX]
    return range_px * PHI_INVERSE if options.use_golden_ratio else range_px


def effective_speed(options: ParallaxOptions) -> float:
    return options.speed * PHI if options.use_golden_ratio else options.speed


def compute_parallax(
    element: ElementGeometry,
    viewport: ViewportGeometry,
    options: ParallaxOptions,
    *,
    previous: ParallaxFrame | None = None,
    reduced_motion: bool = False,
) -> ParallaxFrame:
    """Compute progress, visibility and translation for one tick.

    Args:
        element: Element bounding box in viewport coordinates.
        viewport: Viewport size.
        options: Parallax configuration.
        previous: Frame from the previous tick, used to hold the offset
            while the element is out of view.
        reduced_motion: Force a zero offset (visibility is still reported).

    Returns:
        The new ParallaxFrame.

    Example:
        >>> frame = compute_parallax(
        ...     ElementGeometry(top=450, height=100),
        ...     ViewportGeometry(width=1200, height=1000),
        ...     ParallaxOptions(),
        ... )
        >>> frame.progress, abs(frame.transform_offset) < 1e-6
        (0.5, True)
    """
    if options.horizontal:
        viewport_size = viewport.width
        near, size, far = element.left, element.width, element.right
    else:
        viewport_size = viewport.height
        near, size, far = element.top, element.height, element.bottom

    if viewport_size > 0:
        progress = clamp01(1 - (near + size * options.offset_fraction) / viewport_size)
    else:
        progress = 0.0

    in_view = far > 0 and near < viewport_size

    if not options.enabled or reduced_motion:
        offset = 0.0
    elif not in_view:
        offset = previous.transform_offset if previous is not None else 0.0
    else:
        shaped = _S_CURVE.ease(progress) if options.use_easing else progress
        offset = (shaped - 0.5) * effective_range(options) * effective_speed(options)

    return ParallaxFrame(
        progress=progress,
        in_view=in_view,
        transform_offset=offset,
        horizontal=options.horizontal,
    )


class ParallaxTransformCalculator:
    """Parallax calculation bound to options and an accessibility gate.

    The gate is consulted on every call, so a preference change applies on
    the next tick.
    """

    def __init__(
        self,
        options: ParallaxOptions | None = None,
        gate: MotionAccessibilityGate | None = None,
    ) -> None:
        self.options = options or ParallaxOptions()
        self.gate = gate or MotionAccessibilityGate()

    def compute(
        self,
        element: ElementGeometry,
        viewport: ViewportGeometry,
        previous: ParallaxFrame | None = None,
    ) -> ParallaxFrame:
        reduced = not self.gate.should_animate()
        return compute_parallax(
            element, viewport, self.options, previous=previous, reduced_motion=reduced
        )
