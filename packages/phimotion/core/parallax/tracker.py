"""Per-element parallax state across scroll/resize ticks."""

from __future__ import annotations

from collections.abc import Callable
import logging

from phimotion.core.parallax.calculator import ParallaxTransformCalculator
from phimotion.core.parallax.models import ElementGeometry, ParallaxFrame, ViewportGeometry

logger = logging.getLogger(__name__)


class ParallaxTracker:
    """Keeps the last frame for one element and recomputes on demand.

    The host calls :meth:`update` from its scroll/resize handler and
    :meth:`detach` when the element is torn down. While attached, the tracker
    listens to the gate's preference source and calls ``on_invalidate`` when
    it changes, so the host can schedule a fresh ``update``.
    """

    def __init__(
        self,
        calculator: ParallaxTransformCalculator,
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        self.calculator = calculator
        self._frame: ParallaxFrame | None = None
        self._on_invalidate = on_invalidate
        self._unsubscribe: Callable[[], None] | None = calculator.gate.subscribe(
            self._preference_changed
        )

    @property
    def frame(self) -> ParallaxFrame | None:
        return self._frame

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    def update(self, element: ElementGeometry, viewport: ViewportGeometry) -> ParallaxFrame:
        """Recompute the frame for the current geometry.

        After :meth:`detach`, returns the last frame without recomputing
        (geometry of a torn-down element is stale).
        """
        if not self.attached and self._frame is not None:
            return self._frame

        self._frame = self.calculator.compute(element, viewport, previous=self._frame)
        return self._frame

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _preference_changed(self, reduced: bool) -> None:
        logger.debug("Reduced motion changed to %s, invalidating parallax frame", reduced)
        if self._on_invalidate is not None:
            self._on_invalidate()
