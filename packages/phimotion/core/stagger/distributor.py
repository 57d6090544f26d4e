"""Stagger delay distribution for revealing N items in sequence.

Item ``i`` activates at ``initial_delay + sum(delays[:i + 1])``. Delays are
always returned in logical order; callers map logical index ``i`` to a
physical item with :func:`physical_step` when running in reverse.

Two modes:

- Linear: every gap equals ``base_delay`` (or ``total_duration / N``).
- Fibonacci: gaps are proportional to ``F(2), F(3), ...``, normalized so they
  sum to ``base_delay * N`` (or ``total_duration / phi`` when a budget is
  given). Later items get larger gaps, giving accelerating spacing.
"""

from __future__ import annotations

from itertools import accumulate
import logging

from phimotion.core.accessibility.gate import REDUCED_STAGGER_DELAY, MotionAccessibilityGate
from phimotion.core.sequence.constants import PHI_INVERSE
from phimotion.core.sequence.fibonacci import FibonacciProvider, get_fibonacci_provider
from phimotion.core.stagger.models import Direction, StaggerEntry
from phimotion.core.utils.math import non_negative

logger = logging.getLogger(__name__)

# Skip the degenerate leading 1, 1
FIBONACCI_START_INDEX = 2


def physical_step(index: int, total_steps: int, direction: Direction | str) -> int:
    """Map a logical activation index to the physical item it reveals."""
    if Direction(direction) == Direction.REVERSE:
        return total_steps - 1 - index
    return index


def cumulative_offsets(delays: list[float], initial_delay: float = 0.0) -> list[float]:
    """Activation times (seconds) for a delay list."""
    start = non_negative(initial_delay)
    return [start + total for total in accumulate(delays)]


class StaggerDistributor:
    """Computes per-item delays for staggered sequences.

    Args:
        provider: Fibonacci source. Defaults to the shared process-wide provider.
        gate: Accessibility gate. When it says not to animate (reduced motion
            or animations disabled) every delay collapses to a uniform minimal
            value, capped so the delays still fit ``total_duration``.
    """

    def __init__(
        self,
        provider: FibonacciProvider | None = None,
        gate: MotionAccessibilityGate | None = None,
    ) -> None:
        self.provider = provider or get_fibonacci_provider()
        self.gate = gate

    def delays(
        self,
        total_steps: int,
        base_delay: float = 0.1,
        total_duration: float | None = None,
        use_fibonacci: bool = True,
    ) -> list[float]:
        """Return ``total_steps`` delays in seconds, in logical order.

        Args:
            total_steps: Number of items. Non-positive yields ``[]``.
            base_delay: Nominal gap between items.
            total_duration: Optional budget; when positive it overrides
                ``base_delay`` and the delays never sum past it.
            use_fibonacci: Fibonacci-weighted (True) or uniform (False) spacing.

        Example:
            >>> StaggerDistributor().delays(3, base_delay=0.1, use_fibonacci=False)
            [0.1, 0.1, 0.1]
        """
        if total_steps <= 0:
            return []

        base = non_negative(base_delay)
        budget = non_negative(total_duration) if total_duration is not None else 0.0

        if self.gate is not None and not self.gate.should_animate():
            delay = REDUCED_STAGGER_DELAY
            if budget > 0:
                delay = min(delay, budget / total_steps)
            logger.debug("Motion off, using uniform %.3fs stagger", delay)
            return [delay] * total_steps

        if not use_fibonacci:
            if budget > 0:
                return [budget / total_steps] * total_steps
            return [base] * total_steps

        weights = self.provider.range_slice(
            FIBONACCI_START_INDEX, FIBONACCI_START_INDEX + total_steps
        )
        weight_sum = sum(weights) or 1

        if budget > 0:
            scale = budget * PHI_INVERSE
        else:
            scale = base * total_steps

        return [(w / weight_sum) * scale for w in weights]

    def plan(
        self,
        total_steps: int,
        base_delay: float = 0.1,
        total_duration: float | None = None,
        use_fibonacci: bool = True,
        direction: Direction | str = Direction.FORWARD,
        initial_delay: float = 0.0,
    ) -> list[StaggerEntry]:
        """Delays joined with physical step mapping and cumulative offsets."""
        delays = self.delays(total_steps, base_delay, total_duration, use_fibonacci)
        offsets = cumulative_offsets(delays, initial_delay)
        return [
            StaggerEntry(
                index=i,
                step=physical_step(i, total_steps, direction),
                delay=delay,
                offset=offset,
            )
            for i, (delay, offset) in enumerate(zip(delays, offsets, strict=True))
        ]


def distribute_delays(
    total_steps: int,
    base_delay: float = 0.1,
    total_duration: float | None = None,
    use_fibonacci: bool = True,
    gate: MotionAccessibilityGate | None = None,
) -> list[float]:
    """Functional shortcut for :meth:`StaggerDistributor.delays`."""
    return StaggerDistributor(gate=gate).delays(
        total_steps, base_delay, total_duration, use_fibonacci
    )
