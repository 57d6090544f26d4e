"""Cancellable step sequencer.

States::

    Idle(-1) --play--> Playing(0..N-1) --last step--> Completed
                           |                             | loop=True
                         pause/reset                     v (after 1s)
                           v                           Idle -> Playing
                         Paused / Idle

The scheduler owns every timer it creates. ``play()`` always supersedes a
previous run, and ``pause()``/``reset()``/``dispose()`` cancel the whole set,
so no step can fire after cancellation.

Pause is a hard stop: the cumulative time position is not kept, and the next
``play()`` starts again from step 0.
"""

from __future__ import annotations

from collections.abc import Callable
import itertools
import logging

from phimotion.core.accessibility.gate import MotionAccessibilityGate
from phimotion.core.scheduling.models import ScheduledStep, SequenceOptions, SequenceState
from phimotion.core.scheduling.timers import AsyncioTimerBackend, TimerBackend, TimerHandle
from phimotion.core.stagger.distributor import StaggerDistributor, physical_step
from phimotion.core.stagger.models import Direction
from phimotion.core.utils.math import seconds_to_ms

logger = logging.getLogger(__name__)

LOOP_RESTART_MS = 1000

StepListener = Callable[[int], None]


class SequenceScheduler:
    """Schedules step activations at staggered offsets.

    Args:
        options: Sequence configuration.
        timers: Timer backend. Defaults to asyncio timers on the running loop.
        gate: Accessibility gate, consulted on every ``play()``.
        distributor: Delay distributor. Defaults to one sharing ``gate``.

    Example:
        >>> from phimotion.core.scheduling.timers import ManualTimerBackend
        >>> timers = ManualTimerBackend()
        >>> seq = SequenceScheduler(SequenceOptions(total_steps=3), timers=timers)
        >>> seq.play()
        >>> timers.run_all()
        3
        >>> seq.current_step
        2
    """

    def __init__(
        self,
        options: SequenceOptions,
        timers: TimerBackend | None = None,
        gate: MotionAccessibilityGate | None = None,
        distributor: StaggerDistributor | None = None,
    ) -> None:
        self.options = options
        self.gate = gate or MotionAccessibilityGate()
        self.distributor = distributor or StaggerDistributor(gate=self.gate)
        self.timers: TimerBackend = timers or AsyncioTimerBackend()

        self._current_step = -1
        self._last_index = -1
        self._is_playing = False
        self._disposed = False
        self._generation = 0
        self._pending: dict[int, TimerHandle] = {}
        self._tokens = itertools.count()
        self._listeners: list[StepListener] = []

    # ------------------------------------------------------------------
    # Query surface
    # ------------------------------------------------------------------

    @property
    def current_step(self) -> int:
        return self._current_step

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def pending_timers(self) -> int:
        return len(self._pending)

    @property
    def state(self) -> SequenceState:
        return SequenceState(
            current_step=self._current_step,
            is_playing=self._is_playing,
            pending_timers=len(self._pending),
        )

    @property
    def delays(self) -> list[float]:
        """Per-step delays (seconds) for the current options and motion preference."""
        opts = self.options
        return self.distributor.delays(
            opts.total_steps, opts.base_delay, opts.total_duration, opts.use_fibonacci
        )

    def should_animate_step(self, step: int) -> bool:
        """Whether ``step`` has been reached, given the sequence direction."""
        if self.options.direction == Direction.FORWARD:
            return step <= self._current_step
        return step >= self._current_step

    def schedule(self) -> list[ScheduledStep]:
        """Activations ``play()`` would create, without scheduling anything.

        Empty when the gate says not to animate (``play()`` jumps to the end).
        """
        if not self.gate.should_animate():
            return []

        opts = self.options
        cumulative = opts.initial_delay
        steps: list[ScheduledStep] = []
        for i, delay in enumerate(self.delays):
            # Zero gaps fall back to the base delay
            cumulative += delay or opts.base_delay
            steps.append(
                ScheduledStep(
                    index=i,
                    step=physical_step(i, opts.total_steps, opts.direction),
                    offset_ms=seconds_to_ms(cumulative),
                )
            )
        return steps

    def on_step(self, listener: StepListener) -> Callable[[], None]:
        """Call ``listener(step)`` on every activation; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------

    def play(self) -> None:
        """Start or restart the sequence from the beginning.

        Non-blocking: returns once timers are scheduled. Under reduced motion (or
        with animations disabled) no timers are created and ``current_step``
        is set to ``total_steps - 1`` synchronously.
        """
        if self._disposed:
            logger.warning("play() called on a disposed scheduler, ignoring")
            return

        self._cancel_all()
        self._current_step = -1
        self._last_index = -1
        self._is_playing = True

        total = self.options.total_steps
        if not self.gate.should_animate():
            logger.debug("Motion off, jumping to final step")
            self._last_index = total - 1
            self._is_playing = False
            self._set_step(total - 1)
            return

        planned = self.schedule()
        for entry in planned:
            self._schedule(entry.offset_ms, self._make_activation(entry.index))

        logger.debug(
            "Scheduled %d steps over %dms", len(planned), planned[-1].offset_ms if planned else 0
        )

    def pause(self) -> None:
        """Stop the sequence, keeping the current step visible."""
        self._cancel_all()
        self._is_playing = False

    def reset(self) -> None:
        """Stop the sequence and rewind to the not-started state."""
        self._cancel_all()
        self._current_step = -1
        self._last_index = -1
        self._is_playing = False

    def dispose(self) -> None:
        """Cancel everything and detach listeners; the scheduler becomes inert."""
        self.reset()
        self._listeners.clear()
        self._disposed = True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _cancel_all(self) -> None:
        self._generation += 1
        for handle in self._pending.values():
            handle.cancel()
        self._pending.clear()

    def _schedule(self, delay_ms: int, action: Callable[[], None]) -> None:
        token = next(self._tokens)
        generation = self._generation

        def fire() -> None:
            self._pending.pop(token, None)
            if generation != self._generation or self._disposed:
                return
            action()

        self._pending[token] = self.timers.call_later(delay_ms, fire)

    def _make_activation(self, index: int) -> Callable[[], None]:
        return lambda: self._activate(index)

    def _activate(self, index: int) -> None:
        # Catch up on any earlier step whose timer has not fired yet, so
        # activations are strictly ordered even if the backend reorders ties.
        if index <= self._last_index:
            return

        opts = self.options
        generation = self._generation
        for i in range(self._last_index + 1, index + 1):
            self._last_index = i
            self._set_step(physical_step(i, opts.total_steps, opts.direction))
            # A listener paused, reset, replayed or disposed this run
            if generation != self._generation or self._disposed:
                return

        if index == opts.total_steps - 1:
            if opts.loop:
                self._schedule(LOOP_RESTART_MS, self._restart)
            else:
                self._is_playing = False

    def _restart(self) -> None:
        self.reset()
        self.play()

    def _set_step(self, step: int) -> None:
        self._current_step = step
        for listener in list(self._listeners):
            try:
                listener(step)
            except Exception:
                logger.exception("Step listener failed for step %d", step)
