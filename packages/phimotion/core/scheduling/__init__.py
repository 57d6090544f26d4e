"""Cancellable step sequencing."""

from phimotion.core.scheduling.models import ScheduledStep, SequenceOptions, SequenceState
from phimotion.core.scheduling.scheduler import LOOP_RESTART_MS, SequenceScheduler
from phimotion.core.scheduling.timers import (
    AsyncioTimerBackend,
    ManualTimer,
    ManualTimerBackend,
    TimerBackend,
    TimerHandle,
)

__all__ = [
    "LOOP_RESTART_MS",
    "AsyncioTimerBackend",
    "ManualTimer",
    "ManualTimerBackend",
    "ScheduledStep",
    "SequenceOptions",
    "SequenceScheduler",
    "SequenceState",
    "TimerBackend",
    "TimerHandle",
]
