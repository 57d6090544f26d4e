"""Sequence scheduling models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from phimotion.core.stagger.models import Direction


class SequenceOptions(BaseModel):
    """Configuration for a staggered step sequence.

    All times are in seconds.
    """

    model_config = ConfigDict(frozen=True)

    total_steps: int = Field(ge=1, description="Number of steps in the sequence")
    base_delay: float = Field(default=0.1, ge=0.0, description="Nominal gap between steps")
    total_duration: float | None = Field(
        default=None, gt=0.0, description="Optional budget the delays must fit within"
    )
    use_fibonacci: bool = Field(default=True, description="Fibonacci-weighted spacing")
    direction: Direction = Direction.FORWARD
    loop: bool = Field(default=False, description="Restart 1s after the last step")
    initial_delay: float = Field(default=0.0, ge=0.0, description="Delay before the first step")


class SequenceState(BaseModel):
    """Snapshot of a scheduler's state."""

    model_config = ConfigDict(frozen=True)

    current_step: int = Field(ge=-1)
    is_playing: bool
    pending_timers: int = Field(ge=0)


class ScheduledStep(BaseModel):
    """A step activation as it would be scheduled by ``play()``."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, description="Activation order")
    step: int = Field(ge=0, description="Physical step activated")
    offset_ms: int = Field(ge=0, description="Milliseconds after play()")
