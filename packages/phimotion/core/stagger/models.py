"""Stagger direction and plan models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Direction(str, Enum):
    """Order in which logical steps map onto physical items."""

    FORWARD = "forward"
    REVERSE = "reverse"


class StaggerEntry(BaseModel):
    """One item of a stagger plan.

    Attributes:
        index: Logical position in the sequence (activation order).
        step: Physical item activated at this position.
        delay: Gap before this item, in seconds.
        offset: Cumulative activation time, in seconds, including the initial delay.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0)
    step: int = Field(ge=0)
    delay: float = Field(ge=0.0)
    offset: float = Field(ge=0.0)
