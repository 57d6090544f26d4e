"""Stagger delay distribution."""

from phimotion.core.stagger.distributor import (
    FIBONACCI_START_INDEX,
    StaggerDistributor,
    cumulative_offsets,
    distribute_delays,
    physical_step,
)
from phimotion.core.stagger.models import Direction, StaggerEntry

__all__ = [
    "FIBONACCI_START_INDEX",
    "Direction",
    "StaggerDistributor",
    "StaggerEntry",
    "cumulative_offsets",
    "distribute_delays",
    "physical_step",
]
