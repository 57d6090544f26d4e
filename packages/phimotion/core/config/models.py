"""Configuration models for phimotion."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from phimotion.core.accessibility.gate import MotionAccessibilityGate
from phimotion.core.accessibility.preference import (
    DEFAULT_ENV_VAR,
    EnvironmentMotionPreference,
    MotionPreference,
)
from phimotion.core.parallax.models import ParallaxOptions
from phimotion.core.scheduling.models import SequenceOptions
from phimotion.core.stagger.models import Direction
from phimotion.core.timing.durations import DurationKeyword
from phimotion.core.timing.easing import EasingName


class StaggerConfig(BaseModel):
    """Default stagger settings for sequences."""

    base_delay: float = Field(default=0.1, ge=0.0, description="Gap between steps in seconds")
    total_duration: float | None = Field(
        default=None, gt=0.0, description="Optional budget for the whole sequence in seconds"
    )
    use_fibonacci: bool = Field(default=True, description="Fibonacci-weighted spacing")
    direction: Direction = Direction.FORWARD
    initial_delay: float = Field(default=0.0, ge=0.0)
    loop: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Log level",
    )
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (stdout if None)")


class MotionConfig(BaseModel):
    """Application-wide motion settings."""

    model_config = ConfigDict(extra="forbid")

    animations_enabled: bool = Field(
        default=True, description="Global switch; False disables all motion"
    )
    default_duration: DurationKeyword = DurationKeyword.NORMAL
    default_easing: EasingName = EasingName.STANDARD
    stagger: StaggerConfig = Field(default_factory=StaggerConfig)
    parallax: ParallaxOptions = Field(default_factory=ParallaxOptions)
    reduced_motion_env_var: str = Field(
        default=DEFAULT_ENV_VAR,
        description="Environment variable carrying the reduced-motion preference",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def build_gate(self, preference: MotionPreference | None = None) -> MotionAccessibilityGate:
        """Gate reading ``reduced_motion_env_var`` unless a preference is supplied."""
        source = preference or EnvironmentMotionPreference(self.reduced_motion_env_var)
        return MotionAccessibilityGate(source, animations_enabled=self.animations_enabled)

    def sequence_options(self, total_steps: int, **overrides: object) -> SequenceOptions:
        """SequenceOptions from the stagger defaults, with per-call overrides."""
        values = {"total_steps": total_steps, **self.stagger.model_dump(), **overrides}
        return SequenceOptions.model_validate(values)
