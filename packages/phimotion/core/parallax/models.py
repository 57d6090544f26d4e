"""Parallax geometry, options and frame models.

Geometry is in viewport coordinates (pixels), as reported by the host's
layout measurement.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ElementGeometry(BaseModel):
    """Element bounding box relative to the viewport."""

    model_config = ConfigDict(frozen=True)

    top: float = 0.0
    left: float = 0.0
    width: float = Field(default=0.0, ge=0.0)
    height: float = Field(default=0.0, ge=0.0)

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def right(self) -> float:
        return self.left + self.width


class ViewportGeometry(BaseModel):
    """Visible scroll-container size."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(ge=0.0)
    height: float = Field(ge=0.0)


class ParallaxOptions(BaseModel):
    """Parallax effect configuration.

    Attributes:
        speed: Motion factor; the sign sets the direction of travel.
        horizontal: Track the horizontal axis instead of the vertical one.
        use_golden_ratio: Scale range by 1/phi and speed by phi.
        range_pixels: Range of motion in pixels (0 selects the Fibonacci default, 34).
        offset_fraction: Point of the element measured against the viewport
            (0 = leading edge, 1 = trailing edge).
        enabled: When False the offset is always 0.
        use_easing: Apply a sine S-curve to progress before scaling.
    """

    model_config = ConfigDict(frozen=True)

    speed: float = -0.5
    horizontal: bool = False
    use_golden_ratio: bool = True
    range_pixels: float = Field(default=100.0, ge=0.0)
    offset_fraction: float = Field(default=0.5, ge=0.0, le=1.0)
    enabled: bool = True
    use_easing: bool = True


class ParallaxFrame(BaseModel):
    """Result of one scroll/resize tick."""

    model_config = ConfigDict(frozen=True)

    progress: float = Field(ge=0.0, le=1.0)
    in_view: bool
    transform_offset: float
    horizontal: bool = False

    def translate3d(self) -> str:
        """CSS transform applying the offset along the tracked axis."""
        if self.horizontal:
            return f"translate3d({self.transform_offset:g}px, 0, 0)"
        return f"translate3d(0, {self.transform_offset:g}px, 0)"
