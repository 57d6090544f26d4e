"""Command-line interface for phimotion.

Prints the numbers the engine would hand to a renderer: stagger schedules,
easing control points, resolved durations and parallax frames.
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from phimotion.core.accessibility import MotionAccessibilityGate, StaticMotionPreference
from phimotion.core.config import MotionConfig, configure_logging_from_config, load_motion_config
from phimotion.core.parallax import (
    ElementGeometry,
    ParallaxOptions,
    ParallaxTransformCalculator,
    ViewportGeometry,
)
from phimotion.core.scheduling import ManualTimerBackend, SequenceScheduler
from phimotion.core.timing import (
    ControlPoints,
    apply_golden_ratio,
    resolve_duration,
    resolve_easing,
)
from phimotion.core.utils.logging import configure_logging

console = Console()
logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _gate(config: MotionConfig, args: argparse.Namespace) -> MotionAccessibilityGate:
    if getattr(args, "reduced_motion", False):
        return config.build_gate(StaticMotionPreference(True))
    return config.build_gate()


def run_stagger(config: MotionConfig, args: argparse.Namespace) -> int:
    """Print the activation schedule for a staggered sequence."""
    overrides: dict[str, object] = {}
    if args.base_delay is not None:
        overrides["base_delay"] = args.base_delay
    if args.total_duration is not None:
        overrides["total_duration"] = args.total_duration
    if args.linear:
        overrides["use_fibonacci"] = False
    if args.reverse:
        overrides["direction"] = "reverse"

    try:
        options = config.sequence_options(args.steps, **overrides)
    except ValidationError as e:
        console.print(f"[red]ERROR: invalid sequence options: {escape(str(e))}[/red]")
        return 1

    scheduler = SequenceScheduler(options, timers=ManualTimerBackend(), gate=_gate(config, args))

    planned = scheduler.schedule()
    if not planned:
        console.print(
            "[yellow]Reduced motion: sequence jumps straight to the final step[/yellow]"
        )
        return 0

    table = Table(title=f"Stagger schedule ({args.steps} steps)")
    table.add_column("#", justify="right")
    table.add_column("step", justify="right")
    table.add_column("delay (s)", justify="right")
    table.add_column("offset (ms)", justify="right")

    for entry, delay in zip(planned, scheduler.delays, strict=True):
        table.add_row(str(entry.index), str(entry.step), f"{delay:.4f}", str(entry.offset_ms))

    console.print(table)
    return 0


def run_easing(config: MotionConfig, args: argparse.Namespace) -> int:
    """Print control points and CSS for a named easing."""
    name = args.name or config.default_easing.value
    points = resolve_easing(name)
    if not isinstance(points, ControlPoints):
        console.print(f"[red]ERROR: {name} is not a control-point easing[/red]")
        return 1

    console.print(f"[bold]{name}[/bold]: {points.as_tuple()}")
    console.print(points.to_css())
    return 0


def run_duration(config: MotionConfig, args: argparse.Namespace) -> int:
    """Print a resolved duration in seconds."""
    raw = args.value or config.default_duration.value
    try:
        spec: float | str = float(raw)
    except ValueError:
        spec = raw

    seconds = resolve_duration(spec, gate=_gate(config, args))
    if args.golden:
        seconds = apply_golden_ratio(seconds)
    console.print(f"{seconds:.3f}s")
    return 0


def run_parallax(config: MotionConfig, args: argparse.Namespace) -> int:
    """Print one parallax frame for the given geometry."""
    overrides: dict[str, object] = {}
    if args.speed is not None:
        overrides["speed"] = args.speed
    if args.range is not None:
        overrides["range_pixels"] = args.range
    if args.offset is not None:
        overrides["offset_fraction"] = args.offset
    if args.linear:
        overrides["use_easing"] = False
    if args.no_golden:
        overrides["use_golden_ratio"] = False

    try:
        options = ParallaxOptions.model_validate({**config.parallax.model_dump(), **overrides})
        element = ElementGeometry(top=args.top, height=args.height)
        viewport = ViewportGeometry(width=0.0, height=args.viewport_height)
    except ValidationError as e:
        console.print(f"[red]ERROR: invalid parallax input: {escape(str(e))}[/red]")
        return 1

    calculator = ParallaxTransformCalculator(options, gate=_gate(config, args))
    frame = calculator.compute(element, viewport)

    console.print(f"progress:  {frame.progress:.4f}")
    console.print(f"in view:   {frame.in_view}")
    console.print(f"offset:    {frame.transform_offset:.3f}px")
    console.print(f"transform: {frame.translate3d()}")
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="phimotion",
        description="phimotion - golden-ratio animation timing engine",
    )
    p.add_argument("--config", default=None, help="Path to motion config (JSON or YAML)")
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Override the configured log level",
    )
    p.add_argument(
        "--reduced-motion",
        action="store_true",
        help="Simulate a reduced-motion preference",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    stagger = sub.add_parser("stagger", help="Show a stagger schedule")
    stagger.add_argument("--steps", type=int, required=True, help="Number of steps")
    stagger.add_argument("--base-delay", type=float, default=None, help="Gap in seconds")
    stagger.add_argument(
        "--total-duration", type=float, default=None, help="Budget for the whole sequence"
    )
    stagger.add_argument("--linear", action="store_true", help="Uniform spacing")
    stagger.add_argument("--reverse", action="store_true", help="Reveal last item first")

    easing = sub.add_parser("easing", help="Show easing control points")
    easing.add_argument("name", nargs="?", default=None, help="Easing name")

    duration = sub.add_parser("duration", help="Resolve a duration")
    duration.add_argument("value", nargs="?", default=None, help="Keyword or seconds")
    duration.add_argument("--golden", action="store_true", help="Scale by 1/phi")

    parallax = sub.add_parser("parallax", help="Compute a parallax frame")
    parallax.add_argument("--top", type=float, required=True, help="Element top (px)")
    parallax.add_argument("--height", type=float, required=True, help="Element height (px)")
    parallax.add_argument(
        "--viewport-height", type=float, required=True, help="Viewport height (px)"
    )
    parallax.add_argument("--speed", type=float, default=None)
    parallax.add_argument("--range", type=float, default=None, help="Range in pixels")
    parallax.add_argument("--offset", type=float, default=None, help="Offset fraction 0..1")
    parallax.add_argument("--linear", action="store_true", help="Disable sine easing")
    parallax.add_argument("--no-golden", action="store_true", help="Disable golden scaling")

    return p


_COMMANDS = {
    "stagger": run_stagger,
    "easing": run_easing,
    "duration": run_duration,
    "parallax": run_parallax,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_motion_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    if args.log_level:
        configure_logging(level=args.log_level)
    else:
        configure_logging_from_config(config)

    return _COMMANDS[args.cmd](config, args)


if __name__ == "__main__":
    sys.exit(main())
