"""End-to-end sequencing scenarios: config, gate, scheduler and parallax together."""

from __future__ import annotations

from pathlib import Path

import pytest

from phimotion.core.accessibility import MotionAccessibilityGate, StaticMotionPreference
from phimotion.core.config import load_motion_config
from phimotion.core.parallax import (
    ElementGeometry,
    ParallaxTracker,
    ParallaxTransformCalculator,
    ViewportGeometry,
)
from phimotion.core.scheduling import ManualTimerBackend, SequenceOptions, SequenceScheduler
from phimotion.core.timing import resolve_duration


class TestFibonacciReveal:
    """Five items, 100ms nominal gap, Fibonacci spacing, forward."""

    @pytest.fixture
    def scheduler(self, timers: ManualTimerBackend, gate: MotionAccessibilityGate) -> SequenceScheduler:
        options = SequenceOptions(total_steps=5, base_delay=0.1, use_fibonacci=True)
        return SequenceScheduler(options, timers=timers, gate=gate)

    def test_third_item_appears_at_its_offset(
        self, scheduler: SequenceScheduler, timers: ManualTimerBackend
    ) -> None:
        scheduler.play()

        timers.advance(160)
        assert scheduler.current_step == 1
        assert scheduler.should_animate_step(2) is False

        timers.advance(1)
        assert scheduler.current_step == 2
        assert scheduler.should_animate_step(2) is True

    def test_activation_times(
        self, scheduler: SequenceScheduler, timers: ManualTimerBackend
    ) -> None:
        fired_at: list[tuple[int, int]] = []
        scheduler.on_step(lambda step: fired_at.append((step, timers.now_ms)))

        scheduler.play()
        timers.run_all()

        assert fired_at == [(0, 32), (1, 81), (2, 161), (3, 290), (4, 500)]
        assert scheduler.is_playing is False

    def test_user_enables_reduced_motion_mid_session(
        self,
        scheduler: SequenceScheduler,
        timers: ManualTimerBackend,
        motion_preference: StaticMotionPreference,
    ) -> None:
        scheduler.play()
        timers.advance(100)
        assert scheduler.current_step == 1

        # The running sequence is unaffected until the next play()
        motion_preference.set(True)
        timers.advance(400)
        assert scheduler.current_step == 4

        scheduler.play()
        assert scheduler.current_step == 4
        assert scheduler.pending_timers == 0


class TestConfiguredPage:
    """A page configured from YAML with a reveal sequence and a parallax hero."""

    def test_config_drives_all_components(self, tmp_path: Path, timers: ManualTimerBackend) -> None:
        path = tmp_path / "motion.yaml"
        path.write_text(
            "default_duration: slow\n"
            "stagger:\n"
            "  base_delay: 0.2\n"
            "  use_fibonacci: false\n"
            "  initial_delay: 0.1\n"
            "parallax:\n"
            "  use_golden_ratio: false\n"
            "  use_easing: false\n",
            encoding="utf-8",
        )
        config = load_motion_config(path)
        preference = StaticMotionPreference(False)
        gate = config.build_gate(preference)

        scheduler = SequenceScheduler(config.sequence_options(3), timers=timers, gate=gate)
        assert [s.offset_ms for s in scheduler.schedule()] == [300, 500, 700]

        tracker = ParallaxTracker(ParallaxTransformCalculator(config.parallax, gate=gate))
        viewport = ViewportGeometry(width=1000, height=1000)
        frame = tracker.update(ElementGeometry(top=200, height=100), viewport)
        assert frame.transform_offset == pytest.approx(-12.5)

        assert resolve_duration(config.default_duration, gate=gate) == pytest.approx(0.618)

        preference.set(True)
        assert resolve_duration(config.default_duration, gate=gate) == pytest.approx(0.309)
        assert tracker.update(ElementGeometry(top=200, height=100), viewport).transform_offset == 0.0
        assert scheduler.schedule() == []

        tracker.detach()
        assert preference.listener_count == 0
