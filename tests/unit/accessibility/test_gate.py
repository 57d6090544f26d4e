"""Tests for MotionAccessibilityGate."""

from __future__ import annotations

import logging

import pytest

from phimotion.core.accessibility.gate import MotionAccessibilityGate
from phimotion.core.accessibility.preference import StaticMotionPreference


class _BrokenPreference:
    def prefers_reduced_motion(self) -> bool:
        raise RuntimeError("media query unavailable")

    def subscribe(self, listener):  # noqa: ANN001, ANN201
        return lambda: None


class TestSignal:
    """Tests for reading the preference."""

    def test_default_gate_allows_motion(self) -> None:
        gate = MotionAccessibilityGate()
        assert gate.is_reduced_motion_preferred() is False
        assert gate.should_animate() is True

    def test_reflects_changes_without_caching(
        self, gate: MotionAccessibilityGate, motion_preference: StaticMotionPreference
    ) -> None:
        assert gate.should_animate() is True
        motion_preference.set(True)
        assert gate.should_animate() is False

    def test_unavailable_signal_reads_as_false(self, caplog: pytest.LogCaptureFixture) -> None:
        gate = MotionAccessibilityGate(_BrokenPreference())
        with caplog.at_level(logging.WARNING):
            assert gate.is_reduced_motion_preferred() is False
        assert "unavailable" in caplog.text

    def test_global_switch(self) -> None:
        gate = MotionAccessibilityGate(animations_enabled=False)
        assert gate.should_animate() is False
        assert gate.is_reduced_motion_preferred() is False

    def test_subscribe_forwards_to_source(
        self, gate: MotionAccessibilityGate, motion_preference: StaticMotionPreference
    ) -> None:
        seen: list[bool] = []
        gate.subscribe(seen.append)
        motion_preference.set(True)
        assert seen == [True]


class TestAdaptation:
    """Tests for value de-amplification."""

    def test_identity_without_preference(self, gate: MotionAccessibilityGate) -> None:
        adapted = gate.adapt(0.4, 30.0, 1.2)
        assert (adapted.duration, adapted.distance, adapted.scale) == (0.4, 30.0, 1.2)

    def test_reduced_values(self, reduced_gate: MotionAccessibilityGate) -> None:
        adapted = reduced_gate.adapt(0.4, 30.0, 1.2)
        assert adapted.duration == pytest.approx(0.2)
        assert adapted.distance == pytest.approx(9.0)
        assert adapted.scale == pytest.approx(1.05)

    def test_scale_below_one(self, reduced_gate: MotionAccessibilityGate) -> None:
        assert reduced_gate.adapt(1.0, 0.0, 0.6).scale == pytest.approx(0.9)

    def test_adapt_duration(self, reduced_gate: MotionAccessibilityGate) -> None:
        assert reduced_gate.adapt_duration(0.618) == pytest.approx(0.309)

    def test_accessible_settings_default(self, gate: MotionAccessibilityGate) -> None:
        settings = gate.accessible_settings()
        assert settings.duration == pytest.approx(0.309)
        assert settings.distance == 30.0
        assert settings.should_animate is True

    def test_accessible_settings_reduced(self, reduced_gate: MotionAccessibilityGate) -> None:
        settings = reduced_gate.accessible_settings(duration=1.0, distance=50.0)
        assert settings.duration == pytest.approx(0.5)
        assert settings.distance == pytest.approx(15.0)
        assert settings.should_animate is False

    def test_accessible_settings_disabled(self) -> None:
        settings = MotionAccessibilityGate(animations_enabled=False).accessible_settings()
        assert settings.should_animate is False
