"""Shared pytest fixtures for phimotion tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging

import pytest

from phimotion.core.accessibility import MotionAccessibilityGate, StaticMotionPreference
from phimotion.core.scheduling import ManualTimerBackend
from phimotion.core.sequence import FibonacciProvider

# ============================================================================
# Sequence Fixtures
# ============================================================================


@pytest.fixture
def provider() -> FibonacciProvider:
    """Fresh provider with an empty extension cache."""
    return FibonacciProvider()


# ============================================================================
# Accessibility Fixtures
# ============================================================================


@pytest.fixture
def motion_preference() -> StaticMotionPreference:
    """Preference source with motion allowed."""
    return StaticMotionPreference(False)


@pytest.fixture
def gate(motion_preference: StaticMotionPreference) -> MotionAccessibilityGate:
    """Gate over a mutable preference (motion allowed initially)."""
    return MotionAccessibilityGate(motion_preference)


@pytest.fixture
def reduced_gate() -> MotionAccessibilityGate:
    """Gate with reduced motion active."""
    return MotionAccessibilityGate(StaticMotionPreference(True))


# ============================================================================
# Timer Fixtures
# ============================================================================


@pytest.fixture
def timers() -> ManualTimerBackend:
    """Virtual-clock timer backend."""
    return ManualTimerBackend()


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Remove handlers installed by configure_logging during the test."""
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
