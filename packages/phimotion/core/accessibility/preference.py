"""Reduced-motion preference sources.

A preference source is the single capability through which the hosting
environment tells the engine whether the user asked for reduced motion.
Components never read a global flag; they receive a source (via the gate)
at construction, so tests can drive both states deterministically.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
import os
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

PreferenceListener = Callable[[bool], None]
Unsubscribe = Callable[[], None]

DEFAULT_ENV_VAR = "PHIMOTION_REDUCED_MOTION"
_TRUTHY = frozenset({"1", "true", "yes", "on", "reduce"})


@runtime_checkable
class MotionPreference(Protocol):
    """Source of the "prefers reduced motion" signal."""

    def prefers_reduced_motion(self) -> bool:
        """Current value of the signal."""
        ...

    def subscribe(self, listener: PreferenceListener) -> Unsubscribe:
        """Register a change listener; returns a callable that removes it."""
        ...


class StaticMotionPreference:
    """In-memory preference that notifies listeners when it changes.

    Not thread-safe (one event loop per instance).
    """

    def __init__(self, reduced: bool = False) -> None:
        self._reduced = reduced
        self._listeners: list[PreferenceListener] = []

    def prefers_reduced_motion(self) -> bool:
        return self._reduced

    def set(self, reduced: bool) -> None:
        """Update the preference, notifying listeners only on change."""
        if reduced == self._reduced:
            return
        self._reduced = reduced
        logger.debug("Reduced motion preference changed to %s", reduced)
        for listener in list(self._listeners):
            listener(reduced)

    def subscribe(self, listener: PreferenceListener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


class EnvironmentMotionPreference:
    """Preference read from an environment variable on every query.

    ``1``, ``true``, ``yes``, ``on`` or ``reduce`` (case-insensitive) mean
    reduced motion. A missing variable means motion is acceptable. The
    environment cannot push changes, so listeners are accepted but never
    called.
    """

    def __init__(self, var_name: str = DEFAULT_ENV_VAR, environ: Mapping[str, str] | None = None):
        self.var_name = var_name
        self._environ = environ if environ is not None else os.environ

    def prefers_reduced_motion(self) -> bool:
        raw = self._environ.get(self.var_name)
        if raw is None:
            return False
        return raw.strip().lower() in _TRUTHY

    def subscribe(self, listener: PreferenceListener) -> Unsubscribe:
        return lambda: None
