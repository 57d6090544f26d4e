"""Safe indexed access to the Fibonacci sequence.

The provider answers any non-negative index. Indices inside the canonical
table are served directly; anything beyond is produced by iterative summation
and appended to a per-provider cache, so the backing list only ever grows.
"""

from __future__ import annotations

import logging
import math

from phimotion.core.sequence.constants import FIBONACCI

logger = logging.getLogger(__name__)


def _coerce_index(index: float) -> int:
    """Clamp malformed indices (negative, NaN, inf) to a usable integer."""
    try:
        value = float(index)
    except (TypeError, ValueError):
        logger.debug("Non-numeric Fibonacci index %r, using 0", index)
        return 0

    if math.isnan(value) or value < 0:
        return 0
    if math.isinf(value):
        # No sensible finite answer; stay at the end of the canonical table
        return len(FIBONACCI) - 1
    return int(value)


class FibonacciProvider:
    """Memoized Fibonacci lookup that extends past the canonical table.

    Entries are append-only, so readers never observe a value change once it
    has been computed.

    Example:
        >>> fib = FibonacciProvider()
        >>> fib.value_at(10)
        89
        >>> fib.range_slice(2, 6)
        [2, 3, 5, 8]
    """

    def __init__(self) -> None:
        self._values: list[int] = list(FIBONACCI)

    def __len__(self) -> int:
        return len(self._values)

    @property
    def cached_count(self) -> int:
        """Number of values currently held (table plus generated)."""
        return len(self._values)

    def _extend_to(self, index: int) -> None:
        values = self._values
        if index < len(values):
            return

        start = len(values)
        while len(values) <= index:
            values.append(values[-1] + values[-2])
        logger.debug("Extended Fibonacci cache from %d to %d entries", start, len(values))

    def value_at(self, index: float) -> int:
        """Return F(index), clamping malformed indices instead of raising.

        Args:
            index: Zero-based position. Negative or NaN resolves to index 0.

        Returns:
            Positive Fibonacci value.
        """
        i = _coerce_index(index)
        self._extend_to(i)
        return self._values[i]

    def range_slice(self, start: float, end: float) -> list[int]:
        """Return ``[F(start), ..., F(end - 1)]``.

        ``end`` below ``start`` is treated as ``start`` (empty result).
        """
        lo = _coerce_index(start)
        hi = max(lo, _coerce_index(end))
        if lo == hi:
            return []

        self._extend_to(hi - 1)
        return self._values[lo:hi]


_default_provider = FibonacciProvider()


def get_fibonacci_provider() -> FibonacciProvider:
    """Process-wide provider; safe to share since the cache is append-only."""
    return _default_provider


def fibonacci(index: float) -> int:
    """Shortcut for ``get_fibonacci_provider().value_at(index)``."""
    return _default_provider.value_at(index)
