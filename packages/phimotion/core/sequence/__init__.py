"""Sequence constants and Fibonacci lookup."""

from phimotion.core.sequence.constants import (
    FIBONACCI,
    GOLDEN_SECTIONS,
    PHI,
    PHI_INVERSE,
)
from phimotion.core.sequence.fibonacci import (
    FibonacciProvider,
    fibonacci,
    get_fibonacci_provider,
)

__all__ = [
    "FIBONACCI",
    "GOLDEN_SECTIONS",
    "PHI",
    "PHI_INVERSE",
    "FibonacciProvider",
    "fibonacci",
    "get_fibonacci_provider",
]
