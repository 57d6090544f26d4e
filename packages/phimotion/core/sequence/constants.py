"""Golden ratio and Fibonacci constants.

Pure data shared by every timing component. Nothing in here is mutated at
runtime; the lazily extended sequence lives in ``fibonacci.py``.
"""

from __future__ import annotations

from typing import Final

PHI: Final[float] = 1.618033988749895
PHI_INVERSE: Final[float] = 0.618033988749895

# Canonical 0-indexed table (indices 0..21)
FIBONACCI: Final[tuple[int, ...]] = (
    1,
    1,
    2,
    3,
    5,
    8,
    13,
    21,
    34,
    55,
    89,
    144,
    233,
    377,
    610,
    987,
    1597,
    2584,
    4181,
    6765,
    10946,
    17711,
)

GOLDEN_SECTIONS: Final[dict[str, float]] = {
    "major": PHI_INVERSE,
    "minor": 1 - PHI_INVERSE,
}

# Index 8 -> 34px, used when a parallax range of 0 is supplied
DEFAULT_PARALLAX_RANGE_INDEX: Final[int] = 8
