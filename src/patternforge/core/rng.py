# Copyright 2025 Tobias Olenyi.
# SPDX-License-Identifier: Apache-2.0

"""Seeded 32-bit pseudo random number generator (mulberry32).

All arithmetic wraps at 32 bits so a given seed yields the same sequence of
floats on every platform. Each call to `mulberry32` returns an independent
generator; no state is shared between generators.
"""

import random
from typing import Callable

RNG = Callable[[], float]

MASK_32 = 0xFFFFFFFF
GOLDEN_INCREMENT = 0x6D2B79F5
MAX_SEED = 2147483647


def _imul(a: int, b: int) -> int:
    """32-bit wrapping multiplication."""
    return (a * b) & MASK_32


def mulberry32(seed: int) -> RNG:
    """Create a deterministic generator of floats in [0, 1).

    Args:
        seed: Seed value, reduced modulo 2**32.

    Returns:
        A zero-argument callable producing the next float of the sequence.
    """
    state = seed & MASK_32

    def next_float() -> float:
        nonlocal state
        state = (state + GOLDEN_INCREMENT) & MASK_32
        t = _imul(state ^ (state >> 15), state | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    return next_float


def generate_random_seed() -> int:
    """Draw a fresh seed for a new design."""
    return random.randrange(0, MAX_SEED)
