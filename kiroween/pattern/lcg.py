"""
Seeded placement sequence for the background tile.
Exact integer arithmetic with a modulo at each step, so a seed always gives the same tile.
"""
from typing import Iterator

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31

# Second-stage mix that turns a seed into a fraction in [0, 1)
FRACTION_MULTIPLIER = 9301
FRACTION_INCREMENT = 49297
FRACTION_MODULUS = 233280


def next_seed(seed: int) -> int:
    """One linear-congruential step: (seed * 1103515245 + 12345) mod 2^31."""
    return (seed * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS


def cell_fraction(seed: int) -> float:
    """Cell-local pseudo-random fraction in [0, 1)."""
    return ((seed * FRACTION_MULTIPLIER + FRACTION_INCREMENT) % FRACTION_MODULUS) / FRACTION_MODULUS


def cell_fractions(seed: int, count: int) -> Iterator[float]:
    """Advance the seed `count` times, yielding the fraction for each step."""
    for _ in range(count):
        seed = next_seed(seed)
        yield cell_fraction(seed)
