"""
Ratio primitives - integer factoring, octave reduction, cents.

Ratios are kept as Fraction wherever they are rational, so that
deduplication and comparison are exact. Floats only appear at the
boundary where frequencies are computed.
"""

from __future__ import annotations

import math
from fractions import Fraction
from typing import TypeVar

from chuk_mcp_microtonal.constants import CENTS_PER_OCTAVE

R = TypeVar("R", Fraction, float)


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor by Euclid's algorithm.

    gcd(0, n) == n and gcd(n, 0) == n.
    """
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a


def prime_factors(n: int) -> list[int]:
    """
    Prime factors of n in ascending order, with multiplicity.

    prime_factors(12) == [2, 2, 3]; prime_factors(1) == [].
    """
    if n < 1:
        raise ValueError(f"Can only factor positive integers, got {n}")

    factors: list[int] = []
    x = n
    p = 2
    while p * p <= x:
        while x % p == 0:
            factors.append(p)
            x //= p
        p += 1
    if x > 1:
        factors.append(x)
    return factors


def largest_odd_prime_factor(n: int) -> int:
    """Largest odd prime dividing n, or 1 if n is a power of two."""
    odd = [f for f in prime_factors(n) if f != 2]
    return max(odd) if odd else 1


def has_allowed_factors(n: int, limit: int) -> bool:
    """
    Check z-limit membership of an integer.

    Factors of 2 are ignored (they only shift octaves); every remaining
    prime factor must be <= limit.
    """
    return largest_odd_prime_factor(n) <= limit


def octave_reduce(ratio: R) -> R:
    """
    Rescale a ratio by powers of two into [1, 2).

    Works on both Fraction (exact) and float.

    Raises:
        ValueError: If the ratio is not positive and finite
    """
    if not ratio > 0 or not math.isfinite(ratio):
        raise ValueError(f"Ratio must be positive and finite, got {ratio}")

    while ratio < 1:
        ratio = ratio * 2
    while ratio >= 2:
        ratio = ratio / 2
    return ratio


def generate_z_limit_ratios(limit: int) -> tuple[Fraction, ...]:
    """
    Enumerate the octave-reduced ratios of a z-limit just intonation.

    Every pair of odd integers num, den in [1, limit] whose odd prime
    factors are all <= limit yields num/den in lowest terms, reduced
    into [1, 2). Duplicates collapse on the exact fraction.

    Args:
        limit: Odd integer >= 3

    Returns:
        Strictly increasing ratios, starting with unison

    Example:
        generate_z_limit_ratios(3) == (Fraction(1), Fraction(4, 3), Fraction(3, 2))
    """
    if limit < 3 or limit % 2 == 0:
        raise ValueError(f"Limit must be an odd integer >= 3, got {limit}")

    candidates = [n for n in range(1, limit + 1, 2) if has_allowed_factors(n, limit)]

    ratios: set[Fraction] = set()
    for num in candidates:
        for den in candidates:
            g = gcd(num, den)
            ratios.add(octave_reduce(Fraction(num // g, den // g)))

    return tuple(sorted(ratios))


def generate_edo_ratios(divisions: int, interval: float = 2.0) -> tuple[float, ...]:
    """
    Per-step ratios of one period of an equal division.

    generate_edo_ratios(12) gives the twelve 12-TET ratios from 1.0 up to
    (but excluding) the octave.
    """
    if divisions <= 0:
        raise ValueError(f"Divisions must be positive, got {divisions}")
    if not interval > 0:
        raise ValueError(f"Interval must be positive, got {interval}")

    step = interval ** (1 / divisions)
    return tuple(step**i for i in range(divisions))


def ratio_to_cents(ratio: float | Fraction) -> float:
    """Size of a ratio in cents (unrounded)."""
    if not ratio > 0:
        raise ValueError(f"Ratio must be positive, got {ratio}")
    return CENTS_PER_OCTAVE * math.log2(ratio)
