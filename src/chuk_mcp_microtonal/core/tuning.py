"""
Tuning primitives - EqualDivision, JustIntonation and the descriptor parser.

A Tuning is an immutable value with exactly two variants:
- EqualDivision: n equal logarithmic steps of an interval ("19ed2", "13ed3")
- JustIntonation: the octave-reduced ratios of a z-limit ("5-limit")

Descriptors are parsed once; only the resolved Tuning is kept.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from fractions import Fraction

from chuk_mcp_microtonal.constants import DEFAULT_TUNING, MAX_LIMIT, ErrorMessages, TuningKind
from chuk_mcp_microtonal.core.errors import InvalidTuningDescriptor
from chuk_mcp_microtonal.core.ratio import generate_edo_ratios, generate_z_limit_ratios

logger = logging.getLogger(__name__)

_EQUAL_DIVISION_RE = re.compile(r"^(\d+)ed([\d.]+)$", re.IGNORECASE)
_LIMIT_RE = re.compile(r"^(\d+)-limit$", re.IGNORECASE)


@dataclass(frozen=True)
class EqualDivision:
    """
    An interval divided into equal logarithmic steps.

    The interval is the ratio being divided: 2.0 for the octave,
    3.0 for the tritave (Bohlen-Pierce is 13ed3).

    Immutable and hashable.
    """

    divisions: int
    interval: float = 2.0

    def __post_init__(self) -> None:
        if self.divisions <= 0:
            raise ValueError(f"Divisions must be positive, got {self.divisions}")
        if not self.interval > 0 or not math.isfinite(self.interval):
            raise ValueError(f"Interval must be positive and finite, got {self.interval}")

    @property
    def kind(self) -> TuningKind:
        return TuningKind.EQUAL_DIVISION

    @property
    def step_count(self) -> int:
        """Number of steps in one period."""
        return self.divisions

    @property
    def period(self) -> float:
        """Ratio spanned by one full cycle of steps."""
        return self.interval

    @property
    def ratios(self) -> tuple[float, ...]:
        """Step ratios within one period, starting at 1.0."""
        return generate_edo_ratios(self.divisions, self.interval)

    @property
    def descriptor(self) -> str:
        return f"{self.divisions}ed{self.interval:g}"

    def __str__(self) -> str:
        return self.descriptor


@dataclass(frozen=True)
class JustIntonation:
    """
    The octave-reduced ratio set of a z-limit just intonation.

    `fractions` holds the exact canonical ratios; `ratios` the same values
    as floats for frequency arithmetic. Both are strictly increasing,
    lie in [1, 2) and start with unison.

    Use JustIntonation.from_limit() rather than building the ratio
    tuples by hand.
    """

    limit: int
    fractions: tuple[Fraction, ...]
    ratios: tuple[float, ...]

    def __post_init__(self) -> None:
        if self.limit < 3 or self.limit % 2 == 0:
            raise ValueError(f"Limit must be an odd integer >= 3, got {self.limit}")
        if not self.fractions or self.fractions[0] != 1:
            raise ValueError("Just intonation ratios must start with unison")
        if len(self.fractions) != len(self.ratios):
            raise ValueError("Fractions and ratios must have the same length")
        if any(a >= b for a, b in zip(self.fractions, self.fractions[1:])):
            raise ValueError("Just intonation ratios must be strictly increasing")
        if self.fractions[-1] >= 2:
            raise ValueError("Just intonation ratios must lie below the octave")

    @classmethod
    def from_limit(cls, limit: int) -> JustIntonation:
        """Enumerate the ratio set for a z-limit."""
        fractions = generate_z_limit_ratios(limit)
        return cls(
            limit=limit,
            fractions=fractions,
            ratios=tuple(float(f) for f in fractions),
        )

    @property
    def kind(self) -> TuningKind:
        return TuningKind.JUST_INTONATION

    @property
    def step_count(self) -> int:
        """Number of distinct ratios in the octave."""
        return len(self.ratios)

    @property
    def period(self) -> float:
        return 2.0

    @property
    def descriptor(self) -> str:
        return f"{self.limit}-limit"

    def __str__(self) -> str:
        return self.descriptor


Tuning = EqualDivision | JustIntonation


def parse_tuning(descriptor: str) -> Tuning:
    """
    Parse a tuning descriptor into a Tuning.

    Grammar (case-insensitive, surrounding whitespace ignored):
        <n>ed<k>     equal division of interval k into n steps
        <z>-limit    z-limit just intonation, z odd, 3 <= z <= MAX_LIMIT

    Args:
        descriptor: Descriptor such as '12ed2', '13ed3' or '7-limit'

    Returns:
        The resolved Tuning

    Raises:
        InvalidTuningDescriptor: If the descriptor is malformed or its
            parameters are out of range
    """
    text = descriptor.strip()

    match = _EQUAL_DIVISION_RE.match(text)
    if match:
        # int() refuses very long digit strings with ValueError
        try:
            divisions = int(match.group(1))
            interval = float(match.group(2))
        except ValueError:
            raise InvalidTuningDescriptor(descriptor) from None
        if divisions <= 0 or not interval > 0 or not math.isfinite(interval):
            raise InvalidTuningDescriptor(
                descriptor, ErrorMessages.INVALID_DIVISIONS.format(descriptor=descriptor)
            )
        try:
            return EqualDivision(divisions=divisions, interval=interval)
        except ValueError as e:
            raise InvalidTuningDescriptor(
                descriptor, ErrorMessages.INVALID_DIVISIONS.format(descriptor=descriptor)
            ) from e

    match = _LIMIT_RE.match(text)
    if match:
        try:
            limit = int(match.group(1))
        except ValueError:
            raise InvalidTuningDescriptor(
                descriptor, ErrorMessages.INVALID_LIMIT.format(descriptor=descriptor)
            ) from None
        if limit < 3 or limit % 2 == 0:
            raise InvalidTuningDescriptor(
                descriptor, ErrorMessages.INVALID_LIMIT.format(descriptor=descriptor)
            )
        if limit > MAX_LIMIT:
            raise InvalidTuningDescriptor(
                descriptor,
                ErrorMessages.LIMIT_TOO_LARGE.format(descriptor=descriptor, max_limit=MAX_LIMIT),
            )
        return JustIntonation.from_limit(limit)

    raise InvalidTuningDescriptor(descriptor)


def try_parse_tuning(descriptor: str) -> Tuning | InvalidTuningDescriptor:
    """
    Parse a descriptor without raising.

    Returns the Tuning on success, or the InvalidTuningDescriptor
    describing the failure.
    """
    try:
        return parse_tuning(descriptor)
    except InvalidTuningDescriptor as e:
        return e


def resolve_tuning(
    descriptor: str,
    fallback: str = DEFAULT_TUNING,
) -> tuple[Tuning, InvalidTuningDescriptor | None]:
    """
    Parse a descriptor, falling back to a default tuning on failure.

    Args:
        descriptor: Descriptor to parse
        fallback: Descriptor used when parsing fails (must itself be valid)

    Returns:
        (tuning, error) - error is None when the descriptor parsed
    """
    result = try_parse_tuning(descriptor)
    if isinstance(result, InvalidTuningDescriptor):
        logger.warning(f"{result} Falling back to '{fallback}'.")
        return parse_tuning(fallback), result
    return result, None
