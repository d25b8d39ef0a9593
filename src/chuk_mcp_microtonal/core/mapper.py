"""
Frequency mapping - step from root to frequency, cents and name.

All functions here are pure: the same arguments always give the same
result, so they can be called repeatedly per key without side effects.

Just intonation wraps cyclically through its ratio table and does not
compound octaves: step len(ratios) sounds the same as step 0, and
step -1 sounds the highest ratio of the same octave.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from typing import assert_never

from chuk_mcp_microtonal.constants import CENTS_PER_OCTAVE
from chuk_mcp_microtonal.core.errors import IndexOutOfRange
from chuk_mcp_microtonal.core.tuning import EqualDivision, JustIntonation, Tuning

logger = logging.getLogger(__name__)


def cyclic_index(step: int, size: int) -> int:
    """Floored modulo: wraps any integer step into [0, size)."""
    if size <= 0:
        raise ValueError(f"Cannot cycle through an empty table (size {size})")
    return ((step % size) + size) % size


def map_step(step: int, mapping: Sequence[int]) -> int:
    """
    Substitute a step through an index mapping.

    Raises:
        IndexOutOfRange: If step is outside [0, len(mapping))
    """
    if not 0 <= step < len(mapping):
        raise IndexOutOfRange(step, len(mapping))
    return mapping[step]


def _tuning_step(step: int, mapping: Sequence[int] | None) -> int | None:
    """Resolve the tuning step for a key, or None if the key is silent."""
    if mapping is None:
        return step
    try:
        return map_step(step, mapping)
    except IndexOutOfRange as e:
        logger.debug(f"Silent key: {e}")
        return None


def calculate_frequency(
    step: int,
    tuning: Tuning,
    base_freq: float,
    mapping: Sequence[int] | None = None,
) -> float | None:
    """
    Frequency in Hz of the key `step` positions from the root.

    Args:
        step: Signed distance from the root key
        tuning: The resolved tuning
        base_freq: Frequency of step 0 in Hz
        mapping: Optional index mapping applied before tuning lookup

    Returns:
        Frequency in Hz, or None if the mapping leaves the key silent or
        the frequency is not representable as a positive finite float

    Example:
        calculate_frequency(12, EqualDivision(12, 2.0), 440.0) == 880.0
    """
    tuning_step = _tuning_step(step, mapping)
    if tuning_step is None:
        return None

    try:
        if isinstance(tuning, EqualDivision):
            freq = base_freq * tuning.interval ** (tuning_step / tuning.divisions)
        elif isinstance(tuning, JustIntonation):
            freq = base_freq * tuning.ratios[cyclic_index(tuning_step, len(tuning.ratios))]
        else:
            assert_never(tuning)
    except OverflowError:
        freq = math.inf

    if not math.isfinite(freq) or freq <= 0:
        logger.debug(f"Step {step} (tuning step {tuning_step}) is out of range, key is silent")
        return None
    return freq


def calculate_cents(freq: float, reference_freq: float) -> int:
    """Distance from reference_freq to freq in whole cents."""
    if not (0 < freq < math.inf and 0 < reference_freq < math.inf):
        raise ValueError(
            f"Frequencies must be positive and finite, got {freq} and {reference_freq}"
        )
    return round(CENTS_PER_OCTAVE * (math.log2(freq) - math.log2(reference_freq)))


def get_note_name(step: int, names: Sequence[str]) -> str:
    """
    Display name for a step, cycling through names.

    Negative steps walk backwards through the list. With no names the
    label is synthesized as 'Key <step>'.
    """
    if not names:
        return f"Key {step}"
    return names[cyclic_index(step, len(names))]


def ratio_label(
    step: int,
    tuning: Tuning,
    mapping: Sequence[int] | None = None,
) -> str | None:
    """
    Interval label for a step: '5/4' for just intonation, '7\\12' for
    equal division. None for silent keys.
    """
    tuning_step = _tuning_step(step, mapping)
    if tuning_step is None:
        return None

    if isinstance(tuning, EqualDivision):
        return f"{tuning_step}\\{tuning.divisions}"
    elif isinstance(tuning, JustIntonation):
        fraction = tuning.fractions[cyclic_index(tuning_step, len(tuning.fractions))]
        return f"{fraction.numerator}/{fraction.denominator}"
    else:
        assert_never(tuning)
