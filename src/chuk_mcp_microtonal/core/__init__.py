"""
Core tuning primitives - the resolution engine.

These are the pure functions everything else composes on:
- EqualDivision / JustIntonation: the two Tuning variants
- parse_tuning: descriptor string -> Tuning
- generate_z_limit_ratios: exact z-limit ratio enumeration
- calculate_frequency / calculate_cents / get_note_name: per-key mapping
"""

from chuk_mcp_microtonal.core.errors import (
    IndexOutOfRange,
    InvalidNumericInput,
    InvalidTuningDescriptor,
    TuningError,
)
from chuk_mcp_microtonal.core.mapper import (
    calculate_cents,
    calculate_frequency,
    cyclic_index,
    get_note_name,
    map_step,
    ratio_label,
)
from chuk_mcp_microtonal.core.ratio import (
    gcd,
    generate_edo_ratios,
    generate_z_limit_ratios,
    has_allowed_factors,
    octave_reduce,
    prime_factors,
    ratio_to_cents,
)
from chuk_mcp_microtonal.core.tuning import (
    EqualDivision,
    JustIntonation,
    Tuning,
    parse_tuning,
    resolve_tuning,
    try_parse_tuning,
)

__all__ = [
    # Errors
    "TuningError",
    "InvalidTuningDescriptor",
    "InvalidNumericInput",
    "IndexOutOfRange",
    # Ratios
    "gcd",
    "prime_factors",
    "has_allowed_factors",
    "octave_reduce",
    "generate_z_limit_ratios",
    "generate_edo_ratios",
    "ratio_to_cents",
    # Tunings
    "EqualDivision",
    "JustIntonation",
    "Tuning",
    "parse_tuning",
    "try_parse_tuning",
    "resolve_tuning",
    # Mapping
    "calculate_frequency",
    "calculate_cents",
    "get_note_name",
    "cyclic_index",
    "map_step",
    "ratio_label",
]
