"""
Constants and enums for the tuning system.

No magic strings - use enums for constrained values.
"""

from enum import Enum


class TuningKind(str, Enum):
    """The two tuning families a descriptor can resolve to."""

    EQUAL_DIVISION = "equal_division"  # e.g. 12ed2, 13ed3
    JUST_INTONATION = "just_intonation"  # e.g. 5-limit, 7-limit


# Keyboard defaults
DEFAULT_TUNING = "12ed2"
DEFAULT_BASE_FREQ = 261.63  # C4
DEFAULT_ROWS = 4
DEFAULT_COLUMNS = 12
DEFAULT_ROOT_NOTE = 0

# Cents in one 2:1 octave
CENTS_PER_OCTAVE = 1200

# Largest z accepted for z-limit just intonation
MAX_LIMIT = 255

# Highest accepted base frequency in Hz
MAX_BASE_FREQ = 100_000.0


class ErrorMessages:
    """Standardized error messages."""

    INVALID_DESCRIPTOR = (
        "Invalid tuning descriptor: '{descriptor}'. Expected format like '12ed2' or '7-limit'."
    )
    INVALID_LIMIT = "Invalid limit in '{descriptor}': must be an odd integer >= 3."
    LIMIT_TOO_LARGE = "Invalid limit in '{descriptor}': must not exceed {max_limit}."
    INVALID_DIVISIONS = (
        "Invalid equal division '{descriptor}': divisions and interval must be positive and finite."
    )
    INVALID_NUMBER = "Invalid {field}: '{value}' is not a valid number."
    KEYBOARD_NOT_FOUND = "Keyboard '{name}' not found."
    KEYBOARD_EXISTS = "Keyboard '{name}' already exists."
    KEY_NOT_FOUND = "Key {index} is outside the keyboard (0-{last})."


class SuccessMessages:
    """Standardized success messages."""

    KEYBOARD_CREATED = "Created keyboard '{name}' ({keys} keys)."
    KEYBOARD_APPLIED = "Applied settings to keyboard '{name}' ({keys} keys)."
    KEYBOARD_DELETED = "Keyboard '{name}' deleted."
