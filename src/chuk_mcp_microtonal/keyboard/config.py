"""
Keyboard configuration - building configs from raw inputs and YAML.

Raw inputs arrive as strings or numbers from a UI or tool call. They
are converted strictly: anything that is not a finite number is
rejected with InvalidNumericInput rather than coerced.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_microtonal.core.errors import InvalidNumericInput, InvalidTuningDescriptor
from chuk_mcp_microtonal.core.tuning import parse_tuning, resolve_tuning
from chuk_mcp_microtonal.models.keyboard import KeyboardConfig

logger = logging.getLogger(__name__)


def parse_float(field: str, value: Any) -> float:
    """
    Convert an input to a finite float.

    Raises:
        InvalidNumericInput: For non-numeric, NaN or infinite input
    """
    if isinstance(value, bool):
        raise InvalidNumericInput(field, value)
    try:
        result = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise InvalidNumericInput(field, value) from None
    if not math.isfinite(result):
        raise InvalidNumericInput(field, value)
    return result


def parse_int(field: str, value: Any) -> int:
    """
    Convert an input to an int.

    Integral floats (4.0) are accepted; 4.5 is not.

    Raises:
        InvalidNumericInput: For non-integer input
    """
    if isinstance(value, bool):
        raise InvalidNumericInput(field, value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            raise InvalidNumericInput(field, value) from None
    number = parse_float(field, value)
    if not number.is_integer():
        raise InvalidNumericInput(field, value)
    return int(number)


def build_config(
    base_freq: Any,
    rows: Any,
    columns: Any,
    root_note: Any,
    tuning: str,
    mapping: str | Sequence[int] | None = None,
    note_names: str | Sequence[str] | None = None,
    fallback: bool = False,
) -> tuple[KeyboardConfig, str | None]:
    """
    Build a KeyboardConfig from raw inputs.

    Args:
        base_freq: Root frequency in Hz
        rows: Number of rows
        columns: Number of columns
        root_note: Root key index
        tuning: Tuning descriptor
        mapping: Optional index mapping (list or '0, 2, 4')
        note_names: Optional note names (list or 'C D E')
        fallback: Substitute the default tuning for an invalid descriptor
            instead of raising

    Returns:
        (config, warning) - warning describes a tuning fallback, if any

    Raises:
        InvalidNumericInput: For bad numeric settings
        InvalidTuningDescriptor: For a bad descriptor when fallback is False
    """
    warning = None
    if fallback:
        resolved, error = resolve_tuning(tuning)
        if error is not None:
            warning = f"{error} Using '{resolved.descriptor}' instead."
            tuning = resolved.descriptor
    else:
        parse_tuning(tuning)

    settings = {
        "base_freq": parse_float("base_freq", base_freq),
        "rows": parse_int("rows", rows),
        "columns": parse_int("columns", columns),
        "root_note": parse_int("root_note", root_note),
        "tuning": tuning,
        "mapping": mapping,
        "note_names": note_names,
    }
    return _validate(settings), warning


def _validate(settings: dict[str, Any]) -> KeyboardConfig:
    """Construct a KeyboardConfig, translating validation errors."""
    try:
        return KeyboardConfig.from_yaml_dict(settings)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "config"
        if field == "tuning":
            cause = error.get("ctx", {}).get("error")
            if isinstance(cause, InvalidTuningDescriptor):
                raise InvalidTuningDescriptor(cause.descriptor, str(cause)) from e
            raise InvalidTuningDescriptor(str(settings.get("tuning"))) from e
        raise InvalidNumericInput(
            field, error.get("input"), f"Invalid {field}: {error['msg']}"
        ) from e


def load_keyboard_config(path: Path) -> KeyboardConfig:
    """
    Load keyboard defaults from a YAML file.

    Example file:
        keyboard:
          base_freq: 261.63
          rows: 4
          columns: 12
          tuning: 19ed2
          note_names: C C# Db D

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidNumericInput / InvalidTuningDescriptor: For bad settings
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Keyboard config must be a mapping: {path}")

    config = _validate(data)
    logger.info(f"Loaded keyboard config from {path}: {config.tuning}, {config.total_keys} keys")
    return config
