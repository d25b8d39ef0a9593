"""
Keyboard configuration model.

A KeyboardConfig holds every user setting that determines the keyboard:
- Base frequency of the root key
- Grid size (rows x columns)
- Root key index
- Tuning descriptor
- Optional index mapping and note-name table

It is immutable: applying new settings means building a new config.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_microtonal.constants import (
    DEFAULT_BASE_FREQ,
    DEFAULT_COLUMNS,
    DEFAULT_ROOT_NOTE,
    DEFAULT_ROWS,
    DEFAULT_TUNING,
    MAX_BASE_FREQ,
)
from chuk_mcp_microtonal.core.errors import InvalidNumericInput
from chuk_mcp_microtonal.core.tuning import Tuning, parse_tuning

MAX_GRID_SIZE = 128

_LIST_SEPARATOR_RE = re.compile(r"[,\s]+")


def split_list(text: str) -> list[str]:
    """Split a comma/whitespace separated list, dropping empty items."""
    return [item for item in _LIST_SEPARATOR_RE.split(text.strip()) if item]


def parse_int_list(text: str, field: str = "mapping") -> list[int]:
    """
    Parse '0, 2 4,7' into [0, 2, 4, 7].

    Raises:
        InvalidNumericInput: If any item is not an integer
    """
    values = []
    for item in split_list(text):
        try:
            values.append(int(item))
        except ValueError:
            raise InvalidNumericInput(field, item) from None
    return values


class KeyboardConfig(BaseModel):
    """
    Complete settings for one keyboard.

    Mapping and note names accept either lists or the comma/whitespace
    separated strings a text input produces.
    """

    base_freq: float = Field(
        DEFAULT_BASE_FREQ,
        gt=0,
        le=MAX_BASE_FREQ,
        allow_inf_nan=False,
        description="Frequency of the root key in Hz",
    )
    rows: int = Field(DEFAULT_ROWS, gt=0, le=MAX_GRID_SIZE, description="Number of key rows")
    columns: int = Field(
        DEFAULT_COLUMNS, gt=0, le=MAX_GRID_SIZE, description="Number of key columns"
    )
    root_note: int = Field(
        DEFAULT_ROOT_NOTE,
        description="Index of the root key (clamped into the keyboard when resolved)",
    )
    tuning: str = Field(DEFAULT_TUNING, description="Tuning descriptor (e.g., '19ed2', '7-limit')")
    mapping: tuple[int, ...] | None = Field(
        None, description="Optional step remap applied before tuning lookup"
    )
    note_names: tuple[str, ...] = Field(
        default_factory=tuple, description="Display names cycled across keys"
    )

    model_config = {"frozen": True}

    @field_validator("tuning")
    @classmethod
    def validate_tuning(cls, v: str) -> str:
        """Validate the descriptor by parsing it."""
        parse_tuning(v)
        return v.strip()

    @field_validator("mapping", mode="before")
    @classmethod
    def split_mapping(cls, v: Any) -> Any:
        """Accept '0, 2, 4' as well as [0, 2, 4]; an empty string means no mapping."""
        if isinstance(v, str):
            values = parse_int_list(v)
            return tuple(values) if values else None
        return v

    @field_validator("note_names", mode="before")
    @classmethod
    def split_note_names(cls, v: Any) -> Any:
        """Accept 'C D E' as well as ['C', 'D', 'E']."""
        if v is None:
            return ()
        if isinstance(v, str):
            return tuple(split_list(v))
        return v

    @property
    def total_keys(self) -> int:
        return self.rows * self.columns

    def get_tuning(self) -> Tuning:
        """Get the parsed Tuning."""
        return parse_tuning(self.tuning)

    def with_updates(self, **changes: Any) -> KeyboardConfig:
        """Return a new validated config with some settings replaced."""
        data = self.model_dump()
        data.update({k: v for k, v in changes.items() if v is not None})
        return KeyboardConfig(**data)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for YAML serialization."""
        result: dict[str, Any] = {
            "base_freq": self.base_freq,
            "rows": self.rows,
            "columns": self.columns,
            "root_note": self.root_note,
            "tuning": self.tuning,
        }
        if self.mapping is not None:
            result["mapping"] = list(self.mapping)
        if self.note_names:
            result["note_names"] = list(self.note_names)
        return result

    @classmethod
    def from_yaml_dict(cls, data: dict[str, Any]) -> KeyboardConfig:
        """
        Create from a YAML dictionary.

        Settings may sit at the top level or under a 'keyboard' key.
        """
        if "keyboard" in data and isinstance(data["keyboard"], dict):
            data = data["keyboard"]
        return cls(**data)
