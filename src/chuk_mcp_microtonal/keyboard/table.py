"""
Frequency table - the resolved keyboard.

resolve(config) is a pure function from KeyboardConfig to an immutable
FrequencyTable. Every key gets a frequency (or None when silent), a
cents offset from the root key and a display name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from chuk_mcp_microtonal.core.mapper import (
    calculate_cents,
    calculate_frequency,
    get_note_name,
    ratio_label,
)
from chuk_mcp_microtonal.core.tuning import Tuning
from chuk_mcp_microtonal.models.keyboard import KeyboardConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyInfo:
    """One key of the resolved keyboard."""

    index: int
    row: int
    column: int
    step: int  # index - root
    frequency: float | None  # None = silent key
    cents: int | None
    name: str
    ratio: str | None = None

    @property
    def is_silent(self) -> bool:
        return self.frequency is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "row": self.row,
            "column": self.column,
            "step": self.step,
            "frequency": self.frequency,
            "cents": self.cents,
            "name": self.name,
            "ratio": self.ratio,
        }


@dataclass(frozen=True)
class FrequencyTable:
    """
    The complete per-key table for one KeyboardConfig.

    Keys are stored in row-major order; keys[i].index == i.
    Immutable: new settings produce a new table.
    """

    config: KeyboardConfig
    tuning: Tuning
    root: int  # effective root after clamping
    reference_freq: float  # frequency the cents are measured from
    keys: tuple[KeyInfo, ...]

    def __len__(self) -> int:
        return len(self.keys)

    def get(self, index: int) -> KeyInfo | None:
        """Get a key by index, or None if outside the keyboard."""
        if 0 <= index < len(self.keys):
            return self.keys[index]
        return None

    def grid(self) -> list[list[KeyInfo]]:
        """Keys grouped into rows."""
        columns = self.config.columns
        return [list(self.keys[r * columns : (r + 1) * columns]) for r in range(self.config.rows)]

    def frequencies(self) -> list[float | None]:
        return [k.frequency for k in self.keys]

    def to_dict(self) -> dict[str, Any]:
        return {
            "config": self.config.to_yaml_dict(),
            "tuning": {
                "descriptor": self.tuning.descriptor,
                "kind": self.tuning.kind.value,
                "steps": self.tuning.step_count,
            },
            "root": self.root,
            "reference_freq": self.reference_freq,
            "keys": [k.to_dict() for k in self.keys],
        }


def clamp_root(root_note: int, total_keys: int) -> int:
    """Clamp a root index into [0, total_keys)."""
    return min(max(root_note, 0), total_keys - 1)


def resolve(config: KeyboardConfig) -> FrequencyTable:
    """
    Resolve a keyboard configuration into its frequency table.

    The root key is clamped into the keyboard. Cents are measured from
    the root key's own frequency, so the root always reads 0; if the
    mapping silences the root, the base frequency is used instead.

    Args:
        config: Keyboard settings

    Returns:
        The FrequencyTable for every key
    """
    tuning = config.get_tuning()
    total = config.total_keys
    root = clamp_root(config.root_note, total)
    if root != config.root_note:
        logger.debug(f"Root {config.root_note} clamped to {root}")

    mapping = config.mapping
    root_freq = calculate_frequency(0, tuning, config.base_freq, mapping)
    reference_freq = root_freq if root_freq is not None else config.base_freq

    keys = []
    for index in range(total):
        step = index - root
        freq = calculate_frequency(step, tuning, config.base_freq, mapping)
        keys.append(
            KeyInfo(
                index=index,
                row=index // config.columns,
                column=index % config.columns,
                step=step,
                frequency=freq,
                cents=calculate_cents(freq, reference_freq) if freq is not None else None,
                name=get_note_name(step, config.note_names),
                ratio=ratio_label(step, tuning, mapping) if freq is not None else None,
            )
        )

    return FrequencyTable(
        config=config,
        tuning=tuning,
        root=root,
        reference_freq=reference_freq,
        keys=tuple(keys),
    )
