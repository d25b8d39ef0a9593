"""
Keyboard Manager - holds the live frequency table of each keyboard.

Applying settings resolves a complete new FrequencyTable first and only
then replaces the stored one, so readers never see a half-built table.
A failed apply leaves the previous table in place.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from chuk_mcp_microtonal.constants import ErrorMessages
from chuk_mcp_microtonal.keyboard.table import FrequencyTable, resolve
from chuk_mcp_microtonal.models.keyboard import KeyboardConfig

logger = logging.getLogger(__name__)


class KeyboardMetadata:
    """Lightweight metadata for listing keyboards."""

    def __init__(
        self,
        name: str,
        tuning: str,
        rows: int,
        columns: int,
        base_freq: float,
        modified: datetime,
    ):
        self.name = name
        self.tuning = tuning
        self.rows = rows
        self.columns = columns
        self.base_freq = base_freq
        self.modified = modified

    def __repr__(self) -> str:
        return f"KeyboardMetadata({self.name!r}, {self.tuning}, {self.rows}x{self.columns})"


class KeyboardManager:
    """
    Manages named keyboards in memory.

    Each keyboard is a resolved FrequencyTable. Tables are immutable and
    replaced wholesale on every apply.
    """

    def __init__(self, defaults: KeyboardConfig | None = None):
        """
        Initialize the manager.

        Args:
            defaults: Settings used for keyboards created without a config
        """
        self.defaults = defaults or KeyboardConfig()
        self._tables: dict[str, FrequencyTable] = {}
        self._modified: dict[str, datetime] = {}

    def create(self, name: str, config: KeyboardConfig | None = None) -> FrequencyTable:
        """
        Create a new keyboard.

        Args:
            name: Unique keyboard name
            config: Settings (defaults if omitted)

        Returns:
            The resolved FrequencyTable

        Raises:
            ValueError: If a keyboard with this name exists
        """
        if name in self._tables:
            raise ValueError(ErrorMessages.KEYBOARD_EXISTS.format(name=name))

        return self._store(name, resolve(config or self.defaults))

    def apply(self, name: str, config: KeyboardConfig) -> FrequencyTable:
        """
        Replace a keyboard's settings.

        The new table is fully resolved before it replaces the old one.

        Raises:
            ValueError: If the keyboard does not exist
        """
        if name not in self._tables:
            raise ValueError(ErrorMessages.KEYBOARD_NOT_FOUND.format(name=name))

        return self._store(name, resolve(config))

    def get(self, name: str) -> FrequencyTable | None:
        """Get a keyboard's current table, or None if not found."""
        return self._tables.get(name)

    def list_keyboards(self) -> list[KeyboardMetadata]:
        """List all keyboards, most recently modified first."""
        result = [
            KeyboardMetadata(
                name=name,
                tuning=table.tuning.descriptor,
                rows=table.config.rows,
                columns=table.config.columns,
                base_freq=table.config.base_freq,
                modified=self._modified[name],
            )
            for name, table in self._tables.items()
        ]
        return sorted(result, key=lambda m: m.modified, reverse=True)

    def delete(self, name: str) -> bool:
        """
        Delete a keyboard.

        Returns:
            True if deleted, False if not found
        """
        if name not in self._tables:
            return False

        del self._tables[name]
        del self._modified[name]
        return True

    def _store(self, name: str, table: FrequencyTable) -> FrequencyTable:
        self._tables[name] = table
        self._modified[name] = datetime.now(UTC)
        logger.debug(f"Keyboard '{name}' now {table.tuning.descriptor}, {len(table)} keys")
        return table
