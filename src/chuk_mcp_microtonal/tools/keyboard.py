"""
Keyboard tools - MCP tools for keyboard lifecycle.

Tools for creating keyboards, applying new settings, and querying
per-key frequencies and labels.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_microtonal.constants import ErrorMessages, SuccessMessages
from chuk_mcp_microtonal.keyboard import FrequencyTable, KeyboardManager, build_config

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _summary(name: str, table: FrequencyTable) -> dict[str, Any]:
    """Short description of a keyboard."""
    return {
        "name": name,
        "tuning": table.tuning.descriptor,
        "kind": table.tuning.kind.value,
        "rows": table.config.rows,
        "columns": table.config.columns,
        "root": table.root,
        "base_freq": table.config.base_freq,
        "keys": len(table),
        "silent_keys": sum(1 for k in table.keys if k.is_silent),
    }


def _labels(table: FrequencyTable) -> list[list[str]]:
    """Key labels laid out as the keyboard grid."""
    return [
        [f"{k.name} {k.cents}¢" if k.cents is not None else f"{k.name} -" for k in row]
        for row in table.grid()
    ]


def register_keyboard_tools(
    mcp: ChukMCPServer,
    manager: KeyboardManager,
) -> dict[str, Any]:
    """
    Register keyboard tools with the MCP server.

    Args:
        mcp: The MCP server instance
        manager: The keyboard manager

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def keyboard_create(
        name: str,
        tuning: str | None = None,
        base_freq: float | None = None,
        rows: int | None = None,
        columns: int | None = None,
        root_note: int | None = None,
        mapping: str | None = None,
        note_names: str | None = None,
        fallback: bool = False,
    ) -> str:
        """
        Create a new microtonal keyboard.

        Unspecified settings come from the server defaults.

        Args:
            name: Unique name for the keyboard
            tuning: Tuning descriptor (e.g., '19ed2', '13ed3', '7-limit')
            base_freq: Frequency of the root key in Hz
            rows: Number of key rows
            columns: Number of key columns
            root_note: Index of the root key (clamped into the keyboard)
            mapping: Optional index mapping (e.g., '0 2 4 5 7 9 11')
            note_names: Optional names cycled across keys (e.g., 'C C# D')
            fallback: Use the default 12ed2 tuning if the descriptor is invalid

        Returns:
            JSON string with keyboard summary and key labels

        Example:
            keyboard_create(name="bp", tuning="13ed3", base_freq=220, columns=13)
        """
        try:
            defaults = manager.defaults
            config, warning = build_config(
                base_freq=base_freq if base_freq is not None else defaults.base_freq,
                rows=rows if rows is not None else defaults.rows,
                columns=columns if columns is not None else defaults.columns,
                root_note=root_note if root_note is not None else defaults.root_note,
                tuning=tuning if tuning is not None else defaults.tuning,
                mapping=mapping if mapping is not None else defaults.mapping,
                note_names=note_names if note_names is not None else defaults.note_names,
                fallback=fallback,
            )
            table = manager.create(name, config)

            response: dict[str, Any] = {
                "status": "success",
                "message": SuccessMessages.KEYBOARD_CREATED.format(name=name, keys=len(table)),
                "keyboard": _summary(name, table),
                "labels": _labels(table),
            }
            if warning:
                response["warning"] = warning
            return json.dumps(response)
        except Exception as e:
            logger.exception("Failed to create keyboard")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keyboard_create"] = keyboard_create

    @mcp.tool  # type: ignore[arg-type]
    async def keyboard_apply(
        name: str,
        tuning: str | None = None,
        base_freq: float | None = None,
        rows: int | None = None,
        columns: int | None = None,
        root_note: int | None = None,
        mapping: str | None = None,
        note_names: str | None = None,
        fallback: bool = False,
    ) -> str:
        """
        Apply new settings to a keyboard.

        Unspecified settings keep their current values. Pass an empty
        string for mapping or note_names to clear them. The keyboard is
        rebuilt in full; if the new settings are invalid the previous
        keyboard stays in place.

        Args:
            name: Keyboard name
            tuning: Tuning descriptor
            base_freq: Frequency of the root key in Hz
            rows: Number of key rows
            columns: Number of key columns
            root_note: Index of the root key
            mapping: Index mapping ('' to clear)
            note_names: Note names ('' to clear)
            fallback: Use the default 12ed2 tuning if the descriptor is invalid

        Returns:
            JSON string with the updated keyboard summary

        Example:
            keyboard_apply(name="bp", tuning="7-limit")
        """
        try:
            current = manager.get(name)
            if current is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.KEYBOARD_NOT_FOUND.format(name=name),
                    }
                )

            old = current.config
            config, warning = build_config(
                base_freq=base_freq if base_freq is not None else old.base_freq,
                rows=rows if rows is not None else old.rows,
                columns=columns if columns is not None else old.columns,
                root_note=root_note if root_note is not None else old.root_note,
                tuning=tuning if tuning is not None else old.tuning,
                mapping=mapping if mapping is not None else old.mapping,
                note_names=note_names if note_names is not None else old.note_names,
                fallback=fallback,
            )
            table = manager.apply(name, config)

            response: dict[str, Any] = {
                "status": "success",
                "message": SuccessMessages.KEYBOARD_APPLIED.format(name=name, keys=len(table)),
                "keyboard": _summary(name, table),
                "labels": _labels(table),
            }
            if warning:
                response["warning"] = warning
            return json.dumps(response)
        except Exception as e:
            logger.exception("Failed to apply keyboard settings")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keyboard_apply"] = keyboard_apply

    @mcp.tool  # type: ignore[arg-type]
    async def keyboard_get(name: str) -> str:
        """
        Get a keyboard's full frequency table.

        Args:
            name: Keyboard name

        Returns:
            JSON string with settings, tuning and every key's frequency,
            cents from root and name

        Example:
            keyboard_get(name="bp")
        """
        try:
            table = manager.get(name)
            if table is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.KEYBOARD_NOT_FOUND.format(name=name),
                    }
                )

            return json.dumps({"status": "success", "keyboard": table.to_dict()})
        except Exception as e:
            logger.exception("Failed to get keyboard")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keyboard_get"] = keyboard_get

    @mcp.tool  # type: ignore[arg-type]
    async def keyboard_get_key(name: str, index: int) -> str:
        """
        Get one key of a keyboard.

        Args:
            name: Keyboard name
            index: Key index in row-major order

        Returns:
            JSON string with the key's frequency (null if silent),
            cents from root, name and ratio label

        Example:
            keyboard_get_key(name="bp", index=5)
        """
        try:
            table = manager.get(name)
            if table is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.KEYBOARD_NOT_FOUND.format(name=name),
                    }
                )

            key = table.get(index)
            if key is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.KEY_NOT_FOUND.format(
                            index=index, last=len(table) - 1
                        ),
                    }
                )

            return json.dumps({"status": "success", "key": key.to_dict()})
        except Exception as e:
            logger.exception("Failed to get key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keyboard_get_key"] = keyboard_get_key

    @mcp.tool  # type: ignore[arg-type]
    async def keyboard_list() -> str:
        """
        List all keyboards.

        Returns:
            JSON string with keyboard summaries

        Example:
            keyboard_list()
        """
        try:
            keyboards = manager.list_keyboards()

            return json.dumps(
                {
                    "status": "success",
                    "keyboards": [
                        {
                            "name": kb.name,
                            "tuning": kb.tuning,
                            "rows": kb.rows,
                            "columns": kb.columns,
                            "base_freq": kb.base_freq,
                            "modified": kb.modified.isoformat(),
                        }
                        for kb in keyboards
                    ],
                    "count": len(keyboards),
                }
            )
        except Exception as e:
            logger.exception("Failed to list keyboards")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keyboard_list"] = keyboard_list

    @mcp.tool  # type: ignore[arg-type]
    async def keyboard_delete(name: str) -> str:
        """
        Delete a keyboard.

        Args:
            name: Keyboard name

        Returns:
            JSON string with delete result

        Example:
            keyboard_delete(name="bp")
        """
        try:
            if manager.delete(name):
                return json.dumps(
                    {
                        "status": "success",
                        "message": SuccessMessages.KEYBOARD_DELETED.format(name=name),
                    }
                )
            return json.dumps(
                {
                    "status": "error",
                    "message": ErrorMessages.KEYBOARD_NOT_FOUND.format(name=name),
                }
            )
        except Exception as e:
            logger.exception("Failed to delete keyboard")
            return json.dumps({"status": "error", "message": str(e)})

    tools["keyboard_delete"] = keyboard_delete

    return tools
