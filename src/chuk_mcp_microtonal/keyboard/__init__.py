"""
Keyboard management - from settings to a playable frequency table.

This module provides:
- resolve: Pure KeyboardConfig -> FrequencyTable
- FrequencyTable / KeyInfo: The resolved per-key table
- build_config / load_keyboard_config: Strict input and YAML loading
- KeyboardManager: Named keyboards with atomic replacement
"""

from chuk_mcp_microtonal.keyboard.config import (
    build_config,
    load_keyboard_config,
    parse_float,
    parse_int,
)
from chuk_mcp_microtonal.keyboard.manager import KeyboardManager, KeyboardMetadata
from chuk_mcp_microtonal.keyboard.table import FrequencyTable, KeyInfo, clamp_root, resolve

__all__ = [
    "FrequencyTable",
    "KeyInfo",
    "KeyboardManager",
    "KeyboardMetadata",
    "build_config",
    "clamp_root",
    "load_keyboard_config",
    "parse_float",
    "parse_int",
    "resolve",
]
