"""
Pydantic models for the keyboard system.

This module provides:
- KeyboardConfig: Immutable keyboard settings
- split_list / parse_int_list: Text-input list parsing
"""

from chuk_mcp_microtonal.models.keyboard import (
    MAX_GRID_SIZE,
    KeyboardConfig,
    parse_int_list,
    split_list,
)

__all__ = [
    "MAX_GRID_SIZE",
    "KeyboardConfig",
    "parse_int_list",
    "split_list",
]
