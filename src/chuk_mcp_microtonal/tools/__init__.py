"""
MCP tool implementations.

Tools are organized by domain:
- tuning - Descriptor parsing and ratio inspection
- keyboard - Keyboard lifecycle and per-key queries
"""

from chuk_mcp_microtonal.tools.keyboard import register_keyboard_tools
from chuk_mcp_microtonal.tools.tuning import register_tuning_tools

__all__ = [
    "register_keyboard_tools",
    "register_tuning_tools",
]
