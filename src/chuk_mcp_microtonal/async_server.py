#!/usr/bin/env python3
"""
Async Microtonal Keyboard MCP Server using chuk-mcp-server

This server provides MCP tools for building generalized microtonal
keyboards: each key gets a frequency, a cents offset from the root key
and a display name under an arbitrary tuning.

The server provides tools for:
- Parsing tuning descriptors (equal divisions like '19ed2', '13ed3'
  and z-limit just intonation like '7-limit')
- Listing the step ratios of a tuning
- Creating keyboards and applying new settings atomically
- Querying the full frequency table or single keys
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_microtonal.keyboard import KeyboardManager, load_keyboard_config
from chuk_mcp_microtonal.tools import register_keyboard_tools, register_tuning_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-microtonal")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
CONFIG_PATH = BASE_PATH / "keyboard.yaml"

# Create managers
keyboard_manager = KeyboardManager(
    defaults=load_keyboard_config(CONFIG_PATH) if CONFIG_PATH.exists() else None
)

# Register all tools
tuning_tools = register_tuning_tools(mcp)
keyboard_tools = register_keyboard_tools(mcp, keyboard_manager)

# Export tool functions for direct access
tuning_parse = tuning_tools["tuning_parse"]
tuning_list_ratios = tuning_tools["tuning_list_ratios"]
tuning_frequency = tuning_tools["tuning_frequency"]

keyboard_create = keyboard_tools["keyboard_create"]
keyboard_apply = keyboard_tools["keyboard_apply"]
keyboard_get = keyboard_tools["keyboard_get"]
keyboard_get_key = keyboard_tools["keyboard_get_key"]
keyboard_list = keyboard_tools["keyboard_list"]
keyboard_delete = keyboard_tools["keyboard_delete"]

logger.info("CHUK Microtonal MCP Server initialized")
logger.info(f"  Default tuning: {keyboard_manager.defaults.tuning}")
logger.info(f"  Config file: {CONFIG_PATH if CONFIG_PATH.exists() else 'none'}")
