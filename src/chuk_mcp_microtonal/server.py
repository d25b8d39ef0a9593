#!/usr/bin/env python3
"""
Entry point for the CHUK Microtonal MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Microtonal MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML file with default keyboard settings",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_microtonal.async_server import keyboard_manager, mcp
    from chuk_mcp_microtonal.keyboard import load_keyboard_config

    if args.config is not None:
        previous = keyboard_manager.defaults
        keyboard_manager.defaults = load_keyboard_config(args.config)
        logger.info(
            f"Keyboard defaults from {args.config} override {previous.tuning} "
            f"with {keyboard_manager.defaults.tuning}"
        )

    if args.transport == "stdio":
        logger.info("Starting CHUK Microtonal MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Microtonal MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
