"""
Tuning tools - MCP tools for inspecting tunings.

Tools for parsing descriptors, listing ratio sets and computing
single frequencies without creating a keyboard.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_microtonal.constants import MAX_BASE_FREQ
from chuk_mcp_microtonal.core import (
    InvalidTuningDescriptor,
    JustIntonation,
    calculate_cents,
    calculate_frequency,
    parse_tuning,
    ratio_label,
    ratio_to_cents,
    try_parse_tuning,
)
from chuk_mcp_microtonal.keyboard import parse_float
from chuk_mcp_microtonal.models import parse_int_list

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_tuning_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register tuning inspection tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_parse(descriptor: str) -> str:
        """
        Parse a tuning descriptor.

        Descriptors are '<n>ed<k>' (n equal divisions of interval k) or
        '<z>-limit' (z-limit just intonation, z odd, 3 to 255).

        Args:
            descriptor: Tuning descriptor (e.g., '12ed2', '13ed3', '7-limit')

        Returns:
            JSON string with the tuning kind and parameters

        Example:
            tuning_parse(descriptor="19ed2")
        """
        try:
            result = try_parse_tuning(descriptor)
            if isinstance(result, InvalidTuningDescriptor):
                return json.dumps({"status": "error", "message": str(result)})

            tuning_info: dict[str, Any] = {
                "descriptor": result.descriptor,
                "kind": result.kind.value,
                "steps": result.step_count,
                "period": result.period,
            }
            if isinstance(result, JustIntonation):
                tuning_info["limit"] = result.limit
            else:
                tuning_info["divisions"] = result.divisions
                tuning_info["interval"] = result.interval

            return json.dumps({"status": "success", "tuning": tuning_info})
        except Exception as e:
            logger.exception("Failed to parse tuning")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_parse"] = tuning_parse

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_list_ratios(descriptor: str) -> str:
        """
        List the step ratios of a tuning within one period.

        Just intonation ratios include their exact fraction.

        Args:
            descriptor: Tuning descriptor

        Returns:
            JSON string with ratios and their sizes in cents

        Example:
            tuning_list_ratios(descriptor="5-limit")
        """
        try:
            tuning = parse_tuning(descriptor)
            ratios = [
                {
                    "step": step,
                    "ratio": ratio,
                    "cents": round(ratio_to_cents(ratio), 2),
                    "label": ratio_label(step, tuning),
                }
                for step, ratio in enumerate(tuning.ratios)
            ]

            return json.dumps(
                {
                    "status": "success",
                    "descriptor": tuning.descriptor,
                    "ratios": ratios,
                    "count": len(ratios),
                }
            )
        except Exception as e:
            logger.exception("Failed to list ratios")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_list_ratios"] = tuning_list_ratios

    @mcp.tool  # type: ignore[arg-type]
    async def tuning_frequency(
        descriptor: str,
        step: int,
        base_freq: float = 440.0,
        mapping: str | None = None,
    ) -> str:
        """
        Compute the frequency of a single step from the root.

        Args:
            descriptor: Tuning descriptor
            step: Signed distance from the root key
            base_freq: Root frequency in Hz (default: 440)
            mapping: Optional index mapping (e.g., '0, 2, 4, 5, 7, 9, 11')

        Returns:
            JSON string with frequency and cents; frequency is null for
            a silent key

        Example:
            tuning_frequency(descriptor="12ed2", step=7, base_freq=440)
        """
        try:
            tuning = parse_tuning(descriptor)
            base = parse_float("base_freq", base_freq)
            if not 0 < base <= MAX_BASE_FREQ:
                raise ValueError(f"Base frequency must be in (0, {MAX_BASE_FREQ:g}] Hz, got {base}")
            index_mapping = parse_int_list(mapping) if mapping else None

            freq = calculate_frequency(step, tuning, base, index_mapping)

            return json.dumps(
                {
                    "status": "success",
                    "descriptor": tuning.descriptor,
                    "step": step,
                    "frequency": freq,
                    "cents": calculate_cents(freq, base) if freq is not None else None,
                    "silent": freq is None,
                }
            )
        except Exception as e:
            logger.exception("Failed to compute frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tuning_frequency"] = tuning_frequency

    return tools
