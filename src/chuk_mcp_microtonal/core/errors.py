"""
Error types for tuning resolution and frequency mapping.

All of these are recoverable: callers decide whether to fall back to a
default tuning, report the problem, or treat a key as silent.
"""

from __future__ import annotations

from chuk_mcp_microtonal.constants import ErrorMessages


class TuningError(ValueError):
    """Base class for tuning errors."""


class InvalidTuningDescriptor(TuningError):
    """A descriptor matched no known grammar or carried invalid parameters."""

    def __init__(self, descriptor: str, message: str | None = None) -> None:
        self.descriptor = descriptor
        super().__init__(message or ErrorMessages.INVALID_DESCRIPTOR.format(descriptor=descriptor))


class InvalidNumericInput(TuningError):
    """A numeric setting was missing, non-numeric, non-finite or out of range."""

    def __init__(self, field: str, value: object, message: str | None = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message or ErrorMessages.INVALID_NUMBER.format(field=field, value=value))


class IndexOutOfRange(LookupError):
    """A step fell outside the index mapping; the key plays no tone."""

    def __init__(self, step: int, size: int) -> None:
        self.step = step
        self.size = size
        super().__init__(f"Step {step} is outside the index mapping (size {size})")
