"""Error taxonomy for color parsing, conformance options and tool calls."""

from __future__ import annotations
from typing import Any


class WcagError(Exception):
    """Base class for all contrast engine errors."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ColorError(WcagError, ValueError):
    """Base class for invalid color input."""


class ColorParseError(ColorError):
    """Raised when color text matches none of the supported grammars."""


class ColorRangeError(ColorError):
    """Raised when a color channel lies outside its allowed range."""


class UnsupportedOptionError(WcagError, ValueError):
    """Raised for an unknown content type, conformance level or preserve option."""


class InvalidTargetRatioError(WcagError, ValueError):
    """Raised when a target contrast ratio is not a positive finite number."""


class ToolError(WcagError):
    """Base class for tool dispatch failures."""


class UnknownToolError(ToolError):
    """Raised when a tool name is not registered."""


class ToolArgumentError(ToolError):
    """Raised when tool arguments are missing, mistyped or unexpected."""


__all__ = [
    "WcagError",
    "ColorError",
    "ColorParseError",
    "ColorRangeError",
    "UnsupportedOptionError",
    "InvalidTargetRatioError",
    "ToolError",
    "UnknownToolError",
    "ToolArgumentError",
]
