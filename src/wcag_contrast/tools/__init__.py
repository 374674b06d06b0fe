"""Callable contrast tools exposed to external callers."""

from .registry import ToolEntry, ToolResult, ToolRegistry
from .handlers import default_registry

__all__ = ["ToolEntry", "ToolResult", "ToolRegistry", "default_registry"]
