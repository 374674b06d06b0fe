"""Tool registry for the contrast engine.

Keeps the callable tools exposed to external callers (agents, the CLI) with
their JSON input schema, and runs them by name.

Responsibilities:
 - Register tools with name, description, input schema and handler
 - Prevent duplicate names (later registrations rejected)
 - Publish the catalog (name, description, inputSchema) in registration order
 - Validate and default arguments from the schema before calling a handler
 - Convert engine errors into an error result carrying ``{"error": message}``

Only a small subset of JSON schema is understood: ``object`` schemas whose
properties are ``string`` (optionally with ``enum``) or ``number``, with
``default`` values and a ``required`` list. Unknown argument names are
rejected.
"""

from __future__ import annotations

import copy
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..errors import ToolArgumentError, UnknownToolError, WcagError

__all__ = ["ToolEntry", "ToolResult", "ToolRegistry"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolEntry:
    name: str
    description: str
    input_schema: Mapping[str, Any]
    handler: Callable[..., Dict[str, Any]]

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": copy.deepcopy(self.input_schema),
        }


@dataclass(frozen=True)
class ToolResult:
    payload: Dict[str, Any] = field(default_factory=dict)
    is_error: bool = False


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:  # int beyond float range
        return False


def _check_type(name: str, value: Any, spec: Mapping[str, Any]) -> None:
    kind = spec.get("type")
    if kind == "string":
        if not isinstance(value, str):
            raise ToolArgumentError(f"Argument '{name}' must be a string", context={"argument": name})
    elif kind == "number":
        if not _is_finite_number(value):
            raise ToolArgumentError(
                f"Argument '{name}' must be a finite number", context={"argument": name}
            )
    enum = spec.get("enum")
    if enum is not None and value not in enum:
        raise ToolArgumentError(
            f"Argument '{name}' must be one of {', '.join(map(str, enum))}: {value!r}",
            context={"argument": name, "value": value},
        )


def _bind_arguments(entry: ToolEntry, arguments: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ToolArgumentError(f"Arguments for '{entry.name}' must be an object")
    properties: Mapping[str, Any] = entry.input_schema.get("properties", {})
    unknown = sorted(k for k in arguments if k not in properties)
    if unknown:
        raise ToolArgumentError(
            f"Unknown argument(s) for '{entry.name}': {', '.join(unknown)}",
            context={"unknown": unknown},
        )
    missing = [k for k in entry.input_schema.get("required", []) if k not in arguments]
    if missing:
        raise ToolArgumentError(
            f"Missing required argument(s) for '{entry.name}': {', '.join(missing)}",
            context={"missing": missing},
        )
    bound: Dict[str, Any] = {}
    for name, spec in properties.items():
        if name in arguments:
            _check_type(name, arguments[name], spec)
            bound[name] = arguments[name]
        elif "default" in spec:
            bound[name] = spec["default"]
    return bound


class ToolRegistry:
    """Name -> tool mapping with schema-checked invocation.

    Not shared between threads by the engine itself; build one per caller or
    treat it as read-only after registration.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, ToolEntry] = {}

    # Registration -------------------------------------------------
    def register(
        self,
        name: str,
        description: str,
        input_schema: Mapping[str, Any],
        handler: Callable[..., Dict[str, Any]],
    ) -> bool:
        """Register a tool. Returns False if the name already exists."""
        if name in self._tools:
            return False
        self._tools[name] = ToolEntry(
            name=name,
            description=description,
            input_schema=copy.deepcopy(input_schema),
            handler=handler,
        )
        return True

    def is_registered(self, name: str) -> bool:
        return name in self._tools

    # Query --------------------------------------------------------
    def get(self, name: str) -> ToolEntry:
        entry = self._tools.get(name)
        if entry is None:
            raise UnknownToolError(f"Unknown tool: {name}", context={"tool": name})
        return entry

    def list(self) -> List[ToolEntry]:
        return list(self._tools.values())

    def catalog(self) -> List[Dict[str, Any]]:
        return [entry.describe() for entry in self._tools.values()]

    # Execution ----------------------------------------------------
    def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """Run a tool by name.

        Engine errors (bad color text, unknown options, invalid arguments,
        unknown tool) become an error result; anything else propagates.
        """
        try:
            entry = self.get(name)
            bound = _bind_arguments(entry, arguments)
            payload = entry.handler(**bound)
        except WcagError as exc:
            _logger.info("tool %s failed: %s", name, exc)
            return ToolResult({"error": str(exc)}, is_error=True)
        return ToolResult(payload)
