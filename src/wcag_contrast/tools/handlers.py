"""Contrast tools: handlers and JSON input schemas.

Each handler takes primitive arguments (the schema property names) and
returns plain JSON-ready data.
"""

from __future__ import annotations

from typing import Any, Dict

from ..config import settings
from ..conformance import (
    CONTENT_TYPES,
    LEVELS,
    PRESERVE_OPTIONS,
    analyze_color_pair,
    calculate_contrast,
    suggest_accessible_colors,
)

from .registry import ToolRegistry

__all__ = [
    "calculate_contrast_ratio_tool",
    "analyze_color_pair_tool",
    "suggest_accessible_color_tool",
    "default_registry",
]

_COLOR_FORMATS = "supports #RGB, #RRGGBB, rgb(r,g,b) and rgba(r,g,b,a) formats"


def _color_property(label: str) -> Dict[str, Any]:
    return {"type": "string", "description": f"{label} color ({_COLOR_FORMATS})"}


def _calculate_contrast_schema() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "foreground": _color_property("Foreground"),
            "background": _color_property("Background"),
        },
        "required": ["foreground", "background"],
    }


def _analyze_color_pair_schema() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "foreground": _color_property("Foreground"),
            "background": _color_property("Background"),
            "contentType": {
                "type": "string",
                "enum": list(CONTENT_TYPES),
                "description": (
                    "Type of content: normal-text (default), large-text (18pt+ or 14pt+ bold), "
                    "or ui-component (borders, icons)"
                ),
                "default": settings.DEFAULT_CONTENT_TYPE,
            },
            "level": {
                "type": "string",
                "enum": list(LEVELS),
                "description": "WCAG conformance level (default: AA)",
                "default": settings.DEFAULT_LEVEL,
            },
        },
        "required": ["foreground", "background"],
    }


def _suggest_accessible_color_schema() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "foreground": {"type": "string", "description": "Current foreground color"},
            "background": {"type": "string", "description": "Current background color"},
            "targetRatio": {
                "type": "number",
                "description": "Target contrast ratio (e.g. 4.5 for normal text AA, 3.0 for large text AA)",
            },
            "preserve": {
                "type": "string",
                "enum": list(PRESERVE_OPTIONS),
                "description": "Which color to preserve (default: both, suggests adjusting either)",
                "default": settings.DEFAULT_PRESERVE,
            },
        },
        "required": ["foreground", "background", "targetRatio"],
    }


def calculate_contrast_ratio_tool(foreground: str, background: str) -> Dict[str, Any]:
    result = calculate_contrast(foreground, background)
    return {
        "foreground": foreground,
        "background": background,
        "ratio": round(result.ratio, settings.RATIO_DECIMALS),
    }


def analyze_color_pair_tool(
    foreground: str,
    background: str,
    contentType: str = settings.DEFAULT_CONTENT_TYPE,  # noqa: N803 - schema name
    level: str = settings.DEFAULT_LEVEL,
) -> Dict[str, Any]:
    return analyze_color_pair(foreground, background, contentType, level).to_dict()  # type: ignore[arg-type]


def suggest_accessible_color_tool(
    foreground: str,
    background: str,
    targetRatio: float,  # noqa: N803 - schema name
    preserve: str = settings.DEFAULT_PRESERVE,
) -> Dict[str, Any]:
    suggestions = suggest_accessible_colors(foreground, background, targetRatio, preserve)  # type: ignore[arg-type]
    return {
        "original": {"foreground": foreground, "background": background},
        "targetRatio": targetRatio,
        "suggestions": [s.to_dict() for s in suggestions],
    }


def default_registry() -> ToolRegistry:
    """Build a registry holding the three contrast tools."""
    reg = ToolRegistry()
    reg.register(
        "calculate_contrast_ratio",
        "Calculate WCAG contrast ratio between two colors. Returns the contrast ratio as a number.",
        _calculate_contrast_schema(),
        calculate_contrast_ratio_tool,
    )
    reg.register(
        "analyze_color_pair",
        "Analyze a color pair for WCAG conformance. Returns detailed analysis including whether "
        "it passes for normal text, large text, and UI components.",
        _analyze_color_pair_schema(),
        analyze_color_pair_tool,
    )
    reg.register(
        "suggest_accessible_color",
        "Suggest accessible color alternatives that meet WCAG requirements. Returns color "
        "suggestions with their contrast ratios.",
        _suggest_accessible_color_schema(),
        suggest_accessible_color_tool,
    )
    return reg
