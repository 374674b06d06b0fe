"""WCAG 2.1 color contrast engine.

Stateless, pure functions: color parsing, relative luminance, contrast ratio,
conformance classification and lightness-only accessible color search.
"""

from .colors import RGB, HSL, parse_color, rgb_to_hex, rgb_to_hsl, hsl_to_rgb, adjust_lightness
from .contrast import relative_luminance, contrast_ratio
from .search import find_accessible_color
from .conformance import (
    ContrastRequirement,
    ContrastPasses,
    ContrastAnalysis,
    ColorSuggestion,
    ContrastResult,
    get_contrast_requirements,
    get_wcag_guideline,
    get_requirement,
    calculate_contrast,
    analyze_color_pair,
    suggest_accessible_colors,
)
from .errors import (
    WcagError,
    ColorParseError,
    ColorRangeError,
    UnsupportedOptionError,
    InvalidTargetRatioError,
)

__all__ = [
    "RGB",
    "HSL",
    "parse_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "adjust_lightness",
    "relative_luminance",
    "contrast_ratio",
    "find_accessible_color",
    "ContrastRequirement",
    "ContrastPasses",
    "ContrastAnalysis",
    "ColorSuggestion",
    "ContrastResult",
    "get_contrast_requirements",
    "get_wcag_guideline",
    "get_requirement",
    "calculate_contrast",
    "analyze_color_pair",
    "suggest_accessible_colors",
    "WcagError",
    "ColorParseError",
    "ColorRangeError",
    "UnsupportedOptionError",
    "InvalidTargetRatioError",
]
