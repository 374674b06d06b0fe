"""WCAG 2.1 conformance analysis for foreground/background color pairs.

Combines parsing, contrast math and the lightness search into the three
operations exposed to callers:

- calculate_contrast(fg, bg) -> ContrastResult
- analyze_color_pair(fg, bg, content_type="normal-text", level="AA") -> ContrastAnalysis
- suggest_accessible_colors(fg, bg, target_ratio, preserve="both") -> list[ColorSuggestion]

Thresholds (minimum ratio per content type and level):

    content type   AA    AAA
    normal-text    4.5   7.0
    large-text     3.0   4.5
    ui-component   3.0   3.0   (WCAG defines no stricter AAA non-text level)

Displayed ratios are rounded to two decimals; pass/fail decisions always use
the unrounded ratio so that e.g. 4.496 is not reported as passing 4.5.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Literal, Mapping, Optional, get_args

from .config import settings

from .colors import RGB, parse_color, rgb_to_hex
from .contrast import contrast_ratio
from .errors import UnsupportedOptionError
from .search import find_accessible_color

__all__ = [
    "ContentType",
    "Level",
    "Preserve",
    "ContrastRequirement",
    "ContrastPasses",
    "ContrastAnalysis",
    "ColorSuggestion",
    "ContrastResult",
    "CONTRAST_REQUIREMENTS",
    "get_contrast_requirements",
    "get_wcag_guideline",
    "get_requirement",
    "calculate_contrast",
    "analyze_color_pair",
    "suggest_accessible_colors",
]

_logger = logging.getLogger(__name__)

ContentType = Literal["normal-text", "large-text", "ui-component"]
Level = Literal["AA", "AAA"]
Preserve = Literal["foreground", "background", "both"]

CONTENT_TYPES: tuple[str, ...] = get_args(ContentType)
LEVELS: tuple[str, ...] = get_args(Level)
PRESERVE_OPTIONS: tuple[str, ...] = get_args(Preserve)

CONTRAST_REQUIREMENTS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {
        "normal-text": MappingProxyType({"AA": 4.5, "AAA": 7.0}),
        "large-text": MappingProxyType({"AA": 3.0, "AAA": 4.5}),
        "ui-component": MappingProxyType({"AA": 3.0, "AAA": 3.0}),
    }
)

_GUIDELINES: Mapping[str, str] = MappingProxyType(
    {
        "normal-text": "1.4.3 Contrast (Minimum)",
        "large-text": "1.4.3 Contrast (Minimum)",
        "ui-component": "1.4.11 Non-text Contrast",
    }
)


@dataclass(frozen=True)
class ContrastRequirement:
    level: str
    content_type: str
    minimum_ratio: float
    guideline: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "contentType": self.content_type,
            "minimumRatio": self.minimum_ratio,
            "guideline": self.guideline,
        }


@dataclass(frozen=True)
class ContrastPasses:
    """AA pass flags for every content type, independent of the requested one."""

    normal_text: bool
    large_text: bool
    ui_component: bool

    def to_dict(self) -> Dict[str, bool]:
        return {
            "normalText": self.normal_text,
            "largeText": self.large_text,
            "uiComponent": self.ui_component,
        }


@dataclass(frozen=True)
class ContrastAnalysis:
    """Result of :func:`analyze_color_pair`.

    Attributes
    ----------
    foreground, background : str
        Parsed colors normalized to ``#rrggbb``.
    ratio : float
        Contrast ratio rounded to two decimals.
    passes : ContrastPasses
        AA verdicts for all three content types.
    requirement : ContrastRequirement
        The requirement that was evaluated.
    meets_requirement : bool
        Unrounded ratio >= ``requirement.minimum_ratio``.
    """

    foreground: str
    background: str
    ratio: float
    passes: ContrastPasses
    requirement: ContrastRequirement
    meets_requirement: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "foreground": self.foreground,
            "background": self.background,
            "ratio": self.ratio,
            "passes": self.passes.to_dict(),
            "requirement": self.requirement.to_dict(),
            "meetsRequirement": self.meets_requirement,
        }


@dataclass(frozen=True)
class ColorSuggestion:
    color: str
    ratio: float
    adjusted_property: Literal["foreground", "background"]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "ratio": self.ratio,
            "adjustedProperty": self.adjusted_property,
        }


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    foreground: RGB
    background: RGB


def _round_ratio(ratio: float) -> float:
    return round(ratio, settings.RATIO_DECIMALS)


def _check_option(value: Any, allowed: tuple[str, ...], label: str) -> None:
    if value not in allowed:
        raise UnsupportedOptionError(
            f"Unsupported {label}: {value!r} (expected one of {', '.join(allowed)})",
            context={"option": label, "value": value},
        )


def get_contrast_requirements() -> Mapping[str, Mapping[str, float]]:
    """Return the read-only content type -> {AA, AAA} minimum ratio table."""
    return CONTRAST_REQUIREMENTS


def get_wcag_guideline(content_type: ContentType) -> str:
    _check_option(content_type, CONTENT_TYPES, "content type")
    return _GUIDELINES[content_type]


def get_requirement(content_type: ContentType, level: Level) -> ContrastRequirement:
    _check_option(content_type, CONTENT_TYPES, "content type")
    _check_option(level, LEVELS, "level")
    return ContrastRequirement(
        level=level,
        content_type=content_type,
        minimum_ratio=CONTRAST_REQUIREMENTS[content_type][level],
        guideline=_GUIDELINES[content_type],
    )


def calculate_contrast(foreground: str, background: str) -> ContrastResult:
    """Parse both colors and return their unrounded contrast ratio."""
    fg = parse_color(foreground)
    bg = parse_color(background)
    return ContrastResult(ratio=contrast_ratio(fg, bg), foreground=fg, background=bg)


def analyze_color_pair(
    foreground: str,
    background: str,
    content_type: ContentType = settings.DEFAULT_CONTENT_TYPE,
    level: Level = settings.DEFAULT_LEVEL,
) -> ContrastAnalysis:
    requirement = get_requirement(content_type, level)
    result = calculate_contrast(foreground, background)
    ratio = result.ratio
    passes = ContrastPasses(
        normal_text=ratio >= CONTRAST_REQUIREMENTS["normal-text"]["AA"],
        large_text=ratio >= CONTRAST_REQUIREMENTS["large-text"]["AA"],
        ui_component=ratio >= CONTRAST_REQUIREMENTS["ui-component"]["AA"],
    )
    analysis = ContrastAnalysis(
        foreground=rgb_to_hex(result.foreground),
        background=rgb_to_hex(result.background),
        ratio=_round_ratio(ratio),
        passes=passes,
        requirement=requirement,
        meets_requirement=ratio >= requirement.minimum_ratio,
    )
    _logger.debug(
        "analyzed %s on %s ratio=%.4f %s/%s meets=%s",
        analysis.foreground,
        analysis.background,
        ratio,
        content_type,
        level,
        analysis.meets_requirement,
    )
    return analysis


def suggest_accessible_colors(
    foreground: str,
    background: str,
    target_ratio: float,
    preserve: Preserve = settings.DEFAULT_PRESERVE,
) -> List[ColorSuggestion]:
    """Suggest lightness-adjusted colors reaching ``target_ratio``.

    ``preserve`` names the color that must stay untouched: "background"
    adjusts the foreground, "foreground" adjusts the background and "both"
    tries each side. Sides where the search is exhausted are omitted. The
    result is ordered by distance between each suggestion's ratio and the
    target, tightest fit first.
    """
    _check_option(preserve, PRESERVE_OPTIONS, "preserve option")
    fg = parse_color(foreground)
    bg = parse_color(background)

    suggestions: List[ColorSuggestion] = []
    if preserve in ("background", "both"):
        adjusted: Optional[RGB] = find_accessible_color(fg, bg, target_ratio, True)
        if adjusted is not None:
            suggestions.append(
                ColorSuggestion(
                    color=rgb_to_hex(adjusted),
                    ratio=_round_ratio(contrast_ratio(adjusted, bg)),
                    adjusted_property="foreground",
                )
            )
    if preserve in ("foreground", "both"):
        adjusted = find_accessible_color(fg, bg, target_ratio, False)
        if adjusted is not None:
            suggestions.append(
                ColorSuggestion(
                    color=rgb_to_hex(adjusted),
                    ratio=_round_ratio(contrast_ratio(fg, adjusted)),
                    adjusted_property="background",
                )
            )
    suggestions.sort(key=lambda s: abs(s.ratio - target_ratio))
    return suggestions
