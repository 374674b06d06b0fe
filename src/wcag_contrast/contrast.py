"""WCAG 2.1 relative luminance and contrast ratio.

Public API:
- relative_luminance(rgb: RGB) -> float   (0.0 black .. 1.0 white)
- contrast_ratio(a: RGB, b: RGB) -> float (1.0 .. 21.0, symmetric)

See https://www.w3.org/TR/WCAG21/#dfn-relative-luminance and
https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio.
"""

from __future__ import annotations

from .colors import RGB

__all__ = ["relative_luminance", "contrast_ratio"]


def _linear_channel(c: int) -> float:
    v = c / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(rgb: RGB) -> float:
    r, g, b = rgb
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * _linear_channel(r) + 0.7152 * _linear_channel(g) + 0.0722 * _linear_channel(b)


def contrast_ratio(a: RGB, b: RGB) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)
