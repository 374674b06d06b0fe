"""Accessible color search.

Finds a color that reaches a target contrast ratio against a fixed color by
changing only the HSL lightness of the other ("subject") color. Hue and
saturation of the subject are kept so the caller's design intent survives.

For a fixed hue/saturation, luminance grows monotonically with lightness, so
a bounded binary search over lightness 0-100 is sufficient. Each step runs one
of two phases:

tighten
    The midpoint already meets the target. Move the boundary on the side of
    the subject's original lightness so the result stays as close to the
    original as possible.
escape
    The midpoint misses the target. Move away from the fixed color: lighter
    when the subject is more luminous than the fixed color, darker otherwise.

The loop stops after ``SEARCH_MAX_ITERATIONS`` steps or once the interval is
no wider than ``SEARCH_MIN_SPAN``. Both boundaries are then re-evaluated and
the passing one closest to the original lightness wins. ``None`` means no
lightness in range reaches the target.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .config import settings

from .colors import RGB, adjust_lightness, rgb_to_hex, rgb_to_hsl
from .contrast import contrast_ratio, relative_luminance
from .errors import InvalidTargetRatioError

__all__ = ["find_accessible_color"]

_logger = logging.getLogger(__name__)


def _tighten(mid: float, lo: float, hi: float, original_l: float) -> tuple[float, float]:
    if mid < original_l:
        return mid, hi
    return lo, mid


def _escape(mid: float, lo: float, hi: float, subject_is_lighter: bool) -> tuple[float, float]:
    if subject_is_lighter:
        return mid, hi
    return lo, mid


def find_accessible_color(
    foreground: RGB,
    background: RGB,
    target_ratio: float,
    adjust_foreground: bool = True,
) -> Optional[RGB]:
    """Return the adjusted subject color, or ``None`` when the search is exhausted.

    Parameters
    ----------
    foreground, background : RGB
        The color pair being evaluated.
    target_ratio : float
        Minimum contrast ratio the result must reach.
    adjust_foreground : bool
        Adjust the foreground (default) or the background; the other color
        stays fixed.
    """
    if isinstance(target_ratio, bool) or not isinstance(target_ratio, (int, float)):
        raise InvalidTargetRatioError(
            f"Target ratio must be a positive finite number: {target_ratio!r}",
            context={"target_ratio": target_ratio},
        )
    try:
        finite = math.isfinite(target_ratio)
    except OverflowError:  # int beyond float range
        raise InvalidTargetRatioError(
            "Target ratio must be a positive finite number: integer too large",
            context={"target_ratio": target_ratio},
        ) from None
    if not finite or target_ratio <= 0:
        raise InvalidTargetRatioError(
            f"Target ratio must be a positive finite number: {target_ratio!r}",
            context={"target_ratio": target_ratio},
        )

    subject = foreground if adjust_foreground else background
    fixed = background if adjust_foreground else foreground
    original_l = rgb_to_hsl(subject).l
    subject_is_lighter = relative_luminance(subject) > relative_luminance(fixed)

    lo, hi = 0.0, 100.0
    iterations = 0
    while iterations < settings.SEARCH_MAX_ITERATIONS and hi - lo > settings.SEARCH_MIN_SPAN:
        mid = (lo + hi) / 2
        ratio = contrast_ratio(adjust_lightness(subject, mid), fixed)
        if ratio >= target_ratio:
            lo, hi = _tighten(mid, lo, hi, original_l)
        else:
            lo, hi = _escape(mid, lo, hi, subject_is_lighter)
        iterations += 1

    light = adjust_lightness(subject, hi)
    dark = adjust_lightness(subject, lo)
    light_ok = contrast_ratio(light, fixed) >= target_ratio
    dark_ok = contrast_ratio(dark, fixed) >= target_ratio

    if light_ok and dark_ok:
        result: Optional[RGB] = light if abs(hi - original_l) < abs(lo - original_l) else dark
    elif light_ok:
        result = light
    elif dark_ok:
        result = dark
    else:
        result = None

    _logger.debug(
        "lightness search subject=%s fixed=%s target=%.2f iterations=%d bounds=(%.2f, %.2f) result=%s",
        rgb_to_hex(subject),
        rgb_to_hex(fixed),
        target_ratio,
        iterations,
        lo,
        hi,
        rgb_to_hex(result) if result is not None else None,
    )
    return result
