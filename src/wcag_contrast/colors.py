"""Color parsing and color-space conversion.

Parses CSS-style color text into opaque RGB values and converts between RGB
and HSL. Contrast math is only defined for opaque colors, so an ``rgba()``
alpha component is accepted and dropped.

Supported input grammars (checked in this order, after trimming whitespace
and lower-casing):
    #rgb          shorthand hex, each digit duplicated
    #rrggbb       full hex
    rgb(r, g, b) / rgba(r, g, b, a)

Public API:
    RGB, HSL                      immutable value types
    parse_color(text) -> RGB
    rgb_to_hex(rgb) -> str        (#rrggbb, lowercase)
    rgb_to_hsl(rgb) -> HSL        (integer h/s/l)
    hsl_to_rgb(hsl) -> RGB
    adjust_lightness(rgb, l) -> RGB
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterator

from .errors import ColorParseError, ColorRangeError

__all__ = [
    "RGB",
    "HSL",
    "parse_color",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "adjust_lightness",
]

_HEX_RE = re.compile(r"#([0-9a-f]+)")
_RGB_RE = re.compile(
    r"rgba?\(\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*,\s*([0-9]{1,3})\s*(?:,\s*([0-9]*\.?[0-9]+)\s*)?\)"
)


@dataclass(frozen=True)
class RGB:
    """Opaque sRGB color with integer channels in 0-255."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ColorRangeError(
                    f"RGB channel {name} must be an integer: {value!r}",
                    context={"channel": name, "value": value},
                )
            if not 0 <= value <= 255:
                raise ColorRangeError(
                    f"RGB channel {name} out of range 0-255: {value}",
                    context={"channel": name, "value": value},
                )

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))


@dataclass(frozen=True)
class HSL:
    """Hue in degrees (0-360), saturation and lightness in percent (0-100).

    Values may be fractional; ``rgb_to_hsl`` always yields integers while the
    lightness search probes fractional midpoints.
    """

    h: float
    s: float
    l: float  # noqa: E741

    def __post_init__(self) -> None:
        for name, hi in (("h", 360), ("s", 100), ("l", 100)):
            value = getattr(self, name)
            if not 0 <= value <= hi:
                raise ColorRangeError(
                    f"HSL component {name} out of range 0-{hi}: {value}",
                    context={"component": name, "value": value},
                )

    def __iter__(self) -> Iterator[float]:
        return iter((self.h, self.s, self.l))


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def parse_color(text: str) -> RGB:
    """Parse color text into an :class:`RGB` value.

    Raises ColorParseError for anything outside the supported grammars,
    including ``#`` strings whose hex part is not 3 or 6 digits and ``rgb()``
    channels above 255.
    """
    if not isinstance(text, str):
        raise ColorParseError(f"Color must be a string: {text!r}", context={"value": text})
    normalized = text.strip().lower()

    if normalized.startswith("#"):
        m = _HEX_RE.fullmatch(normalized)
        digits = m.group(1) if m else ""
        if len(digits) == 3:
            r, g, b = (int(ch * 2, 16) for ch in digits)
            return RGB(r, g, b)
        if len(digits) == 6:
            return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
        raise ColorParseError(f"Invalid hex color: {text}", context={"value": text})

    m = _RGB_RE.fullmatch(normalized)
    if m:
        channels = [int(m.group(i)) for i in (1, 2, 3)]
        if any(c > 255 for c in channels):
            raise ColorParseError(
                f"RGB channel out of range 0-255 in color: {text}", context={"value": text}
            )
        return RGB(*channels)

    raise ColorParseError(f"Unsupported color format: {text}", context={"value": text})


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = rgb
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = (c / 255.0 for c in rgb)
    mx = max(r, g, b)
    mn = min(r, g, b)
    diff = mx - mn
    l = (mx + mn) / 2  # noqa: E741
    h = 0.0
    s = 0.0
    if diff != 0:
        s = diff / (2 - mx - mn) if l > 0.5 else diff / (mx + mn)
        if mx == r:
            h = (g - b) / diff
            if g < b:
                h += 6
        elif mx == g:
            h = (b - r) / diff + 2
        else:
            h = (r - g) / diff + 4
        h /= 6
    return HSL(_round_half_up(h * 360), _round_half_up(s * 100), _round_half_up(l * 100))


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    h = hsl.h / 360.0
    s = hsl.s / 100.0
    l = hsl.l / 100.0  # noqa: E741
    if s == 0:
        r = g = b = l  # achromatic
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return RGB(_round_half_up(r * 255), _round_half_up(g * 255), _round_half_up(b * 255))


def adjust_lightness(rgb: RGB, lightness: float) -> RGB:
    """Return ``rgb`` with its HSL lightness replaced, keeping hue and saturation.

    ``lightness`` is clamped to 0-100.
    """
    h, s, _ = rgb_to_hsl(rgb)
    return hsl_to_rgb(HSL(h, s, max(0.0, min(100.0, lightness))))
