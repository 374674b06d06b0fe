"""Global configuration and constants for the contrast engine."""

from __future__ import annotations

import os
from typing import Final

# Lightness binary search bounds; the iteration cap guarantees termination
SEARCH_MAX_ITERATIONS: Final = 20
SEARCH_MIN_SPAN: Final = 1.0  # lightness percentage points

# Displayed ratios are rounded; pass/fail always uses the raw value
RATIO_DECIMALS: Final = 2

DEFAULT_CONTENT_TYPE: Final = "normal-text"
DEFAULT_LEVEL: Final = "AA"
DEFAULT_PRESERVE: Final = "both"

LOG_LEVEL: Final = os.environ.get("WCAG_CONTRAST_LOG_LEVEL", "WARNING").upper()
