"""Color utilities for chart visualization."""
import math
import re
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence

from modcharts.constants import (
    FALLBACK_LIGHTNESS,
    FALLBACK_SATURATION,
    MODEL_HEX_COLORS,
)
from modcharts.utils import setup_logger

logger = setup_logger(__name__)

_HEX_RE = re.compile(r"#?[0-9a-fA-F]{6}")


def _round_half_up(value: float) -> int:
    # x.5 rounds up, unlike round()
    return int(math.floor(value + 0.5))


def hex_to_hsl(hex_color: str) -> str:
    """
    Convert a HEX color code to an HSL string.

    Args:
        hex_color: Color code in #RRGGBB format (the leading "#" is optional)

    Returns:
        String in "hsl(h, s%, l%)" format, h in [0, 360), s and l in [0, 100]

    Raises:
        ValueError: If hex_color is not six hex digits
    """
    if not isinstance(hex_color, str) or not _HEX_RE.fullmatch(hex_color):
        raise ValueError(f"Invalid HEX color: {hex_color!r}")

    digits = hex_color.lstrip("#")
    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        # Achromatic
        hue = saturation = 0.0
    else:
        delta = max_c - min_c
        if lightness > 0.5:
            saturation = delta / (2 - max_c - min_c)
        else:
            saturation = delta / (max_c + min_c)

        if max_c == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif max_c == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue /= 6

    h = _round_half_up(hue * 360) % 360
    s = _round_half_up(saturation * 100)
    l = _round_half_up(lightness * 100)
    return f"hsl({h}, {s}%, {l}%)"


# Preset model colors in HSL, built once at import
MODEL_COLOR_MAP: Mapping[str, str] = MappingProxyType(
    {model: hex_to_hsl(hex_color) for model, hex_color in MODEL_HEX_COLORS.items()}
)


def _fallback_color(index: int, total: int) -> str:
    """Evenly spaced rainbow color for position index out of total."""
    hue = _round_half_up(360 / total * index)
    return f"hsl({hue}, {FALLBACK_SATURATION}%, {FALLBACK_LIGHTNESS}%)"


def generate_colors(n: int, model_names: Sequence[Optional[str]]) -> List[str]:
    """
    Generate one color per model, preferring preset colors.

    Models without a preset get an evenly spaced hue based on their position.
    Positions past the end of model_names are treated as unknown models.

    Args:
        n: Number of models
        model_names: Model names, in display order

    Returns:
        List of n HSL color strings in input order
    """
    if n > len(model_names):
        logger.warning(
            f"Asked for {n} colors but only {len(model_names)} model names given; "
            "extra positions use fallback colors"
        )

    colors = []
    for i in range(n):
        model = model_names[i] if i < len(model_names) else None
        preset = MODEL_COLOR_MAP.get(model)
        if preset:
            colors.append(preset)
        else:
            logger.debug(f"No preset color for {model!r}, using fallback")
            colors.append(_fallback_color(i, n))
    return colors
