"""Color tokens → canonical #RRGGBB, and conversions for LED hardware.

Accepted tokens: a named color (case-insensitive), a 3- or 6-digit hex string
with an optional "#" or "0x" prefix, "on", "off", "random", or None (off).
"""

import colorsys
import random
import re
import threading
from typing import List, Optional

from ..errors import InvalidColorError
from .names import NAMED_COLORS
from .types import RGB, ColorOrder


_HEX_PATTERN = re.compile(r"[0-9a-f]{6}|[0-9a-f]{3}", re.IGNORECASE)
_NAME_TO_HEX = {name.lower(): value for name, value in NAMED_COLORS}

_color_names: Optional[List[str]] = None
_color_names_lock = threading.Lock()


def list_colors() -> List[str]:
    """Names of all recognized colors, in table order."""
    global _color_names
    if _color_names is None:
        with _color_names_lock:
            if _color_names is None:
                _color_names = [name for name, _ in NAMED_COLORS]
    return list(_color_names)


def random_color() -> str:
    """A uniformly chosen named color."""
    return random.choice(list_colors())


def _expand_shorthand(digits: str) -> str:
    if len(digits) == 3:
        return "".join(c * 2 for c in digits)
    return digits


def normalize_color(color: Optional[str]) -> str:
    """Normalize a color token to "#RRGGBB".

    Raises:
        InvalidColorError: the token is neither hex nor a known name.
    """
    if color is None:
        norm = "off"
    elif isinstance(color, str):
        norm = color
    else:
        raise InvalidColorError(color)

    if norm == "on":
        norm = "FFFFFF"
    elif norm == "off":
        norm = "000000"
    elif norm == "random":
        norm = random_color()

    if norm.startswith("0x"):
        norm = norm[2:]
    if norm.startswith("#"):
        norm = norm[1:]

    if _HEX_PATTERN.fullmatch(norm):
        rgb = _expand_shorthand(norm)
    else:
        rgb = _NAME_TO_HEX.get(norm.lower())

    if rgb is None:
        raise InvalidColorError(color)

    if not rgb.startswith("#"):
        rgb = f"#{rgb}"

    if len(rgb) != 7:
        raise InvalidColorError(color)

    return rgb


def hex_to_rgb(hex_color: str) -> RGB:
    """Split "#RRGGBB" (or "#RGB") into its red, green and blue bytes."""
    digits = _expand_shorthand(hex_color[1:] if hex_color.startswith("#") else hex_color)
    if len(digits) != 6:
        raise ValueError(f"expected a #RRGGBB color, got {hex_color!r}")
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(rgb: RGB) -> str:
    r, g, b = (max(0, min(255, int(c))) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def pack_color(hex_color: str, order: ColorOrder = ColorOrder.RGB) -> int:
    """Pack a normalized color into a 24-bit int for an addressable strip."""
    r, g, b = hex_to_rgb(hex_color)
    if order is ColorOrder.GRB:
        return (g << 16) | (r << 8) | b
    return (r << 16) | (g << 8) | b


def common_anode_levels(hex_color: str) -> RGB:
    """PWM levels for a common-anode LED. 255 is fully off on each channel."""
    r, g, b = hex_to_rgb(hex_color)
    return (255 - r, 255 - g, 255 - b)


def with_lightness(hex_color: str, lightness: float) -> str:
    """Keep hue and saturation of hex_color, replace its HSL lightness."""
    r, g, b = hex_to_rgb(hex_color)
    h, _, s = colorsys.rgb_to_hls(r / 255.0, g / 255.0, b / 255.0)
    lightness = max(0.0, min(1.0, lightness))
    nr, ng, nb = colorsys.hls_to_rgb(h, lightness, s)
    return rgb_to_hex((round(nr * 255), round(ng * 255), round(nb * 255)))
