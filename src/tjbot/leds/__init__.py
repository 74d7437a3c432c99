"""
LED shine and pulse.

Submodules:
- types: Frame, ColorOrder, RGB
- names: NAMED_COLORS
- colors: normalize_color, list_colors, random_color, hex_to_rgb, pack_color
- easing: ease_in_out_quad, ease_timestamps, ease_delays
- pulse: shine, pulse, build_frames, build_color_ramp
- display: NeopixelLED, DotStarLED, CommonAnodeLED
"""

from .types import RGB, ColorOrder, Frame
from .names import NAMED_COLORS
from .colors import (
    common_anode_levels,
    hex_to_rgb,
    list_colors,
    normalize_color,
    pack_color,
    random_color,
    with_lightness,
)
from .easing import NUM_STEPS, ease_delays, ease_in_out_quad, ease_timestamps
from .pulse import (
    MAX_PULSE_DURATION,
    MIN_PULSE_DURATION,
    build_color_ramp,
    build_frames,
    pulse,
    shine,
    sleep_ms,
    validate_duration,
)
from .display import CommonAnodeLED, DotStarLED, NeopixelLED

__all__ = [
    "RGB",
    "ColorOrder",
    "Frame",
    "NAMED_COLORS",
    "normalize_color",
    "list_colors",
    "random_color",
    "hex_to_rgb",
    "pack_color",
    "common_anode_levels",
    "with_lightness",
    "NUM_STEPS",
    "ease_in_out_quad",
    "ease_timestamps",
    "ease_delays",
    "MIN_PULSE_DURATION",
    "MAX_PULSE_DURATION",
    "validate_duration",
    "build_color_ramp",
    "build_frames",
    "shine",
    "pulse",
    "sleep_ms",
    "NeopixelLED",
    "DotStarLED",
    "CommonAnodeLED",
]
