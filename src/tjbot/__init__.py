"""
TJBot - shine and pulse the LED of a Raspberry Pi robot.

    from tjbot import TJBot, Hardware

    tj = TJBot()
    tj.initialize([Hardware.LED_NEOPIXEL])
    tj.pulse("red")
"""

from .bot import VERSION, Capability, Hardware, TJBot
from .config import ConfigManager, TJBotConfig
from .errors import (
    CapabilityError,
    DurationTooLongError,
    DurationTooShortError,
    InvalidColorError,
    InvalidDurationError,
    TJBotError,
)
from .leds import (
    Frame,
    build_frames,
    hex_to_rgb,
    list_colors,
    normalize_color,
    pulse,
    random_color,
    shine,
)

__version__ = "3.0.0"

__all__ = [
    "TJBot",
    "Hardware",
    "Capability",
    "VERSION",
    "TJBotConfig",
    "ConfigManager",
    "TJBotError",
    "InvalidColorError",
    "InvalidDurationError",
    "DurationTooShortError",
    "DurationTooLongError",
    "CapabilityError",
    "Frame",
    "normalize_color",
    "list_colors",
    "random_color",
    "hex_to_rgb",
    "build_frames",
    "shine",
    "pulse",
]
