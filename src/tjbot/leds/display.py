"""LED drivers - write a normalized color to physical hardware.

Each driver exposes render(hex_color), reset() and is_available().
Hardware errors raised while rendering are not caught here.
"""

import logging
from typing import Optional

from .colors import common_anode_levels, hex_to_rgb, pack_color
from .types import ColorOrder

logger = logging.getLogger(__name__)

try:
    import board
    HAS_BOARD = True
except (ImportError, NotImplementedError, RuntimeError):
    # Blinka raises NotImplementedError on hosts that are not a supported board
    HAS_BOARD = False
    board = None

try:
    import neopixel
    HAS_NEOPIXEL = HAS_BOARD
except (ImportError, NotImplementedError, RuntimeError):
    HAS_NEOPIXEL = False
    neopixel = None

try:
    import adafruit_dotstar
    HAS_DOTSTAR = HAS_BOARD
except (ImportError, NotImplementedError, RuntimeError):
    HAS_DOTSTAR = False
    adafruit_dotstar = None

try:
    import pwmio
    HAS_PWM = HAS_BOARD
except (ImportError, NotImplementedError, RuntimeError):
    HAS_PWM = False
    pwmio = None


def _board_pin(number: int):
    return getattr(board, f"D{number}")


class NeopixelLED:
    """Addressable WS281x LED, written as a packed 24-bit color."""

    def __init__(self, gpio_pin: int = 18, grb_format: bool = False, num_pixels: int = 1):
        self.gpio_pin = gpio_pin
        self.num_pixels = num_pixels
        self.color_order = ColorOrder.GRB if grb_format else ColorOrder.RGB
        self._pixels = None
        self._init_pixels()

    def _init_pixels(self):
        if not HAS_NEOPIXEL:
            logger.warning("NeoPixel library not available")
            return
        logger.debug("initializing led_neopixel on PIN %d", self.gpio_pin)
        # Colors are packed in the strip's own byte order, so the library
        # must pass them through untouched.
        self._pixels = neopixel.NeoPixel(
            _board_pin(self.gpio_pin), self.num_pixels,
            auto_write=False, pixel_order=neopixel.RGB,
        )

    def is_available(self) -> bool:
        return self._pixels is not None

    def render(self, hex_color: str):
        value = pack_color(hex_color, self.color_order)
        logger.debug("shining my LED to %s color 0x%06X", self.color_order.name, value)
        if not self._pixels:
            logger.debug("led_neopixel unavailable, skipping render")
            return
        self._pixels.fill(value)
        self._pixels.show()

    def reset(self):
        if self._pixels:
            self._pixels.fill(0)
            self._pixels.show()
            self._pixels.deinit()
            self._pixels = None


class DotStarLED:
    """APA102 DotStar LED over a clock/data pin pair."""

    def __init__(
        self,
        clock_pin: int = 6,
        data_pin: int = 5,
        num_pixels: int = 1,
        brightness: float = 0.12,
    ):
        self.clock_pin = clock_pin
        self.data_pin = data_pin
        self.num_pixels = num_pixels
        self.brightness = max(0.0, min(1.0, brightness))
        self._dots = None
        self._init_dots()

    def _init_dots(self):
        if not HAS_DOTSTAR:
            logger.warning("DotStar library not available")
            return
        logger.debug(
            "initializing led_dotstar on CLOCK PIN %d and DATA PIN %d",
            self.clock_pin, self.data_pin,
        )
        self._dots = adafruit_dotstar.DotStar(
            _board_pin(self.clock_pin), _board_pin(self.data_pin), self.num_pixels,
            brightness=self.brightness, auto_write=False,
        )

    def is_available(self) -> bool:
        return self._dots is not None

    def render(self, hex_color: str):
        rgb = hex_to_rgb(hex_color)
        if not self._dots:
            logger.debug("led_dotstar unavailable, skipping render")
            return
        self._dots.fill(rgb)
        self._dots.show()

    def reset(self):
        if self._dots:
            self._dots.fill((0, 0, 0))
            self._dots.show()
            self._dots.deinit()
            self._dots = None


class CommonAnodeLED:
    """Common-anode RGB LED on three PWM pins. Duty cycle is inverted."""

    MAX_DUTY = 65535

    def __init__(
        self,
        red_pin: int = 19,
        green_pin: int = 13,
        blue_pin: int = 12,
        frequency: int = 800,
    ):
        self.red_pin = red_pin
        self.green_pin = green_pin
        self.blue_pin = blue_pin
        self.frequency = frequency
        self._channels: Optional[tuple] = None
        self._init_channels()

    def _init_channels(self):
        if not HAS_PWM:
            logger.warning("PWM output not available")
            return
        logger.debug(
            "initializing led_common_anode on RED PIN %d, GREEN PIN %d, and BLUE PIN %d",
            self.red_pin, self.green_pin, self.blue_pin,
        )
        self._channels = tuple(
            pwmio.PWMOut(_board_pin(pin), frequency=self.frequency, duty_cycle=self.MAX_DUTY)
            for pin in (self.red_pin, self.green_pin, self.blue_pin)
        )

    def is_available(self) -> bool:
        return self._channels is not None

    @classmethod
    def duty_cycles(cls, hex_color: str) -> tuple:
        """16-bit duty cycles for red, green and blue; 255 maps to MAX_DUTY."""
        return tuple(level * cls.MAX_DUTY // 255 for level in common_anode_levels(hex_color))

    def render(self, hex_color: str):
        duties = self.duty_cycles(hex_color)
        if not self._channels:
            logger.debug("led_common_anode unavailable, skipping render")
            return
        for channel, duty in zip(self._channels, duties):
            channel.duty_cycle = duty

    def reset(self):
        if self._channels:
            for channel in self._channels:
                channel.duty_cycle = self.MAX_DUTY
                channel.deinit()
            self._channels = None
