"""TJBot - the robot's LED behind one object.

    tj = TJBot()
    tj.initialize([Hardware.LED_NEOPIXEL])
    tj.shine("coral")
    tj.pulse("blue", 1.5)
"""

import logging
import signal
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from . import leds
from .config import ConfigManager, TJBotConfig, get_config_manager
from .errors import CapabilityError, TJBotError
from .log import configure_logging

logger = logging.getLogger(__name__)

VERSION = "v3.0.0"


class Hardware(str, Enum):
    """Hardware TJBot knows how to drive."""
    LED_NEOPIXEL = "led_neopixel"
    LED_COMMON_ANODE = "led_common_anode"
    LED_DOTSTAR = "led_dotstar"


class Capability(str, Enum):
    """What TJBot can do with its hardware."""
    SHINE = "shine"


ConfigSource = Union[TJBotConfig, Dict[str, Any], str, Path, None]


def _load_config(config: ConfigSource) -> TJBotConfig:
    if isinstance(config, TJBotConfig):
        return config
    if isinstance(config, dict):
        return TJBotConfig.from_dict(config)
    if config is None:
        return get_config_manager().load()
    return ConfigManager(config).load()


class TJBot:
    """TJBot's LED: shine a color, or pulse it once."""

    def __init__(self, config: ConfigSource = None):
        self.config = _load_config(config)
        configure_logging(self.config.log.level)
        self._leds: Dict[Hardware, Any] = {}
        self._previous_handlers: Dict[int, Any] = {}

        logger.info("Hello from TJBot!")
        logger.debug("TJBot library version %s", VERSION)

    # ------------------------------------------------------------------
    # Hardware
    # ------------------------------------------------------------------

    def initialize(self, hardware: Optional[Iterable[str]], install_signal_handlers: bool = True):
        """Set up the listed hardware.

        Unknown hardware names are logged and skipped.
        """
        if hardware is None:
            raise TJBotError("must define a hardware configuration for TJBot")
        if not isinstance(hardware, (list, tuple)):
            raise TJBotError("hardware must be a list")

        logger.info("Initializing TJBot with %s", ", ".join(str(h) for h in hardware))

        shine_cfg = self.config.shine
        for device in hardware:
            try:
                device = Hardware(device)
            except ValueError:
                logger.warning("TJBot does not support hardware %r, skipping", device)
                continue

            if device in self._leds:
                continue
            if device is Hardware.LED_NEOPIXEL:
                self._leds[device] = leds.NeopixelLED(
                    gpio_pin=shine_cfg.neopixel.gpio_pin,
                    grb_format=shine_cfg.neopixel.grb_format,
                    num_pixels=shine_cfg.neopixel.num_pixels,
                )
            elif device is Hardware.LED_COMMON_ANODE:
                self._leds[device] = leds.CommonAnodeLED(
                    red_pin=shine_cfg.common_anode.red_pin,
                    green_pin=shine_cfg.common_anode.green_pin,
                    blue_pin=shine_cfg.common_anode.blue_pin,
                    frequency=shine_cfg.common_anode.frequency,
                )
            elif device is Hardware.LED_DOTSTAR:
                self._leds[device] = leds.DotStarLED(
                    clock_pin=shine_cfg.dotstar.clock_pin,
                    data_pin=shine_cfg.dotstar.data_pin,
                    num_pixels=shine_cfg.dotstar.num_pixels,
                    brightness=shine_cfg.dotstar.brightness,
                )

        if install_signal_handlers and self._leds:
            self._install_signal_handlers()

    @property
    def hardware(self) -> List[Hardware]:
        return list(self._leds)

    def _install_signal_handlers(self):
        # signal.signal only works from the main thread
        if threading.current_thread() is not threading.main_thread():
            logger.debug("not on the main thread, LEDs will not reset on exit")
            return
        for sig in (signal.SIGINT, signal.SIGTERM):
            if sig not in self._previous_handlers:
                self._previous_handlers[sig] = signal.signal(sig, self._handle_signal)

    def _handle_signal(self, signum, frame):
        logger.info("Shutdown signal received, turning off LEDs")
        self.shutdown()
        previous = self._previous_handlers.get(signum)
        if callable(previous):
            previous(signum, frame)
        elif signum == signal.SIGINT:
            raise KeyboardInterrupt
        else:
            raise SystemExit(0)

    def shutdown(self):
        """Turn off and release every LED. A failing LED does not stop the rest."""
        try:
            for device, led in self._leds.items():
                logger.debug("resetting %s", device.value)
                try:
                    led.reset()
                except Exception as e:
                    logger.error("Error resetting %s: %s", device.value, e)
        finally:
            self._leds.clear()

    def _assert_capability(self, capability: Capability):
        if capability is Capability.SHINE and not self._leds:
            raise CapabilityError(
                "TJBot is not configured with an LED. "
                "Please check that you included the "
                f"{Hardware.LED_NEOPIXEL.value}, {Hardware.LED_COMMON_ANODE.value} "
                f"or {Hardware.LED_DOTSTAR.value} hardware in the TJBot initialize() method."
            )

    # ------------------------------------------------------------------
    # Shine
    # ------------------------------------------------------------------

    def _render(self, hex_color: str):
        # shines on every LED that is set up
        for led in self._leds.values():
            led.render(hex_color)

    def shine(self, color: Optional[str]) -> str:
        """Change the color of the LED. Returns the normalized "#RRGGBB"."""
        self._assert_capability(Capability.SHINE)
        return leds.shine(color, self._render)

    def pulse(self, color: Optional[str], duration: float = 1.0):
        """Pulse the LED once over `duration` seconds (0.5 to 2.0)."""
        self._assert_capability(Capability.SHINE)
        leds.pulse(color, duration, render=self._render, sleep=self.sleep)

    def shine_colors(self) -> List[str]:
        """All named colors recognized by shine() and pulse()."""
        return leds.list_colors()

    def random_color(self) -> str:
        return leds.random_color()

    def normalize_color(self, color: Optional[str]) -> str:
        return leds.normalize_color(color)

    @staticmethod
    def sleep(msec: float):
        """Block for `msec` milliseconds."""
        leds.sleep_ms(msec)
