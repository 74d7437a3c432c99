"""
Tests for the LED drivers.

These tests don't need hardware: the Adafruit modules are patched with
MagicMock objects, or the drivers are left unavailable.
"""

import pytest
from unittest.mock import MagicMock, call, patch

from conftest import mock_channels
from tjbot.leds import display
from tjbot.leds.display import CommonAnodeLED, DotStarLED, NeopixelLED
from tjbot.leds.types import ColorOrder


@pytest.fixture
def fake_board():
    board = MagicMock(name="board")
    with patch.object(display, "board", board):
        yield board


class TestUnavailableHardware:
    """Without the libraries, drivers log and skip rendering."""

    def test_neopixel_unavailable(self, no_hardware):
        led = NeopixelLED()
        assert not led.is_available()
        led.render("#FF0000")
        led.reset()

    def test_dotstar_unavailable(self, no_hardware):
        led = DotStarLED()
        assert not led.is_available()
        led.render("#FF0000")
        led.reset()

    def test_common_anode_unavailable(self, no_hardware):
        led = CommonAnodeLED()
        assert not led.is_available()
        led.render("#FF0000")
        led.reset()

    def test_bad_color_still_raises(self, no_hardware):
        with pytest.raises(ValueError):
            NeopixelLED().render("#12")


class TestNeopixel:

    @pytest.fixture
    def neopixel_module(self, fake_board):
        module = MagicMock(name="neopixel")
        with patch.object(display, "neopixel", module), \
                patch.object(display, "HAS_NEOPIXEL", True):
            yield module

    def test_init_uses_configured_pin(self, neopixel_module, fake_board):
        led = NeopixelLED(gpio_pin=21, num_pixels=2)
        neopixel_module.NeoPixel.assert_called_once_with(
            fake_board.D21, 2, auto_write=False, pixel_order=neopixel_module.RGB,
        )
        assert led.is_available()

    def test_rgb_render(self, neopixel_module):
        led = NeopixelLED(grb_format=False)
        led.render("#FF8000")
        pixels = neopixel_module.NeoPixel.return_value
        pixels.fill.assert_called_once_with(0xFF8000)
        pixels.show.assert_called_once()

    def test_grb_render(self, neopixel_module):
        led = NeopixelLED(grb_format=True)
        assert led.color_order is ColorOrder.GRB
        led.render("#FF8000")
        neopixel_module.NeoPixel.return_value.fill.assert_called_once_with(0x80FF00)

    def test_reset_turns_off_and_releases(self, neopixel_module):
        led = NeopixelLED()
        pixels = neopixel_module.NeoPixel.return_value
        led.reset()
        pixels.fill.assert_called_once_with(0)
        pixels.deinit.assert_called_once()
        assert not led.is_available()

    def test_render_error_propagates(self, neopixel_module):
        led = NeopixelLED()
        neopixel_module.NeoPixel.return_value.show.side_effect = OSError("DMA busy")
        with pytest.raises(OSError):
            led.render("#FFFFFF")


class TestDotStar:

    @pytest.fixture
    def dotstar_module(self, fake_board):
        module = MagicMock(name="adafruit_dotstar")
        with patch.object(display, "adafruit_dotstar", module), \
                patch.object(display, "HAS_DOTSTAR", True):
            yield module

    def test_init(self, dotstar_module, fake_board):
        DotStarLED(clock_pin=6, data_pin=5, num_pixels=3, brightness=0.3)
        dotstar_module.DotStar.assert_called_once_with(
            fake_board.D6, fake_board.D5, 3, brightness=0.3, auto_write=False,
        )

    def test_brightness_clamped(self, dotstar_module):
        assert DotStarLED(brightness=4.0).brightness == 1.0

    def test_render_writes_rgb_tuple(self, dotstar_module):
        led = DotStarLED()
        led.render("#FF8000")
        dots = dotstar_module.DotStar.return_value
        dots.fill.assert_called_once_with((255, 128, 0))
        dots.show.assert_called_once()

    def test_reset(self, dotstar_module):
        led = DotStarLED()
        led.reset()
        dots = dotstar_module.DotStar.return_value
        dots.fill.assert_called_once_with((0, 0, 0))
        assert not led.is_available()


class TestCommonAnode:

    @pytest.fixture
    def pwm_module(self, fake_board):
        module = MagicMock(name="pwmio")
        module.PWMOut.side_effect = lambda *args, **kwargs: MagicMock()
        with patch.object(display, "pwmio", module), \
                patch.object(display, "HAS_PWM", True):
            yield module

    def test_duty_cycles_inverted(self):
        assert CommonAnodeLED.duty_cycles("#FF8000") == (0, 127 * 257, 65535)
        assert CommonAnodeLED.duty_cycles("#000000") == (65535, 65535, 65535)
        assert CommonAnodeLED.duty_cycles("#FFFFFF") == (0, 0, 0)

    def test_init_starts_off(self, pwm_module, fake_board):
        CommonAnodeLED(red_pin=19, green_pin=13, blue_pin=12, frequency=500)
        assert pwm_module.PWMOut.call_args_list == [
            call(fake_board.D19, frequency=500, duty_cycle=65535),
            call(fake_board.D13, frequency=500, duty_cycle=65535),
            call(fake_board.D12, frequency=500, duty_cycle=65535),
        ]

    def test_render_sets_each_channel(self):
        led = CommonAnodeLED.__new__(CommonAnodeLED)
        red, green, blue = mock_channels()
        led._channels = (red, green, blue)
        led.render("#FF8000")
        assert red.duty_cycle == 0
        assert green.duty_cycle == 127 * 257
        assert blue.duty_cycle == 65535

    def test_reset_turns_off(self, pwm_module):
        led = CommonAnodeLED()
        channels = led._channels
        led.render("#FFFFFF")
        led.reset()
        for channel in channels:
            assert channel.duty_cycle == 65535
            channel.deinit.assert_called_once()
        assert not led.is_available()
