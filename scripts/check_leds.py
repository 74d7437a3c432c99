#!/usr/bin/env python3
"""
Check the TJBot LED directly - diagnostic tool.
Run on the Pi to verify the LED is wired and configured correctly.

    python scripts/check_leds.py --hardware led_neopixel --grb
"""

import argparse
import os
import sys

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tjbot import Hardware, TJBot, TJBotError  # noqa: E402


def main() -> int:
    parser = argparse.ArgumentParser(description="TJBot LED diagnostic")
    parser.add_argument(
        "--hardware", action="append", choices=[h.value for h in Hardware],
        help="LED hardware to drive (repeatable, default: led_neopixel)",
    )
    parser.add_argument("--config", help="Path to tjbot.yaml / tjbot.json")
    parser.add_argument("--grb", action="store_true", help="NeoPixel expects GRB byte order")
    parser.add_argument("--duration", type=float, default=1.0, help="Pulse duration in seconds")
    args = parser.parse_args()

    tj = TJBot(args.config)
    if args.grb:
        tj.config.shine.neopixel.grb_format = True
    tj.initialize(args.hardware or [Hardware.LED_NEOPIXEL.value])

    print("=" * 60)
    print("TJBot LED Diagnostic")
    print("=" * 60)

    try:
        print("1. Primary colors...")
        for color in ("red", "green", "blue", "on"):
            print(f"   {color:>6} -> {tj.shine(color)}")
            tj.sleep(700)

        print("2. Hex formats...")
        for color in ("#FF8000", "0x00FFFF", "f0f"):
            print(f"   {color:>8} -> {tj.shine(color)}")
            tj.sleep(700)

        print("3. Random colors...")
        for _ in range(3):
            name = tj.random_color()
            print(f"   {name:>10} -> {tj.shine(name)}")
            tj.sleep(700)

        print(f"4. Pulsing over {args.duration}s...")
        for color in ("red", "coral", "teal"):
            print(f"   {color}")
            tj.pulse(color, args.duration)

        print("5. Off")
        tj.shine("off")
    except KeyboardInterrupt:
        print("\nInterrupted")
    except TJBotError as e:
        print(f"\nError: {e}")
        return 1
    finally:
        tj.shutdown()

    print("=" * 60)
    print("Done. Known colors: " + ", ".join(tj.shine_colors()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
