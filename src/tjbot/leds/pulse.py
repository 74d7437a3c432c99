"""Shine and pulse: render normalized colors through an LED callable.

A pulse is 19 frames: the color ramps up in HSL lightness from black toward
half lightness, then mirrors back down. Frame delays follow a quadratic
ease-in-out curve so the whole pulse lasts about `duration` seconds.

`render` receives a normalized "#RRGGBB" string; `sleep` receives
milliseconds and is expected to block.
"""

import logging
import math
import time
from typing import Callable, List, Optional

from ..errors import DurationTooLongError, DurationTooShortError, InvalidDurationError
from .colors import normalize_color, with_lightness
from .easing import NUM_STEPS, ease_delays
from .types import Frame

logger = logging.getLogger(__name__)

MIN_PULSE_DURATION = 0.5  # seconds
MAX_PULSE_DURATION = 2.0  # seconds

RenderFn = Callable[[str], None]
SleepFn = Callable[[int], None]


def sleep_ms(ms: float) -> None:
    """Block the calling thread for `ms` milliseconds."""
    time.sleep(ms / 1000.0)


def validate_duration(duration: float) -> None:
    if math.isnan(duration):
        raise InvalidDurationError(duration, "TJBot cannot pulse for a duration that is not a number.")
    if duration < MIN_PULSE_DURATION:
        raise DurationTooShortError(duration, MIN_PULSE_DURATION)
    if duration > MAX_PULSE_DURATION:
        raise DurationTooLongError(duration, MAX_PULSE_DURATION)


def build_color_ramp(color: Optional[str], num_steps: int = NUM_STEPS) -> List[str]:
    """num_steps // 2 colors with lightness rising linearly from 0 toward 0.5."""
    target = normalize_color(color)
    half = num_steps // 2
    return [with_lightness(target, (i / half) * 0.5) for i in range(half)]


def build_frames(color: Optional[str], duration: float = 1.0) -> List[Frame]:
    """Frames for one pulse. Validates duration and color, renders nothing."""
    validate_duration(duration)
    delays = ease_delays(duration, NUM_STEPS)
    ramp = build_color_ramp(color, NUM_STEPS)

    frames = []
    for i, delay in enumerate(delays):
        if i < len(ramp):
            c = ramp[i]
        else:
            # walk back down, skipping the peak so it is shown once
            c = ramp[len(ramp) - 1 - (i - len(ramp)) - 1]
        frames.append(Frame(color=c, delay_ms=delay))
    return frames


def shine(color: Optional[str], render: RenderFn) -> str:
    """Render a color once. Returns the normalized color."""
    c = normalize_color(color)
    render(c)
    return c


def pulse(
    color: Optional[str],
    duration: float = 1.0,
    render: Optional[RenderFn] = None,
    sleep: Optional[SleepFn] = None,
) -> None:
    """Pulse the LED once, blocking until the last frame's delay has elapsed.

    Raises:
        DurationTooShortError / DurationTooLongError: duration outside
            [MIN_PULSE_DURATION, MAX_PULSE_DURATION]; nothing is rendered.
        InvalidColorError: color not understood; nothing is rendered.
    Errors raised by `render` abort the pulse at the current frame.
    """
    frames = build_frames(color, duration)
    if render is None:
        raise TypeError("pulse() requires a render callable")
    if sleep is None:
        sleep = sleep_ms

    logger.debug("pulsing %s over %.2fs in %d frames", color, duration, len(frames))
    for frame in frames:
        shine(frame.color, render)
        sleep(frame.delay_ms)
