"""Pulse timing: quadratic ease-in-out schedule."""

from typing import List

NUM_STEPS = 20


def ease_in_out_quad(t: float, b: float, c: float, d: float) -> float:
    """
    Quadratic ease-in-out.
    t: current time, b: start value, c: total change, d: duration.
    Accelerates over the first half of d, decelerates over the second.
    """
    t = t / (d / 2)
    if t < 1:
        return (c / 2) * t * t + b
    t -= 1
    return (-c / 2) * (t * (t - 2) - 1) + b


def ease_timestamps(duration: float, num_steps: int = NUM_STEPS) -> List[int]:
    """Cumulative frame times in ms for a pulse lasting `duration` seconds."""
    # int(x + 0.5) rounds halves up; values are never negative
    return [
        int(ease_in_out_quad(i, 0.0, 1.0, num_steps) * duration * 1000 + 0.5)
        for i in range(num_steps)
    ]


def ease_delays(duration: float, num_steps: int = NUM_STEPS) -> List[int]:
    """The num_steps - 1 gaps between consecutive eased timestamps, in ms."""
    stamps = ease_timestamps(duration, num_steps)
    return [stamps[i + 1] - stamps[i] for i in range(len(stamps) - 1)]
