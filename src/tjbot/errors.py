"""
TJBot errors.

Provides:
- A common base class for everything the library raises on purpose
- Color and pulse-duration validation errors
- Capability errors for hardware that was never initialized

Errors are raised synchronously and never retried. Failures coming from
LED hardware drivers are not wrapped; they propagate unchanged.
"""

from typing import Optional


class TJBotError(Exception):
    """Base class for TJBot errors."""
    pass


class InvalidColorError(TJBotError, ValueError):
    """A color token could not be resolved to #RRGGBB."""

    def __init__(self, color: Optional[object]):
        self.color = color
        super().__init__(f'TJBot did not understand the specified color "{color}"')


class InvalidDurationError(TJBotError, ValueError):
    """A pulse duration fell outside the supported range."""

    def __init__(self, duration: float, message: str):
        self.duration = duration
        super().__init__(message)


class DurationTooShortError(InvalidDurationError):
    """Pulse duration below the minimum."""

    def __init__(self, duration: float, minimum: float):
        self.minimum = minimum
        super().__init__(
            duration,
            f"TJBot does not recommend pulsing for less than {minimum} seconds.",
        )


class DurationTooLongError(InvalidDurationError):
    """Pulse duration above the maximum."""

    def __init__(self, duration: float, maximum: float):
        self.maximum = maximum
        super().__init__(
            duration,
            f"TJBot does not recommend pulsing for more than {maximum} seconds.",
        )


class CapabilityError(TJBotError):
    """A capability was requested without the hardware it needs."""
    pass
