"""LED types and constants."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

RGB = Tuple[int, int, int]


class ColorOrder(Enum):
    """Byte order of a packed 24-bit color for addressable strips."""
    RGB = "rgb"  # 0xRRGGBB
    GRB = "grb"  # 0xGGRRBB, most WS2812 strips


@dataclass(frozen=True)
class Frame:
    """One step of a pulse animation."""
    color: str  # normalized "#RRGGBB"
    delay_ms: int  # time to hold this color before the next frame
