"""Window size, palette constants and the height-based colour ramp."""

from __future__ import annotations

import math

WIDTH = 1920
HEIGHT = 1080

WHITE = 0xFFFFFFFF
LIGHT_BLUE = 0x87CEEB
CORAL = 0xFF7F50
GOLD = 0xFFD700
FOREST_GREEN = 0x228B22
DARK_BLUE = 0x483D8B
RED4 = 0xFFFF33
BLACK = 0x000000

_CHANNEL_MASK = 0xFF
_PIXEL_MASK = 0xFFFFFFFF


def pixel(r: int, g: int, b: int, a: int) -> int:
    """Pack red, green, blue and alpha into one 32-bit RGBA value."""
    return ((r << 24) | (g << 16) | (b << 8) | a) & _PIXEL_MASK


def _ratio(z: int, min_z: int, max_z: int) -> float:
    numerator = z - min_z
    span = max_z - min_z
    if span != 0:
        return numerator / span
    # A flat map divides by zero; follow floating-point rules for that case.
    if numerator == 0:
        return math.nan
    return math.copysign(math.inf, numerator)


def get_colour(z: int, min_z: int, max_z: int) -> int:
    """Colour for height ``z`` given the map's depth range.

    The range is cut into five equal bands, from the lowest to the highest:
    RED4, FOREST_GREEN, GOLD, CORAL and LIGHT_BLUE.
    """
    ratio = _ratio(z, min_z, max_z)
    if ratio < 0.2:
        return RED4
    if ratio < 0.4:
        return FOREST_GREEN
    if ratio < 0.6:
        return GOLD
    if ratio < 0.8:
        return CORAL
    return LIGHT_BLUE