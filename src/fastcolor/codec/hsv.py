"""HSV <-> RGB conversion.

Hue is in degrees, saturation and value in percent. Results are rounded
half-up to integers, so a round trip through HSV is not exact: grays and
primaries come back within 1 per channel, arbitrary colors within 5
(the combined quantization of a whole degree and two whole percents).
"""

import math

from fastcolor.exceptions import ChannelRangeError


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves towards +infinity."""
    return math.floor(x + 0.5)


def hsv_to_rgb(h: float, s: float, v: float) -> tuple[int, int, int]:
    """Convert HSV to 8-bit RGB.

    Hue wraps into [0, 360) (negative hues wrap forward). Saturation and
    value are clamped into [0, 100].

    Example:
        >>> hsv_to_rgb(0, 100, 100)
        (255, 0, 0)
        >>> hsv_to_rgb(-120, 100, 100)
        (0, 0, 255)
    """
    h = h % 360
    s = max(0, min(100, s)) / 100
    v = max(0, min(100, v)) / 100

    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    # One permutation of (c, x, 0) per 60-degree sector
    if h < 60:
        r, g, b = c, x, 0
    elif h < 120:
        r, g, b = x, c, 0
    elif h < 180:
        r, g, b = 0, c, x
    elif h < 240:
        r, g, b = 0, x, c
    elif h < 300:
        r, g, b = x, 0, c
    else:
        r, g, b = c, 0, x

    return (
        round_half_up((r + m) * 255),
        round_half_up((g + m) * 255),
        round_half_up((b + m) * 255),
    )


def rgb_to_hsv(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert 8-bit RGB to HSV (degrees 0-359, percent, percent).

    Hue is 0 for grays.

    Example:
        >>> rgb_to_hsv(0, 255, 0)
        (120, 100, 100)

    Raises:
        ChannelRangeError: If a channel is outside 0-255
    """
    for name, channel in (("r", r), ("g", g), ("b", b)):
        if not 0 <= channel <= 255:
            raise ChannelRangeError(name, channel)

    r = r / 255
    g = g / 255
    b = b / 255

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    h = 0.0
    s = 0.0 if max_c == 0 else delta / max_c
    v = max_c

    if delta != 0:
        if max_c == r:
            h = (g - b) / delta + (6 if g < b else 0)
        elif max_c == g:
            h = (b - r) / delta + 2
        else:
            h = (r - g) / delta + 4
        h /= 6

    return (
        round_half_up(h * 360) % 360,
        round_half_up(s * 100),
        round_half_up(v * 100),
    )
