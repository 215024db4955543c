"""Packing channels into integers and back.

Out-of-range channels are not rejected: each channel is masked to its
low 8 bits before packing, so ``pack_rgb(256, 0, 0) == pack_rgb(0, 0, 0)``.
"""

from fastcolor.models import Rgb, Rgba

RGB_MAX = 0xFFFFFF
RGBA_MAX = 0xFFFFFFFF


def pack_rgb(r: int, g: int, b: int) -> int:
    """Pack RGB channels into a 0xRRGGBB integer.

    Example:
        >>> pack_rgb(200, 100, 56)
        13132856
    """
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack RGBA channels into a 0xRRGGBBAA integer.

    Example:
        >>> pack_rgba(200, 100, 56, 180)
        3362011316
    """
    return (r & 0xFF) * 16777216 + (g & 0xFF) * 65536 + (b & 0xFF) * 256 + (a & 0xFF)


def unpack_rgb(num: int) -> Rgb:
    """Split a 0xRRGGBB integer into components.

    Example:
        >>> unpack_rgb(13132856)
        Rgb(r=200, g=100, b=56)
    """
    return Rgb(r=num >> 16 & 0xFF, g=num >> 8 & 0xFF, b=num & 0xFF)


def unpack_rgba(num: int) -> Rgba:
    """Split a 0xRRGGBBAA integer into components.

    Example:
        >>> unpack_rgba(3362011316)
        Rgba(r=200, g=100, b=56, a=180)
    """
    return Rgba(
        r=(num & 0xFF000000) >> 24,
        g=(num & 0x00FF0000) >> 16,
        b=(num & 0x0000FF00) >> 8,
        a=num & 0x000000FF,
    )
