"""Array versions of the packing and hex operations.

These operate on whole channels at once (one array per channel) instead
of one color at a time. Results match the scalar functions element-wise,
including the 8-bit channel masking, and keep input order.
"""

from collections.abc import Iterable

import numpy as np
import numpy.typing as npt

from fastcolor.exceptions import InvalidHexError

from .hexcodec import hex_to_rgb, hex_to_rgba, number_to_hex6, number_to_hex8


def _channel(values: npt.ArrayLike) -> npt.NDArray[np.uint32]:
    # Mask in int64 first so negative inputs wrap like Python's `& 0xFF`
    return (np.asarray(values, dtype=np.int64) & 0xFF).astype(np.uint32)


def pack_rgb_array(
    r: npt.ArrayLike, g: npt.ArrayLike, b: npt.ArrayLike
) -> npt.NDArray[np.uint32]:
    """Pack channel arrays into 0xRRGGBB values.

    Example:
        >>> pack_rgb_array([200, 0], [100, 0], [56, 255])
        array([13132856,      255], dtype=uint32)
    """
    return (_channel(r) << 16) | (_channel(g) << 8) | _channel(b)


def pack_rgba_array(
    r: npt.ArrayLike, g: npt.ArrayLike, b: npt.ArrayLike, a: npt.ArrayLike
) -> npt.NDArray[np.uint32]:
    """Pack channel arrays into 0xRRGGBBAA values."""
    return (_channel(r) << 24) | (_channel(g) << 16) | (_channel(b) << 8) | _channel(a)


def _packed(nums: npt.ArrayLike) -> npt.NDArray[np.uint32]:
    return np.asarray(nums, dtype=np.int64).astype(np.uint32)


def unpack_rgb_array(
    nums: npt.ArrayLike,
) -> tuple[npt.NDArray[np.uint8], npt.NDArray[np.uint8], npt.NDArray[np.uint8]]:
    """Split 0xRRGGBB values into (r, g, b) uint8 arrays."""
    n = _packed(nums)
    return (
        ((n >> 16) & 0xFF).astype(np.uint8),
        ((n >> 8) & 0xFF).astype(np.uint8),
        (n & 0xFF).astype(np.uint8),
    )


def unpack_rgba_array(
    nums: npt.ArrayLike,
) -> tuple[
    npt.NDArray[np.uint8], npt.NDArray[np.uint8], npt.NDArray[np.uint8], npt.NDArray[np.uint8]
]:
    """Split 0xRRGGBBAA values into (r, g, b, a) uint8 arrays."""
    n = _packed(nums)
    return (
        ((n & 0xFF000000) >> 24).astype(np.uint8),
        ((n & 0x00FF0000) >> 16).astype(np.uint8),
        ((n & 0x0000FF00) >> 8).astype(np.uint8),
        (n & 0x000000FF).astype(np.uint8),
    )


def hex_to_numbers(hex_strings: Iterable[str], alpha: bool = False) -> npt.NDArray[np.uint32]:
    """Decode hex strings into packed values.

    Args:
        hex_strings: RGB ('#rgb'/'#rrggbb') or, with alpha, RGBA strings
        alpha: Decode as RGBA instead of RGB

    Raises:
        InvalidHexError: On the first malformed string, naming its index
    """
    items = list(hex_strings)
    out = np.empty(len(items), dtype=np.uint32)
    decode = hex_to_rgba if alpha else hex_to_rgb

    for i, item in enumerate(items):
        try:
            out[i] = decode(item).to_number()
        except InvalidHexError as e:
            raise InvalidHexError(item, f"item {i}: {e.reason}") from e

    return out


def numbers_to_hex(nums: npt.ArrayLike, alpha: bool = False) -> list[str]:
    """Encode packed values as hex strings, 6 digits (or 8 with alpha)."""
    encode = number_to_hex8 if alpha else number_to_hex6
    return [encode(int(n)) for n in np.asarray(nums).ravel()]
