"""Conversions between packed numbers, components, hex strings and HSV.

Everything here is a pure function: no shared state, no logging, and a
fresh value on every call.
"""

from .bulk import (
    hex_to_numbers,
    numbers_to_hex,
    pack_rgb_array,
    pack_rgba_array,
    unpack_rgb_array,
    unpack_rgba_array,
)
from .hexcodec import (
    FAST_HEX_MAX_DIGITS,
    HEX_DIGITS,
    SAFE_HEX_MAX_DIGITS,
    hex_digit_value,
    hex_to_number,
    hex_to_number_fast,
    hex_to_rgb,
    hex_to_rgba,
    is_hex,
    normalize_hex,
    number_to_hex6,
    number_to_hex8,
    rgb_to_hex,
    rgba_to_hex,
)
from .hsv import hsv_to_rgb, rgb_to_hsv, round_half_up
from .packing import RGB_MAX, RGBA_MAX, pack_rgb, pack_rgba, unpack_rgb, unpack_rgba

__all__ = [
    # Packing
    "RGBA_MAX",
    "RGB_MAX",
    "pack_rgb",
    "pack_rgba",
    "unpack_rgb",
    "unpack_rgba",
    # Hex
    "FAST_HEX_MAX_DIGITS",
    "HEX_DIGITS",
    "SAFE_HEX_MAX_DIGITS",
    "hex_digit_value",
    "hex_to_number",
    "hex_to_number_fast",
    "hex_to_rgb",
    "hex_to_rgba",
    "is_hex",
    "normalize_hex",
    "number_to_hex6",
    "number_to_hex8",
    "rgb_to_hex",
    "rgba_to_hex",
    # HSV
    "hsv_to_rgb",
    "rgb_to_hsv",
    "round_half_up",
    # Bulk
    "hex_to_numbers",
    "numbers_to_hex",
    "pack_rgb_array",
    "pack_rgba_array",
    "unpack_rgb_array",
    "unpack_rgba_array",
]
