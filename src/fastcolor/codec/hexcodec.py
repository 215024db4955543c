"""Hex string encoding, decoding and validation.

Two decoders fold hex digits into an integer:

- ``hex_to_number`` multiplies (``acc * 16 + digit``). It accepts up to
  ``SAFE_HEX_MAX_DIGITS`` (13) digits, the largest count that fits a
  53-bit float mantissa, so results stay exact in any consumer that
  stores them as doubles.
- ``hex_to_number_fast`` shifts (``acc << 4 | digit``). It accepts up to
  ``FAST_HEX_MAX_DIGITS`` (7) digits, the largest count a 32-bit signed
  shift holds without truncating. RGB decoding uses it; RGBA decoding
  needs 8 digits and uses the multiplying decoder.

Both fail fast with ``InvalidHexError`` on a non-hex digit, an empty body
or a body longer than their limit. ``is_hex`` never raises.

Encoders always emit lowercase digits with a leading ``#`` and mask their
input to 24 (RGB) or 32 (RGBA) bits.
"""

from typing import Any

from fastcolor.exceptions import InvalidHexError
from fastcolor.models import Rgb, Rgba

from .packing import unpack_rgb, unpack_rgba

HEX_DIGITS = "0123456789abcdef"

SAFE_HEX_MAX_DIGITS = 13
FAST_HEX_MAX_DIGITS = 7

# Body lengths accepted after the leading '#'
HEX_LENGTHS = (3, 4, 6, 8)

# Any value above 15 marks a rejected character
INVALID_DIGIT = 16

_DIGIT_VALUES: dict[str, int] = {ch: i for i, ch in enumerate(HEX_DIGITS)}
_DIGIT_VALUES.update({ch.upper(): i for i, ch in enumerate(HEX_DIGITS) if ch.isalpha()})


def hex_digit_value(ch: str) -> int:
    """Map one hex character to 0-15, or INVALID_DIGIT for anything else.

    Example:
        >>> hex_digit_value("b"), hex_digit_value("B"), hex_digit_value("g")
        (11, 11, 16)
    """
    return _DIGIT_VALUES.get(ch, INVALID_DIGIT)


def _strip_prefix(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidHexError(value, f"expected a string, got {type(value).__name__}")
    return value[1:] if value.startswith("#") else value


def _check_length(value: str, body: str, max_digits: int) -> None:
    if not body:
        raise InvalidHexError(value, "no hex digits")
    if len(body) > max_digits:
        raise InvalidHexError(
            value,
            f"{len(body)} digits exceeds the {max_digits}-digit limit of this decoder",
            expected=f"at most {max_digits} hex digits",
        )


def _fold_multiply(value: str, body: str) -> int:
    num = 0
    for ch in body:
        digit = hex_digit_value(ch)
        if digit > 15:
            raise InvalidHexError(value, f"{ch!r} is not a hex digit")
        num = num * 16 + digit
    return num


def _fold_shift(value: str, body: str) -> int:
    num = 0
    for ch in body:
        digit = hex_digit_value(ch)
        if digit > 15:
            raise InvalidHexError(value, f"{ch!r} is not a hex digit")
        num = (num << 4) | digit
    return num


def hex_to_number(hex_str: str) -> int:
    """Decode a hex string (optional '#') by arithmetic folding.

    Accepts 1 to 13 digits.

    Example:
        >>> hex_to_number("#a1b2c3d4")
        2712847316

    Raises:
        InvalidHexError: If the string is empty, too long or not hex
    """
    body = _strip_prefix(hex_str)
    _check_length(hex_str, body, SAFE_HEX_MAX_DIGITS)
    return _fold_multiply(hex_str, body)


def hex_to_number_fast(hex_str: str) -> int:
    """Decode a hex string (optional '#') by shift folding.

    Accepts 1 to 7 digits. Use ``hex_to_number`` for RGBA strings.

    Example:
        >>> hex_to_number_fast("#a1b2c3")
        10597059

    Raises:
        InvalidHexError: If the string is empty, too long or not hex
    """
    body = _strip_prefix(hex_str)
    _check_length(hex_str, body, FAST_HEX_MAX_DIGITS)
    return _fold_shift(hex_str, body)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode RGB channels as '#rrggbb' (channels masked to 8 bits)."""
    r &= 0xFF
    g &= 0xFF
    b &= 0xFF
    return (
        "#"
        + HEX_DIGITS[r >> 4] + HEX_DIGITS[r & 15]
        + HEX_DIGITS[g >> 4] + HEX_DIGITS[g & 15]
        + HEX_DIGITS[b >> 4] + HEX_DIGITS[b & 15]
    )


def rgba_to_hex(r: int, g: int, b: int, a: int) -> str:
    """Encode RGBA channels as '#rrggbbaa' (channels masked to 8 bits)."""
    a &= 0xFF
    return rgb_to_hex(r, g, b) + HEX_DIGITS[a >> 4] + HEX_DIGITS[a & 15]


def number_to_hex6(num: int) -> str:
    """Encode a packed RGB number as exactly 6 hex digits.

    Example:
        >>> number_to_hex6(0xC86438)
        '#c86438'
    """
    return rgb_to_hex(num >> 16 & 0xFF, num >> 8 & 0xFF, num & 0xFF)


def number_to_hex8(num: int) -> str:
    """Encode a packed RGBA number as exactly 8 hex digits.

    Example:
        >>> number_to_hex8(0xC86438B4)
        '#c86438b4'
    """
    return rgba_to_hex(
        (num & 0xFF000000) >> 24,
        (num & 0x00FF0000) >> 16,
        (num & 0x0000FF00) >> 8,
        num & 0x000000FF,
    )


def is_hex(value: Any) -> bool:
    """Check for '#' followed by 3, 4, 6 or 8 hex digits.

    Example:
        >>> is_hex("#abc"), is_hex("abc123"), is_hex("#xyz123"), is_hex(123)
        (True, False, False, False)
    """
    if not isinstance(value, str) or not value.startswith("#"):
        return False
    if len(value) - 1 not in HEX_LENGTHS:
        return False
    for ch in value[1:]:
        if hex_digit_value(ch) > 15:
            return False
    return True


def _expand_short(body: str) -> str:
    # 'abc' -> 'aabbcc'
    return "".join(ch * 2 for ch in body)


def hex_to_rgb(hex_str: str) -> Rgb:
    """Decode '#rgb' or '#rrggbb' (the '#' is optional) to components.

    Example:
        >>> hex_to_rgb("#c86438")
        Rgb(r=200, g=100, b=56)
        >>> hex_to_rgb("#f80")
        Rgb(r=255, g=136, b=0)

    Raises:
        InvalidHexError: If the string is not 3 or 6 hex digits
    """
    body = _strip_prefix(hex_str)
    if len(body) == 3:
        body = _expand_short(body)
    elif len(body) != 6:
        raise InvalidHexError(
            hex_str,
            f"RGB colors need 3 or 6 digits, got {len(body)}",
            expected="'#rgb' or '#rrggbb'",
        )
    return unpack_rgb(_fold_shift(hex_str, body))


def hex_to_rgba(hex_str: str) -> Rgba:
    """Decode '#rgba' or '#rrggbbaa' (the '#' is optional) to components.

    Example:
        >>> hex_to_rgba("#c86438b4")
        Rgba(r=200, g=100, b=56, a=180)

    Raises:
        InvalidHexError: If the string is not 4 or 8 hex digits
    """
    body = _strip_prefix(hex_str)
    if len(body) == 4:
        body = _expand_short(body)
    elif len(body) != 8:
        raise InvalidHexError(
            hex_str,
            f"RGBA colors need 4 or 8 digits, got {len(body)}",
            expected="'#rgba' or '#rrggbbaa'",
        )
    return unpack_rgba(_fold_multiply(hex_str, body))


def normalize_hex(hex_str: str) -> str:
    """Return the lowercase, '#'-prefixed, full-length form of a hex color.

    Example:
        >>> normalize_hex("F80")
        '#ff8800'
    """
    body = _strip_prefix(hex_str)
    if len(body) in (3, 6):
        return hex_to_rgb(hex_str).to_hex()
    if len(body) in (4, 8):
        return hex_to_rgba(hex_str).to_hex()
    raise InvalidHexError(
        hex_str,
        f"body must be 3, 4, 6 or 8 digits, got {len(body)}",
        expected="'#rgb', '#rgba', '#rrggbb' or '#rrggbbaa'",
    )
