"""Unit tests for hex encoding, decoding and validation."""

import pytest

from fastcolor.codec import (
    FAST_HEX_MAX_DIGITS,
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
    pack_rgb,
    rgb_to_hex,
    rgba_to_hex,
)
from fastcolor.exceptions import InvalidHexError
from fastcolor.models import Rgb, Rgba


class TestHexDigitValue:
    """Test the per-character digit mapping."""

    @pytest.mark.unit
    def test_digits(self):
        """Test 0-9, a-f and A-F."""
        assert [hex_digit_value(ch) for ch in "0123456789"] == list(range(10))
        assert [hex_digit_value(ch) for ch in "abcdef"] == list(range(10, 16))
        assert [hex_digit_value(ch) for ch in "ABCDEF"] == list(range(10, 16))

    @pytest.mark.unit
    def test_rejected_characters_map_above_15(self):
        """Test that punctuation, other letters and non-ASCII never pass."""
        for ch in ["g", "G", "p", "z", "#", " ", "-", "é", "１", "à", "", "ab"]:
            assert hex_digit_value(ch) > 15


class TestHexToNumber:
    """Test the safe (multiplying) decoder."""

    @pytest.mark.unit
    def test_known_values(self):
        """Test documented examples, with and without '#'."""
        assert hex_to_number("#a1b2c3d4") == 2712847316
        assert hex_to_number("ffffff") == 0xFFFFFF
        assert hex_to_number("#A1B2C3") == 0xA1B2C3

    @pytest.mark.unit
    def test_precision_ceiling(self):
        """Test that 13 digits decode exactly and 14 are rejected."""
        assert SAFE_HEX_MAX_DIGITS == 13
        assert hex_to_number("f" * 13) == 2**52 - 1

        with pytest.raises(InvalidHexError):
            hex_to_number("2" + "0" * 13)

    @pytest.mark.unit
    def test_invalid_digit(self):
        """Test that a non-hex digit fails fast."""
        with pytest.raises(InvalidHexError) as exc_info:
            hex_to_number("#12g456")
        assert "'g'" in exc_info.value.reason

    @pytest.mark.unit
    def test_empty_body(self):
        """Test that '#' alone and '' are rejected."""
        with pytest.raises(InvalidHexError):
            hex_to_number("#")
        with pytest.raises(InvalidHexError):
            hex_to_number("")

    @pytest.mark.unit
    def test_non_string(self):
        """Test that non-strings are rejected as invalid format."""
        with pytest.raises(InvalidHexError):
            hex_to_number(123)


class TestHexToNumberFast:
    """Test the fast (shifting) decoder."""

    @pytest.mark.unit
    def test_known_values(self):
        """Test documented examples."""
        assert hex_to_number_fast("#a1b2c3") == 10597059
        assert hex_to_number_fast("ffffff") == 16777215

    @pytest.mark.unit
    def test_matches_safe_decoder(self):
        """Test that both decoders agree below the fast ceiling."""
        for value in ["0", "7", "abc", "#c86438", "fffffff"]:
            assert hex_to_number_fast(value) == hex_to_number(value)

    @pytest.mark.unit
    def test_digit_ceiling(self):
        """Test that 8 digits are rejected rather than truncated."""
        assert FAST_HEX_MAX_DIGITS == 7
        assert hex_to_number_fast("#fffffff") == 0xFFFFFFF

        with pytest.raises(InvalidHexError) as exc_info:
            hex_to_number_fast("#a1b2c3d4")
        assert "7-digit limit" in exc_info.value.reason

    @pytest.mark.unit
    def test_invalid_digit(self):
        """Test that a non-hex digit fails fast."""
        with pytest.raises(InvalidHexError):
            hex_to_number_fast("#xyz123")


class TestEncoding:
    """Test number/channel to hex encoding."""

    @pytest.mark.unit
    def test_number_to_hex6(self):
        """Test fixed 6-digit output."""
        assert number_to_hex6(0xC86438) == "#c86438"
        assert number_to_hex6(0) == "#000000"
        assert number_to_hex6(0xFF) == "#0000ff"

    @pytest.mark.unit
    def test_number_to_hex8(self):
        """Test fixed 8-digit output."""
        assert number_to_hex8(0xC86438B4) == "#c86438b4"
        assert number_to_hex8(0) == "#00000000"
        assert number_to_hex8(0xFFFFFFFF) == "#ffffffff"

    @pytest.mark.unit
    def test_number_is_masked(self):
        """Test that bits above the width are dropped."""
        assert number_to_hex6(0x1_000000) == "#000000"
        assert number_to_hex8(0x1_00000001) == "#00000001"

    @pytest.mark.unit
    def test_rgb_to_hex(self):
        """Test channel encoding."""
        assert rgb_to_hex(200, 100, 56) == "#c86438"
        assert rgba_to_hex(200, 100, 56, 180) == "#c86438b4"
        assert rgb_to_hex(256, 0, 15) == "#00000f"

    @pytest.mark.unit
    def test_roundtrip_6_digits(self, sample_rgb_triples):
        """Test that decoding then encoding gives the normalized string."""
        for r, g, b in sample_rgb_triples:
            upper = f"#{r:02X}{g:02X}{b:02X}"
            assert number_to_hex6(hex_to_number(upper)) == upper.lower()
            assert number_to_hex6(hex_to_number(upper)) == normalize_hex(upper)


class TestIsHex:
    """Test hex validation."""

    @pytest.mark.unit
    def test_valid_shapes(self):
        """Test all four accepted lengths."""
        assert is_hex("#abc") is True
        assert is_hex("#abcd") is True
        assert is_hex("#a1b2c3") is True
        assert is_hex("#a1b2c3d4") is True
        assert is_hex("#ABCDEF") is True

    @pytest.mark.unit
    def test_invalid_values(self):
        """Test wrong characters, lengths and types."""
        assert is_hex("#xyz123") is False
        assert is_hex("abc123") is False
        assert is_hex(123) is False
        assert is_hex(None) is False
        assert is_hex("#") is False
        assert is_hex("#ab") is False
        assert is_hex("#abcde") is False
        assert is_hex("#abcdefabc") is False

    @pytest.mark.unit
    def test_rejects_lookalike_characters(self):
        """Test punctuation and non-ASCII characters without raising."""
        assert is_hex("#ppp") is False
        assert is_hex("#ab c") is False
        assert is_hex("#12-456") is False
        assert is_hex("#ééé") is False
        assert is_hex("#１２３") is False


class TestHexToComponents:
    """Test hex_to_rgb / hex_to_rgba."""

    @pytest.mark.unit
    def test_hex_to_rgb(self):
        """Test full and short RGB forms."""
        assert hex_to_rgb("#c86438") == Rgb(r=200, g=100, b=56)
        assert hex_to_rgb("c86438") == Rgb(r=200, g=100, b=56)
        assert hex_to_rgb("#f80") == Rgb(r=255, g=136, b=0)

    @pytest.mark.unit
    def test_hex_to_rgba(self):
        """Test full and short RGBA forms."""
        assert hex_to_rgba("#c86438b4") == Rgba(r=200, g=100, b=56, a=180)
        assert hex_to_rgba("#f80c") == Rgba(r=255, g=136, b=0, a=204)

    @pytest.mark.unit
    def test_rgb_rejects_rgba_lengths(self):
        """Test that hex_to_rgb refuses 4 and 8 digit strings."""
        with pytest.raises(InvalidHexError):
            hex_to_rgb("#c86438b4")
        with pytest.raises(InvalidHexError):
            hex_to_rgb("#abcd")

    @pytest.mark.unit
    def test_rgba_rejects_rgb_lengths(self):
        """Test that hex_to_rgba refuses 3 and 6 digit strings."""
        with pytest.raises(InvalidHexError):
            hex_to_rgba("#c86438")
        with pytest.raises(InvalidHexError) as exc_info:
            hex_to_rgba("#abc")
        assert "'#rgba' or '#rrggbbaa'" in exc_info.value.recovery_hint

    @pytest.mark.unit
    def test_malformed_input_fails_fast(self):
        """Test that garbage never decodes to a number."""
        for value in ["#xyz123", "#12345", "", "#", "#ggg"]:
            with pytest.raises(InvalidHexError):
                hex_to_rgb(value)

    @pytest.mark.unit
    def test_agrees_with_packing(self):
        """Test that hex_to_rgb is number decoding plus unpacking."""
        assert hex_to_rgb("#0a0b0c").to_number() == pack_rgb(10, 11, 12)


class TestNormalizeHex:
    """Test normalize_hex."""

    @pytest.mark.unit
    def test_normalize(self):
        """Test lowercasing, '#' prefix and short-form expansion."""
        assert normalize_hex("F80") == "#ff8800"
        assert normalize_hex("#ABCD") == "#aabbccdd"
        assert normalize_hex("#A1B2C3") == "#a1b2c3"
        assert normalize_hex("a1b2c3d4") == "#a1b2c3d4"

    @pytest.mark.unit
    def test_invalid_length(self):
        """Test that other lengths raise."""
        with pytest.raises(InvalidHexError):
            normalize_hex("#12345")
