"""Unit tests for packing and unpacking."""

import pytest

from fastcolor.codec import pack_rgb, pack_rgba, unpack_rgb, unpack_rgba
from fastcolor.models import Rgb, Rgba


class TestPackRgb:
    """Test pack_rgb / unpack_rgb."""

    @pytest.mark.unit
    def test_known_value(self):
        """Test the documented example."""
        assert pack_rgb(200, 100, 56) == 0xC86438 == 13132856
        assert unpack_rgb(13132856) == Rgb(r=200, g=100, b=56)

    @pytest.mark.unit
    def test_extremes(self):
        """Test black and white."""
        assert pack_rgb(0, 0, 0) == 0
        assert pack_rgb(255, 255, 255) == 0xFFFFFF
        assert unpack_rgb(0xFFFFFF) == Rgb(r=255, g=255, b=255)

    @pytest.mark.unit
    def test_channel_order(self):
        """Test that red is the most significant byte."""
        assert pack_rgb(1, 0, 0) == 0x010000
        assert pack_rgb(0, 1, 0) == 0x000100
        assert pack_rgb(0, 0, 1) == 0x000001

    @pytest.mark.unit
    def test_roundtrip(self, sample_rgb_triples):
        """Test that unpack inverts pack."""
        for r, g, b in sample_rgb_triples:
            assert unpack_rgb(pack_rgb(r, g, b)).to_tuple() == (r, g, b)

    @pytest.mark.unit
    def test_out_of_range_channels_are_masked(self):
        """Test that each channel keeps only its low 8 bits."""
        assert pack_rgb(256, 0, 0) == 0
        assert pack_rgb(0x1FF, 0x100, 0x101) == pack_rgb(0xFF, 0x00, 0x01)
        assert pack_rgb(-1, 0, 0) == 0xFF0000

    @pytest.mark.unit
    def test_unpack_ignores_high_bits(self):
        """Test that bits above 24 are ignored."""
        assert unpack_rgb(0xAB_C86438) == Rgb(r=200, g=100, b=56)


class TestPackRgba:
    """Test pack_rgba / unpack_rgba."""

    @pytest.mark.unit
    def test_known_value(self):
        """Test the documented example."""
        assert pack_rgba(200, 100, 56, 180) == 0xC86438B4 == 3362011316
        assert unpack_rgba(3362011316) == Rgba(r=200, g=100, b=56, a=180)

    @pytest.mark.unit
    def test_top_byte_is_unsigned(self):
        """Test that a red channel above 127 stays positive."""
        num = pack_rgba(255, 255, 255, 255)
        assert num == 0xFFFFFFFF
        assert num > 0
        assert unpack_rgba(num) == Rgba(r=255, g=255, b=255, a=255)

    @pytest.mark.unit
    def test_roundtrip(self, sample_rgb_triples):
        """Test that unpack inverts pack with varying alpha."""
        for i, (r, g, b) in enumerate(sample_rgb_triples):
            a = i % 256
            assert unpack_rgba(pack_rgba(r, g, b, a)).to_tuple() == (r, g, b, a)

    @pytest.mark.unit
    def test_out_of_range_channels_are_masked(self):
        """Test that each channel keeps only its low 8 bits."""
        assert pack_rgba(256, 1, 2, 3) == pack_rgba(0, 1, 2, 3)
        assert pack_rgba(0, 0, 0, 511) == 0xFF
