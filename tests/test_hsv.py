"""Unit tests for HSV <-> RGB conversion."""

import pytest

from fastcolor.codec import hsv_to_rgb, rgb_to_hsv, round_half_up
from fastcolor.exceptions import ChannelRangeError


class TestRoundHalfUp:
    """Test the rounding helper."""

    @pytest.mark.unit
    def test_halves_round_up(self):
        """Test that .5 always rounds towards +infinity."""
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(-0.5) == 0
        assert round_half_up(2.49) == 2


class TestHsvToRgb:
    """Test hsv_to_rgb."""

    @pytest.mark.unit
    def test_primaries(self):
        """Test red, green and blue."""
        assert hsv_to_rgb(0, 100, 100) == (255, 0, 0)
        assert hsv_to_rgb(120, 100, 100) == (0, 255, 0)
        assert hsv_to_rgb(240, 100, 100) == (0, 0, 255)

    @pytest.mark.unit
    def test_secondaries(self):
        """Test one hue from each remaining sector."""
        assert hsv_to_rgb(60, 100, 100) == (255, 255, 0)
        assert hsv_to_rgb(180, 100, 100) == (0, 255, 255)
        assert hsv_to_rgb(300, 100, 100) == (255, 0, 255)

    @pytest.mark.unit
    def test_hue_wraps(self):
        """Test hues at and beyond 360, and negative hues."""
        assert hsv_to_rgb(360, 100, 100) == (255, 0, 0)
        assert hsv_to_rgb(480, 100, 100) == (0, 255, 0)
        assert hsv_to_rgb(-120, 100, 100) == (0, 0, 255)

    @pytest.mark.unit
    def test_saturation_and_value_are_clamped(self):
        """Test out-of-range percentages."""
        assert hsv_to_rgb(0, 150, 200) == (255, 0, 0)
        assert hsv_to_rgb(0, -10, -5) == (0, 0, 0)

    @pytest.mark.unit
    def test_grays(self):
        """Test zero saturation."""
        assert hsv_to_rgb(200, 0, 100) == (255, 255, 255)
        assert hsv_to_rgb(200, 0, 50) == (128, 128, 128)
        assert hsv_to_rgb(200, 0, 0) == (0, 0, 0)


class TestRgbToHsv:
    """Test rgb_to_hsv."""

    @pytest.mark.unit
    def test_primaries(self):
        """Test red, green and blue."""
        assert rgb_to_hsv(255, 0, 0) == (0, 100, 100)
        assert rgb_to_hsv(0, 255, 0) == (120, 100, 100)
        assert rgb_to_hsv(0, 0, 255) == (240, 100, 100)

    @pytest.mark.unit
    def test_grays_have_zero_hue(self):
        """Test that max == min gives hue 0."""
        assert rgb_to_hsv(0, 0, 0) == (0, 0, 0)
        assert rgb_to_hsv(255, 255, 255) == (0, 0, 100)
        assert rgb_to_hsv(128, 128, 128) == (0, 0, 50)

    @pytest.mark.unit
    def test_hue_near_full_turn_wraps_to_zero(self):
        """Test that a hue rounding to 360 is reported as 0."""
        assert rgb_to_hsv(255, 0, 1) == (0, 100, 100)

    @pytest.mark.unit
    def test_range(self, sample_rgb_triples):
        """Test output ranges."""
        for r, g, b in sample_rgb_triples:
            h, s, v = rgb_to_hsv(r, g, b)
            assert 0 <= h < 360
            assert 0 <= s <= 100
            assert 0 <= v <= 100

    @pytest.mark.unit
    def test_rejects_out_of_range_channels(self):
        """Test that channels outside 0-255 raise."""
        with pytest.raises(ChannelRangeError) as exc_info:
            rgb_to_hsv(256, 0, 0)
        assert exc_info.value.channel == "r"

        with pytest.raises(ValueError):
            rgb_to_hsv(0, 0, -1)


class TestRoundTrip:
    """Test RGB -> HSV -> RGB tolerance."""

    @pytest.mark.unit
    def test_grays_within_one(self):
        """Test that every gray comes back within 1."""
        for x in range(256):
            r, g, b = hsv_to_rgb(*rgb_to_hsv(x, x, x))
            assert abs(r - x) <= 1
            assert r == g == b

    @pytest.mark.unit
    def test_primaries_exact(self):
        """Test that fully saturated primaries and secondaries are exact."""
        for color in [
            (255, 0, 0), (0, 255, 0), (0, 0, 255),
            (255, 255, 0), (0, 255, 255), (255, 0, 255),
        ]:
            assert hsv_to_rgb(*rgb_to_hsv(*color)) == color

    @pytest.mark.unit
    def test_quantization_bound(self, sample_rgb_triples):
        """Test that whole-degree and whole-percent rounding stays within 5."""
        for color in sample_rgb_triples:
            back = hsv_to_rgb(*rgb_to_hsv(*color))
            for original, restored in zip(color, back):
                assert abs(original - restored) <= 5
