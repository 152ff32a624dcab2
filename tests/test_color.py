"""Tests for the Color value type and its Oklab bridge."""

import dataclasses

import numpy as np
import pytest

import okcolor
from okcolor import Color
from okcolor.color import OklabCoord, as_color, color_to_oklab, oklab_to_color


class TestColorValue:
    """Test construction and immutability."""

    def test_channels_clamped(self):
        color = Color(1.2, -0.1, 0.5, 2.0)
        assert color.rgba == (1.0, 0.0, 0.5, 1.0)

    def test_default_alpha(self):
        assert Color(0.1, 0.2, 0.3).a == 1.0

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_rejected(self, bad):
        with pytest.raises(ValueError, match="finite"):
            Color(0.5, bad, 0.5)

    def test_frozen(self):
        color = Color(0.1, 0.2, 0.3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.r = 0.5

    def test_str_is_hex(self):
        assert str(Color(1.0, 0.0, 0.0)) == "#ff0000ff"

    def test_from_hex_and_rgba8(self):
        color = Color.from_hex("#10203040")
        assert color == Color.from_rgba8(16, 32, 48, 64)
        assert color.to_rgba8() == (16, 32, 48, 64)
        assert color.to_hex() == "#10203040"

    def test_hashable(self):
        assert len({Color.from_hex("#abcdef"), okcolor.new("#ABCDEF")}) == 1


class TestCoercion:
    """Test the Color-or-text boundary conversion."""

    def test_color_passes_through(self):
        color = Color(0.1, 0.2, 0.3)
        assert as_color(color) is color

    def test_text_is_parsed(self):
        assert as_color("#ff0000") == Color(1.0, 0.0, 0.0)

    def test_other_types_rejected(self):
        with pytest.raises(TypeError, match="Color or hex string"):
            as_color((1.0, 0.0, 0.0))


class TestOklabBridge:
    """Test Color <-> OklabCoord conversion."""

    def test_roundtrip(self, in_gamut_color):
        back = oklab_to_color(color_to_oklab(in_gamut_color))
        np.testing.assert_allclose(back.rgba, in_gamut_color.rgba, atol=1e-5)
        assert back.to_hex() == in_gamut_color.to_hex()

    def test_roundtrip_palette(self, palette):
        for color in palette:
            back = oklab_to_color(color_to_oklab(color))
            assert back.to_hex() == color.to_hex()

    def test_alpha_carried(self):
        coord = color_to_oklab(Color.from_hex("#12345680"))
        assert coord.alpha == 128 / 255
        assert oklab_to_color(coord).a == 128 / 255

    def test_gray_has_no_chroma(self):
        coord = color_to_oklab(Color.from_hex("#808080"))
        assert abs(coord.a) < 1e-6
        assert abs(coord.b) < 1e-6

    def test_out_of_gamut_is_mapped(self):
        coord = OklabCoord(0.7, 0.4, 0.0)
        for method in ("clip", "compress"):
            color = oklab_to_color(coord, gamut=method)
            assert all(0.0 <= c <= 1.0 for c in color.rgba)

    def test_unknown_gamut_method(self):
        with pytest.raises(ValueError, match="Unknown gamut method"):
            oklab_to_color(OklabCoord(0.5, 0.0, 0.0), gamut="nearest")
