"""Tests for gamut checking and mapping."""

import numpy as np
import pytest

from okcolor.colorspace import (
    is_in_gamut,
    saturate_lightness,
    gamut_clip,
    chroma_scale_in_gamut,
    gamut_compress,
    gamut_map_to_srgb,
    oklab_to_oklch,
    oklch_to_oklab,
    srgb_to_oklab,
)


class TestGamutCheck:
    """Test gamut membership."""

    def test_in_gamut_grays(self):
        """Neutral grays should always be in gamut."""
        L = np.linspace(0, 1, 11)
        zeros = np.zeros(11)

        assert is_in_gamut(L, zeros, zeros).all()

    def test_out_of_gamut_high_chroma(self):
        """Very high chroma should be out of gamut."""
        assert not is_in_gamut(0.5, 0.4, 0.0)

    def test_srgb_colors_in_gamut(self):
        """Anything converted from sRGB is in gamut."""
        rng = np.random.default_rng(7)
        L, a, b = srgb_to_oklab(rng.random((50, 3)))
        assert is_in_gamut(L, a, b).all()

    def test_tolerance(self):
        """Tolerance widens the accepted range."""
        # Slightly brighter than white
        assert not is_in_gamut(1.001, 0.0, 0.0)
        assert is_in_gamut(1.001, 0.0, 0.0, tolerance=0.01)


class TestSaturateLightness:
    """Test lightness saturation past black and white."""

    def test_above_white(self):
        L, a, b = saturate_lightness(1.5, 0.1, -0.1)
        assert (L, a, b) == (1.0, 0.0, 0.0)

    def test_below_black(self):
        L, a, b = saturate_lightness(-0.2, 0.1, -0.1)
        assert (L, a, b) == (0.0, 0.0, 0.0)

    def test_in_range_untouched(self):
        L, a, b = saturate_lightness(np.array([0.3, 0.9]), np.array([0.1, 0.2]), np.array([-0.1, 0.0]))
        np.testing.assert_array_equal(L, [0.3, 0.9])
        np.testing.assert_array_equal(a, [0.1, 0.2])
        np.testing.assert_array_equal(b, [-0.1, 0.0])


class TestChromaScale:
    """Test the bisection toward the neutral axis."""

    def test_in_gamut_is_noop(self):
        """In-gamut colors keep their full chroma."""
        L, a, b = srgb_to_oklab(np.array([0.2, 0.5, 0.7]))
        assert chroma_scale_in_gamut(L, a, b) == 1.0

    def test_result_on_boundary(self):
        """Scaled color is in gamut; a little more chroma is not."""
        L, a, b = 0.7, 0.4, 0.0

        t = float(chroma_scale_in_gamut(L, a, b))

        assert 0.0 < t < 1.0
        assert is_in_gamut(L, t * a, t * b)
        assert not is_in_gamut(L, (t + 1e-3) * a, (t + 1e-3) * b)

    def test_more_steps_more_precision(self):
        coarse = float(chroma_scale_in_gamut(0.7, 0.4, 0.0, steps=4))
        fine = float(chroma_scale_in_gamut(0.7, 0.4, 0.0, steps=30))
        assert coarse <= fine
        assert fine - coarse < 2 ** -4

    def test_vectorized(self):
        L = np.array([0.5, 0.7, 0.9])
        a = np.array([0.05, 0.4, 0.3])
        b = np.array([0.0, 0.0, -0.3])

        t = chroma_scale_in_gamut(L, a, b)

        assert t.shape == (3,)
        assert t[0] == 1.0
        assert (t[1:] < 1.0).all()


class TestGamutCompress:
    """Test chroma-reducing gamut compression."""

    def test_preserves_lightness_and_hue(self):
        """Compression should keep L and H and reduce C."""
        L, a, b = oklch_to_oklab(np.array([0.7]), np.array([0.4]), np.array([30.0]))

        L2, a2, b2 = gamut_compress(L, a, b)

        _, C, H = oklab_to_oklch(L, a, b)
        _, C2, H2 = oklab_to_oklch(L2, a2, b2)
        np.testing.assert_allclose(L2, L, atol=1e-12)
        np.testing.assert_allclose(H2, H, atol=1e-9)
        assert C2[0] < C[0]
        assert is_in_gamut(L2, a2, b2).all()

    def test_lightness_past_white_becomes_white(self):
        L, a, b = gamut_compress(1.3, 0.1, 0.1)
        assert (float(L), float(a), float(b)) == (1.0, 0.0, 0.0)


class TestGamutMapMethods:
    """Test gamut_map_to_srgb with different methods."""

    @pytest.mark.parametrize("method", ["clip", "compress"])
    def test_output_in_unit_range(self, method):
        L = np.array([0.5, 0.9, 0.1, 1.2, -0.3])
        a = np.array([0.4, -0.3, 0.3, 0.1, 0.1])
        b = np.array([0.0, 0.2, -0.3, 0.1, 0.1])

        rgb = gamut_map_to_srgb(L, a, b, method=method)

        assert rgb.shape == (5, 3)
        assert (rgb >= 0).all()
        assert (rgb <= 1).all()

    def test_clip_matches_gamut_clip(self):
        np.testing.assert_array_equal(
            gamut_map_to_srgb(0.7, 0.4, 0.0, method='clip'),
            gamut_clip(0.7, 0.4, 0.0),
        )

    def test_compress_keeps_lightness(self):
        """Converting the compressed RGB back gives the requested L."""
        rgb = gamut_map_to_srgb(0.7, 0.4, 0.0, method='compress')
        L2, _, _ = srgb_to_oklab(rgb)
        np.testing.assert_allclose(L2, 0.7, atol=1e-5)

    def test_clip_shifts_lightness(self):
        """Hard clipping does not preserve L for strongly out-of-gamut input."""
        rgb = gamut_map_to_srgb(0.7, 0.4, 0.0, method='clip')
        L2, _, _ = srgb_to_oklab(rgb)
        assert abs(float(L2) - 0.7) > 1e-3

    @pytest.mark.parametrize("method", ["clip", "compress"])
    def test_in_gamut_unchanged(self, method):
        L, a, b = srgb_to_oklab(np.array([0.2, 0.4, 0.6]))
        rgb = gamut_map_to_srgb(L, a, b, method=method)
        np.testing.assert_allclose(rgb, [0.2, 0.4, 0.6], atol=1e-5)

    def test_invalid_method(self):
        """Invalid method should raise ValueError."""
        with pytest.raises(ValueError, match="Unknown"):
            gamut_map_to_srgb(0.5, 0.1, 0.0, method='invalid')
