"""Oklab color space conversions and gamut mapping.

This module provides:
- sRGB transfer curve (gamma encode/decode)
- Linear sRGB <-> Oklab <-> OKLCH conversions
- Gamut mapping (clip or chroma compression)
- Works element-wise on Python floats or numpy arrays

Example:
    import numpy as np
    from okcolor.colorspace import srgb_to_oklab, gamut_map_to_srgb

    L, a, b = srgb_to_oklab(np.array([1.0, 0.0, 0.0]))
    rgb = gamut_map_to_srgb(L + 0.2, a, b, method='compress')
"""

from .oklab import (
    srgb_to_linear,
    linear_to_srgb,
    linear_rgb_to_oklab,
    oklab_to_linear_rgb,
    oklab_to_oklch,
    oklch_to_oklab,
    srgb_to_oklab,
    oklab_to_srgb,
)

from .gamut import (
    GamutMethod,
    is_in_gamut,
    saturate_lightness,
    gamut_clip,
    chroma_scale_in_gamut,
    gamut_compress,
    gamut_map_to_srgb,
)

__all__ = [
    # Transfer function
    'srgb_to_linear',
    'linear_to_srgb',
    # Oklab conversions
    'linear_rgb_to_oklab',
    'oklab_to_linear_rgb',
    'oklab_to_oklch',
    'oklch_to_oklab',
    'srgb_to_oklab',
    'oklab_to_srgb',
    # Gamut mapping
    'GamutMethod',
    'is_in_gamut',
    'saturate_lightness',
    'gamut_clip',
    'chroma_scale_in_gamut',
    'gamut_compress',
    'gamut_map_to_srgb',
]
