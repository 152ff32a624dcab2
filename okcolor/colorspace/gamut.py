"""Gamut mapping for out-of-gamut Oklab values.

Not every (L, a, b) triple is a displayable sRGB color. High chroma at
extreme lightness is particularly problematic.

Strategies:
- clip: Hard-clip RGB to [0,1]: fast but can shift hue/lightness
- compress: Pull a and b toward the neutral axis until in gamut, keeping L and hue
"""

from typing import Literal

import numpy as np

from okcolor import defaults
from .oklab import Array, oklab_to_linear_rgb, oklab_to_srgb

GamutMethod = Literal['clip', 'compress']


# === Gamut checking ===

def is_in_gamut(
    L: Array,
    a: Array,
    b: Array,
    tolerance: float = defaults.GAMUT_TOLERANCE,
) -> np.ndarray:
    """Check if Oklab values produce valid sRGB (all channels in [0,1]).

    The test runs in linear RGB; the transfer curve maps [0,1] onto itself
    monotonically, so the result is the same as testing encoded sRGB.
    """
    rgb = np.stack(oklab_to_linear_rgb(L, a, b), axis=-1)
    in_range = (rgb >= -tolerance) & (rgb <= 1 + tolerance)
    return np.all(in_range, axis=-1)


# === Gamut mapping methods ===

def saturate_lightness(
    L: Array,
    a: Array,
    b: Array,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Clamp L to [0, 1], dropping chroma wherever L was outside.

    Past either end not even gray is representable, so such colors
    saturate to pure black or white.
    """
    L = np.asarray(L, dtype=np.float64)
    outside = (L < 0.0) | (L > 1.0)
    a = np.where(outside, 0.0, a)
    b = np.where(outside, 0.0, b)
    return np.clip(L, 0.0, 1.0), a, b


def gamut_clip(L: Array, a: Array, b: Array) -> np.ndarray:
    """Convert to sRGB and hard-clip to [0,1].

    Fast but may distort colors (hue shifts, flattened gradients).

    Returns:
        RGB array (..., 3) with values clamped to [0,1]
    """
    rgb = oklab_to_srgb(*saturate_lightness(L, a, b))
    return np.clip(rgb, 0.0, 1.0)


def chroma_scale_in_gamut(
    L: Array,
    a: Array,
    b: Array,
    steps: int = defaults.GAMUT_BISECTION_STEPS,
    tolerance: float = defaults.GAMUT_TOLERANCE,
) -> np.ndarray:
    """Largest t in [0, 1] such that (L, t*a, t*b) is in gamut, via bisection.

    The neutral point (L, 0, 0) is taken as the in-gamut anchor, which holds
    for L in [0, 1]. Values already in gamut get t = 1.
    """
    L = np.asarray(L, dtype=np.float64)
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    inside = is_in_gamut(L, a, b, tolerance)
    lo = np.zeros(np.broadcast(L, a, b).shape)
    hi = np.ones_like(lo)

    for _ in range(steps):
        mid = (lo + hi) / 2
        valid = is_in_gamut(L, mid * a, mid * b, tolerance)
        lo = np.where(valid, mid, lo)
        hi = np.where(valid, hi, mid)

    return np.where(inside, 1.0, lo)


def gamut_compress(
    L: Array,
    a: Array,
    b: Array,
    steps: int = defaults.GAMUT_BISECTION_STEPS,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Bring out-of-gamut colors into sRGB gamut by reducing chroma.

    Lightness is saturated to [0, 1] first (see saturate_lightness).

    Returns:
        (L, a, b) tuple with adjusted values
    """
    L, a, b = saturate_lightness(L, a, b)
    t = chroma_scale_in_gamut(L, a, b, steps=steps)
    return L, t * a, t * b


def gamut_map_to_srgb(
    L: Array,
    a: Array,
    b: Array,
    method: GamutMethod = defaults.DEFAULT_GAMUT_METHOD,
) -> np.ndarray:
    """Map Oklab to sRGB with gamut handling.

    This is the main entry point for Oklab -> sRGB conversion with gamut safety.

    Args:
        L: Lightness (0-1)
        a, b: Opponent color axes
        method: 'clip' for fast RGB clipping, 'compress' for chroma reduction

    Returns:
        RGB array (..., 3) with values in [0, 1]
    """
    if method == 'clip':
        return gamut_clip(L, a, b)

    elif method == 'compress':
        L_safe, a_safe, b_safe = gamut_compress(L, a, b)
        rgb = oklab_to_srgb(L_safe, a_safe, b_safe)
        # Final clip for numerical safety
        return np.clip(rgb, 0.0, 1.0)

    raise ValueError(f"Unknown gamut method: {method}")
