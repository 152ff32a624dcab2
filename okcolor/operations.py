"""Color operations in Oklab space.

Every function takes Colors or hex strings, converts them once at the
boundary, works on Oklab coordinates and returns a new gamut-mapped Color.

Example:
    from okcolor import operations as ops

    ops.blend("#ff0000", "#00ff00", 0.3).to_hex()   # '#ff6300ff'
    ops.lighten("#123faa", 0.2).to_hex()            # '#4a7eeeff'
"""

from __future__ import annotations

from dataclasses import replace
from typing import Literal

from okcolor import defaults
from okcolor.color import Color, OklabCoord, as_color, color_to_oklab, oklab_to_color
from okcolor.colorspace import GamutMethod, oklab_to_oklch, oklch_to_oklab

BlendSpace = Literal['oklch', 'oklab']


def new(text: Color | str) -> Color:
    """Create a color from '#RRGGBB' or '#RRGGBBAA' text.

    Raises:
        InvalidFormatError: If the text is malformed
    """
    return as_color(text)


def _lerp(x0: float, x1: float, t: float) -> float:
    # Exact at both endpoints; symmetric in x0 and x1 at t=0.5
    return (1 - t) * x0 + t * x1


def _unwrap_hues(h0: float, h1: float) -> tuple[float, float]:
    """Hues in degrees, shifted so that h0 -> h1 runs along the shorter arc.

    The larger hue is moved down by 360 when the two are more than half a
    turn apart, so swapping the arguments yields the same pair swapped.
    Exactly opposite hues are left alone: the path then runs upward from the
    smaller angle whichever endpoint comes first.
    """
    if abs(h1 - h0) > 180:
        if h0 > h1:
            h0 -= 360
        else:
            h1 -= 360
    return h0, h1


def _blend_oklch(p: OklabCoord, q: OklabCoord, t: float) -> tuple[float, float, float]:
    _, c0, h0 = (float(v) for v in oklab_to_oklch(p.L, p.a, p.b))
    _, c1, h1 = (float(v) for v in oklab_to_oklch(q.L, q.a, q.b))

    # A gray has no hue of its own; borrow the other endpoint's
    if c0 < defaults.ACHROMATIC_CHROMA:
        h0 = h1
    if c1 < defaults.ACHROMATIC_CHROMA:
        h1 = h0

    L = _lerp(p.L, q.L, t)
    C = _lerp(c0, c1, t)
    h0, h1 = _unwrap_hues(h0, h1)
    H = _lerp(h0, h1, t) % 360
    L, a, b = oklch_to_oklab(L, C, H)
    return float(L), float(a), float(b)


def blend(
    c1: Color | str,
    c2: Color | str,
    t: float,
    *,
    space: BlendSpace = defaults.DEFAULT_BLEND_SPACE,
    gamut: GamutMethod = defaults.DEFAULT_GAMUT_METHOD,
) -> Color:
    """Interpolate from c1 (t=0) to c2 (t=1) in Oklab space.

    Alpha is interpolated linearly alongside. t outside [0, 1] extrapolates.

    Args:
        c1, c2: Colors or hex strings
        t: Interpolation factor
        space: 'oklch' interpolates lightness, chroma and hue (shorter arc);
               'oklab' interpolates L, a and b independently
        gamut: Gamut mapping method for the result

    Raises:
        InvalidFormatError: If c1 or c2 is malformed hex text
        ValueError: If space or gamut is unknown
    """
    p = color_to_oklab(as_color(c1))
    q = color_to_oklab(as_color(c2))
    t = float(t)

    if space == 'oklch':
        L, a, b = _blend_oklch(p, q, t)
    elif space == 'oklab':
        L, a, b = _lerp(p.L, q.L, t), _lerp(p.a, q.a, t), _lerp(p.b, q.b, t)
    else:
        raise ValueError(f"Unknown blend space: {space}")

    alpha = _lerp(p.alpha, q.alpha, t)
    return oklab_to_color(OklabCoord(L, a, b, alpha), gamut=gamut)


def mix(
    c1: Color | str,
    c2: Color | str,
    *,
    space: BlendSpace = defaults.DEFAULT_BLEND_SPACE,
    gamut: GamutMethod = defaults.DEFAULT_GAMUT_METHOD,
) -> Color:
    """Halfway blend of two colors."""
    return blend(c1, c2, 0.5, space=space, gamut=gamut)


def lighten(
    color: Color | str,
    amount: float,
    *,
    gamut: GamutMethod = defaults.DEFAULT_GAMUT_METHOD,
) -> Color:
    """Shift Oklab lightness by +amount (intended range [-1, 1], not enforced)."""
    coord = color_to_oklab(as_color(color))
    return oklab_to_color(replace(coord, L=coord.L + float(amount)), gamut=gamut)


def darken(
    color: Color | str,
    amount: float,
    *,
    gamut: GamutMethod = defaults.DEFAULT_GAMUT_METHOD,
) -> Color:
    """Shift Oklab lightness by -amount."""
    return lighten(color, -float(amount), gamut=gamut)


def shade(
    color: Color | str,
    lightness: float,
    *,
    gamut: GamutMethod = defaults.DEFAULT_GAMUT_METHOD,
) -> Color:
    """Set Oklab lightness to an absolute value, keeping a and b."""
    coord = color_to_oklab(as_color(color))
    return oklab_to_color(replace(coord, L=float(lightness)), gamut=gamut)


def with_alpha(color: Color | str, alpha: float) -> Color:
    """Replace alpha (clamped to [0, 1]); RGB is left untouched."""
    return replace(as_color(color), a=alpha)
