"""Color value type and its bridge to Oklab."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from okcolor import defaults
from okcolor.colorspace import (
    GamutMethod,
    gamut_map_to_srgb,
    is_in_gamut,
    linear_rgb_to_oklab,
    srgb_to_linear,
)

logger = logging.getLogger(__name__)


def _clamp01(x: float) -> float:
    x = float(x)
    if not math.isfinite(x):
        raise ValueError(f"Channel value must be finite, got {x!r}")
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else x


@dataclass(frozen=True)
class Color:
    """An RGBA color with normalized channels.

    Attributes:
        r, g, b: sRGB-encoded (gamma-applied) channels in [0, 1]
        a: Alpha in [0, 1], linear

    Channels are clamped to [0, 1] on construction. Instances are immutable;
    every operation returns a new Color.
    """
    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self):
        for name in ('r', 'g', 'b', 'a'):
            object.__setattr__(self, name, _clamp01(getattr(self, name)))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse '#RRGGBB' or '#RRGGBBAA'."""
        from okcolor.codec import parse
        return parse(text)

    @classmethod
    def from_rgba8(cls, r: int, g: int, b: int, a: int = 255) -> Color:
        """Build a color from 8-bit channel levels (0-255)."""
        scale = defaults.CHANNEL_LEVELS
        return cls(r / scale, g / scale, b / scale, a / scale)

    @property
    def rgba(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_hex(self) -> str:
        from okcolor.codec import serialize
        return serialize(self)

    def to_rgba8(self) -> tuple[int, int, int, int]:
        from okcolor.codec import to_rgba8
        return to_rgba8(self)

    def __str__(self) -> str:
        return self.to_hex()

    # Method forms of the operations in okcolor.operations

    def blend(self, other: Color | str, t: float, **kwargs) -> Color:
        from okcolor import operations
        return operations.blend(self, other, t, **kwargs)

    def mix(self, other: Color | str, **kwargs) -> Color:
        from okcolor import operations
        return operations.mix(self, other, **kwargs)

    def lighten(self, amount: float, **kwargs) -> Color:
        from okcolor import operations
        return operations.lighten(self, amount, **kwargs)

    def darken(self, amount: float, **kwargs) -> Color:
        from okcolor import operations
        return operations.darken(self, amount, **kwargs)

    def shade(self, lightness: float, **kwargs) -> Color:
        from okcolor import operations
        return operations.shade(self, lightness, **kwargs)

    def with_alpha(self, alpha: float) -> Color:
        from okcolor import operations
        return operations.with_alpha(self, alpha)


@dataclass(frozen=True)
class OklabCoord:
    """A color in Oklab coordinates, alpha carried alongside.

    L may leave [0, 1] transiently while an operation is in progress;
    oklab_to_color() brings it back.
    """
    L: float
    a: float
    b: float
    alpha: float = field(default=1.0)


def as_color(value: Color | str) -> Color:
    """Coerce a Color or hex text to a Color at an API boundary."""
    if isinstance(value, Color):
        return value
    if isinstance(value, str):
        from okcolor.codec import parse
        return parse(value)
    raise TypeError(f"Expected Color or hex string, got {type(value).__name__}")


def color_to_oklab(color: Color) -> OklabCoord:
    """Color -> Oklab (alpha passed through)."""
    r, g, b = (srgb_to_linear(c) for c in (color.r, color.g, color.b))
    L, a, b = linear_rgb_to_oklab(r, g, b)
    return OklabCoord(float(L), float(a), float(b), color.a)


def oklab_to_color(
    coord: OklabCoord,
    gamut: GamutMethod = defaults.DEFAULT_GAMUT_METHOD,
) -> Color:
    """Oklab -> Color, mapping out-of-gamut values back into sRGB."""
    if logger.isEnabledFor(logging.DEBUG) and not is_in_gamut(coord.L, coord.a, coord.b):
        logger.debug(
            "Out-of-gamut Oklab(%.4f, %.4f, %.4f) mapped with method=%s",
            coord.L, coord.a, coord.b, gamut,
        )
    r, g, b = gamut_map_to_srgb(coord.L, coord.a, coord.b, method=gamut)
    return Color(r, g, b, coord.alpha)
