"""Hex text codec: '#RRGGBB[AA]' <-> Color.

Parsing normalizes each two-digit channel by 255. Serialization always emits
the 8-digit lowercase form, rounding half up, so that every parsed color
serializes back to the same grid point.
"""

from __future__ import annotations

import math
import string

from okcolor import defaults
from okcolor.color import Color
from okcolor.errors import InvalidFormatError

_HEX_CHARS = frozenset(string.hexdigits)


def parse(text: str) -> Color:
    """Parse '#RRGGBB' or '#RRGGBBAA' (case-insensitive) into a Color.

    Example:
        >>> parse("#ff8000").rgba
        (1.0, 0.5019607843137255, 0.0, 1.0)

    Raises:
        InvalidFormatError: If the text does not match the hex color grammar
    """
    if not isinstance(text, str):
        raise InvalidFormatError(text, "expected a string")
    if not text.startswith('#'):
        raise InvalidFormatError(text, "missing leading '#'")

    digits = text[1:]
    if len(digits) not in (defaults.HEX_DIGITS_RGB, defaults.HEX_DIGITS_RGBA):
        raise InvalidFormatError(
            text,
            f"expected {defaults.HEX_DIGITS_RGB} or {defaults.HEX_DIGITS_RGBA} hex digits, got {len(digits)}",
        )
    if not _HEX_CHARS.issuperset(digits):
        raise InvalidFormatError(text, "contains non-hex characters")

    levels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(levels) == 3:
        levels.append(defaults.CHANNEL_LEVELS)
    return Color.from_rgba8(*levels)


def _to_level(x: float) -> int:
    # Round half up, then clamp to the 8-bit range
    level = math.floor(x * defaults.CHANNEL_LEVELS + 0.5)
    return max(0, min(defaults.CHANNEL_LEVELS, level))


def to_rgba8(color: Color) -> tuple[int, int, int, int]:
    """Integer channel levels (0-255) of a color, as written by serialize()."""
    return (
        _to_level(color.r),
        _to_level(color.g),
        _to_level(color.b),
        _to_level(color.a),
    )


def serialize(color: Color) -> str:
    """Render a color as '#rrggbbaa' (lowercase, alpha always included)."""
    r, g, b, a = to_rgba8(color)
    return f"#{r:02x}{g:02x}{b:02x}{a:02x}"
