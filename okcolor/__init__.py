"""RGBA color manipulation in the Oklab perceptual color space.

Colors are built from hex text, blended, lightened, darkened or re-shaded in
Oklab, and written back out as hex. Results are always valid 8-bit colors:
anything that falls outside the sRGB gamut is mapped back in.

Example:
    import okcolor

    accent = okcolor.new("#123faa")
    hover = okcolor.lighten(accent, 0.2)
    print(hover)                                  # #4a7eeeff
    print(okcolor.mix("#ff0000", "#00ff00"))      # #f99500ff
"""

from .errors import ColorError, InvalidFormatError
from .color import Color
from .codec import parse, serialize
from .operations import (
    new,
    blend,
    mix,
    lighten,
    darken,
    shade,
    with_alpha,
)

__version__ = "0.1.0"

__all__ = [
    'Color',
    # Operations
    'new',
    'blend',
    'mix',
    'lighten',
    'darken',
    'shade',
    'with_alpha',
    # Codec
    'parse',
    'serialize',
    # Errors
    'ColorError',
    'InvalidFormatError',
]
