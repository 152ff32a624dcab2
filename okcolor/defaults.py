"""Central place for okcolor default settings."""

# Hex codec
CHANNEL_LEVELS: int = 255  # 8 bits per channel
HEX_DIGITS_RGB: int = 6
HEX_DIGITS_RGBA: int = 8

# Gamut mapping
DEFAULT_GAMUT_METHOD: str = "clip"  # 'clip' (hard RGB clamp) or 'compress' (chroma bisection)
GAMUT_BISECTION_STEPS: int = 20  # 2**-20 resolution on the chroma scale
GAMUT_TOLERANCE: float = 1e-6  # Slack on [0, 1] in linear RGB

# Blending
DEFAULT_BLEND_SPACE: str = "oklch"  # 'oklch' (polar, shorter hue arc) or 'oklab'
ACHROMATIC_CHROMA: float = 1e-7  # Below this chroma the hue angle is meaningless

# CLI
SWATCH_WIDTH: int = 8  # Characters of background color per swatch
