"""Test configuration for okcolor."""

import pytest

from okcolor import Color, parse


# Colors whose Oklab round trip and small lightness shifts stay in gamut
IN_GAMUT_HEXES = (
    "#123faa",
    "#3366cc",
    "#808080",
    "#cb9174",
    "#ab38a3",
    "#2e8b57",
)


@pytest.fixture(params=IN_GAMUT_HEXES)
def in_gamut_color(request) -> Color:
    """Each of a handful of ordinary, comfortably in-gamut colors."""
    return parse(request.param)


@pytest.fixture
def palette() -> list[Color]:
    """Mixed bag including the gamut corners, black, white and translucency."""
    return [parse(text) for text in (
        "#000000", "#ffffff", "#ff0000", "#00ff00", "#0000ff",
        "#ffff00", "#00ffff", "#ff00ff", "#12345680", "#abcdef00",
    )]
