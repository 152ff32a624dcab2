"""Color parsing errors."""


class ColorError(Exception):
    """Base class for okcolor errors."""
    pass


class InvalidFormatError(ColorError, ValueError):
    """Text is not a '#RRGGBB' or '#RRGGBBAA' hex color."""

    def __init__(self, text: object, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid color {text!r}: {reason}")
