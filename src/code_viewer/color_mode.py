"""Color mode (brightness) of a code viewer."""

from enum import Enum, auto


class ColorMode(Enum):
    """Enumeration for color theme modes."""
    LIGHT = auto()
    DARK = auto()
