"""Text style applied to one category of code tokens."""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class CodeStyle:
    """
    Text style for a token category.

    Attributes:
        color: Foreground color as a '#rrggbb' string, or None to inherit
        bold: True for a bold font weight
        italic: True for an italic font
        font_size: Point size, or None to use the viewer's base font size
    """
    color: str | None = None
    bold: bool = False
    italic: bool = False
    font_size: float | None = None

    def copy_with(self, **changes: Any) -> "CodeStyle":
        """
        Create a copy of this style with some attributes replaced.

        Args:
            **changes: Attribute values to replace

        Returns:
            The new style
        """
        return replace(self, **changes)
