"""Theme data for code viewers."""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict

from syntax import TokenType

from code_viewer.code_style import CodeStyle


# Mapping from token type to the theme slot that styles it
_TOKEN_TYPE_SLOTS: Dict[TokenType, str] = {
    TokenType.TEXT: "base_style",
    TokenType.TYPE: "class_style",
    TokenType.COMMENT: "comment_style",
    TokenType.CONSTANT: "constant_style",
    TokenType.KEYWORD: "keyword_style",
    TokenType.NUMBER: "number_style",
    TokenType.PUNCTUATION: "punctuation_style",
    TokenType.STRING: "string_style",
}

STYLE_SLOTS = tuple(_TOKEN_TYPE_SLOTS.values())

# Attributes that may stay unset in a complete theme
_SIZE_ATTRIBUTES = ("height", "width")


@dataclass(frozen=True)
class CodeViewerThemeData:
    """
    Visual settings of a code viewer.

    Any attribute may be None, meaning the value comes from a fallback theme.  A theme
    with every style, color and button attribute set is complete and can be rendered
    directly.  A height or width of None lets the viewer take the space it is given.

    Attributes:
        base_style: Style for plain text
        class_style: Style for type and class names
        comment_style: Style for comments
        constant_style: Style for constant declarations
        keyword_style: Style for keywords and annotations
        number_style: Style for numeric literals
        punctuation_style: Style for punctuation and operators
        string_style: Style for string literals
        background_color: Background as a '#rrggbb' string
        copy_button_text: Label of the copy button
        show_copy_button: True to show the copy button
        height: Fixed viewer height in pixels
        width: Fixed viewer width in pixels
    """
    base_style: CodeStyle | None = None
    class_style: CodeStyle | None = None
    comment_style: CodeStyle | None = None
    constant_style: CodeStyle | None = None
    keyword_style: CodeStyle | None = None
    number_style: CodeStyle | None = None
    punctuation_style: CodeStyle | None = None
    string_style: CodeStyle | None = None
    background_color: str | None = None
    copy_button_text: str | None = None
    show_copy_button: bool | None = None
    height: int | None = None
    width: int | None = None

    @classmethod
    def from_colors(
        cls,
        text_style: CodeStyle | None = None,
        base_color: str | None = None,
        class_color: str | None = None,
        comment_color: str | None = None,
        constant_color: str | None = None,
        keyword_color: str | None = None,
        number_color: str | None = None,
        punctuation_color: str | None = None,
        string_color: str | None = None,
        background_color: str | None = None,
        copy_button_text: str | None = None,
        show_copy_button: bool | None = None,
        height: int | None = None,
        width: int | None = None
    ) -> "CodeViewerThemeData":
        """
        Create a theme from one text style and one color per token category.

        Args:
            text_style: Style shared by all categories, defaults to a plain style
            base_color: Color for plain text
            class_color: Color for type names
            comment_color: Color for comments
            constant_color: Color for constants
            keyword_color: Color for keywords
            number_color: Color for numbers
            punctuation_color: Color for punctuation
            string_color: Color for strings
            background_color: Background color
            copy_button_text: Label of the copy button
            show_copy_button: True to show the copy button
            height: Fixed viewer height in pixels
            width: Fixed viewer width in pixels

        Returns:
            The new theme.  Slots whose color is None are left unset.
        """
        style = text_style or CodeStyle()

        def with_color(color: str | None) -> CodeStyle | None:
            return None if color is None else style.copy_with(color=color)

        return cls(
            base_style=with_color(base_color),
            class_style=with_color(class_color),
            comment_style=with_color(comment_color),
            constant_style=with_color(constant_color),
            keyword_style=with_color(keyword_color),
            number_style=with_color(number_color),
            punctuation_style=with_color(punctuation_color),
            string_style=with_color(string_color),
            background_color=background_color,
            copy_button_text=copy_button_text,
            show_copy_button=show_copy_button,
            height=height,
            width=width
        )

    def copy_with(self, **changes: Any) -> "CodeViewerThemeData":
        """
        Create a copy of this theme with some attributes replaced.

        Args:
            **changes: Attribute values to replace

        Returns:
            The new theme
        """
        return replace(self, **changes)

    def merge(self, fallback: "CodeViewerThemeData | None") -> "CodeViewerThemeData":
        """
        Fill unset attributes of this theme from another theme.

        Args:
            fallback: Theme supplying values for attributes that are None here

        Returns:
            The merged theme
        """
        if fallback is None:
            return self

        changes = {
            f.name: getattr(fallback, f.name)
            for f in fields(self)
            if getattr(self, f.name) is None
        }
        return replace(self, **changes)

    def style_for(self, token_type: TokenType) -> CodeStyle | None:
        """
        Get the style for a token type.

        Args:
            token_type: The TokenType to look up

        Returns:
            The style of the matching slot, or None if the slot is unset
        """
        return getattr(self, _TOKEN_TYPE_SLOTS[token_type])

    def is_complete(self) -> bool:
        """Check if every attribute other than the size is set."""
        return all(
            getattr(self, f.name) is not None
            for f in fields(self)
            if f.name not in _SIZE_ATTRIBUTES
        )
