"""
Built-in code viewer color tables.

Each preset is pure data: one color per token category plus a background color.  The
brightness-aware defaults used when no theme sets a value live here too.
"""

from enum import Enum, auto
from typing import Dict, List

from code_viewer.code_style import CodeStyle
from code_viewer.code_viewer_error import UnknownPresetError
from code_viewer.code_viewer_theme import CodeViewerThemeData
from code_viewer.color_mode import ColorMode


class CodeViewerPreset(Enum):
    """Enumeration of the built-in color presets."""
    LIGHT = auto()
    LIGHT_ALT = auto()
    DARK = auto()
    DARK_ALT = auto()
    DESIGN_DARK = auto()
    IO17 = auto()
    IO19 = auto()
    FLUTTER_INTERACT_19 = auto()


_PRESET_COLORS: Dict[CodeViewerPreset, Dict[str, str]] = {
    # Common highlighter for light mode
    CodeViewerPreset.LIGHT: {
        "base": "#37474f",
        "class": "#9c27b0",
        "comment": "#d81b60",
        "constant": "#3f51b5",
        "keyword": "#3f51b5",
        "number": "#d32f2f",
        "punctuation": "#37474f",
        "string": "#388e3c",
        "background": "#f5f5f5"
    },
    CodeViewerPreset.LIGHT_ALT: {
        "base": "#000000",
        "class": "#673ab7",
        "comment": "#999999",
        "constant": "#e67c73",
        "keyword": "#4285f4",
        "number": "#db4437",
        "punctuation": "#a3a3a3",
        "string": "#0f9d58",
        "background": "#eeeeee"
    },
    # Common highlighter for dark mode
    CodeViewerPreset.DARK: {
        "base": "#eceff1",
        "class": "#ce93d8",
        "comment": "#f06292",
        "constant": "#fbc02d",
        "keyword": "#4dd0e1",
        "number": "#fbc02d",
        "punctuation": "#eceff1",
        "string": "#9ccc65",
        "background": "#212121"
    },
    CodeViewerPreset.DARK_ALT: {
        "base": "#ffffff",
        "class": "#ff8a65",
        "comment": "#aaaaaa",
        "constant": "#e67c73",
        "keyword": "#7baaf7",
        "number": "#f4b400",
        "punctuation": "#a3a3a3",
        "string": "#57bb8a",
        "background": "#000000"
    },
    CodeViewerPreset.DESIGN_DARK: {
        "base": "#ffffff",
        "class": "#ff8a80",
        "comment": "#607d8b",
        "constant": "#90a4ae",
        "keyword": "#26c6da",
        "number": "#ffbc00",
        "punctuation": "#90a4ae",
        "string": "#00bfa4",
        "background": "#263238"
    },
    # Google I/O 2017
    CodeViewerPreset.IO17: {
        "base": "#ffffff",
        "class": "#ff8857",
        "comment": "#ff5cb4",
        "constant": "#90a4ae",
        "keyword": "#00e4ff",
        "number": "#ffd500",
        "punctuation": "#90a4ae",
        "string": "#1ce8b5",
        "background": "#263238"
    },
    # Google I/O 2019
    CodeViewerPreset.IO19: {
        "base": "#ffffff",
        "class": "#ee675c",
        "comment": "#9aa0a6",
        "constant": "#fcc934",
        "keyword": "#669df6",
        "number": "#fcc934",
        "punctuation": "#9aa0a6",
        "string": "#5bb974",
        "background": "#202124"
    },
    # Flutter Interact 2019
    CodeViewerPreset.FLUTTER_INTERACT_19: {
        "base": "#fafbfb",
        "class": "#d65bad",
        "comment": "#808080",
        "constant": "#ff8383",
        "keyword": "#1cdec9",
        "number": "#bd93f9",
        "punctuation": "#8be9fd",
        "string": "#ffa65c",
        "background": "#241e30"
    },
}

_DEFAULT_COLORS: Dict[ColorMode, Dict[str, str]] = {
    ColorMode.LIGHT: dict(_PRESET_COLORS[CodeViewerPreset.LIGHT], background="#ffffff"),
    ColorMode.DARK: dict(_PRESET_COLORS[CodeViewerPreset.DARK], background="#121212")
}

DEFAULT_COPY_BUTTON_TEXT = "COPY ALL"


def _theme_from_table(colors: Dict[str, str], text_style: CodeStyle | None = None) -> CodeViewerThemeData:
    return CodeViewerThemeData.from_colors(
        text_style=text_style,
        base_color=colors["base"],
        class_color=colors["class"],
        comment_color=colors["comment"],
        constant_color=colors["constant"],
        keyword_color=colors["keyword"],
        number_color=colors["number"],
        punctuation_color=colors["punctuation"],
        string_color=colors["string"],
        background_color=colors["background"]
    )


def preset_theme(preset: CodeViewerPreset, text_style: CodeStyle | None = None) -> CodeViewerThemeData:
    """
    Get the theme for a built-in preset.

    Args:
        preset: The preset to use
        text_style: Optional style shared by all token categories

    Returns:
        A theme with all style slots and the background set
    """
    return _theme_from_table(_PRESET_COLORS[preset], text_style)


def preset_from_name(name: str) -> CodeViewerPreset:
    """
    Look up a preset by name.

    Names are case-insensitive and may use '-' in place of '_', so 'design-dark' and
    'DESIGN_DARK' both name the same preset.

    Args:
        name: The preset name

    Returns:
        The matching preset

    Raises:
        UnknownPresetError: If no preset has that name
    """
    key = name.strip().upper().replace('-', '_')
    try:
        return CodeViewerPreset[key]

    except KeyError as e:
        raise UnknownPresetError(f"Unknown preset: '{name}'") from e


def preset_names() -> List[str]:
    """Get the names of all presets in command line form."""
    return [preset.name.lower().replace('_', '-') for preset in CodeViewerPreset]


def default_theme(color_mode: ColorMode) -> CodeViewerThemeData:
    """
    Get the complete built-in theme for a color mode.

    Args:
        color_mode: Light or dark

    Returns:
        The default theme for that brightness
    """
    return _theme_from_table(_DEFAULT_COLORS[color_mode]).copy_with(
        copy_button_text=DEFAULT_COPY_BUTTON_TEXT,
        show_copy_button=True
    )
