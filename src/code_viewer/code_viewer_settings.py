"""Code viewer settings module for storing viewer configuration."""

from dataclasses import dataclass, field
import json
from typing import Any, Dict, Tuple

from code_viewer.code_viewer_error import CodeViewerSettingsError, UnknownPresetError
from code_viewer.code_viewer_presets import CodeViewerPreset, preset_from_name, preset_theme
from code_viewer.code_viewer_theme import CodeViewerThemeData
from code_viewer.color_mode import ColorMode


# Names of the per-category color overrides accepted in a settings file
COLOR_KEYS = ("base", "class", "comment", "constant", "keyword", "number", "punctuation", "string", "background")


def _get_typed(data: Dict[str, Any], key: str, expected: type | Tuple[type, ...]) -> Any:
    """
    Get an optional setting, checking its JSON type.

    Raises:
        CodeViewerSettingsError: If the value is present but of the wrong type
    """
    value = data.get(key)
    if value is None:
        return None

    # JSON booleans are ints in Python so only accept them where a bool is expected
    if not isinstance(value, expected) or (isinstance(value, bool) and expected is not bool):
        raise CodeViewerSettingsError(f"Setting '{key}' has the wrong type")

    return value


@dataclass
class CodeViewerSettings:
    """
    Code viewer settings.

    Attributes:
        preset: Preset used as the ambient theme, or None for the built-in defaults
        color_mode: Brightness used for the built-in defaults
        colors: Per-category color overrides, keyed by the names in COLOR_KEYS
        copy_button_text: Copy button label override
        show_copy_button: Copy button visibility override
        height: Fixed viewer height in pixels
        width: Fixed viewer width in pixels
        font_size: Font size in points, or None for the system default
    """
    preset: CodeViewerPreset | None = None
    color_mode: ColorMode = ColorMode.DARK
    colors: Dict[str, str] = field(default_factory=dict)
    copy_button_text: str | None = None
    show_copy_button: bool | None = None
    height: int | None = None
    width: int | None = None
    font_size: float | None = None

    @classmethod
    def create_default(cls) -> "CodeViewerSettings":
        """Create a new CodeViewerSettings object with default values."""
        return cls(
            preset=None,
            color_mode=ColorMode.DARK,
            colors={},
            copy_button_text=None,
            show_copy_button=None,
            height=None,
            width=None,
            font_size=None
        )

    @classmethod
    def load(cls, path: str) -> "CodeViewerSettings":
        """
        Load code viewer settings from file.

        Args:
            path: Path to the settings file

        Returns:
            CodeViewerSettings object with loaded values

        Raises:
            CodeViewerSettingsError: If the file cannot be read, is not valid JSON, names an
                unknown preset or overrides an unknown color
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            raise CodeViewerSettingsError(f"Failed to load settings from '{path}': {str(e)}") from e

        if not isinstance(data, dict):
            raise CodeViewerSettingsError(f"Settings file '{path}' must contain a JSON object")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CodeViewerSettings":
        """
        Create settings from the dictionary form used in settings files.

        Args:
            data: Dictionary with camelCase keys

        Returns:
            CodeViewerSettings object with the given values

        Raises:
            CodeViewerSettingsError: If the data names an unknown preset or color, or a value has the wrong type
        """
        settings = cls.create_default()

        preset_name = _get_typed(data, "preset", str)
        if preset_name:
            try:
                settings.preset = preset_from_name(preset_name)

            except UnknownPresetError as e:
                raise CodeViewerSettingsError(str(e)) from e

        # Load color mode if available, otherwise use default (dark mode)
        mode_str = data.get("colorMode", "DARK")
        try:
            settings.color_mode = ColorMode[str(mode_str).upper()]

        except KeyError:
            settings.color_mode = ColorMode.DARK

        colors = _get_typed(data, "colors", dict) or {}

        unknown = sorted(set(colors) - set(COLOR_KEYS))
        if unknown:
            raise CodeViewerSettingsError(f"Unknown color settings: {', '.join(unknown)}")

        for name, color in colors.items():
            if not isinstance(color, str):
                raise CodeViewerSettingsError(f"Color setting '{name}' must be a string")

        settings.colors = dict(colors)
        settings.copy_button_text = _get_typed(data, "copyButtonText", str)
        settings.show_copy_button = _get_typed(data, "showCopyButton", bool)
        settings.height = _get_typed(data, "height", int)
        settings.width = _get_typed(data, "width", int)
        font_size = _get_typed(data, "fontSize", (int, float))
        settings.font_size = float(font_size) if font_size is not None else None
        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Get the dictionary form used in settings files."""
        return {
            "preset": self.preset.name if self.preset is not None else None,
            "colorMode": self.color_mode.name,
            "colors": dict(self.colors),
            "copyButtonText": self.copy_button_text,
            "showCopyButton": self.show_copy_button,
            "height": self.height,
            "width": self.width,
            "fontSize": self.font_size
        }

    def save(self, path: str) -> None:
        """
        Save code viewer settings to file.

        Args:
            path: Path to save the settings file

        Raises:
            CodeViewerSettingsError: If the file cannot be written
        """
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=4)

        except OSError as e:
            raise CodeViewerSettingsError(f"Failed to save settings to '{path}': {str(e)}") from e

    def to_theme(self) -> CodeViewerThemeData:
        """
        Get the per-viewer override layer described by these settings.

        Returns:
            A theme holding only the values set explicitly in the settings
        """
        return CodeViewerThemeData.from_colors(
            base_color=self.colors.get("base"),
            class_color=self.colors.get("class"),
            comment_color=self.colors.get("comment"),
            constant_color=self.colors.get("constant"),
            keyword_color=self.colors.get("keyword"),
            number_color=self.colors.get("number"),
            punctuation_color=self.colors.get("punctuation"),
            string_color=self.colors.get("string"),
            background_color=self.colors.get("background"),
            copy_button_text=self.copy_button_text,
            show_copy_button=self.show_copy_button,
            height=self.height,
            width=self.width
        )

    def ambient_theme(self) -> CodeViewerThemeData | None:
        """Get the preset layer, or None if no preset is selected."""
        if self.preset is None:
            return None

        return preset_theme(self.preset)
