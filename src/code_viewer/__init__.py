"""
Dart code viewer.

Theme data, presets and style resolution for showing tokenized Dart source, plus a
PySide6 widget that hosts it.  The Qt classes are imported from their own modules so the
theme layer can be used without a display.
"""

from code_viewer.code_style import CodeStyle
from code_viewer.code_viewer_error import CodeViewerError, CodeViewerSettingsError, UnknownPresetError
from code_viewer.code_viewer_presets import (
    CodeViewerPreset, default_theme, preset_from_name, preset_names, preset_theme
)
from code_viewer.code_viewer_settings import CodeViewerSettings
from code_viewer.code_viewer_style_resolver import HighlightRun, build_highlight_runs, resolve_theme
from code_viewer.code_viewer_theme import CodeViewerThemeData
from code_viewer.color_mode import ColorMode
from code_viewer.status_message import StatusMessage


__all__ = [
    "CodeStyle",
    "CodeViewerError",
    "CodeViewerPreset",
    "CodeViewerSettings",
    "CodeViewerSettingsError",
    "CodeViewerThemeData",
    "ColorMode",
    "HighlightRun",
    "StatusMessage",
    "UnknownPresetError",
    "build_highlight_runs",
    "default_theme",
    "preset_from_name",
    "preset_names",
    "preset_theme",
    "resolve_theme"
]
