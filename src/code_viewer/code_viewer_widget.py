"""Widget that shows highlighted Dart source with a copy button."""

import logging
from typing import List

from PySide6.QtCore import Signal
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import QFrame, QPlainTextEdit, QPushButton, QVBoxLayout, QWidget

from syntax import Token, tokenize, tokens_to_text

from code_viewer.code_viewer_highlighter import CodeViewerHighlighter
from code_viewer.code_viewer_style_resolver import resolve_theme
from code_viewer.code_viewer_theme import CodeViewerThemeData
from code_viewer.color_mode import ColorMode
from code_viewer.status_message import StatusMessage


# Largest widget size Qt allows, used to undo a fixed size
QWIDGETSIZE_MAX = (1 << 24) - 1


class CodeViewerWidget(QFrame):
    """
    Scrollable, selectable view of Dart source code.

    The theme is resolved once when the widget is created or restyled: values set on the
    widget win over the ambient theme, which wins over the defaults for the color mode.

    Signals:
        status_message: Emitted with the outcome of a copy to the clipboard
    """

    status_message = Signal(StatusMessage)

    def __init__(
        self,
        source: str,
        theme: CodeViewerThemeData | None = None,
        ambient_theme: CodeViewerThemeData | None = None,
        color_mode: ColorMode = ColorMode.DARK,
        font_size: float | None = None,
        parent: QWidget | None = None
    ) -> None:
        """
        Initialize the code viewer.

        Args:
            source: Dart source text to show
            theme: Per-viewer theme overrides
            ambient_theme: Theme inherited from the surrounding application
            color_mode: Brightness used for any values neither theme sets
            font_size: Base font size in points, or None for the system default
            parent: Parent widget
        """
        super().__init__(parent)
        self._logger = logging.getLogger("CodeViewerWidget")

        self._tokens: List[Token] = tokenize(source)
        self._theme_override = theme
        self._ambient_theme = ambient_theme
        self._color_mode = color_mode
        self._theme = resolve_theme(theme, ambient_theme, color_mode)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 0, 16, 0)
        layout.setSpacing(0)

        self._copy_button = QPushButton(self)
        self._copy_button.clicked.connect(self.copy_all)
        layout.addWidget(self._copy_button)

        self._text_edit = QPlainTextEdit(self)
        self._text_edit.setReadOnly(True)
        self._text_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self._text_edit.setFrameStyle(QFrame.Shape.NoFrame)
        if font_size is not None:
            font = QFont(CodeViewerHighlighter.CODE_FONT_FAMILIES)
            font.setPointSizeF(font_size)
            self._text_edit.setFont(font)

        layout.addWidget(self._text_edit)

        self._highlighter = CodeViewerHighlighter(self._text_edit.document(), self._theme)
        self._text_edit.setPlainText(source)
        self._highlighter.rehighlight()

        self._apply_theme()

    def theme(self) -> CodeViewerThemeData:
        """Get the resolved theme in use."""
        return self._theme

    def tokens(self) -> List[Token]:
        """Get the tokens of the source shown."""
        return list(self._tokens)

    def set_color_mode(self, color_mode: ColorMode) -> None:
        """
        Set the color mode and restyle the viewer.

        Args:
            color_mode: The ColorMode to switch to
        """
        if color_mode == self._color_mode:
            return

        self._color_mode = color_mode
        self._restyle()

    def set_ambient_theme(self, ambient_theme: CodeViewerThemeData | None) -> None:
        """
        Set the theme inherited from the surrounding application.

        Args:
            ambient_theme: The new ambient theme, or None to use only the defaults
        """
        self._ambient_theme = ambient_theme
        self._restyle()

    def _restyle(self) -> None:
        self._theme = resolve_theme(self._theme_override, self._ambient_theme, self._color_mode)
        self._highlighter.set_theme(self._theme)
        self._apply_theme()

    def _apply_theme(self) -> None:
        theme = self._theme
        self._copy_button.setText(theme.copy_button_text or "")
        self._copy_button.setVisible(bool(theme.show_copy_button))

        if theme.height is not None:
            self.setFixedHeight(theme.height)

        else:
            self.setMinimumHeight(0)
            self.setMaximumHeight(QWIDGETSIZE_MAX)

        if theme.width is not None:
            self.setFixedWidth(theme.width)

        else:
            self.setMinimumWidth(0)
            self.setMaximumWidth(QWIDGETSIZE_MAX)

        text_color = theme.base_style.color if theme.base_style is not None else None
        stylesheet = f"QFrame {{ background-color: {theme.background_color}; }}"
        if text_color is not None:
            stylesheet += f"\nQPlainTextEdit {{ color: {text_color}; }}"

        self.setStyleSheet(stylesheet)

    def copy_all(self) -> None:
        """Copy the entire source to the clipboard."""
        content = tokens_to_text(self._tokens)
        try:
            clipboard = QGuiApplication.clipboard()
            if clipboard is None:
                raise RuntimeError("no clipboard available")

            clipboard.setText(content)

        except RuntimeError as e:
            self._logger.warning("failed to copy to clipboard: %s", e)
            self.status_message.emit(StatusMessage(f"Failure to copy to clipboard: {e}", is_error=True))
            return

        self._logger.debug("copied %d characters to clipboard", len(content))
        self.status_message.emit(StatusMessage("Copied to Clipboard"))
