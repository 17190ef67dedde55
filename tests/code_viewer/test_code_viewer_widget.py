"""
Tests for the code viewer widget.
"""
from unittest.mock import MagicMock

from PySide6.QtWidgets import QPlainTextEdit, QPushButton

from code_viewer import code_viewer_widget
from code_viewer.code_viewer_theme import CodeViewerThemeData
from code_viewer.code_viewer_widget import QWIDGETSIZE_MAX, CodeViewerWidget
from code_viewer.color_mode import ColorMode


SOURCE = "x = 'a'; y\nint z = 1;"


def _mock_clipboard(monkeypatch, clipboard):
    gui_application = MagicMock()
    gui_application.clipboard.return_value = clipboard
    monkeypatch.setattr(code_viewer_widget, "QGuiApplication", gui_application)


class TestCodeViewerWidget:
    """Test CodeViewerWidget."""

    def test_new_viewer_is_highlighted(self, qt_app, block_formats):
        """Test that every block of a new viewer carries formats."""
        viewer = CodeViewerWidget(SOURCE)
        qt_app.processEvents()

        document = viewer.findChild(QPlainTextEdit).document()
        theme = viewer.theme()
        formats = block_formats(document)

        assert (4, 3, theme.string_style.color) in formats[0]
        assert (0, 3, theme.keyword_style.color) in formats[1]
        assert (8, 1, theme.number_style.color) in formats[1]

    def test_color_mode_restyles(self, qt_app, block_formats):
        """Test that switching color mode changes the highlight colors."""
        viewer = CodeViewerWidget(SOURCE, color_mode=ColorMode.DARK)
        viewer.set_color_mode(ColorMode.LIGHT)
        qt_app.processEvents()

        document = viewer.findChild(QPlainTextEdit).document()
        formats = block_formats(document)

        assert (4, 3, viewer.theme().string_style.color) in formats[0]
        assert viewer.theme().background_color == "#ffffff"

    def test_copy_button_from_theme(self, qt_app):
        """Test that the copy button label and visibility come from the theme."""
        viewer = CodeViewerWidget(SOURCE)
        button = viewer.findChild(QPushButton)
        assert button.text() == "COPY ALL"
        assert not button.isHidden()

        hidden = CodeViewerWidget(SOURCE, theme=CodeViewerThemeData(show_copy_button=False))
        assert hidden.findChild(QPushButton).isHidden()

    def test_copy_all(self, qt_app, monkeypatch):
        """Test copying the source to the clipboard."""
        clipboard = MagicMock()
        _mock_clipboard(monkeypatch, clipboard)
        viewer = CodeViewerWidget(SOURCE)
        messages = []
        viewer.status_message.connect(messages.append)

        viewer.copy_all()

        clipboard.setText.assert_called_once_with(SOURCE)
        assert len(messages) == 1
        assert messages[0].text == "Copied to Clipboard"
        assert messages[0].is_error is False

    def test_copy_all_failure(self, qt_app, monkeypatch):
        """Test that a clipboard failure is reported as an error message."""
        clipboard = MagicMock()
        clipboard.setText.side_effect = RuntimeError("clipboard busy")
        _mock_clipboard(monkeypatch, clipboard)
        viewer = CodeViewerWidget(SOURCE)
        messages = []
        viewer.status_message.connect(messages.append)

        viewer.copy_all()

        assert len(messages) == 1
        assert messages[0].text == "Failure to copy to clipboard: clipboard busy"
        assert messages[0].is_error is True

    def test_copy_all_without_clipboard(self, qt_app, monkeypatch):
        """Test the message when no clipboard is available."""
        _mock_clipboard(monkeypatch, None)
        viewer = CodeViewerWidget(SOURCE)
        messages = []
        viewer.status_message.connect(messages.append)

        viewer.copy_all()

        assert messages[0].text == "Failure to copy to clipboard: no clipboard available"
        assert messages[0].is_error is True

    def test_fixed_size_from_theme(self, qt_app):
        """Test that a theme size fixes the viewer size."""
        viewer = CodeViewerWidget(SOURCE, theme=CodeViewerThemeData(height=120, width=300))

        assert viewer.minimumHeight() == viewer.maximumHeight() == 120
        assert viewer.minimumWidth() == viewer.maximumWidth() == 300

    def test_fixed_size_cleared_on_restyle(self, qt_app):
        """Test that restyling to a theme without a size releases the fixed size."""
        viewer = CodeViewerWidget(SOURCE, ambient_theme=CodeViewerThemeData(height=120, width=300))
        assert viewer.maximumHeight() == 120

        viewer.set_ambient_theme(None)

        assert viewer.minimumHeight() == 0
        assert viewer.maximumHeight() == QWIDGETSIZE_MAX
        assert viewer.minimumWidth() == 0
        assert viewer.maximumWidth() == QWIDGETSIZE_MAX
