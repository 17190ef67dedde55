"""
Tests for the Qt syntax highlighter.
"""
from PySide6.QtGui import QTextCursor, QTextDocument

from code_viewer.code_viewer_highlighter import CodeViewerHighlighter
from code_viewer.code_viewer_presets import CodeViewerPreset, default_theme, preset_theme
from code_viewer.code_viewer_style_resolver import resolve_theme
from code_viewer.color_mode import ColorMode


BASE = "#eceff1"
STRING = "#9ccc65"
KEYWORD = "#4dd0e1"
NUMBER = "#fbc02d"


class TestCodeViewerHighlighter:
    """Test CodeViewerHighlighter against a document using the dark defaults."""

    def test_text_set_after_attaching(self, qt_app, block_formats):
        """Test that text set after the highlighter is attached is highlighted."""
        document = QTextDocument()
        highlighter = CodeViewerHighlighter(document, default_theme(ColorMode.DARK))

        document.setPlainText("x = 'a'; y")
        qt_app.processEvents()

        assert highlighter is not None
        assert block_formats(document) == [[(0, 4, BASE), (4, 3, STRING), (7, 3, BASE)]]

    def test_text_set_before_attaching(self, qt_app, block_formats):
        """Test that existing text is highlighted once the highlighter is attached."""
        document = QTextDocument()
        document.setPlainText("x = 'a'; y")
        highlighter = CodeViewerHighlighter(document, default_theme(ColorMode.DARK))

        highlighter.rehighlight()

        assert block_formats(document) == [[(0, 4, BASE), (4, 3, STRING), (7, 3, BASE)]]

    def test_each_block_formatted_from_runs(self, qt_app, block_formats):
        """Test that runs crossing a line break are split between blocks."""
        document = QTextDocument()
        highlighter = CodeViewerHighlighter(document, default_theme(ColorMode.DARK))

        document.setPlainText("x = 'a'; y\nint z = 1;")
        qt_app.processEvents()

        assert highlighter is not None
        assert block_formats(document) == [
            [(0, 4, BASE), (4, 3, STRING), (7, 3, BASE)],
            [(0, 3, KEYWORD), (3, 5, BASE), (8, 1, NUMBER), (9, 1, BASE)],
        ]

    def test_edits_retokenize(self, qt_app, block_formats):
        """Test that formats follow the document after it changes."""
        document = QTextDocument()
        highlighter = CodeViewerHighlighter(document, default_theme(ColorMode.DARK))
        document.setPlainText("x")
        qt_app.processEvents()

        cursor = QTextCursor(document)
        cursor.movePosition(QTextCursor.MoveOperation.End)
        cursor.insertText(" = 1")
        qt_app.processEvents()

        assert highlighter is not None
        assert block_formats(document) == [[(0, 4, BASE), (4, 1, NUMBER)]]

    def test_opening_block_comment_restyles_later_blocks(self, qt_app, block_formats):
        """Test that an edit on one line updates the lines a comment now covers."""
        document = QTextDocument()
        highlighter = CodeViewerHighlighter(document, default_theme(ColorMode.DARK))
        document.setPlainText("a\nint b;")
        qt_app.processEvents()

        cursor = QTextCursor(document)
        cursor.insertText("/*")
        qt_app.processEvents()

        comment = default_theme(ColorMode.DARK).comment_style.color
        assert highlighter is not None
        assert block_formats(document) == [[(0, 3, comment)], [(0, 6, comment)]]

    def test_characters_outside_bmp(self, qt_app, block_formats):
        """Test that formats after an emoji cover the rest of the block."""
        document = QTextDocument()
        highlighter = CodeViewerHighlighter(document, default_theme(ColorMode.DARK))

        document.setPlainText("x = '\U0001F600'; y")
        qt_app.processEvents()

        # The emoji is two UTF-16 units, so the block is 11 units long
        assert highlighter is not None
        assert block_formats(document) == [[(0, 4, BASE), (4, 4, STRING), (8, 3, BASE)]]

    def test_set_theme(self, qt_app, block_formats):
        """Test that a new theme restyles the document."""
        document = QTextDocument()
        highlighter = CodeViewerHighlighter(document, default_theme(ColorMode.DARK))
        document.setPlainText("'a'")
        qt_app.processEvents()

        theme = resolve_theme(None, preset_theme(CodeViewerPreset.IO19), ColorMode.DARK)
        highlighter.set_theme(theme)

        assert block_formats(document) == [[(0, 3, theme.string_style.color)]]
