"""Code viewer highlighter."""

import bisect
import logging
from typing import Dict, List

from PySide6.QtGui import QColor, QFont, QSyntaxHighlighter, QTextCharFormat, QTextDocument

from syntax import tokenize

from code_viewer.code_style import CodeStyle
from code_viewer.code_viewer_style_resolver import HighlightRun, build_highlight_runs
from code_viewer.code_viewer_theme import CodeViewerThemeData


class CodeViewerHighlighter(QSyntaxHighlighter):
    """
    Syntax highlighter for Dart source shown in a code viewer.

    The whole document is tokenized once per content change.  Each block is then
    formatted from the precomputed runs that overlap it.
    """

    # Consistent font family fallback sequence for all code formats
    CODE_FONT_FAMILIES = ["Menlo", "Consolas", "Monaco", "monospace"]

    def __init__(self, parent: QTextDocument, theme: CodeViewerThemeData) -> None:
        """
        Initialize the highlighter.

        Args:
            parent: The document to highlight
            theme: A resolved theme
        """
        super().__init__(parent)

        self._theme = theme
        self._runs: List[HighlightRun] = []
        self._run_starts: List[int] = []
        self._formats: Dict[CodeStyle, QTextCharFormat] = {}
        self._stale = True
        self._generation = 0
        self._logger = logging.getLogger("CodeViewerHighlighter")

        # The stale flag must be set before Qt reformats blocks, so connect ahead of the document
        self.setDocument(None)
        parent.contentsChange.connect(self._on_contents_change)
        self.setDocument(parent)

    def _on_contents_change(self, _position: int, _chars_removed: int, _chars_added: int) -> None:
        self._stale = True

    def set_theme(self, theme: CodeViewerThemeData) -> None:
        """
        Set the theme and rehighlight the document.

        Args:
            theme: A resolved theme
        """
        if theme == self._theme:
            return

        self._theme = theme
        self._formats = {}
        self._retokenize()
        self.rehighlight()

    def _retokenize(self) -> None:
        document = self.document()
        text = document.toPlainText() if document is not None else ""
        self._stale = False
        self._generation = (self._generation + 1) % 0x7FFFFFFF
        runs = build_highlight_runs(tokenize(text), self._theme)

        # Qt positions count UTF-16 code units, so characters outside the BMP take two
        if any(ord(ch) > 0xFFFF for ch in text):
            offsets = [0]
            for ch in text:
                offsets.append(offsets[-1] + (2 if ord(ch) > 0xFFFF else 1))

            runs = [
                HighlightRun(start=offsets[run.start], length=offsets[run.end] - offsets[run.start], style=run.style)
                for run in runs
            ]

        self._runs = runs
        self._run_starts = [run.start for run in self._runs]
        self._logger.debug("tokenized document into %d runs", len(self._runs))

    def _get_format(self, style: CodeStyle) -> QTextCharFormat:
        text_format = self._formats.get(style)
        if text_format is not None:
            return text_format

        text_format = QTextCharFormat()
        text_format.setFontFamilies(self.CODE_FONT_FAMILIES)
        text_format.setFontFixedPitch(True)
        if style.color is not None:
            text_format.setForeground(QColor(style.color))

        if style.bold:
            text_format.setFontWeight(QFont.Weight.Bold)

        text_format.setFontItalic(style.italic)
        if style.font_size is not None:
            text_format.setFontPointSize(style.font_size)

        self._formats[style] = text_format
        return text_format

    def highlightBlock(self, text: str) -> None:
        """Apply highlighting to the given block of text."""
        try:
            # Tokens cover the whole document so refresh them after any edit
            if self._stale:
                self._retokenize()

            # A new block state makes Qt carry on highlighting the following blocks
            self.setCurrentBlockState(self._generation)

            block_start = self.currentBlock().position()
            block_end = block_start + self.currentBlock().length() - 1

            # Find the first run that could overlap this block
            index = max(bisect.bisect_right(self._run_starts, block_start) - 1, 0)
            while index < len(self._runs):
                run = self._runs[index]
                if run.start >= block_end:
                    break

                start = max(run.start, block_start)
                end = min(run.end, block_end)
                if end > start:
                    self.setFormat(start - block_start, end - start, self._get_format(run.style))

                index += 1

        except Exception:
            self._logger.exception("highlighting exception")
