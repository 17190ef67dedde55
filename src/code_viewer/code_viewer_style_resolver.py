"""Resolve code viewer themes and map tokens onto styled runs of text."""

from dataclasses import dataclass
import logging
from typing import Iterable, List

from syntax import Token

from code_viewer.code_style import CodeStyle
from code_viewer.code_viewer_presets import default_theme
from code_viewer.code_viewer_theme import CodeViewerThemeData
from code_viewer.color_mode import ColorMode


_logger = logging.getLogger("CodeViewerStyleResolver")


@dataclass(frozen=True)
class HighlightRun:
    """
    A run of text drawn with one style.

    Attributes:
        start: Offset of the first character in the source text
        length: Number of characters in the run
        style: Style applied to the run
    """
    start: int
    length: int
    style: CodeStyle

    @property
    def end(self) -> int:
        """Offset one past the last character of the run."""
        return self.start + self.length


def resolve_theme(
    override: CodeViewerThemeData | None,
    ambient: CodeViewerThemeData | None,
    color_mode: ColorMode
) -> CodeViewerThemeData:
    """
    Resolve the theme used for one render.

    Each attribute is taken from the first layer that sets it: the per-call override,
    then the ambient theme, then the built-in default for the color mode.

    Args:
        override: Values set explicitly for this viewer
        ambient: Values inherited from the surrounding application
        color_mode: Brightness used to pick the built-in default

    Returns:
        A complete theme
    """
    theme = (override or CodeViewerThemeData()).merge(ambient).merge(default_theme(color_mode))
    _logger.debug("resolved theme for %s mode", color_mode.name.lower())
    return theme


def build_highlight_runs(tokens: Iterable[Token], theme: CodeViewerThemeData) -> List[HighlightRun]:
    """
    Convert tokens into styled runs of text.

    Adjacent tokens that resolve to the same style are merged into one run.  Tokens whose
    slot is unset in the theme use the theme's base style.

    Args:
        tokens: Tokens in stream order
        theme: The theme to style them with, normally a resolved theme

    Returns:
        The runs, in order, covering the same text as the tokens
    """
    base_style = theme.base_style or CodeStyle()
    runs: List[HighlightRun] = []

    for token in tokens:
        if not token.value:
            continue

        style = theme.style_for(token.type) or base_style
        if runs and runs[-1].style == style and runs[-1].end == token.start:
            last = runs.pop()
            runs.append(HighlightRun(start=last.start, length=last.length + len(token.value), style=style))
            continue

        runs.append(HighlightRun(start=token.start, length=len(token.value), style=style))

    return runs
