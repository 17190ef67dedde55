"""
Shared fixtures for code viewer tests that need Qt.
"""
import os

import pytest

# Qt must pick its platform plugin before the first application is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qt_app():
    """Fixture providing a QApplication running on the offscreen platform."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def block_formats():
    """
    Fixture providing a function that collects the highlight formats of each block.

    The function takes a QTextDocument and returns one list per block of
    (start, length, foreground color name) tuples, in start order.
    """
    def collect(document):
        result = []
        block = document.begin()
        while block.isValid():
            ranges = sorted(block.layout().formats(), key=lambda r: r.start)
            result.append([(r.start, r.length, r.format.foreground().color().name()) for r in ranges])
            block = block.next()

        return result

    return collect
