"""Main entry point for the Dart code viewer."""

import argparse
import asyncio
from datetime import datetime, timezone
import glob
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from types import TracebackType
from typing import List

from PySide6.QtWidgets import QMainWindow
from qasync import QEventLoop, QApplication  # type: ignore[import-untyped]

from code_viewer.code_viewer_error import CodeViewerError
from code_viewer.code_viewer_presets import preset_from_name, preset_names
from code_viewer.code_viewer_settings import CodeViewerSettings
from code_viewer.code_viewer_widget import CodeViewerWidget
from code_viewer.color_mode import ColorMode
from code_viewer.status_message import StatusMessage


def setup_logging() -> None:
    """Configure application logging with timestamped files and rotation."""
    log_dir = os.path.expanduser("~/.dart_code_viewer/logs")
    os.makedirs(log_dir, exist_ok=True)

    # Generate timestamp for log filename
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d-%H-%M-%S-%f")[:23]
    log_file = os.path.join(log_dir, f"{timestamp}.log")

    # Keep up to 50 log files, max 1MB each
    handler = RotatingFileHandler(
        log_file,
        maxBytes=1024*1024,
        backupCount=49,
        encoding='utf-8'
    )

    logging.basicConfig(
        level=logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[handler]
    )

    cleanup_old_logs(log_dir, max_logs=50)


def cleanup_old_logs(log_dir: str, max_logs: int) -> None:
    """Remove oldest log files if we exceed maximum count."""
    log_files = glob.glob(os.path.join(log_dir, "*.log*"))
    log_files.sort(key=os.path.getctime)

    while len(log_files) > max_logs:
        try:
            os.remove(log_files.pop(0))

        except OSError:
            pass  # Ignore errors removing old logs


def install_global_exception_handler() -> None:
    """Install a global exception handler for uncaught exceptions."""
    logger = logging.getLogger('GlobalExceptionHandler')

    def handle_exception(exc_type: type[BaseException], exc_value: BaseException, exc_traceback: TracebackType | None) -> None:
        """Handle uncaught exceptions and log them."""
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        logger.critical(
            "Uncaught exception",
            exc_info=(exc_type, exc_value, exc_traceback),
            stack_info=True
        )

    sys.excepthook = handle_exception


def parse_args(argv: List[str]) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="dart-code-viewer", description="Show Dart source with syntax highlighting.")
    parser.add_argument("file", nargs="?", help="Dart source file to show, or '-' for stdin")
    parser.add_argument("--preset", help="Color preset (see --list-presets)")
    parser.add_argument("--mode", choices=["light", "dark"], help="Color mode used for default colors")
    parser.add_argument("--settings", help="Path to a JSON settings file")
    parser.add_argument("--list-presets", action="store_true", help="List the color presets and exit")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> CodeViewerSettings:
    """
    Build the viewer settings from the settings file and command line.

    Raises:
        CodeViewerError: If the settings file or preset name is invalid
    """
    settings = CodeViewerSettings.load(args.settings) if args.settings else CodeViewerSettings.create_default()

    if args.preset:
        settings.preset = preset_from_name(args.preset)

    if args.mode:
        settings.color_mode = ColorMode[args.mode.upper()]

    return settings


def read_source(path: str) -> str:
    """Read the Dart source to show."""
    if path == "-":
        return sys.stdin.read()

    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: List[str] | None = None) -> int:
    """Main function to run the application."""
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.list_presets:
        for name in preset_names():
            print(name)

        return 0

    if not args.file:
        print("error: a Dart source file is required", file=sys.stderr)
        return 1

    setup_logging()
    install_global_exception_handler()
    logger = logging.getLogger("CodeViewer")

    try:
        settings = load_settings(args)
        source = read_source(args.file)

    except CodeViewerError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read '{args.file}': {e}", file=sys.stderr)
        return 1

    logger.info("showing '%s' (%d characters)", args.file, len(source))

    app = QApplication(sys.argv)

    loop = QEventLoop(app)
    asyncio.set_event_loop(loop)

    window = QMainWindow()
    window.setWindowTitle(os.path.basename(args.file) if args.file != "-" else "Dart code viewer")
    viewer = CodeViewerWidget(
        source,
        theme=settings.to_theme(),
        ambient_theme=settings.ambient_theme(),
        color_mode=settings.color_mode,
        font_size=settings.font_size
    )

    def show_status(message: StatusMessage) -> None:
        window.statusBar().showMessage(message.text, message.timeout or 0)

    viewer.status_message.connect(show_status)
    window.setCentralWidget(viewer)
    window.resize(800, 600)
    window.show()

    try:
        with loop:
            loop.run_forever()

    except KeyboardInterrupt:
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
