"""Entry point for the braindump desktop app."""

import argparse
import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

import storage
import style
from window import MainWindow


def parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    parser = argparse.ArgumentParser(prog="braindump", description="Two-column task list.")
    parser.add_argument(
        "--data-file", type=Path, default=storage.DEFAULT_PATH,
        help="TOML file the lists are stored in (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level", default=os.environ.get("BRAINDUMP_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper,
    )
    # Whatever we don't know is left for Qt
    return parser.parse_known_args(argv)


def main():
    args, qt_args = parse_args(sys.argv[1:])
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication([sys.argv[0], *qt_args])
    app.setApplicationName(style.WINDOW_TITLE)
    app.setStyle("Fusion")

    window = MainWindow(args.data_file)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
