"""Entry point for the restaurant-pos Textual app."""

from __future__ import annotations

import logging
from pathlib import Path

from restaurant_pos.config import DEBUG_LOG_PATH, resolve_log_level
from restaurant_pos.pos_app import PosApp

_file_handler: logging.Handler | None = None


def configure_logging(log_path: str = DEBUG_LOG_PATH, level: int | None = None) -> logging.Handler:
    """Send package logs to a file; the terminal belongs to the TUI.

    A repeated call replaces the handler installed by the previous one.
    """
    global _file_handler

    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    package_logger = logging.getLogger("restaurant_pos")
    if _file_handler is not None:
        package_logger.removeHandler(_file_handler)
        _file_handler.close()
    package_logger.setLevel(level if level is not None else resolve_log_level())
    package_logger.addHandler(handler)
    package_logger.propagate = False
    _file_handler = handler
    return handler


def main() -> None:
    configure_logging()
    PosApp().run()


if __name__ == "__main__":
    main()
