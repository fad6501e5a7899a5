"""Logging setup for diagnostics about rule loading and failed checks."""

import logging
import sys
from pathlib import Path
from typing import List, Optional


class CheckLogger:
    """Send diagnostics to stderr, and optionally to a log file.

    Results are written to stdout, so log records never go there.
    """

    def __init__(
        self, log_file_path: Optional[str] = None, level: int = logging.INFO
    ) -> None:
        self.log_file_path = Path(log_file_path) if log_file_path else None
        if self.log_file_path is not None:
            self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("adblock_check")
        self.logger.setLevel(level)
        self.logger.propagate = False
        self.handlers: List[logging.Handler] = []
        self._configure_handlers(level)

    def _configure_handlers(self, level: int) -> None:
        formatter = logging.Formatter(
            "%(asctime)s - %(levelname)s - %(message)s", "%Y-%m-%d %H:%M:%S"
        )

        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self.handlers.append(stream_handler)

        if self.log_file_path is not None:
            file_handler = logging.FileHandler(self.log_file_path, encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        for handler in self.handlers:
            self.logger.addHandler(handler)

    def close(self) -> None:
        """Detach and close only the handlers this logger added."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []

    def debug(self, message: str, *args: object) -> None:
        self.logger.debug(message, *args)

    def info(self, message: str, *args: object) -> None:
        self.logger.info(message, *args)

    def warning(self, message: str, *args: object) -> None:
        self.logger.warning(message, *args)

    def error(self, message: str, *args: object) -> None:
        self.logger.error(message, *args)
