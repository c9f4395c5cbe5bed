"""Logging configuration for epify."""

import logging
import sys
from pathlib import Path
from typing import Optional


class EpifyLogger:
    """Logger with console (stderr) and optional file output."""

    def __init__(self, log_file: Optional[Path] = None, verbose: bool = False):
        self.logger = logging.getLogger("epify")
        self.logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self.logger.handlers.clear()

        # Console handler (forward to stderr)
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
        console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        self.logger.addHandler(console_handler)

        # File handler (detailed, with timestamps)
        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
                )
            )
            self.logger.addHandler(file_handler)
            # File output keeps DEBUG detail even without --verbose
            self.logger.setLevel(logging.DEBUG)

    def debug(self, msg: str, *args, **kwargs):
        self.logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self.logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self.logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self.logger.error(msg, *args, **kwargs)


# Global instance (initialized in CLI)
_logger: Optional[EpifyLogger] = None


def get_logger() -> Optional[EpifyLogger]:
    """Get the global logger instance."""
    return _logger


def init_logger(log_file: Optional[Path] = None, verbose: bool = False):
    """Initialize the global logger instance."""
    global _logger
    _logger = EpifyLogger(log_file, verbose)
    return _logger
