"""
PaletteEngine Structured Logging
Centralized loguru configuration for the palette service and its HTTP adapter.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger as _loguru_logger

from app.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message} | {extra}"


class StructuredLogger:
    """Thin wrapper that binds an ``extra`` dict onto each loguru record."""

    def __init__(self, level: Optional[str] = None):
        self.level = (level or config.LOG_LEVEL).upper()
        self._configure_logger()

    def _configure_logger(self):
        """Replace loguru's default stderr sink with a stdout sink at the configured level."""
        _loguru_logger.remove()
        _loguru_logger.add(
            sys.stdout,
            format=LOG_FORMAT,
            level=self.level,
            serialize=False  # Set to True for JSON lines
        )

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        # depth=2 so records point at the caller, not this wrapper
        target = _loguru_logger.bind(**extra) if extra else _loguru_logger
        target.opt(depth=2).log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger


logger = get_logger()
