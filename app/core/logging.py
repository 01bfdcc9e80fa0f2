"""
Structured logging configuration.
Every module logs through a named StructuredLogger; keyword extras are rendered as key=value pairs.
"""

import logging
import sys
from typing import Optional

from app.core.config import settings

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "timestamp", "taskName"}


class StructuredLogger:
    """Structured logger with consistent formatting and levels."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def debug(self, message: str, **kwargs):
        """Log debug message with structured data."""
        self.logger.debug(message, extra=kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with structured data."""
        self.logger.info(message, extra=kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with structured data."""
        self.logger.warning(message, extra=kwargs)

    def error(self, message: str, exc: Optional[Exception] = None, **kwargs):
        """Log error message with structured data."""
        if exc:
            self.logger.error(message, exc_info=exc, extra=kwargs)
        else:
            self.logger.error(message, extra=kwargs)

    def critical(self, message: str, exc: Optional[Exception] = None, **kwargs):
        """Log critical message with structured data."""
        if exc:
            self.logger.critical(message, exc_info=exc, extra=kwargs)
        else:
            self.logger.critical(message, extra=kwargs)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured logging output."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with structured data."""
        timestamp = self.formatTime(record, self.default_time_format)
        base_format = f"[{timestamp}] {record.levelname} {record.name}: {record.getMessage()}"

        extra_fields = [
            f"{key}={value}"
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS
        ]
        if extra_fields:
            base_format = f"{base_format} | {' | '.join(extra_fields)}"

        if record.exc_info:
            base_format = f"{base_format}\n{self.formatException(record.exc_info)}"

        return base_format


def configure_logging(
    level: str = "INFO",
    enable_console: bool = True,
    enable_file: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Enable console logging
        enable_file: Enable file logging
        log_file: Log file path (required if enable_file=True)
    """
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)

    formatter = StructuredFormatter()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if enable_file and log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Set levels for noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


def get_logger(name: str) -> StructuredLogger:
    """Get a structured logger instance for the given name."""
    return StructuredLogger(name)


# Global logger instances for common use
app_logger = get_logger("app")
auth_logger = get_logger("auth")
db_logger = get_logger("db")
api_logger = get_logger("api")
dashboard_logger = get_logger("dashboard")


def init_app_logging():
    """Initialize application logging based on settings."""
    log_config = {
        "level": settings.LOG_LEVEL,
        "enable_console": True,
        "enable_file": settings.LOG_TO_FILE,
        "log_file": settings.LOG_FILE_PATH,
    }

    configure_logging(**log_config)
    app_logger.info("Application logging initialized", **log_config)
