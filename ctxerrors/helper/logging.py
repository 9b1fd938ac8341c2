"""
Pretty logging utilities for ctxerrors.
Colored console output, key=value context and error chain logging.
"""

import logging
import os
import sys
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, TextIO

from ..core.chain import iter_chain


class ColorFormatter(logging.Formatter):
    """
    Colored log formatter for console output.
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[95m",  # Magenta
        "INFO": "\033[94m",  # Blue
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, use_colors: bool = True, include_timestamp: bool = True):
        """
        Initialize the color formatter.

        :param use_colors: Whether to use colors in the output.
        :param include_timestamp: Whether to include timestamps in log messages.
        """
        self.use_colors = use_colors and sys.stdout.isatty()
        self.include_timestamp = include_timestamp

        if include_timestamp:
            fmt = "%(asctime)s %(levelname)s: %(message)s"
        else:
            fmt = "%(levelname)s: %(message)s"

        super().__init__(fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with colors.

        :param record: The log record to format.
        :returns: The formatted log message string.
        """
        formatted = super().format(record)

        if self.use_colors and record.levelname in self.COLORS:
            color = self.COLORS[record.levelname]
            reset = self.COLORS["RESET"]
            parts = formatted.split(": ", 1)
            if len(parts) == 2:
                level_part, message_part = parts
                formatted = f"{color}{level_part}: {reset}{message_part}"

        return formatted


@dataclass
class LoggingConfiguration:
    """
    Logging configuration class.
    """

    level: int = logging.INFO
    use_colors: bool = True
    include_timestamp: bool = True
    name: str = "ctxerrors"

    @classmethod
    def from_env(cls) -> "LoggingConfiguration":
        """Create configuration from environment variables."""
        level_name = os.getenv("CTXERRORS_LOG_LEVEL", "INFO").strip().upper()
        use_colors = os.getenv("CTXERRORS_LOG_COLORS", "true").lower() == "true"
        include_timestamp = (
            os.getenv("CTXERRORS_LOG_TIMESTAMP", "true").lower() == "true"
        )
        name = os.getenv("CTXERRORS_LOG_NAME", "ctxerrors").strip()

        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(
                f"invalid CTXERRORS_LOG_LEVEL {level_name!r}, "
                "expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL"
            )
        if not name:
            raise ValueError("CTXERRORS_LOG_NAME must not be empty")

        return cls(
            level=level,
            use_colors=use_colors,
            include_timestamp=include_timestamp,
            name=name,
        )


class ContextLogger:
    """
    Logger with key=value context and error chain support.
    """

    def __init__(
        self,
        name: str = "ctxerrors",
        level: int = logging.INFO,
        use_colors: bool = True,
        stream: Optional[TextIO] = None,
        include_timestamp: bool = True,
    ):
        """
        Initialize the context logger.

        :param name: Logger name.
        :param level: Logging level.
        :param use_colors: Whether to use colored output.
        :param stream: Output stream (defaults to sys.stdout).
        :param include_timestamp: Whether to prefix messages with a timestamp.
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Remove existing handlers to avoid duplicates
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        handler = logging.StreamHandler(stream or sys.stdout)
        handler.setFormatter(
            ColorFormatter(use_colors=use_colors, include_timestamp=include_timestamp)
        )

        self.logger.addHandler(handler)
        self.logger.propagate = False

    def debug(self, message: str, **kwargs: Any) -> None:
        """
        Log debug message with optional context.

        :param message: The log message.
        :param kwargs: Additional context to include in the log.
        """
        self.log_with_context(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log info message with optional context.

        :param message: The log message.
        :param kwargs: Additional context to include in the log.
        """
        self.log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """
        Log warning message with optional context.

        :param message: The log message.
        :param kwargs: Additional context to include in the log.
        """
        self.log_with_context(logging.WARNING, message, **kwargs)

    def error(
        self, message: str, error: Optional[BaseException] = None, **kwargs: Any
    ) -> None:
        """
        Log error message with optional exception and context.

        :param message: The log message.
        :param error: Optional exception to include in the log.
        :param kwargs: Additional context to include in the log.
        """
        if error is not None:
            message = f"{message}: {error}"
        self.log_with_context(logging.ERROR, message, **kwargs)

    def critical(
        self, message: str, error: Optional[BaseException] = None, **kwargs: Any
    ) -> None:
        """
        Log critical message with optional exception and context.

        :param message: The log message.
        :param error: Optional exception to include in the log.
        :param kwargs: Additional context to include in the log.
        """
        if error is not None:
            message = f"{message}: {error}"
        self.log_with_context(logging.CRITICAL, message, **kwargs)

    def error_chain(
        self, message: str, error: Optional[BaseException], level: int = logging.ERROR
    ) -> None:
        """
        Log a message followed by one line per link of the error chain.
        Links carrying a location get file, line and func context.

        :param message: The log message.
        :param error: The outermost error of the chain.
        :param level: Logging level for all lines.
        """
        self.log_with_context(level, message)

        for depth, link in enumerate(iter_chain(error)):
            context: Dict[str, Any] = {"depth": depth, "type": type(link).__name__}
            location = getattr(link, "location", None)
            is_known = getattr(location, "is_known", None)
            if callable(is_known) and is_known():
                context["file"] = location.file
                context["line"] = location.line
                context["func"] = location.func_name

            text = getattr(link, "message", None)
            if text is None:
                text = str(link)
            self.log_with_context(level, f"  {text}", **context)

    def log_with_context(self, level: int, message: str, **kwargs: Any) -> None:
        """
        Log message with additional context information.

        :param level: Logging level.
        :param message: The log message.
        :param kwargs: Additional context to include in the log.
        """
        if kwargs:
            context_parts = [f"{k}={v}" for k, v in kwargs.items()]
            context_str = " | " + " ".join(context_parts)
            message += context_str

        self.logger.log(level, message)

    def set_level(self, level: int) -> None:
        """Set the logging level."""
        self.logger.setLevel(level)


_loggers: Dict[str, ContextLogger] = {}
_loggers_lock = threading.Lock()


def get_logger(name: str = "ctxerrors") -> ContextLogger:
    """
    Get or create a logger instance.

    :param name: Logger name.
    :returns: ContextLogger instance.
    """
    with _loggers_lock:
        logger = _loggers.get(name)
        if logger is None:
            logger = ContextLogger(name)
            _loggers[name] = logger
        return logger


def setup_logging(
    level: int = logging.INFO,
    use_colors: bool = True,
    name: str = "ctxerrors",
    stream: Optional[TextIO] = None,
    include_timestamp: bool = True,
) -> ContextLogger:
    """
    Setup logging for ctxerrors.
    Replaces the cached logger of the same name.

    :param level: Logging level.
    :param use_colors: Whether to use colors in logs.
    :param name: Logger name.
    :param stream: Output stream (defaults to sys.stdout).
    :param include_timestamp: Whether to prefix messages with a timestamp.
    :returns: Configured ContextLogger instance.
    """
    logger = ContextLogger(name, level, use_colors, stream, include_timestamp)

    with _loggers_lock:
        _loggers[name] = logger

    return logger


def setup_logging_from_env(stream: Optional[TextIO] = None) -> ContextLogger:
    """
    Setup logging from CTXERRORS_LOG_* environment variables.

    :param stream: Output stream (defaults to sys.stdout).
    :returns: Configured ContextLogger instance.
    """
    config = LoggingConfiguration.from_env()
    return setup_logging(
        level=config.level,
        use_colors=config.use_colors,
        name=config.name,
        stream=stream,
        include_timestamp=config.include_timestamp,
    )
