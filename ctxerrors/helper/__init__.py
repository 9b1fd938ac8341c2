"""
Helper package for ctxerrors.
Provides call site resolution, message formatting and logging utilities.
"""

from .location import (
    Location,
    get_caller_info,
    get_caller_location,
)

from .format import (
    sprintf,
)

from .logging import (
    ColorFormatter,
    ContextLogger,
    LoggingConfiguration,
    get_logger,
    setup_logging,
    setup_logging_from_env,
)

__all__ = [
    # Location utilities
    "Location",
    "get_caller_info",
    "get_caller_location",
    # Formatting
    "sprintf",
    # Logging utilities
    "ColorFormatter",
    "ContextLogger",
    "LoggingConfiguration",
    "get_logger",
    "setup_logging",
    "setup_logging_from_env",
]
