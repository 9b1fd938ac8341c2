"""
Context manager that wraps exceptions escaping a block.

    with ctxerrors.context("syncing user %s", user_id):
        sync(user_id)
"""

from types import TracebackType
from typing import Any, Optional, Type

from .ctxerrors import _CALLER_SKIP, _new_error
from .helper.format import sprintf
from .helper.logging import get_logger

logger = get_logger()


class ErrorContext:
    """
    Re-raises any Exception leaving the block as an ErrorWithContext.
    The location is the frame running the with statement.
    KeyboardInterrupt, SystemExit and other non-Exception errors pass through.
    """

    def __init__(self, format: str = "", *args: Any):
        self.format = format
        self.args = args

    def __enter__(self) -> "ErrorContext":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> bool:
        if exc is None or not isinstance(exc, Exception):
            return False

        message = sprintf(self.format, *self.args)
        # __exit__ is called directly by the frame running the with statement
        error = _new_error(exc, message, _CALLER_SKIP)
        logger.debug(
            f"Annotated {type(exc).__name__} leaving context",
            location=error.location,
        )
        raise error


def context(format: str = "", *args: Any) -> ErrorContext:
    """
    Create an ErrorContext for a with statement.

    :param format: The %-style message template.
    :param args: Arguments for the template, formatted only on error.
    :returns: The context manager.
    """
    return ErrorContext(format, *args)
