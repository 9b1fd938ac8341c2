"""
Constructors for errors with context.

Every constructor records the file, line and function of its caller:

    def load(path):
        try:
            return read(path)
        except OSError as e:
            raise ctxerrors.wrapf(e, "loading %s", path)
"""

from typing import Any, Optional

from .helper.format import sprintf
from .helper.location import get_caller_location
from .model.error_with_context import ErrorWithContext

# Frames between the location lookup in _new_error and the caller of the
# public constructor: _new_error itself and the public constructor.
_CALLER_SKIP = 2


def _new_error(
    err: Optional[BaseException], message: str, skip: int
) -> ErrorWithContext:
    """
    Build an ErrorWithContext located skip frames above this function.

    :param err: The predecessor error, or None.
    :param message: Context message.
    :param skip: Frames to skip, 0 being _new_error itself.
    :returns: The new error node.
    """
    location = get_caller_location(skip)
    return ErrorWithContext(message, err, location)


def _check_error(err: Any) -> None:
    if not isinstance(err, BaseException):
        raise TypeError(f"err must be an exception, got {type(err).__name__}")


def new(message: str = "") -> ErrorWithContext:
    """
    Create a new error with the caller's location.

    :param message: Error message, may be empty.
    :returns: The new error, without a wrapped error.
    """
    return _new_error(None, message, _CALLER_SKIP)


def newf(format: str, *args: Any) -> ErrorWithContext:
    """
    Create a new error with a %-formatted message and the caller's location.

    :param format: The %-style message template.
    :param args: Arguments for the template.
    :returns: The new error, without a wrapped error.
    """
    return _new_error(None, sprintf(format, *args), _CALLER_SKIP)


def wrap(err: Optional[BaseException], message: str = "") -> Optional[ErrorWithContext]:
    """
    Wrap an error with a message and the caller's location.
    Wrapping None returns None.

    :param err: The error to wrap, may be None.
    :param message: Context message, may be empty.
    :returns: The wrapping error, or None if err is None.
    :raises TypeError: If err is neither None nor an exception.
    """
    if err is None:
        return None
    _check_error(err)

    return _new_error(err, message, _CALLER_SKIP)


def wrapf(
    err: Optional[BaseException], format: str, *args: Any
) -> Optional[ErrorWithContext]:
    """
    Wrap an error with a %-formatted message and the caller's location.
    Wrapping None returns None without formatting the message.

    :param err: The error to wrap, may be None.
    :param format: The %-style message template.
    :param args: Arguments for the template.
    :returns: The wrapping error, or None if err is None.
    :raises TypeError: If err is neither None nor an exception.
    """
    if err is None:
        return None
    _check_error(err)

    return _new_error(err, sprintf(format, *args), _CALLER_SKIP)
