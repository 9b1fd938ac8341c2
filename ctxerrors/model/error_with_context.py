"""
Error node carrying a message, a source location and an optional wrapped error.
"""

from typing import Any, List, Optional, Tuple

from ..helper.location import Location


class ErrorWithContext(Exception):
    """
    Exception that adds context to another error.

    Holds a message, the location where it was created and the error it wraps.
    All fields are fixed at construction. The wrapped error is also set as
    __cause__ so tracebacks show the chain.
    """

    def __init__(
        self,
        message: str = "",
        wrapped: Optional[BaseException] = None,
        location: Optional[Location] = None,
    ):
        """
        Initialize ErrorWithContext.

        Use ctxerrors.new or ctxerrors.wrap to get the location filled in.

        :param message: Context message, may be empty.
        :param wrapped: The predecessor error, or None.
        :param location: Where the error was created, unknown if None.
        :raises TypeError: If wrapped is not an exception.
        """
        if wrapped is not None and not isinstance(wrapped, BaseException):
            raise TypeError(
                f"wrapped error must be an exception, got {type(wrapped).__name__}"
            )

        super().__init__(message)
        self._message = message
        self._wrapped = wrapped
        self._location = location if location is not None else Location()
        self.__cause__ = wrapped

    @property
    def message(self) -> str:
        return self._message

    @property
    def wrapped(self) -> Optional[BaseException]:
        return self._wrapped

    @property
    def location(self) -> Location:
        return self._location

    @property
    def file(self) -> str:
        return self._location.file

    @property
    def line(self) -> int:
        return self._location.line

    @property
    def func_name(self) -> str:
        return self._location.func_name

    def unwrap(self) -> Optional[BaseException]:
        """Return the wrapped error, or None if this is the end of the chain."""
        return self._wrapped

    def _segment(self) -> str:
        if self._message:
            return f"{self._message} [{self._location}]"
        return f"[{self._location}]"

    def __str__(self) -> str:
        # Iterative so that long chains do not hit the recursion limit
        segments: List[str] = []
        current: Optional[BaseException] = self
        while isinstance(current, ErrorWithContext):
            segments.append(current._segment())
            current = current._wrapped

        if current is not None:
            segments.append(str(current) or type(current).__name__)

        return ": ".join(segments)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self._message!r}, "
            f"wrapped={self._wrapped!r}, location={self._location!r})"
        )

    def __reduce__(self) -> Tuple[Any, ...]:
        return (type(self), (self._message, self._wrapped, self._location))
