"""
Call site resolution for ctxerrors.
Reads the current thread's call stack and reports where a function was called from.
"""

import inspect
from dataclasses import dataclass
from types import FrameType
from typing import Optional, Tuple

from .logging import get_logger

logger = get_logger()


@dataclass(frozen=True)
class Location:
    """
    Source location of a call site.
    The zero value (empty file, line 0, empty function name) means unknown.
    """

    file: str = ""
    line: int = 0
    func_name: str = ""

    def is_known(self) -> bool:
        """Check if the location was resolved."""
        return self.line != 0 and self.func_name != ""

    def __str__(self) -> str:
        if not self.is_known():
            return "unknown location"
        return f"{self.file}:{self.line} {self.func_name}"


def _qualified_name(frame: FrameType) -> str:
    module = frame.f_globals.get("__name__", "")
    qualname = frame.f_code.co_qualname
    if module:
        return f"{module}.{qualname}"
    return qualname


def get_caller_info(skip: int = 0) -> Tuple[str, int, str]:
    """
    Get file, line and function name of a frame on the current call stack.

    A skip of 0 reports the function that called get_caller_info,
    every increment moves one frame further out.
    If the stack is not deep enough, ("", 0, "") is returned.

    :param skip: Number of frames to skip above the caller.
    :returns: Tuple of file path, line number and qualified function name.
    :raises ValueError: If skip is negative.
    """
    if skip < 0:
        raise ValueError(f"skip must not be negative, got {skip}")

    frame: Optional[FrameType] = inspect.currentframe()
    try:
        for _ in range(skip + 1):
            if frame is None:
                break
            frame = frame.f_back

        if frame is None:
            logger.debug(f"Caller location unavailable for skip={skip}")
            return "", 0, ""

        return frame.f_code.co_filename, frame.f_lineno or 0, _qualified_name(frame)
    finally:
        del frame


def get_caller_location(skip: int = 0) -> Location:
    """
    Get the location of a frame on the current call stack.
    Same as get_caller_info, counted from the caller of get_caller_location.

    :param skip: Number of frames to skip above the caller.
    :returns: The resolved Location, or an unknown Location.
    """
    file, line, func_name = get_caller_info(skip + 1)
    return Location(file, line, func_name)
