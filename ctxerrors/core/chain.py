"""
Error chain traversal.

Every error can point to a predecessor: error nodes through their unwrap()
method, any other exception through __cause__ (set by "raise ... from ...").
These helpers walk that chain to search for a specific error or error type.
"""

from typing import Iterator, Optional, Type, TypeVar

E = TypeVar("E", bound=BaseException)


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    Return the immediate predecessor of an error.

    :param err: The error to unwrap, may be None.
    :returns: The predecessor, or None for the end of the chain.
    """
    if err is None:
        return None

    unwrap_method = getattr(err, "unwrap", None)
    if callable(unwrap_method):
        return unwrap_method()

    return err.__cause__


def iter_chain(err: Optional[BaseException]) -> Iterator[BaseException]:
    """
    Iterate over an error and all of its predecessors, outermost first.
    Stops before revisiting an error that was already yielded.
    """
    seen = set()
    current = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = unwrap(current)


def is_error(err: Optional[BaseException], target: BaseException) -> bool:
    """
    Check if target is anywhere in the chain of err.
    A link matches if it is target or compares equal to it.

    :param err: The outermost error of the chain.
    :param target: The error to search for.
    :returns: True if target was found.
    """
    for link in iter_chain(err):
        if link is target or link == target:
            return True
    return False


def as_error(err: Optional[BaseException], error_type: Type[E]) -> Optional[E]:
    """
    Find the first error in the chain of err that is an instance of error_type.

    :param err: The outermost error of the chain.
    :param error_type: The exception class to search for.
    :returns: The matching error, or None.
    """
    for link in iter_chain(err):
        if isinstance(link, error_type):
            return link
    return None


def root_cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """Return the innermost error of the chain, or None for None."""
    last: Optional[BaseException] = None
    for link in iter_chain(err):
        last = link
    return last
