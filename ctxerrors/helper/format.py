"""
Message formatting helpers for ctxerrors.
"""

from collections.abc import Mapping
from typing import Any


def sprintf(format: str, *args: Any) -> str:
    """
    Apply printf-style arguments to a template.

    Without arguments only %% escapes are collapsed to a single percent
    sign, so a lone literal percent sign needs no escaping. A single mapping
    argument is used for named placeholders like %(name)s.

    :param format: The %-style template.
    :param args: Positional arguments, or a single mapping.
    :returns: The formatted message.
    :raises TypeError: If the arguments do not match the template.
    :raises ValueError: If the template is malformed.
    """
    if not args:
        return format.replace("%%", "%")
    if len(args) == 1 and isinstance(args[0], Mapping):
        return format % args[0]
    return format % args
