"""
Model definitions for ctxerrors.
"""

from .error_with_context import ErrorWithContext

__all__ = [
    "ErrorWithContext",
]
