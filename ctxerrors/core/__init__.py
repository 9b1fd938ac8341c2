"""
Core package for ctxerrors.
Provides error chain traversal.
"""

from .chain import as_error, is_error, iter_chain, root_cause, unwrap

__all__ = [
    "as_error",
    "is_error",
    "iter_chain",
    "root_cause",
    "unwrap",
]
