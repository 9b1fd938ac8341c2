"""
ctxerrors - Errors with context for Python

Attaches a message and the creating call site (file, line, function) to
errors as they travel up the call stack, while keeping the original error
reachable:
- new / newf to create an error
- wrap / wrapf to add context to an existing error (None stays None)
- unwrap, is_error and as_error to search the chain
- context to wrap any exception escaping a with block
"""

from ._version import __version__

from .ctxerrors import (
    new,
    newf,
    wrap,
    wrapf,
)

from .ctxerrors_context import (
    ErrorContext,
    context,
)

from .core.chain import (
    as_error,
    is_error,
    iter_chain,
    root_cause,
    unwrap,
)

from .helper.location import (
    Location,
    get_caller_info,
    get_caller_location,
)

from .helper.logging import (
    get_logger,
    setup_logging,
    setup_logging_from_env,
)

from .model.error_with_context import (
    ErrorWithContext,
)

# Import submodules for direct access
from . import core
from . import helper
from . import model

__all__ = [
    # Constructors
    "new",
    "newf",
    "wrap",
    "wrapf",
    "ErrorContext",
    "context",
    # Chain traversal
    "as_error",
    "is_error",
    "iter_chain",
    "root_cause",
    "unwrap",
    # Models
    "ErrorWithContext",
    "Location",
    # Location
    "get_caller_info",
    "get_caller_location",
    # Logging
    "get_logger",
    "setup_logging",
    "setup_logging_from_env",
    # Submodules
    "core",
    "helper",
    "model",
    # Version info
    "__version__",
]
