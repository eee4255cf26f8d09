"""fts-result: a Result type for explicit, composable error handling.

Public API:
    - Ok / Err: the two variants of ``Result``
    - fmap / map_err / bind / seq / then: per-instance combinators
    - is_ok / is_err / unbox: inspection and elimination
    - from_nullable / from_exception: adapters into ``Result``
    - from_ok / from_err: unwrapping that raises on the wrong variant
"""

from __future__ import annotations

import logging

from fts_result.config import Config, config_scope, current_config, resolve_config
from fts_result.errors import ConfigurationError, FtsResultError, UnwrapError
from fts_result.protocols import Functor, Monad, default_then
from fts_result.result import (
    Err,
    Ok,
    Result,
    ResultError,
    ResultErrorBool,
    ResultErrorFloat,
    ResultErrorInt,
    ResultErrorStr,
    from_err,
    from_exception,
    from_nullable,
    from_ok,
    is_err,
    is_ok,
    is_result,
    unbox,
)

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("fts-result")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("fts_result").addHandler(logging.NullHandler())

__all__ = [
    "Config",
    "ConfigurationError",
    "Err",
    "FtsResultError",
    "Functor",
    "Monad",
    "Ok",
    "Result",
    "ResultError",
    "ResultErrorBool",
    "ResultErrorFloat",
    "ResultErrorInt",
    "ResultErrorStr",
    "UnwrapError",
    "__version__",
    "config_scope",
    "current_config",
    "default_then",
    "from_err",
    "from_exception",
    "from_nullable",
    "from_ok",
    "is_err",
    "is_ok",
    "is_result",
    "resolve_config",
    "unbox",
]
