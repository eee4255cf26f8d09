"""Exception hierarchy for fts-result.

Represented failures travel inside ``Err`` and never show up here. These
classes cover the opt-in unwrapping hazards (``from_ok``/``from_err``) and
invalid configuration.
"""

from __future__ import annotations

from typing import Any


class FtsResultError(Exception):
    """Base exception for all fts-result errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class UnwrapError(FtsResultError):
    """A Result was unwrapped as the wrong variant.

    Raised by ``from_err`` on an ``Ok``, and by ``from_ok`` on an ``Err``
    whose payload is not an exception and so cannot be raised directly.
    The offending payload, when there is one, is kept on ``err``.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        err: Any = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.err = err


class ConfigurationError(FtsResultError):
    """Configuration validation or resolution failed."""
