"""Configuration: pydantic schema, environment resolution, ambient scope.

Precedence is defaults < environment (``FTS_RESULT_*``, optionally from a
``.env`` file) < explicit overrides. Functions that read configuration take
the ambient ``Config`` from ``current_config()``; an active
``config_scope`` wins over the environment.
"""

from __future__ import annotations

from contextlib import contextmanager
import contextvars
from dataclasses import dataclass
from functools import cache
import logging
import os
from typing import TYPE_CHECKING, Any, Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from fts_result.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Generator, Mapping

log = logging.getLogger(__name__)

ENV_PREFIX = "FTS_RESULT_"

NullablePolicy = Literal["truthy", "none"]

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


class Settings(BaseModel):
    """Schema and defaults for every configuration field."""

    #: ``"truthy"`` treats every falsy value as absent in ``from_nullable``;
    #: ``"none"`` treats only ``None`` as absent.
    nullable_policy: NullablePolicy = Field(default="truthy")
    #: Attach tracebacks to the DEBUG record ``from_exception`` emits.
    log_captured_exceptions: bool = Field(default=False)

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("nullable_policy", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        """Accept case and whitespace variants of the policy name."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_captured_exceptions", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> Any:
        """Accept the usual string spellings of a boolean flag."""
        if isinstance(v, str):
            s = v.strip().lower()
            if s in _TRUE_STRINGS:
                return True
            if s in _FALSE_STRINGS:
                return False
        return v  # Let pydantic raise with a precise message


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration."""

    nullable_policy: NullablePolicy = "truthy"
    log_captured_exceptions: bool = False


_AMBIENT: contextvars.ContextVar[Config | None] = contextvars.ContextVar(
    "fts_result_ambient_config", default=None
)


@cache
def _load_dotenv_once() -> bool:
    """Load a .env file at most once, ignoring unreadable or malformed files."""
    try:
        return load_dotenv()
    except Exception as exc:
        log.debug("Ignoring .env load failure: %s", exc)
        return False


def load_env() -> dict[str, str]:
    """Return ``FTS_RESULT_*`` variables keyed by lower-case field name."""
    out: dict[str, str] = {}
    for name in Settings.model_fields:
        value = os.environ.get(f"{ENV_PREFIX}{name.upper()}")
        if value is not None:
            out[name] = value
    return out


def resolve_config(overrides: Mapping[str, Any] | None = None) -> Config:
    """Resolve configuration from defaults, environment and overrides.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    _load_dotenv_once()
    merged: dict[str, Any] = {**load_env(), **(overrides or {})}

    try:
        settings = Settings.model_validate(merged)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        msg = err.get("msg", "invalid value")
        # Drop pydantic's standard wrapper prefix
        if msg.startswith("Value error, "):
            msg = msg[len("Value error, ") :]
        hint = (
            f"Check {ENV_PREFIX}{field.upper()} or the matching override."
            if field in Settings.model_fields
            else f"Known fields: {', '.join(sorted(Settings.model_fields))}"
        )
        raise ConfigurationError(
            f"Configuration validation failed for {field!r}: {msg}", hint=hint
        ) from e

    cfg = Config(**settings.model_dump())
    log.debug("Resolved config: %s", cfg)
    return cfg


@cache
def _env_config() -> Config:
    return resolve_config()


def clear_config_cache() -> None:
    """Forget the environment-resolved config so the next read re-resolves it."""
    _env_config.cache_clear()
    _env_config_or_default.cache_clear()


def current_config() -> Config:
    """Return the ambient config, falling back to the environment."""
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient
    return _env_config()


@cache
def _env_config_or_default() -> Config:
    try:
        return _env_config()
    except ConfigurationError as exc:
        log.warning("Invalid fts_result configuration, using defaults: %s", exc)
        return Config()


def current_config_or_default() -> Config:
    """Return the ambient config, the environment config, or the defaults.

    Unlike ``current_config`` this never raises: an invalid environment is
    logged once and replaced by ``Config()``. Used on code paths that must
    stay total, such as ``from_exception`` and ``from_nullable``.
    """
    ambient = _AMBIENT.get()
    if ambient is not None:
        return ambient
    return _env_config_or_default()


@contextmanager
def config_scope(
    cfg_or_overrides: Mapping[str, Any] | Config | None = None,
    **overrides: object,
) -> Generator[Config]:
    """Run a block with a specific ambient configuration.

    Args:
        cfg_or_overrides: A ``Config`` to use as-is, or a mapping of overrides
            applied on top of the environment.
        **overrides: Extra overrides merged over a mapping argument.

    Yields:
        The ``Config`` active inside the block.

    Example:
        with config_scope(nullable_policy="none"):
            assert from_nullable(0, "missing") == Ok(0)
    """
    if isinstance(cfg_or_overrides, Config):
        cfg = cfg_or_overrides
    else:
        cfg = resolve_config({**(cfg_or_overrides or {}), **overrides})

    token = _AMBIENT.set(cfg)
    try:
        yield cfg
    finally:
        _AMBIENT.reset(token)
