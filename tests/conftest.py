"""Pytest configuration and fixtures.

Provides environment isolation, config-cache resets and a call-counting
spy. Fixtures here are autouse unless noted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import TYPE_CHECKING, Any

import pytest

from fts_result import config as config_module

if TYPE_CHECKING:
    from collections.abc import Callable

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class Spy:
    """Callable test double that records every call.

    Returns ``fn(*args)`` when ``fn`` is set, otherwise ``returns``. Note that
    its signature is ``(*args)``, so ``then()`` treats it as a no-argument
    function; wrap it in a lambda to exercise the value-consuming path.
    """

    returns: Any = None
    fn: Callable[..., Any] | None = None
    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        if self.fn is not None:
            return self.fn(*args)
        return self.returns

    @property
    def call_count(self) -> int:
        return len(self.calls)


@pytest.fixture
def spy() -> Callable[..., Spy]:
    """Return a factory for ``Spy`` instances (not autouse)."""

    def _make(returns: Any = None, fn: Callable[..., Any] | None = None) -> Spy:
        return Spy(returns=returns, fn=fn)

    return _make


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    monkeypatch.setattr(config_module, "load_dotenv", lambda *_a, **_kw: False)


@pytest.fixture(autouse=True)
def isolate_result_env(request, monkeypatch):
    """Clear FTS_RESULT_* variables so each test starts from defaults.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith(config_module.ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def fresh_config_cache():
    """Re-resolve configuration for every test."""
    config_module.clear_config_cache()
    config_module._load_dotenv_once.cache_clear()
    yield
    config_module.clear_config_cache()
    config_module._load_dotenv_once.cache_clear()
