"""Result type: explicit success/failure values instead of raised exceptions.

A ``Result`` is either ``Ok(value)`` or ``Err(err)``. Failures travel as
ordinary values through ``fmap``/``bind``/``seq``/``then`` until something
eliminates them (``unbox``, ``from_err``) or asserts they cannot happen
(``from_ok``). Every combinator is total: none of them raises on its own
account, and none of them calls its callback on the short-circuit branch.

Example:
    def parse(text: str) -> Result[str, int]:
        return Ok(int(text)) if text.isdigit() else Err(f"not a number: {text}")

    message = unbox(
        parse("5").fmap(lambda v: v + 2),
        lambda v: f"got {v}",
        lambda e: f"failed: {e}",
    )
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from typing import TYPE_CHECKING, ClassVar, Literal, NoReturn, TypeGuard, assert_never

from fts_result.config import NullablePolicy, current_config_or_default
from fts_result.errors import ConfigurationError, UnwrapError
from fts_result.protocols import Monad

if TYPE_CHECKING:
    from collections.abc import Callable

    from fts_result.protocols import ErrMapFunction, FmapFunction

log = logging.getLogger(__name__)

E = typing.TypeVar("E")
V = typing.TypeVar("V")


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E](Monad[typing.Any]):
    """A failed result carrying the error payload ``err``.

    ``err`` is usually an exception instance, but any value is allowed.
    Absorbing under ``fmap``, ``bind``, ``seq`` and ``then``.
    """

    err: E
    kind: ClassVar[Literal["Err"]] = "Err"

    def fmap(
        self,
        fmap_function: FmapFunction[typing.Any, typing.Any],  # noqa: ARG002
    ) -> Err[E]:
        """Return a copy of this failure; ``fmap_function`` is not called."""
        return Err(self.err)

    def map_err[Eo](self, err_map_function: ErrMapFunction[E, Eo]) -> Err[Eo]:
        """Return ``Err(err_map_function(err))``."""
        return Err(err_map_function(self.err))

    def bind(
        self,
        bind_function: Callable[[typing.Any], typing.Any],  # noqa: ARG002
    ) -> Err[E]:
        """Return a copy of this failure; ``bind_function`` is not called."""
        return Err(self.err)

    def seq(
        self,
        sequence_function: Callable[[], typing.Any],  # noqa: ARG002
    ) -> Err[E]:
        """Return a copy of this failure; ``sequence_function`` is not called."""
        return Err(self.err)

    def then(
        self,
        bind_or_sequence_function: Callable[..., typing.Any],  # noqa: ARG002
    ) -> Err[E]:
        """Return a copy of this failure; the function is not called."""
        return Err(self.err)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[V](Monad[V]):
    """A successful result carrying ``value``.

    Absorbing under ``map_err``. ``then`` is the default from ``Monad``:
    it dispatches to ``bind`` or ``seq`` depending on the callable's arity.
    """

    value: V
    kind: ClassVar[Literal["Ok"]] = "Ok"

    def fmap[Vo](self, fmap_function: FmapFunction[V, Vo]) -> Ok[Vo]:
        """Return ``Ok(fmap_function(value))``."""
        return Ok(fmap_function(self.value))

    def map_err(
        self,
        err_map_function: Callable[[typing.Any], typing.Any],  # noqa: ARG002
    ) -> Ok[V]:
        """Return a copy of this success; ``err_map_function`` is not called."""
        return Ok(self.value)

    def bind[Eo, Vo](
        self, bind_function: Callable[[V], Result[Eo, Vo]]
    ) -> Result[Eo, Vo]:
        """Return ``bind_function(value)`` as-is, without rewrapping."""
        return bind_function(self.value)

    def seq[Eo, Vo](
        self, sequence_function: Callable[[], Result[Eo, Vo]]
    ) -> Result[Eo, Vo]:
        """Return ``sequence_function()``, ignoring the value."""
        return sequence_function()


Result = Err[E] | Ok[V]

# Exceptions are the most common error payload
ResultError = Err[Exception] | Ok[V]

ResultErrorInt = ResultError[int]
ResultErrorFloat = ResultError[float]
ResultErrorStr = ResultError[str]
ResultErrorBool = ResultError[bool]


def is_result(obj: object) -> TypeGuard[Result[typing.Any, typing.Any]]:
    """Return True if ``obj`` is an ``Ok`` or an ``Err``."""
    return isinstance(obj, Ok | Err)


def is_ok[E, V](result: Result[E, V]) -> bool:
    """Return True if ``result`` is an ``Ok``."""
    return isinstance(result, Ok)


def is_err[E, V](result: Result[E, V]) -> bool:
    """Return True if ``result`` is an ``Err``."""
    return not is_ok(result)


def unbox[E, V, R](
    result: Result[E, V],
    ok_callback: Callable[[V], R],
    err_callback: Callable[[E], R],
) -> R:
    """Eliminate a result by calling exactly one of two callbacks.

    Both callbacks must return the same type; use a union when the branches
    are naturally different::

        value_or_none: int | None = unbox(result, lambda v: v, lambda e: None)
    """
    match result:
        case Ok(value):
            return ok_callback(value)
        case Err(err):
            return err_callback(err)
        case _:
            assert_never(result)


def from_nullable[E, V](
    nullable: V | None,
    error_if_null: E,
    *,
    policy: NullablePolicy | None = None,
) -> Result[E, V]:
    """Build a result from a value that may be missing.

    With the default ``"truthy"`` policy *any* falsy value counts as missing,
    so ``0``, ``""``, ``False`` and empty containers become ``Err`` as well as
    ``None``. Pass ``policy="none"`` (or set ``FTS_RESULT_NULLABLE_POLICY=none``)
    to treat only ``None`` as missing. An invalid environment setting falls
    back to ``"truthy"``.

    Raises:
        ConfigurationError: If ``policy`` is not a known policy name.
    """
    if policy is not None:
        effective = policy
    else:
        effective = current_config_or_default().nullable_policy
    if effective == "truthy":
        present = bool(nullable)
    elif effective == "none":
        present = nullable is not None
    else:
        raise ConfigurationError(
            f"Unknown nullable policy: {effective!r}",
            hint="Supported policies: 'truthy', 'none'",
        )
    return Ok(typing.cast("V", nullable)) if present else Err(error_if_null)


def from_exception[V](
    exception_raising_function: Callable[[], V],
    *,
    catch: type[Exception] | tuple[type[Exception], ...] = Exception,
) -> Result[Exception, V]:
    """Run a function that reports errors by raising, and capture the outcome.

    Returns ``Ok`` with the return value, or ``Err`` holding the exception
    instance that was raised. Exceptions not matching ``catch`` propagate, as
    do ``KeyboardInterrupt`` and ``SystemExit``.

    Use this only where the error will actually be handled later. Some
    exceptions should go unhandled and terminate the program.
    """
    try:
        value = exception_raising_function()
    except catch as exc:
        log.debug(
            "from_exception captured %s: %s",
            type(exc).__name__,
            exc,
            exc_info=current_config_or_default().log_captured_exceptions,
        )
        return Err(exc)
    return Ok(value)


def _identity[T](x: T) -> T:
    return x


def _raise_err(err: object) -> NoReturn:
    if isinstance(err, BaseException):
        # Drop frames left by earlier raises of this shared instance
        raise err.with_traceback(None)
    raise UnwrapError(
        f"from_ok was called with an Err Result: {err!r}",
        hint="Check is_ok(result) first, or use unbox() to handle both cases.",
        err=err,
    )


def _raise_ok(value: object) -> NoReturn:
    del value
    raise UnwrapError(
        "from_err was called with an Ok Result",
        hint="Check is_err(result) first, or use unbox() to handle both cases.",
    )


def from_ok[E, V](result: Result[E, V]) -> V:
    """Return the value of an ``Ok``; raise the payload of an ``Err``.

    Use only where an ``Err`` here would be a programming error. An exception
    payload is raised as the same instance, with its traceback reset so
    repeated unwraps of one ``Err`` do not accumulate frames. Any other
    payload is wrapped in ``UnwrapError`` (available as ``.err``).

    Raises:
        BaseException: The ``Err`` payload, when it is an exception.
        UnwrapError: When the ``Err`` payload is not an exception.
    """
    return unbox(result, _identity, _raise_err)


def from_err[E, V](result: Result[E, V]) -> E:
    """Return the payload of an ``Err``.

    Raises:
        UnwrapError: If ``result`` is an ``Ok``. This is a fresh diagnostic
            error, never the ``Ok`` value.
    """
    return unbox(result, _raise_ok, _identity)
