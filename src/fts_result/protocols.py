"""Capability protocols satisfied by the Result variants.

``Functor`` is a structure that can be transformed by a function; ``Monad``
adds dependent chaining. Implementations must honor the laws documented on
each method. These are obligations, not runtime checks.
"""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

type FmapFunction[Vi, Vo] = Callable[[Vi], Vo]
type BindFunction[Vi, Vo] = Callable[[Vi], Monad[Vo]]
type SequenceFunction[Vo] = Callable[[], Monad[Vo]]
type ErrMapFunction[Ei, Eo] = Callable[[Ei], Eo]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@runtime_checkable
class Functor[V](Protocol):
    """A structure transformable via a function.

    Laws:
        identity: ``m.fmap(lambda x: x) == m``
        composition: ``m.fmap(f).fmap(g) == m.fmap(lambda x: g(f(x)))``
    """

    __slots__ = ()

    def fmap[Vo](self, fmap_function: FmapFunction[V, Vo]) -> Functor[Vo]:
        """Apply ``fmap_function`` to the contents, keeping the structure."""
        ...


@runtime_checkable
class Monad[V](Functor[V], Protocol):
    """A chainable computation.

    Laws:
        left identity: ``unit(v).bind(f) == f(v)``
        right identity: ``m.bind(unit) == m``
        associativity: ``m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))``

    Implementers supply ``bind`` and ``seq``; ``then`` has a default built on
    top of them.
    """

    __slots__ = ()

    def bind[Vo](self, bind_function: BindFunction[V, Vo]) -> Monad[Vo]:
        """Feed the contents to ``bind_function`` and return its result."""
        ...

    def seq[Vo](self, sequence_function: SequenceFunction[Vo]) -> Monad[Vo]:
        """Run ``sequence_function`` after this step, ignoring the contents."""
        ...

    def then[Vo](
        self, bind_or_sequence_function: BindFunction[V, Vo] | SequenceFunction[Vo]
    ) -> Monad[Vo]:
        """Chain with either a value-consuming or a no-argument function."""
        return default_then(self, bind_or_sequence_function)


def accepts_value(fn: Callable[..., Any]) -> bool:
    """Return True if ``fn`` declares at least one required positional parameter.

    Parameters with defaults and ``*args`` do not count. Callables whose
    signature cannot be inspected (some builtins) are assumed to take the
    value.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return True
    return any(
        p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
        for p in signature.parameters.values()
    )


def default_then[V, Vo](
    monad: Monad[V],
    bind_or_sequence_function: BindFunction[V, Vo] | SequenceFunction[Vo],
) -> Monad[Vo]:
    """Dispatch ``then`` to ``bind`` or ``seq`` based on the callable's arity."""
    if accepts_value(bind_or_sequence_function):
        return monad.bind(bind_or_sequence_function)  # type: ignore[arg-type]
    return monad.seq(bind_or_sequence_function)  # type: ignore[arg-type]
