"""Monad capability contract.

Containers satisfy this structurally; none of them inherits from it.

Laws (for a container M with unit ``pure``):
- Left identity:  pure(a).bind(f) == f(a)
- Right identity: m.bind(pure) == m
- Associativity:  m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))
- map(f) == bind(lambda x: pure(f(x)))
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

A = TypeVar("A", covariant=True)


@runtime_checkable
class Monad(Protocol[A]):
    """Structural interface shared by Option, Either, Try, IO, Writer and List."""

    def bind(self, f: Callable[..., Any]) -> Monad[Any]: ...
    def map(self, f: Callable[[Any], Any]) -> Monad[Any]: ...


def is_monad(obj: object) -> bool:
    """True if obj exposes callable bind and map."""
    return isinstance(obj, Monad)
