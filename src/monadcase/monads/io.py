"""IO monad: a deferred, re-runnable computation.

Building and composing IO values never runs anything. Only ``run_unsafe()``
executes the chain, and it re-executes the whole chain on every call.

Example:
    >>> calls = []
    >>> program = IO.of(1).bind(lambda v: IO.from_thunk(lambda: calls.append(v) or v + 1))
    >>> calls
    []
    >>> program.run_unsafe(), program.run_unsafe(), calls
    (2, 2, [1, 1])
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class IO(Generic[A]):
    """Wraps a nullary effect. Equality is identity: effects are not comparable."""

    __slots__ = ("_effect",)

    def __init__(self, effect: Callable[[], A]) -> None:
        self._effect = effect

    @staticmethod
    def of(value: A) -> IO[A]:
        """Deferred computation that yields value."""
        return IO(lambda: value)

    @staticmethod
    def from_thunk(thunk: Callable[[], A]) -> IO[A]:
        """Deferred computation that calls thunk when run."""
        return IO(thunk)

    def bind(self, f: Callable[[A], IO[B]]) -> IO[B]:
        effect = self._effect
        return IO(lambda: f(effect()).run_unsafe())

    def map(self, f: Callable[[A], B]) -> IO[B]:
        effect = self._effect
        return IO(lambda: f(effect()))

    def run_unsafe(self) -> A:
        """Execute the effect chain. Not memoized."""
        return self._effect()

    def __repr__(self) -> str:
        return f"IO({getattr(self._effect, '__qualname__', repr(self._effect))})"
