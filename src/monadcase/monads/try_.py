"""Try monad: a computation that either produced a value or raised.

Unlike Either, Failure is produced automatically: every combinator that runs
caller code (bind, map, recover, recover_with, attempt) is a catch boundary.
Any ``Exception`` raised there becomes ``Failure(exc)``, and the exception object
is kept as is. ``BaseException`` subclasses outside ``Exception``
(KeyboardInterrupt, SystemExit) are never caught.

Example:
    >>> Try.attempt(int, "42").map(lambda n: n * 2).get_or_else(0)
    84
    >>> Try.attempt(int, "nope").map(lambda n: n * 2).get_or_else(0)
    0
    >>> Try.attempt(int, "nope").recover(lambda e: -1)
    Success(-1)
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from ..foundation.config import get_settings
from ..foundation.logging import get_logger

A = TypeVar("A")
B = TypeVar("B")
E = TypeVar("E")
D = TypeVar("D")

logger = get_logger("monads.try")


def _captured(where: str, exc: Exception) -> Try[Any, Any]:
    if get_settings().log_captured_errors:
        logger.debug("Try.%s captured %s: %s", where, type(exc).__name__, exc)
    return Try(exc, False)


class Try(Generic[A, E]):
    """Tagged union of Success(value) and Failure(error)."""

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_value",)

    def __init__(self, value: A | E, is_success: bool) -> None:
        """Private constructor. Use Success()/Failure(), Try.pure() or Try.attempt()."""
        self._value = value
        self._is_success = is_success

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def pure(value: A) -> Try[A, Any]:
        return Try(value, True)

    @staticmethod
    def attempt(fn: Callable[..., A], *args: Any, **kwargs: Any) -> Try[A, Exception]:
        """Run fn(*args, **kwargs) under a catch boundary."""
        try:
            return Try(fn(*args, **kwargs), True)
        except Exception as exc:
            return _captured("attempt", exc)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, if_success: Callable[[A], D], if_failure: Callable[[E], D]) -> D:
        """Exhaustive case analysis. Handlers run outside any catch boundary."""
        return if_success(self._value) if self._is_success else if_failure(self._value)  # type: ignore[arg-type]

    # ─── Monad Operations ────────────────────────────────────────────

    def bind(self, f: Callable[[A], Try[B, E]]) -> Try[B, E]:
        """Success: call f, capturing anything it raises. Failure: new Failure, f not called."""
        if not self._is_success:
            return Try(self._value, False)
        try:
            return f(self._value)  # type: ignore[arg-type]
        except Exception as exc:
            return _captured("bind", exc)

    def map(self, f: Callable[[A], B]) -> Try[B, E]:
        if not self._is_success:
            return Try(self._value, False)
        try:
            return Try(f(self._value), True)  # type: ignore[arg-type]
        except Exception as exc:
            return _captured("map", exc)

    # ─── Recovery ────────────────────────────────────────────────────

    def get_or_else(self, default: A) -> A:
        return self._value if self._is_success else default  # type: ignore[return-value]

    def recover(self, f: Callable[[E], A]) -> Try[A, E]:
        """Failure: Success(f(error)), or Failure if f raises. Success: unchanged."""
        if self._is_success:
            return self
        try:
            return Try(f(self._value), True)  # type: ignore[arg-type]
        except Exception as exc:
            return _captured("recover", exc)

    def recover_with(self, f: Callable[[E], Try[A, E]]) -> Try[A, E]:
        """Like recover, but f returns a Try directly."""
        if self._is_success:
            return self
        try:
            return f(self._value)  # type: ignore[arg-type]
        except Exception as exc:
            return _captured("recover_with", exc)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_success

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_success, self._value))

    def __repr__(self) -> str:
        return f"{'Success' if self._is_success else 'Failure'}({self._value!r})"


def Success(value: A) -> Try[A, Any]:  # noqa: N802
    """Construct Success variant."""
    return Try(value, True)


def Failure(error: E) -> Try[Any, E]:  # noqa: N802
    """Construct Failure variant."""
    return Try(error, False)
