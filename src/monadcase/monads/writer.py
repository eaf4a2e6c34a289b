"""Writer monad: a value paired with a log accumulated through a Monoid.

``bind`` hands the continuation the current value plus a ``make`` helper bound
to the receiver's monoid, so the continuation cannot pair mismatched monoids by
accident. Logs are combined as ``combine(old, new)``. That keeps temporal order
for non-commutative logs (strings, lists, tuples).

Example:
    >>> from monadcase.monads.monoid import TUPLE_CONCAT
    >>> def factorial(n: int) -> Writer[tuple[str, ...], int]:
    ...     if n == 1:
    ...         return Writer.of(1, TUPLE_CONCAT).tell(("fac(1)=1",))
    ...     return factorial(n - 1).bind(
    ...         lambda prev, make: make(prev * n, (f"fac({n})={prev * n}",)))
    >>> factorial(3).run()
    (6, ('fac(1)=1', 'fac(2)=2', 'fac(3)=6'))
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from ..foundation.errors import MonoidMismatchError
from ..foundation.logging import get_logger
from .monoid import Monoid, ensure_monoid

W = TypeVar("W")
A = TypeVar("A")
B = TypeVar("B")

Make = Callable[[B, W], "Writer[W, B]"]

logger = get_logger("monads.writer")


class Writer(Generic[W, A]):
    """Immutable (value, log, monoid) triple."""

    __slots__ = ("_value", "_log", "_monoid")

    def __init__(self, value: A, log: W, monoid: Monoid[W]) -> None:
        """Private constructor. Use Writer.of() or the ``make`` helper given to bind."""
        self._value = value
        self._log = log
        self._monoid = monoid

    @staticmethod
    def of(value: A, monoid: Monoid[W]) -> Writer[W, A]:
        """Start a Writer with an empty (identity) log."""
        ensure_monoid(monoid)
        return Writer(value, monoid.pure, monoid)

    # ─── Accessors ───────────────────────────────────────────────────

    @property
    def value(self) -> A:
        return self._value

    @property
    def log(self) -> W:
        return self._log

    @property
    def monoid(self) -> Monoid[W]:
        return self._monoid

    def run(self) -> tuple[A, W]:
        """Extract (value, log)."""
        return self._value, self._log

    # ─── Monad Operations ────────────────────────────────────────────

    def _make(self, value: B, log: W) -> Writer[W, B]:
        return Writer(value, log, self._monoid)

    def bind(self, f: Callable[[A, Make[Any, W]], Writer[W, B]]) -> Writer[W, B]:
        """Call f(value, make) and append its log after the current one.

        Raises:
            TypeError: If f does not return a Writer
            MonoidMismatchError: If f returns a Writer over a different monoid
        """
        result = f(self._value, self._make)
        if not isinstance(result, Writer):
            raise TypeError(f"Writer.bind continuation must return a Writer, got {type(result).__name__}")
        if result._monoid is not self._monoid and result._monoid != self._monoid:
            logger.warning("Writer.bind monoid mismatch: %r vs %r", self._monoid, result._monoid)
            raise MonoidMismatchError.create(
                "Writer.bind continuation returned a Writer over a different monoid",
                details=f"receiver={self._monoid!r} result={result._monoid!r}",
            )
        return Writer(result._value, self._monoid.combine(self._log, result._log), self._monoid)

    def map(self, f: Callable[[A], B]) -> Writer[W, B]:
        """Transform the value; the log is untouched."""
        return Writer(f(self._value), self._log, self._monoid)

    def tell(self, entry: W) -> Writer[W, A]:
        """Append entry to the log."""
        return Writer(self._value, self._monoid.combine(self._log, entry), self._monoid)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Writer):
            return NotImplemented
        return (self._value, self._log) == (other._value, other._log) and self._monoid == other._monoid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Writer(value={self._value!r}, log={self._log!r})"
