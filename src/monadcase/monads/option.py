"""Option monad: a value that may be absent.

Every Option is either ``Some(value)`` or the canonical empty value
``Nothing``. ``Nothing`` is one shared instance for every element type and is
only reachable through ``Option.none()`` / ``nothing()``.

Absence is represented, never raised: Option does not throw on its own, and it
does not catch exceptions raised by the functions you pass it.

Example:
    >>> def safe_div(a: float, b: float) -> Option[float]:
    ...     return nothing() if b == 0 else Some(a / b)
    >>> safe_div(10, 2).map(lambda x: x + 1).get_or_else(0.0)
    6.0
    >>> safe_div(10, 0).map(lambda x: x + 1).get_or_else(0.0)
    0.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

A = TypeVar("A")
B = TypeVar("B")
D = TypeVar("D")


class Option(Generic[A]):
    """Tagged union of Some(value) and Nothing.

    ``match`` is the extraction primitive; every other accessor is defined
    through it or through ``bind``.
    """

    __slots__ = ("_value", "_is_some")
    __match_args__ = ("_value",)

    def __init__(self, value: A | None, is_some: bool) -> None:
        """Private constructor. Use Some(), Option.pure() or Option.none()."""
        self._value = value if is_some else None
        self._is_some = is_some

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def pure(value: A) -> Option[A]:
        """Wrap value in Some."""
        return Option(value, True)

    @staticmethod
    def none() -> Option[A]:
        """The shared Nothing instance."""
        return _NOTHING

    @staticmethod
    def from_nullable(value: A | None) -> Option[A]:
        """None becomes Nothing, anything else Some(value)."""
        return _NOTHING if value is None else Option(value, True)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_some(self) -> bool:
        return self._is_some

    def is_none(self) -> bool:
        return not self._is_some

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, if_some: Callable[[A], D], if_none: Callable[[], D]) -> D:
        """Exhaustive case analysis. Both handlers are required."""
        return if_some(self._value) if self._is_some else if_none()  # type: ignore[arg-type]

    # ─── Monad Operations ────────────────────────────────────────────

    def bind(self, f: Callable[[A], Option[B]]) -> Option[B]:
        """Apply f to the value and flatten. Nothing short-circuits to Nothing."""
        return self.match(if_some=f, if_none=Option.none)

    def map(self, f: Callable[[A], B]) -> Option[B]:
        """Transform the value, keeping the Some/Nothing shape."""
        return self.bind(lambda value: Option.pure(f(value)))

    # ─── Value Extraction ────────────────────────────────────────────

    def get_or_else(self, default: A) -> A:
        return self.match(if_some=lambda value: value, if_none=lambda: default)

    def or_else(self, fallback: Callable[[], Option[A]]) -> Option[A]:
        """Return self if Some, else evaluate fallback (only on Nothing)."""
        return self.match(if_some=lambda _: self, if_none=fallback)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_some

    def __iter__(self) -> Iterator[A]:
        """Yields the value if Some, nothing otherwise."""
        if self._is_some:
            yield self._value  # type: ignore[misc]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._is_some == other._is_some and (not self._is_some or self._value == other._value)

    def __hash__(self) -> int:
        return hash((self._is_some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})" if self._is_some else "Nothing"


_NOTHING: Option = Option(None, False)


def Some(value: A) -> Option[A]:  # noqa: N802
    """Construct Some variant."""
    return Option(value, True)


def nothing() -> Option[A]:
    """The shared Nothing instance."""
    return _NOTHING
