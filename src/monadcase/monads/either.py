"""Either monad: success (Right) or failure carrying a payload (Left).

Left is always built explicitly by the caller. Either never converts a raised
exception into a Left; use Try for that.

Example:
    >>> def divide(a: float, b: float) -> Either[str, float]:
    ...     return Left("cannot divide by zero") if b == 0 else Right(a / b)
    >>> divide(10, 2).map(lambda x: x * 2).get_or_else(-1.0)
    10.0
    >>> divide(10, 0).ensure("too small")(lambda x: x > 1).match(
    ...     if_left=str, if_right=lambda x: f"ok {x}")
    'cannot divide by zero'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, overload

if TYPE_CHECKING:
    from .option import Option

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
D = TypeVar("D")


class Either(Generic[L, R]):
    """Tagged union of Left(L) and Right(R). Exactly one channel is populated."""

    __slots__ = ("_value", "_is_right")
    __match_args__ = ("_value",)

    def __init__(self, value: L | R, is_right: bool) -> None:
        """Private constructor. Use Left()/Right() or Either.as_left()/as_right()."""
        self._value = value
        self._is_right = is_right

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def as_right(value: R) -> Either[L, R]:
        return Either(value, True)

    @staticmethod
    def as_left(value: L) -> Either[L, R]:
        return Either(value, False)

    @staticmethod
    def from_option(opt: Option[R], left: L) -> Either[L, R]:
        """Some(v) becomes Right(v); Nothing becomes Left(left)."""
        return opt.match(if_some=Either.as_right, if_none=lambda: Either.as_left(left))

    # ─── Type Checking ───────────────────────────────────────────────

    def is_right(self) -> bool:
        return self._is_right

    def is_left(self) -> bool:
        return not self._is_right

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, if_left: Callable[[L], D], if_right: Callable[[R], D]) -> D:
        """Exhaustive case analysis. Both handlers are required."""
        return if_right(self._value) if self._is_right else if_left(self._value)  # type: ignore[arg-type]

    # ─── Monad Operations ────────────────────────────────────────────

    def bind(self, f: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """Right: adopt f's result. Left: propagate the payload without calling f."""
        if self._is_right:
            return f(self._value)  # type: ignore[arg-type]
        return Either(self._value, False)

    def map(self, f: Callable[[R], T]) -> Either[L, T]:
        return self.bind(lambda value: Either.as_right(f(value)))

    # ─── Value Extraction & Alternatives ─────────────────────────────

    def get_or_else(self, default: R) -> R:
        return self._value if self._is_right else default  # type: ignore[return-value]

    def or_else(self, fallback: Callable[[], Either[L, R]]) -> Either[L, R]:
        """Right returns itself; Left evaluates fallback."""
        return self if self._is_right else fallback()

    # ─── Validation ──────────────────────────────────────────────────

    @overload
    def ensure(self, left: L) -> Callable[[Callable[[R], bool]], Either[L, R]]: ...

    @overload
    def ensure(self, left: L, predicate: Callable[[R], bool]) -> Either[L, R]: ...

    def ensure(
        self,
        left: L,
        predicate: Callable[[R], bool] | None = None,
    ) -> Either[L, R] | Callable[[Callable[[R], bool]], Either[L, R]]:
        """Downgrade a Right to Left(left) when predicate fails.

        Curried: ``ensure(left)(predicate)``, or ``ensure(left, predicate)``.
        On Left the same instance comes back and predicate is never called.

        Example:
            >>> Right(5).ensure("bad")(lambda x: x > 10)
            Left('bad')
            >>> Right(5).ensure("bad", lambda x: x > 0)
            Right(5)
        """
        def check(pred: Callable[[R], bool]) -> Either[L, R]:
            if not self._is_right:
                return self
            return self if pred(self._value) else Either(left, False)  # type: ignore[arg-type]

        return check if predicate is None else check(predicate)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_right == other._is_right and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_right, self._value))

    def __repr__(self) -> str:
        return f"{'Right' if self._is_right else 'Left'}({self._value!r})"


def Right(value: R) -> Either[L, R]:  # noqa: N802
    """Construct Right variant (success)."""
    return Either(value, True)


def Left(value: L) -> Either[L, R]:  # noqa: N802
    """Construct Left variant (failure)."""
    return Either(value, False)
