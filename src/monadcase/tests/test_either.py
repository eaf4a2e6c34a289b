"""Tests for the Either monad."""

from __future__ import annotations

from typing import Callable

import pytest

from monadcase.monads import Either, Left, Right, Some, nothing


def _never(_: object) -> Either[str, int]:
    raise AssertionError("must not be called")


def divide(a: float, b: float) -> Either[str, float]:
    return Left("Cannot divide by zero") if b == 0 else Right(a / b)


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_laws() -> None:
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    assert Right(4).map(lambda x: x) == Right(4)
    assert Left("e").map(lambda x: x) == Left("e")
    assert Right(4).map(lambda x: f(g(x))) == Right(4).map(g).map(f)


def test_monad_laws() -> None:
    f: Callable[[int], Either[str, int]] = lambda x: Right(x + 1)
    g: Callable[[int], Either[str, int]] = lambda x: Right(x * 2) if x < 100 else Left("too big")
    m: Either[str, int] = Right(5)

    assert Either.as_right(5).bind(f) == f(5)
    assert m.bind(Either.as_right) == m
    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


# ═════════════════════════════════════════════════════════════════════════════
# Operational Tests
# ═════════════════════════════════════════════════════════════════════════════


def test_constructors() -> None:
    assert Either.as_left(1).is_left()
    assert Either.as_right(1).is_right()
    assert Left(1) == Either.as_left(1)
    assert Right(1) != Left(1)


def test_left_bind_short_circuits() -> None:
    """Left propagates its payload and never invokes the function."""
    result = Either.as_left("e").bind(_never)
    assert result == Left("e")


def test_railway() -> None:
    assert divide(10, 2).bind(lambda x: divide(x, 5)) == Right(1.0)
    assert divide(10, 0).bind(lambda x: divide(x, 5)) == Left("Cannot divide by zero")


def test_ensure() -> None:
    assert Either.as_right(5).ensure("bad")(lambda x: x > 10) == Left("bad")
    assert Either.as_right(5).ensure("bad")(lambda x: x > 0) == Right(5)
    assert Right(5).ensure("bad", lambda x: x > 10) == Left("bad")


def test_ensure_on_left_is_noop() -> None:
    left: Either[str, int] = Left("original")
    assert left.ensure("other")(_never) is left


def test_ensure_keeps_same_right_instance() -> None:
    right: Either[str, int] = Right(5)
    assert right.ensure("bad")(lambda x: x == 5) is right


def test_from_option() -> None:
    assert Either.from_option(Some(3), -1) == Right(3)
    assert Either.from_option(nothing(), -1) == Left(-1)


def test_get_or_else() -> None:
    assert Right(3).get_or_else(-1) == 3
    assert Left(3).get_or_else(-1) == -1


def test_or_else() -> None:
    calls: list[int] = []

    def fallback() -> Either[int, int]:
        calls.append(1)
        return Right(42)

    assert Left(0).or_else(fallback) == Right(42)
    assert Right(7).or_else(fallback) == Right(7)
    assert calls == [1]


def test_match() -> None:
    render = lambda e: e.match(if_left=lambda err: f"error: {err}", if_right=lambda v: f"value is {v}")  # noqa: E731
    assert render(divide(5, 0)) == "error: Cannot divide by zero"
    assert render(divide(5, 2)) == "value is 2.5"


def test_no_automatic_capture() -> None:
    """Unlike Try, Either lets caller exceptions escape."""
    with pytest.raises(ValueError):
        Right("x").map(int)


def test_repr() -> None:
    assert repr(Right(5)) == "Right(5)"
    assert repr(Left("e")) == "Left('e')"
