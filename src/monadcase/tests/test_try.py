"""Tests for the Try monad: catch boundaries at every combinator."""

from __future__ import annotations

import logging
from typing import Callable

import pytest

from monadcase.monads import Failure, Success, Try


def raiser(_: object) -> Try[int, Exception]:
    raise ValueError("boom")


# ═════════════════════════════════════════════════════════════════════════════
# Laws (Success branch)
# ═════════════════════════════════════════════════════════════════════════════


def test_monad_laws() -> None:
    f: Callable[[int], Try[int, Exception]] = lambda x: Success(x + 1)
    g: Callable[[int], Try[int, Exception]] = lambda x: Success(x * 2)
    m = Success(5)

    assert Try.pure(5).bind(f) == f(5)
    assert m.bind(Try.pure) == m
    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


def test_functor_laws() -> None:
    f: Callable[[int], int] = lambda x: x + 1
    g: Callable[[int], int] = lambda x: x * 2
    assert Success(3).map(lambda x: x) == Success(3)
    assert Success(3).map(lambda x: f(g(x))) == Success(3).map(g).map(f)


# ═════════════════════════════════════════════════════════════════════════════
# Catch Boundaries
# ═════════════════════════════════════════════════════════════════════════════


def test_bind_captures() -> None:
    result = Success(1).bind(raiser)
    assert result.is_failure()
    error = result.match(if_success=lambda _: None, if_failure=lambda e: e)
    assert isinstance(error, ValueError)
    assert str(error) == "boom"


def test_map_captures() -> None:
    result = Success(0).map(lambda x: 1 / x)
    assert result.is_failure()
    assert isinstance(result.match(if_success=lambda _: None, if_failure=lambda e: e), ZeroDivisionError)


def test_failure_short_circuits() -> None:
    err = RuntimeError("first")
    calls: list[int] = []
    result = Failure(err).bind(lambda x: Success(calls.append(x)))
    assert result == Failure(err)
    assert Failure(err).map(lambda x: calls.append(x)) == Failure(err)
    assert calls == []


def test_error_preserved_untransformed() -> None:
    err = KeyError("k")
    result = Success({}).map(lambda d: d["k"])
    captured = result.match(if_success=lambda _: None, if_failure=lambda e: e)
    assert type(captured) is KeyError
    assert Failure(err).bind(raiser).match(if_success=lambda _: None, if_failure=lambda e: e) is err


def test_recover() -> None:
    assert Failure("oops").recover(len) == Success(4)
    assert Success(1).recover(len) == Success(1)


def test_recover_captures() -> None:
    result = Failure("oops").recover(lambda e: int(e))
    assert result.is_failure()
    assert isinstance(result.match(if_success=lambda _: None, if_failure=lambda e: e), ValueError)


def test_recover_with() -> None:
    assert Failure("oops").recover_with(lambda e: Success(e.upper())) == Success("OOPS")
    assert Failure("oops").recover_with(lambda e: Failure(f"still {e}")) == Failure("still oops")
    assert Success(2).recover_with(lambda e: Success(0)) == Success(2)
    assert Failure("x").recover_with(raiser).is_failure()


def test_get_or_else() -> None:
    assert Success(3).get_or_else(-1) == 3
    assert Failure("e").get_or_else(-1) == -1


def test_attempt() -> None:
    assert Try.attempt(int, "42") == Success(42)
    assert Try.attempt(int, "forty-two").is_failure()
    assert Try.attempt(lambda a, b: a + b, 1, b=2) == Success(3)


def test_base_exceptions_escape() -> None:
    def interrupt(_: int) -> Try[int, Exception]:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        Success(1).bind(interrupt)


def test_captures_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="monadcase")
    Success(1).bind(raiser)
    assert any("Try.bind captured ValueError" in r.getMessage() for r in caplog.records)


def test_capture_logging_can_be_disabled(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    monkeypatch.setenv("MONADCASE_LOG_CAPTURED_ERRORS", "false")
    caplog.set_level(logging.DEBUG, logger="monadcase")
    assert Success(1).bind(raiser).is_failure()
    assert not [r for r in caplog.records if r.name == "monadcase.monads.try"]


def test_repr() -> None:
    assert repr(Success(1)) == "Success(1)"
    assert repr(Failure("e")) == "Failure('e')"
