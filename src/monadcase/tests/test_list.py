"""Tests for the persistent linked List."""

from __future__ import annotations

import pytest

from monadcase.foundation.config import clear_settings_cache
from monadcase.monads import List, Pair, empty


def test_bind_expands_in_order() -> None:
    result = List.of(1, 2, 3).bind(lambda x: List.of(x, x * 10))
    assert list(result) == [1, 10, 2, 20, 3, 30]


def test_bind_can_contract() -> None:
    result = List.of(1, 2, 3, 4).bind(lambda x: List.of(x) if x % 2 else empty())
    assert list(result) == [1, 3]


def test_bind_models_choice() -> None:
    """All (x, y) pairs, like nested loops."""
    pairs = List.of(1, 2).bind(lambda x: List.of("a", "b").map(lambda y: (x, y)))
    assert list(pairs) == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]


def test_map_and_filter() -> None:
    xs = List.of(1, 2, 3, 4, 5)
    assert list(xs.map(lambda x: x * x)) == [1, 4, 9, 16, 25]
    assert list(xs.filter(lambda x: x % 2 == 1)) == [1, 3, 5]
    assert empty().filter(lambda x: True) is empty()


def test_fold_left() -> None:
    xs = List.of("a", "b", "c")
    assert xs.fold_left("")(lambda acc, head: acc + head) == "abc"
    assert xs.fold_left("", lambda acc, head: acc + head) == "abc"
    assert empty().fold_left(0)(lambda acc, head: acc + head) == 0


def test_fold_right_argument_order() -> None:
    """f receives the folded tail first and the head second."""
    calls: list[tuple[object, object]] = []

    def f(acc: str, head: str) -> str:
        calls.append((acc, head))
        return acc + head

    assert List.of("a", "b", "c").fold_right("", f) == "cba"
    assert calls == [("", "c"), ("c", "b"), ("cb", "a")]
    assert empty().fold_right("seed")(f) == "seed"


def test_is_empty() -> None:
    assert empty().is_empty()
    assert List.empty().is_empty()
    assert not List.of(1).is_empty()


def test_empty_is_singleton() -> None:
    assert List.of() is empty()
    assert List.from_iterable([]) is empty()
    assert List.of(1).map(str).bind(lambda _: empty()) is empty()


def test_match_destructures() -> None:
    head, tail = List.of(1, 2, 3).match(if_pair=lambda h, t: (h, t), if_empty=lambda: (None, None))
    assert head == 1
    assert list(tail) == [2, 3]
    assert empty().match(if_pair=lambda h, t: "pair", if_empty=lambda: "empty") == "empty"


def test_tails_are_shared() -> None:
    tail = List.of(2, 3)
    a = Pair(1, tail)
    b = tail.cons(0)
    assert list(a) == [1, 2, 3]
    assert list(b) == [0, 2, 3]
    assert a.match(if_pair=lambda _h, t: t, if_empty=lambda: None) is tail
    assert list(tail) == [2, 3]


def test_pair_requires_list_tail() -> None:
    with pytest.raises(TypeError):
        Pair(1, [2, 3])  # type: ignore[arg-type]


def test_monad_laws() -> None:
    f = lambda x: List.of(x, x + 1)  # noqa: E731
    g = lambda x: List.of(x * 2)  # noqa: E731
    m = List.of(1, 5)

    assert List.of(3).bind(f) == f(3)
    assert m.bind(List.of) == m
    assert m.bind(f).bind(g) == m.bind(lambda x: f(x).bind(g))


def test_functor_laws() -> None:
    m = List.of(1, 2, 3)
    assert m.map(lambda x: x) == m
    assert m.map(lambda x: (x + 1) * 2) == m.map(lambda x: x + 1).map(lambda x: x * 2)


def test_long_lists_do_not_recurse() -> None:
    xs = List.from_iterable(range(50_000))
    assert len(xs.map(lambda x: x + 1)) == 50_000
    assert xs.fold_right(0, lambda acc, head: acc + head) == sum(range(50_000))
    assert xs == List.from_iterable(range(50_000))


def test_equality_and_hash() -> None:
    assert List.of(1, 2) == List.of(1, 2)
    assert List.of(1, 2) != List.of(1, 2, 3)
    assert List.of(1, 2) != List.of(2, 1)
    assert hash(List.of(1, 2)) == hash(List.of(1, 2))


def test_repr_truncates(monkeypatch: pytest.MonkeyPatch) -> None:
    assert repr(List.of(1, 2)) == "List([1, 2])"
    assert repr(empty()) == "List([])"
    monkeypatch.setenv("MONADCASE_REPR_MAX_ITEMS", "3")
    clear_settings_cache()
    assert repr(List.from_iterable(range(5))) == "List([0, 1, 2, ...+2])"
