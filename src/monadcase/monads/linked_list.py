"""Persistent singly linked list with monadic flattening, filtering and folds.

A list is either ``Pair(head, tail)`` or the canonical ``Empty`` (shared by all
element types, reachable via ``List.empty()`` / ``empty()``). Tails are never
mutated, so sub-lists can be shared freely between lists.

Traversals run in loops rather than recursion, so long lists are safe.

Example:
    >>> xs = List.of(1, 2, 3)
    >>> xs.bind(lambda x: List.of(x, x * 10))
    List([1, 10, 2, 20, 3, 30])
    >>> xs.fold_right("")(lambda acc, head: acc + str(head))
    '321'
"""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, overload

from ..foundation.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
U = TypeVar("U")
D = TypeVar("D")

Folder = Callable[[D, T], D]


class List(Generic[T]):
    """Tagged union of Pair(head, tail) and Empty."""

    __slots__ = ("_head", "_tail", "_is_pair")
    __match_args__ = ("_head", "_tail")

    def __init__(self, head: T | None, tail: List[T] | None, is_pair: bool) -> None:
        """Private constructor. Use Pair(), List.of() or List.empty()."""
        self._head = head
        self._tail = tail
        self._is_pair = is_pair

    # ─── Construction ────────────────────────────────────────────────

    @staticmethod
    def empty() -> List[T]:
        """The shared Empty instance."""
        return _EMPTY

    @staticmethod
    def of(*items: T) -> List[T]:
        return _build(items)

    @staticmethod
    def from_iterable(items: Iterable[T]) -> List[T]:
        return _build(list(items))

    def cons(self, head: T) -> List[T]:
        """New list with head in front; self becomes its (shared) tail."""
        return List(head, self, True)

    # ─── Type Checking ───────────────────────────────────────────────

    def is_empty(self) -> bool:
        return not self._is_pair

    # ─── Pattern Matching ────────────────────────────────────────────

    def match(self, *, if_pair: Callable[[T, List[T]], D], if_empty: Callable[[], D]) -> D:
        """Exhaustive destructuring. Both handlers are required."""
        return if_pair(self._head, self._tail) if self._is_pair else if_empty()  # type: ignore[arg-type]

    # ─── Monad Operations ────────────────────────────────────────────

    def bind(self, f: Callable[[T], List[U]]) -> List[U]:
        """Map f over every element and concatenate the results in order."""
        out: list[U] = []
        for item in self:
            out.extend(f(item))
        return _build(out)

    def map(self, f: Callable[[T], U]) -> List[U]:
        return _build([f(item) for item in self])

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Keep elements satisfying predicate, in order."""
        if not self._is_pair:
            return self
        return _build([item for item in self if predicate(item)])

    # ─── Folds ───────────────────────────────────────────────────────

    @overload
    def fold_left(self, seed: D) -> Callable[[Folder[D, T]], D]: ...

    @overload
    def fold_left(self, seed: D, f: Folder[D, T]) -> D: ...

    def fold_left(self, seed: D, f: Folder[D, T] | None = None) -> D | Callable[[Folder[D, T]], D]:
        """Thread acc head-to-tail: f(...f(f(seed, x0), x1)..., xn).

        Curried ``fold_left(seed)(f)`` or direct ``fold_left(seed, f)``.
        """
        def run(fn: Folder[D, T]) -> D:
            acc = seed
            for item in self:
                acc = fn(acc, item)
            return acc

        return run if f is None else run(f)

    @overload
    def fold_right(self, seed: D) -> Callable[[Folder[D, T]], D]: ...

    @overload
    def fold_right(self, seed: D, f: Folder[D, T]) -> D: ...

    def fold_right(self, seed: D, f: Folder[D, T] | None = None) -> D | Callable[[Folder[D, T]], D]:
        """Fold the tail first, then combine with head: f(fold_right(tail), head).

        The folded tail is the first argument and head the second, unlike the
        conventional right fold.
        """
        def run(fn: Folder[D, T]) -> D:
            acc = seed
            for item in reversed(list(self)):
                acc = fn(acc, item)
            return acc

        return run if f is None else run(f)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __iter__(self) -> Iterator[T]:
        node = self
        while node._is_pair:
            yield node._head  # type: ignore[misc]
            node = node._tail  # type: ignore[assignment]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self._is_pair

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, List):
            return NotImplemented
        a, b = self, other
        while a._is_pair and b._is_pair:
            if a is b:
                return True
            if a._head != b._head:
                return False
            a, b = a._tail, b._tail  # type: ignore[assignment]
        return a._is_pair == b._is_pair

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        limit = get_settings().repr_max_items
        shown = [repr(x) for x in islice(self, limit)]
        rest = len(self) - len(shown)
        if rest > 0:
            shown.append(f"...+{rest}")
        return f"List([{', '.join(shown)}])"


_EMPTY: List[Any] = List(None, None, False)


def _build(items: Any) -> List[Any]:
    node = _EMPTY
    for item in reversed(items):
        node = List(item, node, True)
    return node


def Pair(head: T, tail: List[T]) -> List[T]:  # noqa: N802
    """Construct Pair variant."""
    if not isinstance(tail, List):
        raise TypeError(f"Pair tail must be a List, got {type(tail).__name__}")
    return List(head, tail, True)


def empty() -> List[Any]:
    """The shared Empty instance."""
    return _EMPTY
