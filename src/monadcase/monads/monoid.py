"""Monoid capability used by Writer to fold logs.

A monoid is an identity element plus an associative binary operation:
- combine(pure, x) == x == combine(x, pure)
- combine(combine(x, y), z) == combine(x, combine(y, z))

Two monoids are the same when they share the combine callable and have equal
identities, which is what Writer checks on bind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from ..foundation.errors import InvalidMonoidError

W = TypeVar("W")


@dataclass(frozen=True, slots=True)
class Monoid(Generic[W]):
    """Identity element ``pure`` and associative ``combine``.

    Example:
        >>> SUM = Monoid(pure=0, combine=lambda x, y: x + y)
        >>> SUM.combine(SUM.pure, 3)
        3
    """

    pure: W
    combine: Callable[[W, W], W]

    def concat(self, *items: W) -> W:
        """Fold items left-to-right starting from pure."""
        acc = self.pure
        for item in items:
            acc = self.combine(acc, item)
        return acc


def ensure_monoid(obj: Any) -> Any:
    """Check obj has the monoid capability (``pure`` plus callable ``combine``)."""
    if not hasattr(obj, "pure") or not callable(getattr(obj, "combine", None)):
        raise InvalidMonoidError.create(
            f"expected an object with 'pure' and callable 'combine', got {type(obj).__name__}",
        )
    return obj


def _concat_str(x: str, y: str) -> str:
    return x + y


def _concat_list(x: list[Any], y: list[Any]) -> list[Any]:
    return [*x, *y]


def _concat_tuple(x: tuple[Any, ...], y: tuple[Any, ...]) -> tuple[Any, ...]:
    return x + y


STRING_CONCAT: Monoid[str] = Monoid(pure="", combine=_concat_str)
TUPLE_CONCAT: Monoid[tuple[Any, ...]] = Monoid(pure=(), combine=_concat_tuple)


def list_monoid() -> Monoid[list[Any]]:
    """List append monoid. Every call returns an equal instance.

    combine always builds a new list, so ``pure`` is never mutated.
    """
    return Monoid(pure=[], combine=_concat_list)
