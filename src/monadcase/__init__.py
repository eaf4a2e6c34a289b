"""monadcase - functional containers and sum types for Python.

Immutable, law-abiding monads (Option, Either, Try, IO, Writer, List), a
Monoid capability for Writer logs, and tagged-union helpers with generated
constructors and exhaustive matching.

Quick Start:
    >>> from monadcase import Option, Either, Some, nothing
    >>>
    >>> def find_email(user: str) -> Option[str]:
    ...     return Some("a@b.c") if user == "omar" else nothing()
    >>>
    >>> Either.from_option(find_email("omar"), "no email").map(str.upper)
    Right('A@B.C')
    >>> find_email("nobody").get_or_else("hello@world.md")
    'hello@world.md'

Sum Types:
    >>> from monadcase import sum_type
    >>> Shape = sum_type("Shape", circle={"radius": float}, square={"side": float})
    >>> Shape.match(Shape.square(side=3.0), {
    ...     "circle": lambda c: 3.14159 * c.radius ** 2,
    ...     "square": lambda s: s.side ** 2,
    ... })
    9.0
"""

from .adt import SumType, Variant, match, sum_of, sum_type
from .foundation import (
    ContractError,
    ContractViolation,
    ErrorCode,
    InvalidMonoidError,
    MonadcaseSettings,
    MonoidMismatchError,
    NonExhaustiveMatchError,
    UnknownVariantError,
    VariantDefinitionError,
    clear_settings_cache,
    configure_logging,
    get_settings,
)
from .monads import (
    IO,
    STRING_CONCAT,
    TUPLE_CONCAT,
    Either,
    Failure,
    Left,
    List,
    Monad,
    Monoid,
    Option,
    Pair,
    Right,
    Some,
    Success,
    Try,
    Writer,
    empty,
    is_monad,
    list_monoid,
    nothing,
)

__version__ = "0.1.0"

__all__ = [
    # Containers
    "Monad", "is_monad",
    "Option", "Some", "nothing",
    "Either", "Left", "Right",
    "Try", "Success", "Failure",
    "IO",
    "Writer", "Monoid", "STRING_CONCAT", "TUPLE_CONCAT", "list_monoid",
    "List", "Pair", "empty",
    # Sum types
    "Variant", "SumType", "sum_type", "sum_of", "match",
    # Errors
    "ErrorCode", "ContractError", "ContractViolation",
    "MonoidMismatchError", "InvalidMonoidError",
    "NonExhaustiveMatchError", "UnknownVariantError", "VariantDefinitionError",
    # Settings & logging
    "MonadcaseSettings", "get_settings", "clear_settings_cache", "configure_logging",
]
