"""Law-abiding monadic containers.

- Option: Some / Nothing
- Either: Left / Right, explicit failures
- Try: Success / Failure, captures exceptions at every combinator
- IO: deferred, re-runnable effects
- Writer: value plus a log folded through a Monoid
- List: persistent linked list, Pair / Empty

Example:
    >>> from monadcase.monads import Some, Right, Try
    >>> Some(5).map(lambda x: x + 1)
    Some(6)
    >>> Right(5).ensure("bad")(lambda x: x > 10)
    Left('bad')
    >>> Try.attempt(lambda: 1 / 0).is_failure()
    True
"""

from .either import Either, Left, Right
from .io import IO
from .linked_list import List, Pair, empty
from .monad import Monad, is_monad
from .monoid import STRING_CONCAT, TUPLE_CONCAT, Monoid, ensure_monoid, list_monoid
from .option import Option, Some, nothing
from .try_ import Failure, Success, Try
from .writer import Writer

__all__ = [
    # Contract
    "Monad", "is_monad",
    # Monoid
    "Monoid", "STRING_CONCAT", "TUPLE_CONCAT", "list_monoid", "ensure_monoid",
    # Containers
    "Option", "Some", "nothing",
    "Either", "Left", "Right",
    "Try", "Success", "Failure",
    "IO",
    "Writer",
    "List", "Pair", "empty",
]
