"""Sum types: per-variant constructors and exhaustive matching.

Example:
    >>> from monadcase.adt import sum_type, match
    >>> Login = sum_type("Login", ok={"user": str}, denied={"reason": str})
    >>> match(Login.denied(reason="bad password"), {
    ...     "ok": lambda v: f"welcome {v.user}",
    ...     "denied": lambda v: v.reason,
    ... })
    'bad password'
"""

from .sum import SumType, Variant, match, sum_of, sum_type

__all__ = ["Variant", "SumType", "sum_type", "sum_of", "match"]
