"""Error handling for monadcase.

- ErrorCode: codes for contract violations
- ContractError: frozen pydantic payload describing a violation
- ContractViolation and subclasses: the exceptions actually raised
"""

from .errors import (
    ContractError,
    ContractViolation,
    ErrorCode,
    InvalidMonoidError,
    MonoidMismatchError,
    NonExhaustiveMatchError,
    UnknownVariantError,
    VariantDefinitionError,
)

__all__ = [
    "ErrorCode", "ContractError", "ContractViolation",
    "MonoidMismatchError", "InvalidMonoidError",
    "NonExhaustiveMatchError", "UnknownVariantError", "VariantDefinitionError",
]
