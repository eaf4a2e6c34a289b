"""Contract-violation errors for monadcase.

Represented outcomes (Nothing, Left, Failure) are values, not exceptions.
What remains are programming errors: combining Writers across monoids,
matching a sum type without a handler for every variant, malformed variant
declarations. Those fail immediately with a structured ContractError payload.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ErrorCode(StrEnum):
    """Machine-readable codes for contract violations."""
    MONOID_MISMATCH = "MONOID_MISMATCH"
    INVALID_MONOID = "INVALID_MONOID"
    NON_EXHAUSTIVE_MATCH = "NON_EXHAUSTIVE_MATCH"
    UNKNOWN_VARIANT = "UNKNOWN_VARIANT"
    INVALID_VARIANT = "INVALID_VARIANT"


class ContractError(BaseModel):
    """Structured description of a contract violation.

    Attributes:
        code: Machine-readable classification
        message: Human-readable error message
        details: Optional extra context (offending tags, types, ...)
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
    )

    code: ErrorCode
    message: Annotated[str, Field(min_length=1, description="Human-readable error message")]
    details: str | None = Field(default=None, description="Optional detailed error info")

    @computed_field
    @property
    def severity(self) -> str:
        """Definition errors happen at import time; the rest at call sites."""
        return "critical" if self.code is ErrorCode.INVALID_VARIANT else "error"

    def render(self) -> str:
        """Format as a single readable line (plus details, if any)."""
        base = f"[{self.code}] {self.message}"
        return f"{base}\n{self.details}" if self.details else base

    __str__ = render


class ContractViolation(Exception):
    """Exception wrapping a ContractError for raising."""

    __slots__ = ("error",)

    code: ErrorCode = ErrorCode.INVALID_VARIANT

    def __init__(self, error: ContractError) -> None:
        self.error = error
        super().__init__(error.render())

    @classmethod
    def create(cls, message: str, *, details: str | None = None) -> Self:
        """Create with the subclass' default error code."""
        return cls(ContractError(code=cls.code, message=message, details=details))


class MonoidMismatchError(ContractViolation):
    """Writer bind produced a Writer over a different monoid."""
    code = ErrorCode.MONOID_MISMATCH


class InvalidMonoidError(ContractViolation):
    """Object supplied as a monoid lacks `pure` or a callable `combine`."""
    code = ErrorCode.INVALID_MONOID


class NonExhaustiveMatchError(ContractViolation):
    """Handler map does not cover every declared variant."""
    code = ErrorCode.NON_EXHAUSTIVE_MATCH


class UnknownVariantError(ContractViolation):
    """Handler or value refers to a tag that the sum type does not declare."""
    code = ErrorCode.UNKNOWN_VARIANT


class VariantDefinitionError(ContractViolation):
    """Sum type declaration is malformed."""
    code = ErrorCode.INVALID_VARIANT
