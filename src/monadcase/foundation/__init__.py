"""Foundation: configuration, errors, logging."""

from .config import MonadcaseSettings, clear_settings_cache, get_settings
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
from .logging import configure_logging, get_logger

__all__ = [
    "MonadcaseSettings", "get_settings", "clear_settings_cache",
    "ErrorCode", "ContractError", "ContractViolation",
    "MonoidMismatchError", "InvalidMonoidError",
    "NonExhaustiveMatchError", "UnknownVariantError", "VariantDefinitionError",
    "configure_logging", "get_logger",
]
