"""Domain services package."""

from .acquire_validator import (
    AcquireValidation,
    AcquireValidationReason,
    ensure_valid_acquire_payload,
    validate_acquire_payload,
)

__all__ = [
    "AcquireValidation",
    "AcquireValidationReason",
    "ensure_valid_acquire_payload",
    "validate_acquire_payload",
]
