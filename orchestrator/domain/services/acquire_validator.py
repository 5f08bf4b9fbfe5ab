"""Domain service helpers for validating acquisition results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from orchestrator.domain.entities.errors import AcquireValidationError
from orchestrator.shared.consts import EXPECTED_FEATURE_COUNT


class AcquireValidationReason(str, Enum):
    NOT_AN_OBJECT = "ACQUIRE_NOT_AN_OBJECT"
    NO_FEATURES = "ACQUIRE_NO_FEATURES"
    WRONG_FEATURES = "ACQUIRE_WRONG_FEATURES"


@dataclass(frozen=True, slots=True)
class AcquireValidation:
    valid: bool
    reason: Optional[AcquireValidationReason] = None
    message: str = ""


def validate_acquire_payload(
    payload: Any, expected_count: int = EXPECTED_FEATURE_COUNT
) -> AcquireValidation:
    """Check an acquisition response body without raising.

    The body must be an object whose ``features`` entry is a list (or tuple)
    holding exactly ``expected_count`` values.
    """

    if not isinstance(payload, Mapping):
        return AcquireValidation(
            valid=False,
            reason=AcquireValidationReason.NOT_AN_OBJECT,
            message="Acquire response body is not a JSON object",
        )

    features = payload.get("features")
    if features is None or not isinstance(features, (list, tuple)):
        return AcquireValidation(
            valid=False,
            reason=AcquireValidationReason.NO_FEATURES,
            message="Acquire did not return a valid features sequence",
        )

    if len(features) != expected_count:
        return AcquireValidation(
            valid=False,
            reason=AcquireValidationReason.WRONG_FEATURES,
            message=(
                f"Expected {expected_count} features, received {len(features)}"
            ),
        )

    return AcquireValidation(valid=True)


def ensure_valid_acquire_payload(payload: Any) -> Mapping[str, Any]:
    """Validate an acquisition response body.

    Raises:
        AcquireValidationError: If the body fails a shape or arity rule.
    """

    result = validate_acquire_payload(payload)
    if not result.valid:
        reason = result.reason or AcquireValidationReason.NO_FEATURES
        raise AcquireValidationError(reason.value, result.message)
    return payload
