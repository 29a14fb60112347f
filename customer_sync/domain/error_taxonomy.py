from __future__ import annotations

from collections.abc import Mapping
from typing import Literal

from customer_sync.domain.models import ApiError

# Codes synthesized on the client side. Codes sent by the server are kept verbatim.
ErrorCode = Literal[
    "network_error",
    "remote_status_error",
    "malformed_payload",
    "validation_error",
    "internal_error",
]

Operation = Literal["read", "write"]

CANONICAL_ERROR_CODES: tuple[ErrorCode, ...] = (
    "network_error",
    "remote_status_error",
    "malformed_payload",
    "validation_error",
    "internal_error",
)

GENERIC_READ_MESSAGE = "Failed to load customers"
GENERIC_WRITE_MESSAGE = "Failed to add customer"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"

GENERIC_MESSAGES: Mapping[Operation, str] = {
    "read": GENERIC_READ_MESSAGE,
    "write": GENERIC_WRITE_MESSAGE,
}


def is_canonical_error_code(code: str) -> bool:
    return code in CANONICAL_ERROR_CODES


def generic_message(operation: Operation) -> str:
    return GENERIC_MESSAGES.get(operation, UNEXPECTED_ERROR_MESSAGE)


def resolve_api_error(
    *,
    operation: Operation,
    code: ErrorCode,
    payload: object | None = None,
) -> ApiError:
    """Build the ApiError a failed remote call normalizes to.

    A payload shaped like ``{"code": ..., "message": ...}`` wins over the
    synthesized code; a missing or blank message falls back to the generic
    message for the operation.
    """
    message = generic_message(operation)
    resolved_code: str = code
    if isinstance(payload, Mapping):
        payload_message = payload.get("message")
        if isinstance(payload_message, str) and payload_message.strip():
            message = payload_message
        payload_code = payload.get("code")
        if isinstance(payload_code, str) and payload_code.strip():
            resolved_code = payload_code
    return ApiError(code=resolved_code, message=message)
