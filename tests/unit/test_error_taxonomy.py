import pytest

from customer_sync.domain.error_taxonomy import (
    GENERIC_READ_MESSAGE,
    GENERIC_WRITE_MESSAGE,
    is_canonical_error_code,
    resolve_api_error,
)
from customer_sync.domain.models import ApiError


@pytest.mark.unit
def test_canonical_error_codes_are_enforced() -> None:
    assert is_canonical_error_code("malformed_payload") is True
    assert is_canonical_error_code("duplicate_email") is False


@pytest.mark.unit
def test_server_payload_wins_over_synthesized_error() -> None:
    error = resolve_api_error(
        operation="write",
        code="remote_status_error",
        payload={"code": "duplicate_email", "message": "Email taken"},
    )

    assert error == ApiError(code="duplicate_email", message="Email taken")


@pytest.mark.unit
def test_unparseable_payload_falls_back_to_generic_message() -> None:
    assert resolve_api_error(operation="read", code="malformed_payload", payload=["nope"]) == ApiError(
        code="malformed_payload", message=GENERIC_READ_MESSAGE
    )
    assert resolve_api_error(operation="write", code="remote_status_error", payload={"message": ""}) == ApiError(
        code="remote_status_error", message=GENERIC_WRITE_MESSAGE
    )
