import pytest

from customer_sync.domain.models import ApiError, CacheSnapshot, Customer, FieldErrors, FormState, SubmissionSnapshot
from customer_sync.presentation.viewmodels import (
    EMPTY_ROWS_TEXT,
    LOADING_HEADER,
    LOADING_ROWS_TEXT,
    CustomerRowViewModel,
    build_dialog_view,
    build_table_view,
)

KEY = "/api/customers"
JANE = Customer(first_name="Jane", last_name="Doe", email="j@d.com")
ACME = Customer(first_name="Wile", last_name="Coyote", email="w@acme.com", business_name="Acme")


@pytest.mark.unit
def test_table_shows_loading_state_before_first_response() -> None:
    view = build_table_view(CacheSnapshot(key=KEY, is_loading=True, is_validating=True))

    assert view.header == LOADING_HEADER
    assert view.placeholder == LOADING_ROWS_TEXT
    assert view.rows == ()


@pytest.mark.unit
def test_table_rows_follow_server_order_with_display_names() -> None:
    view = build_table_view(CacheSnapshot(key=KEY, data=(JANE, ACME)))

    assert view.header == "2 Customers"
    assert view.rows == (
        CustomerRowViewModel(key="j@d.com", name="Jane Doe", email="j@d.com"),
        CustomerRowViewModel(key="w@acme.com", name="Acme", email="w@acme.com"),
    )
    assert view.placeholder is None
    assert view.error_banner is None


@pytest.mark.unit
def test_error_banner_is_shown_alongside_stale_rows() -> None:
    view = build_table_view(
        CacheSnapshot(key=KEY, data=(JANE,), error=ApiError(code="server_error", message="database is down"))
    )

    assert view.error_banner == "Error: database is down"
    assert len(view.rows) == 1


@pytest.mark.unit
def test_empty_collection_renders_placeholder() -> None:
    view = build_table_view(CacheSnapshot(key=KEY, error=ApiError(code="x", message="nope")))

    assert view.header == "0 Customers"
    assert view.placeholder == EMPTY_ROWS_TEXT


@pytest.mark.unit
def test_dialog_view_maps_field_errors_to_helper_texts() -> None:
    view = build_dialog_view(
        SubmissionSnapshot(
            state="editing",
            dialog_open=True,
            form=FormState(),
            field_errors=FieldErrors(last_name=True, email=True),
            is_submitting=False,
            submit_error="",
        )
    )

    assert view.helper_texts == {"last_name": "Last name is required", "email": "Valid email is required"}
    assert view.submit_error is None
    assert view.create_disabled is False
