"""View models consumed by the rendering layer.

Pure derivations from cache and submission snapshots. Nothing here performs
I/O or mutates state.
"""

from __future__ import annotations

from dataclasses import dataclass

from customer_sync.domain.display import display_name
from customer_sync.domain.models import CacheSnapshot, FieldErrors, SubmissionSnapshot

LOADING_HEADER = "Loading..."
LOADING_ROWS_TEXT = "Loading customers..."
EMPTY_ROWS_TEXT = "No customers found"

FIELD_HELPER_TEXTS: dict[str, str] = {
    "first_name": "First name is required",
    "last_name": "Last name is required",
    "email": "Valid email is required",
}


@dataclass(frozen=True)
class CustomerRowViewModel:
    key: str
    name: str
    email: str


@dataclass(frozen=True)
class CustomerTableViewModel:
    header: str
    error_banner: str | None
    rows: tuple[CustomerRowViewModel, ...]
    placeholder: str | None
    is_loading: bool


@dataclass(frozen=True)
class AddCustomerDialogViewModel:
    is_open: bool
    helper_texts: dict[str, str]
    submit_error: str | None
    create_disabled: bool


def build_table_view(snapshot: CacheSnapshot) -> CustomerTableViewModel:
    customers = snapshot.data or ()
    rows = tuple(
        CustomerRowViewModel(key=customer.email, name=display_name(customer), email=customer.email)
        for customer in customers
    )

    placeholder: str | None = None
    if snapshot.is_loading:
        placeholder = LOADING_ROWS_TEXT
        rows = ()
    elif not rows:
        placeholder = EMPTY_ROWS_TEXT

    return CustomerTableViewModel(
        header=LOADING_HEADER if snapshot.is_loading else f"{len(customers)} Customers",
        error_banner=f"Error: {snapshot.error.message}" if snapshot.error is not None else None,
        rows=rows,
        placeholder=placeholder,
        is_loading=snapshot.is_loading,
    )


def field_helper_texts(errors: FieldErrors) -> dict[str, str]:
    flagged = {
        "first_name": errors.first_name,
        "last_name": errors.last_name,
        "email": errors.email,
    }
    return {name: FIELD_HELPER_TEXTS[name] for name, invalid in flagged.items() if invalid}


def build_dialog_view(snapshot: SubmissionSnapshot) -> AddCustomerDialogViewModel:
    return AddCustomerDialogViewModel(
        is_open=snapshot.dialog_open,
        helper_texts=field_helper_texts(snapshot.field_errors),
        submit_error=snapshot.submit_error or None,
        create_disabled=snapshot.is_submitting,
    )
