from __future__ import annotations

from customer_sync.domain.models import CreateCustomerCommand, FieldErrors, FormState


def validate_form(form: FormState) -> FieldErrors:
    email = form.email.strip()
    return FieldErrors(
        first_name=not form.first_name.strip(),
        last_name=not form.last_name.strip(),
        email=not email or "@" not in email,
    )


def build_create_command(form: FormState) -> CreateCustomerCommand:
    # Values are sent as typed; only the optional business name is dropped when blank.
    return CreateCustomerCommand(
        first_name=form.first_name,
        last_name=form.last_name,
        email=form.email,
        business_name=form.business_name if form.business_name.strip() else None,
    )
