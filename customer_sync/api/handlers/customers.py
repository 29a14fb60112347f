from __future__ import annotations

from customer_sync.api.handlers.deps import ApiDeps
from customer_sync.api.schemas import CreateCustomerRequest, CustomerPayload
from customer_sync.domain.errors import DomainValidationError
from customer_sync.domain.models import FormState
from customer_sync.domain.validation import build_create_command, validate_form


async def list_customers_handler(*, api_deps: ApiDeps) -> list[CustomerPayload]:
    items = await api_deps.repository.list_customers()
    return [CustomerPayload.from_domain(item) for item in items]


async def create_customer_handler(*, request: CreateCustomerRequest, api_deps: ApiDeps) -> CustomerPayload:
    form = FormState(
        first_name=request.first_name,
        last_name=request.last_name,
        business_name=request.business_name or "",
        email=request.email,
    )
    errors = validate_form(form)
    if errors.any():
        invalid = [name for name in ("first_name", "last_name", "email") if getattr(errors, name)]
        raise DomainValidationError(f"invalid fields: {', '.join(invalid)}")

    customer = await api_deps.repository.create_customer(build_create_command(form))
    return CustomerPayload.from_domain(customer)
