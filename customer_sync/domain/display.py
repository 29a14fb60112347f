from __future__ import annotations

from customer_sync.domain.models import Customer


def display_name(customer: Customer) -> str:
    if customer.business_name and customer.business_name.strip():
        return customer.business_name
    return f"{customer.first_name} {customer.last_name}"
