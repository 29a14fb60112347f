from __future__ import annotations

from dataclasses import dataclass, field

from customer_sync.domain.errors import DuplicateCustomerError
from customer_sync.domain.models import CreateCustomerCommand, Customer


@dataclass
class InMemoryCustomerRepository:
    """Non-network customer store backing the development stub service."""

    customers: list[Customer] = field(default_factory=list)

    async def list_customers(self) -> list[Customer]:
        return list(self.customers)

    async def create_customer(self, command: CreateCustomerCommand) -> Customer:
        if any(existing.email == command.email for existing in self.customers):
            raise DuplicateCustomerError(f"customer with email {command.email} already exists")
        customer = Customer(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            business_name=command.business_name,
        )
        self.customers.append(customer)
        return customer
