from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from customer_sync.domain.error_taxonomy import resolve_api_error
from customer_sync.domain.errors import RemoteReadError, RemoteWriteError
from customer_sync.domain.models import ApiError, CreateCustomerCommand, Customer, CustomerCollection


@dataclass
class StubCustomersClient:
    """Non-network customers client with deterministic behavior for tests.

    ``read_failures``/``write_failures`` are consumed one per call before the
    stored collection is touched. ``gate``, when set, holds every call until
    it is released.
    """

    customers: list[Customer] = field(default_factory=list)
    read_failures: list[ApiError] = field(default_factory=list)
    write_failures: list[ApiError] = field(default_factory=list)
    fetch_calls: list[str] = field(default_factory=list)
    create_calls: list[CreateCustomerCommand] = field(default_factory=list)
    gate: asyncio.Event | None = None

    async def fetch_collection(self, *, key: str) -> CustomerCollection:
        self.fetch_calls.append(key)
        if self.gate is not None:
            await self.gate.wait()
        if self.read_failures:
            raise RemoteReadError(self.read_failures.pop(0), status_code=500)
        return tuple(self.customers)

    async def create_customer(self, command: CreateCustomerCommand) -> Customer | None:
        self.create_calls.append(command)
        if self.gate is not None:
            await self.gate.wait()
        if self.write_failures:
            raise RemoteWriteError(self.write_failures.pop(0), status_code=400)
        if any(existing.email == command.email for existing in self.customers):
            raise RemoteWriteError(
                resolve_api_error(
                    operation="write",
                    code="remote_status_error",
                    payload={"code": "duplicate_email", "message": "Customer with this email already exists"},
                ),
                status_code=409,
            )
        customer = Customer(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            business_name=command.business_name,
        )
        self.customers.append(customer)
        return customer
