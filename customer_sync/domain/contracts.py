from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Protocol, runtime_checkable

from customer_sync.domain.models import CacheSnapshot, CreateCustomerCommand, Customer, CustomerCollection

CUSTOMERS_COLLECTION_PATH = "/api/customers"

SnapshotListener = Callable[[CacheSnapshot], None]
Revalidate = Callable[[], Awaitable[object]]


@runtime_checkable
class CustomersClient(Protocol):
    """Remote collection boundary.

    ``fetch_collection`` raises ``RemoteReadError`` and ``create_customer`` raises
    ``RemoteWriteError`` for every failure: transport errors, non-2xx statuses and
    malformed payloads alike.
    """

    async def fetch_collection(self, *, key: str) -> CustomerCollection: ...

    async def create_customer(self, command: CreateCustomerCommand) -> Customer | None: ...
