from __future__ import annotations

from dataclasses import dataclass

from customer_sync.repositories.stub import InMemoryCustomerRepository


@dataclass(frozen=True)
class ApiDeps:
    repository: InMemoryCustomerRepository
