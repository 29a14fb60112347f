"""HTTP implementation of the customers collection boundary.

Usage:
    async with HttpCustomersClient(base_url="http://localhost:8000") as client:
        customers = await client.fetch_collection(key="/api/customers")
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from customer_sync.api.schemas import CUSTOMER_COLLECTION_ADAPTER, CreateCustomerRequest, CustomerPayload
from customer_sync.domain.contracts import CUSTOMERS_COLLECTION_PATH
from customer_sync.domain.error_taxonomy import resolve_api_error
from customer_sync.domain.errors import RemoteReadError, RemoteWriteError
from customer_sync.domain.models import CreateCustomerCommand, Customer, CustomerCollection

logger = logging.getLogger("customer_sync.transport")


class HttpCustomersClient:
    """Async client for the customers collection endpoint.

    Attributes:
        collection_path: Path of the collection resource used for creates.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        *,
        collection_path: str = CUSTOMERS_COLLECTION_PATH,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.collection_path = collection_path
        self._client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> HttpCustomersClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_collection(self, *, key: str) -> CustomerCollection:
        try:
            response = await self._client.get(key)
        except httpx.HTTPError as exc:
            logger.warning("collection fetch transport failed", extra={"resource_key": key})
            raise RemoteReadError(resolve_api_error(operation="read", code="network_error")) from exc

        if not response.is_success:
            raise RemoteReadError(
                resolve_api_error(
                    operation="read",
                    code="remote_status_error",
                    payload=_json_or_none(response),
                ),
                status_code=response.status_code,
            )

        try:
            items = CUSTOMER_COLLECTION_ADAPTER.validate_json(response.content)
        except ValidationError as exc:
            logger.warning(
                "collection payload malformed",
                extra={"resource_key": key, "status_code": response.status_code},
            )
            raise RemoteReadError(
                resolve_api_error(operation="read", code="malformed_payload"),
                status_code=response.status_code,
            ) from exc
        return tuple(item.to_domain() for item in items)

    async def create_customer(self, command: CreateCustomerCommand) -> Customer | None:
        body = CreateCustomerRequest.from_command(command).to_wire()
        try:
            response = await self._client.post(self.collection_path, json=body)
        except httpx.HTTPError as exc:
            logger.warning("create transport failed", extra={"resource_key": self.collection_path})
            raise RemoteWriteError(resolve_api_error(operation="write", code="network_error")) from exc

        if not response.is_success:
            raise RemoteWriteError(
                resolve_api_error(
                    operation="write",
                    code="remote_status_error",
                    payload=_json_or_none(response),
                ),
                status_code=response.status_code,
            )

        # Any 2xx is a successful create; the body is informational only.
        payload = _json_or_none(response)
        if payload is None:
            return None
        try:
            return CustomerPayload.model_validate(payload).to_domain()
        except ValidationError:
            return None


def _json_or_none(response: httpx.Response) -> object | None:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
