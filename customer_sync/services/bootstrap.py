from __future__ import annotations

from dataclasses import dataclass

import httpx

from customer_sync.cache.collection_cache import RemoteCollectionCache, Subscription
from customer_sync.clients.http import HttpCustomersClient
from customer_sync.config import ClientSettings, client_settings_from_env
from customer_sync.domain.contracts import SnapshotListener
from customer_sync.workflows.submission import SubmissionWorkflow


@dataclass
class CustomerViewContainer:
    settings: ClientSettings
    client: HttpCustomersClient
    cache: RemoteCollectionCache
    workflow: SubmissionWorkflow

    def subscribe(self, listener: SnapshotListener | None = None) -> Subscription:
        return self.cache.subscribe(self.settings.collection_path, listener)

    async def aclose(self) -> None:
        await self.client.aclose()


def build_customer_view(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CustomerViewContainer:
    resolved = settings or client_settings_from_env()
    client = HttpCustomersClient(
        resolved.base_url,
        collection_path=resolved.collection_path,
        timeout=resolved.timeout_seconds,
        transport=transport,
    )
    cache = RemoteCollectionCache(client=client)
    workflow = SubmissionWorkflow(
        client=client,
        revalidate=cache.revalidator(resolved.collection_path),
    )
    return CustomerViewContainer(settings=resolved, client=client, cache=cache, workflow=workflow)
