from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import logging

from customer_sync.domain.contracts import CustomersClient, Revalidate, SnapshotListener
from customer_sync.domain.error_taxonomy import resolve_api_error
from customer_sync.domain.errors import RemoteError
from customer_sync.domain.models import ApiError, CacheSnapshot, CustomerCollection

logger = logging.getLogger("customer_sync.cache")


@dataclass
class _CacheEntry:
    key: str
    data: CustomerCollection | None = None
    error: ApiError | None = None
    in_flight: int = 0
    started: bool = False
    listeners: list[SnapshotListener] = field(default_factory=list)
    tasks: set[asyncio.Task[CacheSnapshot]] = field(default_factory=set)

    def snapshot(self) -> CacheSnapshot:
        return CacheSnapshot(
            key=self.key,
            data=self.data,
            error=self.error,
            is_loading=self.in_flight > 0 and self.data is None,
            is_validating=self.in_flight > 0,
        )


@dataclass
class Subscription:
    key: str
    cache: RemoteCollectionCache
    listener: SnapshotListener | None = None

    @property
    def snapshot(self) -> CacheSnapshot:
        return self.cache.snapshot(self.key)

    async def revalidate(self) -> CacheSnapshot:
        return await self.cache.revalidate(self.key)

    def unsubscribe(self) -> None:
        if self.listener is not None:
            self.cache.remove_listener(self.key, self.listener)
            self.listener = None


class RemoteCollectionCache:
    """Fetch/cache/revalidate lifecycle for collection resources, keyed by path.

    Entries are shared by every subscriber of a key. Each completed fetch
    replaces the published state wholesale, so with overlapping revalidations
    the last response to arrive wins. Failures never propagate to callers;
    they are recorded on the entry and published like any other result.
    """

    def __init__(self, *, client: CustomersClient) -> None:
        self._client = client
        self._entries: dict[str, _CacheEntry] = {}

    def subscribe(self, key: str, listener: SnapshotListener | None = None) -> Subscription:
        # The initial fetch is scheduled on the running loop; call from a coroutine.
        loop = asyncio.get_running_loop()
        entry = self._entry(key)
        if listener is not None:
            entry.listeners.append(listener)
        if not entry.started:
            entry.started = True
            self._begin(entry)
            task = loop.create_task(self._settle(entry))
            entry.tasks.add(task)
            task.add_done_callback(entry.tasks.discard)
        return Subscription(key=key, cache=self, listener=listener)

    def snapshot(self, key: str) -> CacheSnapshot:
        entry = self._entries.get(key)
        if entry is None:
            return CacheSnapshot(key=key)
        return entry.snapshot()

    def remove_listener(self, key: str, listener: SnapshotListener) -> None:
        entry = self._entries.get(key)
        if entry is not None and listener in entry.listeners:
            entry.listeners.remove(listener)

    async def revalidate(self, key: str) -> CacheSnapshot:
        entry = self._entry(key)
        entry.started = True
        self._begin(entry)
        return await self._settle(entry)

    def revalidator(self, key: str) -> Revalidate:
        async def _revalidate() -> CacheSnapshot:
            return await self.revalidate(key)

        return _revalidate

    async def wait_settled(self, key: str) -> CacheSnapshot:
        entry = self._entry(key)
        while entry.tasks:
            await asyncio.gather(*list(entry.tasks))
        return entry.snapshot()

    def _entry(self, key: str) -> _CacheEntry:
        entry = self._entries.get(key)
        if entry is None:
            entry = _CacheEntry(key=key)
            self._entries[key] = entry
        return entry

    def _begin(self, entry: _CacheEntry) -> None:
        entry.in_flight += 1
        logger.info("collection fetch started", extra={"resource_key": entry.key})
        self._publish(entry)

    async def _settle(self, entry: _CacheEntry) -> CacheSnapshot:
        try:
            data = await self._client.fetch_collection(key=entry.key)
        except RemoteError as exc:
            entry.error = exc.api_error
            logger.warning(
                "collection fetch failed",
                extra={"resource_key": entry.key, "error_code": exc.api_error.code, "status_code": exc.status_code},
            )
        except Exception:
            entry.error = resolve_api_error(operation="read", code="internal_error")
            logger.exception("collection fetch crashed", extra={"resource_key": entry.key})
        else:
            entry.data = data
            entry.error = None
            logger.info("collection fetch settled", extra={"resource_key": entry.key})
        finally:
            entry.in_flight -= 1
        self._publish(entry)
        return entry.snapshot()

    def _publish(self, entry: _CacheEntry) -> None:
        snapshot = entry.snapshot()
        for listener in list(entry.listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("cache listener failed", extra={"resource_key": entry.key})
