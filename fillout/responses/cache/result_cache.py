"""Bounded FIFO cache of unfiltered datasets.

Architecture:
    Entries map a query identity key to the full, unfiltered dataset fetched
    for it. Capacity is fixed at construction. When full, the oldest inserted
    entry is evicted; reads never change eviction order.

    `get_or_load` adds single-flight loading: concurrent misses on one key
    share a single in-flight load, and every waiter gets its result or its
    exception. Only successful loads are stored.

Concurrency:
    Intended for a single asyncio event loop. No locks are taken; the
    in-flight map is only touched from loop callbacks and coroutines.
"""

from __future__ import annotations

import asyncio
import logging
from collections import OrderedDict
from collections.abc import Awaitable, Callable, Iterable, Sequence
from typing import Generic, TypeVar

from ..core.constants import DEFAULT_CACHE_SIZE

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResultCache(Generic[T]):
    """FIFO-evicting cache of immutable record sequences."""

    def __init__(self, capacity: int = DEFAULT_CACHE_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._store: OrderedDict[str, tuple[T, ...]] = OrderedDict()
        self._pending: dict[str, asyncio.Future[tuple[T, ...]]] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def keys(self) -> list[str]:
        """Keys in insertion order, oldest first."""
        return list(self._store)

    def get(self, key: str) -> tuple[T, ...] | None:
        """Return the stored dataset, or None on a miss.

        A hit does not refresh the entry's position in the eviction order.
        """
        return self._store.get(key)

    def put(self, key: str, dataset: Iterable[T]) -> None:
        """Insert a dataset, evicting the oldest entry when at capacity.

        Re-inserting an existing key drops the old slot and appends a fresh
        one at the back of the eviction order.
        """
        self._store.pop(key, None)
        if len(self._store) >= self._capacity:
            evicted, _ = self._store.popitem(last=False)
            logger.debug("cache_evicted", extra={"cache_key": evicted})
        self._store[key] = tuple(dataset)

    def clear(self) -> None:
        """Drop every entry and detach in-flight loads.

        Detached loads still resolve for their waiters but are never stored.
        """
        self._store.clear()
        self._pending.clear()

    async def get_or_load(
        self,
        key: str,
        loader: Callable[[], Awaitable[Sequence[T]]],
    ) -> tuple[T, ...]:
        """Return the cached dataset, loading it once on a miss.

        Args:
            key: Cache key
            loader: Zero-argument coroutine function producing the dataset

        Returns:
            The dataset stored under `key`

        Raises:
            Exception: Whatever the loader raised; nothing is cached then
        """
        cached = self._store.get(key)
        if cached is not None:
            logger.debug("cache_hit", extra={"cache_key": key})
            return cached

        pending = self._pending.get(key)
        if pending is None:
            logger.debug("cache_miss", extra={"cache_key": key})
            pending = asyncio.ensure_future(self._load(loader))
            self._pending[key] = pending
            pending.add_done_callback(lambda future: self._settle(key, future))
        else:
            logger.debug("cache_join_inflight", extra={"cache_key": key})

        # Cancelling one waiter must not cancel the shared load
        return await asyncio.shield(pending)

    @staticmethod
    async def _load(loader: Callable[[], Awaitable[Sequence[T]]]) -> tuple[T, ...]:
        return tuple(await loader())

    def _settle(self, key: str, future: asyncio.Future[tuple[T, ...]]) -> None:
        # A load detached by clear() is delivered to its waiters but not stored
        owned = self._pending.get(key) is future
        if owned:
            del self._pending[key]
        if future.cancelled():
            return
        if future.exception() is not None:
            logger.debug("cache_load_failed", extra={"cache_key": key})
            return
        if owned:
            self.put(key, future.result())
