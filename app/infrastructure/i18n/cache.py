"""Locale-keyed cache of ResolverDicts with single-flight production."""

import asyncio
import inspect
from threading import RLock
from typing import Any, Awaitable, Callable, Dict, Generic, Hashable, TypeVar, Union

from infrastructure.logging import get_module_logger

logger = get_module_logger()

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Produced = Union[V, Awaitable[V]]


class SimpleCache(Generic[K, V]):
    """Memoizes ``produce(key)`` per key, sharing in-flight productions.

    The first ``get`` for a key calls ``produce`` and stores its result
    immediately. Awaitable results are wrapped in a future before being
    stored, so concurrent callers all await the same production and
    ``produce`` runs at most once per key. A settled future is not replaced
    by its value; callers await it (or use ``aget``).

    Failed asynchronous productions stay cached: every later ``get``
    returns the same failed future until the key is evicted. A synchronous
    ``produce`` that raises stores nothing.

    Attributes:
        cache: Direct key -> value/future mapping. Insert into it to seed a
            key (``produce`` is then never called for that key).
    """

    def __init__(self, produce: Callable[[K], Produced]):
        """Initialize the cache.

        Args:
            produce: Called with a key on a miss; returns the value or an
                awaitable of it.
        """
        self.produce = produce
        self.cache: Dict[K, Any] = {}
        self._lock = RLock()

    def get(self, key: K) -> Produced:
        """Return the cached entry for ``key``, producing it on a miss.

        Args:
            key: Cache key (a locale identifier).

        Returns:
            The materialized value, or an ``asyncio.Future`` while an
            asynchronous production is pending or once it has settled.

        Raises:
            RuntimeError: If ``produce`` returns an awaitable while no event
                loop is running; nothing is stored for the key.
            Exception: Whatever a synchronous ``produce`` raises.
        """
        with self._lock:
            if key in self.cache:
                return self.cache[key]

            logger.info("locale_cache_miss", key=key)
            value = self.produce(key)
            if inspect.isawaitable(value):
                try:
                    loop = asyncio.get_running_loop()
                except RuntimeError:
                    if inspect.iscoroutine(value):
                        value.close()
                    logger.error("locale_production_without_event_loop", key=key)
                    raise RuntimeError(
                        f"Producing {key!r} asynchronously requires a running event loop"
                    ) from None
                value = asyncio.ensure_future(value, loop=loop)
                value.add_done_callback(lambda future: self._report(key, future))
            self.cache[key] = value
            return value

    async def aget(self, key: K) -> V:
        """Return the materialized value for ``key``, awaiting if pending.

        Raises:
            Exception: Whatever the production raised.
        """
        value = self.get(key)
        if inspect.isawaitable(value):
            return await value
        return value

    def evict(self, key: K) -> bool:
        """Drop the entry for ``key`` so the next ``get`` produces it again.

        Returns:
            True if an entry was removed.
        """
        with self._lock:
            removed = key in self.cache
            self.cache.pop(key, None)
        if removed:
            logger.info("locale_cache_evicted", key=key)
        return removed

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self.cache.clear()
        logger.info("locale_cache_cleared")

    def __contains__(self, key: object) -> bool:
        return key in self.cache

    def __len__(self) -> int:
        return len(self.cache)

    @staticmethod
    def _report(key: K, future: "asyncio.Future") -> None:
        if future.cancelled():
            logger.warning("locale_production_cancelled", key=key)
            return
        error = future.exception()
        if error is not None:
            logger.error("locale_production_failed", key=key, error=str(error))
        else:
            logger.info("locale_production_completed", key=key)
