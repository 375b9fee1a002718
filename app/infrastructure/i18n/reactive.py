"""Minimal observable cells for driving locale switches.

The host application normally owns its reactive runtime. This module is
the smallest contract the i18n layer needs from one: a readable value
that notifies dependents on change (``Signal``), computations that re-run
when the values they read change (``Effect``), and an asynchronously
refreshed value derived from a signal (``Resource``).

Example:
    locale = Signal("en")
    resolvers = Resource(locale, lambda code, _: cache.get(code))
    t = translator(resolvers)

    create_effect(lambda: render(t("hello", {"name": "Sam"})))
    locale.set("pl")  # re-fetches, then re-renders
"""

import asyncio
import inspect
from contextvars import ContextVar
from typing import Any, Callable, Generic, Optional, Set, TypeVar

from infrastructure.logging import get_module_logger

logger = get_module_logger()

T = TypeVar("T")
S = TypeVar("S")

_running_effect: ContextVar[Optional["Effect"]] = ContextVar(
    "running_effect", default=None
)


def untrack(fn: Callable[[], T]) -> T:
    """Call ``fn`` without registering its signal reads as dependencies."""
    token = _running_effect.set(None)
    try:
        return fn()
    finally:
        _running_effect.reset(token)


class Signal(Generic[T]):
    """A readable and writable value cell.

    Reading (``signal()``) inside a running effect subscribes that effect.
    ``set`` with an equal value does nothing; otherwise every subscribed
    effect re-runs synchronously.
    """

    def __init__(self, value: T):
        self._value = value
        self._observers: Set["Effect"] = set()

    def __call__(self) -> T:
        effect = _running_effect.get()
        if effect is not None:
            effect._track(self)
        return self._value

    def peek(self) -> T:
        """Read the value without subscribing."""
        return self._value

    def set(self, value: T) -> None:
        if value is self._value or value == self._value:
            return
        self._value = value
        for effect in list(self._observers):
            effect.run()


class Effect:
    """A computation re-run whenever a signal it read changes."""

    def __init__(self, fn: Callable[[], Any]):
        self._fn = fn
        self._sources: Set[Signal] = set()
        self.disposed = False

    def _track(self, signal: Signal) -> None:
        self._sources.add(signal)
        signal._observers.add(self)

    def _untrack_all(self) -> None:
        for signal in self._sources:
            signal._observers.discard(self)
        self._sources.clear()

    def run(self) -> None:
        """Re-run the computation, re-collecting its dependencies."""
        if self.disposed:
            return
        self._untrack_all()
        token = _running_effect.set(self)
        try:
            self._fn()
        finally:
            _running_effect.reset(token)

    def dispose(self) -> None:
        """Stop reacting to changes."""
        self.disposed = True
        self._untrack_all()


def create_effect(fn: Callable[[], Any]) -> Effect:
    """Run ``fn`` now and again whenever a signal it reads changes.

    Returns:
        The Effect; call ``dispose()`` to detach it.
    """
    effect = Effect(fn)
    effect.run()
    return effect


class Resource(Generic[S, T]):
    """Value derived from a source signal through a possibly async fetcher.

    ``fetcher(source_value, current_value)`` is called immediately and every
    time the source changes. Plain results replace the value at once.
    Awaitable results are scheduled on the running event loop; ``loading``
    is True until the latest fetch settles, and results of superseded
    fetches are dropped. A failed fetch keeps the previous value and records
    the exception on ``error``.

    Reading the resource (``resource()``) subscribes the running effect, so
    effects re-run once a new value lands.
    """

    def __init__(
        self,
        source: Signal[S],
        fetcher: Callable[[S, Optional[T]], Any],
        initial_value: Optional[T] = None,
    ):
        self._source = source
        self._fetcher = fetcher
        self._value: Signal[Optional[T]] = Signal(initial_value)
        self._task: Optional[asyncio.Future] = None
        self._version = 0
        self.loading = False
        self.error: Optional[Exception] = None
        self._effect = create_effect(self._refetch)

    def __call__(self) -> Optional[T]:
        return self._value()

    def peek(self) -> Optional[T]:
        """Read the current value without subscribing."""
        return self._value.peek()

    def _refetch(self) -> None:
        key = self._source()
        self._version += 1
        version = self._version
        result = untrack(lambda: self._fetcher(key, self._value.peek()))

        if inspect.isawaitable(result):
            self.loading = True
            self._task = asyncio.ensure_future(self._settle(result, version))
            return

        self._task = None
        self.loading = False
        self.error = None
        self._value.set(result)

    async def _settle(self, awaitable, version: int) -> None:
        # Tasks inherit the creating context; fetch code must not track
        _running_effect.set(None)
        try:
            value = await awaitable
        except Exception as error:
            logger.error("resource_fetch_failed", error=str(error), version=version)
            if version == self._version:
                self.error = error
                self.loading = False
            return

        if version != self._version:
            logger.debug("resource_fetch_superseded", version=version)
            return

        self.loading = False
        self.error = None
        self._value.set(value)

    async def wait(self) -> Optional[T]:
        """Wait for the in-flight fetch, if any, and return the current value.

        Raises:
            Exception: The failure of the latest fetch.
        """
        while self._task is not None and not self._task.done():
            await self._task
        if self.error is not None:
            raise self.error
        return self._value.peek()

    def dispose(self) -> None:
        """Stop following the source and cancel a pending fetch."""
        self._effect.dispose()
        if self._task is not None and not self._task.done():
            self._task.cancel()
