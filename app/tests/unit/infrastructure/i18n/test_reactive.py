"""Tests for infrastructure.i18n.reactive module."""

import asyncio

import pytest

from infrastructure.i18n.reactive import Resource, Signal, create_effect, untrack


class TestSignal:
    """Tests for Signal and effects."""

    def test_read_and_set(self):
        """Signals return their current value."""
        signal = Signal(1)
        signal.set(2)
        assert signal() == 2
        assert signal.peek() == 2

    def test_effect_reruns_on_change(self):
        """Effects re-run when a signal they read changes."""
        signal = Signal("en")
        seen = []

        create_effect(lambda: seen.append(signal()))
        signal.set("pl")

        assert seen == ["en", "pl"]

    def test_equal_value_does_not_notify(self):
        """Setting an equal value does not re-run effects."""
        signal = Signal("en")
        seen = []

        create_effect(lambda: seen.append(signal()))
        signal.set("en")

        assert seen == ["en"]

    def test_dispose_stops_effect(self):
        """Disposed effects no longer re-run."""
        signal = Signal(0)
        seen = []

        effect = create_effect(lambda: seen.append(signal()))
        effect.dispose()
        signal.set(1)

        assert seen == [0]

    def test_peek_and_untrack_do_not_subscribe(self):
        """peek() and untrack() reads do not create dependencies."""
        first = Signal(0)
        second = Signal(0)
        runs = []

        def compute():
            runs.append((first.peek(), untrack(second)))

        create_effect(compute)
        first.set(1)
        second.set(1)

        assert runs == [(0, 0)]

    def test_dependencies_are_recollected(self):
        """Effects only follow the signals read in their latest run."""
        switch = Signal(True)
        left = Signal("l")
        right = Signal("r")
        seen = []

        create_effect(lambda: seen.append(left() if switch() else right()))
        switch.set(False)
        left.set("l2")

        assert seen == ["l", "r"]


class TestResource:
    """Tests for Resource."""

    def test_sync_fetcher(self):
        """Plain fetcher results are applied immediately."""
        source = Signal("en")
        resource = Resource(source, lambda key, current: key.upper())

        assert resource() == "EN"
        source.set("pl")
        assert resource() == "PL"
        assert resource.loading is False

    def test_fetcher_receives_current_value(self):
        """The fetcher gets the previous value as its second argument."""
        source = Signal("en")
        received = []

        def fetcher(key, current):
            received.append(current)
            return key

        Resource(source, fetcher, initial_value="initial")
        assert received == ["initial"]

    @pytest.mark.asyncio
    async def test_async_fetcher(self):
        """Awaitable results land after the fetch settles."""
        source = Signal("en")

        async def fetcher(key, current):
            return key.upper()

        resource = Resource(source, fetcher, initial_value="initial")
        assert resource() == "initial"
        assert resource.loading is True

        assert await resource.wait() == "EN"
        assert resource.loading is False

    @pytest.mark.asyncio
    async def test_superseded_fetch_is_dropped(self):
        """Only the latest fetch may set the value."""
        source = Signal("slow")
        release = asyncio.Event()

        async def fetcher(key, current):
            if key == "slow":
                await release.wait()
            return key

        resource = Resource(source, fetcher)
        source.set("fast")
        await resource.wait()
        release.set()
        await asyncio.sleep(0)
        await asyncio.sleep(0)

        assert resource() == "fast"

    @pytest.mark.asyncio
    async def test_failed_fetch_keeps_value(self):
        """A failed fetch records the error and keeps the last value."""
        source = Signal("ok")

        async def fetcher(key, current):
            if key == "bad":
                raise RuntimeError("fetch failed")
            return key

        resource = Resource(source, fetcher)
        await resource.wait()
        source.set("bad")

        with pytest.raises(RuntimeError):
            await resource.wait()
        assert resource() == "ok"
        assert isinstance(resource.error, RuntimeError)

    @pytest.mark.asyncio
    async def test_effect_follows_resource(self):
        """Effects reading a resource re-run when its value lands."""
        source = Signal(1)

        async def fetcher(key, current):
            return key * 10

        resource = Resource(source, fetcher, initial_value=0)
        seen = []
        effect = create_effect(lambda: seen.append(resource()))

        await resource.wait()
        source.set(2)
        await resource.wait()

        assert seen == [0, 10, 20]
        effect.dispose()
        resource.dispose()
