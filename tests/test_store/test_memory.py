"""Tests for the in-memory reference store."""

from curabot.store.memory import InMemoryReferenceStore


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


async def test_ids_are_monotonic_counter():
    store = InMemoryReferenceStore()
    assert await store.put("https://example.com/a", "x") == "0"
    assert await store.put("https://example.com/b", "y") == "1"


async def test_entries_expire_after_ttl():
    clock = FakeClock()
    store = InMemoryReferenceStore(ttl_seconds=60, clock=clock)
    reference_id = await store.put("https://example.com/a", "tag")

    clock.now += 59
    assert await store.get(reference_id) is not None

    clock.now += 1
    assert await store.get(reference_id) is None
    assert len(store) == 0


async def test_without_ttl_entries_live_for_process():
    clock = FakeClock()
    store = InMemoryReferenceStore(clock=clock)
    reference_id = await store.put("https://example.com/a", "tag")

    clock.now += 10 * 365 * 86_400
    assert await store.get(reference_id) is not None


async def test_write_sweeps_expired_entries_that_were_never_read():
    clock = FakeClock()
    store = InMemoryReferenceStore(ttl_seconds=60, clock=clock)
    await store.put("https://example.com/a", "old")
    await store.put("https://example.com/b", "old")

    clock.now += 61
    fresh_id = await store.put("https://example.com/c", "new")

    assert len(store) == 1
    assert (await store.get(fresh_id)).url == "https://example.com/c"


async def test_write_keeps_entries_still_within_ttl():
    clock = FakeClock()
    store = InMemoryReferenceStore(ttl_seconds=60, clock=clock)
    await store.put("https://example.com/a", "tag")

    clock.now += 30
    await store.put("https://example.com/b", "tag")

    assert len(store) == 2
