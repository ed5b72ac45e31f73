import asyncio

import httpx
import pytest

from pokecache.catalog.refresh import RefreshOrchestrator
from pokecache.integrations.clients.real_http.pokeapi import PokeApiClient
from pokecache.integrations.contracts.errors import RemoteError

from conftest import DummyCatalogClient, make_record


@pytest.mark.asyncio
async def test_partial_failures_do_not_abort_refresh(cache):
    cache.upsert(make_record(150, "mewtwo"))
    records = [make_record(i, name) for i, name in enumerate(["a", "b", "c", "d", "e"], start=1)]
    client = DummyCatalogClient(records)
    client.failing["b"] = RemoteError.timeout()
    client.failing["d"] = RemoteError.http_status(500)

    outcome = await RefreshOrchestrator(cache, client).refresh(5)

    assert outcome.attempted == 5
    assert outcome.refreshed == 3
    assert outcome.failed == ["b", "d"]
    assert outcome.cached == 4
    assert cache.get("a") and cache.get("c") and cache.get("e")
    assert cache.get("b") is None


@pytest.mark.asyncio
async def test_details_are_fetched_sequentially_in_list_order(cache):
    client = DummyCatalogClient([make_record(2, "ivysaur"), make_record(1, "bulbasaur")], listing=["ivysaur", "bulbasaur"])

    await RefreshOrchestrator(cache, client).refresh(150)

    assert client.list_calls == [150]
    assert client.detail_calls == ["ivysaur", "bulbasaur"]


@pytest.mark.asyncio
async def test_listing_failure_propagates_and_leaves_cache_unchanged(cache, store):
    cache.upsert(make_record(1, "bulbasaur"))
    saves_before = store.save_count
    client = DummyCatalogClient()
    client.list_error = RemoteError.network()

    with pytest.raises(RemoteError):
        await RefreshOrchestrator(cache, client).refresh(10)

    assert cache.count() == 1
    assert store.save_count == saves_before
    assert client.detail_calls == []


@pytest.mark.asyncio
async def test_zero_successes_still_resaves_snapshot(cache, store):
    cache.upsert(make_record(1, "bulbasaur"))
    saves_before = store.save_count
    client = DummyCatalogClient(listing=["ghost"])
    client.failing["ghost"] = RemoteError.http_status(404)

    outcome = await RefreshOrchestrator(cache, client).refresh(1)

    assert outcome.refreshed == 0
    assert outcome.cached == 1
    assert store.save_count == saves_before + 1
    assert list(store.load().pokemon) == ["bulbasaur"]


@pytest.mark.asyncio
async def test_overlapping_refreshes_run_one_after_another(cache):
    class SlowClient(DummyCatalogClient):
        def __init__(self, *args, **kwargs):
            super().__init__(*args, **kwargs)
            self.active = 0
            self.max_active = 0

        async def list_identifiers(self, limit):
            self.active += 1
            self.max_active = max(self.max_active, self.active)
            await asyncio.sleep(0)
            try:
                return await super().list_identifiers(limit)
            finally:
                self.active -= 1

    client = SlowClient([make_record(1, "bulbasaur")])
    refresher = RefreshOrchestrator(cache, client)

    first, second = await asyncio.gather(refresher.refresh(1), refresher.refresh(1))

    assert client.max_active == 1
    assert first.cached == second.cached == 1


@pytest.mark.asyncio
async def test_unrequestable_entry_does_not_abort_batch(cache):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/pokemon"):
            return httpx.Response(200, json={"results": [{"name": "bad\x00name"}, {"name": "pikachu"}]})
        return httpx.Response(200, json={"id": 25, "name": "pikachu", "weight": 60})

    client = PokeApiClient(base_url="https://pokeapi.test/api/v2", transport=httpx.MockTransport(handler))

    outcome = await RefreshOrchestrator(cache, client).refresh(2)

    assert outcome.failed == ["bad\x00name"]
    assert outcome.refreshed == 1
    assert cache.get("pikachu").id == 25
