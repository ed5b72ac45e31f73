import json

from pokecache.database.memory_store import InMemorySnapshotStore
from pokecache.database.snapshot_store import SnapshotStore
from pokecache.integrations.contracts.catalog import CacheSnapshot

from conftest import make_record


def test_load_missing_file_returns_empty_snapshot(tmp_path):
    store = SnapshotStore(tmp_path / "cache.json")

    snapshot = store.load()

    assert snapshot.fetched_at is None
    assert snapshot.pokemon == {}


def test_load_corrupt_file_falls_back_to_empty(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text("{not json", encoding="utf-8")

    snapshot = SnapshotStore(path).load()

    assert snapshot.fetched_at is None
    assert snapshot.pokemon == {}


def test_load_invalid_record_falls_back_to_empty(tmp_path):
    path = tmp_path / "cache.json"
    path.write_text(json.dumps({"fetched_at": None, "pokemon": {"x": {"id": -1, "name": "x"}}}), encoding="utf-8")

    assert SnapshotStore(path).load().pokemon == {}


def test_save_stamps_timestamp_and_round_trips(tmp_path):
    path = tmp_path / "nested" / "cache.json"
    store = SnapshotStore(path)
    snapshot = CacheSnapshot(pokemon={"bulbasaur": make_record(1, "bulbasaur", types=["grass", "poison"])})

    store.save(snapshot)

    assert snapshot.fetched_at is not None
    body = json.loads(path.read_text(encoding="utf-8"))
    assert body["fetched_at"] == snapshot.fetched_at
    assert body["pokemon"]["bulbasaur"]["types"] == ["grass", "poison"]
    assert not (tmp_path / "nested" / "cache.json.tmp").exists()

    reloaded = store.load()
    assert reloaded.fetched_at == snapshot.fetched_at
    assert reloaded.pokemon["bulbasaur"] == snapshot.pokemon["bulbasaur"]


def test_load_rekeys_mixed_case_entries(tmp_path):
    path = tmp_path / "cache.json"
    record = make_record(25, "pikachu").model_dump()
    path.write_text(json.dumps({"fetched_at": "2024-01-01T00:00:00+00:00", "pokemon": {"Pikachu": record}}), encoding="utf-8")

    snapshot = SnapshotStore(path).load()

    assert list(snapshot.pokemon) == ["pikachu"]


def test_in_memory_store_returns_copies():
    store = InMemorySnapshotStore()
    snapshot = CacheSnapshot(pokemon={"eevee": make_record(133, "eevee")})

    store.save(snapshot)
    loaded = store.load()
    loaded.pokemon.clear()

    assert "eevee" in store.load().pokemon
    assert store.save_count == 1
