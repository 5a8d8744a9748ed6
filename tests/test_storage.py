import pytest
from unittest import mock

from frontend.storage import MemoryStore, SqliteStore

@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    if request.param == "memory":
        return MemoryStore()
    return SqliteStore(str(tmp_path / "test_kv.db"))

def test_missing_key(store):
    assert store.load("codesensei_xp") is None

def test_save_load_upsert_delete(store):
    store.save("codesensei_xp", "12.4")
    assert store.load("codesensei_xp") == "12.4"

    store.save("codesensei_xp", "13")
    assert store.load("codesensei_xp") == "13"

    store.delete("codesensei_xp")
    assert store.load("codesensei_xp") is None

def test_keys_are_independent(store):
    store.save("a", "1")
    store.save("b", "2")
    assert store.load("a") == "1"
    assert store.load("b") == "2"

def test_sqlite_survives_reopen(tmp_path):
    db_path = str(tmp_path / "test_kv.db")
    SqliteStore(db_path).save("codesensei_xp", "42.2")

    assert SqliteStore(db_path).load("codesensei_xp") == "42.2"

def test_sqlite_errors_degrade_to_missing(tmp_path):
    store = SqliteStore(str(tmp_path / "test_kv.db"))
    with mock.patch("frontend.storage.sqlite3.connect", side_effect=Exception("disk gone")):
        store.save("codesensei_xp", "1")
        assert store.load("codesensei_xp") is None

def test_memory_store_initial_values():
    store = MemoryStore({"codesensei_xp": "7"})
    assert store.load("codesensei_xp") == "7"
