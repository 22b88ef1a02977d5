"""Key-value store adapters: memory, SQL (SQLite in-memory) and Redis (mocked client)."""

from unittest.mock import MagicMock

import pytest
import redis

from marketplace.data.store import MemoryStore, RedisStore, SqlStore, create_store


@pytest.fixture(params=["memory", "sql"])
def kv(request):
    store = MemoryStore() if request.param == "memory" else SqlStore("sqlite://")
    yield store
    store.close()


def test_missing_key_reads_none(kv):
    assert kv.read("nope") is None


def test_write_is_visible_to_next_read(kv):
    kv.write("a", '[1]')
    assert kv.read("a") == '[1]'


def test_write_replaces_whole_value(kv):
    kv.write("a", '[1]')
    kv.write("a", '[1, 2]')
    assert kv.read("a") == '[1, 2]'


def test_write_many_sets_every_key(kv):
    kv.write("a", "old")
    kv.write_many({"a": "new", "b": "{}"})
    assert kv.read("a") == "new"
    assert kv.read("b") == "{}"


def test_remove_is_idempotent(kv):
    kv.write("a", "x")
    kv.remove("a")
    kv.remove("a")
    assert kv.read("a") is None


def test_create_store_rejects_unknown_backend():
    with pytest.raises(ValueError):
        create_store("etcd")


def test_create_store_memory():
    assert isinstance(create_store("memory"), MemoryStore)


def test_redis_store_uses_mset_for_batches():
    client = MagicMock()
    store = RedisStore(client=client)

    store.write_many({"k1": "v1", "k2": "v2"})

    client.mset.assert_called_once_with({"k1": "v1", "k2": "v2"})


def test_redis_store_skips_empty_batch():
    client = MagicMock()
    RedisStore(client=client).write_many({})
    client.mset.assert_not_called()


def test_redis_store_read_write_remove():
    client = MagicMock()
    client.get.return_value = "[]"
    store = RedisStore(client=client)

    assert store.read("k") == "[]"
    store.write("k", "[1]")
    store.remove("k")

    client.get.assert_called_once_with("k")
    client.set.assert_called_once_with("k", "[1]")
    client.delete.assert_called_once_with("k")


def test_redis_store_retries_connection_errors():
    client = MagicMock()
    client.get.side_effect = [redis.ConnectionError("down"), "[]"]

    assert RedisStore(client=client).read("k") == "[]"
    assert client.get.call_count == 2


def test_redis_store_gives_up_after_three_attempts():
    client = MagicMock()
    client.get.side_effect = redis.ConnectionError("down")

    with pytest.raises(redis.ConnectionError):
        RedisStore(client=client).read("k")
    assert client.get.call_count == 3
