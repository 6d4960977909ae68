import json

import pytest

from homematch.core.config import Settings
from homematch.core.exceptions import ConfigurationError
from homematch.core.storage import (
    FileTokenStore,
    MemoryTokenStore,
    RedisTokenStore,
    build_token_store,
)


class FakeRedis:
    """Minimal async stand-in for redis.asyncio.Redis"""

    def __init__(self):
        self.data = {}
        self.closed = False

    async def get(self, key):
        return self.data.get(key)

    async def set(self, key, value):
        self.data[key] = value

    async def delete(self, key):
        self.data.pop(key, None)

    async def aclose(self):
        self.closed = True


@pytest.mark.asyncio
async def test_memory_store():
    store = MemoryTokenStore()

    assert await store.get() is None
    await store.set("t1")
    assert await store.get() == "t1"
    await store.remove()
    assert await store.get() is None
    # Removing twice is fine
    await store.remove()


@pytest.mark.asyncio
async def test_file_store_survives_new_instance(tmp_path):
    path = tmp_path / "state" / "session.json"

    await FileTokenStore(path).set("t1")

    assert await FileTokenStore(path).get() == "t1"
    assert json.loads(path.read_text()) == {"authToken": "t1"}


@pytest.mark.asyncio
async def test_file_store_remove_deletes_empty_file(tmp_path):
    path = tmp_path / "session.json"
    store = FileTokenStore(path)
    await store.set("t1")

    await store.remove()

    assert await store.get() is None
    assert not path.exists()


@pytest.mark.asyncio
async def test_file_store_keeps_other_keys(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"theme": "dark", "authToken": "t1"}))

    await FileTokenStore(path).remove()

    assert json.loads(path.read_text()) == {"theme": "dark"}


@pytest.mark.asyncio
async def test_file_store_unreadable_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json")

    store = FileTokenStore(path)

    assert await store.get() is None
    await store.set("t2")
    assert await store.get() == "t2"


@pytest.mark.asyncio
async def test_redis_store_uses_namespaced_key():
    client = FakeRedis()
    store = RedisTokenStore(client=client)

    await store.set("t1")
    assert client.data == {"homematch:authToken": "t1"}
    assert await store.get() == "t1"

    await store.remove()
    assert client.data == {}

    await store.close()
    assert client.closed


def test_build_token_store(tmp_path):
    memory = build_token_store(Settings(TOKEN_STORE="memory"))
    file_store = build_token_store(
        Settings(TOKEN_STORE=" File ", TOKEN_FILE_PATH=str(tmp_path / "s.json"))
    )
    redis_store = build_token_store(Settings(TOKEN_STORE="redis", AUTH_TOKEN_KEY="tok"))

    assert isinstance(memory, MemoryTokenStore)
    assert isinstance(file_store, FileTokenStore)
    assert isinstance(redis_store, RedisTokenStore)
    assert redis_store.redis_key == "homematch:tok"


def test_build_token_store_unknown_backend():
    with pytest.raises(ConfigurationError) as exc_info:
        build_token_store(Settings(TOKEN_STORE="sqlite"))

    assert "sqlite" in exc_info.value.message
