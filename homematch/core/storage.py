"""
Durable key-value storage for the bearer token.

The session logic only talks to the TokenStore interface so it runs the same
against process memory, a JSON file on disk or a shared Redis instance.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from redis import asyncio as aioredis

from homematch.core.config import Settings
from homematch.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class TokenStore:
    """Interface for bearer token persistence under a single fixed key"""

    def __init__(self, key: str = "authToken"):
        self.key = key

    async def get(self) -> Optional[str]:
        raise NotImplementedError

    async def set(self, token: str) -> None:
        raise NotImplementedError

    async def remove(self) -> None:
        raise NotImplementedError


class MemoryTokenStore(TokenStore):
    """Process-local storage, lost on exit"""

    def __init__(self, key: str = "authToken", initial: Optional[str] = None):
        super().__init__(key)
        self._values: Dict[str, str] = {}
        if initial:
            self._values[key] = initial

    async def get(self) -> Optional[str]:
        return self._values.get(self.key)

    async def set(self, token: str) -> None:
        self._values[self.key] = token

    async def remove(self) -> None:
        self._values.pop(self.key, None)


class FileTokenStore(TokenStore):
    """
    JSON file storage that survives restarts.

    The file holds a flat object so several keys can share it; removing the
    last key deletes the file.
    """

    def __init__(self, path: str | Path, key: str = "authToken"):
        super().__init__(key)
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Unreadable token file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        if not data:
            self.path.unlink(missing_ok=True)
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    async def get(self) -> Optional[str]:
        return self._read().get(self.key)

    async def set(self, token: str) -> None:
        data = self._read()
        data[self.key] = token
        self._write(data)

    async def remove(self) -> None:
        data = self._read()
        if data.pop(self.key, None) is not None:
            self._write(data)


class RedisTokenStore(TokenStore):
    """Redis-backed storage for deployments that share a session across processes"""

    def __init__(
        self,
        redis_url: str = "redis://redis:6379/0",
        key: str = "authToken",
        client: Optional[aioredis.Redis] = None,
        namespace: str = "homematch"
    ):
        super().__init__(key)
        self.redis_url = redis_url
        self.namespace = namespace
        self.redis: Optional[aioredis.Redis] = client

    @property
    def redis_key(self) -> str:
        return f"{self.namespace}:{self.key}"

    def _client(self) -> aioredis.Redis:
        if self.redis is None:
            self.redis = aioredis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
                socket_connect_timeout=5
            )
        return self.redis

    async def get(self) -> Optional[str]:
        return await self._client().get(self.redis_key)

    async def set(self, token: str) -> None:
        await self._client().set(self.redis_key, token)

    async def remove(self) -> None:
        await self._client().delete(self.redis_key)

    async def close(self) -> None:
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None


def build_token_store(settings: Settings) -> TokenStore:
    """
    Create the token store named by settings.TOKEN_STORE

    Raises:
        ConfigurationError: If the backend name is unknown
    """
    backend = settings.TOKEN_STORE
    if backend == "memory":
        return MemoryTokenStore(key=settings.AUTH_TOKEN_KEY)
    if backend == "file":
        return FileTokenStore(settings.TOKEN_FILE_PATH, key=settings.AUTH_TOKEN_KEY)
    if backend == "redis":
        return RedisTokenStore(settings.REDIS_URL, key=settings.AUTH_TOKEN_KEY)
    raise ConfigurationError(f"Unknown token store backend: {backend}")
