from typing import Optional

import redis.asyncio as redis

from src.app.services.token_store import ITokenStore


class RedisTokenStore(ITokenStore):
    """
    Redis-backed TTL store.

    Expiry is delegated to Redis (SET EX) and pop() uses GETDEL, so two
    concurrent consumers of the same token cannot both receive its value.
    """

    def __init__(self, client: redis.Redis, prefix: str = "sptoken"):
        self._redis = client
        self._prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "sptoken") -> "RedisTokenStore":
        return cls(redis.Redis.from_url(url, decode_responses=True), prefix=prefix)

    def _generate_key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        await self._redis.set(self._generate_key(key), value, ex=ttl_seconds)

    async def get(self, key: str) -> Optional[str]:
        return await self._redis.get(self._generate_key(key))

    async def remove(self, key: str) -> None:
        await self._redis.delete(self._generate_key(key))

    async def pop(self, key: str) -> Optional[str]:
        return await self._redis.getdel(self._generate_key(key))

    async def close(self) -> None:
        await self._redis.aclose()
