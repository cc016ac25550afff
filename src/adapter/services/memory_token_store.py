import asyncio
import time
from typing import Callable, Dict, Optional, Tuple

from src.app.services.token_store import ITokenStore


class MemoryTokenStore(ITokenStore):
    """
    In-process TTL store.

    Expiry is checked on access against an injectable clock, so tests can
    move time forward without sleeping. Every set() also drops entries that
    have already expired, so unclaimed tokens do not accumulate. All access goes through one lock,
    which makes pop() an atomic take.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[str, float]] = {}
        self._lock = asyncio.Lock()

    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        async with self._lock:
            now = self._clock()
            self._purge_expired(now)
            self._entries[key] = (value, now + ttl_seconds)

    async def get(self, key: str) -> Optional[str]:
        async with self._lock:
            return self._live_value(key)

    async def remove(self, key: str) -> None:
        async with self._lock:
            self._entries.pop(key, None)

    async def pop(self, key: str) -> Optional[str]:
        async with self._lock:
            value = self._live_value(key)
            self._entries.pop(key, None)
            return value

    def ttl(self, key: str) -> Optional[float]:
        """Seconds left before key expires, or None if absent"""
        entry = self._entries.get(key)
        if entry is None:
            return None
        remaining = entry[1] - self._clock()
        return remaining if remaining > 0 else None

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for _, expires_at in self._entries.values() if expires_at > now)

    def _purge_expired(self, now: float) -> None:
        expired = [key for key, (_, expires_at) in self._entries.items() if now >= expires_at]
        for key in expired:
            del self._entries[key]

    def _live_value(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value
