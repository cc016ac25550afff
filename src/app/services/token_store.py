from abc import ABC, abstractmethod
from typing import Optional


class ITokenStore(ABC):
    """
    TTL key-value store - application layer.

    The store is the sole owner of token lifetime: entries disappear when
    their TTL elapses, and pop() is the only way a token is consumed.
    """

    @abstractmethod
    async def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store value under key, expiring after ttl_seconds"""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get value if present and not expired"""
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove key if present"""
        pass

    @abstractmethod
    async def pop(self, key: str) -> Optional[str]:
        """Atomically get and remove. At most one concurrent caller sees the value."""
        pass
