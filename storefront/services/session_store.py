# storefront/services/session_store.py
import json
import secrets
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import redis

from storefront.domain.cart import Cart
from storefront.utils.settings import REDIS_URL, SESSION_BACKEND, SESSION_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CART_KEY = "carro"
USERNAME_KEY = "username"


class SessionStore(ABC):
    """Server-side key-value storage, one JSON document per browser session."""

    @abstractmethod
    def load(self, session_id: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def save(self, session_id: str, data: Dict[str, Any]) -> None:
        ...

    @abstractmethod
    def delete(self, session_id: str) -> None:
        ...


class InMemorySessionStore(SessionStore):
    def __init__(self, ttl: int = SESSION_TTL_SECONDS):
        self.ttl = ttl
        self._data: Dict[str, tuple[float, str]] = {}

    def load(self, session_id: str) -> Optional[Dict[str, Any]]:
        entry = self._data.get(session_id)
        if entry is None:
            return None

        expires_at, payload = entry
        if expires_at < time.monotonic():
            del self._data[session_id]
            return None
        return json.loads(payload)

    def save(self, session_id: str, data: Dict[str, Any]) -> None:
        self._data[session_id] = (time.monotonic() + self.ttl, json.dumps(data))

    def delete(self, session_id: str) -> None:
        self._data.pop(session_id, None)


class RedisSessionStore(SessionStore):
    """
    -session:<id> -> json
    -EX refreshed on every save, redis drops idle sessions by itself
    """

    def __init__(self, url: str | None = None, ttl: int = SESSION_TTL_SECONDS, client=None):
        self.ttl = ttl
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def _key(session_id: str) -> str:
        return f"session:{session_id}"

    def load(self, session_id: str) -> Optional[Dict[str, Any]]:
        payload = self.redis.get(self._key(session_id))
        if payload is None:
            return None
        return json.loads(payload)

    def save(self, session_id: str, data: Dict[str, Any]) -> None:
        self.redis.set(name=self._key(session_id), value=json.dumps(data), ex=self.ttl)

    def delete(self, session_id: str) -> None:
        self.redis.delete(self._key(session_id))


def create_session_store(backend: str | None = None) -> SessionStore:
    backend = (backend or SESSION_BACKEND).lower()
    if backend == "redis":
        logger.info("Using Redis session store")
        return RedisSessionStore()
    if backend == "memory":
        logger.info("Using in-memory session store")
        return InMemorySessionStore()
    raise ValueError(f"Unknown session backend: {backend}")


class UserSession:
    """
    Explicit per-session context handed to request handlers.
    Changes are written back to the store by the session middleware.
    """

    def __init__(self, store: SessionStore, session_id: str | None = None):
        self.store = store
        self.data: Dict[str, Any] = {}
        self.is_new = True
        self.modified = False
        self.invalidated = False

        if session_id:
            loaded = store.load(session_id)
            if loaded is not None:
                self.data = loaded
                self.is_new = False

        self.session_id = session_id if not self.is_new else self.new_id()

    @staticmethod
    def new_id() -> str:
        return secrets.token_urlsafe(32)

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value
        self.modified = True

    def invalidate(self) -> None:
        self.store.delete(self.session_id)
        self.data = {}
        self.invalidated = True
        self.modified = False

    def cart(self) -> Optional[Cart]:
        return Cart.from_session(self.get(CART_KEY))

    def save_cart(self, cart: Cart) -> None:
        self.set(CART_KEY, cart.to_session())

    def persist(self) -> None:
        # existing sessions are re-saved to slide the idle timeout
        if self.invalidated or (self.is_new and not self.modified):
            return
        self.store.save(self.session_id, self.data)
        self.modified = False
