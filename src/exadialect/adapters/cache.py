"""
Shared connection cache keyed on connection credentials.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Any, Callable, Dict, Optional

from ..utils import get_logger

_MISSING = object()


@dataclass(frozen=True)
class CredentialKey:
    """
    The ``(user, password, url)`` triple identifying a distinct connection.
    """

    user: Optional[str]
    password: Optional[str] = field(repr=False)
    url: str = field(repr=False)


@dataclass(frozen=True)
class FactoryOutcome:
    """
    Result of one connection factory invocation.
    """

    connection: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def invoke(cls, factory: Callable[[], Any]) -> "FactoryOutcome":
        try:
            return cls(connection=factory())
        except Exception as exc:
            return cls(error=exc)

    def unwrap(self) -> Any:
        if self.error is not None:
            raise self.error
        return self.connection


class ConnectionCache:
    """
    Holds at most one live connection per :class:`CredentialKey`.

    Entries are created on first request and are never replaced, evicted or
    closed by the cache; connection lifetime belongs to the caller that owns
    the cache. Lookups of existing entries take no lock. Creation is
    serialized per key so concurrent first requests invoke the factory once.
    """

    def __init__(self) -> None:
        self._connections: Dict[CredentialKey, Any] = {}
        self._creation_locks: Dict[CredentialKey, Lock] = {}
        self._lock = Lock()
        self.logger = get_logger("adapters.cache")

    def get_or_create(self, key: CredentialKey, factory: Callable[[], Any]) -> Any:
        connection = self._connections.get(key, _MISSING)
        if connection is not _MISSING:
            return connection

        with self._creation_lock(key):
            connection = self._connections.get(key, _MISSING)
            if connection is not _MISSING:
                return connection
            # A failed attempt stores nothing, so the next caller retries.
            connection = FactoryOutcome.invoke(factory).unwrap()
            self._connections[key] = connection

        self.logger.debug("Cached new shared connection (%d cached)", len(self._connections))
        return connection

    def _creation_lock(self, key: CredentialKey) -> Lock:
        with self._lock:
            lock = self._creation_locks.get(key)
            if lock is None:
                lock = self._creation_locks[key] = Lock()
            return lock

    def __contains__(self, key: object) -> bool:
        return key in self._connections

    def __len__(self) -> int:
        return len(self._connections)
