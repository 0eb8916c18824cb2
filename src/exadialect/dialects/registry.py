"""
Subprotocol-based dialect registry.
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Callable, Dict, Iterable

from ..adapters.base import AdapterConfigurationError, ConnectionConfig
from ..security.urls import extract_subprotocol
from ..utils import get_logger
from .base import DatabaseDialect

DialectFactory = Callable[..., DatabaseDialect]

_providers: Dict[str, DialectFactory] = {}
_lock = RLock()
logger = get_logger("dialects.registry")


def register_dialect(subprotocols: Iterable[str], factory: DialectFactory) -> None:
    """
    Register ``factory`` for JDBC URLs using any of ``subprotocols``.

    ``factory`` is called with the :class:`ConnectionConfig` plus any keyword
    arguments given to :func:`find_dialect_for`.
    """
    with _lock:
        for subprotocol in subprotocols:
            key = subprotocol.lower()
            existing = _providers.get(key)
            if existing is not None and existing is not factory:
                logger.warning(
                    "Replacing dialect %s for subprotocol '%s' with %s",
                    getattr(existing, "__name__", existing),
                    key,
                    getattr(factory, "__name__", factory),
                )
            _providers[key] = factory


def registered_subprotocols() -> list[str]:
    with _lock:
        return sorted(_providers)


def find_dialect_for(config: ConnectionConfig, **kwargs: Any) -> DatabaseDialect:
    try:
        subprotocol = extract_subprotocol(config.url).lower()
    except ValueError as exc:
        raise AdapterConfigurationError(str(exc)) from exc
    with _lock:
        factory = _providers.get(subprotocol)
    if factory is None:
        raise AdapterConfigurationError(
            f"No dialect registered for JDBC subprotocol '{subprotocol}'"
        )
    return factory(config, **kwargs)
