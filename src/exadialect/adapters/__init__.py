"""
Connection configuration, caching and the Exasol connection factory.
"""

from .base import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    ConnectionConfig,
    ConnectionFactory,
    ConnectionFactoryError,
)
from .cache import ConnectionCache, CredentialKey, FactoryOutcome
from .exasol import ExasolConnectionFactory

__all__ = [
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterError",
    "ConnectionCache",
    "ConnectionConfig",
    "ConnectionFactory",
    "ConnectionFactoryError",
    "CredentialKey",
    "ExasolConnectionFactory",
    "FactoryOutcome",
]
