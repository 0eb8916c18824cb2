"""
Dialect strategy registry.
"""

from .base import (
    UNRESOLVED,
    DatabaseDialect,
    DropOptions,
    Resolved,
    Unresolved,
    UnsupportedTypeError,
)
from .exasol import ExasolDialect
from .generic import GenericDatabaseDialect
from .registry import find_dialect_for, register_dialect, registered_subprotocols

__all__ = [
    "DatabaseDialect",
    "DropOptions",
    "ExasolDialect",
    "GenericDatabaseDialect",
    "Resolved",
    "UNRESOLVED",
    "Unresolved",
    "UnsupportedTypeError",
    "find_dialect_for",
    "register_dialect",
    "registered_subprotocols",
]
