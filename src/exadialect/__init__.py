"""
exadialect public package initialization.

Exasol SQL dialect for record sinks: type mapping, DDL and MERGE statement
generation, and a shared connection cache.
"""

from .adapters import (
    AdapterConfigurationError,
    AdapterConnectionError,
    AdapterError,
    ConnectionCache,
    ConnectionConfig,
    ConnectionFactoryError,
    CredentialKey,
    ExasolConnectionFactory,
)
from .dialects import (
    DropOptions,
    ExasolDialect,
    GenericDatabaseDialect,
    UnsupportedTypeError,
    find_dialect_for,
    register_dialect,
)
from .schema import (
    LogicalName,
    Schema,
    SchemaType,
    SinkRecordField,
    SqlType,
    date_schema,
    decimal_schema,
    time_schema,
    timestamp_schema,
)
from .sql import ColumnId, ExpressionBuilder, IdentifierRules, TableId

__all__ = [
    "AdapterConfigurationError",
    "AdapterConnectionError",
    "AdapterError",
    "ColumnId",
    "ConnectionCache",
    "ConnectionConfig",
    "ConnectionFactoryError",
    "CredentialKey",
    "DropOptions",
    "ExasolConnectionFactory",
    "ExasolDialect",
    "ExpressionBuilder",
    "GenericDatabaseDialect",
    "IdentifierRules",
    "LogicalName",
    "Schema",
    "SchemaType",
    "SinkRecordField",
    "SqlType",
    "TableId",
    "UnsupportedTypeError",
    "date_schema",
    "decimal_schema",
    "find_dialect_for",
    "register_dialect",
    "time_schema",
    "timestamp_schema",
]
