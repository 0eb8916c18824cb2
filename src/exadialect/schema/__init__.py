"""
Logical schema descriptions consumed by the dialects.
"""

from .fields import (
    Schema,
    SinkRecordField,
    date_schema,
    decimal_schema,
    time_schema,
    timestamp_schema,
)
from .types import LogicalName, SchemaType, SqlType

__all__ = [
    "LogicalName",
    "Schema",
    "SchemaType",
    "SinkRecordField",
    "SqlType",
    "date_schema",
    "decimal_schema",
    "time_schema",
    "timestamp_schema",
]
