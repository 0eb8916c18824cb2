"""
Primitive schema kinds, logical type identifiers and generic SQL type codes.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final


class SchemaType(str, Enum):
    """
    Base encoding of a record field.
    """

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"
    STRING = "string"
    BYTES = "bytes"
    ARRAY = "array"
    MAP = "map"
    STRUCT = "struct"

    @property
    def is_primitive(self) -> bool:
        return self not in (SchemaType.ARRAY, SchemaType.MAP, SchemaType.STRUCT)


class LogicalName:
    """
    Logical type identifiers carried in a schema's ``name``.

    The values are the names Kafka Connect writes into record schemas, so
    fields produced by any Connect converter resolve without translation.
    """

    DECIMAL: Final[str] = "org.apache.kafka.connect.data.Decimal"
    DATE: Final[str] = "org.apache.kafka.connect.data.Date"
    TIME: Final[str] = "org.apache.kafka.connect.data.Time"
    TIMESTAMP: Final[str] = "org.apache.kafka.connect.data.Timestamp"

    DECIMAL_SCALE: Final[str] = "scale"


class SqlType(IntEnum):
    """
    Generic SQL type codes, numbered as in ``java.sql.Types``.
    """

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    BOOLEAN = 16
    BLOB = 2004
    CLOB = 2005
