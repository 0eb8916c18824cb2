"""
Field descriptors handed to the dialects by the connector framework.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from .types import LogicalName, SchemaType


@dataclass(frozen=True)
class Schema:
    """
    Schema of a single value: primitive kind plus optional logical name.
    """

    type: SchemaType
    name: str | None = None
    parameters: Mapping[str, str] = field(default_factory=dict)
    optional: bool = False
    default_value: Any = None


def decimal_schema(scale: int, *, optional: bool = False) -> Schema:
    return Schema(
        SchemaType.BYTES,
        name=LogicalName.DECIMAL,
        parameters={LogicalName.DECIMAL_SCALE: str(scale)},
        optional=optional,
    )


def date_schema(*, optional: bool = False) -> Schema:
    return Schema(SchemaType.INT32, name=LogicalName.DATE, optional=optional)


def time_schema(*, optional: bool = False) -> Schema:
    return Schema(SchemaType.INT32, name=LogicalName.TIME, optional=optional)


def timestamp_schema(*, optional: bool = False) -> Schema:
    return Schema(SchemaType.INT64, name=LogicalName.TIMESTAMP, optional=optional)


@dataclass(frozen=True)
class SinkRecordField:
    """
    A named column derived from a record schema.
    """

    schema: Schema
    name: str
    is_primary_key: bool = False

    @property
    def schema_type(self) -> SchemaType:
        return self.schema.type

    @property
    def schema_name(self) -> str | None:
        return self.schema.name

    @property
    def schema_parameters(self) -> Mapping[str, str]:
        return self.schema.parameters

    @property
    def is_optional(self) -> bool:
        return not self.is_primary_key and self.schema.optional

    @property
    def default_value(self) -> Any:
        return self.schema.default_value
