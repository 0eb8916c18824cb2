"""
Generic dialect supplying fallback behaviour for concrete dialects.
"""

from __future__ import annotations

import decimal
from datetime import date, datetime
from threading import RLock
from typing import Any, Final, Iterable, List

from ..adapters.base import AdapterConfigurationError, ConnectionConfig, ConnectionFactory
from ..schema import LogicalName, Schema, SchemaType, SinkRecordField, SqlType
from ..sql import ColumnId, ExpressionBuilder, IdentifierRules, QuoteMethod, TableId
from ..utils import get_logger
from .base import DropOptions, UnsupportedTypeError

_LOGICAL_SQL_TYPES: Final[dict[str, SqlType]] = {
    LogicalName.DECIMAL: SqlType.DECIMAL,
    LogicalName.DATE: SqlType.DATE,
    LogicalName.TIME: SqlType.TIME,
    LogicalName.TIMESTAMP: SqlType.TIMESTAMP,
}

_PRIMITIVE_SQL_TYPES: Final[dict[SchemaType, SqlType]] = {
    SchemaType.INT8: SqlType.TINYINT,
    SchemaType.INT16: SqlType.SMALLINT,
    SchemaType.INT32: SqlType.INTEGER,
    SchemaType.INT64: SqlType.BIGINT,
    SchemaType.FLOAT32: SqlType.REAL,
    SchemaType.FLOAT64: SqlType.DOUBLE,
    SchemaType.BOOLEAN: SqlType.BOOLEAN,
    SchemaType.STRING: SqlType.VARCHAR,
    SchemaType.BYTES: SqlType.BLOB,
}


def describe_kind(schema_name: str | None, schema_type: SchemaType) -> str:
    if schema_name:
        return f"{schema_name} ({schema_type.value})"
    return schema_type.value


def quote_string_literal(value: str) -> str:
    escaped = value.replace("'", "''")
    return f"'{escaped}'"


class GenericDatabaseDialect:
    """
    Base dialect with standard SQL statement shapes.

    It maps no DDL type names itself: concrete dialects resolve the kinds
    they support and defer the rest here, where they surface as
    :class:`UnsupportedTypeError`. Connections come from the injected
    ``connection_factory``; every :meth:`get_connection` call opens a new one
    and :meth:`close` closes all of them.
    """

    name = "generic"
    supports_binary = True

    def __init__(
        self,
        config: ConnectionConfig,
        identifier_rules: IdentifierRules | None = None,
        *,
        connection_factory: ConnectionFactory | None = None,
        quote_method: QuoteMethod = QuoteMethod.ALWAYS,
    ) -> None:
        self.config = config
        self.identifier_rules = identifier_rules or IdentifierRules.DEFAULT
        self.quote_method = quote_method
        self._connection_factory = connection_factory
        self._connections: List[Any] = []
        self._lock = RLock()
        self.logger = get_logger(f"dialects.{self.name}")

    def __str__(self) -> str:
        return type(self).__name__

    def expression_builder(self) -> ExpressionBuilder:
        return ExpressionBuilder(self.identifier_rules, self.quote_method)

    # ------------------------------------------------------------------ #
    # Type mapping
    # ------------------------------------------------------------------ #
    def get_sql_type(self, field: SinkRecordField) -> str:
        raise UnsupportedTypeError(
            f"{self} does not support type {describe_kind(field.schema_name, field.schema_type)} "
            f"for field '{field.name}'"
        )

    def get_sql_type_for_schema(self, schema: Schema) -> SqlType:
        if schema.name is not None and schema.name in _LOGICAL_SQL_TYPES:
            return _LOGICAL_SQL_TYPES[schema.name]
        if schema.type is SchemaType.BYTES and not self.supports_binary:
            sql_type = None
        else:
            sql_type = _PRIMITIVE_SQL_TYPES.get(schema.type)
        if sql_type is None:
            raise UnsupportedTypeError(
                f"{self} has no SQL type code for {describe_kind(schema.name, schema.type)}"
            )
        return sql_type

    # ------------------------------------------------------------------ #
    # Statement builders
    # ------------------------------------------------------------------ #
    def build_drop_table_statement(self, table: TableId, options: DropOptions) -> str:
        builder = self.expression_builder()
        builder.append("DROP TABLE ")
        if options.if_exists:
            builder.append("IF EXISTS ")
        builder.append(table)
        if options.cascade:
            builder.append(" CASCADE")
        return self._destructive(str(builder))

    def build_create_table_statement(self, table: TableId, fields: Iterable[SinkRecordField]) -> str:
        fields = list(fields)
        pk_names = [field.name for field in fields if field.is_primary_key]
        builder = self.expression_builder()
        builder.append("CREATE TABLE ")
        builder.append(table)
        builder.append(" (")
        builder.append_list().delimited_by(", ").transformed_by(self.write_column_spec).of(fields)
        if pk_names:
            builder.append(", PRIMARY KEY(")
            builder.append_list().delimited_by(",").transformed_by(
                lambda b, name: b.append_identifier(name)
            ).of(pk_names)
            builder.append(")")
        builder.append(")")
        return str(builder)

    def build_alter_table(self, table: TableId, fields: Iterable[SinkRecordField]) -> List[str]:
        builder = self.expression_builder()
        builder.append("ALTER TABLE ")
        builder.append(table)
        builder.append(" ")
        builder.append_list().delimited_by(", ").transformed_by(self._write_add_column).of(fields)
        return [str(builder)]

    def build_insert_statement(
        self,
        table: TableId,
        key_columns: Iterable[ColumnId],
        non_key_columns: Iterable[ColumnId],
    ) -> str:
        columns = list(key_columns) + list(non_key_columns or ())
        builder = self.expression_builder()
        builder.append("INSERT INTO ")
        builder.append(table)
        builder.append("(")
        builder.append_list().delimited_by(",").transformed_by(
            lambda b, col: b.append_identifier(col.name)
        ).of(columns)
        builder.append(") VALUES(")
        builder.append(",".join("?" * len(columns)))
        builder.append(")")
        return str(builder)

    def build_upsert_query_statement(
        self,
        table: TableId,
        key_columns: Iterable[ColumnId],
        non_key_columns: Iterable[ColumnId],
    ) -> str:
        raise NotImplementedError(f"{self} does not support upsert statements")

    def write_column_spec(self, builder: ExpressionBuilder, field: SinkRecordField) -> None:
        builder.append_identifier(field.name)
        builder.append(" ")
        builder.append(self.get_sql_type(field))
        if field.default_value is not None:
            builder.append(" DEFAULT ")
            self.format_column_value(builder, field, field.default_value)
        elif field.is_optional:
            builder.append(" NULL")
        else:
            builder.append(" NOT NULL")

    def format_column_value(self, builder: ExpressionBuilder, field: SinkRecordField, value: Any) -> None:
        if isinstance(value, bool):
            builder.append("1" if value else "0")
        elif isinstance(value, (int, float, decimal.Decimal)):
            builder.append(str(value))
        elif isinstance(value, datetime):
            builder.append(quote_string_literal(value.isoformat(sep=" ", timespec="milliseconds")))
        elif isinstance(value, date):
            builder.append(quote_string_literal(value.isoformat()))
        elif isinstance(value, (bytes, bytearray)) and self.supports_binary:
            builder.append(f"x'{bytes(value).hex()}'")
        elif isinstance(value, str):
            builder.append(quote_string_literal(value))
        else:
            raise UnsupportedTypeError(
                f"{self} cannot render default value of type {type(value).__name__} "
                f"for field '{field.name}'"
            )

    def _write_add_column(self, builder: ExpressionBuilder, field: SinkRecordField) -> None:
        builder.append("ADD ")
        self.write_column_spec(builder, field)

    def _destructive(self, sql: str) -> str:
        self.logger.debug("DROP TABLE generated: %s", sql)
        return sql

    # ------------------------------------------------------------------ #
    # Connection management
    # ------------------------------------------------------------------ #
    def get_connection(self) -> Any:
        if self._connection_factory is None:
            raise AdapterConfigurationError(f"{self} has no connection factory configured.")
        connection = self._connection_factory()
        with self._lock:
            self._connections.append(connection)
        return connection

    def close(self) -> None:
        with self._lock:
            connections, self._connections = self._connections, []
        for connection in connections:
            connection.close()
