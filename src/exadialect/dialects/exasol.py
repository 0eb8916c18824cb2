"""
Exasol dialect.

Type names follow https://docs.exasol.com/sql_references/data_types/datatypealiases.htm.
Integers are stored as exact DECIMAL(p,0) and strings as CLOB because source
field lengths are not known. BYTES and the TIME logical type have no Exasol
equivalent; TIME falls through to its INT32 representation.
"""

from __future__ import annotations

from typing import Any, Final, Iterable, List, Mapping

from ..adapters.base import ConnectionConfig, ConnectionFactory
from ..adapters.cache import ConnectionCache
from ..adapters.exasol import ExasolConnectionFactory
from ..schema import LogicalName, Schema, SchemaType, SinkRecordField, SqlType
from ..sql import (
    ColumnId,
    ExpressionBuilder,
    IdentifierRules,
    TableId,
    column_names,
    column_names_with_prefix,
)
from .base import UNRESOLVED, DropOptions, Resolution, Resolved, UnsupportedTypeError
from .generic import GenericDatabaseDialect
from .registry import register_dialect

DECIMAL_PRECISION: Final[int] = 36

EXASOL_IDENTIFIER_RULES: Final[IdentifierRules] = IdentifierRules(".", '"', '"')

# Shared by every ExasolDialect built without an explicit cache.
DEFAULT_CONNECTION_CACHE: Final[ConnectionCache] = ConnectionCache()

_LOGICAL_TYPE_NAMES: Final[dict[str, str]] = {
    LogicalName.DATE: "DATE",
    LogicalName.TIMESTAMP: "TIMESTAMP",
}

_PRIMITIVE_TYPE_NAMES: Final[dict[SchemaType, str]] = {
    SchemaType.INT8: "DECIMAL(3,0)",
    SchemaType.INT16: "DECIMAL(5,0)",
    SchemaType.INT32: "DECIMAL(10,0)",
    SchemaType.INT64: "DECIMAL(19,0)",
    SchemaType.FLOAT32: "FLOAT",
    SchemaType.FLOAT64: "DOUBLE",
    SchemaType.BOOLEAN: "BOOLEAN",
    SchemaType.STRING: "CLOB",
}

_LOGICAL_SQL_TYPES: Final[dict[str, SqlType]] = {
    LogicalName.DATE: SqlType.DATE,
    LogicalName.DECIMAL: SqlType.DECIMAL,
    LogicalName.TIMESTAMP: SqlType.TIMESTAMP,
}

_PRIMITIVE_SQL_TYPES: Final[dict[SchemaType, SqlType]] = {
    SchemaType.INT8: SqlType.TINYINT,
    SchemaType.INT16: SqlType.SMALLINT,
    SchemaType.INT32: SqlType.INTEGER,
    SchemaType.INT64: SqlType.BIGINT,
    SchemaType.FLOAT32: SqlType.FLOAT,
    SchemaType.FLOAT64: SqlType.DOUBLE,
    SchemaType.BOOLEAN: SqlType.BOOLEAN,
    SchemaType.STRING: SqlType.VARCHAR,
}


def resolve_logical_type_name(schema_name: str | None, parameters: Mapping[str, str]) -> Resolution[str]:
    if schema_name is None:
        return UNRESOLVED
    if schema_name == LogicalName.DECIMAL:
        scale = parameters.get(LogicalName.DECIMAL_SCALE)
        if scale is None:
            raise UnsupportedTypeError("Decimal schema is missing its 'scale' parameter")
        try:
            scale_value = int(scale)
        except (TypeError, ValueError) as exc:
            raise UnsupportedTypeError(f"Decimal schema has a non-integer scale {scale!r}") from exc
        return Resolved(f"DECIMAL({DECIMAL_PRECISION},{scale_value})")
    name = _LOGICAL_TYPE_NAMES.get(schema_name)
    return UNRESOLVED if name is None else Resolved(name)


def resolve_primitive_type_name(schema_type: SchemaType) -> Resolution[str]:
    name = _PRIMITIVE_TYPE_NAMES.get(schema_type)
    return UNRESOLVED if name is None else Resolved(name)


def resolve_logical_sql_type(schema_name: str | None) -> Resolution[SqlType]:
    sql_type = _LOGICAL_SQL_TYPES.get(schema_name) if schema_name is not None else None
    return UNRESOLVED if sql_type is None else Resolved(sql_type)


def resolve_primitive_sql_type(schema_type: SchemaType) -> Resolution[SqlType]:
    sql_type = _PRIMITIVE_SQL_TYPES.get(schema_type)
    return UNRESOLVED if sql_type is None else Resolved(sql_type)


class ExasolDialect(GenericDatabaseDialect):
    """
    Dialect for Exasol, registered for the ``jdbc:exa:`` subprotocol.

    :meth:`get_connection` hands out one shared connection per
    ``(user, password, url)`` from ``connection_cache``. Without an explicit
    ``connection_cache`` every dialect shares the process-wide
    :data:`DEFAULT_CONNECTION_CACHE`, so all tasks using the same
    credentials get the same connection. :meth:`close` never closes cached
    connections, their lifetime is owned by whoever owns the cache.
    """

    name = "exasol"
    supports_binary = False

    def __init__(
        self,
        config: ConnectionConfig,
        *,
        connection_cache: ConnectionCache | None = None,
        connection_factory: ConnectionFactory | None = None,
    ) -> None:
        super().__init__(
            config,
            EXASOL_IDENTIFIER_RULES,
            connection_factory=connection_factory or ExasolConnectionFactory(config),
        )
        self.connection_cache = (
            connection_cache if connection_cache is not None else DEFAULT_CONNECTION_CACHE
        )

    # ------------------------------------------------------------------ #
    # Type mapping
    # ------------------------------------------------------------------ #
    def get_sql_type(self, field: SinkRecordField) -> str:
        fallback = super().get_sql_type
        return (
            resolve_logical_type_name(field.schema_name, field.schema_parameters)
            .or_else(lambda: resolve_primitive_type_name(field.schema_type))
            .get_or(lambda: fallback(field))
        )

    def get_sql_type_for_schema(self, schema: Schema) -> SqlType:
        fallback = super().get_sql_type_for_schema
        return (
            resolve_logical_sql_type(schema.name)
            .or_else(lambda: resolve_primitive_sql_type(schema.type))
            .get_or(lambda: fallback(schema))
        )

    def format_column_value(self, builder: ExpressionBuilder, field: SinkRecordField, value: Any) -> None:
        if isinstance(value, bool):
            builder.append("TRUE" if value else "FALSE")
            return
        super().format_column_value(builder, field, value)

    # ------------------------------------------------------------------ #
    # Statement builders
    # ------------------------------------------------------------------ #
    def build_drop_table_statement(self, table: TableId, options: DropOptions) -> str:
        builder = self.expression_builder()
        builder.append("DROP TABLE")
        if options.if_exists:
            builder.append(" IF EXISTS")
        builder.append(" ")
        builder.append(table)
        if options.cascade:
            builder.append(" CASCADE CONSTRAINTS")
        return self._destructive(str(builder))

    def build_alter_table(self, table: TableId, fields: Iterable[SinkRecordField]) -> List[str]:
        # Exasol adds one column per ALTER TABLE statement.
        queries: List[str] = []
        for field in fields:
            queries.extend(super().build_alter_table(table, [field]))
        return queries

    def build_upsert_query_statement(
        self,
        table: TableId,
        key_columns: Iterable[ColumnId],
        non_key_columns: Iterable[ColumnId],
    ) -> str:
        """
        Build a ``MERGE INTO`` statement upserting one row of positional parameters.

        Parameters bind in ``key_columns`` then ``non_key_columns`` order.
        ``key_columns`` must not be empty; this is not checked. With no
        non-key columns the ``WHEN MATCHED`` clause is left out.
        """
        key_columns = list(key_columns)
        non_key_columns = list(non_key_columns or ())

        builder = self.expression_builder()
        builder.append("MERGE INTO ")
        builder.append(table)
        builder.append(" AS target USING (SELECT ")
        builder.append_list().delimited_by(", ").transformed_by(
            column_names_with_prefix("? AS ")
        ).of(key_columns, non_key_columns)
        builder.append(") AS incoming ON (")
        builder.append_list().delimited_by(" AND ").transformed_by(self._transform_as).of(key_columns)
        builder.append(")")
        if non_key_columns:
            builder.append(" WHEN MATCHED THEN UPDATE SET ")
            builder.append_list().delimited_by(",").transformed_by(self._transform_update).of(
                non_key_columns
            )
        # INSERT lists run non-keys first, unlike the USING projection.
        builder.append(" WHEN NOT MATCHED THEN INSERT (")
        builder.append_list().delimited_by(",").transformed_by(column_names()).of(
            non_key_columns, key_columns
        )
        builder.append(") VALUES (")
        builder.append_list().delimited_by(",").transformed_by(
            column_names_with_prefix("incoming.")
        ).of(non_key_columns, key_columns)
        builder.append(")")
        return str(builder)

    @staticmethod
    def _transform_as(builder: ExpressionBuilder, column: ColumnId) -> None:
        builder.append("target.")
        builder.append_identifier_quoted(column.name)
        builder.append("=incoming.")
        builder.append_identifier_quoted(column.name)

    @staticmethod
    def _transform_update(builder: ExpressionBuilder, column: ColumnId) -> None:
        builder.append_identifier_quoted(column.name)
        builder.append("=incoming.")
        builder.append_identifier_quoted(column.name)

    # ------------------------------------------------------------------ #
    # Connection management
    # ------------------------------------------------------------------ #
    def get_connection(self) -> Any:
        return self.connection_cache.get_or_create(
            self.config.credential_key(), self._connection_factory
        )

    def close(self) -> None:
        # Cached connections outlive the dialect; see the class docstring.
        pass


register_dialect(("exa",), ExasolDialect)
