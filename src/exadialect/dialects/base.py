"""
Dialect strategy interfaces and shared value types.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Iterable, List, Protocol, TypeVar, Union

from ..adapters.base import AdapterError
from ..schema import Schema, SinkRecordField, SqlType
from ..sql import ColumnId, ExpressionBuilder, TableId

T = TypeVar("T")


class UnsupportedTypeError(AdapterError, ValueError):
    """Raised when a schema kind has no mapping in the target dialect."""


@dataclass(frozen=True)
class DropOptions:
    """
    Wording options for ``DROP TABLE`` statements.
    """

    if_exists: bool = False
    cascade: bool = False

    def set_if_exists(self, if_exists: bool) -> "DropOptions":
        return replace(self, if_exists=if_exists)

    def set_cascade(self, cascade: bool) -> "DropOptions":
        return replace(self, cascade=cascade)


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """A resolution stage produced ``value``."""

    value: T

    def or_else(self, stage: Callable[[], "Resolution[T]"]) -> "Resolution[T]":
        return self

    def get_or(self, fallback: Callable[[], T]) -> T:
        return self.value


class Unresolved:
    """A resolution stage declined; the next stage decides."""

    _instance: "Unresolved | None" = None

    def __new__(cls) -> "Unresolved":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def or_else(self, stage: Callable[[], "Resolution[Any]"]) -> "Resolution[Any]":
        return stage()

    def get_or(self, fallback: Callable[[], Any]) -> Any:
        return fallback()

    def __repr__(self) -> str:
        return "UNRESOLVED"


UNRESOLVED = Unresolved()

Resolution = Union[Resolved[T], Unresolved]


class DatabaseDialect(Protocol):
    """
    Strategy interface consumed by the connector framework.
    """

    @property
    def name(self) -> str: ...

    def expression_builder(self) -> ExpressionBuilder: ...

    def get_sql_type(self, field: SinkRecordField) -> str: ...

    def get_sql_type_for_schema(self, schema: Schema) -> SqlType: ...

    def build_drop_table_statement(self, table: TableId, options: DropOptions) -> str: ...

    def build_create_table_statement(self, table: TableId, fields: Iterable[SinkRecordField]) -> str: ...

    def build_alter_table(self, table: TableId, fields: Iterable[SinkRecordField]) -> List[str]: ...

    def build_insert_statement(
        self,
        table: TableId,
        key_columns: Iterable[ColumnId],
        non_key_columns: Iterable[ColumnId],
    ) -> str: ...

    def build_upsert_query_statement(
        self,
        table: TableId,
        key_columns: Iterable[ColumnId],
        non_key_columns: Iterable[ColumnId],
    ) -> str: ...

    def get_connection(self) -> Any: ...

    def close(self) -> None: ...
