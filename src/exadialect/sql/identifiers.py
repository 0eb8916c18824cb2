"""
Identifier rules and table/column references.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .expressions import ExpressionBuilder


class QuoteMethod(str, Enum):
    ALWAYS = "always"
    NEVER = "never"


@dataclass(frozen=True)
class IdentifierRules:
    """
    Delimiter and quote characters used when rendering identifiers.
    """

    identifier_delimiter: str = "."
    leading_quote: str = '"'
    trailing_quote: str = '"'

    DEFAULT: ClassVar["IdentifierRules"]

    def quote(self, identifier: str) -> str:
        escaped = identifier
        if self.trailing_quote:
            escaped = identifier.replace(self.trailing_quote, self.trailing_quote * 2)
        return f"{self.leading_quote}{escaped}{self.trailing_quote}"


IdentifierRules.DEFAULT = IdentifierRules()


@dataclass(frozen=True)
class TableId:
    """
    Fully qualified table name. Empty ``catalog``/``schema`` parts are skipped.
    """

    catalog: str | None
    schema: str | None
    table: str

    @classmethod
    def parse(cls, qualified_name: str, rules: IdentifierRules = IdentifierRules.DEFAULT) -> "TableId":
        parts = qualified_name.split(rules.identifier_delimiter)
        if len(parts) > 3:
            raise ValueError(f"Too many name parts in table identifier {qualified_name!r}")
        parts = [None] * (3 - len(parts)) + parts
        return cls(parts[0], parts[1], parts[2])

    def append_to(self, builder: "ExpressionBuilder") -> None:
        first = True
        for part in (self.catalog, self.schema, self.table):
            if not part:
                continue
            if not first:
                builder.append(builder.rules.identifier_delimiter)
            builder.append_identifier(part)
            first = False

    def __str__(self) -> str:
        from .expressions import ExpressionBuilder

        return str(ExpressionBuilder().append(self))


@dataclass(frozen=True)
class ColumnId:
    """
    Column name scoped to a table. Only ``name`` is rendered in statement lists.
    """

    table: TableId | None
    name: str
    alias: str | None = None

    def alias_or_name(self) -> str:
        return self.alias or self.name

    def append_to(self, builder: "ExpressionBuilder") -> None:
        if self.table is not None:
            builder.append(self.table)
            builder.append(builder.rules.identifier_delimiter)
        builder.append_identifier(self.name)

    def __str__(self) -> str:
        from .expressions import ExpressionBuilder

        return str(ExpressionBuilder().append(self))
