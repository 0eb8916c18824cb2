"""
Fluent assembly of SQL statement text.
"""

from __future__ import annotations

from itertools import chain
from typing import Any, Callable, Iterable, List

from .identifiers import ColumnId, IdentifierRules, QuoteMethod

Transform = Callable[["ExpressionBuilder", Any], None]


class ExpressionBuilder:
    """
    Accumulates statement text, quoting identifiers according to ``rules``.

    Objects exposing ``append_to(builder)`` render themselves; anything else
    is appended as ``str(obj)``.
    """

    def __init__(
        self,
        rules: IdentifierRules | None = None,
        quote_method: QuoteMethod = QuoteMethod.ALWAYS,
    ) -> None:
        self.rules = rules or IdentifierRules.DEFAULT
        self.quote_method = quote_method
        self._parts: List[str] = []

    def append(self, obj: Any) -> "ExpressionBuilder":
        append_to = getattr(obj, "append_to", None)
        if callable(append_to):
            append_to(self)
        else:
            self._parts.append(str(obj))
        return self

    def append_identifier(self, name: str) -> "ExpressionBuilder":
        if self.quote_method is QuoteMethod.NEVER:
            self._parts.append(name)
            return self
        return self.append_identifier_quoted(name)

    def append_identifier_quoted(self, name: str) -> "ExpressionBuilder":
        self._parts.append(self.rules.quote(name))
        return self

    def append_list(self) -> "ListBuilder":
        return ListBuilder(self)

    def __str__(self) -> str:
        return "".join(self._parts)


class ListBuilder:
    """
    Appends the items of one or more iterables separated by a delimiter.
    """

    def __init__(self, builder: ExpressionBuilder) -> None:
        self._builder = builder
        self._delimiter = ","
        self._transform: Transform = lambda builder, item: builder.append(item)

    def delimited_by(self, delimiter: str) -> "ListBuilder":
        self._delimiter = delimiter
        return self

    def transformed_by(self, transform: Transform) -> "ListBuilder":
        self._transform = transform
        return self

    def of(self, *iterables: Iterable[Any] | None) -> ExpressionBuilder:
        """
        Render every item of ``iterables`` in order. ``None`` entries are skipped.
        """
        first = True
        for item in chain.from_iterable(it for it in iterables if it is not None):
            if not first:
                self._builder.append(self._delimiter)
            self._transform(self._builder, item)
            first = False
        return self._builder


def column_names() -> Transform:
    def transform(builder: ExpressionBuilder, column: ColumnId) -> None:
        builder.append_identifier(column.name)

    return transform


def column_names_with_prefix(prefix: str) -> Transform:
    def transform(builder: ExpressionBuilder, column: ColumnId) -> None:
        builder.append(prefix)
        builder.append_identifier(column.name)

    return transform
