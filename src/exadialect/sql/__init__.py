"""
Identifier quoting and SQL text assembly primitives.
"""

from .expressions import ExpressionBuilder, ListBuilder, column_names, column_names_with_prefix
from .identifiers import ColumnId, IdentifierRules, QuoteMethod, TableId

__all__ = [
    "ColumnId",
    "ExpressionBuilder",
    "IdentifierRules",
    "ListBuilder",
    "QuoteMethod",
    "TableId",
    "column_names",
    "column_names_with_prefix",
]
