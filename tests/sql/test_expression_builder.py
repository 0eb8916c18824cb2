from exadialect.sql import (
    ColumnId,
    ExpressionBuilder,
    IdentifierRules,
    QuoteMethod,
    TableId,
    column_names,
    column_names_with_prefix,
)


def test_identifier_rules_escape_embedded_quotes():
    rules = IdentifierRules()
    assert rules.quote("name") == '"name"'
    assert rules.quote('bad"name') == '"bad""name"'


def test_table_id_renders_present_parts_only():
    assert str(TableId(None, None, "orders")) == '"orders"'
    assert str(TableId(None, "sales", "orders")) == '"sales"."orders"'
    assert str(TableId("cat", "sales", "orders")) == '"cat"."sales"."orders"'


def test_table_id_parse():
    assert TableId.parse("sales.orders") == TableId(None, "sales", "orders")
    assert TableId.parse("orders") == TableId(None, None, "orders")


def test_column_id_renders_table_qualified():
    column = ColumnId(TableId(None, "s", "t"), "c")
    assert str(column) == '"s"."t"."c"'
    assert column.alias_or_name() == "c"
    assert ColumnId(None, "c", alias="x").alias_or_name() == "x"


def test_builder_appends_literals_and_identifiers():
    builder = ExpressionBuilder()
    builder.append("SELECT ").append_identifier_quoted("a").append(" FROM ").append(
        TableId(None, None, "t")
    )
    assert str(builder) == 'SELECT "a" FROM "t"'


def test_quote_method_never_leaves_plain_identifiers_unquoted():
    builder = ExpressionBuilder(quote_method=QuoteMethod.NEVER)
    builder.append_identifier("a").append(",").append_identifier_quoted("b")
    assert str(builder) == 'a,"b"'


def test_list_builder_chains_iterables_with_transform():
    table = TableId(None, None, "t")
    keys = [ColumnId(table, "k")]
    values = [ColumnId(table, "v1"), ColumnId(table, "v2")]

    builder = ExpressionBuilder()
    builder.append_list().delimited_by(", ").transformed_by(column_names_with_prefix("? AS ")).of(
        keys, values
    )
    assert str(builder) == '? AS "k", ? AS "v1", ? AS "v2"'

    builder = ExpressionBuilder()
    builder.append_list().transformed_by(column_names()).of(values, None, keys)
    assert str(builder) == '"v1","v2","k"'


def test_list_builder_default_transform_appends_items():
    builder = ExpressionBuilder()
    builder.append_list().delimited_by(" | ").of(["a", "b"], [])
    assert str(builder) == "a | b"


def test_custom_identifier_rules():
    builder = ExpressionBuilder(IdentifierRules(".", "[", "]"))
    builder.append(TableId(None, "dbo", "t"))
    assert str(builder) == "[dbo].[t]"
