"""Tests for the schema designer validator."""

from sqlcraft.modules.schema_designer.validator import validate_schema
from sqlcraft.schemas.schema_design import (
    ColumnDefinition,
    ColumnReference,
    SchemaErrorType,
    SchemaWarningType,
    TableDefinition,
)


def col(name: str, type: str = "INTEGER", **flags) -> ColumnDefinition:
    return ColumnDefinition(name=name, type=type, **flags)


def users_table(**overrides) -> TableDefinition:
    table = TableDefinition(
        name="users",
        columns=[
            col("id", "SERIAL", is_primary_key=True, is_nullable=False),
            col("email", "VARCHAR(255)", is_nullable=False),
            col("created_at", "TIMESTAMP"),
        ],
    )
    return table.model_copy(update=overrides)


class TestValidateSchema:
    """Tests for validate_schema."""

    def test_empty_schema_is_valid(self):
        result = validate_schema([])
        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_clean_table_has_no_diagnostics(self):
        result = validate_schema([users_table()])
        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []

    def test_missing_primary_key(self):
        table = TableDefinition(name="orders", columns=[col("total", "DECIMAL(10,2)")])
        result = validate_schema([table])
        assert result.is_valid is False
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.type == SchemaErrorType.MISSING_PK
        assert error.table == "orders"
        assert "'id'" in error.suggestion

    def test_table_without_columns_lacks_primary_key(self):
        result = validate_schema([TableDefinition(name="empty", columns=[])])
        assert [e.type for e in result.errors] == [SchemaErrorType.MISSING_PK]

    def test_one_missing_pk_error_per_table(self):
        tables = [
            users_table(),
            TableDefinition(name="orders", columns=[col("total"), col("status", "TEXT")]),
            TableDefinition(name="items", columns=[col("qty")]),
        ]
        result = validate_schema(tables)
        assert len(result.errors) == 2
        assert [e.table for e in result.errors] == ["orders", "items"]

    def test_foreign_key_without_reference(self):
        table = TableDefinition(name="orders", columns=[
            col("id", "SERIAL", is_primary_key=True),
            col("user_id", is_foreign_key=True),
        ])
        result = validate_schema([table])
        assert result.is_valid is False
        assert result.errors[0].type == SchemaErrorType.INVALID_FK
        assert result.errors[0].table == "orders"
        assert '"user_id"' in result.errors[0].message

    def test_reference_suppresses_invalid_fk_even_if_target_missing(self):
        table = TableDefinition(name="orders", columns=[
            col("id", "SERIAL", is_primary_key=True),
            col("user_id", is_foreign_key=True,
                references=ColumnReference(table="nowhere", column="nothing")),
        ])
        result = validate_schema([table])
        assert result.is_valid is True
        assert result.errors == []

    def test_email_type_choice_warning(self):
        table = TableDefinition(name="users", columns=[
            col("id", "SERIAL", is_primary_key=True),
            col("Email", "TEXT"),
        ])
        result = validate_schema([table])
        assert result.is_valid is True
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.type == SchemaWarningType.TYPE_CHOICE
        assert warning.column == "Email"
        assert "VARCHAR(255)" in warning.message

    def test_email_type_must_match_exactly(self):
        table = TableDefinition(name="users", columns=[
            col("id", "SERIAL", is_primary_key=True),
            col("email", "varchar(255)"),
        ])
        result = validate_schema([table])
        assert [w.type for w in result.warnings] == [SchemaWarningType.TYPE_CHOICE]

    def test_naming_warnings_for_spaces(self):
        table = TableDefinition(name="user orders", columns=[
            col("id", "SERIAL", is_primary_key=True),
            col("order total", "DECIMAL(10,2)"),
        ])
        result = validate_schema([table])
        assert result.is_valid is True
        assert [w.type for w in result.warnings] == [SchemaWarningType.NAMING, SchemaWarningType.NAMING]
        column_warning, table_warning = result.warnings
        assert table_warning.column is None
        assert table_warning.message == "Table name contains spaces"
        assert column_warning.column == "order total"

    def test_rules_do_not_short_circuit(self):
        table = TableDefinition(name="bad table", columns=[
            col("contact email", "TEXT", is_foreign_key=True),
            col("email", "TEXT"),
        ])
        result = validate_schema([table])
        assert [e.type for e in result.errors] == [SchemaErrorType.MISSING_PK, SchemaErrorType.INVALID_FK]
        assert [(w.type, w.column) for w in result.warnings] == [
            (SchemaWarningType.NAMING, "contact email"),
            (SchemaWarningType.TYPE_CHOICE, "email"),
            (SchemaWarningType.NAMING, None),
        ]

    def test_table_naming_follows_its_columns(self):
        tables = [
            TableDefinition(name="user orders", columns=[
                col("id", "SERIAL", is_primary_key=True),
                col("order total", "DECIMAL(10,2)"),
            ]),
            TableDefinition(name="line items", columns=[
                col("id", "SERIAL", is_primary_key=True),
                col("unit price", "DECIMAL(10,2)"),
            ]),
        ]
        result = validate_schema(tables)
        assert [w.message for w in result.warnings] == [
            "Column name contains spaces",
            "Table name contains spaces",
            "Column name contains spaces",
            "Table name contains spaces",
        ]
        assert [w.table for w in result.warnings] == ["user orders", "user orders", "line items", "line items"]

    def test_order_follows_tables_then_columns(self):
        tables = [
            TableDefinition(name="a", columns=[col("x", is_foreign_key=True)]),
            TableDefinition(name="b", columns=[col("y", is_foreign_key=True), col("z", is_foreign_key=True)]),
        ]
        result = validate_schema(tables)
        assert [(e.type, e.table) for e in result.errors] == [
            (SchemaErrorType.MISSING_PK, "a"),
            (SchemaErrorType.INVALID_FK, "a"),
            (SchemaErrorType.MISSING_PK, "b"),
            (SchemaErrorType.INVALID_FK, "b"),
            (SchemaErrorType.INVALID_FK, "b"),
        ]

    def test_warnings_never_affect_validity(self):
        table = TableDefinition(name="my table", columns=[
            col("id", "SERIAL", is_primary_key=True),
            col("email", "TEXT"),
        ])
        result = validate_schema([table])
        assert result.warnings
        assert result.is_valid is True

    def test_idempotent(self):
        tables = [TableDefinition(name="t t", columns=[col("email", "TEXT", is_foreign_key=True)])]
        first = validate_schema(tables)
        second = validate_schema(tables)
        assert first.model_dump() == second.model_dump()

    def test_type_tags_are_stable_strings(self):
        result = validate_schema([TableDefinition(name="t", columns=[])])
        dumped = result.model_dump(mode="json", by_alias=True)
        assert dumped["errors"][0]["type"] == "missing_pk"
        assert dumped["isValid"] is False
