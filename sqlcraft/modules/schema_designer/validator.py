"""
Schema validator for the visual designer

Flat rule pass over learner-authored tables. Every rule is an independent
check returning zero or more diagnostics. Per table, TABLE_RULES run first,
then COLUMN_RULES for each column in order, then TRAILING_TABLE_RULES.
Rules never read each other's output.

Rules:
    table   - no primary key column              -> missing_pk error
    column  - foreign key without references     -> invalid_fk error
    column  - "email" column not VARCHAR(255)    -> type_choice warning
    column  - name contains a space              -> naming warning
    table   - name contains a space              -> naming warning

Usage:
    result = validate_schema(tables)
    if not result.is_valid:
        ...
"""
import logging
from typing import Callable, Iterable, List, Union

from sqlcraft.schemas.schema_design import (
    ColumnDefinition,
    SchemaError,
    SchemaErrorType,
    SchemaWarning,
    SchemaWarningType,
    TableDefinition,
    ValidationResult,
)

logger = logging.getLogger(__name__)

Diagnostic = Union[SchemaError, SchemaWarning]
TableRule = Callable[[TableDefinition], Iterable[Diagnostic]]
ColumnRule = Callable[[TableDefinition, ColumnDefinition], Iterable[Diagnostic]]

EMAIL_COLUMN_TYPE = "VARCHAR(255)"


# =============================================================================
# Table rules
# =============================================================================

def check_primary_key(table: TableDefinition) -> List[Diagnostic]:
    if any(column.is_primary_key for column in table.columns):
        return []
    return [SchemaError(
        type=SchemaErrorType.MISSING_PK,
        table=table.name,
        message=f'Table "{table.name}" has no primary key',
        suggestion="Add a primary key column (usually 'id') to uniquely identify each row.",
    )]


def check_table_name(table: TableDefinition) -> List[Diagnostic]:
    if " " not in table.name:
        return []
    return [SchemaWarning(
        type=SchemaWarningType.NAMING,
        table=table.name,
        message="Table name contains spaces",
        suggestion="Use snake_case for table names (e.g., 'user_orders' instead of 'user orders').",
    )]


# =============================================================================
# Column rules
# =============================================================================

def check_foreign_key_reference(table: TableDefinition, column: ColumnDefinition) -> List[Diagnostic]:
    # Only presence is checked; the target table/column is not looked up
    if not column.is_foreign_key or column.references is not None:
        return []
    return [SchemaError(
        type=SchemaErrorType.INVALID_FK,
        table=table.name,
        message=f'Foreign key "{column.name}" has no reference defined',
        suggestion="Specify which table and column this foreign key references.",
    )]


def check_email_type(table: TableDefinition, column: ColumnDefinition) -> List[Diagnostic]:
    if column.name.lower() != "email" or column.type == EMAIL_COLUMN_TYPE:
        return []
    return [SchemaWarning(
        type=SchemaWarningType.TYPE_CHOICE,
        table=table.name,
        column=column.name,
        message=f"Consider using {EMAIL_COLUMN_TYPE} for email fields",
        suggestion=f"Emails have a maximum length of 254 characters, {EMAIL_COLUMN_TYPE} is standard.",
    )]


def check_column_name(table: TableDefinition, column: ColumnDefinition) -> List[Diagnostic]:
    if " " not in column.name:
        return []
    return [SchemaWarning(
        type=SchemaWarningType.NAMING,
        table=table.name,
        column=column.name,
        message="Column name contains spaces",
        suggestion="Use snake_case for column names (e.g., 'user_email' instead of 'user email').",
    )]


TABLE_RULES: List[TableRule] = [
    check_primary_key,
]

COLUMN_RULES: List[ColumnRule] = [
    check_foreign_key_reference,
    check_email_type,
    check_column_name,
]

# Evaluated after the columns of the table
TRAILING_TABLE_RULES: List[TableRule] = [
    check_table_name,
]


# =============================================================================
# Entry point
# =============================================================================

def validate_schema(tables: List[TableDefinition]) -> ValidationResult:
    """
    Validate a designer schema

    Pure and total: never raises for typed input, and an empty list yields a
    valid result with no diagnostics. Warnings never affect is_valid.

    Args:
        tables: tables in designer order

    Returns:
        ValidationResult
    """
    diagnostics: List[Diagnostic] = []

    for table in tables:
        for table_rule in TABLE_RULES:
            diagnostics.extend(table_rule(table))
        for column in table.columns:
            for column_rule in COLUMN_RULES:
                diagnostics.extend(column_rule(table, column))
        for table_rule in TRAILING_TABLE_RULES:
            diagnostics.extend(table_rule(table))

    errors = [d for d in diagnostics if isinstance(d, SchemaError)]
    warnings = [d for d in diagnostics if isinstance(d, SchemaWarning)]

    logger.debug(
        f"[SchemaValidator] {len(tables)} tables -> "
        f"{len(errors)} errors, {len(warnings)} warnings"
    )

    return ValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
    )
