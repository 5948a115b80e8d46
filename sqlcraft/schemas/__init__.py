"""
Pydantic models
"""
from sqlcraft.schemas.query import (
    QueryErrorCode,
    QueryErrorResponse,
    QueryRequest,
    QueryResult,
    RawQueryError,
)
from sqlcraft.schemas.schema_design import (
    ColumnDefinition,
    ColumnReference,
    SchemaError,
    SchemaErrorType,
    SchemaWarning,
    SchemaWarningType,
    TableDefinition,
    ValidationResult,
)

__all__ = [
    # playground
    "QueryErrorCode",
    "QueryErrorResponse",
    "QueryRequest",
    "QueryResult",
    "RawQueryError",
    # schema designer
    "ColumnDefinition",
    "ColumnReference",
    "SchemaError",
    "SchemaErrorType",
    "SchemaWarning",
    "SchemaWarningType",
    "TableDefinition",
    "ValidationResult",
]
