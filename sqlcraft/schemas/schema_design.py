"""
Schema designer models

A learner-authored schema is a list of TableDefinition objects, each owning
its ColumnDefinition list. Validation output is a ValidationResult holding
SchemaError (blocking) and SchemaWarning (advisory) entries.
"""
from enum import Enum
from typing import List, Optional

from pydantic import Field

from sqlcraft.schemas.query import CamelModel


class SchemaErrorType(str, Enum):
    """Error tags consumed by the client for icon selection"""
    MISSING_PK = "missing_pk"
    INVALID_FK = "invalid_fk"
    REDUNDANT_DATA = "redundant_data"
    NORMALIZATION = "normalization"


class SchemaWarningType(str, Enum):
    """Warning tags"""
    NAMING = "naming"
    TYPE_CHOICE = "type_choice"
    NULLABLE = "nullable"


# Column types offered by the designer
COLUMN_TYPES = [
    "INTEGER",
    "BIGINT",
    "SERIAL",
    "VARCHAR(255)",
    "TEXT",
    "BOOLEAN",
    "DATE",
    "TIMESTAMP",
    "DECIMAL(10,2)",
    "JSON",
]


class ColumnReference(CamelModel):
    """Target of a foreign key, possibly half-filled while the learner edits"""
    table: Optional[str] = Field(None, description="Referenced table name")
    column: Optional[str] = Field(None, description="Referenced column name")


class ColumnDefinition(CamelModel):
    """Column in the designer"""
    name: str = Field(..., description="Column name")
    type: str = Field(..., description="SQL type literal, e.g. 'VARCHAR(255)'")
    is_primary_key: bool = Field(False, description="Whether this column is the primary key")
    is_foreign_key: bool = Field(False, description="Whether this column is a foreign key")
    references: Optional[ColumnReference] = Field(None, description="FK target, expected when is_foreign_key")
    is_nullable: bool = Field(True, description="Whether NULL is allowed")


class TableDefinition(CamelModel):
    """Table in the designer"""
    name: str = Field(..., description="Table name")
    columns: List[ColumnDefinition] = Field(default_factory=list, description="Columns in display order")


class SchemaError(CamelModel):
    """Design problem that makes the schema invalid"""
    type: SchemaErrorType
    table: str
    message: str
    suggestion: str


class SchemaWarning(CamelModel):
    """Design smell that does not affect validity"""
    type: SchemaWarningType
    table: str
    column: Optional[str] = None
    message: str
    suggestion: str


class ValidationResult(CamelModel):
    """Outcome of one validation call; is_valid iff errors is empty"""
    is_valid: bool = True
    errors: List[SchemaError] = Field(default_factory=list)
    warnings: List[SchemaWarning] = Field(default_factory=list)


class SchemaValidateRequest(CamelModel):
    """POST /schema/validate body"""
    tables: List[TableDefinition]
