"""
Schema designer module

Rule-based design checks for learner-authored schemas.
"""
from sqlcraft.modules.schema_designer.validator import (
    COLUMN_RULES,
    TABLE_RULES,
    TRAILING_TABLE_RULES,
    validate_schema,
)

__all__ = [
    "COLUMN_RULES",
    "TABLE_RULES",
    "TRAILING_TABLE_RULES",
    "validate_schema",
]
