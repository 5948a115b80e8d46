"""
Playground query models

Wire format uses camelCase (friendlyMessage, rowCount, ...) to match the
front end; Python attributes stay snake_case.
"""
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class QueryErrorCode(str, Enum):
    """Stable classification codes returned to the client"""
    SYNTAX_ERROR = "SYNTAX_ERROR"
    TABLE_NOT_FOUND = "TABLE_NOT_FOUND"
    COLUMN_NOT_FOUND = "COLUMN_NOT_FOUND"
    GROUPBY_ERROR = "GROUPBY_ERROR"
    TYPE_ERROR = "TYPE_ERROR"
    QUERY_ERROR = "QUERY_ERROR"                    # generic fallback
    FORBIDDEN_OPERATION = "FORBIDDEN_OPERATION"    # denylisted statement
    NETWORK_ERROR = "NETWORK_ERROR"                # database unreachable


class CamelModel(BaseModel):
    """Base model serializing to camelCase and accepting either spelling"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class QueryRequest(CamelModel):
    """POST /query/execute body"""
    query: str = Field(..., description="SQL text typed in the playground")


class QueryResult(CamelModel):
    """Successful execution"""
    columns: List[str] = Field(default_factory=list, description="Column names in result order")
    rows: List[Dict[str, Any]] = Field(default_factory=list, description="One dict per row")
    row_count: int = Field(0, description="Rows returned")
    execution_time: int = Field(0, description="Wall-clock time in milliseconds")


class QueryErrorResponse(CamelModel):
    """Learner-facing explanation of a failed query"""
    code: str = Field(..., description="Classification code, see QueryErrorCode")
    message: str = Field(..., description="Raw error text from the database")
    friendly_message: str
    why_it_happened: str
    how_to_fix: str
    related_concept: Optional[str] = None


class RawQueryError(BaseModel):
    """Error as reported by the database driver"""
    message: str
    code: Optional[str] = None
