"""
SQL error classifier

Turns a raw PostgreSQL error (message + SQLSTATE) into a learner-facing
explanation. Rules are kept in priority order; a rule matches on its code
OR its message pattern, and the first match wins:

    1. 42601  "syntax error"                     -> SYNTAX_ERROR
    2. 42P01  "does not exist"                   -> TABLE_NOT_FOUND
    3. 42703  "column" + "does not exist"        -> COLUMN_NOT_FOUND
    4. 42P10  "GROUP BY"                         -> GROUPBY_ERROR
    5. 22P02  "invalid input syntax"             -> TYPE_ERROR
    -         anything else                      -> QUERY_ERROR

Rule 2's pattern also catches 'column "x" does not exist', so a column
error whose message reaches the classifier lands on TABLE_NOT_FOUND.
"""
import re
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from sqlcraft.schemas.query import QueryErrorCode, QueryErrorResponse, RawQueryError

logger = logging.getLogger(__name__)

_RELATION_MISSING = re.compile(r'relation "(\w+)" does not exist')
_COLUMN_MISSING = re.compile(r'column "(\w+)" does not exist')


@dataclass(frozen=True)
class ClassificationRule:
    """
    One entry of the priority list

    sqlstate: exact vendor code that selects this rule
    matches_message: fallback predicate on the raw message
    build: produces the response from the raw message
    """
    sqlstate: str
    matches_message: Callable[[str], bool]
    build: Callable[[str], QueryErrorResponse]


# =============================================================================
# Response builders
# =============================================================================

def _syntax_error(message: str) -> QueryErrorResponse:
    return QueryErrorResponse(
        code=QueryErrorCode.SYNTAX_ERROR.value,
        message=message,
        friendly_message="There's a syntax error in your SQL query.",
        why_it_happened="SQL has strict grammar rules. A keyword might be misspelled or punctuation is missing.",
        how_to_fix="Check for typos in keywords (SELECT, FROM, WHERE). Make sure all parentheses and quotes are matched.",
        related_concept="SQL Syntax Basics",
    )


def _table_not_found(message: str) -> QueryErrorResponse:
    match = _RELATION_MISSING.search(message)
    table_name = match.group(1) if match else "the table"
    return QueryErrorResponse(
        code=QueryErrorCode.TABLE_NOT_FOUND.value,
        message=message,
        friendly_message=f'The table "{table_name}" doesn\'t exist.',
        why_it_happened="You're trying to query a table that hasn't been created or the name is misspelled.",
        how_to_fix="Check the spelling of your table name. Use the schema reference to see available tables.",
        related_concept="Database Tables",
    )


def _column_not_found(message: str) -> QueryErrorResponse:
    match = _COLUMN_MISSING.search(message)
    column_name = match.group(1) if match else "the column"
    return QueryErrorResponse(
        code=QueryErrorCode.COLUMN_NOT_FOUND.value,
        message=message,
        friendly_message=f'The column "{column_name}" doesn\'t exist in this table.',
        why_it_happened="You're trying to select or filter by a column that isn't in the table.",
        how_to_fix="Check the table schema to see what columns are available. Column names are case-sensitive.",
        related_concept="Table Columns",
    )


def _group_by_error(message: str) -> QueryErrorResponse:
    return QueryErrorResponse(
        code=QueryErrorCode.GROUPBY_ERROR.value,
        message=message,
        friendly_message="There's an issue with your GROUP BY clause.",
        why_it_happened="When using GROUP BY, every column in SELECT must either be in GROUP BY or be an aggregate function.",
        how_to_fix="Add all non-aggregated columns to your GROUP BY clause, or wrap them in an aggregate like MAX() or MIN().",
        related_concept="GROUP BY Clause",
    )


def _type_error(message: str) -> QueryErrorResponse:
    return QueryErrorResponse(
        code=QueryErrorCode.TYPE_ERROR.value,
        message=message,
        friendly_message="There's a data type mismatch in your query.",
        why_it_happened="You're comparing or inserting values of incompatible types (like text to a number column).",
        how_to_fix="Check that your values match the column types. Numbers don't need quotes, text does.",
        related_concept="Data Types",
    )


def _generic_error(message: str) -> QueryErrorResponse:
    return QueryErrorResponse(
        code=QueryErrorCode.QUERY_ERROR.value,
        message=message,
        friendly_message="Something went wrong with your query.",
        why_it_happened="The database couldn't execute your query due to an error.",
        how_to_fix="Review your query syntax and try again. Check the schema reference for table and column names.",
    )


# =============================================================================
# Priority list
# =============================================================================

CLASSIFICATION_RULES: List[ClassificationRule] = [
    ClassificationRule(
        sqlstate="42601",
        matches_message=lambda m: "syntax error" in m,
        build=_syntax_error,
    ),
    ClassificationRule(
        sqlstate="42P01",
        matches_message=lambda m: "does not exist" in m,
        build=_table_not_found,
    ),
    ClassificationRule(
        sqlstate="42703",
        matches_message=lambda m: "column" in m and "does not exist" in m,
        build=_column_not_found,
    ),
    ClassificationRule(
        sqlstate="42P10",
        matches_message=lambda m: "GROUP BY" in m,
        build=_group_by_error,
    ),
    ClassificationRule(
        sqlstate="22P02",
        matches_message=lambda m: "invalid input syntax" in m,
        build=_type_error,
    ),
]


def _find_rule(message: str, code: Optional[str]) -> Optional[ClassificationRule]:
    for rule in CLASSIFICATION_RULES:
        if rule.sqlstate == code or rule.matches_message(message):
            return rule
    return None


def classify_error(error: RawQueryError) -> QueryErrorResponse:
    """
    Classify a raw database error

    Pure and total: unrecognised errors get the generic QUERY_ERROR
    response, which carries no related concept.

    Args:
        error: raw message and optional SQLSTATE

    Returns:
        QueryErrorResponse
    """
    rule = _find_rule(error.message, error.code)
    if rule is None:
        logger.debug(f"[ErrorClassifier] No rule for code={error.code!r}, using fallback")
        return _generic_error(error.message)
    return rule.build(error.message)


# =============================================================================
# Fixed responses outside the classification table
# =============================================================================

def forbidden_operation() -> QueryErrorResponse:
    """Response for a statement rejected by the prefix denylist"""
    return QueryErrorResponse(
        code=QueryErrorCode.FORBIDDEN_OPERATION.value,
        message="This operation is not allowed",
        friendly_message="For safety, this playground only allows SELECT queries.",
        why_it_happened="Modifying data (INSERT, UPDATE, DELETE) and changing structure (CREATE, ALTER, DROP) are disabled.",
        how_to_fix="Practice reading data with SELECT queries. You can't accidentally break anything!",
        related_concept="Query Types",
    )


def network_error() -> QueryErrorResponse:
    """Response when the playground database cannot be reached"""
    return QueryErrorResponse(
        code=QueryErrorCode.NETWORK_ERROR.value,
        message="Failed to connect to server",
        friendly_message="Couldn't reach the server.",
        why_it_happened="There may be a network issue or the server is temporarily unavailable.",
        how_to_fix="Check your connection and try again.",
    )
