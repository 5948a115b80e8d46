"""
SQL playground module

Query gateway (denylist, pooled execution, statement timeout) and the
database error classifier behind it.
"""
from sqlcraft.modules.playground.error_classifier import (
    CLASSIFICATION_RULES,
    classify_error,
    forbidden_operation,
    network_error,
)
from sqlcraft.modules.playground.gateway import (
    QueryGateway,
    get_query_gateway,
)

__all__ = [
    "CLASSIFICATION_RULES",
    "classify_error",
    "forbidden_operation",
    "network_error",
    "QueryGateway",
    "get_query_gateway",
]
