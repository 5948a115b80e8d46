"""
Error response factories

Every non-2xx body in the API is an object with a single "error" key. For
plain input and content errors the value is a static string; for query
failures it is a serialized QueryErrorResponse.

Example:
    404: {"error": "Scenario not found"}
    403: {"error": {"code": "FORBIDDEN_OPERATION", "friendlyMessage": "...", ...}}
"""
from typing import Union

from fastapi import status
from fastapi.responses import JSONResponse

from sqlcraft.schemas.query import QueryErrorResponse


def error(status_code: int, detail: Union[str, QueryErrorResponse]) -> JSONResponse:
    """
    Build an {"error": ...} JSON response

    Args:
        status_code: HTTP status code
        detail: static message, or a classified query error

    Returns:
        JSONResponse
    """
    if isinstance(detail, QueryErrorResponse):
        body = detail.model_dump(by_alias=True, exclude_none=True)
    else:
        body = detail
    return JSONResponse(status_code=status_code, content={"error": body})


# =============================================================================
# Shortcuts
# =============================================================================

def bad_request(detail: Union[str, QueryErrorResponse]) -> JSONResponse:
    """400 response"""
    return error(status.HTTP_400_BAD_REQUEST, detail)


def forbidden(detail: QueryErrorResponse) -> JSONResponse:
    """403 response"""
    return error(status.HTTP_403_FORBIDDEN, detail)


def not_found(message: str) -> JSONResponse:
    """404 response"""
    return error(status.HTTP_404_NOT_FOUND, message)


def internal_error(message: str) -> JSONResponse:
    """500 response"""
    return error(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
