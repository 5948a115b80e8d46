"""
Playground query API

Routes:
    POST /api/query/execute  - run a read-only query against the playground

Responses:
    200 QueryResult
    400 {"error": QueryErrorResponse}  missing query or execution failure
    403 {"error": QueryErrorResponse}  denylisted statement (FORBIDDEN_OPERATION)
"""
import logging

from fastapi import APIRouter, Request
from starlette.concurrency import run_in_threadpool

from sqlcraft.modules.playground.error_classifier import classify_error
from sqlcraft.modules.playground.gateway import get_query_gateway
from sqlcraft.schemas.query import QueryErrorCode, QueryErrorResponse, QueryResult, RawQueryError
from sqlcraft.schemas.response import bad_request, forbidden

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/query", tags=["Playground"])


@router.post("/execute", response_model=QueryResult)
async def execute_query(request: Request):
    """
    Execute a playground query

    The body is read by hand so that a missing or non-string query gets the
    classified 400 body instead of FastAPI's 422.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    query = payload.get("query") if isinstance(payload, dict) else None
    if not query or not isinstance(query, str):
        return bad_request(classify_error(RawQueryError(message="Query is required")))

    gateway = get_query_gateway()
    outcome = await run_in_threadpool(gateway.execute, query)

    if isinstance(outcome, QueryErrorResponse):
        if outcome.code == QueryErrorCode.FORBIDDEN_OPERATION.value:
            return forbidden(outcome)
        return bad_request(outcome)

    return outcome
