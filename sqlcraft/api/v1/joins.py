"""
JOIN visualizer API

Routes:
    POST /api/joins/visualize  - evaluate a join between two small tables
    GET  /api/joins/example    - built-in employees/departments dataset
"""
import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from sqlcraft.modules.joins.visualizer import EXAMPLE_JOIN, visualize_join
from sqlcraft.schemas.joins import JoinRequest, JoinVisualization
from sqlcraft.schemas.response import bad_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/joins", tags=["Joins"])


@router.post("/visualize", response_model=JoinVisualization)
async def visualize(request: Request):
    try:
        payload = await request.json()
    except ValueError:
        return bad_request("Request body must be JSON")

    try:
        join_request = JoinRequest.model_validate(payload)
    except ValidationError as e:
        logger.info(f"[JoinAPI] Invalid join request: {e.error_count()} errors")
        return bad_request("Invalid join request: expected leftTable, rightTable, joinType (INNER, LEFT, RIGHT, FULL) and joinCondition")

    return visualize_join(join_request)


@router.get("/example", response_model=JoinRequest)
async def get_example():
    return EXAMPLE_JOIN
