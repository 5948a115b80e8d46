"""
Schema designer API

Routes:
    POST /api/schema/validate      - validate a designed schema
    GET  /api/schema/column-types  - column types offered by the designer
"""
import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from sqlcraft.modules.schema_designer.validator import validate_schema
from sqlcraft.schemas.response import bad_request
from sqlcraft.schemas.schema_design import COLUMN_TYPES, SchemaValidateRequest, ValidationResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schema", tags=["Schema Designer"])


@router.post("/validate", response_model=ValidationResult, response_model_exclude_none=True)
async def validate(request: Request):
    """
    Validate table definitions

    400 {"error": "..."} when tables is missing, not an array, or holds
    malformed table objects.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    tables = payload.get("tables") if isinstance(payload, dict) else None
    if tables is None or not isinstance(tables, list):
        return bad_request("Tables array is required")

    try:
        body = SchemaValidateRequest.model_validate({"tables": tables})
    except ValidationError as e:
        logger.info(f"[SchemaAPI] Malformed table definitions: {e.error_count()} errors")
        return bad_request("Invalid table definitions")

    return validate_schema(body.tables)


@router.get("/column-types")
async def get_column_types():
    """Column type literals for the designer dropdown"""
    return COLUMN_TYPES
