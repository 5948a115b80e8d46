"""
Scenario API

Routes:
    GET /api/scenarios                  - all scenarios
    GET /api/scenarios/{id}             - one scenario
    GET /api/scenarios/{id}/exercises   - exercises of a scenario, ordered
"""
import logging
from typing import List

from fastapi import APIRouter, Path
from sqlalchemy.exc import SQLAlchemyError

from sqlcraft.schemas.content import ExerciseOut, ScenarioOut
from sqlcraft.schemas.response import internal_error, not_found
from sqlcraft.services.content_service import get_content_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scenarios", tags=["Scenarios"])


@router.get("", response_model=List[ScenarioOut])
def get_scenarios():
    try:
        return get_content_service().get_scenarios()
    except SQLAlchemyError as e:
        logger.error(f"[ScenarioAPI] List failed: {e}")
        return internal_error("Failed to fetch scenarios")


@router.get("/{scenario_id}", response_model=ScenarioOut)
def get_scenario(scenario_id: str = Path(..., description="Scenario id")):
    try:
        scenario = get_content_service().get_scenario(scenario_id)
    except SQLAlchemyError as e:
        logger.error(f"[ScenarioAPI] Lookup failed for {scenario_id}: {e}")
        return internal_error("Failed to fetch scenario")

    if scenario is None:
        return not_found("Scenario not found")
    return scenario


@router.get("/{scenario_id}/exercises", response_model=List[ExerciseOut])
def get_exercises(scenario_id: str = Path(..., description="Scenario id")):
    try:
        return get_content_service().get_exercises(scenario_id)
    except SQLAlchemyError as e:
        logger.error(f"[ScenarioAPI] Exercises failed for {scenario_id}: {e}")
        return internal_error("Failed to fetch exercises")
