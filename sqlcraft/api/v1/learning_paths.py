"""
Learning path API

Routes:
    GET /api/learning-paths                 - all paths, ordered
    GET /api/learning-paths/{id}            - one path
    GET /api/learning-paths/{id}/lessons    - lessons of a path, ordered
"""
import logging
from typing import List

from fastapi import APIRouter, Path
from sqlalchemy.exc import SQLAlchemyError

from sqlcraft.schemas.content import LearningPathOut, LessonOut
from sqlcraft.schemas.response import internal_error, not_found
from sqlcraft.services.content_service import get_content_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learning-paths", tags=["Learning Paths"])


@router.get("", response_model=List[LearningPathOut])
def get_learning_paths():
    try:
        return get_content_service().get_learning_paths()
    except SQLAlchemyError as e:
        logger.error(f"[LearningPathAPI] List failed: {e}")
        return internal_error("Failed to fetch learning paths")


@router.get("/{path_id}", response_model=LearningPathOut)
def get_learning_path(path_id: str = Path(..., description="Learning path id")):
    try:
        path = get_content_service().get_learning_path(path_id)
    except SQLAlchemyError as e:
        logger.error(f"[LearningPathAPI] Lookup failed for {path_id}: {e}")
        return internal_error("Failed to fetch learning path")

    if path is None:
        return not_found("Learning path not found")
    return path


@router.get("/{path_id}/lessons", response_model=List[LessonOut])
def get_lessons(path_id: str = Path(..., description="Learning path id")):
    try:
        return get_content_service().get_lessons(path_id)
    except SQLAlchemyError as e:
        logger.error(f"[LearningPathAPI] Lessons failed for {path_id}: {e}")
        return internal_error("Failed to fetch lessons")
