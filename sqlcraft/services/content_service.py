"""
Content service

Read access to learning paths, lessons, scenarios and exercises. Plain
lookups with existence checks; writes happen through seeding outside this
service.

Usage:
    content_service = get_content_service()
    paths = content_service.get_learning_paths()
"""
import logging
from functools import lru_cache
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from sqlcraft.core.database import get_content_engine
from sqlcraft.models.content import Exercise, LearningPath, Lesson, Scenario
from sqlcraft.schemas.content import ExerciseOut, LearningPathOut, LessonOut, ScenarioOut

logger = logging.getLogger(__name__)


class ContentService:
    """
    Learning content reads

    Returns pydantic read models so no ORM object outlives its session.
    SQLAlchemyError propagates to the caller.
    """

    def __init__(self, engine: Engine):
        self._engine = engine

    # ========== Learning paths ==========

    def get_learning_paths(self) -> List[LearningPathOut]:
        with Session(self._engine) as session:
            paths = session.scalars(select(LearningPath).order_by(LearningPath.order_index)).all()
            return [LearningPathOut.model_validate(p) for p in paths]

    def get_learning_path(self, path_id: str) -> Optional[LearningPathOut]:
        with Session(self._engine) as session:
            path = session.get(LearningPath, path_id)
            return LearningPathOut.model_validate(path) if path else None

    def get_lessons(self, path_id: str) -> List[LessonOut]:
        """Lessons of a path in order; empty for an unknown path"""
        with Session(self._engine) as session:
            lessons = session.scalars(
                select(Lesson).where(Lesson.path_id == path_id).order_by(Lesson.order_index)
            ).all()
            return [LessonOut.model_validate(lesson) for lesson in lessons]

    # ========== Scenarios ==========

    def get_scenarios(self) -> List[ScenarioOut]:
        with Session(self._engine) as session:
            scenarios = session.scalars(select(Scenario)).all()
            return [ScenarioOut.model_validate(s) for s in scenarios]

    def get_scenario(self, scenario_id: str) -> Optional[ScenarioOut]:
        with Session(self._engine) as session:
            scenario = session.get(Scenario, scenario_id)
            return ScenarioOut.model_validate(scenario) if scenario else None

    def get_exercises(self, scenario_id: str) -> List[ExerciseOut]:
        """Exercises of a scenario in order; empty for an unknown scenario"""
        with Session(self._engine) as session:
            exercises = session.scalars(
                select(Exercise).where(Exercise.scenario_id == scenario_id).order_by(Exercise.order_index)
            ).all()
            return [ExerciseOut.model_validate(e) for e in exercises]


@lru_cache()
def get_content_service() -> ContentService:
    """Process-wide content service on the shared content engine"""
    logger.info("[ContentService] Initialising")
    return ContentService(get_content_engine())
