"""
Learning content response models
"""
from typing import Any, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from sqlcraft.schemas.query import CamelModel


class ContentModel(CamelModel):
    """Read model built straight from ORM rows"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class LearningPathOut(ContentModel):
    id: str
    title: str
    description: str
    icon: str
    difficulty: str
    total_lessons: int
    estimated_hours: int
    order_index: int


class LessonOut(ContentModel):
    id: str
    path_id: str
    title: str
    description: str
    content: str
    order_index: int
    type: str


class ScenarioOut(ContentModel):
    id: str
    title: str
    description: str
    icon: str
    category: str
    schema_: Any = Field(None, alias="schema")
    sample_data: Any = None


class ExerciseOut(ContentModel):
    id: str
    scenario_id: str
    title: str
    description: str
    difficulty: str
    hint: Optional[str] = None
    expected_query: str
    order_index: int
