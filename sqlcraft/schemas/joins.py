"""
JOIN visualizer models
"""
from enum import Enum
from typing import Any, Dict, List

from pydantic import Field

from sqlcraft.schemas.query import CamelModel


class JoinType(str, Enum):
    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"


class JoinTable(CamelModel):
    """Small in-memory table shown on one side of the join"""
    name: str
    rows: List[Dict[str, Any]] = Field(default_factory=list)


class JoinCondition(CamelModel):
    """Equi-join condition: left.left_column = right.right_column"""
    left_column: str
    right_column: str


class JoinRequest(CamelModel):
    """POST /joins/visualize body"""
    left_table: JoinTable
    right_table: JoinTable
    join_type: JoinType = JoinType.INNER
    join_condition: JoinCondition


class JoinVisualization(CamelModel):
    """Which rows take part in the join, and the joined output"""
    left_table: JoinTable
    right_table: JoinTable
    join_type: JoinType
    join_condition: JoinCondition
    description: str
    matched_left_rows: List[int] = Field(default_factory=list)
    matched_right_rows: List[int] = Field(default_factory=list)
    unmatched_left_rows: List[int] = Field(default_factory=list)
    unmatched_right_rows: List[int] = Field(default_factory=list)
    result_rows: List[Dict[str, Any]] = Field(default_factory=list)
