"""
JOIN visualizer

Computes which rows of two small tables take part in an equi-join and what
the joined output looks like, so the client can highlight them.

SQL semantics: every matching (left, right) pair produces a row and NULL
never equals NULL. Output keys are "<table>.<column>" so same-named columns
from both sides stay apart.
"""
import logging
from typing import Any, Dict, List

from sqlcraft.schemas.joins import (
    JoinCondition,
    JoinRequest,
    JoinTable,
    JoinType,
    JoinVisualization,
)

logger = logging.getLogger(__name__)

JOIN_DESCRIPTIONS: Dict[JoinType, str] = {
    JoinType.INNER: "Returns only rows that have matching values in both tables. Think of it as the intersection.",
    JoinType.LEFT: "Returns all rows from the left table, and matched rows from the right. Unmatched right rows show as NULL.",
    JoinType.RIGHT: "Returns all rows from the right table, and matched rows from the left. Unmatched left rows show as NULL.",
    JoinType.FULL: "Returns all rows from both tables. Unmatched rows from either side show as NULL.",
}

# Demo dataset used by the JOIN page
EXAMPLE_JOIN = JoinRequest(
    left_table=JoinTable(name="employees", rows=[
        {"id": 1, "name": "Alice", "department_id": 1},
        {"id": 2, "name": "Bob", "department_id": 2},
        {"id": 3, "name": "Carol", "department_id": 1},
        {"id": 4, "name": "David", "department_id": None},
        {"id": 5, "name": "Emma", "department_id": 3},
    ]),
    right_table=JoinTable(name="departments", rows=[
        {"id": 1, "department": "Engineering"},
        {"id": 2, "department": "Marketing"},
        {"id": 4, "department": "Sales"},
    ]),
    join_type=JoinType.INNER,
    join_condition=JoinCondition(left_column="department_id", right_column="id"),
)


def _columns(table: JoinTable) -> List[str]:
    """Column names in first-seen order across all rows"""
    seen: Dict[str, None] = {}
    for row in table.rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def _prefixed(table: JoinTable, columns: List[str], row: Dict[str, Any] = None) -> Dict[str, Any]:
    # row=None pads the side with NULLs
    return {f"{table.name}.{col}": (row.get(col) if row is not None else None) for col in columns}


def visualize_join(request: JoinRequest) -> JoinVisualization:
    """
    Evaluate a join between two in-memory tables

    Args:
        request: both tables, join type and the equi-join condition

    Returns:
        JoinVisualization with matched/unmatched row indexes and result rows
    """
    left, right = request.left_table, request.right_table
    left_key = request.join_condition.left_column
    right_key = request.join_condition.right_column
    left_columns, right_columns = _columns(left), _columns(right)

    matched_left: List[int] = []
    matched_right = set()
    result_rows: List[Dict[str, Any]] = []

    for left_idx, left_row in enumerate(left.rows):
        left_value = left_row.get(left_key)
        matches = [
            right_idx for right_idx, right_row in enumerate(right.rows)
            if left_value is not None and right_row.get(right_key) == left_value
        ]
        if matches:
            matched_left.append(left_idx)
            for right_idx in matches:
                matched_right.add(right_idx)
                row = _prefixed(left, left_columns, left_row)
                row.update(_prefixed(right, right_columns, right.rows[right_idx]))
                result_rows.append(row)
        elif request.join_type in (JoinType.LEFT, JoinType.FULL):
            row = _prefixed(left, left_columns, left_row)
            row.update(_prefixed(right, right_columns))
            result_rows.append(row)

    unmatched_right = [idx for idx in range(len(right.rows)) if idx not in matched_right]
    if request.join_type in (JoinType.RIGHT, JoinType.FULL):
        for right_idx in unmatched_right:
            row = _prefixed(left, left_columns)
            row.update(_prefixed(right, right_columns, right.rows[right_idx]))
            result_rows.append(row)

    matched_left_set = set(matched_left)
    logger.debug(
        f"[JoinVisualizer] {request.join_type.value} {left.name} x {right.name}: "
        f"{len(result_rows)} result rows"
    )

    return JoinVisualization(
        left_table=left,
        right_table=right,
        join_type=request.join_type,
        join_condition=request.join_condition,
        description=JOIN_DESCRIPTIONS[request.join_type],
        matched_left_rows=matched_left,
        matched_right_rows=sorted(matched_right),
        unmatched_left_rows=[idx for idx in range(len(left.rows)) if idx not in matched_left_set],
        unmatched_right_rows=unmatched_right,
        result_rows=result_rows,
    )
