"""
JOIN visualizer module
"""
from sqlcraft.modules.joins.visualizer import (
    EXAMPLE_JOIN,
    JOIN_DESCRIPTIONS,
    visualize_join,
)

__all__ = [
    "EXAMPLE_JOIN",
    "JOIN_DESCRIPTIONS",
    "visualize_join",
]
