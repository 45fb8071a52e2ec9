"""
Model layer: named, indexed columns and rows, the objective and the matrix.

Key Components:
    - Problem: Problem builder
    - Column, Row, Objective: Model entities
    - ColumnType, Direction: Enums
    - key(): Key construction
    - problem_to_string(): Human readable listing

Example:
    >>> from linopt.problem import Problem, ColumnType, Direction
    >>> p = Problem("CuttingStock")
    >>> u = p.column("u", 0).type(ColumnType.BINARY)
    >>> print(u.key)
    u(0)
"""

from .keys import key
from .problem import (
    Column,
    ColumnType,
    Direction,
    Objective,
    Problem,
    Row,
)
from .writer import problem_to_string

__all__ = [
    "Problem",
    "Column",
    "Row",
    "Objective",
    "ColumnType",
    "Direction",
    "key",
    "problem_to_string",
]
