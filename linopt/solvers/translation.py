"""
Engine independent translation of a Problem into numbered form.

Key Components:
    - BoundKind: Classification of a (lower, upper) pair
    - classify_bounds(): Map bounds to a BoundKind
    - assign_numbers(): Number columns and rows in ascending key order
    - flatten_matrix(): Sparse matrix as (row, column, value) triples plus
      the objective coefficients

Example:
    >>> columns, rows = assign_numbers(problem)
    >>> triples = flatten_matrix(problem)
    >>> cols, vals = triples.row_entries(rows[0].number)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from linopt.problem import Column, Problem, Row


class BoundKind(Enum):
    """Bound classification used to select how bounds reach the engine."""

    FREE = "free"        # no bounds
    LOWER = "lower"      # lower bound only
    UPPER = "upper"      # upper bound only
    FIXED = "fixed"      # lower == upper
    RANGED = "ranged"    # distinct lower and upper


def classify_bounds(lower: Optional[float], upper: Optional[float]) -> BoundKind:
    """Classify a pair of optional bounds."""
    if lower is None and upper is None:
        return BoundKind.FREE
    if upper is None:
        return BoundKind.LOWER
    if lower is None:
        return BoundKind.UPPER
    if lower == upper:
        return BoundKind.FIXED
    return BoundKind.RANGED


def assign_numbers(problem: Problem) -> Tuple[List[Column], List[Row]]:
    """
    Assign 1-based positional numbers in ascending key order.

    The objective is excluded from row numbering.

    Args:
        problem: Problem to number.

    Returns:
        (columns, rows) where the entity with number n sits at index n - 1.
    """
    columns = problem.columns
    for number, column in enumerate(columns, start=1):
        column.number = number

    objective = problem.objective()
    rows = [row for row in problem.rows if row is not objective]
    for number, row in enumerate(rows, start=1):
        row.number = number

    return columns, rows


@dataclass
class CoefficientTriples:
    """
    Flattened coefficient matrix.

    Attributes:
        row_numbers: Row number of each entry, ascending
        column_numbers: Column number of each entry
        values: Coefficient of each entry
        objective: (column number, coefficient) pairs of the objective row
    """

    row_numbers: np.ndarray
    column_numbers: np.ndarray
    values: np.ndarray
    objective: List[Tuple[int, float]] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of constraint matrix entries."""
        return int(self.values.size)

    def row_entries(self, row_number: int) -> Tuple[np.ndarray, np.ndarray]:
        """Column numbers and values of one row."""
        start = np.searchsorted(self.row_numbers, row_number, side="left")
        stop = np.searchsorted(self.row_numbers, row_number, side="right")
        return self.column_numbers[start:stop], self.values[start:stop]


def flatten_matrix(problem: Problem) -> CoefficientTriples:
    """
    Flatten the matrix of a numbered problem.

    Must be called after assign_numbers(). Entries of the objective row go
    to the objective channel instead of the triples.

    Args:
        problem: Numbered problem.

    Returns:
        CoefficientTriples ordered by row number, then column number.
    """
    objective = problem.objective()
    row_numbers: List[int] = []
    column_numbers: List[int] = []
    values: List[float] = []
    objective_pairs: List[Tuple[int, float]] = []

    for row, coefficients in problem.matrix.items():
        if row is objective:
            objective_pairs.extend((c.number, v) for c, v in coefficients.items())
            continue
        for column, value in coefficients.items():
            row_numbers.append(row.number)
            column_numbers.append(column.number)
            values.append(value)

    return CoefficientTriples(
        row_numbers=np.asarray(row_numbers, dtype=np.int64),
        column_numbers=np.asarray(column_numbers, dtype=np.int64),
        values=np.asarray(values, dtype=np.float64),
        objective=objective_pairs,
    )
