"""
linopt: Named-entity builder for mixed integer linear programs

Build a problem from columns and rows identified by a name plus indices,
hand it to a solver backend and read primal values, duals and the
objective value back from the same objects.

Key Components:
    - problem: Problem, Column, Row, Objective and the text listing
    - solvers: Solver interface and the Gurobi backend
    - utils: Solver configuration loading
    - exceptions: Error hierarchy
"""

from .exceptions import (
    EngineError,
    InvalidColumnTypeError,
    InvalidDirectionError,
    KeyCollisionError,
    LinoptError,
    ModelError,
    ObjectiveDefinedError,
    SolveError,
)
from .problem import Column, ColumnType, Direction, Objective, Problem, Row

__version__ = "0.1.0"

__all__ = [
    "Problem",
    "Column",
    "Row",
    "Objective",
    "ColumnType",
    "Direction",
    "LinoptError",
    "ModelError",
    "KeyCollisionError",
    "ObjectiveDefinedError",
    "SolveError",
    "InvalidColumnTypeError",
    "InvalidDirectionError",
    "EngineError",
]
