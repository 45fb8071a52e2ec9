"""
Exception hierarchy for linopt.

Key Components:
    - ModelError: Raised while assembling a Problem (fail fast)
    - SolveError: Raised inside solver adapters, converted to a False
      return value at the Solver.solve boundary

Example:
    >>> from linopt import Problem, Direction
    >>> from linopt.exceptions import ObjectiveDefinedError
    >>> p = Problem()
    >>> p.objective("cost", Direction.MINIMIZE)
    >>> try:
    ...     p.objective("other", Direction.MAXIMIZE)
    ... except ObjectiveDefinedError as e:
    ...     print(e)
    Objective already defined: cost
"""


class LinoptError(Exception):
    """Base class for all linopt errors."""


class ModelError(LinoptError):
    """Programmer error while building a problem."""


class KeyCollisionError(ModelError):
    """A row or column with the same key is already registered."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} {key} already exists")


class ObjectiveDefinedError(ModelError):
    """The problem already has an objective function."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Objective already defined: {key}")


class SolveError(LinoptError):
    """Translation or engine failure during a solve."""


class InvalidColumnTypeError(SolveError):
    """A column reached the solver without a valid column type."""

    def __init__(self, key: str, column_type=None):
        self.key = key
        self.column_type = column_type
        if column_type is None:
            super().__init__(f"Column {key} has no column type")
        else:
            super().__init__(f"Column {key} has invalid column type {column_type!r}")


class InvalidDirectionError(SolveError):
    """The objective reached the solver with an unknown direction."""

    def __init__(self, key: str, direction):
        self.key = key
        self.direction = direction
        super().__init__(f"Objective {key} has invalid direction {direction!r}")


class EngineError(SolveError):
    """The external engine rejected the model or failed while solving."""
