"""
Linear programming problem with named, indexed rows and columns.

Key Components:
    - Problem: Aggregate root owning columns, rows, the objective and the
      sparse coefficient matrix
    - Column: Decision variable
    - Row: Constraint
    - Objective: The single row that is minimized or maximized
    - ColumnType, Direction: Enums for variable kinds and optimization sense

Columns and rows are created on first reference and identified by their
key (see linopt.problem.keys). Solvers number them in ascending key order,
so two builds of the same model in a different order map identically.

Example:
    >>> from linopt import Problem, ColumnType, Direction
    >>> p = Problem("Trivial")
    >>> p.column("C").type(ColumnType.FLOAT)
    >>> p.objective("obj", Direction.MINIMIZE).add(1.0, "C")
    >>> p.row("R").bounds(2.0, 3.0).add(1.0, "C")
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from linopt.exceptions import KeyCollisionError, ModelError, ObjectiveDefinedError

from .keys import key as make_key


class ColumnType(Enum):
    """Kind of a decision variable."""

    FLOAT = "float"
    INTEGER = "integer"
    BINARY = "binary"


class Direction(Enum):
    """Optimization direction of the objective."""

    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"


class _Entity:
    """Shared state of rows and columns."""

    def __init__(self, problem: "Problem", key: str):
        self._problem = problem
        self.key = key
        self.lower_bound: Optional[float] = None
        self.upper_bound: Optional[float] = None
        # Assigned by the solver, valid for the duration of one solve
        self.number = 0
        self.value = 0.0
        self.dual = 0.0

    @property
    def problem(self) -> "Problem":
        return self._problem

    def _set_bounds(self, lower_bound: Optional[float], upper_bound: Optional[float]) -> None:
        self.lower_bound = None if lower_bound is None else float(lower_bound)
        self.upper_bound = None if upper_bound is None else float(upper_bound)

    def __lt__(self, other: "_Entity") -> bool:
        return self.key < other.key

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


class Column(_Entity):
    """
    Decision variable.

    Attributes:
        key: Unique column key
        column_type: ColumnType, must be set before solving
        lower_bound: Lower bound, None if unbounded below
        upper_bound: Upper bound, None if unbounded above
        number: 1-based position assigned by the solver
        value: Primal value after solving
        dual: Reduced cost after solving (continuous models only)
    """

    def __init__(self, problem: "Problem", key: str):
        super().__init__(problem, key)
        self.column_type: Optional[ColumnType] = None
        problem._register_column(self)

    def type(self, column_type: ColumnType) -> "Column":
        """Set the column type."""
        self.column_type = column_type
        return self

    def bounds(
        self,
        lower_bound: Optional[float] = None,
        upper_bound: Optional[float] = None,
    ) -> "Column":
        """Set both bounds; None leaves the column unbounded on that side."""
        self._set_bounds(lower_bound, upper_bound)
        return self

    def add(self, coefficient: float, row: Union["Row", str], *indices: Any) -> "Column":
        """
        Set the coefficient of this column in a row.

        Args:
            coefficient: Coefficient value, overwrites any previous value.
            row: Row object or row name.
            *indices: Row indices when a name is given.

        Returns:
            This column.
        """
        if not isinstance(row, Row):
            row = self._problem.row(row, *indices)
        self._problem._set_coefficient(row, self, coefficient)
        return self


class Row(_Entity):
    """
    Constraint.

    Both bounds equal give an equality, only a lower bound gives ``>=``,
    only an upper bound ``<=``, two distinct bounds a range, and no bounds
    a free row.
    """

    def __init__(self, problem: "Problem", key: str):
        super().__init__(problem, key)
        problem._register_row(self)

    def bounds(
        self,
        lower_bound: Optional[float] = None,
        upper_bound: Optional[float] = None,
    ) -> "Row":
        """Set both bounds; None leaves the row unbounded on that side."""
        self._set_bounds(lower_bound, upper_bound)
        return self

    def add(self, coefficient: float, column: Union[Column, str], *indices: Any) -> "Row":
        """
        Set the coefficient of a column in this row.

        Args:
            coefficient: Coefficient value, overwrites any previous value.
            column: Column object or column name.
            *indices: Column indices when a name is given.

        Returns:
            This row.
        """
        if not isinstance(column, Column):
            column = self._problem.column(column, *indices)
        self._problem._set_coefficient(self, column, coefficient)
        return self


class Objective(Row):
    """Objective function, a row carrying an optimization direction."""

    def __init__(self, problem: "Problem", key: str, direction: Direction):
        super().__init__(problem, key)
        self.direction = direction

    def set_direction(self, direction: Direction) -> "Objective":
        self.direction = direction
        return self


class Problem:
    """
    Linear programming problem.

    Holds columns and rows keyed by their textual key, at most one
    objective, and the coefficient matrix (row -> column -> value).
    Not thread safe; build and solve from a single owner.
    """

    def __init__(self, name: Optional[str] = None):
        self._name = name
        self._columns: Dict[str, Column] = {}
        self._rows: Dict[str, Row] = {}
        self._matrix: Dict[Row, Dict[Column, float]] = {}
        self._objective: Optional[Objective] = None

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def name(self) -> Optional[str]:
        return self._name

    @name.setter
    def name(self, name: Optional[str]) -> None:
        self._name = name

    def set_name(self, name: Optional[str]) -> "Problem":
        self._name = name
        return self

    @property
    def columns(self) -> List[Column]:
        """Columns sorted by key."""
        return [self._columns[k] for k in sorted(self._columns)]

    @property
    def rows(self) -> List[Row]:
        """Rows sorted by key, including the objective."""
        return [self._rows[k] for k in sorted(self._rows)]

    @property
    def matrix(self) -> Dict[Row, Dict[Column, float]]:
        """Snapshot of the coefficient matrix ordered by row and column key."""
        return {
            row: {c: self._matrix[row][c] for c in sorted(self._matrix[row])}
            for row in self.rows
        }

    # =========================================================================
    # Builder
    # =========================================================================

    def column(self, name: str, *indices: Any) -> Column:
        """
        Get the column identified by name and indices, creating it if needed.

        Args:
            name: Column name.
            *indices: Column indices.

        Returns:
            The column registered under the key.
        """
        k = make_key(name, *indices)
        column = self._columns.get(k)
        if column is None:
            column = Column(self, k)
        return column

    def row(self, name: str, *indices: Any) -> Row:
        """
        Get the row identified by name and indices, creating it if needed.

        Args:
            name: Row name.
            *indices: Row indices.

        Returns:
            The row registered under the key. This is the objective when
            name matches the objective's key.
        """
        k = make_key(name, *indices)
        row = self._rows.get(k)
        if row is None:
            row = Row(self, k)
        return row

    def objective(
        self,
        name: Optional[str] = None,
        direction: Direction = Direction.MINIMIZE,
    ) -> Optional[Objective]:
        """
        Create the objective function, or get it when called without a name.

        Args:
            name: Objective name. None returns the current objective.
            direction: Optimization direction.

        Returns:
            The objective, or None if none was created yet.

        Raises:
            ObjectiveDefinedError: If an objective already exists.
            KeyCollisionError: If a row with the same key exists.
        """
        if name is None:
            return self._objective
        if self._objective is not None:
            raise ObjectiveDefinedError(self._objective.key)
        self._objective = Objective(self, name, direction)
        return self._objective

    def coefficient(self, row: Row, column: Column) -> float:
        """Coefficient of column in row, 0.0 when not set."""
        return self._matrix.get(row, {}).get(column, 0.0)

    def to_string(self) -> str:
        """Render the problem as a human readable constraint listing."""
        from .writer import problem_to_string

        return problem_to_string(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Problem(name={self._name!r}, columns={len(self._columns)}, "
            f"rows={len(self._rows)})"
        )

    # =========================================================================
    # Registration (called from Column/Row constructors)
    # =========================================================================

    def _register_column(self, column: Column) -> None:
        if column.key in self._columns:
            raise KeyCollisionError("Column", column.key)
        self._columns[column.key] = column

    def _register_row(self, row: Row) -> None:
        if row.key in self._rows:
            raise KeyCollisionError("Row", row.key)
        self._rows[row.key] = row
        self._matrix[row] = {}

    def _set_coefficient(self, row: Row, column: Column, value: float) -> None:
        if row.problem is not self or column.problem is not self:
            raise ModelError(f"{row.key}/{column.key} belongs to another problem")
        self._matrix[row][column] = float(value)
