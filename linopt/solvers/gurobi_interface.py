"""
Gurobi backend for linopt.

Key Components:
    - GurobiSolver: Solver translating a Problem into a gurobipy model
    - map_status(): Gurobi status code to SolveStatus
    - column_bounds(): Column bounds as finite/infinite engine bounds

Each solve opens its own gurobipy Env and Model inside ``with`` blocks,
so both are disposed whether the solve succeeds or fails.

Example:
    >>> from linopt.solvers import GurobiSolver
    >>> solver = GurobiSolver()
    >>> solver.set_mip_gap(0.01)
    >>> if solver.solve(problem):
    ...     print(problem.objective().value)
"""

import logging
from typing import Callable, List, Optional, Tuple

import gurobipy as gp
import numpy as np
from gurobipy import GRB

from linopt.exceptions import (
    EngineError,
    InvalidColumnTypeError,
    InvalidDirectionError,
    SolveError,
)
from linopt.problem import Column, ColumnType, Direction, Problem, Row

from .base_solver import Solver, SolverState, SolveStatus
from .translation import (
    BoundKind,
    CoefficientTriples,
    assign_numbers,
    classify_bounds,
    flatten_matrix,
)

logger = logging.getLogger(__name__)


# Column type to Gurobi variable type
VTYPE_MAP = {
    ColumnType.FLOAT: GRB.CONTINUOUS,
    ColumnType.INTEGER: GRB.INTEGER,
    ColumnType.BINARY: GRB.BINARY,
}

# Optimization direction to Gurobi model sense
SENSE_MAP = {
    Direction.MINIMIZE: GRB.MINIMIZE,
    Direction.MAXIMIZE: GRB.MAXIMIZE,
}

# Single sided and fixed rows; ranged rows use addRange, free rows are skipped
ROW_SENSE_MAP = {
    BoundKind.LOWER: GRB.GREATER_EQUAL,
    BoundKind.UPPER: GRB.LESS_EQUAL,
    BoundKind.FIXED: GRB.EQUAL,
}

# Gurobi status codes with a fixed meaning
STATUS_MAP = {
    GRB.OPTIMAL: SolveStatus.OPTIMAL,
    GRB.INFEASIBLE: SolveStatus.INFEASIBLE,
    GRB.UNBOUNDED: SolveStatus.UNBOUNDED,
    GRB.INF_OR_UNBD: SolveStatus.INF_OR_UNBD,
}

# Early terminations; feasible if an incumbent exists
LIMIT_STATUSES = {
    GRB.SUBOPTIMAL,
    GRB.TIME_LIMIT,
    GRB.NODE_LIMIT,
    GRB.SOLUTION_LIMIT,
    GRB.ITERATION_LIMIT,
    GRB.INTERRUPTED,
    GRB.USER_OBJ_LIMIT,
    GRB.WORK_LIMIT,
    GRB.MEM_LIMIT,
}

MessageCallback = Callable[[str], None]


def map_status(status_code: int, solution_count: int) -> SolveStatus:
    """
    Map a Gurobi status code to a SolveStatus.

    Args:
        status_code: Model.Status after optimize().
        solution_count: Model.SolCount after optimize().

    Returns:
        Normalized status.
    """
    if status_code in STATUS_MAP:
        return STATUS_MAP[status_code]
    if status_code in LIMIT_STATUSES:
        return SolveStatus.FEASIBLE if solution_count > 0 else SolveStatus.NO_SOLUTION
    return SolveStatus.ERROR


def column_bounds(column: Column) -> Tuple[float, float]:
    """
    Engine bounds of a column, GRB.INFINITY standing for a missing bound.

    Binary columns default to [0, 1] on any side left unset.
    """
    lower, upper = column.lower_bound, column.upper_bound
    if column.column_type is ColumnType.BINARY:
        lower = 0.0 if lower is None else lower
        upper = 1.0 if upper is None else upper

    kind = classify_bounds(lower, upper)
    if kind is BoundKind.FREE:
        return -GRB.INFINITY, GRB.INFINITY
    if kind is BoundKind.LOWER:
        return lower, GRB.INFINITY
    if kind is BoundKind.UPPER:
        return -GRB.INFINITY, upper
    if kind is BoundKind.FIXED:
        return lower, lower
    return lower, upper


class GurobiSolver(Solver):
    """
    Gurobi solver backend.

    Translates a Problem into a fresh gurobipy model on every solve,
    optimizes it and writes values back onto the problem's columns and
    rows. Engine output is silent unless a message callback is set.

    Attributes:
        _message_callback: Receives engine log lines during optimize()
    """

    def __init__(self, message_callback: Optional[MessageCallback] = None):
        """
        Initialize GurobiSolver.

        Args:
            message_callback: Optional callable receiving engine log lines.
        """
        super().__init__()
        self._message_callback = message_callback

    @classmethod
    def from_config(cls, config) -> "GurobiSolver":
        """
        Create a solver with tuning taken from a SolverConfig.

        Rejected values are logged and left at their defaults.
        """
        solver = cls()
        solver.configure(config)
        return solver

    def set_message_callback(self, callback: Optional[MessageCallback]) -> None:
        """Register a callable for engine log lines, None to unregister."""
        self._message_callback = callback

    # =========================================================================
    # Solving
    # =========================================================================

    def solve(self, problem: Problem) -> bool:
        """
        Solve the problem.

        Values are copied onto the problem only when an optimal or feasible
        solution was found; otherwise previous values stay untouched.

        Args:
            problem: Problem to solve.

        Returns:
            True if successful.
        """
        try:
            return self._solve(problem)
        except SolveError as e:
            logger.error(f"Solving {problem.name or 'problem'} failed: {e}")
            self._state = SolverState(status=SolveStatus.ERROR, message=str(e))
            return False

    def _solve(self, problem: Problem) -> bool:
        columns, rows = assign_numbers(problem)
        for column in columns:
            if not isinstance(column.column_type, ColumnType):
                raise InvalidColumnTypeError(column.key, column.column_type)
        objective = problem.objective()
        if objective is not None and not isinstance(objective.direction, Direction):
            raise InvalidDirectionError(objective.key, objective.direction)
        triples = flatten_matrix(problem)
        logger.debug(
            f"Translated {problem.name or 'problem'}: {len(columns)} columns, "
            f"{len(rows)} rows, {triples.size} nonzeros"
        )

        try:
            with gp.Env(empty=True) as env:
                if self._message_callback is not None:
                    env.setParam("OutputFlag", 1)
                    env.setParam("LogToConsole", 0)
                else:
                    env.setParam("OutputFlag", 0)
                env.start()
                with gp.Model(problem.name or "", env=env) as model:
                    return self._run(model, problem, columns, rows, triples)
        except gp.GurobiError as e:
            raise EngineError(f"Gurobi error {e.errno}: {e.message}") from e

    def _run(
        self,
        model: gp.Model,
        problem: Problem,
        columns: List[Column],
        rows: List[Row],
        triples: CoefficientTriples,
    ) -> bool:
        objective = problem.objective()

        # Columns, with objective coefficients
        costs = np.zeros(len(columns))
        for number, value in triples.objective:
            costs[number - 1] = value
        variables = []
        for column in columns:
            lb, ub = column_bounds(column)
            variables.append(
                model.addVar(
                    lb=lb,
                    ub=ub,
                    obj=float(costs[column.number - 1]),
                    vtype=VTYPE_MAP[column.column_type],
                    name=column.key,
                )
            )

        if objective is not None:
            model.ModelSense = SENSE_MAP[objective.direction]

        # Rows
        expressions = []
        constraints = []
        for row in rows:
            column_numbers, values = triples.row_entries(row.number)
            expr = gp.LinExpr(values.tolist(), [variables[c - 1] for c in column_numbers])
            expressions.append(expr)
            constraints.append(self._add_row(model, row, expr))

        self._apply_parameters(model)
        if self._message_callback is not None:
            model.optimize(self._forward_messages)
        else:
            model.optimize()

        status = map_status(model.Status, model.SolCount)
        state = SolverState(
            status=status,
            solve_time=model.Runtime,
            node_count=int(model.NodeCount) if model.IsMIP else 0,
            iteration_count=int(model.IterCount),
        )
        self._state = state

        if not status.is_success:
            state.message = f"Gurobi status {model.Status}"
            logger.warning(f"No solution for {problem.name or 'problem'}: {status.value}")
            return False

        state.objective = model.ObjVal
        if model.IsMIP:
            state.gap = model.MIPGap

        if objective is not None:
            objective.value = model.ObjVal
        for column, var in zip(columns, variables):
            column.value = var.X
        for row, expr in zip(rows, expressions):
            row.value = expr.getValue()

        # Duals exist only for continuous models
        if not model.IsMIP and status is SolveStatus.OPTIMAL:
            for column, var in zip(columns, variables):
                column.dual = var.RC
            for row, constr in zip(rows, constraints):
                row.dual = constr.Pi if constr is not None else 0.0

        logger.info(
            f"Solved {problem.name or 'problem'}: {status.value}, "
            f"objective={state.objective}, time={state.solve_time:.3f}s"
        )
        return True

    @staticmethod
    def _add_row(model: gp.Model, row: Row, expr: gp.LinExpr) -> Optional[gp.Constr]:
        kind = classify_bounds(row.lower_bound, row.upper_bound)
        if kind is BoundKind.FREE:
            return None
        if kind is BoundKind.RANGED:
            return model.addRange(expr, row.lower_bound, row.upper_bound, name=row.key)
        rhs = row.upper_bound if kind is BoundKind.UPPER else row.lower_bound
        return model.addLConstr(expr, ROW_SENSE_MAP[kind], rhs, name=row.key)

    def _apply_parameters(self, model: gp.Model) -> None:
        model.Params.Presolve = -1 if self._presolve else 0
        model.Params.MIPGap = self._mip_gap
        if self._time_limit is not None:
            model.Params.TimeLimit = self._time_limit

    def _forward_messages(self, model: gp.Model, where: int) -> None:
        if where == GRB.Callback.MESSAGE:
            message = model.cbGet(GRB.Callback.MSG_STRING).rstrip("\n")
            logger.debug(message)
            self._message_callback(message)
