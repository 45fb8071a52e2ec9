"""
Solver backends for linopt.

Key Components:
    - Solver: Abstract base class for backends
    - GurobiSolver: Gurobi implementation
    - SolveStatus, SolverState: Outcome of the last solve
    - BoundKind, classify_bounds(), assign_numbers(), flatten_matrix():
      Engine independent translation helpers

Example:
    >>> from linopt.solvers import GurobiSolver
    >>> solver = GurobiSolver()
    >>> ok = solver.solve(problem)
    >>> print(solver.state.status)
"""

from .base_solver import MAX_TIME_LIMIT, Solver, SolverState, SolveStatus
from .translation import (
    BoundKind,
    CoefficientTriples,
    assign_numbers,
    classify_bounds,
    flatten_matrix,
)
from .gurobi_interface import GurobiSolver

__all__ = [
    # Base classes
    "Solver",
    # Data classes
    "SolverState",
    "SolveStatus",
    "MAX_TIME_LIMIT",
    # Translation
    "BoundKind",
    "CoefficientTriples",
    "assign_numbers",
    "classify_bounds",
    "flatten_matrix",
    # Implementations
    "GurobiSolver",
]
