"""
Abstract base class for solver backends.

Key Components:
    - Solver: Interface every backend implements (solve + tuning setters)
    - SolveStatus: Normalized outcome of a solve
    - SolverState: Record of the last solve

Tuning parameters are validated and stored here, so every backend rejects
the same invalid values and keeps its previous setting on rejection.

Example:
    >>> class MySolver(Solver):
    ...     def solve(self, problem: Problem) -> bool:
    ...         # Translate, run the engine, copy values back
    ...         pass
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from linopt.problem import Problem

if TYPE_CHECKING:
    from linopt.utils.config_loader import SolverConfig

logger = logging.getLogger(__name__)

# Largest time limit in seconds (milliseconds must fit a signed 32 bit int)
MAX_TIME_LIMIT = (2 ** 31 - 1) / 1000


class SolveStatus(Enum):
    """Outcome of a solve."""

    NOT_SOLVED = "NOT_SOLVED"
    OPTIMAL = "OPTIMAL"
    FEASIBLE = "FEASIBLE"        # stopped early by gap/time limit with a solution
    INFEASIBLE = "INFEASIBLE"
    UNBOUNDED = "UNBOUNDED"
    INF_OR_UNBD = "INF_OR_UNBD"
    NO_SOLUTION = "NO_SOLUTION"  # stopped by a limit before finding a solution
    ERROR = "ERROR"

    @property
    def is_success(self) -> bool:
        """Whether the solve produced a trustworthy solution."""
        return self in (SolveStatus.OPTIMAL, SolveStatus.FEASIBLE)


@dataclass
class SolverState:
    """Represents the state of a solver after its last solve."""

    status: SolveStatus = SolveStatus.NOT_SOLVED
    objective: Optional[float] = None  # Objective value (on success)
    gap: Optional[float] = None  # Relative MIP gap (MIP models)
    solve_time: float = 0.0  # Engine runtime (seconds)
    node_count: int = 0  # Branch-and-bound nodes explored
    iteration_count: int = 0  # Simplex iterations
    message: str = ""  # Error or status detail


class Solver(ABC):
    """
    Abstract base class for solver backends.

    solve() must never raise on engine failure; it returns False and
    records the reason in state.
    """

    def __init__(self):
        self._presolve = True
        self._mip_gap = 0.0
        self._time_limit: Optional[float] = None
        self._state = SolverState()

    @abstractmethod
    def solve(self, problem: Problem) -> bool:
        """
        Solve the problem and copy values onto its columns and rows.

        Args:
            problem: Problem to solve.

        Returns:
            True if an optimal or feasible integer solution was found.
        """
        pass

    # =========================================================================
    # Tuning
    # =========================================================================

    def set_presolve(self, enabled: bool) -> bool:
        """
        Enable or disable the presolver (enabled by default).

        Args:
            enabled: True to enable.

        Returns:
            True if successful.
        """
        self._presolve = bool(enabled)
        logger.debug(f"Presolve {'enabled' if self._presolve else 'disabled'}")
        return True

    def set_mip_gap(self, gap: float) -> bool:
        """
        Set the relative MIP gap at which the search stops early.

        Args:
            gap: Relative gap, must be >= 0.

        Returns:
            True if accepted, False if rejected (previous value kept).
        """
        try:
            accepted = bool(gap >= 0)
        except (TypeError, ValueError):
            accepted = False
        if not accepted:
            logger.warning(f"Rejected MIP gap {gap!r}: must be a number >= 0")
            return False
        self._mip_gap = float(gap)
        logger.debug(f"MIP gap set to {self._mip_gap}")
        return True

    def set_time_limit(self, seconds: float) -> bool:
        """
        Set the wall clock time limit of the search.

        Args:
            seconds: Time limit, 0 <= seconds <= MAX_TIME_LIMIT.

        Returns:
            True if accepted, False if rejected (previous value kept).
        """
        try:
            accepted = bool(0 <= seconds <= MAX_TIME_LIMIT)
        except (TypeError, ValueError):
            accepted = False
        if not accepted:
            logger.warning(
                f"Rejected time limit {seconds!r}: must be a number within [0, {MAX_TIME_LIMIT}]"
            )
            return False
        self._time_limit = float(seconds)
        logger.debug(f"Time limit set to {self._time_limit}s")
        return True

    def configure(self, config: "SolverConfig") -> bool:
        """
        Apply a SolverConfig through the validated setters.

        Returns:
            True if every value was accepted.
        """
        ok = self.set_presolve(config.presolve)
        ok = self.set_mip_gap(config.mip_gap) and ok
        if config.time_limit is not None:
            ok = self.set_time_limit(config.time_limit) and ok
        return ok

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def presolve(self) -> bool:
        return self._presolve

    @property
    def mip_gap(self) -> float:
        return self._mip_gap

    @property
    def time_limit(self) -> Optional[float]:
        """Time limit in seconds, None if unlimited."""
        return self._time_limit

    @property
    def state(self) -> SolverState:
        """State recorded by the last solve."""
        return self._state

