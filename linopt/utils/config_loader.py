"""
Solver configuration loader.

Loads default tuning parameters for solver backends from a local YAML
file, with environment variables overriding file values.

Key Components:
    - SolverConfig: Tuning parameters (presolve, MIP gap, time limit)
    - SolverConfigLoader: Reads configs/solver.yaml and applies overrides

Priority:
    1. Environment variables (LINOPT_PRESOLVE, LINOPT_MIP_GAP, LINOPT_TIME_LIMIT)
    2. Configuration file (configs/solver.yaml)
    3. Built-in defaults

Example:
    >>> from linopt.utils import SolverConfigLoader
    >>> from linopt.solvers import GurobiSolver
    >>> config = SolverConfigLoader().get_solver_config()
    >>> solver = GurobiSolver.from_config(config)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class SolverConfig:
    """Tuning parameters applied to a solver before solving."""

    presolve: bool = True
    mip_gap: float = 0.0
    time_limit: Optional[float] = None  # seconds, None = unlimited


def parse_bool(value: Any) -> bool:
    """Parse a boolean from YAML or environment text."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


class SolverConfigLoader:
    """Solver configuration loader."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the loader.

        Args:
            config_path: YAML file path, default configs/solver.yaml in the
                project root. An explicit path must exist; a missing default
                file falls back to built-in defaults.
        """
        self._explicit = config_path is not None
        if config_path is None:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "configs" / "solver.yaml"

        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load the ``solver`` section of the YAML file."""
        if not self.config_path.exists():
            if self._explicit:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
            return {}

        with open(self.config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict) or 'solver' not in config:
            raise ValueError(f"Config file is missing top-level key 'solver': {self.config_path}")

        section = config['solver'] or {}
        if not isinstance(section, dict):
            raise ValueError(f"'solver' must be a mapping: {self.config_path}")
        return section

    def get_presolve(self) -> bool:
        env_value = os.getenv("LINOPT_PRESOLVE")
        if env_value:
            return parse_bool(env_value)
        return parse_bool(self.config.get('presolve', True))

    def get_mip_gap(self) -> float:
        env_value = os.getenv("LINOPT_MIP_GAP")
        if env_value:
            return float(env_value)
        return float(self.config.get('mip_gap', 0.0))

    def get_time_limit(self) -> Optional[float]:
        """Time limit in seconds, None if unlimited."""
        env_value = os.getenv("LINOPT_TIME_LIMIT")
        if env_value:
            return float(env_value)
        value = self.config.get('time_limit')
        return None if value is None else float(value)

    def get_solver_config(self) -> SolverConfig:
        """
        Merged solver configuration.

        Returns:
            SolverConfig with environment overrides applied.

        Raises:
            ValueError: If a value cannot be parsed.
        """
        return SolverConfig(
            presolve=self.get_presolve(),
            mip_gap=self.get_mip_gap(),
            time_limit=self.get_time_limit(),
        )
