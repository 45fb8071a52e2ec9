"""
Utilities - configuration loading.

Key Components:
    - SolverConfig: Solver tuning parameters
    - SolverConfigLoader: YAML configuration loader with environment overrides

Example:
    >>> from linopt.utils import SolverConfigLoader
    >>> config = SolverConfigLoader().get_solver_config()
    >>> print(config.mip_gap)
"""

from .config_loader import SolverConfig, SolverConfigLoader, parse_bool

__all__ = ['SolverConfig', 'SolverConfigLoader', 'parse_bool']
