"""
rootfinder

Bracketing root finder for real univariate functions (Brent's method).

This package exposes the main user-facing names at the top level, so you
can write, for example:

    from rootfinder import BrentSolver

    solver = BrentSolver(1e-14, 1e-15, 1e-15)
    root = solver.find_root(lambda x: x * x - 2.0, 0.0, 2.0)
"""

from .config import DEFAULT_CONFIG, SolverConfig
from .exceptions import (
    ErrorKind,
    InvalidIntervalError,
    NoBracketError,
    OutOfRangeError,
    RootFindingError,
    TooManyEvaluationsError,
)
from .numerics.precision import nearly_equal
from .numerics.root_finding import BrentSolver, RootResult, brent_method, brent_root

__all__ = [
    # Config
    "SolverConfig",
    "DEFAULT_CONFIG",
    # Solver
    "BrentSolver",
    "RootResult",
    "brent_method",
    "brent_root",
    "nearly_equal",
    # Errors
    "ErrorKind",
    "RootFindingError",
    "InvalidIntervalError",
    "OutOfRangeError",
    "NoBracketError",
    "TooManyEvaluationsError",
]
