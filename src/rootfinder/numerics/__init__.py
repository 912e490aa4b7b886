# src/rootfinder/numerics/__init__.py
"""
Numerical building blocks.

Top-level package `rootfinder` exposes the everyday solver API.
This subpackage exposes the solver internals and the float comparison helpers.
"""

from .precision import (
    EPSILON,
    SAFE_MIN,
    nearly_equal,
    nearly_equal_abs,
    nearly_equal_including_nan,
    nearly_equal_rel,
    ulp_distance,
)
from .root_finding import BrentSolver, RootResult, brent_method, brent_root

__all__ = [
    # Root finding
    "BrentSolver",
    "RootResult",
    "brent_method",
    "brent_root",
    # Precision
    "EPSILON",
    "SAFE_MIN",
    "nearly_equal",
    "nearly_equal_abs",
    "nearly_equal_including_nan",
    "nearly_equal_rel",
    "ulp_distance",
]
