"""
Numerical methods used by the kinematics formulas.

- Parameter searches (forward sweep or bisection) over an integral or an
  expression
- Central-difference derivatives of symbolic expressions
"""

from engdyn.numerics.differentiation import (
    central_difference,
    central_difference_scalar,
)
from engdyn.numerics.root_finding import (
    RootResult,
    gauss_legendre,
    root_find_parametric,
    search,
    solve_for_variable,
)

__all__ = [
    "RootResult",
    "central_difference",
    "central_difference_scalar",
    "gauss_legendre",
    "root_find_parametric",
    "search",
    "solve_for_variable",
]
