"""
Parameter searches over a scalar oracle.

Provides:
- RootFindParametric: recover the parameter value at which an integral
  (typically arc length) reaches a target (Ginsberg pp. 41-42)
- solve_for_variable: the same search applied directly to an expression
- gauss_legendre: the fixed-order quadrature used as the integral oracle

A search that cannot meet the tolerance inside the range does not raise;
it returns a RootResult with ``converged=False`` and ``root=None``, which
callers are expected to check.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
import sympy
from scipy.integrate import fixed_quad

from engdyn import symbolic
from engdyn.models.inputs import SearchPolicy, SearchStrategy

Integrand = Union[Callable[[float], float], sympy.Expr, str]

# 5-point Gauss-Legendre
QUADRATURE_ORDER = 5

# Halvings before bisection gives up; enough to exhaust double precision
MAX_BISECTIONS = 100


@dataclass
class RootResult:
    """
    Result of a parameter search.

    Attributes:
        root: Parameter value found, or None if the target was not reached
        converged: Whether a candidate met the tolerance
        evaluations: Number of oracle evaluations performed
        residual: Oracle value minus target at the returned root
    """
    root: Optional[float]
    converged: bool
    evaluations: int
    residual: Optional[float] = None


def gauss_legendre(
    f: Callable,
    a: float,
    b: float,
    order: int = QUADRATURE_ORDER,
) -> float:
    """
    Integrate ``f`` over [a, b] with fixed-order Gauss-Legendre quadrature.

    ``f`` is called once with the array of quadrature nodes, so it must
    accept numpy arrays.
    """
    value, _ = fixed_quad(f, a, b, n=order)
    return float(value)


def _single_variable(expr: sympy.Expr) -> str:
    names = sorted(s.name for s in expr.free_symbols)
    if len(names) != 1:
        raise ValueError(
            f"Cannot infer the integration variable of {expr}; pass variable explicitly"
        )
    return names[0]


def _as_function(integrand: Integrand, variable: Optional[str]) -> Callable:
    """Numpy-aware function for a callable or symbolic integrand."""
    if isinstance(integrand, (str, sympy.Basic)):
        expr = symbolic.as_expr(integrand)
        if variable is None:
            variable = _single_variable(expr)
        return symbolic.lambdify(expr, variable)
    return np.vectorize(integrand, otypes=[np.float64])


def _sweep(g: Callable[[float], float], target: float, policy: SearchPolicy) -> RootResult:
    """Forward sweep: first candidate within margin of target."""
    # Candidates are computed from k rather than accumulated so the sweep
    # does not drift over thousands of steps.
    evaluations = 0
    for k in range(1, policy.max_candidates + 1):
        candidate = policy.candidate(k)
        value = g(candidate)
        evaluations += 1
        if abs(value - target) < policy.margin:
            return RootResult(
                root=candidate,
                converged=True,
                evaluations=evaluations,
                residual=value - target,
            )
    return RootResult(root=None, converged=False, evaluations=evaluations)


def _bisect(g: Callable[[float], float], target: float, policy: SearchPolicy) -> RootResult:
    """Bisection on g - target between the first candidate and the upper bound."""
    lo = policy.candidate(1)
    hi = policy.upper_bound
    r_lo = g(lo) - target
    r_hi = g(hi) - target
    evaluations = 2

    if abs(r_lo) < policy.margin:
        return RootResult(root=lo, converged=True, evaluations=evaluations, residual=r_lo)
    if abs(r_hi) < policy.margin:
        return RootResult(root=hi, converged=True, evaluations=evaluations, residual=r_hi)
    if np.sign(r_lo) == np.sign(r_hi):
        # Target not bracketed by the range
        return RootResult(root=None, converged=False, evaluations=evaluations)

    for _ in range(MAX_BISECTIONS):
        mid = (lo + hi) / 2.0
        r_mid = g(mid) - target
        evaluations += 1
        if abs(r_mid) < policy.margin:
            return RootResult(root=mid, converged=True, evaluations=evaluations, residual=r_mid)
        if np.sign(r_mid) == np.sign(r_lo):
            lo, r_lo = mid, r_mid
        else:
            hi = mid

    return RootResult(root=None, converged=False, evaluations=evaluations)


def search(g: Callable[[float], float], target: float, policy: SearchPolicy) -> RootResult:
    """
    Find a parameter value at which ``g`` is within ``policy.margin`` of target.

    Args:
        g: Scalar oracle
        target: Value to reach
        policy: Range, step, tolerance and strategy

    Returns:
        RootResult; ``converged`` is False when no candidate qualified
    """
    if policy.strategy == SearchStrategy.BISECT:
        return _bisect(g, target, policy)
    return _sweep(g, target, policy)


def root_find_parametric(
    integral_target: float,
    integrand: Integrand,
    policy: SearchPolicy,
    variable: Optional[str] = None,
) -> RootResult:
    """
    Recover the upper limit b at which an integral reaches a target value.

    Finds b in (a, b_max] such that the integral of ``integrand`` over
    [a, b] is within ``policy.margin`` of ``integral_target``, where
    a = ``policy.lower_bound`` and b_max = ``policy.upper_bound``. Each
    candidate is checked with 5-point Gauss-Legendre quadrature.

    Args:
        integral_target: Target value of the integral, e.g. s(t) at the time
            of interest
        integrand: Rate function, e.g. s'(beta); a callable or an expression
        policy: Search range, step, tolerance and strategy
        variable: Integration variable when ``integrand`` is an expression
            with more than one symbol

    Returns:
        RootResult with the first qualifying b, or converged=False

    Notes:
        - The integral is assumed monotone in b but this is not checked;
          with a sign-changing integrand the sweep returns the first match,
          not necessarily the only one.
        - The sweep costs (b_max - a) / step quadratures.
    """
    f = _as_function(integrand, variable)
    a = policy.lower_bound

    def integral_to(b: float) -> float:
        return gauss_legendre(f, a, b)

    return search(integral_to, integral_target, policy)


def solve_for_variable(
    expr: symbolic.ExprLike,
    variable: str,
    target: float,
    policy: SearchPolicy,
) -> RootResult:
    """
    Search for the value of ``variable`` at which ``expr`` equals ``target``.

    Raises:
        UnboundVariableError: If ``expr`` has free symbols besides ``variable``
    """
    f = symbolic.lambdify(expr, variable)

    def value_at(v: float) -> float:
        return float(f(v))

    return search(value_at, target, policy)
