"""
Central-difference derivatives of symbolic expressions.

Approximates a time derivative by sampling the expression symmetrically
around the point of interest instead of differentiating it symbolically
(Ginsberg p. 12):

    r'(t0) ~ (r(t0 + dt/2) - r(t0 - dt/2)) / dt

The truncation error is O(dt^2). No default ``dt`` is chosen here: a large
interval loses accuracy to truncation, a very small one loses it to
cancellation when the two nearly equal samples are subtracted. Intervals
around 1e-3 to 1e-5 of the time scale of the motion are usually adequate.
"""

from typing import Protocol

import numpy as np

from engdyn import symbolic


class TimeSampled(Protocol):
    """Anything that evaluates to a numeric vector at a given time."""

    def at_time(self, time: float, variable: str = "t") -> np.ndarray: ...


def _check_interval(interval: float) -> None:
    if interval <= 0:
        raise ValueError("Interval must be positive")


def central_difference(
    position: TimeSampled,
    time: float,
    interval: float,
    variable: str = "t",
) -> np.ndarray:
    """
    Approximate the velocity of a symbolic position vector.

    Args:
        position: Symbolic vector r(t), typically a VectorExpr3D
        time: Time t0 at which to estimate the derivative
        interval: Small time interval dt spanning the two samples
        variable: Name of the time variable in the expressions

    Returns:
        Numeric vector approximating dr/dt at t0

    Raises:
        ValueError: If interval is not positive
        UnboundVariableError: If r has free variables other than time
    """
    _check_interval(interval)

    forward = position.at_time(time + interval / 2.0, variable)
    backward = position.at_time(time - interval / 2.0, variable)
    return (forward - backward) / interval


def central_difference_scalar(
    expr: symbolic.ExprLike,
    time: float,
    interval: float,
    variable: str = "t",
) -> float:
    """Scalar form of ``central_difference``."""
    _check_interval(interval)

    forward = symbolic.evaluate(expr, {variable: time + interval / 2.0})
    backward = symbolic.evaluate(expr, {variable: time - interval / 2.0})
    return (forward - backward) / interval
