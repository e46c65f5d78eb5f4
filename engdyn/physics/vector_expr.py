"""
Symbolic 3D vectors.

VectorExpr3D is the symbolic counterpart of a numeric vector: each axis is
a sympy expression, so full expressions stay visible until the vector is
evaluated at a concrete parameter value.

Arithmetic is component-wise against scalars, expressions, numeric
3-vectors and other VectorExpr3D instances; it never couples the axes.
Only ``cross`` mixes components, by definition.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field

import numpy as np
import sympy

from engdyn import symbolic
from engdyn.numerics.differentiation import central_difference
from engdyn.physics import latex


def _coerce(value) -> sympy.Expr:
    if isinstance(value, np.generic):
        value = value.item()
    return symbolic.as_expr(value)


@dataclass(frozen=True)
class VectorExpr3D:
    """Three symbolic expressions, one per Cartesian axis."""

    x: sympy.Expr = field(default=sympy.S.Zero)
    y: sympy.Expr = field(default=sympy.S.Zero)
    z: sympy.Expr = field(default=sympy.S.Zero)

    # Let numpy defer to the reflected operators below instead of
    # broadcasting over an object array.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _coerce(self.x))
        object.__setattr__(self, "y", _coerce(self.y))
        object.__setattr__(self, "z", _coerce(self.z))

    @classmethod
    def zero(cls) -> VectorExpr3D:
        return cls(sympy.S.Zero, sympy.S.Zero, sympy.S.Zero)

    @classmethod
    def from_vector(cls, v) -> VectorExpr3D:
        """Symbolic vector with constant components taken from a numeric 3-vector."""
        v = np.asarray(v, dtype=np.float64)
        if v.shape != (3,):
            raise ValueError(f"Expected a 3D vector, got shape {v.shape}")
        return cls(float(v[0]), float(v[1]), float(v[2]))

    @classmethod
    def parse(cls, x: str, y: str, z: str) -> VectorExpr3D:
        """Build a vector from three expression strings."""
        return cls(symbolic.parse(x), symbolic.parse(y), symbolic.parse(z))

    def __iter__(self) -> Iterator[sympy.Expr]:
        return iter((self.x, self.y, self.z))

    @property
    def free_symbols(self) -> set[sympy.Symbol]:
        return self.x.free_symbols | self.y.free_symbols | self.z.free_symbols

    # -- component-wise arithmetic -------------------------------------------

    def _operand(self, other) -> tuple[sympy.Expr, sympy.Expr, sympy.Expr] | None:
        if isinstance(other, VectorExpr3D):
            return other.x, other.y, other.z
        if isinstance(other, np.ndarray):
            if other.shape != (3,):
                return None
            return tuple(_coerce(float(c)) for c in other)
        if isinstance(other, (int, float, np.generic, sympy.Basic)):
            c = _coerce(other)
            return c, c, c
        return None

    def _apply(self, other, op: Callable) -> VectorExpr3D:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        ox, oy, oz = operand
        return VectorExpr3D(op(self.x, ox), op(self.y, oy), op(self.z, oz))

    def __add__(self, other):
        return self._apply(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._apply(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._apply(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._apply(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._apply(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._apply(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._apply(other, lambda a, b: a / b)

    def __rtruediv__(self, other):
        return self._apply(other, lambda a, b: b / a)

    def __neg__(self) -> VectorExpr3D:
        return VectorExpr3D(-self.x, -self.y, -self.z)

    def cross(self, other: VectorExpr3D) -> VectorExpr3D:
        """Vector (cross) product."""
        if not isinstance(other, VectorExpr3D):
            other = VectorExpr3D.from_vector(other)
        return VectorExpr3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # -- calculus and evaluation ---------------------------------------------

    def differentiate(self, var: str | sympy.Symbol = "t") -> VectorExpr3D:
        """Differentiate each axis with respect to ``var``."""
        return VectorExpr3D(
            symbolic.differentiate(self.x, var),
            symbolic.differentiate(self.y, var),
            symbolic.differentiate(self.z, var),
        )

    def evaluate(self, bindings: Mapping[str, float]) -> np.ndarray:
        """
        Evaluate every axis at the given bindings.

        Raises:
            UnboundVariableError: If any axis keeps an unbound free symbol
        """
        return np.array(
            [symbolic.evaluate(c, bindings) for c in self],
            dtype=np.float64,
        )

    def at_time(self, time: float, variable: str = "t") -> np.ndarray:
        """Numeric vector at a given time."""
        return self.evaluate({variable: time})

    def finite_central_difference(
        self,
        time: float,
        interval: float,
        variable: str = "t",
    ) -> np.ndarray:
        """
        Central-difference approximation of the time derivative at ``time``.

        See ``engdyn.numerics.differentiation.central_difference``.
        """
        return central_difference(self, time, interval, variable)

    def applyfunc(self, func: Callable[[sympy.Expr], sympy.Expr]) -> VectorExpr3D:
        """Apply ``func`` to each axis expression."""
        return VectorExpr3D(func(self.x), func(self.y), func(self.z))

    def simplify(self) -> VectorExpr3D:
        return self.applyfunc(symbolic.simplify)

    # -- display -------------------------------------------------------------

    def component_representation(self) -> str:
        """LaTeX component representation; zero axes are omitted (eq. 1.1.5)."""
        return latex.join_components(
            None if symbolic.is_zero(c) else symbolic.to_latex(c)
            for c in self
        )
