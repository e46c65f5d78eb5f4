"""
Thin adapter over sympy for the symbolic expressions used by the formulas.

Expressions are plain ``sympy.Expr`` objects. This module only fixes the
conventions the rest of the package relies on:

- ``^`` is accepted as exponentiation when parsing text
- evaluation binds variables by name and returns a float
- evaluation fails loudly when a free symbol is left unbound
"""

from collections.abc import Callable, Mapping
from typing import Union

import numpy as np
import sympy
from sympy.parsing.sympy_parser import (
    convert_xor,
    parse_expr,
    standard_transformations,
)

ExprLike = Union[sympy.Expr, str, float, int]

_TRANSFORMATIONS = standard_transformations + (convert_xor,)


class UnboundVariableError(ValueError):
    """Raised when an expression is evaluated with free symbols left unbound."""

    def __init__(self, expr: sympy.Expr, missing: set[str]):
        self.expr = expr
        self.missing = missing
        names = ", ".join(sorted(missing))
        super().__init__(f"Cannot evaluate {expr}: unbound variable(s) {names}")


def parse(text: str) -> sympy.Expr:
    """
    Parse text into a symbolic expression.

    Args:
        text: Expression such as ``"0.2*B*cos(B)"`` or ``"10*t^2"``

    Returns:
        The parsed sympy expression
    """
    return parse_expr(text, transformations=_TRANSFORMATIONS)


def as_expr(value: ExprLike) -> sympy.Expr:
    """Coerce text, numbers or expressions to a sympy expression."""
    if isinstance(value, str):
        return parse(value)
    return sympy.sympify(value)


def variable(name: str) -> sympy.Symbol:
    """Create a symbol that matches the ones produced by ``parse``."""
    return sympy.Symbol(name)


def _resolve(var: Union[str, sympy.Symbol], expr: sympy.Expr) -> sympy.Symbol:
    # Symbols created by the parser carry no assumptions, so match by name
    if isinstance(var, sympy.Symbol):
        return var
    for symbol in expr.free_symbols:
        if symbol.name == var:
            return symbol
    return sympy.Symbol(var)


def differentiate(expr: ExprLike, var: Union[str, sympy.Symbol]) -> sympy.Expr:
    """Differentiate an expression with respect to a named variable."""
    expr = as_expr(expr)
    return sympy.diff(expr, _resolve(var, expr))


def evaluate(expr: ExprLike, bindings: Mapping[str, float]) -> float:
    """
    Evaluate an expression at the given variable bindings.

    The expression is compiled with numpy and called with float64 values,
    so it follows IEEE arithmetic like ``lambdify``: a pole gives ``inf``
    and a result off the real line (``sqrt`` of a negative) gives ``nan``,
    each with a numpy ``RuntimeWarning``.

    Args:
        expr: Expression to evaluate
        bindings: Mapping of variable name to value

    Returns:
        The real value of the expression

    Raises:
        UnboundVariableError: If a free symbol has no binding
    """
    expr = as_expr(expr)
    missing = {s.name for s in expr.free_symbols} - set(bindings)
    if missing:
        raise UnboundVariableError(expr, missing)

    symbols = sorted(expr.free_symbols, key=lambda s: s.name)
    func = sympy.lambdify(symbols, expr, "numpy")
    value = np.asarray(func(*[np.float64(bindings[s.name]) for s in symbols]))

    if np.iscomplexobj(value):
        # Only real results are meaningful here
        return float(value.real) if value.imag == 0 else float("nan")
    return float(value)


def simplify(expr: ExprLike) -> sympy.Expr:
    """Expand then apply trigonometric simplification."""
    return sympy.trigsimp(sympy.expand(as_expr(expr)))


def lambdify(expr: ExprLike, var: Union[str, sympy.Symbol]) -> Callable:
    """
    Compile a single-variable expression into a numpy-aware function.

    Constant expressions are broadcast so the result always matches the
    shape of the input array.
    """
    expr = as_expr(expr)
    symbol = _resolve(var, expr)
    missing = {s.name for s in expr.free_symbols} - {symbol.name}
    if missing:
        raise UnboundVariableError(expr, missing)

    func = sympy.lambdify(symbol, expr, "numpy")

    def compiled(x):
        return np.asarray(func(x), dtype=np.float64) * np.ones_like(x, dtype=np.float64)

    return compiled


def to_latex(expr: ExprLike) -> str:
    """Render an expression in LaTeX notation."""
    return sympy.latex(as_expr(expr))


def is_zero(expr: ExprLike) -> bool:
    """True only when the expression is known to be exactly zero."""
    return as_expr(expr).is_zero is True
