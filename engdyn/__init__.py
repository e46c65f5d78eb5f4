"""
Engineering Dynamics cookbook (engdyn)

Formulas from an introductory engineering dynamics text (Ginsberg,
Engineering Dynamics) transcribed as small functions over numpy vectors
and sympy expressions, with the numeric routines they rely on and the
textbook worked examples that exercise them.

Usage:
    python -m engdyn list
    python -m engdyn example 2.3
    python -m engdyn root-find --integrand "sqrt(0.04+0.08*B^2)" --target 2.5 --upper 10 --margin 0.005
"""

__version__ = "0.1.0"
__author__ = "Engineering Dynamics Project"

from engdyn.models.inputs import SearchPolicy, SearchStrategy
from engdyn.models.outputs import WorkedExampleResult
from engdyn.numerics.root_finding import RootResult, root_find_parametric, solve_for_variable
from engdyn.numerics.differentiation import central_difference
from engdyn.physics.vector_expr import VectorExpr3D
from engdyn.symbolic import UnboundVariableError
from engdyn.worked_examples import list_examples, run_example

__all__ = [
    "SearchPolicy",
    "SearchStrategy",
    "WorkedExampleResult",
    "RootResult",
    "root_find_parametric",
    "solve_for_variable",
    "central_difference",
    "VectorExpr3D",
    "UnboundVariableError",
    "list_examples",
    "run_example",
]
