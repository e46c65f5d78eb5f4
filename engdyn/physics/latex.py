"""
Display-notation helpers.

Produces LaTeX strings for vectors, magnitudes and unit vectors, and the
component representation of a vector (Ginsberg eq. 1.1.5).
"""

from collections.abc import Iterable

from engdyn import symbolic

I_HAT = r"\hat{\textbf{i}}"
J_HAT = r"\hat{\textbf{j}}"
K_HAT = r"\hat{\textbf{k}}"
UNIT_HAT = r"\hat{\textbf{e}}"

AXIS_HATS = (I_HAT, J_HAT, K_HAT)

# Unit suffixes
DEGREE = r"^{\circ}"
NEWTON = r"\text{ N}"
SECOND = r"\text{ s}"
METER = r"\text{ m}"
KILOGRAM = r"\text{ kg}"


def vectorize(variable: symbolic.ExprLike) -> str:
    """Vector notation for a variable, e.g. ``\\vec{x}``."""
    return r"\vec{" + symbolic.to_latex(variable) + "}"


def magnitude(variable: symbolic.ExprLike) -> str:
    """Magnitude notation for a variable, e.g. ``\\abs{x}``."""
    return r"\abs{" + symbolic.to_latex(variable) + "}"


def unit_vector(variable: symbolic.ExprLike) -> str:
    """Unit vector notation for a variable, e.g. ``\\hat{\\textbf{e}}_{x}``."""
    return UNIT_HAT + "_{" + symbolic.to_latex(variable) + "}"


def format_number(value: float) -> str:
    """Shortest round-trip form of a float; integral values drop the ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def join_components(parts: Iterable[str | None]) -> str:
    """
    Join per-axis component strings into a component representation.

    Each entry is the already-formatted coefficient for that axis, or None
    when the axis component is zero. Zero axes are omitted and the remaining
    terms are separated by ``+``.
    """
    terms = [
        part + hat
        for part, hat in zip(parts, AXIS_HATS)
        if part is not None
    ]
    return "+".join(terms)
