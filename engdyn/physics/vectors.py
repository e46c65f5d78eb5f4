"""
Numeric vector formulas (Ginsberg, section 1.1).

Vectors are numpy float64 arrays of shape (2,) or (3,). Degenerate inputs
such as the zero vector are not guarded: numpy returns nan/inf and emits a
RuntimeWarning, following IEEE division semantics.
"""

import numpy as np

from engdyn.physics import latex
from engdyn.physics.vector_expr import VectorExpr3D


def vector(x: float, y: float, z: float | None = None) -> np.ndarray:
    """Build a 2D or 3D numeric vector."""
    if z is None:
        return np.array([x, y], dtype=np.float64)
    return np.array([x, y, z], dtype=np.float64)


def magnitude(v: np.ndarray) -> np.float64:
    """
    Magnitude of a vector by the Pythagorean theorem (eq. 1.1.6).

    Returns a numpy scalar so that dividing by a zero magnitude yields
    inf/nan rather than raising.
    """
    v = np.asarray(v, dtype=np.float64)
    return np.sqrt(np.dot(v, v))


def unit_vector(v: np.ndarray) -> np.ndarray:
    """Unit vector parallel to ``v``: v / |v| (eq. 1.1.7)."""
    v = np.asarray(v, dtype=np.float64)
    return v / magnitude(v)


def dot(a: np.ndarray, b: np.ndarray) -> np.float64:
    """Scalar (dot) product."""
    return np.dot(np.asarray(a, dtype=np.float64), np.asarray(b, dtype=np.float64))


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Vector (cross) product of two 3D vectors.

    Raises:
        ValueError: If either operand is not a 3-vector
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    if a.shape != (3,) or b.shape != (3,):
        raise ValueError("Cross product is defined for 3D vectors only")
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ], dtype=np.float64)


def angle_between(a: np.ndarray, b: np.ndarray) -> float:
    """
    Angle between two vectors placed tail to tail (eq. 1.1.9).

    Returns:
        Angle in radians, in [0, pi]

    Notes:
        The cosine is clipped to [-1, 1] so rounding on (anti)parallel
        vectors cannot push arccos out of its domain. A zero vector still
        produces nan.
    """
    cos_angle = dot(a, b) / (magnitude(a) * magnitude(b))
    return float(np.arccos(np.clip(cos_angle, -1.0, 1.0)))


def component_representation(v: np.ndarray) -> str:
    """
    LaTeX component representation of a 2D or 3D vector (eq. 1.1.5).

    Zero components are omitted, e.g. (1, 0, 3) -> ``1\\hat{\\textbf{i}}+3\\hat{\\textbf{k}}``.
    """
    v = np.asarray(v, dtype=np.float64)
    if v.shape not in ((2,), (3,)):
        raise ValueError(f"Expected a 2D or 3D vector, got shape {v.shape}")
    return latex.join_components(
        latex.format_number(c) if c != 0 else None for c in v
    )


def to_column(v: np.ndarray) -> np.ndarray:
    """3x1 column matrix of a 3D vector."""
    return np.asarray(v, dtype=np.float64).reshape(3, 1)


def from_column(m: np.ndarray) -> np.ndarray:
    """3D vector from a 3x1 column matrix."""
    m = np.asarray(m, dtype=np.float64)
    return np.array([m[0, 0], m[1, 0], m[2, 0]], dtype=np.float64)


def to_expr(v: np.ndarray) -> VectorExpr3D:
    """Symbolic counterpart of a numeric 3D vector."""
    return VectorExpr3D.from_vector(v)
