"""
Particle kinematics in path (intrinsic) coordinates.

Covers Ginsberg, sections 1.2 and 2.1:
- Position and velocity from spherical coordinates r, theta, beta
- Velocity and acceleration resolved along the tangent and normal
- Radius and centre of curvature, unit normal and binormal
- External force components in the intrinsic basis
- Intrinsic basis of a curve given parametrically

Numeric functions take numpy 3-vectors. Degenerate input (a straight
path with zero curvature, zero speed) is not guarded and yields inf/nan.

CONVENTIONS:
- z is vertical, gravity acts along -z with Earth's surface gravity
- Angles in radians
"""

import numpy as np
import sympy

from engdyn import symbolic
from engdyn.physics.units import EARTH_GRAVITY_MPS2
from engdyn.physics.vector_expr import VectorExpr3D
from engdyn.physics.vectors import cross, dot, magnitude


def position_vector_spherical(
    r: symbolic.ExprLike,
    theta: symbolic.ExprLike,
    beta: symbolic.ExprLike,
) -> VectorExpr3D:
    """
    Position vector from distance, azimuth and elevation (Example 1.2, eq. 1).

    Args:
        r: Distance r(t)
        theta: Angle in the horizontal xy plane, theta(t)
        beta: Angle of elevation, beta(t)

    Returns:
        Symbolic position vector
    """
    r, theta, beta = (symbolic.as_expr(e) for e in (r, theta, beta))
    return VectorExpr3D(
        r * sympy.cos(beta) * sympy.cos(theta),
        r * sympy.cos(beta) * sympy.sin(theta),
        r * sympy.sin(beta),
    )


def velocity_vector_spherical(
    r: symbolic.ExprLike,
    theta: symbolic.ExprLike,
    beta: symbolic.ExprLike,
    variable: str = "t",
) -> VectorExpr3D:
    """
    Analytic velocity for the spherical position vector (Example 1.2).

    Each of r, theta and beta is differentiated with respect to time and
    the three rate contributions are summed.
    """
    r, theta, beta = (symbolic.as_expr(e) for e in (r, theta, beta))
    r_dot = symbolic.differentiate(r, variable)
    theta_dot = symbolic.differentiate(theta, variable)
    beta_dot = symbolic.differentiate(beta, variable)

    cos_b, sin_b = sympy.cos(beta), sympy.sin(beta)
    cos_t, sin_t = sympy.cos(theta), sympy.sin(theta)

    radial = VectorExpr3D(r_dot * cos_b * cos_t, r_dot * cos_b * sin_t, r_dot * sin_b)
    azimuthal = VectorExpr3D(
        theta_dot * -(r * cos_b * sin_t),
        theta_dot * r * cos_b * cos_t,
        sympy.S.Zero,
    )
    elevation = VectorExpr3D(
        beta_dot * -(r * sin_b * cos_t),
        beta_dot * -(r * sin_b * sin_t),
        beta_dot * r * cos_b,
    )
    return radial + azimuthal + elevation


def odometer_speed(s: VectorExpr3D, variable: str = "t") -> VectorExpr3D:
    """
    Rate of travel along the path, s_dot (eq. 2.1.10).

    Args:
        s: Arc length measured along the path as a function of time

    Returns:
        Time derivative of ``s``, axis by axis
    """
    return s.differentiate(variable)


def velocity_vector(s_dot, e_t):
    """
    Velocity as speed along the tangent: v = s_dot * e_t (eq. 2.1.10).

    Works on numeric vectors or VectorExpr3D alike.
    """
    return s_dot * e_t


def acceleration_vector(v_dot, e_t, s_dot, rho: float, e_n):
    """
    Acceleration from its tangential and centripetal parts (eq. 2.1.10).

    a = v_dot * e_t + (s_dot^2 / rho) * e_n

    Args:
        v_dot: Tangential (linear) acceleration
        e_t: Tangent unit vector
        s_dot: Speed along the path
        rho: Radius of curvature
        e_n: Normal unit vector, toward the centre of curvature
    """
    return v_dot * e_t + (s_dot * s_dot) / rho * e_n


def radius_of_curvature(
    a: np.ndarray,
    v_dot: float,
    e_t: np.ndarray,
    s_dot: float,
) -> float:
    """
    Radius of curvature from the acceleration vector.

    The normal component of acceleration is a - v_dot * e_t, whose magnitude
    is s_dot^2 / rho.
    """
    normal_part = a - v_dot * e_t
    return (s_dot * s_dot) / magnitude(normal_part)


def unit_normal_vector(
    a: np.ndarray,
    v_dot: float,
    e_t: np.ndarray,
    s_dot: float,
    rho: float,
) -> np.ndarray:
    """Unit normal, pointing from the particle to the centre of curvature (p. 37)."""
    normal_part = a - v_dot * e_t
    return normal_part / (s_dot * s_dot / rho)


def center_of_curvature(r: np.ndarray, rho: float, e_n: np.ndarray) -> np.ndarray:
    """Centre of curvature: r + rho * e_n (eq. 2.1.9)."""
    return r + rho * e_n


def binormal_unit_vector(e_t: np.ndarray, e_n: np.ndarray) -> np.ndarray:
    """Binormal unit vector e_b = e_t x e_n, completing the right-handed basis."""
    return cross(e_t, e_n)


def _weight(m: float) -> np.ndarray:
    return np.array([0.0, 0.0, -m * EARTH_GRAVITY_MPS2])


def external_tangential_force(e_t: np.ndarray, m: float, v_dot: float) -> float:
    """
    Tangential component of the external forces other than gravity (pp. 37-38).

    From m * v_dot = F_t + W . e_t
    """
    return m * v_dot - dot(_weight(m), e_t)


def external_normal_force(e_n: np.ndarray, m: float, s_dot: float, rho: float) -> float:
    """
    Normal component of the external forces other than gravity (pp. 37-38).

    From m * s_dot^2 / rho = F_n + W . e_n
    """
    return m * s_dot * s_dot / rho - dot(_weight(m), e_n)


def external_binormal_force(e_b: np.ndarray, m: float) -> float:
    """
    Binormal component of the external forces other than gravity (pp. 37-38).

    There is no acceleration along e_b, so 0 = F_b + W . e_b
    """
    return -dot(_weight(m), e_b)


def speed_from_first_derivatives(
    x_prime: symbolic.ExprLike,
    y_prime: symbolic.ExprLike,
    z_prime: symbolic.ExprLike,
) -> sympy.Expr:
    """
    s' = |r'| from the first derivatives of the component functions (p. 41).

    Returns:
        sqrt(x'^2 + y'^2 + z'^2) as an expression in the curve parameter
    """
    x_prime, y_prime, z_prime = (symbolic.as_expr(e) for e in (x_prime, y_prime, z_prime))
    return sympy.sqrt(x_prime * x_prime + y_prime * y_prime + z_prime * z_prime)


def tangent_unit_vector(r_prime: np.ndarray, s_prime: float) -> np.ndarray:
    """Tangent unit vector of a parametric curve: e_t = r' / s' (p. 37)."""
    return r_prime / s_prime


def normal_unit_vector_parametric(
    r_prime: np.ndarray,
    r_double_prime: np.ndarray,
    s_prime: float,
) -> np.ndarray:
    """
    Normal unit vector of a parametric curve (p. 39).

    e_n = (s'^2 r'' - (r'.r'') r') / (s' sqrt(s'^2 (r''.r'') - (r'.r'')^2))
    """
    r1_r2 = dot(r_prime, r_double_prime)
    numerator = (s_prime * s_prime * r_double_prime) - (r1_r2 * r_prime)
    denominator = s_prime * np.sqrt(
        (s_prime * s_prime) * dot(r_double_prime, r_double_prime) - r1_r2**2
    )
    return numerator / denominator


def radius_of_curvature_parametric(
    r_prime: np.ndarray,
    r_double_prime: np.ndarray,
    s_prime: float,
) -> float:
    """
    Radius of curvature of a parametric curve (p. 39).

    rho = s'^3 / sqrt((r''.r'') s'^2 - (r'.r'')^2)
    """
    r1_r2 = dot(r_prime, r_double_prime)
    return s_prime**3 / np.sqrt(
        dot(r_double_prime, r_double_prime) * s_prime * s_prime - r1_r2**2
    )
