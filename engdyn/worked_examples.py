"""
Worked examples from Ginsberg, Engineering Dynamics.

Each example composes the formula catalog the way the text solves the
problem and returns the named intermediate results as a
WorkedExampleResult. The regression tests check these against the values
in the text.

Usage:
    from engdyn.worked_examples import run_example
    result = run_example("2.3")
    print(result.values["rho"])
"""

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from engdyn import symbolic
from engdyn.models.inputs import SearchPolicy
from engdyn.models.outputs import WorkedExampleResult
from engdyn.numerics.root_finding import root_find_parametric, solve_for_variable
from engdyn.physics import forces, particle_kinematics as pk, relative_motion
from engdyn.physics.units import (
    EARTH_GRAVITY_MPS2,
    MASS_OF_EARTH,
    RADIUS_OF_EARTH,
    deg_to_rad,
)
from engdyn.physics.vector_expr import VectorExpr3D
from engdyn.physics.vectors import cross, dot, unit_vector, vector


def _vec(v: np.ndarray) -> list[float]:
    return [float(c) for c in v]


def _mat(m: np.ndarray) -> list[list[float]]:
    return [[float(c) for c in row] for row in m]


def example_1_1() -> WorkedExampleResult:
    """Force along a cable and its moment about a support."""
    theta = deg_to_rad(25)
    gamma = deg_to_rad(40)

    r_ba = 2 * vector(np.cos(theta), np.sin(theta), 0)
    r_cb = vector(
        1.5 * np.cos(gamma) * np.cos(theta),
        1.5 * np.cos(gamma) * np.sin(theta),
        1.5 * np.sin(gamma),
    )
    r_ca = r_ba + r_cb
    r_dc = vector(3.5, 0, 0) - r_ca
    e_dc = unit_vector(r_dc)
    force = 5000 * e_dc

    # Component of the force along bar BC
    f_bc = dot(force, unit_vector(r_cb))
    m_a = cross(r_ca, force)
    m_ab = dot(m_a, unit_vector(r_ba))

    return WorkedExampleResult(
        key="1.1",
        title="Cable force and its moment about point A",
        reference="Ginsberg, Engineering Dynamics, p. 7",
        values={
            "r_ba": _vec(r_ba),
            "r_cb": _vec(r_cb),
            "r_ca": _vec(r_ca),
            "e_dc": _vec(e_dc),
            "F": _vec(force),
            "F_BC": float(f_bc),
            "M_A": _vec(m_a),
            "M_AB": float(m_ab),
        },
    )


def example_1_1_23() -> WorkedExampleResult:
    """Unit vector perpendicular to two given vectors."""
    a = vector(1, 2, 3)
    b = vector(3, -1, -5)
    c = cross(a, b)
    e = unit_vector(c)

    return WorkedExampleResult(
        key="1.1.23",
        title="Unit vector normal to two vectors via the cross product",
        reference="Ginsberg, Engineering Dynamics, eq. 1.1.23, p. 7",
        values={
            "C": _vec(c),
            "e": _vec(e),
            "A_dot_e": float(dot(a, e)),
            "B_dot_e": float(dot(b, e)),
        },
    )


def example_1_2() -> WorkedExampleResult:
    """Velocity of a tracked object from spherical coordinates."""
    r = symbolic.parse("2000 + 100 * t")
    theta = symbolic.parse("3.14159265/2 * (1 - 2.71828^(-0.15 * t))")
    beta = symbolic.parse("3.14159265/3 - 0.1*t^(0.5)")

    position = pk.position_vector_spherical(r, theta, beta)
    approx = position.finite_central_difference(2, 1e-3)
    analytic = pk.velocity_vector_spherical(r, theta, beta).at_time(2)

    return WorkedExampleResult(
        key="1.2",
        title="Velocity from spherical coordinates at t = 2 s",
        reference="Ginsberg, Engineering Dynamics, pp. 11-12",
        values={
            "r_at_2": _vec(position.at_time(2)),
            "v_central_difference": _vec(approx),
            "v_analytic": _vec(analytic),
        },
        notes=["Central difference uses dt = 1e-3 s"],
    )


def example_1_2_6() -> WorkedExampleResult:
    """Gravitational acceleration at the Earth's surface."""
    g = forces.gravitational_acceleration_magnitude(
        MASS_OF_EARTH.magnitude, RADIUS_OF_EARTH.magnitude
    )

    return WorkedExampleResult(
        key="1.2.6",
        title="Gravitational acceleration on Earth",
        reference="Ginsberg, Engineering Dynamics, eq. 1.2.6, p. 16",
        values={"g": g, "g_rounded": round(g, 1)},
    )


def example_2_1() -> WorkedExampleResult:
    """Intrinsic components for a body accelerating at 10 g toward O."""
    r_ao = 4 * vector(
        np.cos(deg_to_rad(60)) * np.cos(deg_to_rad(75)),
        np.cos(deg_to_rad(60)) * np.sin(deg_to_rad(75)),
        np.sin(deg_to_rad(60)),
    )
    r_bo = vector(4, 0, 0)
    e_ao = unit_vector(r_ao)
    e_ba = unit_vector(r_bo - r_ao)
    e_oa = -e_ao

    speed = 500
    mass = 5

    a_bar = 10 * EARTH_GRAVITY_MPS2 * e_oa
    v_dot = dot(a_bar, e_ba)

    rho = pk.radius_of_curvature(a_bar, v_dot, e_ba, speed)
    e_n = pk.unit_normal_vector(a_bar, v_dot, e_ba, speed, rho)
    center = pk.center_of_curvature(r_ao, rho, e_n)
    e_b = pk.binormal_unit_vector(e_ba, e_n)

    return WorkedExampleResult(
        key="2.1",
        title="Path variables of a particle moving from A toward B",
        reference="Ginsberg, Engineering Dynamics, pp. 35-36",
        values={
            "a_bar": _vec(a_bar),
            "v_dot": float(v_dot),
            "rho": float(rho),
            "e_n": _vec(e_n),
            "center_of_curvature": _vec(center),
            "e_b": _vec(e_b),
            "F_t": float(pk.external_tangential_force(e_ba, mass, v_dot)),
            "F_n": float(pk.external_normal_force(e_n, mass, speed, rho)),
            "F_b": float(pk.external_binormal_force(e_b, mass)),
        },
    )


def example_2_3() -> WorkedExampleResult:
    """Path variables on a conical helix given parametrically."""
    x = symbolic.parse("0.2*B*cos(B)")
    y = symbolic.parse("0.2*B*sin(B)")
    z = symbolic.parse("0.1*B^2")
    curve = VectorExpr3D(x, y, z)
    r_prime = curve.differentiate("B")
    r_double_prime = r_prime.differentiate("B")

    s = symbolic.parse("10*t^2")
    t = 0.5
    s_at_t = symbolic.evaluate(s, {"t": t})

    s_prime = symbolic.simplify(
        pk.speed_from_first_derivatives(r_prime.x, r_prime.y, r_prime.z)
    )

    policy = SearchPolicy(lower_bound=0, upper_bound=10, step=0.01, margin=0.005)
    result = root_find_parametric(s_at_t, s_prime, policy, variable="B")
    if not result.converged:
        raise ValueError("Arc length target not reached within the search range")
    beta = result.root

    r1 = r_prime.evaluate({"B": beta})
    r2 = r_double_prime.evaluate({"B": beta})
    s1 = symbolic.evaluate(s_prime, {"B": beta})

    e_t = pk.tangent_unit_vector(r1, s1)
    e_n = pk.normal_unit_vector_parametric(r1, r2, s1)
    rho = pk.radius_of_curvature_parametric(r1, r2, s1)

    v = symbolic.differentiate(s, "t")
    v_at_t = symbolic.evaluate(v, {"t": t})
    v_dot_at_t = symbolic.evaluate(symbolic.differentiate(v, "t"), {"t": t})

    v_bar = pk.velocity_vector(v_at_t, e_t)
    a_bar = pk.acceleration_vector(v_dot_at_t, e_t, v_at_t, rho, e_n)

    return WorkedExampleResult(
        key="2.3",
        title="Velocity and acceleration on a helical path at t = 0.5 s",
        reference="Ginsberg, Engineering Dynamics, pp. 41-42",
        values={
            "s_prime": str(s_prime),
            "s": s_at_t,
            "beta": beta,
            "r_prime": _vec(r1),
            "r_double_prime": _vec(r2),
            "s_prime_at_beta": s1,
            "e_t": _vec(e_t),
            "e_n": _vec(e_n),
            "rho": float(rho),
            "v_bar": _vec(v_bar),
            "a_bar": _vec(a_bar),
        },
        notes=[
            f"beta found by forward sweep, resolution {policy.step}",
        ],
    )


def example_2_4() -> WorkedExampleResult:
    """Charged particle in a restoring field; time to reach y = 0.4 m."""
    mass = 10 * 1e-6
    resultant_force = VectorExpr3D(
        0,
        symbolic.parse("(1.6-4*y)*10^(-3)"),
        10 * EARTH_GRAVITY_MPS2 * 1e-6,
    )
    a_bar = forces.solve_for_acceleration([resultant_force], mass).simplify()

    # Closed-form integration of a_bar with the initial conditions
    x = symbolic.parse("13.289260487773495*t")
    y = symbolic.parse("-0.4*cos(20*t)-.241*sin(20*t)+0.4")
    z = symbolic.parse("-4.9035*t^2+14.1421*t")
    trajectory = VectorExpr3D(x, y, z)

    policy = SearchPolicy(lower_bound=0, upper_bound=10, step=0.001, margin=0.01)
    result = solve_for_variable(y, "t", 0.4, policy)
    if not result.converged:
        raise ValueError("y = 0.4 m not reached within the search range")
    t_f = result.root

    v_0 = vector(
        20 * np.cos(deg_to_rad(45)) * np.cos(deg_to_rad(20)),
        -20 * np.cos(deg_to_rad(45)) * np.sin(deg_to_rad(20)),
        20 * np.sin(deg_to_rad(45)),
    )

    return WorkedExampleResult(
        key="2.4",
        title="Time for a charged particle to cross y = 0.4 m",
        reference="Ginsberg, Engineering Dynamics, p. 47",
        values={
            "a_bar": [str(c) for c in a_bar],
            "v_0": _vec(v_0),
            "t_f": t_f,
            "r_at_t_f": _vec(trajectory.at_time(t_f)),
            "v_at_t_f": _vec(trajectory.differentiate("t").at_time(t_f)),
        },
        notes=[f"t_f found by forward sweep, resolution {policy.step}"],
    )


def example_3_3() -> WorkedExampleResult:
    """Transformation between frames for two successive rotations."""
    r1 = relative_motion.rotation_matrix_y(deg_to_rad(65))
    r2 = relative_motion.rotation_matrix_z(deg_to_rad(-145))
    rotation = relative_motion.compose_rotations(r1, r2)

    point = vector(2, -4, 3)

    return WorkedExampleResult(
        key="3.3",
        title="Rotation about y by 65 deg following rotation about z by -145 deg",
        reference="Ginsberg, Engineering Dynamics, p. 105",
        values={
            "R": _mat(rotation),
            "point_in_xyz": _vec(relative_motion.transform_point(rotation, point)),
            "point_in_XYZ": _vec(relative_motion.inverse_transform_point(rotation, point)),
        },
    )


@dataclass
class WorkedExample:
    """Registry entry for a worked example."""
    key: str
    summary: str
    run: Callable[[], WorkedExampleResult]


EXAMPLES: dict[str, WorkedExample] = {
    e.key: e
    for e in (
        WorkedExample("1.1", "Cable force and moment (vector algebra)", example_1_1),
        WorkedExample("1.1.23", "Cross product orthogonality", example_1_1_23),
        WorkedExample("1.2", "Velocity by central difference", example_1_2),
        WorkedExample("1.2.6", "Surface gravity of the Earth", example_1_2_6),
        WorkedExample("2.1", "Path variables from acceleration", example_2_1),
        WorkedExample("2.3", "Helical path, arc-length root finding", example_2_3),
        WorkedExample("2.4", "Charged particle, parameter search", example_2_4),
        WorkedExample("3.3", "Successive rotation transformations", example_3_3),
    )
}


def list_examples() -> list[WorkedExample]:
    """All registered examples in text order."""
    return list(EXAMPLES.values())


def run_example(key: str) -> WorkedExampleResult:
    """
    Run a worked example by key.

    Raises:
        KeyError: If no example is registered under ``key``
    """
    if key not in EXAMPLES:
        raise KeyError(f"Unknown example '{key}'. Available: {', '.join(EXAMPLES)}")
    return EXAMPLES[key].run()
