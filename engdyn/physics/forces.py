"""
Newton's second law and gravitation (Ginsberg, section 1.2).

Provides:
- Acceleration from the resultant of a set of forces, and the inverse
- Gravitational attraction between a planet and a particle
- Gravitational acceleration at a planet's surface

ASSUMPTIONS:
- Particles; no rotational effects
- Planets are treated as point masses at their centre (uniform spheres)
"""

from collections.abc import Iterable

import numpy as np

from engdyn.physics.units import Q_, G_UNIVERSAL, MASS_OF_EARTH
from engdyn.physics.vector_expr import VectorExpr3D


def solve_for_acceleration(
    forces: Iterable[VectorExpr3D],
    mass: float,
) -> VectorExpr3D:
    """
    Acceleration of a particle from all forces acting on it.

    Uses F = m * a with F the vector sum of ``forces``.

    Args:
        forces: Every force acting on the particle
        mass: Mass of the particle in kg

    Returns:
        Acceleration vector of the particle
    """
    resultant = VectorExpr3D.zero()
    for force in forces:
        resultant = resultant + force
    return resultant / mass


def solve_for_sum_of_forces(
    acceleration: VectorExpr3D,
    mass: float,
) -> VectorExpr3D:
    """
    Resultant force required for a given acceleration (F = m * a).

    Args:
        acceleration: Acceleration vector of the particle
        mass: Mass of the particle in kg

    Returns:
        The resultant force acting on the particle
    """
    return acceleration * mass


def gravitational_force_magnitude(
    r_m: float,
    mass_kg: float,
    planet_mass_kg: float = MASS_OF_EARTH.magnitude,
) -> float:
    """
    Magnitude of the attraction between a planet and a particle (eq. 1.2.4).

    Uses F = G * M * m / r^2.

    Args:
        r_m: Distance between the centres of mass in meters
        mass_kg: Mass of the particle
        planet_mass_kg: Mass of the attracting body (Earth by default)

    Returns:
        Force in Newtons. Coincident centres (r = 0) give ``inf``.

    Raises:
        ValueError: If the distance is negative
    """
    if r_m < 0:
        raise ValueError("Distance between centres cannot be negative")

    # float64 magnitudes so r = 0 divides to inf instead of raising
    r = Q_(np.float64(r_m), "m")
    force = G_UNIVERSAL * Q_(planet_mass_kg, "kg") * Q_(mass_kg, "kg") / r**2

    return float(force.to("N").magnitude)


def gravitational_acceleration_magnitude(
    planet_mass_kg: float,
    planet_radius_m: float,
) -> float:
    """
    Gravitational acceleration at the surface of a planet (eq. 1.2.6).

    Uses g = G * M / R^2. For the Earth this gives ~9.8 m/s^2.

    Args:
        planet_mass_kg: Mass of the planet
        planet_radius_m: Radius of the planet

    Returns:
        Acceleration in m/s^2. A zero radius gives ``inf``.

    Raises:
        ValueError: If the radius is negative
    """
    if planet_radius_m < 0:
        raise ValueError("Planet radius cannot be negative")

    radius = Q_(np.float64(planet_radius_m), "m")
    g = G_UNIVERSAL * Q_(planet_mass_kg, "kg") / radius**2

    return float(g.to("m/s**2").magnitude)
