"""
Unit registry and textbook constants.

Uses pint so the constants carry their units; the plain float magnitudes
(SI) are what the formula functions consume.

Constants follow Ginsberg, Engineering Dynamics (p. 16).
"""

import math

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Universal gravitational constant
G_UNIVERSAL = Q_(6.67408e-11, "m**3 / (kg * s**2)")

MASS_OF_EARTH = Q_(5.9722e24, "kg")

# Equatorial radius
RADIUS_OF_EARTH = Q_(6378137, "m")

# g = G * M / R^2 at the Earth's surface (~9.8 m/s^2)
GRAVITATIONAL_ACCELERATION_ON_EARTH = (
    G_UNIVERSAL * MASS_OF_EARTH / RADIUS_OF_EARTH**2
).to("m/s**2")

# SI magnitudes
EARTH_MASS_KG = MASS_OF_EARTH.magnitude
EARTH_RADIUS_M = RADIUS_OF_EARTH.magnitude
EARTH_GRAVITY_MPS2 = GRAVITATIONAL_ACCELERATION_ON_EARTH.magnitude


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def deg_to_rad(angle_deg: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle_deg * math.pi / 180


def rad_to_deg(angle_rad: float) -> float:
    """Convert an angle in radians to degrees."""
    return angle_rad * 180 / math.pi
