"""
Formula catalog from introductory engineering dynamics.

This module provides closed-form calculations for:
- Vector algebra (magnitude, unit vector, dot/cross product, angle between)
- Symbolic vectors for expressions in time or a path parameter
- Newton's second law and gravitation
- Particle kinematics in path coordinates
- Rotation transformations between frames

Each function is a direct transcription of one textbook equation
(Ginsberg, Engineering Dynamics).
"""

from engdyn.physics.units import (
    ureg,
    Q_,
    G_UNIVERSAL,
    MASS_OF_EARTH,
    RADIUS_OF_EARTH,
    GRAVITATIONAL_ACCELERATION_ON_EARTH,
    EARTH_GRAVITY_MPS2,
    deg_to_rad,
    rad_to_deg,
)
from engdyn.physics.vector_expr import VectorExpr3D
from engdyn.physics.vectors import (
    vector,
    magnitude,
    unit_vector,
    dot,
    cross,
    angle_between,
    component_representation,
    to_column,
    from_column,
    to_expr,
)
from engdyn.physics.forces import (
    solve_for_acceleration,
    solve_for_sum_of_forces,
    gravitational_force_magnitude,
    gravitational_acceleration_magnitude,
)
from engdyn.physics.particle_kinematics import (
    position_vector_spherical,
    velocity_vector_spherical,
    odometer_speed,
    velocity_vector,
    acceleration_vector,
    radius_of_curvature,
    unit_normal_vector,
    center_of_curvature,
    binormal_unit_vector,
    external_tangential_force,
    external_normal_force,
    external_binormal_force,
    speed_from_first_derivatives,
    tangent_unit_vector,
    normal_unit_vector_parametric,
    radius_of_curvature_parametric,
)
from engdyn.physics.relative_motion import (
    rotation_matrix_x,
    rotation_matrix_y,
    rotation_matrix_z,
    compose_rotations,
    transform_point,
    inverse_transform_point,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "G_UNIVERSAL",
    "MASS_OF_EARTH",
    "RADIUS_OF_EARTH",
    "GRAVITATIONAL_ACCELERATION_ON_EARTH",
    "EARTH_GRAVITY_MPS2",
    "deg_to_rad",
    "rad_to_deg",
    # Vectors
    "VectorExpr3D",
    "vector",
    "magnitude",
    "unit_vector",
    "dot",
    "cross",
    "angle_between",
    "component_representation",
    "to_column",
    "from_column",
    "to_expr",
    # Forces
    "solve_for_acceleration",
    "solve_for_sum_of_forces",
    "gravitational_force_magnitude",
    "gravitational_acceleration_magnitude",
    # Particle kinematics
    "position_vector_spherical",
    "velocity_vector_spherical",
    "odometer_speed",
    "velocity_vector",
    "acceleration_vector",
    "radius_of_curvature",
    "unit_normal_vector",
    "center_of_curvature",
    "binormal_unit_vector",
    "external_tangential_force",
    "external_normal_force",
    "external_binormal_force",
    "speed_from_first_derivatives",
    "tangent_unit_vector",
    "normal_unit_vector_parametric",
    "radius_of_curvature_parametric",
    # Relative motion
    "rotation_matrix_x",
    "rotation_matrix_y",
    "rotation_matrix_z",
    "compose_rotations",
    "transform_point",
    "inverse_transform_point",
]
