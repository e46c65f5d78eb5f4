"""
Rotation transformations between reference frames (Ginsberg, section 3.1).

Each elementary matrix R transforms the components of a fixed vector from
the original XYZ frame to an xyz frame obtained by rotating about one
principal axis, right-handed, angle in radians:

    v_xyz = R @ v_XYZ        v_XYZ = R.T @ v_xyz

Successive rotations compose by matrix product, the last rotation on the
left.
"""

from functools import reduce

import numpy as np


def rotation_matrix_x(angle: float) -> np.ndarray:
    """Transformation for a rotation ``angle`` about the x axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [1.0, 0.0, 0.0],
        [0.0, c, s],
        [0.0, -s, c],
    ])


def rotation_matrix_y(angle: float) -> np.ndarray:
    """Transformation for a rotation ``angle`` about the y axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, 0.0, -s],
        [0.0, 1.0, 0.0],
        [s, 0.0, c],
    ])


def rotation_matrix_z(angle: float) -> np.ndarray:
    """Transformation for a rotation ``angle`` about the z axis."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([
        [c, s, 0.0],
        [-s, c, 0.0],
        [0.0, 0.0, 1.0],
    ])


def compose_rotations(*matrices: np.ndarray) -> np.ndarray:
    """
    Product of transformation matrices, left to right.

    ``compose_rotations(R1, R2)`` is ``R1 @ R2``: the rotation R2 is applied
    first, then R1.
    """
    if not matrices:
        return np.eye(3)
    return reduce(np.matmul, matrices)


def transform_point(rotation: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Components in the rotated frame of a point given in the original frame."""
    return rotation @ np.asarray(point, dtype=np.float64)


def inverse_transform_point(rotation: np.ndarray, point: np.ndarray) -> np.ndarray:
    """Components in the original frame of a point given in the rotated frame."""
    return rotation.T @ np.asarray(point, dtype=np.float64)
