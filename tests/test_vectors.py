"""
Tests for numeric vector formulas.
"""

import math

import numpy as np
import pytest

from engdyn.physics.vectors import (
    angle_between,
    component_representation,
    cross,
    dot,
    from_column,
    magnitude,
    to_column,
    to_expr,
    unit_vector,
    vector,
)


class TestMagnitudeAndUnitVector:
    """Tests for magnitude and unit_vector."""

    def test_magnitude_3_4_5(self):
        """Test the Pythagorean magnitude."""
        assert magnitude(vector(3, 4, 0)) == pytest.approx(5.0)

    def test_magnitude_2d(self):
        """Test that 2D vectors are supported."""
        assert magnitude(vector(3, 4)) == pytest.approx(5.0)

    def test_unit_vector_has_unit_length(self):
        """Test that unit vectors have magnitude 1."""
        e = unit_vector(vector(1, 2, 3))
        assert magnitude(e) == pytest.approx(1.0)

    def test_unit_vector_direction(self):
        """Test that the unit vector is parallel to the input."""
        np.testing.assert_allclose(unit_vector(vector(0, 0, 2)), [0.0, 0.0, 1.0])

    def test_unit_vector_is_exact_quotient(self):
        """Test that the unit vector is exactly v divided by its magnitude."""
        v = vector(1.3, -2.7, 0.45)
        np.testing.assert_array_equal(unit_vector(v), v / magnitude(v))

    def test_repeat_call_is_identical(self):
        """Test that the same input always gives the same unit vector."""
        v = vector(0.1, 0.2, 0.3)
        np.testing.assert_array_equal(unit_vector(v), unit_vector(v))

    def test_zero_vector_gives_nan(self):
        """Test that the zero vector is not guarded and yields nan."""
        with pytest.warns(RuntimeWarning):
            e = unit_vector(vector(0, 0, 0))
        assert np.all(np.isnan(e))


class TestProducts:
    """Tests for dot and cross products."""

    def test_dot_product(self):
        """Test the scalar product."""
        assert dot(vector(1, 2, 3), vector(4, -5, 6)) == pytest.approx(12.0)

    def test_cross_product(self):
        """Test the cross product of (1, 2, 3) and (3, -1, -5)."""
        c = cross(vector(1, 2, 3), vector(3, -1, -5))
        np.testing.assert_allclose(c, [-7.0, 14.0, -7.0])

    def test_cross_product_is_orthogonal(self):
        """Test that A x B is perpendicular to both operands."""
        a = vector(1, 2, 3)
        b = vector(3, -1, -5)
        e = unit_vector(cross(a, b))

        assert dot(a, e) == pytest.approx(0.0, abs=1e-12)
        assert dot(b, e) == pytest.approx(0.0, abs=1e-12)

    def test_cross_product_right_handed(self):
        """Test that i x j = k."""
        np.testing.assert_allclose(cross(vector(1, 0, 0), vector(0, 1, 0)), [0, 0, 1])

    def test_cross_product_requires_3d(self):
        """Test that 2D operands are rejected."""
        with pytest.raises(ValueError):
            cross(vector(1, 2), vector(3, 4))


class TestAngleBetween:
    """Tests for angle_between."""

    def test_perpendicular(self):
        """Test perpendicular vectors."""
        assert angle_between(vector(1, 0, 0), vector(0, 2, 0)) == pytest.approx(math.pi / 2)

    def test_parallel(self):
        """Test that rounding on parallel vectors cannot produce nan."""
        a = vector(0.1, 0.2, 0.3)
        assert angle_between(a, 3 * a) == pytest.approx(0.0, abs=1e-7)

    def test_antiparallel(self):
        """Test opposite vectors."""
        a = vector(0.1, 0.2, 0.3)
        assert angle_between(a, -a) == pytest.approx(math.pi)

    def test_2d(self):
        """Test a 45 degree angle in the plane."""
        assert angle_between(vector(1, 0), vector(1, 1)) == pytest.approx(math.pi / 4)


class TestRepresentation:
    """Tests for component representation and matrix conversion."""

    def test_zero_components_omitted(self):
        """Test that zero axes are left out."""
        text = component_representation(vector(1, 0, 3))
        assert text == r"1\hat{\textbf{i}}+3\hat{\textbf{k}}"

    def test_fractional_components(self):
        """Test that non-integral values keep their decimals."""
        text = component_representation(vector(0.5, 2))
        assert text == r"0.5\hat{\textbf{i}}+2\hat{\textbf{j}}"

    def test_rejects_4d(self):
        """Test that only 2D and 3D vectors are supported."""
        with pytest.raises(ValueError):
            component_representation(np.ones(4))

    def test_column_round_trip(self):
        """Test conversion to and from a 3x1 column."""
        v = vector(1, -2, 3)
        column = to_column(v)

        assert column.shape == (3, 1)
        np.testing.assert_array_equal(from_column(column), v)

    def test_to_expr(self):
        """Test the symbolic counterpart has constant components."""
        e = to_expr(vector(1, 2, 3))
        np.testing.assert_allclose(e.evaluate({}), [1.0, 2.0, 3.0])
