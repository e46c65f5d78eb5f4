"""
Tests for symbolic 3D vectors.
"""

import numpy as np
import pytest
import sympy

from engdyn.physics.vector_expr import VectorExpr3D
from engdyn.physics.vectors import cross, vector
from engdyn.symbolic import UnboundVariableError


class TestConstruction:
    """Tests for building symbolic vectors."""

    def test_parse(self):
        """Test parsing three component strings."""
        r = VectorExpr3D.parse("t^2", "2*t", "1")
        np.testing.assert_allclose(r.at_time(3.0), [9.0, 6.0, 1.0])

    def test_numbers_are_coerced(self):
        """Test that numeric components become sympy expressions."""
        r = VectorExpr3D(1, 2.5, np.float64(3))
        assert all(isinstance(c, sympy.Expr) for c in r)

    def test_zero(self):
        """Test the zero vector."""
        assert VectorExpr3D.zero() == VectorExpr3D()

    def test_from_vector_rejects_2d(self):
        """Test that only 3-vectors convert."""
        with pytest.raises(ValueError):
            VectorExpr3D.from_vector(vector(1, 2))

    def test_free_symbols(self):
        """Test collecting symbols across axes."""
        r = VectorExpr3D.parse("a*t", "b", "0")
        assert {s.name for s in r.free_symbols} == {"a", "b", "t"}


class TestArithmetic:
    """Tests for component-wise arithmetic."""

    def test_add_vectors(self):
        """Test adding two symbolic vectors."""
        r = VectorExpr3D.parse("t", "0", "1") + VectorExpr3D.parse("t", "2", "0")
        np.testing.assert_allclose(r.at_time(1.0), [2.0, 2.0, 1.0])

    def test_add_numeric_vector_either_side(self):
        """Test that numpy arrays combine from the left and the right."""
        r = VectorExpr3D.parse("t", "t", "t")
        v = vector(1, 2, 3)

        np.testing.assert_allclose((r + v).at_time(0.0), [1.0, 2.0, 3.0])
        np.testing.assert_allclose((v + r).at_time(0.0), [1.0, 2.0, 3.0])
        np.testing.assert_allclose((v - r).at_time(1.0), [0.0, 1.0, 2.0])

    def test_scale_and_divide(self):
        """Test multiplication and division by a scalar."""
        r = VectorExpr3D.parse("t", "2*t", "4")

        np.testing.assert_allclose((3 * r).at_time(1.0), [3.0, 6.0, 12.0])
        np.testing.assert_allclose((r / 2).at_time(1.0), [0.5, 1.0, 2.0])

    def test_multiply_by_expression(self):
        """Test multiplication by a symbolic scalar."""
        r = VectorExpr3D.parse("1", "2", "3") * sympy.Symbol("t")
        np.testing.assert_allclose(r.at_time(2.0), [2.0, 4.0, 6.0])

    def test_negation(self):
        """Test unary minus."""
        r = -VectorExpr3D.parse("1", "-2", "t")
        np.testing.assert_allclose(r.at_time(3.0), [-1.0, 2.0, -3.0])

    def test_unsupported_operand(self):
        """Test that unrelated types are rejected."""
        with pytest.raises(TypeError):
            VectorExpr3D.zero() + "abc"

    def test_cross_matches_numeric(self):
        """Test the symbolic cross product against the numeric one."""
        a = VectorExpr3D.parse("t", "2", "3")
        b = VectorExpr3D.parse("3", "-1", "-5")

        np.testing.assert_allclose(
            a.cross(b).at_time(1.0),
            cross(vector(1, 2, 3), vector(3, -1, -5)),
        )


class TestCalculus:
    """Tests for differentiation and evaluation."""

    def test_differentiate(self):
        """Test axis-by-axis differentiation."""
        r = VectorExpr3D.parse("t^2", "sin(t)", "5")
        np.testing.assert_allclose(r.differentiate().at_time(0.0), [0.0, 1.0, 0.0])

    def test_differentiate_other_variable(self, helix):
        """Test differentiation with respect to the curve parameter."""
        r_prime = helix.differentiate("B")
        np.testing.assert_allclose(r_prime.evaluate({"B": 0.0}), [0.2, 0.0, 0.0])

    def test_evaluate_unbound_raises(self):
        """Test that evaluating with an unbound symbol fails."""
        with pytest.raises(UnboundVariableError):
            VectorExpr3D.parse("a*t", "0", "0").at_time(1.0)

    def test_component_vanishing_at_time_is_exact(self):
        """Test that a component cancelling at the evaluation time is exactly zero."""
        r = VectorExpr3D.parse("t - 2.5", "0", "0")
        assert r.at_time(2.5)[0] == 0.0

    def test_repeat_evaluation_is_identical(self, helix):
        """Test that sampling twice at the same parameter gives the same array."""
        np.testing.assert_array_equal(
            helix.evaluate({"B": 4.03}), helix.evaluate({"B": 4.03})
        )

    def test_singular_component_gives_inf(self):
        """Test that a component with a pole at the evaluation time is inf."""
        with pytest.warns(RuntimeWarning):
            value = VectorExpr3D.parse("1/t", "0", "t").at_time(0.0)

        assert np.isinf(value[0])
        np.testing.assert_array_equal(value[1:], [0.0, 0.0])

    def test_finite_difference_matches_derivative(self):
        """Test the central difference against the exact derivative."""
        r = VectorExpr3D.parse("t^3", "exp(t)", "cos(t)")

        approx = r.finite_central_difference(1.0, 1e-4)
        exact = r.differentiate().at_time(1.0)

        np.testing.assert_allclose(approx, exact, rtol=1e-6)

    def test_simplify(self):
        """Test simplification of each axis."""
        r = VectorExpr3D.parse("sin(t)^2 + cos(t)^2", "0", "0").simplify()
        assert r.x == 1


class TestDisplay:
    """Tests for the component representation."""

    def test_zero_axes_omitted(self):
        """Test that zero axes are left out of the representation."""
        r = VectorExpr3D.parse("t^2", "0", "3")
        assert r.component_representation() == r"t^{2}\hat{\textbf{i}}+3\hat{\textbf{k}}"
