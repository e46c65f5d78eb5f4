"""
Tests for the parameter searches.

Covers the quadrature oracle, the forward sweep, bisection and the
expression search.
"""

import pytest

from engdyn.models.inputs import SearchPolicy, SearchStrategy
from engdyn.numerics.root_finding import (
    gauss_legendre,
    root_find_parametric,
    search,
    solve_for_variable,
)
from engdyn.symbolic import UnboundVariableError


class TestGaussLegendre:
    """Tests for the 5-point quadrature oracle."""

    def test_exact_for_cubic(self):
        """Test that a cubic integrates exactly."""
        # Integral of x^3 from 0 to 2 = 4
        value = gauss_legendre(lambda x: x**3, 0.0, 2.0)
        assert value == pytest.approx(4.0, rel=1e-12)

    def test_exact_for_degree_nine(self):
        """Test that 5 nodes integrate a degree 9 polynomial exactly."""
        # Integral of x^9 from 0 to 1 = 0.1
        value = gauss_legendre(lambda x: x**9, 0.0, 1.0)
        assert value == pytest.approx(0.1, rel=1e-12)

    def test_zero_width_interval(self):
        """Test that an empty interval integrates to zero."""
        assert gauss_legendre(lambda x: x, 1.5, 1.5) == pytest.approx(0.0)


class TestForwardSweep:
    """Tests for root_find_parametric with the default sweep."""

    def test_linear_integrand(self):
        """Test that integrating f(x) = x to 4.5 gives b = 3 within one step."""
        policy = SearchPolicy(lower_bound=0.0, upper_bound=10.0, step=0.01, margin=0.02)

        result = root_find_parametric(4.5, lambda x: x, policy)

        assert result.converged
        assert result.root == pytest.approx(3.0, abs=policy.step)
        assert abs(result.residual) < policy.margin

    def test_helix_arc_length(self, arc_length_policy, helix_speed):
        """Test the arc-length inversion of the conical helix."""
        result = root_find_parametric(2.5, helix_speed, arc_length_policy)

        assert result.converged
        assert round(result.root, 2) == 4.03

    def test_returns_first_qualifying_candidate(self, arc_length_policy, helix_speed):
        """Test that no earlier candidate meets the tolerance."""
        result = root_find_parametric(2.5, helix_speed, arc_length_policy)

        previous = result.root - arc_length_policy.step
        integral = gauss_legendre(lambda b: (0.04 + 0.08 * b**2) ** 0.5, 0.0, previous)
        assert abs(integral - 2.5) >= arc_length_policy.margin

    def test_callable_and_expression_agree(self, arc_length_policy):
        """Test that a plain callable gives the same root as an expression."""
        from_expr = root_find_parametric(2.5, "sqrt(0.04+0.08*B^2)", arc_length_policy)
        from_callable = root_find_parametric(
            2.5, lambda b: (0.04 + 0.08 * b * b) ** 0.5, arc_length_policy
        )

        assert from_expr.root == pytest.approx(from_callable.root)

    def test_unreachable_target_reports_not_found(self, arc_length_policy, helix_speed):
        """Test that a target beyond the range does not raise."""
        result = root_find_parametric(1000.0, helix_speed, arc_length_policy)

        assert not result.converged
        assert result.root is None
        assert result.evaluations == arc_length_policy.max_candidates

    def test_sweep_reaches_upper_bound(self):
        """Test that the last candidate is the upper bound itself."""
        policy = SearchPolicy(lower_bound=0.0, upper_bound=1.0, step=0.1, margin=1e-9)

        # Integral of 2x from 0 to b is b^2; only b = 1 hits 1.0
        result = root_find_parametric(1.0, "2*x", policy)

        assert result.converged
        assert result.root == pytest.approx(1.0)
        assert result.evaluations == 10

    def test_nonzero_lower_bound(self):
        """Test that the integral starts at the lower bound."""
        policy = SearchPolicy(lower_bound=1.0, upper_bound=5.0, step=0.01, margin=0.01)

        # Integral of 1 from 1 to b is b - 1
        result = root_find_parametric(2.0, "1 + 0*x", policy, variable="x")

        assert result.root == pytest.approx(3.0, abs=policy.step)

    def test_constant_integrand_with_explicit_variable(self):
        """Test that a constant expression integrates when the variable is given."""
        policy = SearchPolicy(upper_bound=5.0, step=0.01, margin=0.01)

        result = root_find_parametric(3.0, "2", policy, variable="x")

        assert result.root == pytest.approx(1.5, abs=policy.step)

    def test_linear_integrand_from_nonzero_lower_bound(self):
        """Test that integrating f(x) = x from 1 to 4.0 gives b = 3."""
        policy = SearchPolicy(lower_bound=1.0, upper_bound=10.0, step=0.01, margin=0.02)

        # Integral of x from 1 to b is (b^2 - 1) / 2
        result = root_find_parametric(4.0, lambda x: x, policy)

        assert result.converged
        assert result.root == pytest.approx(3.0, abs=policy.step)
        assert abs(result.residual) < policy.margin

    def test_repeat_search_is_identical(self, arc_length_policy, helix_speed):
        """Test that the same search run twice gives the same result."""
        first = root_find_parametric(2.5, helix_speed, arc_length_policy)
        second = root_find_parametric(2.5, helix_speed, arc_length_policy)

        assert first == second

    def test_ambiguous_variable_raises(self, arc_length_policy):
        """Test that an integrand with two symbols needs an explicit variable."""
        with pytest.raises(ValueError):
            root_find_parametric(1.0, "a*x", arc_length_policy)

    def test_unbound_symbol_raises(self, arc_length_policy):
        """Test that a second free symbol is reported."""
        with pytest.raises(UnboundVariableError):
            root_find_parametric(1.0, "a*x", arc_length_policy, variable="x")


class TestBisection:
    """Tests for the bisection strategy."""

    def test_helix_arc_length(self, arc_length_policy, helix_speed):
        """Test that bisection finds a root within tolerance."""
        policy = arc_length_policy.model_copy(update={"strategy": SearchStrategy.BISECT})

        result = root_find_parametric(2.5, helix_speed, policy)

        assert result.converged
        assert abs(result.residual) < policy.margin
        assert result.root == pytest.approx(4.03, abs=0.02)

    def test_fewer_evaluations_than_sweep(self, arc_length_policy, helix_speed):
        """Test that bisection needs far fewer quadratures."""
        bisect_policy = arc_length_policy.model_copy(
            update={"strategy": SearchStrategy.BISECT}
        )

        sweep = root_find_parametric(2.5, helix_speed, arc_length_policy)
        bisect = root_find_parametric(2.5, helix_speed, bisect_policy)

        assert bisect.evaluations < sweep.evaluations

    def test_unbracketed_target(self, arc_length_policy, helix_speed):
        """Test that a target outside the range reports not found."""
        policy = arc_length_policy.model_copy(update={"strategy": SearchStrategy.BISECT})

        result = root_find_parametric(1000.0, helix_speed, policy)

        assert not result.converged
        assert result.root is None


class TestSearch:
    """Tests for the generic search over a scalar oracle."""

    def test_search_on_plain_function(self):
        """Test searching a monotone function directly."""
        policy = SearchPolicy(upper_bound=4.0, step=0.001, margin=1e-3)

        result = search(lambda x: x * x, 2.0, policy)

        assert result.root == pytest.approx(2.0**0.5, abs=2e-3)

    def test_counts_evaluations(self):
        """Test that each candidate counts once."""
        policy = SearchPolicy(upper_bound=1.0, step=0.25, margin=1e-6)

        result = search(lambda x: x, 0.75, policy)

        assert result.evaluations == 3


class TestSolveForVariable:
    """Tests for solve_for_variable."""

    def test_charged_particle_crossing_time(self, fine_policy):
        """Test the time at which y(t) first reaches 0.4 m."""
        y = "-0.4*cos(20*t)-.241*sin(20*t)+0.4"

        result = solve_for_variable(y, "t", 0.4, fine_policy)

        assert result.converged
        assert result.root == pytest.approx(0.105, abs=1.5e-3)

    def test_extra_symbol_raises(self, fine_policy):
        """Test that an expression with another free symbol is rejected."""
        with pytest.raises(UnboundVariableError):
            solve_for_variable("a*t", "t", 1.0, fine_policy)

    def test_not_found(self, fine_policy):
        """Test that a bounded expression never reaching the target is not found."""
        result = solve_for_variable("sin(t)", "t", 5.0, fine_policy)

        assert not result.converged
        assert result.root is None
