"""
Pytest configuration and shared fixtures.
"""

import pytest

from engdyn.models.inputs import SearchPolicy
from engdyn.physics.vector_expr import VectorExpr3D


@pytest.fixture
def arc_length_policy() -> SearchPolicy:
    """Search policy used for the helix arc-length problem."""
    return SearchPolicy(lower_bound=0.0, upper_bound=10.0, step=0.01, margin=0.005)


@pytest.fixture
def fine_policy() -> SearchPolicy:
    """Finer sweep used when searching an expression directly."""
    return SearchPolicy(lower_bound=0.0, upper_bound=10.0, step=0.001, margin=0.01)


@pytest.fixture
def helix() -> VectorExpr3D:
    """Conical helix parametrised by the angle B."""
    return VectorExpr3D.parse("0.2*B*cos(B)", "0.2*B*sin(B)", "0.1*B^2")


@pytest.fixture
def helix_speed() -> str:
    """s'(B) of the conical helix, |dr/dB|."""
    return "sqrt(0.04+0.08*B^2)"
