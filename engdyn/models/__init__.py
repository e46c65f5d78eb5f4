"""
Pydantic models for search parameters and computed results.
"""

from engdyn.models.inputs import SearchPolicy, SearchStrategy
from engdyn.models.outputs import (
    DerivativeOutput,
    GravityOutput,
    RootFindOutput,
    WorkedExampleResult,
)

__all__ = [
    "SearchPolicy",
    "SearchStrategy",
    "DerivativeOutput",
    "GravityOutput",
    "RootFindOutput",
    "WorkedExampleResult",
]
