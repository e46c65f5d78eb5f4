"""
Input models for the numeric search routines.

A SearchPolicy bundles the parameters the root finders need. Validation
happens up front so a search never starts on an empty or inverted range.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator


class SearchStrategy(str, Enum):
    """How candidate parameter values are visited."""
    SWEEP = "sweep"
    BISECT = "bisect"


class SearchPolicy(BaseModel):
    """
    Parameters for a one-dimensional parameter search.

    The default strategy sweeps forward from the lower bound in fixed
    increments of ``step`` and stops at the first candidate within
    ``margin`` of the target. It does not use derivative information.
    The resolution of the returned value is bounded below by ``step``.
    """

    lower_bound: float = Field(
        default=0.0,
        description="Lower bound of the search (and of the integral, when integrating)"
    )
    upper_bound: float = Field(
        ...,
        description="Largest parameter value to try before giving up"
    )
    step: float = Field(
        default=0.01,
        gt=0,
        description="Increment between successive candidates"
    )
    margin: float = Field(
        ...,
        gt=0,
        description="How close the computed value must be to the target"
    )
    strategy: SearchStrategy = Field(
        default=SearchStrategy.SWEEP,
        description="Forward sweep, or bisection for monotone problems"
    )

    @field_validator("upper_bound")
    @classmethod
    def validate_bounds(cls, v: float, info) -> float:
        """Ensure the search range is not empty."""
        if "lower_bound" in info.data and v <= info.data["lower_bound"]:
            raise ValueError("upper_bound must be greater than lower_bound")
        return v

    @model_validator(mode="after")
    def validate_step(self) -> "SearchPolicy":
        """A step wider than the range would never produce a candidate."""
        if self.step > self.upper_bound - self.lower_bound:
            raise ValueError("step must not exceed upper_bound - lower_bound")
        return self

    @property
    def max_candidates(self) -> int:
        """Number of candidates a full forward sweep visits."""
        # Small slack so an upper bound that is a whole number of steps
        # away is still reached despite rounding in the division.
        return int((self.upper_bound - self.lower_bound) / self.step + 1e-9)

    def candidate(self, k: int) -> float:
        """The k-th candidate of the sweep, k >= 1, never past the upper bound."""
        return min(self.lower_bound + k * self.step, self.upper_bound)

    model_config = {
        "json_schema_extra": {
            "example": {
                "lower_bound": 0.0,
                "upper_bound": 10.0,
                "step": 0.01,
                "margin": 0.005,
                "strategy": "sweep",
            }
        }
    }
