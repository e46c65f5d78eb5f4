"""
Output models for computed results.

These models define the JSON documents produced by the worked examples and
the command-line interface.
"""

from typing import Optional, Union

from pydantic import BaseModel, Field

from engdyn.models.inputs import SearchPolicy

# A scalar, a vector, a matrix, or rendered expressions
ResultValue = Union[float, list[float], list[list[float]], str, list[str], None]


class RootFindOutput(BaseModel):
    """Outcome of a parameter search."""
    expression: str = Field(..., description="Integrand (or searched expression) as text")
    variable: str = Field(..., description="Variable searched over")
    target: float = Field(..., description="Target value of the integral or expression")
    policy: SearchPolicy = Field(..., description="Search range, step, tolerance and strategy")
    converged: bool = Field(..., description="Whether a candidate met the tolerance")
    root: Optional[float] = Field(
        default=None,
        description="Parameter value found; None when the target was not reached"
    )
    evaluations: int = Field(..., ge=0, description="Number of oracle evaluations")
    residual: Optional[float] = Field(
        default=None,
        description="Computed value minus target at the root"
    )


class DerivativeOutput(BaseModel):
    """Central-difference velocity estimate of a symbolic position vector."""
    position: list[str] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="x, y, z components of the position expression"
    )
    variable: str = Field(default="t", description="Time variable")
    time: float = Field(..., description="Time at which the derivative is estimated")
    interval: float = Field(..., gt=0, description="Sampling interval dt")
    velocity: list[float] = Field(
        ...,
        min_length=3,
        max_length=3,
        description="Approximate velocity components"
    )
    representation: str = Field(
        default="",
        description="LaTeX component representation of the position vector"
    )


class GravityOutput(BaseModel):
    """Surface gravity of a planet."""
    planet_mass_kg: float = Field(..., gt=0)
    planet_radius_m: float = Field(..., gt=0)
    surface_gravity_mps2: float = Field(..., description="G * M / R^2")


class WorkedExampleResult(BaseModel):
    """
    Results of one textbook worked example.

    ``values`` maps the quantity names used in the text (e_t, rho, a_bar...)
    to scalars, vectors or matrices.
    """
    key: str = Field(..., description="Example identifier, e.g. '2.3'")
    title: str = Field(..., description="Short description of the problem")
    reference: str = Field(..., description="Where the example appears in the text")
    values: dict[str, ResultValue] = Field(
        default_factory=dict,
        description="Named results of the example"
    )
    notes: list[str] = Field(
        default_factory=list,
        description="Remarks about approximations made"
    )
