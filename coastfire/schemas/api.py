"""Request and response payloads for the HTTP API."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from coastfire.schemas.coast_fire import (
    CoastFireReport,
    ComparisonRow,
    ContributionOverride,
    FormatConfig,
    ParameterSet,
    ProjectionOptions,
)


class ProjectionRequest(BaseModel):
    """Inputs for a single run of the convergence solver."""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    startingBalance: float = Field(..., ge=0)
    monthlyContribution: float = Field(0.0, ge=0)
    annualReturnRate: float = Field(..., gt=-1, description="Nominal annual return as a decimal.")
    target: float
    options: ProjectionOptions = Field(default_factory=ProjectionOptions)


class ComparisonRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    params: ParameterSet
    # None means the built-in scenario set
    overrides: Optional[List[ContributionOverride]] = None


class ComparisonResponse(BaseModel):
    rows: List[ComparisonRow]


class TrajectoryRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    params: ParameterSet
    # solved from the coast target when omitted
    coastYears: Optional[int] = Field(default=None, ge=0)


class CoastFireRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    params: ParameterSet
    overrides: Optional[List[ContributionOverride]] = None
    format: FormatConfig = Field(default_factory=FormatConfig)


class PingResponse(BaseModel):
    message: str


class CoastFireResponse(BaseModel):
    report: CoastFireReport
    display: dict
