"""Data contracts for Coast FIRE calculations."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from coastfire.config import DEFAULT_CURRENCY, OVERRIDE_MULTIPLIER_MAX


class ParameterSet(BaseModel):
    """User inputs for a calculation. Rates are fractions (0.07 for 7%).

    Only types are enforced here; domain rules live in
    ``coastfire.core.validation`` so that every violation is reported at once.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    currentAge: float = Field(..., description="Age today, in years.")
    retirementAge: float = Field(..., description="Target retirement age.")
    currentSavings: float = Field(..., description="Invested savings today.")
    monthlyContribution: float = Field(0.0, description="Amount added every month.")
    annualExpenses: float = Field(..., description="Yearly spending in today's money.")
    returnRate: float = Field(..., description="Expected nominal annual return.")
    inflationRate: float = Field(..., description="Expected annual inflation.")
    safeWithdrawalRate: float = Field(..., description="Sustainable annual draw-down rate.")


class ValidationResult(BaseModel):
    valid: bool
    errors: List[str] = Field(default_factory=list)


class TargetFigures(BaseModel):
    model_config = ConfigDict(frozen=True)

    yearsToRetirement: float
    realReturnRate: float
    futureFIRENumber: float
    traditionalFIRENumber: float
    coastFIRENumber: float


class ProjectionOptions(BaseModel):
    """Optional yearly inflation applied to the target while solving."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    inflatingTarget: bool = False
    targetInflationRate: float = Field(0.0, gt=-1)


class ProjectionResult(BaseModel):
    elapsedMonths: int = Field(..., ge=0)
    reachedWithinCap: bool
    balance: float
    # target after any yearly inflation applied during the run
    target: float

    @property
    def years(self) -> float:
        return self.elapsedMonths / 12


class ContributionOverride(BaseModel):
    """A named comparison scenario: scale the current contribution or replace it."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    label: str
    multiplier: Optional[float] = Field(default=None, ge=0, le=OVERRIDE_MULTIPLIER_MAX)
    amount: Optional[float] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def ensure_single_source(self) -> "ContributionOverride":
        if (self.multiplier is None) == (self.amount is None):
            raise ValueError("exactly one of multiplier or amount must be set")
        return self

    def resolve(self, monthly_contribution: float) -> float:
        if self.amount is not None:
            return self.amount
        return monthly_contribution * self.multiplier


class ComparisonRow(BaseModel):
    label: str
    monthlyContribution: float
    monthsToCoast: int
    yearsToCoast: float
    ageAtCoast: float
    reachedWithinCap: bool


class Trajectory(BaseModel):
    """Year-by-year balances for charting; absent points are ``None``."""

    ages: List[float]
    savingsPhase: List[Optional[float]]
    coastingPhase: List[Optional[float]]
    traditionalPath: List[Optional[float]]
    coastYears: int
    coastFIRENumber: float
    futureFIRENumber: float

    @model_validator(mode="after")
    def ensure_aligned(self) -> "Trajectory":
        lengths = {
            len(self.ages),
            len(self.savingsPhase),
            len(self.coastingPhase),
            len(self.traditionalPath),
        }
        if len(lengths) != 1:
            raise ValueError("trajectory series must have equal length")
        return self


class CoastFireReport(BaseModel):
    targets: TargetFigures
    coastProjection: ProjectionResult
    traditionalProjection: ProjectionResult
    timeToCoastYears: float
    timeToTraditionalYears: float
    totalContributions: float
    # may be negative; clamp for display only
    investmentGrowth: float
    comparison: List[ComparisonRow]
    trajectory: Trajectory


class FormatConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    currency: Literal["USD", "EUR", "GBP", "CNY", "JPY", "CAD", "AUD"] = DEFAULT_CURRENCY
