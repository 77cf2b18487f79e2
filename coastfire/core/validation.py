"""Domain checks that gate every calculation."""

from __future__ import annotations

import math
from typing import List

from coastfire.config import (
    CURRENT_AGE_RANGE,
    GROWTH_FACTOR_LOG_LIMIT,
    RETIREMENT_AGE_MAX,
    RETURN_RATE_MAX,
    WITHDRAWAL_RATE_MAX,
)
from coastfire.schemas.coast_fire import ParameterSet, ValidationResult


class ParameterValidationError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def validate_parameters(params: ParameterSet) -> ValidationResult:
    """Evaluate every rule and report all violations in a fixed order."""
    errors: List[str] = []
    min_age, max_age = CURRENT_AGE_RANGE

    if params.currentAge >= params.retirementAge:
        errors.append("Retirement age must be greater than current age")

    if params.currentAge < min_age or params.currentAge > max_age:
        errors.append(f"Current age must be between {min_age} and {max_age}")

    if params.retirementAge > RETIREMENT_AGE_MAX:
        errors.append(f"Retirement age cannot be greater than {RETIREMENT_AGE_MAX}")

    if params.annualExpenses <= 0:
        errors.append("Annual expenses must be greater than 0")

    if params.returnRate <= 0 or params.returnRate > RETURN_RATE_MAX:
        errors.append(f"Investment return should be between 0% and {RETURN_RATE_MAX:.0%}")

    if params.safeWithdrawalRate <= 0 or params.safeWithdrawalRate > WITHDRAWAL_RATE_MAX:
        errors.append(f"Safe withdrawal rate should be between 0% and {WITHDRAWAL_RATE_MAX:.0%}")

    if params.currentSavings < 0:
        errors.append("Current savings cannot be negative")

    if params.monthlyContribution < 0:
        errors.append("Monthly contribution cannot be negative")

    # bases of the compounding exponents must stay positive
    if 1 + params.inflationRate <= 0:
        errors.append("Inflation rate must be greater than -100%")

    if 1 + (params.returnRate - params.inflationRate) <= 0:
        errors.append("Investment return minus inflation must be greater than -100%")

    if not _targets_representable(params):
        errors.append("Expenses, rates and horizon produce targets too large to compute")

    return ValidationResult(valid=not errors, errors=errors)


def _targets_representable(params: ParameterSet) -> bool:
    """Check in log space that every target stays a finite, non-zero float."""
    years = params.retirementAge - params.currentAge
    real_base = 1 + (params.returnRate - params.inflationRate)
    if (
        years <= 0
        or params.annualExpenses <= 0
        or params.safeWithdrawalRate <= 0
        or 1 + params.inflationRate <= 0
        or real_base <= 0
    ):
        # already reported by the rules above
        return True

    log_traditional = math.log(params.annualExpenses) - math.log(params.safeWithdrawalRate)
    log_future = log_traditional + years * math.log1p(params.inflationRate)
    log_coast = log_future - years * math.log(real_base)

    logs = (log_traditional, log_future, log_coast)
    return all(-GROWTH_FACTOR_LOG_LIMIT <= value <= GROWTH_FACTOR_LOG_LIMIT for value in logs)


def ensure_valid(params: ParameterSet) -> ParameterSet:
    result = validate_parameters(params)
    if not result.valid:
        raise ParameterValidationError(result.errors)
    return params
