"""Present-day, inflation-adjusted and Coast FIRE targets."""

from __future__ import annotations

import logging
import math

from coastfire.schemas.coast_fire import ParameterSet, TargetFigures

logger = logging.getLogger(__name__)


def compute_targets(params: ParameterSet) -> TargetFigures:
    """
    Derive the retirement targets from a validated parameter set.

      - traditional FIRE number: today's expenses / withdrawal rate
      - future FIRE number: expenses inflated to retirement / withdrawal rate
      - coast FIRE number: future FIRE number discounted at the real return
    """
    years_to_retirement = params.retirementAge - params.currentAge
    real_return_rate = params.returnRate - params.inflationRate

    if 1 + params.inflationRate <= 0 or 1 + real_return_rate <= 0:
        raise ValueError("inflation and real return rates must be greater than -100%")

    try:
        traditional_fire_number = params.annualExpenses / params.safeWithdrawalRate

        future_expenses = params.annualExpenses * (1 + params.inflationRate) ** years_to_retirement
        future_fire_number = future_expenses / params.safeWithdrawalRate

        coast_fire_number = future_fire_number / (1 + real_return_rate) ** years_to_retirement
    except (OverflowError, ZeroDivisionError) as exc:
        raise ValueError("targets are out of floating-point range for these parameters") from exc

    figures = (traditional_fire_number, future_fire_number, coast_fire_number)
    if not all(math.isfinite(value) for value in figures):
        raise ValueError("targets are out of floating-point range for these parameters")

    logger.debug(
        "targets: years=%s future=%.2f coast=%.2f",
        years_to_retirement,
        future_fire_number,
        coast_fire_number,
    )

    return TargetFigures(
        yearsToRetirement=years_to_retirement,
        realReturnRate=real_return_rate,
        futureFIRENumber=future_fire_number,
        traditionalFIRENumber=traditional_fire_number,
        coastFIRENumber=coast_fire_number,
    )
