"""Yearly balance series for the saving, coasting and traditional paths."""

from __future__ import annotations

import math
from typing import List, Optional

from coastfire.config import MAX_TRAJECTORY_YEARS
from coastfire.core.solver import monthly_rate
from coastfire.schemas.coast_fire import ParameterSet, TargetFigures, Trajectory


def coast_years_from_months(months: int) -> int:
    """Whole years needed to cover ``months``, rounding up."""
    return math.ceil(months / 12)


def build_trajectory(params: ParameterSet, targets: TargetFigures, coast_years: int) -> Trajectory:
    """
    Build the chart series from currentAge for min(yearsToRetirement, 50) years.

    Per year (after year 0):
      1) Compound 12 months. Contributions are added while year <= coast_years,
         then the balance grows on its own.
      2) Record the balance on savingsPhase while contributing, otherwise on
         coastingPhase; the other series gets None.
      3) A separate balance keeps contributing every month (traditionalPath).
    """
    rate = monthly_rate(params.returnRate)
    total_years = min(targets.yearsToRetirement, MAX_TRAJECTORY_YEARS)

    ages: List[float] = []
    savings_phase: List[Optional[float]] = []
    coasting_phase: List[Optional[float]] = []
    traditional_path: List[Optional[float]] = []

    balance = float(params.currentSavings)
    traditional_balance = float(params.currentSavings)

    for year in range(int(math.floor(total_years)) + 1):
        ages.append(params.currentAge + year)

        if year == 0:
            savings_phase.append(balance)
            coasting_phase.append(None)
            traditional_path.append(traditional_balance)
            continue

        contributing = year <= coast_years
        for _ in range(12):
            balance = balance * (1 + rate)
            if contributing:
                balance += params.monthlyContribution
            traditional_balance = traditional_balance * (1 + rate) + params.monthlyContribution

        if contributing:
            savings_phase.append(balance)
            coasting_phase.append(None)
        else:
            savings_phase.append(None)
            coasting_phase.append(balance)
        traditional_path.append(traditional_balance)

    return Trajectory(
        ages=ages,
        savingsPhase=savings_phase,
        coastingPhase=coasting_phase,
        traditionalPath=traditional_path,
        coastYears=coast_years,
        coastFIRENumber=targets.coastFIRENumber,
        futureFIRENumber=targets.futureFIRENumber,
    )
