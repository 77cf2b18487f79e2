"""Compare time-to-coast across alternate monthly contributions."""

from __future__ import annotations

from typing import List, Sequence

from coastfire.config import DEFAULT_SCENARIOS
from coastfire.core.solver import project_to_target
from coastfire.core.targets import compute_targets
from coastfire.schemas.coast_fire import ComparisonRow, ContributionOverride, ParameterSet


def default_overrides() -> List[ContributionOverride]:
    return [
        ContributionOverride(label=label, multiplier=multiplier, amount=amount)
        for label, multiplier, amount in DEFAULT_SCENARIOS
    ]


def build_comparison(
    params: ParameterSet,
    overrides: Sequence[ContributionOverride],
) -> List[ComparisonRow]:
    """One row per override, in input order, each solved against the coast number."""
    coast_fire_number = compute_targets(params).coastFIRENumber

    rows: List[ComparisonRow] = []
    for override in overrides:
        contribution = override.resolve(params.monthlyContribution)
        result = project_to_target(
            params.currentSavings,
            contribution,
            params.returnRate,
            coast_fire_number,
        )
        rows.append(
            ComparisonRow(
                label=override.label,
                monthlyContribution=contribution,
                monthsToCoast=result.elapsedMonths,
                yearsToCoast=result.years,
                ageAtCoast=params.currentAge + result.years,
                reachedWithinCap=result.reachedWithinCap,
            )
        )
    return rows
