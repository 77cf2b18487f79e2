"""Full Coast FIRE calculation: targets, solve times, comparison and chart data."""

from __future__ import annotations

from typing import Optional, Sequence

from coastfire.core.scenarios import build_comparison, default_overrides
from coastfire.core.solver import project_to_target
from coastfire.core.targets import compute_targets
from coastfire.core.trajectory import build_trajectory, coast_years_from_months
from coastfire.core.validation import ensure_valid
from coastfire.schemas.coast_fire import (
    CoastFireReport,
    ContributionOverride,
    ParameterSet,
    ProjectionOptions,
)


def calculate_coast_fire(
    params: ParameterSet,
    overrides: Optional[Sequence[ContributionOverride]] = None,
) -> CoastFireReport:
    """
    Run every calculation for one parameter set.

    Raises ParameterValidationError before computing anything if the
    parameters break a domain rule.
    """
    ensure_valid(params)
    targets = compute_targets(params)

    coast = project_to_target(
        params.currentSavings,
        params.monthlyContribution,
        params.returnRate,
        targets.coastFIRENumber,
    )
    # the traditional target starts in today's money and inflates once a year
    traditional = project_to_target(
        params.currentSavings,
        params.monthlyContribution,
        params.returnRate,
        targets.traditionalFIRENumber,
        ProjectionOptions(inflatingTarget=True, targetInflationRate=params.inflationRate),
    )

    total_contributions = params.monthlyContribution * 12 * coast.years
    investment_growth = targets.coastFIRENumber - params.currentSavings - total_contributions

    comparison = build_comparison(
        params,
        overrides if overrides is not None else default_overrides(),
    )
    trajectory = build_trajectory(params, targets, coast_years_from_months(coast.elapsedMonths))

    return CoastFireReport(
        targets=targets,
        coastProjection=coast,
        traditionalProjection=traditional,
        timeToCoastYears=coast.years,
        timeToTraditionalYears=traditional.years,
        totalContributions=total_contributions,
        investmentGrowth=investment_growth,
        comparison=comparison,
        trajectory=trajectory,
    )
