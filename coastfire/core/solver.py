"""Month-by-month compounding until a balance reaches its target."""

from __future__ import annotations

import logging
from typing import Optional

from coastfire.config import MAX_PROJECTION_MONTHS
from coastfire.schemas.coast_fire import ProjectionOptions, ProjectionResult

logger = logging.getLogger(__name__)


def monthly_rate(annual_return_rate: float) -> float:
    """Monthly rate that compounds to ``annual_return_rate`` over 12 months."""
    if annual_return_rate <= -1:
        raise ValueError("annual return rate must be greater than -100%")
    return (1 + annual_return_rate) ** (1 / 12) - 1


def project_to_target(
    starting_balance: float,
    monthly_contribution: float,
    annual_return_rate: float,
    target: float,
    options: Optional[ProjectionOptions] = None,
) -> ProjectionResult:
    """
    Simulate monthly growth, then the contribution, until ``balance >= target``.

    With ``options.inflatingTarget`` the target grows by
    ``targetInflationRate`` after the growth step of every month whose
    zero-based index is a positive multiple of 12.

    Stops after MAX_PROJECTION_MONTHS; in that case ``reachedWithinCap`` is
    False and the caller must not read ``elapsedMonths`` as a real duration.
    """
    options = options or ProjectionOptions()
    rate = monthly_rate(annual_return_rate)

    balance = float(starting_balance)
    months = 0

    if balance >= target:
        return ProjectionResult(elapsedMonths=0, reachedWithinCap=True, balance=balance, target=target)

    while balance < target and months < MAX_PROJECTION_MONTHS:
        balance = balance * (1 + rate) + monthly_contribution
        if options.inflatingTarget and months > 0 and months % 12 == 0:
            target *= 1 + options.targetInflationRate
        months += 1

    reached = balance >= target
    if not reached:
        logger.info(
            "target %.2f not reached within %d months (balance %.2f)",
            target,
            MAX_PROJECTION_MONTHS,
            balance,
        )

    return ProjectionResult(elapsedMonths=months, reachedWithinCap=reached, balance=balance, target=target)
