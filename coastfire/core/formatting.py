"""Display strings for amounts and durations.

Currency is passed in explicitly through ``FormatConfig``; nothing in the
calculation modules reads it.
"""

from __future__ import annotations

import math
from typing import Any, Dict

from coastfire.config import CURRENCY_SYMBOLS, MAX_PROJECTION_MONTHS
from coastfire.schemas.coast_fire import CoastFireReport, FormatConfig


def format_currency(amount: float, config: FormatConfig) -> str:
    """Symbol plus en-US digit grouping, no decimals: ``$1,000,000``."""
    return f"{CURRENCY_SYMBOLS[config.currency]}{amount:,.0f}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration(months: int, reached: bool = True) -> str:
    if not reached:
        return f"More than {MAX_PROJECTION_MONTHS // 12} years"
    if months == 0:
        return "Already reached!"

    years, remainder = divmod(months, 12)
    if years == 0:
        return _plural(remainder, "month")
    if remainder == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(remainder, 'month')}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_report(report: CoastFireReport, config: FormatConfig) -> Dict[str, Any]:
    coast = report.coastProjection
    traditional = report.traditionalProjection

    return {
        "currency": config.currency,
        "coastFIRENumber": format_currency(report.targets.coastFIRENumber, config),
        "traditionalFIRENumber": format_currency(report.targets.traditionalFIRENumber, config),
        "futureFIRENumber": format_currency(report.targets.futureFIRENumber, config),
        "timeToCoast": format_duration(coast.elapsedMonths, coast.reachedWithinCap),
        "timeToTraditional": format_duration(traditional.elapsedMonths, traditional.reachedWithinCap),
        "totalContributions": format_currency(report.totalContributions, config),
        "investmentGrowth": format_currency(max(0.0, report.investmentGrowth), config),
        "comparison": [
            {
                "label": row.label,
                "timeToCoast": format_duration(row.monthsToCoast, row.reachedWithinCap),
                "ageAtCoast": _round_half_up(row.ageAtCoast),
                "monthlyContribution": format_currency(row.monthlyContribution, config),
            }
            for row in report.comparison
        ],
    }
