"""Pure calculation functions; no I/O and no shared state."""

from coastfire.core.formatting import format_currency, format_duration, format_report
from coastfire.core.report import calculate_coast_fire
from coastfire.core.scenarios import build_comparison, default_overrides
from coastfire.core.solver import monthly_rate, project_to_target
from coastfire.core.targets import compute_targets
from coastfire.core.trajectory import build_trajectory, coast_years_from_months
from coastfire.core.validation import ParameterValidationError, ensure_valid, validate_parameters

__all__ = [
    "ParameterValidationError",
    "validate_parameters",
    "ensure_valid",
    "compute_targets",
    "monthly_rate",
    "project_to_target",
    "default_overrides",
    "build_comparison",
    "build_trajectory",
    "coast_years_from_months",
    "calculate_coast_fire",
    "format_currency",
    "format_duration",
    "format_report",
]
