"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from coastfire.core.formatting import format_report
from coastfire.core.report import calculate_coast_fire
from coastfire.core.scenarios import build_comparison, default_overrides
from coastfire.core.solver import project_to_target
from coastfire.core.targets import compute_targets
from coastfire.core.trajectory import build_trajectory, coast_years_from_months
from coastfire.core.validation import ParameterValidationError, ensure_valid, validate_parameters
from coastfire.schemas.api import (
    CoastFireRequest,
    CoastFireResponse,
    ComparisonRequest,
    ComparisonResponse,
    PingResponse,
    ProjectionRequest,
    TrajectoryRequest,
)
from coastfire.schemas.coast_fire import ParameterSet

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _payload() -> Dict[str, Any]:
    return request.get_json(force=True, silent=False)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("malformed request to %s: %d error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False, include_context=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(ParameterValidationError)
def _handle_parameter_error(exc: ParameterValidationError):
    """Report every violated rule at once."""
    logger.warning("rejected parameters on %s: %s", request.path, exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    response = PingResponse(message="pong")
    return jsonify(response.model_dump())


@api_bp.post("/calc/validate")
def validate() -> Any:
    params = ParameterSet.model_validate(_payload())
    return jsonify(validate_parameters(params).model_dump())


@api_bp.post("/calc/targets")
def targets() -> Any:
    params = ensure_valid(ParameterSet.model_validate(_payload()))
    return jsonify(compute_targets(params).model_dump())


@api_bp.post("/calc/projection")
def projection() -> Any:
    """Run the solver on explicit balance, contribution, rate and target."""
    payload = ProjectionRequest.model_validate(_payload())
    result = project_to_target(
        payload.startingBalance,
        payload.monthlyContribution,
        payload.annualReturnRate,
        payload.target,
        payload.options,
    )
    return jsonify(result.model_dump())


@api_bp.post("/calc/comparison")
def comparison() -> Any:
    payload = ComparisonRequest.model_validate(_payload())
    params = ensure_valid(payload.params)
    overrides = payload.overrides if payload.overrides is not None else default_overrides()
    response = ComparisonResponse(rows=build_comparison(params, overrides))
    return jsonify(response.model_dump())


@api_bp.post("/calc/trajectory")
def trajectory() -> Any:
    payload = TrajectoryRequest.model_validate(_payload())
    params = ensure_valid(payload.params)
    figures = compute_targets(params)

    coast_years = payload.coastYears
    if coast_years is None:
        coast = project_to_target(
            params.currentSavings,
            params.monthlyContribution,
            params.returnRate,
            figures.coastFIRENumber,
        )
        coast_years = coast_years_from_months(coast.elapsedMonths)

    return jsonify(build_trajectory(params, figures, coast_years).model_dump())


@api_bp.post("/calc/coast-fire")
def coast_fire() -> Any:
    """Everything the results page shows, plus display strings in the requested currency."""
    payload = CoastFireRequest.model_validate(_payload())
    report = calculate_coast_fire(payload.params, payload.overrides)
    response = CoastFireResponse(report=report, display=format_report(report, payload.format))
    return jsonify(response.model_dump())
