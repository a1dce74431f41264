"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from vorsorge import __version__
from vorsorge.core.accumulation import calculate_future_value
from vorsorge.core.depot import compute_depot
from vorsorge.core.phases import compute_early_start, compute_phased_schedule
from vorsorge.core.projection import calculate_yearly_projection
from vorsorge.core.subsidy import calculate_subsidy
from vorsorge.schemas.accumulation import FutureValueRequest
from vorsorge.schemas.depot import DepotRequest
from vorsorge.schemas.health import HealthResponse
from vorsorge.schemas.phases import EarlyStartRequest, PhasedScheduleInput
from vorsorge.schemas.projection import YearlyProjectionRequest
from vorsorge.schemas.subsidy import ContributionInput

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


def _json_payload() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=False)
    logger.info("%s %s", request.method, request.path)
    return payload


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.warning("rejected %s: %d validation error(s)", request.path, exc.error_count())
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status="ok", version=__version__)
    return jsonify(response.model_dump())


@api_bp.post("/calc/future-value")
def future_value() -> Any:
    """Balance of a monthly contribution stream after ``months`` periods."""
    payload = FutureValueRequest.model_validate(_json_payload())
    return jsonify(calculate_future_value(payload).model_dump(mode="json"))


@api_bp.post("/calc/subsidy")
def subsidy() -> Any:
    """Subsidy breakdown for one year of own contributions."""
    payload = ContributionInput.model_validate(_json_payload())
    return jsonify(calculate_subsidy(payload).model_dump(mode="json"))


@api_bp.post("/calc/phased-schedule")
def phased_schedule() -> Any:
    payload = PhasedScheduleInput.model_validate(_json_payload())
    return jsonify(compute_phased_schedule(payload).model_dump(mode="json"))


@api_bp.post("/calc/yearly-projection")
def yearly_projection() -> Any:
    """Compound growth with one row per completed year."""
    payload = YearlyProjectionRequest.model_validate(_json_payload())
    return jsonify(calculate_yearly_projection(payload).model_dump(mode="json"))


@api_bp.post("/calc/depot")
def depot() -> Any:
    payload = DepotRequest.model_validate(_json_payload())
    return jsonify(compute_depot(payload).model_dump(mode="json"))


@api_bp.post("/calc/early-start")
def early_start() -> Any:
    payload = EarlyStartRequest.model_validate(_json_payload())
    return jsonify(compute_early_start(payload).model_dump(mode="json"))
