"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, jsonify, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from interest_calculator.core.compound_interest import calculate
from interest_calculator.core.errors import CalculationError
from interest_calculator.core.health import get_health_status
from interest_calculator.schemas.compound_interest import (
    CalculationErrorResponse,
    CompoundInterestRequest,
    CompoundInterestResponse,
)
from interest_calculator.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    return jsonify({"detail": exc.errors(include_url=False)}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.errorhandler(CalculationError)
def _handle_calculation_error(exc: CalculationError):
    """Relay the failed field so the form can flag it."""
    logger.info("Rejected calculation input: %s (%s)", exc.kind, exc.field)
    body = CalculationErrorResponse.model_validate({"error": exc.to_dict()})
    return jsonify(body.model_dump()), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(Exception)
def _handle_unexpected_error(exc: Exception):
    if isinstance(exc, HTTPException):
        return exc
    logger.exception("Calculation error")
    return jsonify({"detail": "Internal calculation error"}), HTTPStatus.INTERNAL_SERVER_ERROR


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse.model_validate(get_health_status())
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-interest")
def compound_interest() -> Any:
    """Compound the submitted form values."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CompoundInterestRequest.model_validate(raw_payload)
    result = calculate(payload.principal, payload.rate, payload.time, payload.compound)
    logger.debug("Calculated %s from %s", result.model_dump(), payload.model_dump())
    response = CompoundInterestResponse.from_result(result)
    return jsonify(response.model_dump())
