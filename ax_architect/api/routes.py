"""
FastAPI routes for workflow analysis and AX idea generation.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response

from ax_architect.core.config import AppSettings
from ax_architect.core.errors import InputValidationError
from ax_architect.dependencies import (
    get_app_settings,
    get_idea_generation_service,
    get_workflow_analysis_service,
)
from ax_architect.schemas import (
    ErrorResponse,
    IdeaGenerationResponse,
    WorkflowAnalysisResponse,
)
from ax_architect.services import IdeaGenerationService, WorkflowAnalysisService
from ax_architect.services.validation import (
    MISSING_IDEA_FIELDS_MESSAGE,
    MISSING_WORKFLOW_FIELDS_MESSAGE,
)

router = APIRouter()
logger = logging.getLogger(__name__)


CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

_PREFLIGHT_HEADERS = {**CORS_HEADERS, "Access-Control-Allow-Methods": "POST, OPTIONS"}

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    HTTPStatus.BAD_REQUEST: {"model": ErrorResponse},
    HTTPStatus.PAYMENT_REQUIRED: {"model": ErrorResponse},
    HTTPStatus.TOO_MANY_REQUESTS: {"model": ErrorResponse},
    HTTPStatus.INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


async def _read_json(request: Request, missing_message: str) -> Any:
    """Decode the body without schema checks; validation happens in the service."""
    try:
        return await request.json()
    except ValueError as exc:
        raise InputValidationError([missing_message]) from exc


@router.get("/health", status_code=HTTPStatus.OK)
async def healthcheck(settings: Annotated[AppSettings, Depends(get_app_settings)]) -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok", "gateway_configured": settings.gateway.is_configured}


@router.options("/analyze-architecture", include_in_schema=False)
@router.options("/generate-ax-ideas", include_in_schema=False)
async def preflight() -> Response:
    """Answer CORS pre-flight requests with an empty body."""
    return Response(status_code=HTTPStatus.OK, headers=_PREFLIGHT_HEADERS)


@router.post(
    "/analyze-architecture",
    response_model=WorkflowAnalysisResponse,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
async def analyze_architecture(
    request: Request,
    service: Annotated[WorkflowAnalysisService, Depends(get_workflow_analysis_service)],
) -> WorkflowAnalysisResponse:
    """Generate a markdown architecture report for a role and workflow."""
    payload = await _read_json(request, MISSING_WORKFLOW_FIELDS_MESSAGE)
    result = await service.analyze(payload)
    return WorkflowAnalysisResponse(analysis=result.analysis, sections=result.sections)


@router.post(
    "/generate-ax-ideas",
    response_model=IdeaGenerationResponse,
    responses=_ERROR_RESPONSES,
)
async def generate_ax_ideas(
    request: Request,
    service: Annotated[IdeaGenerationService, Depends(get_idea_generation_service)],
) -> IdeaGenerationResponse:
    """Generate one Assistant, one Advisor, and one Agent idea."""
    payload = await _read_json(request, MISSING_IDEA_FIELDS_MESSAGE)
    ideas = await service.generate(payload)
    return IdeaGenerationResponse(ideas=ideas)


__all__ = ["CORS_HEADERS", "router"]
