"""Expose dependency helpers for FastAPI routers."""

from .providers import (
    get_app_settings,
    get_gateway_client,
    get_idea_generation_service,
    get_workflow_analysis_service,
)

__all__ = [
    "get_app_settings",
    "get_gateway_client",
    "get_idea_generation_service",
    "get_workflow_analysis_service",
]
