"""
Providers for settings, the gateway client, and services as FastAPI dependencies.
"""

from functools import lru_cache

from ax_architect.clients import GatewayClient
from ax_architect.core.config import AppSettings, get_settings
from ax_architect.services import IdeaGenerationService, WorkflowAnalysisService


@lru_cache()
def _settings() -> AppSettings:
    """Ensure configuration is created once per process."""
    return get_settings()


def get_app_settings() -> AppSettings:
    """FastAPI dependency returning application settings."""
    return _settings()


@lru_cache()
def get_gateway_client() -> GatewayClient:
    """Provide the gateway client.

    Raises ``ConfigurationError`` while the credential is missing. Failed
    constructions are not cached, so every request re-checks.
    """
    return GatewayClient(_settings().gateway)


def get_workflow_analysis_service() -> WorkflowAnalysisService:
    """Build the narrative analysis service."""
    return WorkflowAnalysisService(
        get_gateway_client,
        sectioning=_settings().narrative_sectioning,
    )


def get_idea_generation_service() -> IdeaGenerationService:
    """Build the structured idea generation service."""
    return IdeaGenerationService(
        get_gateway_client,
        enforce_unique_categories=_settings().enforce_unique_idea_categories,
    )


__all__ = [
    "get_app_settings",
    "get_gateway_client",
    "get_idea_generation_service",
    "get_workflow_analysis_service",
]
