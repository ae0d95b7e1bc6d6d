"""Services that turn validated form input into gateway results."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from ax_architect.clients import GatewayClient
from ax_architect.schemas import AnalysisSection
from ax_architect.services.extraction import (
    check_idea_categories,
    extract_ideas,
    extract_markdown,
    find_missing_sections,
    split_sections,
)
from ax_architect.services.lifecycle import RequestLifecycle, RequestState
from ax_architect.services.prompts import (
    PromptMode,
    build_idea_tool,
    build_tool_choice,
    compose_prompt,
)
from ax_architect.services.validation import (
    validate_idea_request,
    validate_workflow_request,
)

logger = logging.getLogger(__name__)

GatewayFactory = Callable[[], GatewayClient]


@dataclass(slots=True)
class WorkflowAnalysisResult:
    """Markdown report plus its sections when sectioning is enabled."""

    analysis: str
    sections: Optional[List[AnalysisSection]] = None


class WorkflowAnalysisService:
    """Produce a narrative architecture report for a role and workflow."""

    def __init__(self, gateway_factory: GatewayFactory, *, sectioning: bool = False) -> None:
        # The factory is only called once the request has passed validation.
        self._gateway_factory = gateway_factory
        self._sectioning = sectioning

    async def analyze(self, payload: Any) -> WorkflowAnalysisResult:
        lifecycle = RequestLifecycle("analyze-architecture")

        with lifecycle.phase(RequestState.VALIDATING, on_error=RequestState.REJECTED):
            request = validate_workflow_request(payload)

        with lifecycle.phase(RequestState.DISPATCHING, on_error=RequestState.FAILED):
            prompt = compose_prompt(request, PromptMode.NARRATIVE)
            gateway = self._gateway_factory()
            logger.info("Calling AI gateway for workflow analysis")
            response = await gateway.complete(prompt)

        with lifecycle.phase(RequestState.EXTRACTING, on_error=RequestState.FAILED):
            analysis = extract_markdown(response)
            missing = find_missing_sections(analysis)
            if missing:
                logger.warning(
                    "Analysis is missing expected headers: %s", ", ".join(missing)
                )
            sections = split_sections(analysis) if self._sectioning else None

        lifecycle.advance(RequestState.READY)
        logger.info("Analysis generated successfully")
        return WorkflowAnalysisResult(analysis=analysis, sections=sections)


class IdeaGenerationService:
    """Produce three categorized AX idea records through a forced tool call."""

    def __init__(
        self,
        gateway_factory: GatewayFactory,
        *,
        enforce_unique_categories: bool = True,
    ) -> None:
        self._gateway_factory = gateway_factory
        self._enforce_unique_categories = enforce_unique_categories

    async def generate(self, payload: Any) -> List[Any]:
        lifecycle = RequestLifecycle("generate-ax-ideas")

        with lifecycle.phase(RequestState.VALIDATING, on_error=RequestState.REJECTED):
            request = validate_idea_request(payload)

        with lifecycle.phase(RequestState.DISPATCHING, on_error=RequestState.FAILED):
            prompt = compose_prompt(request, PromptMode.STRUCTURED)
            gateway = self._gateway_factory()
            logger.info("Calling AI gateway for AX ideas generation")
            response = await gateway.complete(
                prompt,
                tool=build_idea_tool(),
                tool_choice=build_tool_choice(),
            )

        with lifecycle.phase(RequestState.EXTRACTING, on_error=RequestState.FAILED):
            ideas = extract_ideas(response)
            if self._enforce_unique_categories:
                check_idea_categories(ideas)

        lifecycle.advance(RequestState.READY)
        logger.info("Ideas generated successfully")
        return ideas


__all__ = [
    "GatewayFactory",
    "IdeaGenerationService",
    "WorkflowAnalysisResult",
    "WorkflowAnalysisService",
]
