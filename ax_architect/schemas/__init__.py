"""Public schema exports."""

from .analysis import (
    AnalysisSection,
    ErrorResponse,
    IdeaGenerationResponse,
    PromptPair,
    WorkflowAnalysisResponse,
)

__all__ = [
    "AnalysisSection",
    "ErrorResponse",
    "IdeaGenerationResponse",
    "PromptPair",
    "WorkflowAnalysisResponse",
]
