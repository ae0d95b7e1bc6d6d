"""Service layer exports."""

from .analysis import IdeaGenerationService, WorkflowAnalysisResult, WorkflowAnalysisService
from .lifecycle import LifecycleError, RequestLifecycle, RequestState
from .validation import IdeaInput, WorkflowInput

__all__ = [
    "IdeaGenerationService",
    "IdeaInput",
    "LifecycleError",
    "RequestLifecycle",
    "RequestState",
    "WorkflowAnalysisResult",
    "WorkflowAnalysisService",
    "WorkflowInput",
]
