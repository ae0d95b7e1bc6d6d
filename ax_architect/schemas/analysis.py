"""
Pydantic models exchanged between the prompt layer, the gateway, and the API.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PromptPair(BaseModel):
    """System and user instructions for one gateway call."""

    model_config = ConfigDict(frozen=True)

    system_instruction: str = Field(..., description="Output contract for the model.")
    user_instruction: str = Field(..., description="Labeled user-supplied values.")


class AnalysisSection(BaseModel):
    """One numbered section of a narrative architecture report."""

    number: int = Field(..., ge=1, le=4)
    title: str = Field(..., description="Header text without the numbering.")
    content: str = Field(..., description="Trimmed markdown body of the section.")


class WorkflowAnalysisResponse(BaseModel):
    """Successful narrative analysis."""

    analysis: str = Field(..., description="Markdown report, unmodified.")
    sections: Optional[List[AnalysisSection]] = Field(
        None,
        description="Report split into its numbered sections when sectioning is enabled.",
    )


class IdeaGenerationResponse(BaseModel):
    """Successful structured idea generation."""

    ideas: List[Any] = Field(
        ...,
        description="Idea records exactly as produced by the tool call.",
    )


class ErrorResponse(BaseModel):
    """Error envelope used for every non-2xx answer."""

    error: str


__all__ = [
    "AnalysisSection",
    "ErrorResponse",
    "IdeaGenerationResponse",
    "PromptPair",
    "WorkflowAnalysisResponse",
]
