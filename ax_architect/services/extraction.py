"""Pull usable results out of raw gateway responses.

All functions here are pure: the same response always yields the same
result or the same error.
"""

from __future__ import annotations

import json
import logging
import re
from collections import Counter
from typing import Any, Dict, List, Optional

from ax_architect.core.errors import NO_ANALYSIS_MESSAGE, NO_IDEAS_MESSAGE, ExtractionFailure
from ax_architect.schemas import AnalysisSection
from ax_architect.services.prompts import (
    IDEA_CATEGORIES,
    NARRATIVE_SECTIONS,
    section_header,
)

logger = logging.getLogger(__name__)

# Section N runs from its header line to the next numbered header or the end.
_SECTION_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(
        rf"^##[ \t]*{number}\.[^\n]*\n?(.*?)(?=^##[ \t]*\d+\.|\Z)",
        re.DOTALL | re.MULTILINE,
    )
    for number in range(1, len(NARRATIVE_SECTIONS) + 1)
)


def _first_message(response: Any) -> Optional[Dict[str, Any]]:
    """Return ``choices[0].message`` or ``None`` when the shape is off."""
    if not isinstance(response, dict):
        return None
    choices = response.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    return message if isinstance(message, dict) else None


def extract_markdown(response: Any) -> str:
    """Return the free-text content of the first choice, unmodified."""
    message = _first_message(response)
    content = message.get("content") if message else None
    if not isinstance(content, str) or not content.strip():
        logger.error("No analysis content in response")
        raise ExtractionFailure(NO_ANALYSIS_MESSAGE)
    return content


def split_sections(markdown: str) -> List[AnalysisSection]:
    """Split a narrative report into its numbered sections.

    Sections come back in canonical order 1 to 4 whatever order the model
    wrote them in. Missing or empty sections are left out.
    """
    sections: List[AnalysisSection] = []
    for number, (title, pattern) in enumerate(
        zip(NARRATIVE_SECTIONS, _SECTION_PATTERNS), start=1
    ):
        match = pattern.search(markdown)
        if not match:
            continue
        content = match.group(1).strip()
        if not content:
            continue
        sections.append(AnalysisSection(number=number, title=title, content=content))
    return sections


def find_missing_sections(markdown: str) -> List[str]:
    """Return the expected header lines that do not appear verbatim."""
    present = {line.strip() for line in markdown.splitlines()}
    return [
        section_header(number)
        for number in range(1, len(NARRATIVE_SECTIONS) + 1)
        if section_header(number) not in present
    ]


def _tool_arguments(response: Any) -> Any:
    message = _first_message(response)
    tool_calls = message.get("tool_calls") if message else None
    if not isinstance(tool_calls, list) or not tool_calls:
        return None
    call = tool_calls[0]
    function = call.get("function") if isinstance(call, dict) else None
    if not isinstance(function, dict):
        return None
    return function.get("arguments")


def extract_ideas(response: Any) -> List[Any]:
    """Decode the forced tool call and return its ``ideas`` array verbatim."""
    arguments = _tool_arguments(response)
    if not arguments:
        logger.error("No tool call in response")
        raise ExtractionFailure(NO_IDEAS_MESSAGE)

    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments)
        except json.JSONDecodeError as exc:
            logger.error("Tool call arguments are not valid JSON: %s", exc)
            raise ExtractionFailure(NO_IDEAS_MESSAGE) from exc

    ideas = arguments.get("ideas") if isinstance(arguments, dict) else None
    if not isinstance(ideas, list):
        logger.error("Tool call arguments carry no ideas array")
        raise ExtractionFailure(NO_IDEAS_MESSAGE)
    return ideas


def _idea_role(idea: Any) -> Optional[str]:
    role = idea.get("role") if isinstance(idea, dict) else None
    return role if isinstance(role, str) else None


def check_idea_categories(ideas: List[Any]) -> None:
    """Require one idea per category: Assistant, Advisor, and Agent."""
    roles = [_idea_role(idea) for idea in ideas]
    if Counter(roles) != Counter(IDEA_CATEGORIES):
        logger.warning("Idea categories do not cover each role once: %s", roles)
        raise ExtractionFailure(NO_IDEAS_MESSAGE)


__all__ = [
    "check_idea_categories",
    "extract_ideas",
    "extract_markdown",
    "find_missing_sections",
    "split_sections",
]
