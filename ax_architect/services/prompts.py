"""Prompt templates and the tool declaration sent to the gateway."""

from __future__ import annotations

import copy
from enum import Enum
from textwrap import dedent
from typing import Any

from ax_architect.schemas import PromptPair
from ax_architect.services.validation import IdeaInput, WorkflowInput


class PromptMode(str, Enum):
    NARRATIVE = "narrative"
    STRUCTURED = "structured"


# Header titles of the narrative report, in order. The extractor matches on
# the same tuple.
NARRATIVE_SECTIONS: tuple[str, ...] = (
    "역할 및 책임",
    "기대 효과",
    "핵심 키워드",
    "권장 기술 스택",
)

_SECTION_GUIDANCE: tuple[str, ...] = (
    "List all human roles involved, their responsibilities, and how they interact. "
    "Pay special attention to the user's role and how the solution will support them.",
    "Specific, measurable outcomes and improvements this solution will deliver, "
    "especially for the user's role and department.",
    "5-7 technical and business keywords that define this solution and are relevant "
    "to the user's domain.",
    "Specific technologies, frameworks, and tools with brief justifications. "
    "Consider the user's role when recommending technologies.",
)

IDEA_CATEGORIES: tuple[str, ...] = ("Assistant", "Advisor", "Agent")
IDEA_TOOL_NAME = "generate_ax_ideas"
IDEA_COUNT = 3

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

IDEA_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "ideas": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "title": {"type": "string", "description": "아이디어 제목"},
                    "role": {"type": "string", "enum": list(IDEA_CATEGORIES)},
                    "description": {"type": "string", "description": "솔루션 설명"},
                    "userRole": {"type": "string", "description": "사람의 역할"},
                    "expectedEffect": {"type": "string", "description": "기대 효과 요약"},
                    "effectDetails": {**_STRING_LIST, "description": "기대 효과 세부사항"},
                    "keywords": {**_STRING_LIST, "description": "핵심 키워드"},
                    "technologies": {**_STRING_LIST, "description": "권장 기술"},
                },
                "required": [
                    "title",
                    "role",
                    "description",
                    "userRole",
                    "expectedEffect",
                    "effectDetails",
                    "keywords",
                    "technologies",
                ],
                "additionalProperties": False,
            },
            "minItems": IDEA_COUNT,
            "maxItems": IDEA_COUNT,
        }
    },
    "required": ["ideas"],
    "additionalProperties": False,
}


def section_header(number: int) -> str:
    """Return the exact markdown header line for narrative section ``number``."""
    return f"## {number}. {NARRATIVE_SECTIONS[number - 1]}"


def _narrative_system_instruction() -> str:
    sections = "\n\n".join(
        f"{section_header(index)}\n{guidance}"
        for index, guidance in enumerate(_SECTION_GUIDANCE, start=1)
    )
    intro = (
        "You are an expert solution architect. Analyze the provided workflow and "
        "business process, taking into account the user's specific role and "
        "responsibilities. Generate a comprehensive architecture report in Korean "
        "that is tailored to their position."
    )
    outro = (
        "Format the response in clean markdown with these exact section headers. "
        "Be specific, actionable, and professional. Make the analysis relevant to "
        "the user's specific role and responsibilities."
    )
    return (
        f"{intro}\n\n"
        "Your report MUST include these exact sections with EXACTLY these headers:\n"
        f"{sections}\n\n"
        f"{outro}"
    )


NARRATIVE_SYSTEM_INSTRUCTION = _narrative_system_instruction()

STRUCTURED_SYSTEM_INSTRUCTION = dedent(
    """
    당신은 제조 산업 프로세스에 대한 깊은 지식을 갖춘 전문 AI 전환(AX) 컨설턴트입니다. 당신의 임무는 사용자의 입력을 기반으로 세 가지 뚜렷한 AI 솔루션 아이디어를 생성하는 것입니다. 각 아이디어는 다음 역할 중 하나에 해당해야 합니다:
    - Assistant: 업무 생산성 향상에 중점을 둔 업무 수행 보조.
    - Advisor: 업무 지식을 기반으로 한 분석 및 의사결정 자문.
    - Agent: 목표 지향적인 자율적 의사결정 및 실행.

    각 아이디어는 제목, 역할, 솔루션 설명, 사람의 역할, 기대효과, 기대효과 세부사항(배열), 키워드(배열), 기술(배열)을 포함해야 합니다. 모든 텍스트는 한국어로 작성해야 합니다.
    """
).strip()


def build_workflow_prompt(request: WorkflowInput) -> PromptPair:
    return PromptPair(
        system_instruction=NARRATIVE_SYSTEM_INSTRUCTION,
        user_instruction=f"담당 업무: {request.role}\n\n워크플로우 분석 요청:\n{request.workflow}",
    )


def build_idea_prompt(request: IdeaInput) -> PromptPair:
    user_instruction = (
        "다음 사용자 정보를 기반으로 AX 과제 아이디어 3개를 생성해 주세요. "
        "각 아이디어는 Assistant, Advisor, Agent 역할에 대해 하나씩 만들어야 합니다.\n\n"
        f"- 업무 영역: {request.business_area}\n"
        f"- 현행 업무 고충 및 한계점: {request.pain_points}\n"
        f"- AX 도입을 통한 기대 사항: {request.expectations}"
    )
    return PromptPair(
        system_instruction=STRUCTURED_SYSTEM_INSTRUCTION,
        user_instruction=user_instruction,
    )


def compose_prompt(request: WorkflowInput | IdeaInput, mode: PromptMode) -> PromptPair:
    """Build the prompt pair for ``mode`` from an already validated request."""
    if mode is PromptMode.NARRATIVE:
        if not isinstance(request, WorkflowInput):
            raise TypeError("Narrative prompts require a WorkflowInput")
        return build_workflow_prompt(request)
    if mode is PromptMode.STRUCTURED:
        if not isinstance(request, IdeaInput):
            raise TypeError("Structured prompts require an IdeaInput")
        return build_idea_prompt(request)
    raise ValueError(f"Unsupported prompt mode: {mode!r}")


def build_idea_tool() -> dict[str, Any]:
    """Function declaration whose parameters are the idea output schema."""
    return {
        "type": "function",
        "function": {
            "name": IDEA_TOOL_NAME,
            "description": "Generate 3 AX solution ideas with specific roles",
            "parameters": copy.deepcopy(IDEA_SCHEMA),
        },
    }


def build_tool_choice() -> dict[str, Any]:
    """Pin the model to the idea generation function."""
    return {"type": "function", "function": {"name": IDEA_TOOL_NAME}}


__all__ = [
    "IDEA_CATEGORIES",
    "IDEA_COUNT",
    "IDEA_SCHEMA",
    "IDEA_TOOL_NAME",
    "NARRATIVE_SECTIONS",
    "NARRATIVE_SYSTEM_INSTRUCTION",
    "PromptMode",
    "STRUCTURED_SYSTEM_INSTRUCTION",
    "build_idea_prompt",
    "build_idea_tool",
    "build_tool_choice",
    "build_workflow_prompt",
    "compose_prompt",
    "section_header",
]
