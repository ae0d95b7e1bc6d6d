try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import pytest
from pydantic import ValidationError

from ax_architect.services.prompts import (
    IDEA_CATEGORIES,
    IDEA_SCHEMA,
    IDEA_TOOL_NAME,
    NARRATIVE_SECTIONS,
    PromptMode,
    build_idea_tool,
    build_tool_choice,
    compose_prompt,
    section_header,
)
from ax_architect.services.validation import IdeaInput, WorkflowInput


def test_narrative_prompt_carries_every_header_in_order():
    prompt = compose_prompt(
        WorkflowInput(role="QA 엔지니어", workflow="검사 결과를 취합합니다."),
        PromptMode.NARRATIVE,
    )

    positions = [prompt.system_instruction.index(section_header(n)) for n in range(1, 5)]
    assert positions == sorted(positions)
    assert section_header(1) == "## 1. 역할 및 책임"
    assert section_header(4) == "## 4. 권장 기술 스택"
    assert len(NARRATIVE_SECTIONS) == 4


def test_narrative_user_instruction_is_labeled_concatenation():
    prompt = compose_prompt(
        WorkflowInput(role="QA 엔지니어", workflow="검사 결과를 취합합니다."),
        PromptMode.NARRATIVE,
    )

    assert prompt.user_instruction == (
        "담당 업무: QA 엔지니어\n\n워크플로우 분석 요청:\n검사 결과를 취합합니다."
    )


def test_prompts_are_deterministic_and_frozen():
    request = IdeaInput(business_area="QA", pain_points="수작업", expectations="자동화")

    first = compose_prompt(request, PromptMode.STRUCTURED)
    second = compose_prompt(request, PromptMode.STRUCTURED)

    assert first == second
    with pytest.raises(ValidationError):
        first.user_instruction = "changed"


def test_structured_user_instruction_lists_all_inputs():
    prompt = compose_prompt(
        IdeaInput(business_area="QA", pain_points="수작업 검사", expectations="불량 예측"),
        PromptMode.STRUCTURED,
    )

    assert "- 업무 영역: QA" in prompt.user_instruction
    assert "- 현행 업무 고충 및 한계점: 수작업 검사" in prompt.user_instruction
    assert "- AX 도입을 통한 기대 사항: 불량 예측" in prompt.user_instruction
    for category in IDEA_CATEGORIES:
        assert category in prompt.system_instruction


def test_mode_and_input_must_match():
    with pytest.raises(TypeError):
        compose_prompt(
            IdeaInput(business_area="QA", pain_points="a", expectations="b"),
            PromptMode.NARRATIVE,
        )
    with pytest.raises(TypeError):
        compose_prompt(WorkflowInput(role="QA", workflow="1234567890"), PromptMode.STRUCTURED)


def test_tool_declaration_pins_three_ideas():
    tool = build_idea_tool()
    ideas = tool["function"]["parameters"]["properties"]["ideas"]

    assert tool["type"] == "function"
    assert tool["function"]["name"] == IDEA_TOOL_NAME
    assert ideas["minItems"] == ideas["maxItems"] == 3
    assert ideas["items"]["properties"]["role"]["enum"] == ["Assistant", "Advisor", "Agent"]
    assert ideas["items"]["additionalProperties"] is False
    assert build_tool_choice() == {"type": "function", "function": {"name": IDEA_TOOL_NAME}}


def test_tool_declaration_does_not_share_the_schema():
    tool = build_idea_tool()
    tool["function"]["parameters"]["properties"]["ideas"]["maxItems"] = 99

    assert IDEA_SCHEMA["properties"]["ideas"]["maxItems"] == 3
