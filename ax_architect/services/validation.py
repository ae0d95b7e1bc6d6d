"""Server-side validation of raw request bodies.

These checks run on every request regardless of what the browser already
verified, and always before a gateway client is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping

from ax_architect.core.errors import InputValidationError


ROLE_MAX_LENGTH = 200
WORKFLOW_MIN_LENGTH = 10
WORKFLOW_MAX_LENGTH = 2000
IDEA_FIELD_MAX_LENGTH = 2000

MISSING_WORKFLOW_FIELDS_MESSAGE = "담당 업무와 워크플로우를 모두 입력해주세요"
ROLE_LENGTH_MESSAGE = "담당 업무는 1-200자 사이여야 합니다"
WORKFLOW_LENGTH_MESSAGE = "워크플로우는 10-2000자 사이여야 합니다"
MISSING_IDEA_FIELDS_MESSAGE = "모든 필드를 입력해주세요"
IDEA_FIELD_LENGTH_MESSAGE = "각 항목은 2000자 이내로 입력해주세요"

# Wire name -> attribute name for the idea generation body.
IDEA_FIELDS = (
    ("businessArea", "business_area"),
    ("painPoints", "pain_points"),
    ("expectations", "expectations"),
)


@dataclass(frozen=True, slots=True)
class WorkflowInput:
    """Trimmed role and workflow description."""

    role: str
    workflow: str


@dataclass(frozen=True, slots=True)
class IdeaInput:
    """Trimmed business area, pain points, and expectations."""

    business_area: str
    pain_points: str
    expectations: str


def _present(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


def validate_workflow_request(payload: Any) -> WorkflowInput:
    """Check a narrative analysis body and return its trimmed fields.

    Length ceilings apply to the raw value, the lower bounds to the trimmed one.
    """
    if not isinstance(payload, Mapping):
        raise InputValidationError([MISSING_WORKFLOW_FIELDS_MESSAGE])

    role = payload.get("role")
    workflow = payload.get("workflow")
    if not (_present(role) and _present(workflow)):
        raise InputValidationError([MISSING_WORKFLOW_FIELDS_MESSAGE])

    violations: List[str] = []
    trimmed_role = role.strip()
    if not trimmed_role or len(role) > ROLE_MAX_LENGTH:
        violations.append(ROLE_LENGTH_MESSAGE)

    trimmed_workflow = workflow.strip()
    if len(trimmed_workflow) < WORKFLOW_MIN_LENGTH or len(workflow) > WORKFLOW_MAX_LENGTH:
        violations.append(WORKFLOW_LENGTH_MESSAGE)

    if violations:
        raise InputValidationError(violations)
    return WorkflowInput(role=trimmed_role, workflow=trimmed_workflow)


def validate_idea_request(payload: Any) -> IdeaInput:
    """Check an idea generation body and return its trimmed fields."""
    if not isinstance(payload, Mapping):
        raise InputValidationError([MISSING_IDEA_FIELDS_MESSAGE])

    values = {}
    for wire_name, attribute in IDEA_FIELDS:
        value = payload.get(wire_name)
        if not isinstance(value, str) or not value.strip():
            raise InputValidationError([MISSING_IDEA_FIELDS_MESSAGE])
        values[attribute] = value

    if any(len(value) > IDEA_FIELD_MAX_LENGTH for value in values.values()):
        raise InputValidationError([IDEA_FIELD_LENGTH_MESSAGE])

    return IdeaInput(**{key: value.strip() for key, value in values.items()})


__all__ = [
    "IDEA_FIELD_LENGTH_MESSAGE",
    "IDEA_FIELD_MAX_LENGTH",
    "IdeaInput",
    "MISSING_IDEA_FIELDS_MESSAGE",
    "MISSING_WORKFLOW_FIELDS_MESSAGE",
    "ROLE_LENGTH_MESSAGE",
    "ROLE_MAX_LENGTH",
    "WORKFLOW_LENGTH_MESSAGE",
    "WORKFLOW_MAX_LENGTH",
    "WORKFLOW_MIN_LENGTH",
    "WorkflowInput",
    "validate_idea_request",
    "validate_workflow_request",
]
