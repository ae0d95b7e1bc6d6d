try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

import pytest

from ax_architect.core.errors import InputValidationError
from ax_architect.services.validation import (
    IDEA_FIELD_LENGTH_MESSAGE,
    MISSING_IDEA_FIELDS_MESSAGE,
    MISSING_WORKFLOW_FIELDS_MESSAGE,
    ROLE_LENGTH_MESSAGE,
    WORKFLOW_LENGTH_MESSAGE,
    IdeaInput,
    WorkflowInput,
    validate_idea_request,
    validate_workflow_request,
)

VALID_WORKFLOW = "검사 결과를 취합해 주간 보고서를 작성합니다."


def test_workflow_request_is_trimmed():
    result = validate_workflow_request(
        {"role": "  QA 엔지니어 ", "workflow": f"\n{VALID_WORKFLOW}  "}
    )

    assert result == WorkflowInput(role="QA 엔지니어", workflow=VALID_WORKFLOW)


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        "role=QA",
        {},
        {"role": "QA"},
        {"workflow": VALID_WORKFLOW},
        {"role": "", "workflow": VALID_WORKFLOW},
        {"role": 42, "workflow": VALID_WORKFLOW},
        {"role": "QA", "workflow": ["not", "text"]},
    ],
)
def test_workflow_request_missing_fields(payload):
    with pytest.raises(InputValidationError) as excinfo:
        validate_workflow_request(payload)

    assert excinfo.value.message == MISSING_WORKFLOW_FIELDS_MESSAGE
    assert excinfo.value.status_code == 400


@pytest.mark.parametrize("role", ["   ", "\t\n", "a" * 201, " " + "a" * 200])
def test_role_outside_bounds_is_rejected(role):
    with pytest.raises(InputValidationError) as excinfo:
        validate_workflow_request({"role": role, "workflow": VALID_WORKFLOW})

    assert excinfo.value.violations == [ROLE_LENGTH_MESSAGE]


@pytest.mark.parametrize("role", ["a", "a" * 200, "  a  "])
def test_role_inside_bounds_is_accepted(role):
    result = validate_workflow_request({"role": role, "workflow": VALID_WORKFLOW})

    assert result.role == role.strip()


@pytest.mark.parametrize(
    "workflow",
    ["short", "123456789", "   123456789   ", "a" * 2001, "a" * 1995 + " " * 10],
)
def test_workflow_outside_bounds_is_rejected(workflow):
    with pytest.raises(InputValidationError) as excinfo:
        validate_workflow_request({"role": "QA", "workflow": workflow})

    assert excinfo.value.violations == [WORKFLOW_LENGTH_MESSAGE]


@pytest.mark.parametrize("workflow", ["1234567890", "a" * 2000, "  1234567890  "])
def test_workflow_inside_bounds_is_accepted(workflow):
    result = validate_workflow_request({"role": "QA", "workflow": workflow})

    assert result.workflow == workflow.strip()


def test_all_violations_are_collected_and_first_is_surfaced():
    with pytest.raises(InputValidationError) as excinfo:
        validate_workflow_request({"role": "a" * 300, "workflow": "short"})

    assert excinfo.value.violations == [ROLE_LENGTH_MESSAGE, WORKFLOW_LENGTH_MESSAGE]
    assert str(excinfo.value) == ROLE_LENGTH_MESSAGE


def test_client_validity_flag_is_ignored():
    with pytest.raises(InputValidationError):
        validate_workflow_request({"role": "QA", "workflow": "short", "valid": True})


def test_idea_request_uses_camel_case_wire_names():
    result = validate_idea_request(
        {"businessArea": " QA ", "painPoints": "수작업 검사", "expectations": "자동화 "}
    )

    assert result == IdeaInput(
        business_area="QA", pain_points="수작업 검사", expectations="자동화"
    )


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {"businessArea": "QA", "painPoints": "수작업"},
        {"businessArea": "QA", "painPoints": "수작업", "expectations": "   "},
        {"businessArea": "", "painPoints": "수작업", "expectations": "자동화"},
        {"business_area": "QA", "pain_points": "수작업", "expectations": "자동화"},
    ],
)
def test_idea_request_requires_every_field(payload):
    with pytest.raises(InputValidationError) as excinfo:
        validate_idea_request(payload)

    assert excinfo.value.message == MISSING_IDEA_FIELDS_MESSAGE


def test_idea_request_caps_field_length():
    with pytest.raises(InputValidationError) as excinfo:
        validate_idea_request(
            {"businessArea": "QA", "painPoints": "a" * 2001, "expectations": "자동화"}
        )

    assert excinfo.value.message == IDEA_FIELD_LENGTH_MESSAGE


def test_validation_error_requires_a_violation():
    with pytest.raises(ValueError):
        InputValidationError([])
