"""
Error taxonomy shared by the validation, gateway, and extraction layers.

Every error carries the fixed user-facing message and the HTTP status the
API boundary responds with. Upstream details are logged where they are
raised and never travel in the message.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Sequence


RATE_LIMITED_MESSAGE = "사용량 한도를 초과했습니다. 잠시 후 다시 시도해주세요."
CREDITS_EXHAUSTED_MESSAGE = "크레딧이 부족합니다. 워크스페이스에 크레딧을 추가해주세요."
GENERATION_FAILED_MESSAGE = "AI 분석 중 오류가 발생했습니다"
NOT_CONFIGURED_MESSAGE = "AI service not configured"
NO_ANALYSIS_MESSAGE = "분석 결과를 생성하지 못했습니다"
NO_IDEAS_MESSAGE = "아이디어를 생성하지 못했습니다"
UNKNOWN_ERROR_MESSAGE = "알 수 없는 오류가 발생했습니다"


class ServiceError(RuntimeError):
    """Base class for errors that map onto an HTTP error response."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message: str = UNKNOWN_ERROR_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InputValidationError(ServiceError):
    """Raised when request fields violate the input constraints."""

    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, violations: Sequence[str]) -> None:
        if not violations:
            raise ValueError("InputValidationError requires at least one violation")
        self.violations = list(violations)
        super().__init__(self.violations[0])


class UpstreamRateLimited(ServiceError):
    """The gateway answered 429."""

    status_code = HTTPStatus.TOO_MANY_REQUESTS
    default_message = RATE_LIMITED_MESSAGE


class UpstreamCreditsExhausted(ServiceError):
    """The gateway answered 402."""

    status_code = HTTPStatus.PAYMENT_REQUIRED
    default_message = CREDITS_EXHAUSTED_MESSAGE


class UpstreamGenerationFailure(ServiceError):
    """Any other gateway fault, including transport errors."""

    default_message = GENERATION_FAILED_MESSAGE


class ConfigurationError(ServiceError):
    """The gateway credential is missing."""

    default_message = NOT_CONFIGURED_MESSAGE


class ExtractionFailure(ServiceError):
    """The gateway replied but without usable content or tool call."""

    default_message = NO_ANALYSIS_MESSAGE


__all__ = [
    "CREDITS_EXHAUSTED_MESSAGE",
    "ConfigurationError",
    "ExtractionFailure",
    "GENERATION_FAILED_MESSAGE",
    "InputValidationError",
    "NOT_CONFIGURED_MESSAGE",
    "NO_ANALYSIS_MESSAGE",
    "NO_IDEAS_MESSAGE",
    "RATE_LIMITED_MESSAGE",
    "ServiceError",
    "UNKNOWN_ERROR_MESSAGE",
    "UpstreamCreditsExhausted",
    "UpstreamGenerationFailure",
    "UpstreamRateLimited",
]
