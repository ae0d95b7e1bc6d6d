"""Client wrapper for the hosted chat-completion gateway."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

import httpx

from ax_architect.core.config import GatewaySettings
from ax_architect.core.errors import (
    ConfigurationError,
    UpstreamCreditsExhausted,
    UpstreamGenerationFailure,
    UpstreamRateLimited,
)
from ax_architect.schemas import PromptPair
from ax_architect.utils.http import RetryConfig, request_with_retry

logger = logging.getLogger(__name__)

# Upstream bodies can be large HTML error pages; keep log lines bounded.
_MAX_LOGGED_BODY = 2000


def build_request_body(
    prompt: PromptPair,
    *,
    model: str,
    tool: dict[str, Any] | None = None,
    tool_choice: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble the chat-completion payload for one prompt pair."""
    body: dict[str, Any] = {
        "model": model,
        "messages": [
            {"role": "system", "content": prompt.system_instruction},
            {"role": "user", "content": prompt.user_instruction},
        ],
    }
    if tool is not None:
        body["tools"] = [tool]
        if tool_choice is not None:
            body["tool_choice"] = tool_choice
    return body


class GatewayClient:
    """Issue single, blocking chat-completion calls against the gateway."""

    def __init__(
        self,
        settings: GatewaySettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not settings.is_configured:
            logger.error("LOVABLE_API_KEY not configured")
            raise ConfigurationError()
        self._settings = settings
        self._transport = transport
        self._retry_config = RetryConfig(
            attempts=settings.rate_limit_retries + 1,
            backoff_seconds=settings.retry_backoff_seconds,
        )

    @property
    def endpoint(self) -> str:
        return f"{self._settings.base_url}/chat/completions"

    async def complete(
        self,
        prompt: PromptPair,
        *,
        tool: dict[str, Any] | None = None,
        tool_choice: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send the prompt and return the decoded gateway response.

        Non-2xx statuses are mapped onto the service error taxonomy. The raw
        upstream body is logged here and never attached to the raised error.
        """
        body = build_request_body(
            prompt,
            model=self._settings.model,
            tool=tool,
            tool_choice=tool_choice,
        )
        headers = {
            "Authorization": f"Bearer {self._settings.api_key}",
            "Content-Type": "application/json",
        }

        async with httpx.AsyncClient(
            timeout=self._settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                response = await request_with_retry(
                    client.post,
                    self.endpoint,
                    json=body,
                    headers=headers,
                    retry_config=self._retry_config,
                )
            except httpx.HTTPError as exc:
                logger.error("Gateway request failed: %s", exc)
                raise UpstreamGenerationFailure() from exc

        if not response.is_success:
            logger.error(
                "Gateway error: %s %s",
                response.status_code,
                response.text[:_MAX_LOGGED_BODY],
            )
            if response.status_code == HTTPStatus.TOO_MANY_REQUESTS:
                raise UpstreamRateLimited()
            if response.status_code == HTTPStatus.PAYMENT_REQUIRED:
                raise UpstreamCreditsExhausted()
            raise UpstreamGenerationFailure()

        try:
            payload = response.json()
        except ValueError as exc:
            logger.error("Gateway returned a non-JSON body: %s", response.text[:_MAX_LOGGED_BODY])
            raise UpstreamGenerationFailure() from exc

        if not isinstance(payload, dict):
            logger.error("Gateway returned unexpected JSON type: %s", type(payload).__name__)
            raise UpstreamGenerationFailure()
        return payload


__all__ = ["GatewayClient", "build_request_body"]
