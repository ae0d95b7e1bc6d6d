"""HTTP utilities providing opt-in backoff for rate-limited responses."""

from __future__ import annotations

import asyncio
import logging
from http import HTTPStatus
from typing import Awaitable, Callable

import httpx

logger = logging.getLogger(__name__)


class RetryConfig:
    """Backoff policy applied to 429 responses only.

    ``attempts`` counts the first call, so the default of one means no retry.
    """

    def __init__(self, *, attempts: int = 1, backoff_seconds: float = 1.0) -> None:
        if attempts < 1:
            raise ValueError("attempts must be at least 1")
        self.attempts = attempts
        self.backoff_seconds = backoff_seconds

    def delay_for(self, attempt: int) -> float:
        """Exponential delay before retry number ``attempt`` (1-based)."""
        return self.backoff_seconds * (2 ** (attempt - 1))


async def request_with_retry(
    func: Callable[..., Awaitable[httpx.Response]],
    *args,
    retry_config: RetryConfig | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    **kwargs,
) -> httpx.Response:
    """Issue a request and return the response without raising for status.

    Only a 429 is retried, and only while attempts remain. Every other status,
    and any transport error, goes straight back to the caller.
    """
    config = retry_config or RetryConfig()
    attempt = 1
    while True:
        response = await func(*args, **kwargs)
        if response.status_code != HTTPStatus.TOO_MANY_REQUESTS or attempt >= config.attempts:
            return response
        delay = config.delay_for(attempt)
        logger.warning(
            "Gateway rate limited (attempt %d/%d); retrying in %.1fs.",
            attempt,
            config.attempts,
            delay,
        )
        await response.aclose()
        await sleep(delay)
        attempt += 1


__all__ = ["RetryConfig", "request_with_retry"]
