"""Pytest configuration shared across the suite."""

import pytest

from ax_architect.core.config import GatewaySettings


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture
def gateway_settings() -> GatewaySettings:
    return GatewaySettings(
        api_key="test-gateway-key",
        base_url="https://gateway.test/v1",
        model="test/model",
    )
