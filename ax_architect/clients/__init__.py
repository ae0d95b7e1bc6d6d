"""Expose constructed client wrappers."""

from .gateway import GatewayClient, build_request_body

__all__ = [
    "GatewayClient",
    "build_request_body",
]
