"""Infrastructure adapters for AI summaries."""

from .gateway import AIGatewayClient, create_ai_gateway_client

__all__ = ["AIGatewayClient", "create_ai_gateway_client"]
