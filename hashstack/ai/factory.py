"""Factory for vision clients. The credential is passed through per call, never read from config."""

from hashstack.ai.vision_base import BaseVisionClient
from hashstack.core.config import Settings


def get_vision_client(client_name: str, api_key: str, settings: Settings) -> BaseVisionClient:
    """Return a vision client by name ("openai" or "mock")."""
    if client_name == "mock":
        from hashstack.ai.vision_base import MockVisionClient

        return MockVisionClient()
    if client_name == "openai":
        from hashstack.ai.vision_openai import OpenAIVisionClient

        return OpenAIVisionClient(
            api_key,
            endpoint=settings.endpoint,
            timeout=settings.request_timeout,
        )
    raise ValueError(f"Unknown vision client: {client_name}")
