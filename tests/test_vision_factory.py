"""Tests for the vision client factory (get_vision_client)."""

import pytest

from hashstack.ai.factory import get_vision_client
from hashstack.ai.schema import InferenceRequest
from hashstack.ai.vision_base import BaseVisionClient, MockVisionClient
from hashstack.ai.vision_openai import OpenAIVisionClient
from hashstack.core.config import Settings

pytestmark = [pytest.mark.fast]


def test_get_vision_client_mock_returns_mock_client():
    """get_vision_client('mock') returns a MockVisionClient with the default canned text."""
    client = get_vision_client("mock", "unused", Settings())
    assert isinstance(client, MockVisionClient)
    assert isinstance(client, BaseVisionClient)
    assert client.complete(InferenceRequest(model="m", instruction="x")).text == "mock, test, placeholder"


def test_get_vision_client_openai_uses_settings_endpoint():
    settings = Settings(endpoint="http://localhost:9999/v1/chat/completions", request_timeout=5)
    client = get_vision_client("openai", "sk-test", settings)
    assert isinstance(client, OpenAIVisionClient)
    assert client._endpoint == "http://localhost:9999/v1/chat/completions"
    assert client._timeout == 5


def test_get_vision_client_unknown_raises():
    """get_vision_client with unknown name raises ValueError."""
    with pytest.raises(ValueError, match=r"Unknown vision client: unknown"):
        get_vision_client("unknown", "sk-test", Settings())


def test_mock_client_replays_responses_and_raises_exceptions():
    err = RuntimeError("boom")
    client = MockVisionClient(["first", err])
    request = InferenceRequest(model="m", instruction="x")
    assert client.complete(request).text == "first"
    with pytest.raises(RuntimeError):
        client.complete(request)
    with pytest.raises(RuntimeError):
        client.complete(request)
    assert len(client.requests) == 3
