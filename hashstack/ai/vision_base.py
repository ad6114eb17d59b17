"""Abstract base and mock implementation for vision completion clients."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from hashstack.ai.schema import InferenceRequest, InferenceResponse


class BaseVisionClient(ABC):
    """Abstract base for a completion endpoint that accepts text plus an optional image."""

    @abstractmethod
    def complete(self, request: InferenceRequest) -> InferenceResponse:
        """Send exactly one request and return the full response text. Raises HashstackError subclasses."""
        ...


class MockVisionClient(BaseVisionClient):
    """Returns canned responses in order (the last one repeats). Records every request it receives."""

    DEFAULT_RESPONSE = "mock, test, placeholder"

    def __init__(self, responses: Iterable[str | Exception] | None = None) -> None:
        self._responses: list[str | Exception] = list(responses or []) or [self.DEFAULT_RESPONSE]
        self.requests: list[InferenceRequest] = []

    def complete(self, request: InferenceRequest) -> InferenceResponse:
        self.requests.append(request)
        index = min(len(self.requests), len(self._responses)) - 1
        response = self._responses[index]
        if isinstance(response, Exception):
            raise response
        return InferenceResponse(text=response)
