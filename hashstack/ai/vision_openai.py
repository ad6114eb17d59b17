"""Vision client for the OpenAI chat completions endpoint.

The bearer credential is supplied by the user per session and only ever lives on the
requests.Session headers; it is never logged or persisted. Exactly one POST per call,
no retries: failures surface immediately as HashstackError subclasses.
"""

import logging

import requests

from hashstack.ai.schema import InferenceRequest, InferenceResponse
from hashstack.ai.vision_base import BaseVisionClient
from hashstack.core.config import DEFAULT_ENDPOINT
from hashstack.core.errors import AuthError, ProviderError, RateLimited, TransportError

_log = logging.getLogger(__name__)


def _error_detail(resp: requests.Response) -> str:
    """Provider error text: error.message from a JSON body when present, else the raw body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        err = body.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            return err["message"]
    return resp.text


def _extract_content(data: object) -> str | None:
    """Return choices[0].message.content, or None when the body has no usable text."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if isinstance(content, list):
        # Some models return content parts instead of a plain string.
        content = "".join(p.get("text", "") for p in content if isinstance(p, dict))
    return content if isinstance(content, str) else None


class OpenAIVisionClient(BaseVisionClient):
    """Calls a chat completions endpoint with a text part and a base64 image part."""

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._timeout = timeout
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key.strip()}",
            }
        )

    def _post(self, json_payload: dict) -> requests.Response:
        try:
            return self._session.post(self._endpoint, json=json_payload, timeout=self._timeout)
        except requests.RequestException as e:
            _log.warning("Completion request failed before a response: %s", type(e).__name__)
            raise TransportError(str(e)) from e

    def complete(self, request: InferenceRequest) -> InferenceResponse:
        resp = self._post(request.to_payload())
        _log.debug("Completion response status: %s", resp.status_code)
        if resp.status_code == 401:
            raise AuthError()
        if resp.status_code == 429:
            raise RateLimited()
        if not 200 <= resp.status_code < 300:
            detail = _error_detail(resp) or f"API Error: {resp.status_code}"
            _log.warning("Completion endpoint returned %s", resp.status_code)
            raise ProviderError(resp.status_code, detail)
        try:
            data = resp.json()
        except ValueError as e:
            raise ProviderError(resp.status_code, "Response was not valid JSON") from e
        content = _extract_content(data)
        if content is None:
            raise ProviderError(resp.status_code, "No content received from provider")
        return InferenceResponse(text=content.strip(), status=resp.status_code)
