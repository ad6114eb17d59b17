"""Hashtag inference: build the request, make the call, parse; optional label call."""

import logging

from hashstack.ai.prompts import LABEL_INSTRUCTION, LABEL_MAX_LENGTH, LABEL_MAX_TOKENS, PromptProfile
from hashstack.ai.schema import ImageInput, InferenceRequest
from hashstack.ai.vision_base import BaseVisionClient
from hashstack.core.config import Settings
from hashstack.core.errors import HashstackError
from hashstack.pipeline.parsing import parse_hashtags

_log = logging.getLogger(__name__)


def _clean_label(text: str) -> str:
    """First non-empty line, without quotes or a leading '#', bounded in length."""
    for line in text.splitlines():
        line = line.strip().strip("\"'`").lstrip("#").strip()
        if line:
            return line[:LABEL_MAX_LENGTH].rstrip()
    return ""


class HashtagInference:
    """One completion call per generate(); label derivation is a separate, non-fatal call."""

    def __init__(self, client: BaseVisionClient, settings: Settings) -> None:
        self.client = client
        self.settings = settings

    def build_request(self, image: ImageInput, profile: PromptProfile) -> InferenceRequest:
        return InferenceRequest(
            model=self.settings.model,
            instruction=profile.instruction,
            image_url=image.data_uri(),
            max_tokens=profile.max_tokens,
            temperature=profile.temperature,
            detail=profile.detail,
        )

    def generate(self, image: ImageInput, profile: PromptProfile) -> tuple[str, list[str]]:
        """Return (raw response text, parsed tags). Raises HashstackError; NoHashtagsFound when nothing parses."""
        _log.info("Requesting hashtags (%s profile, %d byte image)", profile.name, image.size)
        response = self.client.complete(self.build_request(image, profile))
        tags = parse_hashtags(
            response.text,
            delimiter=profile.delimiter,
            max_count=profile.max_count,
            max_length=self.settings.max_tag_length,
        )
        _log.info("Parsed %d hashtags", len(tags))
        return response.text, tags

    def derive_label(self, tags: list[str]) -> str:
        """Ask the model for a category label. Any failure yields an empty label; hashtags are unaffected."""
        request = InferenceRequest(
            model=self.settings.model,
            instruction=LABEL_INSTRUCTION.format(hashtags=", ".join(tags)),
            max_tokens=LABEL_MAX_TOKENS,
        )
        try:
            response = self.client.complete(request)
        except HashstackError as e:
            _log.warning("Label request failed, continuing without a label: %s", e.user_message)
            return ""
        return _clean_label(response.text)
