"""Pydantic data contracts for a hashtag run: image in, request out, response back."""

import base64
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ImageInput(BaseModel):
    """Image bytes plus MIME type, from a browser upload or a canvas export."""

    data: bytes
    mime_type: str
    source: Literal["upload", "canvas"] = "upload"
    filename: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)

    def b64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    def data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.b64()}"


class InferenceRequest(BaseModel):
    """One outbound chat completion. Built fresh per call and never mutated after send."""

    model_config = ConfigDict(frozen=True)

    model: str
    instruction: str
    image_url: str | None = None
    max_tokens: int = 150
    temperature: float | None = None
    detail: Literal["low", "high", "auto"] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Chat completions JSON body: one user message with a text part and an optional image part."""
        content: list[dict[str, Any]] = [{"type": "text", "text": self.instruction}]
        if self.image_url is not None:
            image_part: dict[str, Any] = {"url": self.image_url}
            if self.detail is not None:
                image_part["detail"] = self.detail
            content.append({"type": "image_url", "image_url": image_part})
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [{"role": "user", "content": content}],
            "max_tokens": self.max_tokens,
        }
        if self.temperature is not None:
            payload["temperature"] = self.temperature
        return payload


class InferenceResponse(BaseModel):
    """Raw provider text; opaque until parsed."""

    text: str
    status: int = 200


class PipelineRun(BaseModel):
    """State handed from stage to stage within one run (acquire -> infer -> parse -> label -> render)."""

    profile: str
    image: ImageInput | None = None
    raw_text: str | None = None
    tags: list[str] = Field(default_factory=list)
    label: str = ""
    rendered: int = 0
    error: str | None = None
    error_kind: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
