"""Web page shell: one HTML page plus a JSON endpoint that runs the hashtag pipeline."""

import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Literal

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel

from hashstack.ai.factory import get_vision_client
from hashstack.ai.prompts import VIEW_PROFILE
from hashstack.ai.schema import ImageInput
from hashstack.ai.vision_base import BaseVisionClient
from hashstack.core.config import Settings, get_config
from hashstack.core.errors import http_status_for
from hashstack.pipeline.acquisition import acquire_upload, decode_data_uri
from hashstack.pipeline.inference import HashtagInference
from hashstack.pipeline.labeling import CATEGORY_TAXONOMY
from hashstack.pipeline.runner import HashtagPipeline
from hashstack.presentation.view_model import HashtagViewState, StackPreview, ViewModelAdapter, stack_preview

_log = logging.getLogger(__name__)

ClientFactory = Callable[[str], BaseVisionClient]


def _get_settings() -> Settings:
    return get_config()


@lru_cache(maxsize=1)
def _get_client_factory() -> ClientFactory:
    cfg = get_config()

    def factory(api_key: str) -> BaseVisionClient:
        return get_vision_client(cfg.vision_client, api_key, cfg)

    return factory


app = FastAPI(title="Hashstack")

templates_dir = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(templates_dir))


class HashtagRequestIn(BaseModel):
    image: str  # data URI from FileReader.readAsDataURL, or bare base64
    filename: str | None = None
    api_key: str = ""
    label_mode: Literal["heuristic", "model", "none"] | None = None


class CategoryOut(BaseModel):
    name: str
    keywords: list[str]


class ClipboardOut(BaseModel):
    """Exact text each copy control writes: one entry per chip, the label card, and "copy all"."""

    tags: list[str]
    label: str
    all_tags: str


class HashtagViewOut(HashtagViewState):
    stack: StackPreview | None = None
    clipboard: ClipboardOut


def _view_out(state: HashtagViewState, adapter: ViewModelAdapter) -> HashtagViewOut:
    return HashtagViewOut(
        **state.model_dump(),
        stack=stack_preview(state),
        clipboard=ClipboardOut(
            tags=[adapter.copy_tag(tag) for tag in state.tags],
            label=adapter.copy_label(state),
            all_tags=adapter.copy_all(state),
        ),
    )


@app.get("/", response_class=HTMLResponse)
def index(request: Request, settings: Settings = Depends(_get_settings)) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "max_upload_mb": settings.max_upload_bytes // (1024 * 1024),
            "max_count": VIEW_PROFILE.max_count,
        },
    )


@app.get("/api/taxonomy", response_model=list[CategoryOut])
def api_taxonomy() -> list[CategoryOut]:
    """Label categories in tie-break order."""
    return [CategoryOut(name=name, keywords=list(keywords)) for name, keywords in CATEGORY_TAXONOMY]


@app.post("/api/hashtags", response_model=HashtagViewOut)
def api_hashtags(
    body: HashtagRequestIn,
    settings: Settings = Depends(_get_settings),
    client_factory: ClientFactory = Depends(_get_client_factory),
) -> HashtagViewOut:
    """Run the view pipeline on one uploaded image and return the resulting view state."""
    api_key = body.api_key.strip()
    if not api_key:
        raise HTTPException(status_code=400, detail="Please enter your OpenAI API key")

    def acquire() -> ImageInput:
        data, mime_type = decode_data_uri(body.image)
        return acquire_upload(
            data,
            mime_type,
            filename=body.filename,
            max_bytes=settings.max_upload_bytes,
        )

    adapter = ViewModelAdapter()
    pipeline = HashtagPipeline(
        HashtagInference(client_factory(api_key), settings),
        adapter,
        VIEW_PROFILE,
        label_mode=body.label_mode or settings.label_mode,
    )
    state = HashtagViewState()
    run = pipeline.run(acquire, state)
    if run is None:
        raise HTTPException(status_code=409, detail="A request is already in progress")
    if run.error is not None:
        raise HTTPException(status_code=http_status_for(run.error_kind or ""), detail=run.error)
    return _view_out(state, adapter)
