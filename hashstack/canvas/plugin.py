"""Canvas shell: handles messages from the design-tool plugin UI and runs the canvas pipeline."""

import logging
import threading
from collections.abc import Callable
from typing import Any

from hashstack.ai.prompts import CANVAS_PROFILE
from hashstack.ai.schema import PipelineRun
from hashstack.ai.vision_base import BaseVisionClient
from hashstack.canvas.host import CanvasHost
from hashstack.core.config import Settings, get_config
from hashstack.pipeline.acquisition import acquire_canvas
from hashstack.pipeline.inference import HashtagInference
from hashstack.pipeline.labeling import LABEL_MODES
from hashstack.pipeline.runner import HashtagPipeline
from hashstack.presentation.canvas import CanvasAdapter

_log = logging.getLogger(__name__)

GENERATE_MESSAGE = "generate-hashtags"


class CanvasPlugin:
    """
    One plugin session on a canvas host.

    The adapter (and so its template lock) lives as long as the session; pipelines are built per
    trigger because the credential arrives with each message. Triggers that arrive while a run is
    in flight are ignored. Host failures outside the error taxonomy are still reported to the UI.
    """

    def __init__(
        self,
        host: CanvasHost,
        client_factory: Callable[[str], BaseVisionClient],
        settings: Settings | None = None,
    ) -> None:
        self.host = host
        self.settings = settings or get_config()
        self._client_factory = client_factory
        self.adapter = CanvasAdapter(host, max_count=CANVAS_PROFILE.max_count)
        self._in_flight = threading.Lock()

    def on_message(self, msg: dict[str, Any]) -> PipelineRun | None:
        if msg.get("type") != GENERATE_MESSAGE:
            _log.debug("Ignoring plugin message of type %r", msg.get("type"))
            return None
        api_key = str(msg.get("apiKey") or "").strip()
        if not api_key:
            self.host.notify("error", "Please enter your OpenAI API key")
            return None
        label_mode = msg.get("labelMode") or self.settings.label_mode
        if label_mode not in LABEL_MODES:
            _log.warning("Rejecting plugin message with label mode %r", label_mode)
            self.host.notify("error", f"Unknown label mode: {label_mode}")
            return None
        if not self._in_flight.acquire(blocking=False):
            _log.info("Generation already in progress; ignoring trigger")
            return None
        try:
            pipeline = HashtagPipeline(
                HashtagInference(self._client_factory(api_key), self.settings),
                self.adapter,
                CANVAS_PROFILE,
                label_mode=label_mode,
            )
            selection = self.host.selection()
            target = selection[0] if selection else None
            return pipeline.run(
                lambda: acquire_canvas(self.host, scale=self.settings.canvas_scale),
                target,
            )
        except Exception as e:
            _log.exception("Hashtag generation failed")
            message = f"Failed to create hashtag elements: {e}"
            self.host.notify("error", message)
            return PipelineRun(profile=CANVAS_PROFILE.name, error=message, error_kind=type(e).__name__)
        finally:
            self._in_flight.release()
