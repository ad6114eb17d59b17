"""Pipeline runner: acquisition -> inference -> parsing -> labeling -> presentation, one run at a time."""

import logging
import threading
from collections.abc import Callable
from typing import Any

from hashstack.ai.prompts import PromptProfile
from hashstack.ai.schema import ImageInput, PipelineRun
from hashstack.core.errors import HashstackError
from hashstack.pipeline.inference import HashtagInference
from hashstack.pipeline.labeling import LABEL_MODES, LabelMode, label_hashtags
from hashstack.presentation.base import PresentationAdapter

_log = logging.getLogger(__name__)


class HashtagPipeline:
    """
    Runs one hashtag generation end to end.

    Stages are sequential; a trigger that arrives while a run is in flight is ignored (run returns
    None) so two runs never share one set of displayed results. HashstackError from any stage ends
    the run, is shown through the adapter, and is recorded on the returned PipelineRun. Nothing is
    retried; the pipeline is ready for the next trigger as soon as run returns.
    """

    def __init__(
        self,
        inference: HashtagInference,
        adapter: PresentationAdapter,
        profile: PromptProfile,
        label_mode: LabelMode = "heuristic",
    ) -> None:
        if label_mode not in LABEL_MODES:
            raise ValueError(f"Unknown label mode: {label_mode!r}")
        self.inference = inference
        self.adapter = adapter
        self.profile = profile
        self.label_mode = label_mode
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    def _label(self, tags: list[str]) -> str:
        if self.label_mode == "none":
            return ""
        if self.label_mode == "model":
            return self.inference.derive_label(tags)
        return label_hashtags(tags)

    def run(self, acquire: Callable[[], ImageInput], target: Any) -> PipelineRun | None:
        if not self._in_flight.acquire(blocking=False):
            _log.info("Ignoring trigger: a %s run is already in flight", self.profile.name)
            return None
        run = PipelineRun(profile=self.profile.name)
        try:
            run.image = acquire()
            self.adapter.show_loading(target, "Analyzing image with AI...")
            run.raw_text, run.tags = self.inference.generate(run.image, self.profile)
            # The request body has been sent; the image is not needed past this point.
            run.image = None
            run.label = self._label(run.tags)
            run.rendered = self.adapter.render(run.tags, run.label, target)
            _log.info("Rendered %d hashtags (label=%r)", run.rendered, run.label)
        except HashstackError as e:
            _log.warning("Hashtag run failed: %s", e.user_message)
            run.image = None
            run.error = e.user_message
            run.error_kind = type(e).__name__
            self.adapter.show_error(target, e.user_message)
        finally:
            self._in_flight.release()
        return run
