"""View-model presentation: observable state for the web page plus clipboard helpers."""

from collections.abc import Callable

from pydantic import BaseModel, Field

from hashstack.pipeline.parsing import format_hashtags
from hashstack.presentation.base import PresentationAdapter

STACK_DEPTH = 5


class HashtagViewState(BaseModel):
    """What the page renders: chips, label card, loading flag and error line."""

    tags: list[str] = Field(default_factory=list)
    label: str = ""
    loading: bool = False
    status: str = ""
    error: str = ""
    stack_expanded: bool = False

    @property
    def count(self) -> int:
        return len(self.tags)


class StackPreview(BaseModel):
    """Collapsed "stack view": label card on top, first tag visible, the rest shown as cards."""

    label: str
    top_tag: str
    count: int
    cards: int


def stack_preview(state: HashtagViewState, depth: int = STACK_DEPTH) -> StackPreview | None:
    if not state.tags:
        return None
    return StackPreview(
        label=state.label,
        top_tag=state.tags[0],
        count=len(state.tags),
        cards=min(depth, len(state.tags)),
    )


class ViewModelAdapter(PresentationAdapter):
    """Writes results into a HashtagViewState; a separate rendering layer observes it."""

    def __init__(self, clipboard: Callable[[str], None] | None = None) -> None:
        self._clipboard = clipboard

    def render(self, tags: list[str], label: str, target: HashtagViewState) -> int:
        target.tags = list(tags)
        target.label = label
        target.loading = False
        target.status = f"{len(tags)} tags generated"
        target.error = ""
        # New results always start collapsed.
        target.stack_expanded = False
        return len(tags)

    def show_loading(self, target: HashtagViewState, message: str) -> None:
        target.loading = True
        target.status = message
        target.error = ""

    def show_error(self, target: HashtagViewState, message: str) -> None:
        target.loading = False
        target.status = ""
        target.error = message

    def _write(self, text: str) -> str:
        if self._clipboard is not None:
            self._clipboard(text)
        return text

    def copy_tag(self, tag: str) -> str:
        return self._write(f"#{tag}")

    def copy_label(self, state: HashtagViewState) -> str:
        return self._write(state.label)

    def copy_all(self, state: HashtagViewState) -> str:
        return self._write(format_hashtags(state.tags))
