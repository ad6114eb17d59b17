"""Canvas presentation: one template component, one instance per hashtag, inserted all-or-nothing."""

import logging
import threading

from hashstack.canvas.host import COMPONENT, TEXT, CanvasHost, CanvasNode
from hashstack.core.errors import CanvasHostError, FontUnavailable, HashstackError
from hashstack.presentation.base import PresentationAdapter

_log = logging.getLogger(__name__)

TEMPLATE_NAME = "Hashtag Template"
CONTAINER_NAME = "Generated Hashtags"
FONT_FALLBACKS: tuple[tuple[str, str], ...] = (("Inter", "Regular"), ("Arial", "Regular"))

CONTENT_GAP = 50
CONTAINER_MARGIN = 20
CONTAINER_HEIGHT = 80
TAG_FONT_SIZE = 11
TAG_FILL = (0.3, 0.4, 0.9)
CONTAINER_FILL = (0.98, 0.98, 0.98)
CANVAS_MAX_COUNT = 20


def content_bottom(target: CanvasNode) -> float:
    """Lowest edge of the target's current children; 0 when it has none."""
    return max((child.y + child.height for child in target.children), default=0)


class CanvasAdapter(PresentationAdapter):
    """Materializes hashtags as instances of a shared template inside a wrapping container."""

    def __init__(self, host: CanvasHost, max_count: int = CANVAS_MAX_COUNT) -> None:
        self.host = host
        self.max_count = max_count
        self._template_lock = threading.Lock()

    def _load_font(self) -> tuple[str, str]:
        for family, style in FONT_FALLBACKS:
            try:
                self.host.load_font(family, style)
            except Exception as e:
                _log.info("Font %s %s unavailable: %s", family, style, e)
                continue
            return family, style
        raise FontUnavailable()

    def ensure_template(self, font: tuple[str, str]) -> CanvasNode:
        """Return the existing template component, creating it only when none exists."""
        with self._template_lock:
            template = self.host.find_node(TEMPLATE_NAME, COMPONENT)
            if template is not None:
                return template
            _log.info("Creating hashtag template component")
            template = self.host.create_component(TEMPLATE_NAME)
            template.layout.update(
                {
                    "layoutMode": "HORIZONTAL",
                    "primaryAxisSizingMode": "AUTO",
                    "counterAxisSizingMode": "AUTO",
                }
            )
            text = self.host.create_text("Hashtag", "#hashtag")
            text.font = font
            text.font_size = TAG_FONT_SIZE
            text.fill = TAG_FILL
            self.host.append_child(template, text)
            return template

    def _build_container(self, target: CanvasNode, label: str) -> CanvasNode:
        container = self.host.create_frame(f"{CONTAINER_NAME} ({label})" if label else CONTAINER_NAME)
        container.fill = CONTAINER_FILL
        container.layout.update(
            {
                "layoutMode": "HORIZONTAL",
                "layoutWrap": "WRAP",
                "primaryAxisSizingMode": "FIXED",
                "counterAxisSizingMode": "AUTO",
                "itemSpacing": 8,
                "padding": 16,
                "cornerRadius": 8,
            }
        )
        container.x = CONTAINER_MARGIN
        container.y = content_bottom(target) + CONTENT_GAP
        container.width = max(0, target.width - 2 * CONTAINER_MARGIN)
        container.height = CONTAINER_HEIGHT
        return container

    def _fill_instance(self, instance: CanvasNode, text: str) -> None:
        instance.name = f"Hashtag: {text}"
        for child in instance.children:
            if child.type == TEXT:
                child.characters = text
                return
        raise RuntimeError(f"Template {TEMPLATE_NAME!r} has no text layer")

    def render(self, tags: list[str], label: str, target: CanvasNode) -> int:
        """
        Append one container with an instance per tag (up to max_count) below the target's content.

        Nothing is appended unless every instance was built: on any failure the detached container
        is removed. Host failures are raised as CanvasHostError. FontUnavailable is raised before
        anything is created.
        """
        font = self._load_font()
        created = 0
        container: CanvasNode | None = None
        instance: CanvasNode | None = None
        try:
            template = self.ensure_template(font)
            container = self._build_container(target, label)
            for tag in tags[: self.max_count]:
                instance = self.host.create_instance(template)
                self._fill_instance(instance, f"#{tag}")
                self.host.append_child(container, instance)
                created += 1
            self.host.append_child(target, container)
        except Exception as e:
            _log.warning("Canvas insertion failed after %d instances; rolling back", created)
            if instance is not None and instance.parent is None:
                self.host.remove(instance)
            if container is not None:
                self.host.remove(container)
            if isinstance(e, HashstackError):
                raise
            raise CanvasHostError(f"Failed to create hashtag elements: {e}") from e
        self.host.select([container])
        self.host.scroll_into_view([container])
        self.host.notify("done", f"Created {created} hashtag elements automatically!")
        return created

    def show_loading(self, target: CanvasNode, message: str) -> None:
        self.host.notify("loading", message)

    def show_error(self, target: CanvasNode, message: str) -> None:
        self.host.notify("error", message)
