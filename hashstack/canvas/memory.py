"""In-memory canvas host. Used by tests and for running the canvas shell without a design tool."""

import io
import itertools
import logging
from collections.abc import Iterator

from PIL import Image, ImageDraw

from hashstack.canvas.host import COMPONENT, FRAME, INSTANCE, TEXT, CanvasHost, CanvasNode

_log = logging.getLogger(__name__)

DEFAULT_FONTS = frozenset({("Inter", "Regular"), ("Arial", "Regular")})


class MemoryCanvas(CanvasHost):
    """
    A single page holding a tree of CanvasNode objects.

    export_png draws node bounds (and child bounds) with Pillow so exported bytes are a real PNG.
    fonts controls which (family, style) pairs load_font accepts.
    """

    def __init__(self, fonts: frozenset[tuple[str, str]] | set[tuple[str, str]] = DEFAULT_FONTS) -> None:
        self._ids = itertools.count(1)
        self.page = CanvasNode(id="0:0", name="Page 1", type="PAGE")
        self.fonts = set(fonts)
        self.loaded_fonts: list[tuple[str, str]] = []
        self.messages: list[tuple[str, str]] = []
        self.viewport: list[CanvasNode] = []
        self._selection: list[CanvasNode] = []
        self._detached: list[CanvasNode] = []

    def _new_node(self, name: str, node_type: str, **kwargs) -> CanvasNode:
        node = CanvasNode(id=f"1:{next(self._ids)}", name=name, type=node_type, **kwargs)
        self._detached.append(node)
        return node

    def walk(self, root: CanvasNode | None = None) -> Iterator[CanvasNode]:
        """Depth-first iteration over the page (or root) subtree, root excluded."""
        stack = list(reversed((root or self.page).children))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def add_frame(
        self,
        name: str,
        *,
        x: float = 0.0,
        y: float = 0.0,
        width: float = 100.0,
        height: float = 100.0,
        parent: CanvasNode | None = None,
        node_type: str = FRAME,
    ) -> CanvasNode:
        """Create a node and attach it directly (test/setup helper)."""
        node = self._new_node(name, node_type, x=x, y=y, width=width, height=height)
        self.append_child(parent or self.page, node)
        return node

    @property
    def detached(self) -> list[CanvasNode]:
        """Nodes created but never appended and never removed."""
        return list(self._detached)

    def selection(self) -> list[CanvasNode]:
        return list(self._selection)

    def select(self, nodes: list[CanvasNode]) -> None:
        self._selection = list(nodes)

    def export_png(self, node: CanvasNode, scale: float) -> bytes:
        width = max(1, round(node.width * scale))
        height = max(1, round(node.height * scale))
        image = Image.new("RGB", (width, height), (255, 255, 255))
        draw = ImageDraw.Draw(image)
        for child in node.children:
            box = (
                round(child.x * scale),
                round(child.y * scale),
                round((child.x + child.width) * scale),
                round((child.y + child.height) * scale),
            )
            if box[2] > box[0] and box[3] > box[1]:
                draw.rectangle(box, outline=(0, 0, 0))
            if child.characters:
                draw.text((box[0], box[1]), child.characters, fill=(0, 0, 0))
        buffered = io.BytesIO()
        image.save(buffered, format="PNG")
        return buffered.getvalue()

    def load_font(self, family: str, style: str) -> None:
        if (family, style) not in self.fonts:
            raise LookupError(f"Font not available: {family} {style}")
        self.loaded_fonts.append((family, style))

    def find_node(self, name: str, node_type: str | None = None) -> CanvasNode | None:
        for node in self.walk():
            if node.name == name and (node_type is None or node.type == node_type):
                return node
        return None

    def create_component(self, name: str) -> CanvasNode:
        # Components live on the page like in design tools, so find_node sees them.
        node = self._new_node(name, COMPONENT)
        self.append_child(self.page, node)
        return node

    def create_frame(self, name: str) -> CanvasNode:
        return self._new_node(name, FRAME)

    def create_text(self, name: str, characters: str) -> CanvasNode:
        return self._new_node(name, TEXT, characters=characters)

    def create_instance(self, component: CanvasNode) -> CanvasNode:
        instance = self._new_node(
            component.name,
            INSTANCE,
            width=component.width,
            height=component.height,
            main_component=component,
        )
        for child in component.children:
            copy = self._new_node(
                child.name,
                child.type,
                width=child.width,
                height=child.height,
                characters=child.characters,
                font=child.font,
                font_size=child.font_size,
                fill=child.fill,
            )
            self.append_child(instance, copy)
        return instance

    def append_child(self, parent: CanvasNode, child: CanvasNode) -> None:
        if child.parent is not None:
            child.parent.children.remove(child)
        if child in self._detached:
            self._detached.remove(child)
        child.parent = parent
        parent.children.append(child)

    def remove(self, node: CanvasNode) -> None:
        if node.parent is not None:
            node.parent.children.remove(node)
            node.parent = None
        for n in [node, *self.walk(node)]:
            if n in self._detached:
                self._detached.remove(n)
        self._selection = [n for n in self._selection if n is not node]

    def scroll_into_view(self, nodes: list[CanvasNode]) -> None:
        self.viewport = list(nodes)

    def notify(self, kind: str, message: str) -> None:
        _log.debug("canvas %s: %s", kind, message)
        self.messages.append((kind, message))
