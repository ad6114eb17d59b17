"""Design-canvas host capability. The pipeline only talks to the canvas through this interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

FRAME = "FRAME"
COMPONENT = "COMPONENT"
INSTANCE = "INSTANCE"
TEXT = "TEXT"

# Node types that can be exported and receive generated hashtags.
IMAGE_BEARING_TYPES = frozenset({FRAME, COMPONENT})


@dataclass(eq=False)
class CanvasNode:
    """A node on the canvas. Identity equality; hosts may subclass."""

    id: str
    name: str
    type: str
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    children: list["CanvasNode"] = field(default_factory=list)
    parent: "CanvasNode | None" = field(default=None, repr=False)
    characters: str = ""
    font: tuple[str, str] | None = None
    font_size: float | None = None
    fill: tuple[float, float, float] | None = None
    layout: dict[str, Any] = field(default_factory=dict)
    main_component: "CanvasNode | None" = field(default=None, repr=False)

    @property
    def bottom(self) -> float:
        return self.y + self.height


class CanvasHost(ABC):
    """Capabilities the canvas shell needs from a design tool."""

    @abstractmethod
    def selection(self) -> list[CanvasNode]:
        """Currently selected nodes, in selection order."""
        ...

    @abstractmethod
    def export_png(self, node: CanvasNode, scale: float) -> bytes:
        """Render node to PNG bytes at the given scale."""
        ...

    @abstractmethod
    def load_font(self, family: str, style: str) -> None:
        """Make a font usable for text nodes. Raises any Exception when the font is unavailable."""
        ...

    @abstractmethod
    def find_node(self, name: str, node_type: str | None = None) -> CanvasNode | None:
        """Return the first node with this name (and type, when given) anywhere in the document."""
        ...

    @abstractmethod
    def create_component(self, name: str) -> CanvasNode:
        ...

    @abstractmethod
    def create_frame(self, name: str) -> CanvasNode:
        """Create a detached frame; it is not visible until appended to a parent."""
        ...

    @abstractmethod
    def create_text(self, name: str, characters: str) -> CanvasNode:
        ...

    @abstractmethod
    def create_instance(self, component: CanvasNode) -> CanvasNode:
        """Create a detached instance of component."""
        ...

    @abstractmethod
    def append_child(self, parent: CanvasNode, child: CanvasNode) -> None:
        ...

    @abstractmethod
    def remove(self, node: CanvasNode) -> None:
        """Delete node (attached or detached) and its subtree."""
        ...

    def select(self, nodes: list[CanvasNode]) -> None:
        """Replace the selection. Optional for hosts without a selection concept."""

    def scroll_into_view(self, nodes: list[CanvasNode]) -> None:
        """Optional viewport move."""

    def notify(self, kind: str, message: str) -> None:
        """Forward a status message ("loading", "error", "done") to the host UI. Optional."""
