"""Canvas host abstraction and an in-memory implementation."""

from hashstack.canvas.host import CanvasHost, CanvasNode
from hashstack.canvas.memory import MemoryCanvas

__all__ = ["CanvasHost", "CanvasNode", "MemoryCanvas"]
