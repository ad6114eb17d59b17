"""Presentation adapter contract shared by the view-model and canvas shells."""

from abc import ABC, abstractmethod
from typing import Any


class PresentationAdapter(ABC):
    """Materializes a hashtag list on a target surface the adapter does not own."""

    @abstractmethod
    def render(self, tags: list[str], label: str, target: Any) -> int:
        """Show tags (and label, when non-empty) on target; return how many tags were materialized."""
        ...

    def show_loading(self, target: Any, message: str) -> None:
        """Report that a run is in flight."""

    def show_error(self, target: Any, message: str) -> None:
        """Report a failed run. Must not leave partial results on target."""
