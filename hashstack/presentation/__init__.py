"""Presentation adapters: view-model state for the web page, and canvas insertion."""

from hashstack.presentation.base import PresentationAdapter
from hashstack.presentation.canvas import CanvasAdapter
from hashstack.presentation.view_model import HashtagViewState, ViewModelAdapter

__all__ = ["CanvasAdapter", "HashtagViewState", "PresentationAdapter", "ViewModelAdapter"]
