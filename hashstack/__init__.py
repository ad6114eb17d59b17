"""Hashstack: image hashtag generation for the web page and design-canvas shells."""

__version__ = "0.1.0"
