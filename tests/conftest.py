"""Pytest fixtures: isolated config, a small real PNG, and an in-memory canvas."""

import io

import pytest
from PIL import Image

from hashstack.canvas.memory import MemoryCanvas
from hashstack.core import config as config_module


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Each test starts from default Settings: no cached config, no stray env or hashstack.yml."""
    for var in ("HASHSTACK_CONFIG", "HASHSTACK_ENDPOINT", "HASHSTACK_MODEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    config_module.reset_config()
    yield
    config_module.reset_config()


@pytest.fixture
def png_bytes() -> bytes:
    """A 4x4 red PNG."""
    buffered = io.BytesIO()
    Image.new("RGB", (4, 4), (255, 0, 0)).save(buffered, format="PNG")
    return buffered.getvalue()


@pytest.fixture
def canvas() -> MemoryCanvas:
    """Memory canvas with one 400x300 artboard holding two children, bottom edge at y=220."""
    host = MemoryCanvas()
    board = host.add_frame("Artboard", width=400, height=300)
    host.add_frame("Title", x=10, y=10, width=200, height=40, parent=board)
    host.add_frame("Photo", x=10, y=60, width=300, height=160, parent=board)
    host.select([board])
    return host


@pytest.fixture
def artboard(canvas: MemoryCanvas):
    return canvas.selection()[0]
