"""Tests for input acquisition from uploads, data URIs and canvas selections."""

import base64
from unittest.mock import patch

import pytest

from hashstack.canvas.memory import MemoryCanvas
from hashstack.core.errors import CanvasHostError, InvalidSelectionType, NoSelection, SizeLimitExceeded
from hashstack.pipeline.acquisition import acquire_canvas, acquire_upload, decode_data_uri

pytestmark = [pytest.mark.fast]


def test_acquire_upload_with_declared_type(png_bytes):
    image = acquire_upload(png_bytes, "image/png", filename="red.png")
    assert image.mime_type == "image/png"
    assert image.source == "upload"
    assert image.size == len(png_bytes)
    assert image.data_uri().startswith("data:image/png;base64,")


def test_acquire_upload_guesses_type_from_filename(png_bytes):
    assert acquire_upload(png_bytes, None, filename="photo.JPG").mime_type == "image/jpeg"


def test_acquire_upload_sniffs_type_with_pillow(png_bytes):
    assert acquire_upload(png_bytes, None).mime_type == "image/png"


@pytest.mark.parametrize("data", [None, b""])
def test_acquire_upload_without_data_raises_no_selection(data):
    with pytest.raises(NoSelection):
        acquire_upload(data, "image/png")


def test_acquire_upload_rejects_non_image_type(png_bytes):
    with pytest.raises(InvalidSelectionType):
        acquire_upload(png_bytes, "application/pdf", filename="doc.pdf")


def test_acquire_upload_rejects_unidentifiable_bytes():
    with pytest.raises(InvalidSelectionType):
        acquire_upload(b"not an image at all", None, filename="notes.txt")


def test_acquire_upload_enforces_size_limit(png_bytes):
    with pytest.raises(SizeLimitExceeded) as exc_info:
        acquire_upload(png_bytes, "image/png", max_bytes=len(png_bytes) - 1)
    assert exc_info.value.size == len(png_bytes)


def test_size_limit_message_names_megabytes():
    err = SizeLimitExceeded(21 * 1024 * 1024, 20 * 1024 * 1024)
    assert err.user_message == "Image must be smaller than 20MB"


def test_acquire_upload_at_exact_limit_is_accepted(png_bytes):
    assert acquire_upload(png_bytes, "image/png", max_bytes=len(png_bytes)).size == len(png_bytes)


def test_decode_data_uri_roundtrip(png_bytes):
    uri = "data:image/png;base64," + base64.b64encode(png_bytes).decode()
    data, mime = decode_data_uri(uri)
    assert data == png_bytes
    assert mime == "image/png"


def test_decode_bare_base64_has_no_mime(png_bytes):
    data, mime = decode_data_uri(base64.b64encode(png_bytes).decode())
    assert data == png_bytes
    assert mime is None


@pytest.mark.parametrize("uri", ["data:image/png,rawtext", "data:image/png;base64,%%%", "data:image/png;base64"])
def test_decode_malformed_data_uri_raises(uri):
    with pytest.raises(InvalidSelectionType):
        decode_data_uri(uri)


def test_decode_empty_data_uri_raises_no_selection():
    with pytest.raises(NoSelection):
        decode_data_uri("")


def test_acquire_canvas_exports_selected_frame_as_png(canvas, artboard):
    image = acquire_canvas(canvas, scale=1.0)
    assert image.source == "canvas"
    assert image.mime_type == "image/png"
    assert image.data.startswith(b"\x89PNG")
    assert ("loading", "Exporting image...") in canvas.messages


def test_acquire_canvas_with_empty_selection_raises():
    host = MemoryCanvas()
    with pytest.raises(NoSelection):
        acquire_canvas(host)


def test_acquire_canvas_rejects_non_frame_selection():
    host = MemoryCanvas()
    text = host.add_frame("Caption", node_type="TEXT")
    host.select([text])
    with pytest.raises(InvalidSelectionType, match="frame or artboard"):
        acquire_canvas(host)


def test_acquire_canvas_accepts_component():
    host = MemoryCanvas()
    component = host.add_frame("Card", node_type="COMPONENT", width=10, height=10)
    host.select([component])
    assert acquire_canvas(host, scale=2.0).data.startswith(b"\x89PNG")


def test_acquire_canvas_export_failure_raises_canvas_host_error(canvas):
    with patch.object(canvas, "export_png", side_effect=RuntimeError("render timeout")):
        with pytest.raises(CanvasHostError) as exc_info:
            acquire_canvas(canvas)
    assert exc_info.value.user_message == "Failed to export image: render timeout"
    assert isinstance(exc_info.value.__cause__, RuntimeError)
