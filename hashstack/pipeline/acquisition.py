"""Input acquisition: browser uploads and canvas selections become an ImageInput."""

import base64
import binascii
import io
import logging

from PIL import Image, UnidentifiedImageError

from hashstack.ai.schema import ImageInput
from hashstack.canvas.host import IMAGE_BEARING_TYPES, CanvasHost
from hashstack.core.config import DEFAULT_MAX_UPLOAD_BYTES
from hashstack.core.errors import (
    CanvasHostError,
    HashstackError,
    InvalidSelectionType,
    NoSelection,
    SizeLimitExceeded,
)
from hashstack.core.file_extensions import MIME_BY_PIL_FORMAT, guess_image_mime, is_image_mime

_log = logging.getLogger(__name__)


def _sniff_mime(data: bytes) -> str | None:
    """Identify the image format from its header with Pillow; None when it is not an image."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = img.format
    except (UnidentifiedImageError, OSError):
        return None
    return MIME_BY_PIL_FORMAT.get(fmt or "")


def decode_data_uri(uri: str) -> tuple[bytes, str | None]:
    """Split a FileReader.readAsDataURL result into (bytes, mime_type). Plain base64 is accepted too."""
    uri = (uri or "").strip()
    if not uri:
        raise NoSelection()
    mime_type: str | None = None
    payload = uri
    if uri.startswith("data:"):
        header, sep, payload = uri.partition(",")
        if not sep or ";base64" not in header:
            raise InvalidSelectionType("Image data must be base64 encoded.")
        mime_type = header[len("data:"):].split(";", 1)[0] or None
    try:
        data = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSelectionType("Image data is not valid base64.") from e
    return data, mime_type


def acquire_upload(
    data: bytes | None,
    mime_type: str | None = None,
    *,
    filename: str | None = None,
    max_bytes: int = DEFAULT_MAX_UPLOAD_BYTES,
) -> ImageInput:
    """
    Validate an uploaded file and wrap it as an ImageInput.

    The MIME type is taken as declared, else guessed from filename, else sniffed with Pillow.
    Raises NoSelection (no data), InvalidSelectionType (not an image) or SizeLimitExceeded.
    """
    if not data:
        raise NoSelection()
    mime = mime_type or guess_image_mime(filename) or _sniff_mime(data)
    if not is_image_mime(mime):
        raise InvalidSelectionType()
    if len(data) > max_bytes:
        raise SizeLimitExceeded(len(data), max_bytes)
    _log.debug("Acquired upload %s (%s, %d bytes)", filename or "<unnamed>", mime, len(data))
    return ImageInput(data=data, mime_type=mime.strip().lower(), source="upload", filename=filename)


def acquire_canvas(host: CanvasHost, *, scale: float = 1.0) -> ImageInput:
    """
    Export the first selected frame/component to PNG at a fixed scale.

    Raises NoSelection when nothing is selected, InvalidSelectionType for other node types and
    CanvasHostError when the host fails to export.
    """
    selection = host.selection()
    if not selection:
        raise NoSelection("Please select an artboard or frame first.")
    node = selection[0]
    if node.type not in IMAGE_BEARING_TYPES:
        raise InvalidSelectionType("Please select a frame or artboard.")
    host.notify("loading", "Exporting image...")
    try:
        data = host.export_png(node, scale)
    except HashstackError:
        raise
    except Exception as e:
        raise CanvasHostError(f"Failed to export image: {e}") from e
    _log.debug("Exported canvas node %s at scale %s (%d bytes)", node.id, scale, len(data))
    return ImageInput(data=data, mime_type="image/png", source="canvas", filename=node.name)
