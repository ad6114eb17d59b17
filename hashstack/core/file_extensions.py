"""Single source of truth for accepted image types (upload validation and MIME guessing)."""

from pathlib import PurePath

IMAGE_MIME_BY_EXTENSION = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".webp": "image/webp",
    ".bmp": "image/bmp",
}

# Pillow format name -> MIME type, for sniffing uploads that arrive without a type.
MIME_BY_PIL_FORMAT = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
    "GIF": "image/gif",
    "WEBP": "image/webp",
    "BMP": "image/bmp",
    "TIFF": "image/tiff",
}


def guess_image_mime(filename: str | None) -> str | None:
    """Return the image MIME type for filename's extension, or None if it is not a known image."""
    if not filename:
        return None
    return IMAGE_MIME_BY_EXTENSION.get(PurePath(filename).suffix.lower())


def is_image_mime(mime_type: str | None) -> bool:
    return bool(mime_type) and mime_type.strip().lower().startswith("image/")
