"""Parse raw completion text into a normalized hashtag list."""

from hashstack.core.errors import NoHashtagsFound

DEFAULT_MAX_TAG_LENGTH = 24


def _normalize(token: str) -> str:
    token = token.strip()
    if token.startswith("#"):
        token = token[1:].strip()
    return token.lower()


def parse_hashtags(
    text: str | None,
    *,
    delimiter: str,
    max_count: int,
    max_length: int = DEFAULT_MAX_TAG_LENGTH,
) -> list[str]:
    """
    Split text on delimiter and normalize each token.

    Each token is trimmed, loses one leading '#' (and any space after it), and is lower-cased.
    Empty tokens and tokens longer than max_length are dropped; the rest keep provider order
    (no sorting, no dedupe) and are truncated to max_count. Raises NoHashtagsFound when nothing
    survives.
    """
    if max_count < 1:
        raise ValueError(f"max_count must be at least 1, got {max_count}")
    tags: list[str] = []
    for raw in (text or "").split(delimiter):
        tag = _normalize(raw)
        if not tag or len(tag) > max_length:
            continue
        tags.append(tag)
        if len(tags) >= max_count:
            break
    if not tags:
        raise NoHashtagsFound()
    return tags


def format_hashtags(tags: list[str]) -> str:
    """Space-separated '#tag' text, as copied by "copy all"."""
    return " ".join(f"#{tag}" for tag in tags)
