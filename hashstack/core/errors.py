"""Error taxonomy for a hashtag run. Every error is terminal for the current run; none are retried."""


class HashstackError(Exception):
    """Base for all pipeline errors. user_message is what the shells show to the user."""

    user_message = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.user_message = message
        super().__init__(self.user_message)


class NoSelection(HashstackError):
    """Nothing selected: no file chosen, or an empty canvas selection."""

    user_message = "Please select an image first."


class InvalidSelectionType(HashstackError):
    """Selection is not an image (file mode) or not a frame/component (canvas mode)."""

    user_message = "Please select an image file."


class SizeLimitExceeded(HashstackError):
    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        if limit >= 1024 * 1024:
            bound = f"{limit // (1024 * 1024)}MB"
        else:
            bound = f"{limit} bytes"
        super().__init__(f"Image must be smaller than {bound}")


class AuthError(HashstackError):
    user_message = "Invalid API key. Please check your OpenAI API key."


class RateLimited(HashstackError):
    user_message = "Rate limit exceeded. Please try again in a moment."


class ProviderError(HashstackError):
    """Non-2xx (other than 401/429) or malformed provider response. detail is the provider text verbatim."""

    def __init__(self, status: int, detail: str) -> None:
        self.status = status
        self.detail = detail
        super().__init__(f"API request failed: {status} - {detail}")


class TransportError(HashstackError):
    """No response at all: connection refused, DNS failure, timeout."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = "Could not reach the hashtag service. Check your connection and try again."
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class NoHashtagsFound(HashstackError):
    user_message = "No valid hashtags found to create."


class FontUnavailable(HashstackError):
    user_message = "Could not load fonts. Please try again."


class CanvasHostError(HashstackError):
    """The canvas host itself failed (export, element creation); the original error is chained."""

    user_message = "Failed to create hashtag elements."


# Most specific first; ProviderError maps to 502 regardless of the upstream status.
HTTP_STATUS_BY_ERROR: tuple[tuple[type[HashstackError], int], ...] = (
    (NoSelection, 400),
    (InvalidSelectionType, 415),
    (SizeLimitExceeded, 413),
    (AuthError, 401),
    (RateLimited, 429),
    (ProviderError, 502),
    (TransportError, 504),
    (NoHashtagsFound, 422),
    (FontUnavailable, 500),
    (CanvasHostError, 500),
)


def http_status_for(exc: HashstackError | str) -> int:
    """Return the HTTP status the web shell reports for an error instance or error class name."""
    for error_type, status in HTTP_STATUS_BY_ERROR:
        if isinstance(exc, str):
            if error_type.__name__ == exc:
                return status
        elif isinstance(exc, error_type):
            return status
    return 500
