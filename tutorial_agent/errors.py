"""Errors raised by the analyze pipeline.

Each error carries the HTTP status and the message that ends up in the
``{"error": ...}`` body, so views can raise and let the blueprint error
handler build the response.
"""

from __future__ import annotations


# Generic fallback shown to users when something unexpected breaks
GENERIC_ERROR_MESSAGE = "कुछ गलत हो गया"


class AnalyzeError(Exception):
    """Base class for failures surfaced to the caller of /api/analyze."""

    status_code = 500
    message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class MissingVideoUrlError(AnalyzeError):
    status_code = 400
    message = "Video URL required है"


class InvalidVideoUrlError(AnalyzeError):
    status_code = 400
    message = "Invalid YouTube URL"


class MetadataUnavailableError(AnalyzeError):
    """The oEmbed lookup failed (network, HTTP status, or body)."""

    status_code = 500
    message = "Unable to fetch video metadata"


class InvalidRequestBodyError(AnalyzeError):
    """The request body could not be decoded as JSON."""

    status_code = 500
