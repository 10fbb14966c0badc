# Enable postponed annotations for forward references
from __future__ import annotations

# Regular expressions for parsing, HTTP requests, and Flask app access
import logging
import re
from typing import Optional

import requests
from flask import current_app, has_app_context

from ..config import Config
from ..errors import MetadataUnavailableError
from ..models import VideoMetadata


logger = logging.getLogger(__name__)

# watch?v=, youtu.be/ and /shorts/ links; the id runs until &, newline, ? or #
_VIDEO_ID_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/shorts/)([^&\n?#]+)"),
)


# Extract a YouTube video id from a watch, youtu.be or shorts URL
def extract_video_id(value: str) -> Optional[str]:
    """Return the id token from a recognized YouTube URL, else None.

    The token is not checked for length or charset; whatever sits between
    the URL prefix and the first ``&``, newline, ``?`` or ``#`` is returned.
    """
    if not isinstance(value, str):
        return None
    for pattern in _VIDEO_ID_PATTERNS:
        m = pattern.search(value)
        if m:
            return m.group(1)
    return None


# Construct a canonical YouTube watch URL from a video id
def build_watch_url(video_id: str) -> str:
    return f"https://www.youtube.com/watch?v={video_id}"


def _oembed_endpoint() -> str:
    if has_app_context():
        return current_app.config.get("OEMBED_ENDPOINT") or Config.OEMBED_ENDPOINT
    return Config.OEMBED_ENDPOINT


# Fetch basic metadata for a video using oEmbed
def fetch_video_meta(video_id: str) -> VideoMetadata:
    """Look up the public title of a video through oEmbed.

    One request, no retry. Any failure (transport error, non-2xx status,
    undecodable body, missing title) raises MetadataUnavailableError.
    """
    try:
        r = requests.get(
            _oembed_endpoint(),
            params={"url": build_watch_url(video_id), "format": "json"},
        )
    except requests.RequestException as e:
        logger.warning("fetch_video_meta: request failed (video_id=%s): %s", video_id, e)
        raise MetadataUnavailableError() from e

    if not r.ok:
        logger.warning(
            "fetch_video_meta: unexpected status (video_id=%s) (status_code=%s)",
            video_id,
            r.status_code,
        )
        raise MetadataUnavailableError()

    try:
        data = r.json()
        return VideoMetadata.from_oembed(data)
    except (ValueError, KeyError, TypeError) as e:
        logger.warning("fetch_video_meta: unusable oEmbed body (video_id=%s): %s", video_id, e)
        raise MetadataUnavailableError() from e
