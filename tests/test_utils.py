"""Tests for video id extraction and the oEmbed lookup."""

from __future__ import annotations

import pytest
import requests

from tutorial_agent.errors import MetadataUnavailableError
from tutorial_agent.lib.utils import build_watch_url, extract_video_id, fetch_video_meta
from tutorial_agent.models import VideoMetadata


class TestExtractVideoId:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://www.youtube.com/watch?v=abc123&t=5", "abc123"),
            ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
            ("https://youtu.be/dQw4w9WgXcQ?si=tracking", "dQw4w9WgXcQ"),
            ("https://www.youtube.com/shorts/Xy12_-ab#comments", "Xy12_-ab"),
            ("https://m.youtube.com/watch?v=mobileId", "mobileId"),
            ("youtube.com/watch?v=noscheme", "noscheme"),
            ("https://youtu.be/first\nsecond", "first"),
        ],
    )
    def test_recognized_shapes(self, url, expected):
        assert extract_video_id(url) == expected

    def test_token_is_not_length_checked(self):
        assert extract_video_id("https://youtu.be/x") == "x"

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "https://vimeo.com/123456",
            "https://www.youtube.com/channel/UC123",
            "https://www.youtube.com/watch?list=PL123",
            "https://youtu.be/",
            "https://www.youtube.com/watch?v=&t=5",
        ],
    )
    def test_unrecognized_returns_none(self, url):
        assert extract_video_id(url) is None

    def test_non_string_returns_none(self):
        assert extract_video_id(None) is None
        assert extract_video_id(12345) is None


def test_build_watch_url():
    assert build_watch_url("abc123") == "https://www.youtube.com/watch?v=abc123"


class TestFetchVideoMeta:
    def test_success_returns_metadata(self, app, mock_oembed):
        with app.app_context():
            meta = fetch_video_meta("abc123")

        assert isinstance(meta, VideoMetadata)
        assert meta.title == "My Edit"
        assert meta.author_name == "Someone"
        assert meta.provider_name == "YouTube"
        mock_oembed.assert_called_once_with(
            "https://oembed.test/oembed",
            params={"url": "https://www.youtube.com/watch?v=abc123", "format": "json"},
        )

    def test_without_app_context_uses_default_endpoint(self, mock_oembed):
        fetch_video_meta("abc123")

        args, _ = mock_oembed.call_args
        assert args[0] == "https://www.youtube.com/oembed"

    def test_http_error_raises(self, app, mock_oembed, oembed_response):
        mock_oembed.return_value = oembed_response(status_code=404)

        with app.app_context(), pytest.raises(MetadataUnavailableError) as exc_info:
            fetch_video_meta("missing")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Unable to fetch video metadata"

    def test_network_error_raises(self, app, mock_oembed):
        mock_oembed.side_effect = requests.ConnectionError("boom")

        with app.app_context(), pytest.raises(MetadataUnavailableError) as exc_info:
            fetch_video_meta("abc123")

        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_invalid_json_raises(self, app, mock_oembed, oembed_response):
        mock_oembed.return_value = oembed_response(json_error=ValueError("not json"))

        with app.app_context(), pytest.raises(MetadataUnavailableError):
            fetch_video_meta("abc123")

    def test_missing_title_raises(self, app, mock_oembed, oembed_response):
        mock_oembed.return_value = oembed_response(payload={"author_name": "x"})

        with app.app_context(), pytest.raises(MetadataUnavailableError):
            fetch_video_meta("abc123")

    @pytest.mark.parametrize("title", [None, 42, ["a list"]])
    def test_non_string_title_raises(self, app, mock_oembed, oembed_response, title):
        mock_oembed.return_value = oembed_response(payload={"title": title})

        with app.app_context(), pytest.raises(MetadataUnavailableError):
            fetch_video_meta("abc123")
