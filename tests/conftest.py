"""Shared test fixtures for the tutorial agent."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from tutorial_agent import create_app


@pytest.fixture
def app():
    return create_app({"TESTING": True, "OEMBED_ENDPOINT": "https://oembed.test/oembed"})


@pytest.fixture
def client(app):
    return app.test_client()


def _make_response(status_code: int = 200, payload=None, json_error: Exception | None = None):
    """Build a stand-in for a requests.Response."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 400
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def mock_oembed():
    """Patch the outbound oEmbed call; yields the requests.get mock."""
    with patch("tutorial_agent.lib.utils.requests.get") as get:
        get.return_value = _make_response(
            payload={
                "title": "My Edit",
                "author_name": "Someone",
                "author_url": "https://www.youtube.com/@someone",
                "thumbnail_url": "https://i.ytimg.com/vi/abc123/hqdefault.jpg",
                "provider_name": "YouTube",
            }
        )
        yield get


@pytest.fixture
def oembed_response():
    """Factory for fake oEmbed responses."""
    return _make_response
