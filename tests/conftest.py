"""Pytest configuration and fixtures."""

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest
from github import Github

from src.config.settings import ReviewConfig
from src.services.github_client import GitHubClient


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def diff_for(request: httpx.Request) -> httpx.Response:
    """Answer every request with a small diff naming the requested path."""
    return httpx.Response(
        200, text=f"diff --git a/app.py b/app.py\n+# {request.url.path}\n"
    )


@pytest.fixture
def config() -> ReviewConfig:
    """Return a validated configuration for acme/widgets."""
    return ReviewConfig(
        owner="acme",
        repo="widgets",
        token="test-token",  # pragma: allowlist secret
        openai_api_key="sk-test",  # pragma: allowlist secret
    )


@pytest.fixture
def transport() -> RecordingTransport:
    """Return a transport that serves a diff for every request."""
    return RecordingTransport(diff_for)


@pytest.fixture
def mock_github() -> MagicMock:
    """Return a PyGithub client mock."""
    return MagicMock(spec=Github)


@pytest.fixture
def github_client(config, transport, mock_github) -> GitHubClient:
    """Return a GitHubClient backed by the recording transport."""
    return GitHubClient(config, httpx.AsyncClient(transport=transport), mock_github)
