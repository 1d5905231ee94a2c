"""Pytest fixtures for content client tests."""

import httpx
import pytest

from wheelpower.integrations.clients.real_http.directus import DirectusContentClient
from wheelpower.utils.config_loader import ENV_OVERRIDES

BASE_URL = "https://cms.example.test"


@pytest.fixture(autouse=True)
def clean_content_env(monkeypatch):
    """Keep developer environment variables out of config-dependent tests."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sent_requests():
    return []


@pytest.fixture
def make_client(sent_requests):
    """Build a DirectusContentClient whose HTTP traffic goes to ``handler``."""

    def _make(handler, **kwargs):
        def _record(request: httpx.Request) -> httpx.Response:
            sent_requests.append(request)
            return handler(request)

        return DirectusContentClient(base_url=BASE_URL, transport=httpx.MockTransport(_record), **kwargs)

    return _make
