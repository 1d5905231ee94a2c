"""Tests for the module-level content accessors."""

import httpx
import pytest

from wheelpower import content
from wheelpower.integrations.clients.mocks import LocalContentClient
from wheelpower.integrations.clients.real_http import DirectusContentClient
from wheelpower.utils.config_loader import ContentServiceConfig


@pytest.fixture
def routed(monkeypatch, make_client):
    """Point the facade at a fake Directus that serves per-path payloads."""
    payloads = {
        "/items/services": {"data": [{"id": 1}]},
        "/items/tires": {"data": [{"rim_size": "20"}, {"rim_size": "16"}]},
        "/items/mags": {"data": []},
        "/items/gallery": {"data": [{"id": "g1"}]},
        "/items/settings": {"data": {"phone": "123"}},
        "/items/bookings": {"data": {"id": 10}},
    }

    def handler(request):
        if request.url.path not in payloads:
            return httpx.Response(404)
        return httpx.Response(200, json=payloads[request.url.path])

    client = make_client(handler)
    monkeypatch.setattr(content, "get_content_client", lambda config=None: client)
    return client


@pytest.mark.asyncio
async def test_facade_reads(routed):
    assert await content.get_services() == [{"id": 1}]
    assert [t["rim_size"] for t in await content.get_tires()] == ["16", "20"]
    assert await content.get_mags() == []
    assert await content.get_gallery() == [{"id": "g1"}]
    assert await content.get_site_settings() == {"phone": "123"}


@pytest.mark.asyncio
async def test_facade_writes(routed):
    assert await content.create_booking({"name": "X"}) == {"success": True, "data": {"id": 10}}
    result = await content.create_contact({"name": "X"})
    assert result["success"] is False
    assert "404" in result["error"]


def test_facade_formatters():
    assert content.get_image_url("abc123") == f"{content.DIRECTUS_URL}/assets/abc123"
    assert content.get_image_url(None) is None
    assert content.format_price(None) == "Contact for price"
    assert content.directus_url == content.DIRECTUS_URL


def test_client_selection_by_mode():
    assert isinstance(content.get_content_client(ContentServiceConfig()), DirectusContentClient)
    mock = content.get_content_client(ContentServiceConfig(integrations_mode="mock"))
    assert isinstance(mock, LocalContentClient)
