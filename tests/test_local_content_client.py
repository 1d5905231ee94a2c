import json

import pytest

from wheelpower.integrations.clients.mocks.local_content import LocalContentClient


def write(path, body):
    path.write_text(json.dumps(body), encoding="utf-8")


@pytest.fixture
def local_client(tmp_path):
    data_root = tmp_path / "content"
    data_root.mkdir()
    write(data_root / "services.json", {"data": [
        {"id": 1, "status": "available", "sort": 2},
        {"id": 2, "status": "hidden", "sort": 1},
        {"id": 3, "status": "available", "sort": 1},
    ]})
    write(data_root / "tires.json", [
        {"id": "a", "status": "in_stock", "rim_size": "17"},
        {"id": "b", "status": "unavailable", "rim_size": "13", "original_price": 100},
        {"id": "c", "status": "in_stock", "rim_size": "15", "original_price": 5000},
    ])
    write(data_root / "settings.json", {"data": {"shop_name": "Wheel Power"}})
    write(data_root / "gallery.json", "oops")
    return LocalContentClient(data_root=data_root, output_root=tmp_path / "out")


@pytest.mark.asyncio
async def test_local_services_filtered_and_sorted(local_client):
    services = await local_client.get_services()
    assert [s["id"] for s in services] == [3, 1]


@pytest.mark.asyncio
async def test_local_tires_match_http_ordering(local_client):
    tires = await local_client.get_tires()
    assert [t["id"] for t in tires] == ["c", "a"]


@pytest.mark.asyncio
async def test_local_missing_or_bad_files_read_as_none(local_client):
    assert await local_client.get_mags() is None
    assert await local_client.get_gallery() is None


@pytest.mark.asyncio
async def test_local_settings(local_client):
    assert await local_client.get_site_settings() == {"shop_name": "Wheel Power"}


@pytest.mark.asyncio
async def test_local_booking_is_persisted(local_client, tmp_path):
    result = await local_client.create_booking({"name": "Ana"})

    assert result["success"] is True
    assert result["data"]["status"] == "pending"

    written = list((tmp_path / "out" / "bookings").glob("*.json"))
    assert len(written) == 1
    body = json.loads(written[0].read_text(encoding="utf-8"))
    assert body["name"] == "Ana"
    assert body["id"] == result["data"]["id"]


@pytest.mark.asyncio
async def test_local_contact_is_persisted(local_client, tmp_path):
    result = await local_client.create_contact({"message": "Hello"})

    assert result["success"] is True
    assert "status" not in result["data"]
    assert len(list((tmp_path / "out" / "contacts").glob("*.json"))) == 1


@pytest.mark.asyncio
async def test_local_items_that_are_not_objects_read_as_none(local_client):
    write(local_client.data_root / "mags.json", {"data": [{"id": 1, "status": "in_stock"}, "broken"]})

    assert await local_client.get_mags() is None
