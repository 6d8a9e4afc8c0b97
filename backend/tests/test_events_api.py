"""Tests for the /events routes."""
from decimal import Decimal

import pytest


async def create_event(client, **payload):
    payload.setdefault("name", "Conf")
    payload.setdefault("start_date", "2025-01-01")
    response = await client.post("/events", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_event_with_legacy_total(client):
    response = await client.post("/events", json={"name": "Conf", "start_date": "2025-01-01", "total": "500"})
    assert response.status_code == 201
    body = response.json()
    assert body["base_total"] == "500"
    assert body["total_budget"] == "500"
    assert body["currency_code"] == "THB"


@pytest.mark.asyncio
async def test_create_event_without_totals(client):
    body = await create_event(client)
    assert body["base_total"] is None
    assert body["total_budget"] is None
    assert body["currency_code"] == "THB"


@pytest.mark.asyncio
async def test_create_event_maps_form_fields(client):
    body = await create_event(
        client,
        end_date="2025-01-03",
        client_name="Acme",
        country="Thailand",
        venue_name="Hall A",
        client_website="https://acme.example",
        commended_name="Riverside Hotel",
        commended_website="https://hotel.example",
        online_drive="https://drive.example/folder",
        base_total="1200.50",
        total="999",
        currency_code="usd",
    )
    assert body["location"] == "Thailand"
    assert body["venue_name"] == "Hall A"
    assert body["venue_url"] == "https://acme.example"
    assert body["accommodation_name"] == "Riverside Hotel"
    assert body["accommodation_url"] == "https://hotel.example"
    assert body["drive_link"] == "https://drive.example/folder"
    assert body["end_date"] == "2025-01-03"
    assert body["base_total"] == "1200.5"
    assert body["total_budget"] == "1200.5"
    assert body["currency_code"] == "USD"


@pytest.mark.asyncio
async def test_create_event_requires_name_and_start_date(client):
    response = await client.post("/events", json={"total": "10"})
    assert response.status_code == 422
    missing = {tuple(err["loc"]) for err in response.json()["detail"]}
    assert ("body", "name") in missing
    assert ("body", "start_date") in missing


@pytest.mark.asyncio
async def test_list_events_ordered_by_start_date_desc(client):
    await create_event(client, name="Middle", start_date="2025-02-01")
    await create_event(client, name="Latest", start_date="2025-03-01")
    await create_event(client, name="Earliest", start_date="2025-01-01")

    response = await client.get("/events")
    assert response.status_code == 200
    assert [e["name"] for e in response.json()] == ["Latest", "Middle", "Earliest"]


@pytest.mark.asyncio
async def test_update_event_base_total_mirrors_total_budget(client):
    created = await create_event(client, total="500", currency_code="eur")
    response = await client.put(f"/events/{created['id']}", json={"base_total": "750"})
    assert response.status_code == 200
    body = response.json()
    assert Decimal(body["base_total"]) == Decimal("750")
    assert Decimal(body["total_budget"]) == Decimal("750")
    assert body["currency_code"] == "EUR"


@pytest.mark.asyncio
async def test_update_event_keeps_stored_values(client):
    created = await create_event(client, total="500", currency_code="usd", country="Japan")
    response = await client.put(f"/events/{created['id']}", json={"name": "Renamed"})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Renamed"
    assert body["location"] == "Japan"
    assert body["currency_code"] == "USD"
    assert Decimal(body["base_total"]) == Decimal("500")
    assert Decimal(body["total_budget"]) == Decimal("500")


@pytest.mark.asyncio
async def test_update_event_legacy_total_and_currency_case(client):
    created = await create_event(client)
    response = await client.put(
        f"/events/{created['id']}",
        json={"total": "80", "currency_code": "jpy"},
    )
    body = response.json()
    assert Decimal(body["base_total"]) == Decimal("80")
    assert Decimal(body["total_budget"]) == Decimal("80")
    assert body["currency_code"] == "JPY"


@pytest.mark.asyncio
async def test_update_event_rejects_null_name(client):
    created = await create_event(client)
    response = await client.put(f"/events/{created['id']}", json={"name": None})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_update_missing_event_is_not_found(client):
    response = await client.put("/events/999", json={"name": "Nope"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Event not found"


@pytest.mark.asyncio
async def test_delete_event(client):
    created = await create_event(client)
    response = await client.delete(f"/events/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""
    assert (await client.get("/events")).json() == []


@pytest.mark.asyncio
async def test_delete_missing_event_is_not_found(client):
    response = await client.delete("/events/999")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_registry_check_rejects_unknown_code(client, settings):
    settings.enforce_currency_registry = True
    response = await client.post("/events", json={"name": "Conf", "start_date": "2025-01-01", "currency_code": "xyz"})
    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"] == ["body", "currency_code"]


@pytest.mark.asyncio
async def test_registry_check_accepts_registered_code(client, settings):
    settings.enforce_currency_registry = True
    await client.post("/currencies", json={"code": "THB", "name": "Thai Baht"})
    body = await create_event(client)
    assert body["currency_code"] == "THB"

    response = await client.put(f"/events/{body['id']}", json={"currency_code": "usd"})
    assert response.status_code == 422
    assert (await client.get("/events")).json()[0]["currency_code"] == "THB"


@pytest.mark.asyncio
async def test_create_event_strips_padded_currency_code(client):
    body = await create_event(client, currency_code=" usd        ")
    assert body["currency_code"] == "USD"


@pytest.mark.asyncio
async def test_listed_amounts_have_no_column_scale_padding(client):
    await create_event(client, base_total="0.00")
    await create_event(client, start_date="2025-02-01", total="1000")
    listed = (await client.get("/events")).json()
    assert [(e["base_total"], e["total_budget"]) for e in listed] == [("1000", "1000"), ("0", "0")]


@pytest.mark.asyncio
async def test_registry_check_skipped_when_update_omits_currency(client, settings):
    created = await create_event(client, currency_code="usd")
    settings.enforce_currency_registry = True

    response = await client.put(f"/events/{created['id']}", json={"description": "Updated agenda"})
    assert response.status_code == 200
    assert response.json()["description"] == "Updated agenda"
    assert response.json()["currency_code"] == "USD"
