"""Test timeline API endpoints"""

import json

import pytest
from fastapi import status

from main import app
from schedule_timeline.infrastructure.documents import \
    DefaultDocumentRepository
from schedule_timeline.presentation.api.dependencies import \
    get_default_document_repo

JSON_HEADERS = {"Content-Type": "application/json"}


@pytest.mark.asyncio
async def test_validate_valid_document(client, scenario_json):
    """Test a valid document reports no errors"""
    response = await client.post("/timeline/validate", content=scenario_json, headers=JSON_HEADERS)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"isValid": True, "errors": []}


@pytest.mark.asyncio
async def test_validate_lists_every_error(client, scenario_document):
    """Test an invalid document is still a 200 with the full error list"""
    scenario_document["lanes"].append({"id": "ENG", "label": "Duplicate"})
    scenario_document["items"][0]["laneId"] = ""

    response = await client.post("/timeline/validate", json=scenario_document)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["isValid"] is False
    assert data["errors"] == [
        "Duplicate lane id detected: ENG",
        "Item 'build' must specify a laneId.",
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [b"", b"{broken", b"[]", b"\xff\xfe"])
async def test_validate_unparseable_body(client, body):
    """Test bodies that are not a timeline object report the absent document"""
    response = await client.post("/timeline/validate", content=body, headers=JSON_HEADERS)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "isValid": False,
        "errors": ["Document is null or could not be parsed."],
    }


@pytest.mark.asyncio
async def test_normalize_derives_end(client, scenario_json):
    """Test normalization fills the end date and keeps camelCase keys"""
    response = await client.post("/timeline/normalize", content=scenario_json, headers=JSON_HEADERS)

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["content-type"] == "application/json"
    item = response.json()["items"][0]
    assert item["laneId"] == "eng"
    assert item["end"].startswith("2024-01-05T00:00:00")


@pytest.mark.asyncio
async def test_normalize_invalid_document(client, scenario_document):
    """Test normalization rejects an invalid document with all errors"""
    scenario_document["view"]["mode"] = "minute"
    scenario_document["lanes"] = []

    response = await client.post("/timeline/normalize", json=scenario_document)

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "DOCUMENT_INVALID"
    assert data["details"]["errors"] == [
        "view.mode must be one of [day, hour].",
        "lanes must include at least one entry.",
        "Item 'build' references unknown lane 'eng'.",
    ]
    assert data["message"] == "\n".join(data["details"]["errors"])


@pytest.mark.asyncio
async def test_normalize_duration_past_last_date(client, scenario_document):
    """Test a duration running past year 9999 is a validation error, not a crash"""
    scenario_document["items"][0]["durationDays"] = 5e6

    response = await client.post("/timeline/normalize", json=scenario_document)

    assert response.status_code == 422
    data = response.json()
    assert data["error"] == "DOCUMENT_INVALID"
    assert data["details"]["errors"] == ["Item 'build' durationDays is out of range."]


@pytest.mark.asyncio
async def test_layout_geometry(client, scenario_json):
    """Test layout returns ticks and item geometry for the view range"""
    response = await client.post("/timeline/layout", content=scenario_json, headers=JSON_HEADERS)

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["mode"] == "day"
    assert len(data["ticks"]) == 11
    assert data["ticks"][0]["label"] == "Jan 1"
    assert "renderedAt" in data

    lane = data["lanes"][0]
    assert lane["id"] == "eng"
    item = lane["items"][0]
    assert item["offsetPct"] == pytest.approx(10.0)
    assert item["widthPct"] == pytest.approx(30.0)
    assert item["statusClass"] == "status-default"
    assert item["rangeLabel"] == "Jan 2 → Jan 5"


@pytest.mark.asyncio
async def test_layout_invalid_document(client):
    """Test layout of an unparseable document is rejected"""
    response = await client.post("/timeline/layout", content="nope", headers=JSON_HEADERS)

    assert response.status_code == 422
    assert response.json()["details"]["errors"] == ["Document is null or could not be parsed."]


@pytest.mark.asyncio
async def test_default_document(client, scenario_json):
    """Test the default schedule is returned with its validation result"""
    response = await client.get("/timeline/default")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert json.loads(data["document"]) == json.loads(scenario_json)
    assert data["isValid"] is True
    assert data["errors"] == []


@pytest.mark.asyncio
async def test_default_document_missing(client, tmp_path):
    """Test a missing default schedule yields an empty document"""
    app.dependency_overrides[get_default_document_repo] = lambda: DefaultDocumentRepository(
        tmp_path / "absent.json"
    )

    response = await client.get("/timeline/default")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"document": "{}", "isValid": True, "errors": []}


@pytest.mark.asyncio
async def test_default_document_unreadable(client, tmp_path):
    """Test an unreadable default schedule reports a generic load error"""
    broken = tmp_path / "broken.json"
    broken.write_bytes(b"\xff\xfe\x00invalid")
    app.dependency_overrides[get_default_document_repo] = lambda: DefaultDocumentRepository(broken)

    response = await client.get("/timeline/default")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["document"] == "{}"
    assert data["isValid"] is False
    assert data["errors"] == ["Failed to load default JSON. Check server logs for details."]
