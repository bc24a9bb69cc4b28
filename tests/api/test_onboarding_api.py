"""Onboarding workflow API tests (in-memory services behind the dependencies)."""

import pytest
from httpx import AsyncClient

FARM = {
    "main_farming_activities": ["cropping"],
    "key_staff": [{"name": "Sam", "role": "Manager"}],
    "crop_types": ["wheat", "canola"],
    "chemical_usage": True,
    "water_license": False,
}


@pytest.fixture
async def profile(client: AsyncClient, auth_headers, basic_payload) -> dict:
    """Submit the basic section, which creates the caller's business profile."""
    response = await client.post(
        "/api/v1/onboarding/sections/basic/submit",
        json={"data": basic_payload},
        headers=auth_headers,
    )
    assert response.status_code == 200
    profile = await client.get("/api/v1/business-profile", headers=auth_headers)
    return profile.json()


async def test_basic_submit_creates_profile(client: AsyncClient, auth_headers, basic_payload) -> None:
    response = await client.post(
        "/api/v1/onboarding/sections/basic/submit",
        json={"data": basic_payload},
        headers=auth_headers,
    )
    assert response.status_code == 200
    data = response.json()
    assert data["next_section"] == "farm"
    assert data["progress"]["completed_steps"] == ["basic"]
    assert data["progress"]["current_step"] == "farm"

    profile = await client.get("/api/v1/business-profile", headers=auth_headers)
    assert profile.status_code == 200
    assert profile.json()["trading_name"] == "Grower Farms"


async def test_other_section_submit_requires_profile(client: AsyncClient, auth_headers) -> None:
    response = await client.post(
        "/api/v1/onboarding/sections/farm/submit", json={"data": FARM}, headers=auth_headers
    )
    assert response.status_code == 404


async def test_save_and_get_section(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.put(
        "/api/v1/onboarding/sections/farm", json={"data": FARM}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["section_name"] == "farm"

    response = await client.get("/api/v1/onboarding/sections/farm", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["crop_types"] == ["wheat", "canola"]
    assert data["key_staff"][0]["name"] == "Sam"


async def test_get_unsaved_section_returns_404(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.get("/api/v1/onboarding/sections/storage", headers=auth_headers)
    assert response.status_code == 404


async def test_unknown_section_returns_400(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.put(
        "/api/v1/onboarding/sections/payroll", json={"data": {}}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_invalid_section_payload_returns_422(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.put(
        "/api/v1/onboarding/sections/financial",
        json={"data": {"num_employees": -1}},
        headers=auth_headers,
    )
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_list_sections(client: AsyncClient, auth_headers, profile) -> None:
    await client.put("/api/v1/onboarding/sections/farm", json={"data": FARM}, headers=auth_headers)
    response = await client.get("/api/v1/onboarding/sections", headers=auth_headers)
    assert response.status_code == 200
    assert sorted(r["section_name"] for r in response.json()) == ["basic", "farm"]


async def test_progress_and_status(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.get("/api/v1/onboarding/progress", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["current_step"] == "farm"
    assert response.json()["is_complete"] is False

    response = await client.get("/api/v1/onboarding/status", headers=auth_headers)
    assert response.status_code == 200
    status = response.json()
    assert status["current_step"] == "farm"
    assert [item["completed"] for item in status["progress"]] == [True] + [False] * 5
    assert status["is_complete"] is False


async def test_resume_snapshot(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.get("/api/v1/onboarding", headers=auth_headers)
    assert response.status_code == 200
    snapshot = response.json()
    assert snapshot["business_profile_id"] == profile["id"]
    assert snapshot["current_section"] == "farm"
    assert set(snapshot["sections"]) == {
        "basic",
        "farm",
        "financial",
        "compliance",
        "storage",
        "communications",
    }
    assert snapshot["sections"]["farm"] == {}
    assert snapshot["sections"]["basic"]["trading_name"] == "Grower Farms"


async def test_section_requirements(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.get(
        "/api/v1/onboarding/sections/compliance/requirements", headers=auth_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["can_proceed"] is False
    assert {r["doc_type"] for r in data["missing"]} == {
        "public_liability_policy",
        "workers_comp_policy",
    }

    response = await client.get(
        "/api/v1/onboarding/sections/storage/requirements", headers=auth_headers
    )
    assert response.json()["can_proceed"] is True


async def test_requirement_catalog(client: AsyncClient, auth_headers) -> None:
    response = await client.get("/api/v1/onboarding/requirements", headers=auth_headers)
    assert response.status_code == 200
    rules = response.json()
    assert any(
        r["section_name"] == "basic" and r["doc_type"] == "abn_certificate" and r["mandatory"]
        for r in rules
    )
    assert not any(r["section_name"] == "storage" for r in rules)

    response = await client.get(
        "/api/v1/onboarding/requirements", params={"section": "storage"}, headers=auth_headers
    )
    assert response.json() == []


async def test_navigation(client: AsyncClient, auth_headers) -> None:
    response = await client.get(
        "/api/v1/onboarding/sections/communications/navigation", headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json() == {
        "section": "communications",
        "next_section": None,
        "previous_section": "storage",
    }


async def test_saved_section_reads_back_unchanged(
    client: AsyncClient, auth_headers, profile, basic_payload
) -> None:
    response = await client.put(
        "/api/v1/onboarding/sections/basic", json={"data": basic_payload}, headers=auth_headers
    )
    assert response.status_code == 200

    response = await client.get("/api/v1/onboarding/sections/basic", headers=auth_headers)
    data = response.json()["data"]
    assert data == basic_payload
    assert "postal_address" not in data
    assert "property_addresses" not in data
    assert "personal" not in data["contact_emails"]


async def test_progress_is_complete_after_every_section(
    client: AsyncClient, auth_headers, profile
) -> None:
    for section in ("farm", "financial", "compliance", "storage"):
        await client.post(f"/api/v1/onboarding/sections/{section}/complete", headers=auth_headers)
    response = await client.get("/api/v1/onboarding/progress", headers=auth_headers)
    assert response.json()["is_complete"] is False

    await client.post("/api/v1/onboarding/sections/storage/complete", headers=auth_headers)
    response = await client.get("/api/v1/onboarding/progress", headers=auth_headers)
    assert response.json()["is_complete"] is False

    await client.post("/api/v1/onboarding/sections/communications/complete", headers=auth_headers)
    response = await client.get("/api/v1/onboarding/progress", headers=auth_headers)
    assert response.json()["is_complete"] is True
