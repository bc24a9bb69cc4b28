"""Business profile API tests (in-memory services behind the dependencies)."""

from httpx import AsyncClient

from app.infrastructure.security.jwt import create_access_token

PROFILE = {
    "full_name": "Jane Grower",
    "trading_name": "Grower Farms",
    "abn": "51 824 753 556",
    "gst_registered": True,
    "business_structure": "sole_trader",
    "contact_emails": {"accounts": "accounts@growerfarms.com.au", "admin": "admin@growerfarms.com.au"},
}


async def test_requires_authentication(client: AsyncClient) -> None:
    response = await client.get("/api/v1/business-profile")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_invalid_token_rejected(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/business-profile", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_create_and_get_profile(client: AsyncClient, auth_headers, user_id) -> None:
    response = await client.post("/api/v1/business-profile", json=PROFILE, headers=auth_headers)
    assert response.status_code == 201
    created = response.json()
    assert created["user_id"] == user_id
    assert created["abn"] == "51824753556"
    assert created["business_structure"] == "sole_trader"

    response = await client.get("/api/v1/business-profile", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]


async def test_second_profile_conflicts(client: AsyncClient, auth_headers) -> None:
    await client.post("/api/v1/business-profile", json=PROFILE, headers=auth_headers)
    response = await client.post("/api/v1/business-profile", json=PROFILE, headers=auth_headers)
    assert response.status_code == 409
    assert response.json()["error"] == "BUSINESS_PROFILE_ALREADY_EXISTS"


async def test_profile_not_found_before_creation(client: AsyncClient, auth_headers) -> None:
    response = await client.get("/api/v1/business-profile", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_invalid_abn_returns_400(client: AsyncClient, auth_headers) -> None:
    response = await client.post(
        "/api/v1/business-profile", json={**PROFILE, "abn": "123"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["details"] == {"field": "abn"}


async def test_invalid_email_returns_422(client: AsyncClient, auth_headers) -> None:
    body = {**PROFILE, "contact_emails": {"accounts": "nope", "admin": "admin@growerfarms.com.au"}}
    response = await client.post("/api/v1/business-profile", json=body, headers=auth_headers)
    assert response.status_code == 422


async def test_patch_profile(client: AsyncClient, auth_headers) -> None:
    await client.post("/api/v1/business-profile", json=PROFILE, headers=auth_headers)
    response = await client.patch(
        "/api/v1/business-profile", json={"trading_name": "Renamed"}, headers=auth_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["trading_name"] == "Renamed"
    assert data["full_name"] == "Jane Grower"


async def test_users_see_only_their_own_profile(client: AsyncClient, auth_headers) -> None:
    await client.post("/api/v1/business-profile", json=PROFILE, headers=auth_headers)
    other = {"Authorization": f"Bearer {create_access_token('user-2')}"}
    response = await client.get("/api/v1/business-profile", headers=other)
    assert response.status_code == 404


async def test_complete_requires_every_section(client: AsyncClient, auth_headers) -> None:
    await client.post("/api/v1/business-profile", json=PROFILE, headers=auth_headers)
    response = await client.post("/api/v1/business-profile/complete", headers=auth_headers)
    assert response.status_code == 400

    for section in ("basic", "farm", "financial", "compliance", "storage", "communications"):
        response = await client.post(
            f"/api/v1/onboarding/sections/{section}/complete", headers=auth_headers
        )
        assert response.status_code == 200

    response = await client.post("/api/v1/business-profile/complete", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["onboarding_complete_at"] is not None


async def test_patch_null_required_field_returns_400(client: AsyncClient, auth_headers) -> None:
    await client.post("/api/v1/business-profile", json=PROFILE, headers=auth_headers)
    for field in ("abn", "main_contact"):
        response = await client.patch(
            "/api/v1/business-profile", json={field: None}, headers=auth_headers
        )
        assert response.status_code == 400
        assert response.json()["details"] == {"field": field}

    response = await client.get("/api/v1/business-profile", headers=auth_headers)
    assert response.json()["abn"] == "51824753556"


async def test_patch_null_clears_acn(client: AsyncClient, auth_headers) -> None:
    await client.post(
        "/api/v1/business-profile", json={**PROFILE, "acn": "004 085 616"}, headers=auth_headers
    )
    response = await client.patch(
        "/api/v1/business-profile", json={"acn": None}, headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["acn"] is None
