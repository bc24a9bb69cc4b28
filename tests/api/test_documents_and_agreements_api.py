"""Document and agreement API tests (in-memory services behind the dependencies)."""

import pytest
from httpx import AsyncClient

from app.infrastructure.security.jwt import create_access_token


@pytest.fixture
async def profile(client: AsyncClient, auth_headers, basic_payload) -> dict:
    response = await client.post(
        "/api/v1/business-profile",
        json={k: basic_payload[k] for k in ("full_name", "trading_name", "abn")},
        headers=auth_headers,
    )
    assert response.status_code == 201
    return response.json()


async def _upload(client: AsyncClient, headers, doc_type: str, section: str | None = None):
    data = {"doc_type": doc_type}
    if section:
        data["section"] = section
    return await client.post(
        "/api/v1/documents",
        data=data,
        files={"file": ("certificate.pdf", b"%PDF-1.7 test", "application/pdf")},
        headers=headers,
    )


async def test_upload_document(client: AsyncClient, auth_headers, profile, backend) -> None:
    response = await _upload(client, auth_headers, "abn_certificate", "basic")
    assert response.status_code == 201
    doc = response.json()
    assert doc["business_profile_id"] == profile["id"]
    assert doc["section_name"] == "basic"
    assert doc["doc_type"] == "abn_certificate"
    assert doc["file_url"].endswith(".pdf")
    assert len(backend.storage.objects) == 1


async def test_upload_satisfies_requirement(client: AsyncClient, auth_headers, profile) -> None:
    await _upload(client, auth_headers, "abn_certificate", "basic")
    response = await client.get(
        "/api/v1/onboarding/sections/basic/requirements", headers=auth_headers
    )
    assert response.json()["can_proceed"] is True


async def test_upload_unknown_doc_type_returns_400(client: AsyncClient, auth_headers, profile) -> None:
    response = await _upload(client, auth_headers, "passport", "basic")
    assert response.status_code == 400


async def test_upload_unsupported_content_type(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.post(
        "/api/v1/documents",
        data={"doc_type": "abn_certificate"},
        files={"file": ("run.sh", b"#!/bin/sh", "text/x-shellscript")},
        headers=auth_headers,
    )
    assert response.status_code == 415


async def test_list_documents_with_section_filter(client: AsyncClient, auth_headers, profile) -> None:
    await _upload(client, auth_headers, "abn_certificate", "basic")
    await _upload(client, auth_headers, "bas_statement", "financial")
    await _upload(client, auth_headers, "privacy_consent")

    response = await client.get("/api/v1/documents", headers=auth_headers)
    assert len(response.json()) == 3

    response = await client.get(
        "/api/v1/documents", params={"section": "financial"}, headers=auth_headers
    )
    assert [d["doc_type"] for d in response.json()] == ["bas_statement"]


async def test_delete_document(client: AsyncClient, auth_headers, profile, backend) -> None:
    first = (await _upload(client, auth_headers, "abn_certificate", "basic")).json()
    second = (await _upload(client, auth_headers, "bas_statement", "financial")).json()

    response = await client.delete(f"/api/v1/documents/{first['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"id": first["id"], "deleted": True}

    remaining = (await client.get("/api/v1/documents", headers=auth_headers)).json()
    assert [d["id"] for d in remaining] == [second["id"]]
    assert len(backend.storage.objects) == 2


async def test_cannot_delete_another_users_document(
    client: AsyncClient, auth_headers, profile, basic_payload
) -> None:
    doc = (await _upload(client, auth_headers, "abn_certificate", "basic")).json()
    other = {"Authorization": f"Bearer {create_access_token('user-2')}"}
    await client.post(
        "/api/v1/business-profile",
        json={k: basic_payload[k] for k in ("full_name", "trading_name", "abn")},
        headers=other,
    )
    response = await client.delete(f"/api/v1/documents/{doc['id']}", headers=other)
    assert response.status_code == 404


async def test_sign_and_resign_agreement(client: AsyncClient, auth_headers, profile, user_id) -> None:
    response = await client.post(
        "/api/v1/agreements/service_agreement/sign",
        json={"file_url": "https://files.example.com/sa.pdf"},
        headers=auth_headers,
    )
    assert response.status_code == 200
    first = response.json()
    assert first["signed_by_user"] == user_id
    assert first["agreement"] == "service_agreement"

    response = await client.post("/api/v1/agreements/service_agreement/sign", headers=auth_headers)
    assert response.status_code == 200

    agreements = (await client.get("/api/v1/agreements", headers=auth_headers)).json()
    assert len(agreements) == 1
    assert agreements[0]["file_url"] is None


async def test_agreement_status(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.get("/api/v1/agreements/privacy_consent", headers=auth_headers)
    assert response.json() == {"agreement": "privacy_consent", "signed": False, "signature": None}

    await client.post("/api/v1/agreements/privacy_consent/sign", headers=auth_headers)
    response = await client.get("/api/v1/agreements/privacy_consent", headers=auth_headers)
    assert response.json()["signed"] is True


async def test_unknown_agreement_type_returns_400(client: AsyncClient, auth_headers, profile) -> None:
    response = await client.post("/api/v1/agreements/nda/sign", headers=auth_headers)
    assert response.status_code == 400
