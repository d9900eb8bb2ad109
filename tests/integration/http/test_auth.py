from __future__ import annotations

from uuid import uuid4


async def test_health_check_is_public(client):
    response = await client.get("/api/v1/healthz")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


async def test_missing_token_is_rejected(client, farm_id):
    response = await client.get("/api/v1/animals/", headers={"X-Farm-ID": str(farm_id)})
    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": "Missing Authorization header",
        "code": "auth_error",
    }


async def test_invalid_token_is_rejected(client, farm_id):
    response = await client.get(
        "/api/v1/animals/",
        headers={"Authorization": "Bearer not-a-jwt", "X-Farm-ID": str(farm_id)},
    )
    assert response.status_code == 401


async def test_farm_header_is_required(client, auth_headers):
    headers = {"Authorization": auth_headers["owner"]["Authorization"]}
    response = await client.get("/api/v1/animals/", headers=headers)
    assert response.status_code == 403


async def test_non_member_is_forbidden(client, jwt_service, seeded_memberships):
    token = jwt_service.create_access_token(subject=seeded_memberships["owner"])
    response = await client.get(
        "/api/v1/animals/",
        headers={"Authorization": f"Bearer {token}", "X-Farm-ID": str(uuid4())},
    )
    assert response.status_code == 403
    assert response.json()["code"] == "forbidden"


async def test_refresh_tokens_are_not_accepted(client, jwt_service, auth_headers, seeded_memberships, farm_id):
    token = jwt_service.create_access_token(
        subject=seeded_memberships["owner"], extra_claims={"typ": "refresh"}
    )
    response = await client.get(
        "/api/v1/animals/",
        headers={"Authorization": f"Bearer {token}", "X-Farm-ID": str(farm_id)},
    )
    assert response.status_code == 401
