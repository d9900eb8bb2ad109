from __future__ import annotations


async def test_settings_defaults_and_owner_updates(client, auth_headers):
    owner = auth_headers["owner"]
    breeding = await client.get("/api/v1/settings/breeding", headers=auth_headers["worker"])
    assert breeding.status_code == 200
    assert breeding.json()["default_gestation_days"] == 280
    assert breeding.json()["minimum_breeding_age_months"] == 15

    denied = await client.put(
        "/api/v1/settings/tagging",
        json={"auto_generate": True, "prefix": "HF", "next_number": 10, "number_padding": 4},
        headers=auth_headers["manager"],
    )
    assert denied.status_code == 403

    saved = await client.put(
        "/api/v1/settings/tagging",
        json={"auto_generate": True, "prefix": "HF", "next_number": 10, "number_padding": 4},
        headers=owner,
    )
    assert saved.status_code == 200
    preview = await client.get("/api/v1/animals/preview-tag", headers=owner)
    assert preview.json()["examples"] == ["HF-0010", "HF-0011", "HF-0012"]


async def test_financial_settings_require_known_buyer(client, auth_headers):
    owner = auth_headers["owner"]
    missing = await client.put(
        "/api/v1/settings/financial",
        json={"default_currency": "KES", "default_buyer_id": "00000000-0000-0000-0000-000000000001"},
        headers=owner,
    )
    assert missing.status_code == 404

    buyer = await client.post(
        "/api/v1/buyers/", json={"name": "Brookside Dairy"}, headers=owner
    )
    assert buyer.status_code == 201
    buyer_id = buyer.json()["id"]

    saved = await client.put(
        "/api/v1/settings/financial",
        json={"default_currency": "KES", "default_buyer_id": buyer_id},
        headers=owner,
    )
    assert saved.status_code == 200
    fetched = await client.get("/api/v1/settings/financial", headers=owner)
    assert fetched.json()["default_buyer_id"] == buyer_id


async def test_disabling_auto_records(client, auth_headers):
    owner = auth_headers["owner"]
    current = (await client.get("/api/v1/settings/health", headers=owner)).json()
    current["auto_generate_records"] = False
    current.pop("updated_at", None)
    current.pop("farm_id", None)
    saved = await client.put("/api/v1/settings/health", json=current, headers=owner)
    assert saved.status_code == 200

    created = await client.post(
        "/api/v1/animals/",
        json={"sex": "female", "tag": "N-1", "production_status": "heifer", "health_status": "sick"},
        headers=owner,
    )
    assert created.status_code == 201
    assert created.json()["health_record"] is None
