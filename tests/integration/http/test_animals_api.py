from __future__ import annotations

from datetime import date
from uuid import UUID

from sqlalchemy import select

from src.infrastructure.db.orm.animal_release import AnimalReleaseORM
from src.interfaces.http.deps import get_today

TODAY = date(2026, 6, 1)


async def test_animal_registration_flow(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    owner = auth_headers["owner"]
    worker = auth_headers["worker"]

    preview = await client.get("/api/v1/animals/preview-tag", headers=worker)
    assert preview.status_code == 200
    assert preview.json() == {
        "tag": "COW-001",
        "examples": ["COW-001", "COW-002", "COW-003"],
        "auto_generate": True,
    }

    create_response = await client.post(
        "/api/v1/animals/",
        json={"sex": "female", "name": "Bella", "birth_date": "2025-10-01"},
        headers=worker,
    )
    assert create_response.status_code == 201
    body = create_response.json()
    animal = body["animal"]
    assert animal["tag"] == "COW-001"
    assert animal["production_status"] == "heifer"
    assert animal["health_status"] == "healthy"
    assert body["health_record"] is None

    next_preview = await client.get("/api/v1/animals/preview-tag", headers=worker)
    assert next_preview.json()["tag"] == "COW-002"

    listing = await client.get("/api/v1/animals/", params={"search": "bel"}, headers=worker)
    assert listing.status_code == 200
    page = listing.json()
    assert page["total"] == 1
    assert page["items"][0]["id"] == animal["id"]

    update_response = await client.put(
        f"/api/v1/animals/{animal['id']}",
        json={"version": animal["version"], "breed": "Friesian"},
        headers=worker,
    )
    assert update_response.status_code == 200
    updated = update_response.json()
    assert updated["breed"] == "Friesian"

    stale = await client.put(
        f"/api/v1/animals/{animal['id']}",
        json={"version": animal["version"], "breed": "Jersey"},
        headers=worker,
    )
    assert stale.status_code == 409
    assert stale.json()["success"] is False

    duplicate = await client.post(
        "/api/v1/animals/",
        json={"sex": "female", "tag": "COW-001", "production_status": "heifer"},
        headers=owner,
    )
    assert duplicate.status_code == 409
    app.dependency_overrides.clear()


async def test_quarantined_registration_returns_auto_record(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    response = await client.post(
        "/api/v1/animals/",
        json={
            "sex": "female",
            "tag": "Q-7",
            "birth_date": "2023-02-01",
            "health_status": "quarantined",
        },
        headers=auth_headers["manager"],
    )
    assert response.status_code == 201
    body = response.json()
    record = body["health_record"]
    assert record["record_type"] == "illness"
    assert record["severity"] == "high"
    assert record["is_auto_generated"] is True
    assert record["completion_status"] == "pending"
    assert record["next_due_date"] == "2026-06-08"
    assert body["animal"]["auto_health_record_id"] == record["id"]
    assert body["requires_record_type_selection"] is True

    records = await client.get(
        "/api/v1/health/records/",
        params={"animal_id": body["animal"]["id"]},
        headers=auth_headers["worker"],
    )
    assert [r["id"] for r in records.json()] == [record["id"]]
    app.dependency_overrides.clear()


async def test_production_status_rules(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    worker = auth_headers["worker"]

    calc = await client.post(
        "/api/v1/animals/calculate-production-status",
        json={"birth_date": "2025-12-01", "sex": "female"},
        headers=worker,
    )
    assert calc.status_code == 200
    assert calc.json()["production_status"] == "heifer"
    assert calc.json()["allowed_statuses"] == ["heifer", "served"]
    assert calc.json()["overridable"] is True

    future = await client.post(
        "/api/v1/animals/calculate-production-status",
        json={"birth_date": "2026-07-01", "sex": "female"},
        headers=worker,
    )
    assert future.status_code == 422

    forced = {
        "sex": "female",
        "tag": "F-1",
        "birth_date": "2025-12-01",
        "production_status": "lactating",
        "override_status": True,
    }
    denied = await client.post("/api/v1/animals/", json=forced, headers=worker)
    assert denied.status_code == 403
    allowed = await client.post("/api/v1/animals/", json=forced, headers=auth_headers["manager"])
    assert allowed.status_code == 201
    animal_id = allowed.json()["animal"]["id"]

    recalc = await client.get(f"/api/v1/animals/{animal_id}/production-status", headers=worker)
    assert recalc.json()["current"] == "lactating"
    assert recalc.json()["calculated"] == "heifer"
    assert recalc.json()["should_update"] is True

    dry_without_date = await client.put(
        f"/api/v1/animals/{animal_id}/production-status",
        json={"production_status": "dry", "override_status": True},
        headers=auth_headers["owner"],
    )
    assert dry_without_date.status_code == 422

    dried = await client.put(
        f"/api/v1/animals/{animal_id}/production-status",
        json={
            "production_status": "dry",
            "override_status": True,
            "expected_calving_date": "2026-08-20",
        },
        headers=auth_headers["owner"],
    )
    assert dried.status_code == 200
    assert dried.json()["dry_off_date"] == "2026-06-01"
    assert dried.json()["service_date"] is None

    worker_override = await client.put(
        f"/api/v1/animals/{animal_id}/production-status",
        json={"production_status": "lactating", "override_status": True},
        headers=worker,
    )
    assert worker_override.status_code == 403

    calved = await client.put(
        f"/api/v1/animals/{animal_id}/production-status",
        json={"production_status": "lactating", "override_status": True},
        headers=auth_headers["owner"],
    )
    assert calved.status_code == 200
    assert calved.json()["expected_calving_date"] is None
    assert calved.json()["dry_off_date"] is None
    assert calved.json()["service_date"] is None
    app.dependency_overrides.clear()


async def test_release_animal(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    created = await client.post(
        "/api/v1/animals/",
        json={"sex": "male", "tag": "B-1", "birth_date": "2024-01-01"},
        headers=auth_headers["owner"],
    )
    animal_id = created.json()["animal"]["id"]
    assert created.json()["animal"]["production_status"] == "bull"

    worker_release = await client.post(
        f"/api/v1/animals/{animal_id}/release",
        json={"release_reason": "sold", "release_date": "2026-05-30", "notes": "Market"},
        headers=auth_headers["worker"],
    )
    assert worker_release.status_code == 403

    missing_cause = await client.post(
        f"/api/v1/animals/{animal_id}/release",
        json={"release_reason": "died", "release_date": "2026-05-30", "notes": "Found"},
        headers=auth_headers["owner"],
    )
    assert missing_cause.status_code == 422

    released = await client.post(
        f"/api/v1/animals/{animal_id}/release",
        json={
            "release_reason": "sold",
            "release_date": "2026-05-30",
            "notes": "Market day",
            "sale_price": "120000",
        },
        headers=auth_headers["owner"],
    )
    assert released.status_code == 200
    body = released.json()
    assert body["animal"]["status"] == "released"
    assert body["release"]["animal_data"]["tag"] == "B-1"

    active = await client.get(
        "/api/v1/animals/", params={"status": "active"}, headers=auth_headers["owner"]
    )
    assert active.json()["total"] == 0

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        row = (
            await session.execute(
                select(AnimalReleaseORM).where(AnimalReleaseORM.animal_id == UUID(animal_id))
            )
        ).scalar_one()
        assert row.release_reason == "sold"
    app.dependency_overrides.clear()
