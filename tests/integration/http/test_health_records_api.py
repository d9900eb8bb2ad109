from __future__ import annotations

from datetime import date

from sqlalchemy import func, select, text

from src.infrastructure.db.orm.health_record import HealthFollowUpORM, HealthRecordORM
from src.interfaces.http.deps import get_today

TODAY = date(2026, 6, 1)


async def register_cow(client, headers, tag="H-1") -> str:
    response = await client.post(
        "/api/v1/animals/",
        json={"sex": "female", "tag": tag, "birth_date": "2022-03-01", "production_status": "lactating"},
        headers=headers,
    )
    assert response.status_code == 201
    return response.json()["animal"]["id"]


async def test_follow_up_resolves_illness_and_restores_health(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    worker = auth_headers["worker"]
    animal_id = await register_cow(client, worker)

    created = await client.post(
        "/api/v1/health/records/",
        json={
            "animal_id": animal_id,
            "record_type": "illness",
            "record_date": "2026-05-20",
            "description": "Milk fever",
            "severity": "high",
        },
        headers=worker,
    )
    assert created.status_code == 201
    assert created.json()["health_status"] == "sick"
    record_id = created.json()["health_record"]["id"]

    progress = await client.post(
        f"/api/v1/health/records/{record_id}/follow-up",
        json={
            "status": "improving",
            "description": "Eating again",
            "record_date": "2026-05-25",
            "next_followup_date": "2026-05-31",
        },
        headers=worker,
    )
    assert progress.status_code == 201
    assert progress.json()["resolved_record_ids"] == []
    assert progress.json()["health_status"] == "sick"

    original = await client.get(f"/api/v1/health/records/{record_id}", headers=worker)
    assert original.json()["next_due_date"] == "2026-05-31"
    assert original.json()["is_resolved"] is False

    resolved = await client.post(
        f"/api/v1/health/records/{record_id}/follow-up",
        json={
            "status": "recovered",
            "description": "Back to normal",
            "record_date": "2026-05-31",
            "resolved": True,
            "treatment_effectiveness": "effective",
        },
        headers=worker,
    )
    assert resolved.status_code == 201
    body = resolved.json()
    assert body["resolved_record_ids"] == [record_id]
    assert body["follow_up"]["description"] == "Follow-up: Back to normal"
    assert body["relation"]["original_record_id"] == record_id
    assert body["relation"]["treatment_effectiveness"] == "effective"

    animal = await client.get(f"/api/v1/animals/{animal_id}", headers=worker)
    # The first follow-up is still an open treatment
    assert animal.json()["health_status"] == "requires_attention"
    assert body["health_status"] == "requires_attention"
    assert body["health_status_updated"] is True
    app.dependency_overrides.clear()


async def test_delete_record_cascades_follow_ups(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    manager = auth_headers["manager"]
    animal_id = await register_cow(client, manager, tag="H-2")
    created = await client.post(
        "/api/v1/health/records/",
        json={
            "animal_id": animal_id,
            "record_type": "injury",
            "record_date": "2026-05-28",
            "description": "Hoof injury",
            "severity": "medium",
        },
        headers=manager,
    )
    record_id = created.json()["health_record"]["id"]
    for day in ("2026-05-29", "2026-05-30"):
        follow = await client.post(
            f"/api/v1/health/records/{record_id}/follow-up",
            json={"status": "stable", "description": "Dressing changed", "record_date": day},
            headers=manager,
        )
        assert follow.status_code == 201

    deleted = await client.delete(f"/api/v1/health/records/{record_id}", headers=manager)
    assert deleted.status_code == 200
    assert len(deleted.json()["deleted_record_ids"]) == 3
    assert deleted.json()["health_status"] == "healthy"

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        records = (await session.execute(select(func.count(HealthRecordORM.id)))).scalar()
        relations = (await session.execute(select(func.count(HealthFollowUpORM.id)))).scalar()
    assert records == 0
    assert relations == 0

    missing = await client.get(f"/api/v1/health/records/{record_id}", headers=manager)
    assert missing.status_code == 404
    assert missing.json() == {
        "success": False,
        "error": "Health record not found",
        "code": "not_found",
    }
    app.dependency_overrides.clear()


async def test_completing_auto_generated_record(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    worker = auth_headers["worker"]
    created = await client.post(
        "/api/v1/animals/",
        json={"sex": "female", "tag": "S-5", "production_status": "heifer", "health_status": "sick"},
        headers=worker,
    )
    record_id = created.json()["health_record"]["id"]

    updated = await client.put(
        f"/api/v1/health/records/{record_id}",
        json={"veterinarian": "Dr. Wanjiru", "symptoms": "High temperature"},
        headers=worker,
    )
    assert updated.status_code == 200
    assert updated.json()["is_auto_generated"] is False
    assert updated.json()["completion_status"] == "completed"

    pending = await client.get(
        "/api/v1/health/records/", params={"is_resolved": False}, headers=worker
    )
    assert [r["id"] for r in pending.json()] == [record_id]
    app.dependency_overrides.clear()


async def test_health_record_validation(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    worker = auth_headers["worker"]
    animal_id = await register_cow(client, worker, tag="H-3")
    future = await client.post(
        "/api/v1/health/records/",
        json={
            "animal_id": animal_id,
            "record_type": "checkup",
            "record_date": "2026-06-02",
            "description": "Routine",
        },
        headers=worker,
    )
    assert future.status_code == 422
    assert future.json()["code"] == "validation_error"

    bad_type = await client.post(
        "/api/v1/health/records/",
        json={
            "animal_id": animal_id,
            "record_type": "surgery",
            "record_date": "2026-05-02",
            "description": "Routine",
        },
        headers=worker,
    )
    assert bad_type.status_code == 422
    assert bad_type.json()["success"] is False
    app.dependency_overrides.clear()


async def test_delete_record_removes_follow_ups_of_follow_ups(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    owner = auth_headers["owner"]
    animal_id = await register_cow(client, owner, tag="H-4")
    created = await client.post(
        "/api/v1/health/records/",
        json={
            "animal_id": animal_id,
            "record_type": "illness",
            "record_date": "2026-05-20",
            "description": "Pneumonia",
            "severity": "high",
        },
        headers=owner,
    )
    record_id = created.json()["health_record"]["id"]
    first = await client.post(
        f"/api/v1/health/records/{record_id}/follow-up",
        json={"status": "stable", "description": "Antibiotics started", "record_date": "2026-05-21"},
        headers=owner,
    )
    first_id = first.json()["follow_up"]["id"]
    second = await client.post(
        f"/api/v1/health/records/{first_id}/follow-up",
        json={"status": "improving", "description": "Breathing easier", "record_date": "2026-05-23"},
        headers=owner,
    )
    assert second.status_code == 201

    deleted = await client.delete(f"/api/v1/health/records/{record_id}", headers=owner)
    assert deleted.status_code == 200
    assert len(deleted.json()["deleted_record_ids"]) == 3
    assert deleted.json()["health_status"] == "healthy"

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        records = (await session.execute(select(func.count(HealthRecordORM.id)))).scalar()
        relations = (await session.execute(select(func.count(HealthFollowUpORM.id)))).scalar()
    assert records == 0
    assert relations == 0

    animal = await client.get(f"/api/v1/animals/{animal_id}", headers=owner)
    assert animal.json()["health_status"] == "healthy"
    app.dependency_overrides.clear()


async def test_records_are_stored_in_animal_health_records(app, client, auth_headers):
    app.dependency_overrides[get_today] = lambda: TODAY
    worker = auth_headers["worker"]
    animal_id = await register_cow(client, worker, tag="H-5")
    created = await client.post(
        "/api/v1/health/records/",
        json={
            "animal_id": animal_id,
            "record_type": "vaccination",
            "record_date": "2026-05-30",
            "description": "FMD booster",
        },
        headers=worker,
    )
    assert created.status_code == 201

    async with app.state.session_factory() as session:  # type: ignore[attr-defined]
        stored = (
            await session.execute(text("SELECT description FROM animal_health_records"))
        ).scalars().all()
    assert stored == ["FMD booster"]
    app.dependency_overrides.clear()
