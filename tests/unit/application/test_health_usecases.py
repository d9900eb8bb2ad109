from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from src.application.errors import NotFound, ValidationError
from src.application.use_cases.health import (
    create_follow_up,
    create_health_record,
    delete_health_record,
    update_health_record,
)
from src.domain.models.health_record import HealthRecord
from src.domain.services.auto_health_record import build_auto_record
from src.domain.value_objects.health import (
    FollowUpStatus,
    HealthRecordType,
    HealthStatus,
    Severity,
)
from src.domain.value_objects.role import Role


async def test_serious_illness_marks_animal_sick(uow, farm_id, today, cow):
    result = await create_health_record.execute(
        uow,
        farm_id,
        Role.WORKER,
        uuid4(),
        create_health_record.CreateHealthRecordInput(
            animal_id=cow.id,
            record_type=HealthRecordType.ILLNESS,
            record_date=today,
            description=" Mastitis ",
            severity=Severity.HIGH,
        ),
        today,
    )
    assert result.health_record.description == "Mastitis"
    assert result.health_status is HealthStatus.SICK
    assert cow.health_status == "sick"


async def test_vaccination_keeps_animal_healthy(uow, farm_id, today, cow):
    result = await create_health_record.execute(
        uow,
        farm_id,
        Role.WORKER,
        uuid4(),
        create_health_record.CreateHealthRecordInput(
            animal_id=cow.id,
            record_type=HealthRecordType.VACCINATION,
            record_date=today,
            description="FMD booster",
        ),
        today,
    )
    assert result.health_status is HealthStatus.HEALTHY


async def test_root_checkup_must_belong_to_animal(uow, farm_id, today, cow):
    other = HealthRecord.create(
        farm_id=farm_id,
        animal_id=uuid4(),
        record_type="checkup",
        record_date=today,
        description="other animal",
    )
    uow.health_records.rows[other.id] = other
    with pytest.raises(ValidationError):
        await create_health_record.execute(
            uow,
            farm_id,
            Role.WORKER,
            uuid4(),
            create_health_record.CreateHealthRecordInput(
                animal_id=cow.id,
                record_type=HealthRecordType.TREATMENT,
                record_date=today,
                description="Antibiotics",
                root_checkup_id=other.id,
            ),
            today,
        )


async def test_delete_removes_follow_ups_and_relations(uow, farm_id, today, cow):
    created = await create_health_record.execute(
        uow,
        farm_id,
        Role.OWNER,
        uuid4(),
        create_health_record.CreateHealthRecordInput(
            animal_id=cow.id,
            record_type=HealthRecordType.INJURY,
            record_date=date(2026, 5, 25),
            description="Leg wound",
            severity=Severity.MEDIUM,
        ),
        today,
    )
    original_id = created.health_record.id
    for day in (27, 29):
        await create_follow_up.execute(
            uow,
            farm_id,
            Role.WORKER,
            uuid4(),
            original_id,
            create_follow_up.FollowUpOutcome(
                status=FollowUpStatus.IMPROVING,
                description=f"Check on day {day}",
                record_date=date(2026, 5, day),
            ),
            today,
        )
    assert len(uow.health_records.rows) == 3
    assert len(uow.health_follow_ups.rows) == 2

    result = await delete_health_record.execute(uow, farm_id, Role.MANAGER, original_id)

    assert len(result.deleted_record_ids) == 3
    assert uow.health_records.rows == {}
    assert uow.health_follow_ups.rows == []
    assert result.health_status is HealthStatus.HEALTHY
    assert cow.health_status == "healthy"


async def test_delete_removes_nested_follow_up_chain(uow, farm_id, today, cow):
    created = await create_health_record.execute(
        uow,
        farm_id,
        Role.OWNER,
        uuid4(),
        create_health_record.CreateHealthRecordInput(
            animal_id=cow.id,
            record_type=HealthRecordType.ILLNESS,
            record_date=date(2026, 5, 20),
            description="Mastitis",
            severity=Severity.HIGH,
        ),
        today,
    )
    parent_id = created.health_record.id
    chain = [parent_id]
    for day in (22, 24):
        result = await create_follow_up.execute(
            uow,
            farm_id,
            Role.WORKER,
            uuid4(),
            chain[-1],
            create_follow_up.FollowUpOutcome(
                status=FollowUpStatus.STABLE,
                description=f"Udder check on day {day}",
                record_date=date(2026, 5, day),
            ),
            today,
        )
        chain.append(result.follow_up.id)
    assert len(uow.health_records.rows) == 3
    assert len(uow.health_follow_ups.rows) == 2

    result = await delete_health_record.execute(uow, farm_id, Role.OWNER, parent_id)

    assert sorted(result.deleted_record_ids) == sorted(chain)
    assert uow.health_records.rows == {}
    assert uow.health_follow_ups.rows == []
    assert cow.health_status == "healthy"


async def test_delete_clears_auto_record_reference(uow, farm_id, today, cow):
    cow.health_status = "sick"
    record = build_auto_record(cow, today, follow_up_days=7)
    uow.health_records.rows[record.id] = record
    cow.auto_health_record_id = record.id

    await delete_health_record.execute(uow, farm_id, Role.OWNER, record.id)

    assert cow.auto_health_record_id is None
    assert cow.health_status == "healthy"


async def test_delete_missing_record(uow, farm_id):
    with pytest.raises(NotFound):
        await delete_health_record.execute(uow, farm_id, Role.OWNER, uuid4())


async def test_filling_in_auto_record_completes_it(uow, farm_id, today, cow):
    cow.health_status = "requires_attention"
    record = build_auto_record(cow, today, follow_up_days=7)
    uow.health_records.rows[record.id] = record

    untouched = await update_health_record.execute(
        uow,
        farm_id,
        Role.WORKER,
        record.id,
        update_health_record.UpdateHealthRecordInput(notes="Seen in the paddock"),
        today,
    )
    assert untouched.is_auto_generated is True
    assert untouched.completion_status == "pending"

    updated = await update_health_record.execute(
        uow,
        farm_id,
        Role.WORKER,
        record.id,
        update_health_record.UpdateHealthRecordInput(
            record_type=HealthRecordType.INJURY, symptoms="Limping on left hind"
        ),
        today,
    )
    assert updated.is_auto_generated is False
    assert updated.completion_status == "completed"
    assert updated.record_type == "injury"
    # Low severity injury stays below "sick"
    assert cow.health_status == "requires_attention"


async def test_resolving_record_stamps_date_and_refreshes(uow, farm_id, today, cow):
    record = HealthRecord.create(
        farm_id=farm_id,
        animal_id=cow.id,
        record_type="illness",
        record_date=date(2026, 5, 1),
        description="Pneumonia",
        severity="critical",
    )
    uow.health_records.rows[record.id] = record
    cow.health_status = "sick"

    updated = await update_health_record.execute(
        uow,
        farm_id,
        Role.WORKER,
        record.id,
        update_health_record.UpdateHealthRecordInput(is_resolved=True),
        today,
    )
    assert updated.resolved_date == today
    assert cow.health_status == "healthy"

    reopened = await update_health_record.execute(
        uow,
        farm_id,
        Role.WORKER,
        record.id,
        update_health_record.UpdateHealthRecordInput(is_resolved=False),
        today,
    )
    assert reopened.resolved_date is None
    assert cow.health_status == "sick"
