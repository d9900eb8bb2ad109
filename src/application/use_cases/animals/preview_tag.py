from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from src.application.interfaces.unit_of_work import UnitOfWork
from src.application.use_cases.settings import get_settings
from src.domain.models.farm_settings import TaggingSettings
from src.domain.services.tag_format import example_tags, next_tag


@dataclass(slots=True)
class TagPreview:
    tag: str
    examples: list[str]
    auto_generate: bool


async def execute(uow: UnitOfWork, farm_id: UUID) -> TagPreview:
    settings = await get_settings.execute(uow, farm_id, TaggingSettings)
    return TagPreview(
        tag=next_tag(settings),
        examples=example_tags(settings),
        auto_generate=settings.auto_generate,
    )
