from __future__ import annotations

from src.domain.models.farm_settings import TaggingSettings


def format_tag(prefix: str, number: int, padding: int) -> str:
    body = str(number).zfill(padding)
    return f"{prefix}-{body}" if prefix else body


def next_tag(settings: TaggingSettings) -> str:
    return format_tag(settings.prefix, settings.next_number, settings.number_padding)


def example_tags(settings: TaggingSettings, count: int = 3) -> list[str]:
    return [
        format_tag(settings.prefix, settings.next_number + i, settings.number_padding)
        for i in range(count)
    ]
