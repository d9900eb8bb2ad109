from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import date

from fastapi import Request

from src.application.errors import AuthError
from src.config.settings import Settings, get_settings
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.db.session import SQLAlchemyUnitOfWork
from src.utils.datetime_tz import local_today


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_today(request: Request) -> date:
    """Calendar date on the farm, used for ages and record dates."""
    return local_today(get_app_settings(request).farm_timezone)
