from __future__ import annotations

import logging
from typing import Iterable
from uuid import UUID

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from src.application.errors import AuthError, PermissionDenied
from src.config.settings import Settings
from src.infrastructure.auth.context import AuthContext, fetch_role

logger = logging.getLogger(__name__)

PUBLIC_PATHS: Iterable[str] = (
    "/api/v1/healthz",
    "/docs",
    "/openapi.json",
    "/redoc",
)


class AuthMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)
        if any(request.url.path.startswith(path) for path in PUBLIC_PATHS):
            return await call_next(request)

        try:
            authorization = request.headers.get("Authorization")
            if not authorization:
                raise AuthError("Missing Authorization header")
            scheme, _, token = authorization.partition(" ")
            if scheme.lower() != "bearer" or not token:
                raise AuthError("Invalid Authorization header")
            farm_value = request.headers.get(self.settings.farm_header)
            if not farm_value:
                raise PermissionDenied("Missing farm header")
            try:
                farm_id = UUID(farm_value)
            except ValueError as exc:
                raise PermissionDenied("Invalid farm identifier") from exc
            jwt_service = getattr(request.app.state, "jwt_service", None)
            if jwt_service is None:
                raise RuntimeError("JWT service not configured")
            user_id, claims = jwt_service.subject(token)

            session_factory = getattr(request.app.state, "session_factory", None)
            if session_factory is None:
                raise RuntimeError("Session factory not configured")
            async with session_factory() as session:
                role = await fetch_role(session, user_id, farm_id)
            request.state.auth_context = AuthContext(
                user_id=user_id, farm_id=farm_id, role=role, claims=claims
            )
            return await call_next(request)
        except (AuthError, PermissionDenied) as exc:
            logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
            return JSONResponse(status_code=exc.status_code, content=exc.to_payload())
