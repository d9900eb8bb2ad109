from __future__ import annotations

from typing import Any, Mapping


class AppError(Exception):
    """Base for every failure surfaced to API callers.

    Rendered uniformly as ``{"success": false, "error": <message>, "code": <code>}``.
    """

    code = "app_error"
    status_code = 400

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": False, "error": self.message, "code": self.code}
        if self.details is not None:
            payload["details"] = dict(self.details)
        return payload


class AuthError(AppError):
    code = "auth_error"
    status_code = 401


class PermissionDenied(AppError):
    code = "forbidden"
    status_code = 403


class NotFound(AppError):
    """Row missing or owned by another farm; both look the same to the caller."""

    code = "not_found"
    status_code = 404


class ValidationError(AppError):
    code = "validation_error"
    status_code = 422


class ConflictError(AppError):
    code = "conflict"
    status_code = 409


class InfrastructureError(AppError):
    """Query or network failure reported by the data store."""

    code = "infrastructure_error"
    status_code = 500
