from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    OWNER = "OWNER"
    MANAGER = "MANAGER"
    WORKER = "WORKER"

    def can_create(self) -> bool:
        return self in {Role.OWNER, Role.MANAGER, Role.WORKER}

    def can_update(self) -> bool:
        return self in {Role.OWNER, Role.MANAGER, Role.WORKER}

    def can_release(self) -> bool:
        return self in {Role.OWNER, Role.MANAGER}

    def can_override_status(self) -> bool:
        """Whether a production status outside the derived allowed set may be forced."""
        return self in {Role.OWNER, Role.MANAGER}

    def can_manage_settings(self) -> bool:
        return self is Role.OWNER

    def can_manage_catalogs(self) -> bool:
        """Buyers, age categories and inventory items."""
        return self in {Role.OWNER, Role.MANAGER}
