"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Roles a user account can hold."""

    USER = "user"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list[str]:
        """Return the raw string values, in declaration order."""
        return [role.value for role in cls]
