"""
User domain model.
Represents a system user whose time can be reported on.
"""

from dataclasses import dataclass
from enum import Enum

from app.domain.models.base import BaseEntity, ValidationError


class UserStatus(str, Enum):
    """User account status."""
    ACTIVE = "active"
    REGISTERED = "registered"
    LOCKED = "locked"


@dataclass(eq=False, kw_only=True)
class User(BaseEntity):
    """
    User entity.
    Holds the identity fields needed to list and sort users in reports.
    """

    login: str
    firstname: str = ""
    lastname: str = ""
    status: UserStatus = UserStatus.ACTIVE
    admin: bool = False

    def validate(self) -> None:
        """Validate user state."""
        if not self.login or not self.login.strip():
            raise ValidationError("User login is required", "login")

        if len(self.login) > 255:
            raise ValidationError("Login too long (max 255 characters)", "login")

    @property
    def name(self) -> str:
        """Display name, falling back to the login."""
        full_name = f"{self.firstname} {self.lastname}".strip()
        return full_name or self.login

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def sort_key(self) -> tuple:
        """Stable ordering key: name first, id to break ties."""
        return (self.name.lower(), self.id or 0)

    def __str__(self) -> str:
        return self.name
