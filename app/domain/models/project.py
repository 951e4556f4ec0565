"""
Project domain model.
Represents a project time can be logged against, and the memberships that
tie users to it.
"""

from dataclasses import dataclass, field
from typing import FrozenSet
from enum import Enum

from app.domain.models.base import BaseEntity, ValidationError


class ProjectStatus(str, Enum):
    """Project status."""
    ACTIVE = "active"
    CLOSED = "closed"
    ARCHIVED = "archived"


@dataclass(eq=False, kw_only=True)
class Project(BaseEntity):
    """
    Project entity.
    A project accepts time entries only while it is active and has time
    tracking enabled.
    """

    name: str
    identifier: str = ""
    status: ProjectStatus = ProjectStatus.ACTIVE
    time_tracking_enabled: bool = True

    def validate(self) -> None:
        """Validate project state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Project name is required", "name")

        if len(self.name) > 255:
            raise ValidationError("Project name too long (max 255 characters)", "name")

    @property
    def is_archived(self) -> bool:
        return self.status == ProjectStatus.ARCHIVED

    @property
    def is_active(self) -> bool:
        return self.status == ProjectStatus.ACTIVE

    @property
    def allows_time_logging(self) -> bool:
        """Check if the project accepts new time entries."""
        return self.is_active and self.time_tracking_enabled

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Membership:
    """Project membership with the capabilities granted by the member's roles."""

    user_id: int
    project_id: int
    capabilities: FrozenSet[str] = field(default_factory=frozenset)
