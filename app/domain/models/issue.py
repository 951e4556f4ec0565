"""
Issue domain model.
Represents an issue within a project that time entries are logged against.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.models.base import BaseEntity, ValidationError


@dataclass(eq=False, kw_only=True)
class Issue(BaseEntity):
    """
    Issue entity.
    An issue belongs to exactly one project and may be assigned to a user.
    """

    project_id: int
    subject: str
    assigned_to_id: Optional[int] = None
    is_closed: bool = False

    def validate(self) -> None:
        """Validate issue state."""
        if not self.project_id:
            raise ValidationError("Project ID is required", "project_id")

        if not self.subject or not self.subject.strip():
            raise ValidationError("Issue subject is required", "subject")

        if len(self.subject) > 255:
            raise ValidationError("Subject too long (max 255 characters)", "subject")

    @property
    def is_open(self) -> bool:
        return not self.is_closed

    def is_assigned_to(self, user_id: int) -> bool:
        return self.assigned_to_id is not None and self.assigned_to_id == user_id

    def belongs_to(self, project_id: int) -> bool:
        return self.project_id == project_id

    def __str__(self) -> str:
        return f"#{self.id}: {self.subject}"
