"""
TimeEntry domain model.
Represents hours logged by a user against a project and issue on a given day.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Dict, Any

from app.domain.models.base import BaseEntity, ValidationError


@dataclass(eq=False, kw_only=True)
class TimeEntry(BaseEntity):
    """
    TimeEntry entity.
    The owning user and the author are both recorded; entries logged through
    the spent-time workflow always have the same owner and author.
    """

    user_id: int
    author_id: int
    project_id: int
    spent_on: date
    hours: Decimal
    issue_id: Optional[int] = None
    comments: Optional[str] = None

    def validate(self) -> None:
        """Validate time entry state."""
        if not self.user_id:
            raise ValidationError("User ID is required", "user_id")

        if not self.project_id:
            raise ValidationError("Project ID is required", "project_id")

        if not isinstance(self.spent_on, date):
            raise ValidationError("Spent on date is required", "spent_on")

        if not isinstance(self.hours, Decimal):
            self.hours = Decimal(str(self.hours))

        if self.comments and len(self.comments) > 1024:
            raise ValidationError("Comments too long (max 1024 characters)", "comments")

    def attach_issue(self, issue) -> None:
        """Attach an issue, keeping the entry and the issue on the same project."""
        if issue.project_id != self.project_id:
            raise ValidationError(
                f"Issue #{issue.id} does not belong to project {self.project_id}",
                "issue_id"
            )
        self.issue_id = issue.id
        self.mark_as_updated()

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id

    def falls_within(self, start: date, end: date) -> bool:
        """Check if the entry was spent inside the inclusive window."""
        return start <= self.spent_on <= end

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = super().to_dict()
        data["spent_on"] = self.spent_on.isoformat()
        data["hours"] = str(self.hours)
        return data
