"""
Issue mapper for converting between domain entities and database models.
"""

from app.domain.models.issue import Issue
from app.infrastructure.db.models import IssueModel


class IssueMapper:
    """Maps between Issue domain entity and IssueModel database model."""

    def domain_to_model(self, issue: Issue) -> IssueModel:
        """Convert Issue domain entity to IssueModel."""
        return IssueModel(
            id=issue.id,
            project_id=issue.project_id,
            assigned_to_id=issue.assigned_to_id,
            subject=issue.subject,
            is_closed=issue.is_closed
        )

    def model_to_domain(self, model: IssueModel) -> Issue:
        """Convert IssueModel to Issue domain entity."""
        return Issue(
            id=model.id,
            project_id=model.project_id,
            assigned_to_id=model.assigned_to_id,
            subject=model.subject,
            is_closed=bool(model.is_closed),
            created_at=model.created_at,
            updated_at=model.updated_at
        )
