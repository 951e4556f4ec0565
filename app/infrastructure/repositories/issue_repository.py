"""
Issue repository implementation using SQLAlchemy.
"""

from typing import Optional, List
from sqlalchemy.orm import Session

from app.domain.models.issue import Issue
from app.domain.repositories.issue_repository import IssueRepository
from app.infrastructure.db.models import IssueModel
from app.infrastructure.mappers.issue_mapper import IssueMapper


class SQLAlchemyIssueRepository(IssueRepository):
    """SQLAlchemy implementation of issue repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = IssueMapper()

    async def find_by_id(self, issue_id: int) -> Optional[Issue]:
        """Find issue by ID."""
        model = self.session.get(IssueModel, issue_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_open_assigned_to(
        self,
        user_id: int,
        project_id: Optional[int] = None
    ) -> List[Issue]:
        """Find open issues assigned to a user."""
        query = self.session.query(IssueModel).filter(
            IssueModel.assigned_to_id == user_id,
            IssueModel.is_closed.is_(False)
        )
        if project_id is not None:
            query = query.filter(IssueModel.project_id == project_id)

        models = query.order_by(IssueModel.project_id, IssueModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    async def save(self, issue: Issue) -> Issue:
        """Save an issue entity."""
        model = self.session.merge(self.mapper.domain_to_model(issue))
        self.session.commit()
        issue.id = model.id
        return issue
