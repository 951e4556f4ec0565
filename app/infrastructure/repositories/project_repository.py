"""
Project repository implementation using SQLAlchemy.
"""

from typing import Optional, List, Iterable
from sqlalchemy.orm import Session

from app.domain.models.project import Project, ProjectStatus, Membership
from app.domain.repositories.project_repository import ProjectRepository
from app.infrastructure.db.models import ProjectModel, MemberModel
from app.infrastructure.mappers.project_mapper import ProjectMapper


class SQLAlchemyProjectRepository(ProjectRepository):
    """SQLAlchemy implementation of project repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = ProjectMapper()

    async def find_by_id(self, project_id: int) -> Optional[Project]:
        """Find project by ID."""
        model = self.session.get(ProjectModel, project_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_ids(self, project_ids: Iterable[int]) -> List[Project]:
        """Find projects by IDs, ordered by name."""
        ids = list(project_ids)
        if not ids:
            return []
        models = self.session.query(ProjectModel).filter(
            ProjectModel.id.in_(ids)
        ).order_by(ProjectModel.name, ProjectModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    async def find_not_archived(self) -> List[Project]:
        """Find every project that is not archived."""
        models = self.session.query(ProjectModel).filter(
            ProjectModel.status != ProjectStatus.ARCHIVED
        ).order_by(ProjectModel.name, ProjectModel.id).all()
        return [self.mapper.model_to_domain(model) for model in models]

    async def find_memberships_for_user(self, user_id: int) -> List[Membership]:
        """Find the memberships of a user in projects that are not archived."""
        models = self.session.query(MemberModel).join(ProjectModel).filter(
            MemberModel.user_id == user_id,
            ProjectModel.status != ProjectStatus.ARCHIVED
        ).all()
        return [self.mapper.model_to_membership(model) for model in models]

    async def find_member_ids(self, project_ids: Iterable[int]) -> List[int]:
        """Find the user IDs of the members of the given projects."""
        ids = list(project_ids)
        if not ids:
            return []
        rows = self.session.query(MemberModel.user_id).filter(MemberModel.project_id.in_(ids)).all()
        return [row.user_id for row in rows]

    async def save(self, project: Project) -> Project:
        """Save a project entity."""
        model = self.session.merge(self.mapper.domain_to_model(project))
        self.session.commit()
        project.id = model.id
        return project

    async def add_membership(self, membership: Membership) -> Membership:
        """Add a membership."""
        self.session.add(self.mapper.membership_to_model(membership))
        self.session.commit()
        return membership
