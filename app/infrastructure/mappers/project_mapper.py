"""
Project mapper for converting between domain entities and database models.
"""

from app.domain.models.project import Project, ProjectStatus, Membership
from app.infrastructure.db.models import ProjectModel, MemberModel


class ProjectMapper:
    """Maps between Project/Membership domain objects and their database models."""

    def domain_to_model(self, project: Project) -> ProjectModel:
        """Convert Project domain entity to ProjectModel."""
        return ProjectModel(
            id=project.id,
            name=project.name,
            identifier=project.identifier,
            status=project.status,
            time_tracking_enabled=project.time_tracking_enabled
        )

    def model_to_domain(self, model: ProjectModel) -> Project:
        """Convert ProjectModel to Project domain entity."""
        return Project(
            id=model.id,
            name=model.name,
            identifier=model.identifier or "",
            status=ProjectStatus(model.status) if model.status else ProjectStatus.ACTIVE,
            time_tracking_enabled=bool(model.time_tracking_enabled),
            created_at=model.created_at,
            updated_at=model.updated_at
        )

    def membership_to_model(self, membership: Membership) -> MemberModel:
        """Convert Membership value to MemberModel."""
        return MemberModel(
            user_id=membership.user_id,
            project_id=membership.project_id,
            permissions=sorted(membership.capabilities)
        )

    def model_to_membership(self, model: MemberModel) -> Membership:
        """Convert MemberModel to Membership value."""
        return Membership(
            user_id=model.user_id,
            project_id=model.project_id,
            capabilities=frozenset(model.permissions or [])
        )
