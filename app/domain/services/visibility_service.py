"""Visibility service.
Resolves which users and projects an actor may see spent time for.
"""

import logging
from typing import List, Optional

from app.domain.models.actor import Actor, Capability
from app.domain.models.project import Project
from app.domain.models.user import User
from app.domain.models.value_objects import VisibilityScope
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.services.permission_service import PermissionOracle

logger = logging.getLogger(__name__)


class VisibilityResolver:
    """
    Capability-tiered visibility.

    The first matching tier wins:

    1. ``view_every_project_spent_time``: every active user, every project that
       is not archived.
    2. ``view_others_spent_time``: active co-members of the actor's projects, and
       exactly the actor's projects.
    3. Otherwise: only the actor, with no project restriction.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        project_repository: ProjectRepository,
        permission_oracle: PermissionOracle
    ):
        self.user_repository = user_repository
        self.project_repository = project_repository
        self.permission_oracle = permission_oracle

    async def resolve(self, actor: Actor) -> VisibilityScope:
        """Compute the visibility scope of an actor."""
        if self.permission_oracle.allowed_to(actor, Capability.VIEW_EVERY_PROJECT_SPENT_TIME):
            logger.info("User %s is authorized for viewing every project spent time", actor.id)
            users = await self.user_repository.find_active_ordered_by_firstname()
            projects = await self.project_repository.find_not_archived()
            return VisibilityScope(users=tuple(users), projects=tuple(projects))

        if self.permission_oracle.allowed_to(actor, Capability.VIEW_OTHERS_SPENT_TIME):
            logger.info("User %s is authorized for viewing other team mates spent time", actor.id)
            projects = await self._own_projects(actor)
            users = await self._co_members(projects)
            return VisibilityScope(users=tuple(users), projects=tuple(projects))

        logger.info("User %s is authorized for viewing only their own spent time", actor.id)
        return VisibilityScope(users=(actor.user,), projects=None)

    async def report_projects(self, actor: Actor) -> Optional[List[Project]]:
        """
        Project component of the scope alone, without loading any user.
        None means unrestricted.
        """
        if self.permission_oracle.allowed_to(actor, Capability.VIEW_EVERY_PROJECT_SPENT_TIME):
            return await self.project_repository.find_not_archived()
        if self.permission_oracle.allowed_to(actor, Capability.VIEW_OTHERS_SPENT_TIME):
            return await self._own_projects(actor)
        return None

    async def _own_projects(self, actor: Actor) -> List[Project]:
        if not actor.project_ids:
            return []
        return await self.project_repository.find_by_ids(sorted(actor.project_ids))

    async def _co_members(self, projects: List[Project]) -> List[User]:
        member_ids = await self.project_repository.find_member_ids([p.id for p in projects])
        unique_ids = set(member_ids)
        users = await self.user_repository.find_by_ids(unique_ids, active_only=True) if unique_ids else []
        return sorted(users, key=User.sort_key)
