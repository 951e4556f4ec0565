"""Permission service.
Answers capability queries for an actor, globally or on a project.
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from app.domain.models.actor import Actor, Capability
from app.domain.models.project import Project
from app.domain.models.time_entry import TimeEntry


class PermissionOracle(ABC):
    """
    Port for capability checks.
    Implementations must be side-effect free.
    """

    @abstractmethod
    def allowed_to(
        self,
        actor: Actor,
        capability: Union[Capability, str],
        project: Optional[Project] = None
    ) -> bool:
        """
        Check if the actor holds a capability.
        Without a project the check is global: holding the capability on any
        project is enough.
        """
        pass

    @abstractmethod
    def editable_by(self, entry: TimeEntry, actor: Actor) -> bool:
        """
        Check if the actor may edit or delete a time entry.
        """
        pass


class MembershipPermissionOracle(PermissionOracle):
    """
    Capability checks backed by the actor's project memberships.

    Admins hold every capability except on archived projects, which grant
    nothing to anyone.
    """

    def allowed_to(
        self,
        actor: Actor,
        capability: Union[Capability, str],
        project: Optional[Project] = None
    ) -> bool:
        if project is not None:
            if project.is_archived:
                return False
            if actor.is_admin:
                return True
            return actor.holds(capability, project.id)

        if actor.is_admin:
            return True
        return actor.holds(capability)

    def editable_by(self, entry: TimeEntry, actor: Actor) -> bool:
        if actor.is_admin:
            return True

        if actor.holds(Capability.EDIT_TIME_ENTRIES, entry.project_id):
            return True

        return (
            entry.is_owned_by(actor.id)
            and actor.holds(Capability.EDIT_OWN_TIME_ENTRIES, entry.project_id)
        )
