"""
Actor model.
The acting user together with the capabilities it holds for the lifetime of
a request.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional

from app.domain.models.project import Membership
from app.domain.models.user import User


class Capability(str, Enum):
    """Named permissions relevant to spent time."""
    VIEW_EVERY_PROJECT_SPENT_TIME = "view_every_project_spent_time"
    VIEW_OTHERS_SPENT_TIME = "view_others_spent_time"
    VIEW_TIME_ENTRIES = "view_time_entries"
    LOG_TIME = "log_time"
    EDIT_TIME_ENTRIES = "edit_time_entries"
    EDIT_OWN_TIME_ENTRIES = "edit_own_time_entries"


@dataclass(frozen=True)
class Actor:
    """
    Immutable acting identity.

    ``project_capabilities`` maps each project the user is a member of to the
    capabilities granted there. ``global_capabilities`` are held regardless of
    project.
    """

    user: User
    global_capabilities: FrozenSet[str] = field(default_factory=frozenset)
    project_capabilities: Dict[int, FrozenSet[str]] = field(default_factory=dict)

    @classmethod
    def from_memberships(
        cls,
        user: User,
        memberships: Iterable[Membership],
        global_capabilities: Iterable[str] = ()
    ) -> "Actor":
        """Build an actor from the user's project memberships."""
        project_capabilities: Dict[int, FrozenSet[str]] = {}
        for membership in memberships:
            if membership.user_id != user.id:
                continue
            current = project_capabilities.get(membership.project_id, frozenset())
            project_capabilities[membership.project_id] = current | frozenset(membership.capabilities)
        return cls(
            user=user,
            global_capabilities=frozenset(str(c) for c in global_capabilities),
            project_capabilities=project_capabilities
        )

    @property
    def id(self) -> Optional[int]:
        return self.user.id

    @property
    def is_admin(self) -> bool:
        return self.user.admin

    @property
    def project_ids(self) -> FrozenSet[int]:
        """Projects the actor is a member of."""
        return frozenset(self.project_capabilities)

    def capabilities_for(self, project_id: int) -> FrozenSet[str]:
        return self.global_capabilities | self.project_capabilities.get(project_id, frozenset())

    def holds(self, capability: str, project_id: Optional[int] = None) -> bool:
        """
        Raw capability lookup.
        Without a project, the capability counts if it is held globally or on
        any project the actor belongs to.
        """
        capability = getattr(capability, "value", capability)
        if project_id is not None:
            return capability in self.capabilities_for(project_id)
        if capability in self.global_capabilities:
            return True
        return any(capability in caps for caps in self.project_capabilities.values())

    def __str__(self) -> str:
        return str(self.user)
