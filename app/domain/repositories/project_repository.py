"""
Project repository interface.
Defines the contract for project and membership data access.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Iterable

from app.domain.models.project import Project, Membership


class ProjectRepository(ABC):
    """
    Repository interface for Project entity and its memberships.
    """

    @abstractmethod
    async def find_by_id(self, project_id: int) -> Optional[Project]:
        """
        Find a project by ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_by_ids(self, project_ids: Iterable[int]) -> List[Project]:
        """
        Find all projects with the given IDs, ordered by name.
        """
        pass

    @abstractmethod
    async def find_not_archived(self) -> List[Project]:
        """
        Find every project that is not archived, ordered by name.
        """
        pass

    @abstractmethod
    async def find_memberships_for_user(self, user_id: int) -> List[Membership]:
        """
        Find the memberships of a user in projects that are not archived.
        Archived projects grant no capabilities.
        """
        pass

    @abstractmethod
    async def find_member_ids(self, project_ids: Iterable[int]) -> List[int]:
        """
        Find the IDs of the members of the given projects.
        The result may contain duplicates.
        """
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """
        Save a project entity.
        """
        pass

    @abstractmethod
    async def add_membership(self, membership: Membership) -> Membership:
        """
        Add a user to a project with the given capabilities.
        """
        pass
