"""
Issue repository interface.
Defines the contract for issue data access.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.issue import Issue


class IssueRepository(ABC):
    """
    Repository interface for Issue entity.
    """

    @abstractmethod
    async def find_by_id(self, issue_id: int) -> Optional[Issue]:
        """
        Find an issue by ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_open_assigned_to(
        self,
        user_id: int,
        project_id: Optional[int] = None
    ) -> List[Issue]:
        """
        Find open issues assigned to a user, ordered by project then ID.
        Optionally limited to one project.
        """
        pass

    @abstractmethod
    async def save(self, issue: Issue) -> Issue:
        """
        Save an issue entity.
        """
        pass
