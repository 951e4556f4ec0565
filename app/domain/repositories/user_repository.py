"""
User repository interface.
Defines the contract for user data access.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Iterable

from app.domain.models.user import User


class UserRepository(ABC):
    """
    Repository interface for User entity.
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[int], active_only: bool = False) -> List[User]:
        """
        Find all users with the given IDs, in no particular order.
        With active_only, locked and registered accounts are skipped.
        """
        pass

    @abstractmethod
    async def find_active_ordered_by_firstname(self) -> List[User]:
        """
        Find all active users ordered by first name.
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Save a user entity.
        Returns the saved user with its ID set.
        """
        pass
