"""Time Entry repository interface.
Defines the contract for time entry data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Iterable
from datetime import date

from app.domain.models.time_entry import TimeEntry


class TimeEntryRepository(ABC):
    """
    Repository interface for TimeEntry entity.
    Single-row creates and deletes are atomic.
    """

    @abstractmethod
    async def add(self, time_entry: TimeEntry) -> TimeEntry:
        """
        Persist a new time entry.
        Returns the time entry with its ID set.
        """
        pass

    @abstractmethod
    async def find_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        """
        Find a time entry by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_by_user_and_date_range(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
        project_ids: Optional[Iterable[int]] = None
    ) -> List[TimeEntry]:
        """
        Find time entries owned by a user with start_date <= spent_on <= end_date.
        When project_ids is given, only entries on those projects are returned.
        """
        pass

    @abstractmethod
    async def delete(self, entry_id: int) -> bool:
        """
        Delete a time entry by ID.
        Returns True if deleted, False if it did not exist.
        """
        pass
