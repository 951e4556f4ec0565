"""
Time entry repository implementation using SQLAlchemy.
"""

from typing import Optional, List, Iterable
from datetime import date
from sqlalchemy.orm import Session

from app.domain.models.time_entry import TimeEntry
from app.domain.repositories.time_entry_repository import TimeEntryRepository
from app.infrastructure.db.models import TimeEntryModel
from app.infrastructure.mappers.time_entry_mapper import TimeEntryMapper


class SQLAlchemyTimeEntryRepository(TimeEntryRepository):
    """
    SQLAlchemy implementation of time entry repository.
    Each add and delete is committed on its own.
    """

    def __init__(self, session: Session):
        self.session = session
        self.mapper = TimeEntryMapper()

    async def add(self, time_entry: TimeEntry) -> TimeEntry:
        """Persist a new time entry."""
        model = self.mapper.domain_to_model(time_entry)
        self.session.add(model)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        time_entry.id = model.id
        return time_entry

    async def find_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        """Get time entry by ID."""
        model = self.session.get(TimeEntryModel, entry_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_user_and_date_range(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
        project_ids: Optional[Iterable[int]] = None
    ) -> List[TimeEntry]:
        """Get a user's time entries inside an inclusive date range."""
        query = self.session.query(TimeEntryModel).filter(
            TimeEntryModel.user_id == user_id,
            TimeEntryModel.spent_on >= start_date,
            TimeEntryModel.spent_on <= end_date
        )
        if project_ids is not None:
            query = query.filter(TimeEntryModel.project_id.in_(list(project_ids)))

        models = query.order_by(TimeEntryModel.spent_on.desc(), TimeEntryModel.id.desc()).all()
        return [self.mapper.model_to_domain(model) for model in models]

    async def delete(self, entry_id: int) -> bool:
        """Delete time entry."""
        model = self.session.get(TimeEntryModel, entry_id)
        if not model:
            return False

        self.session.delete(model)
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True
