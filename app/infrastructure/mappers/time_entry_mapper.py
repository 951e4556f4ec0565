"""
Time entry mapper for converting between domain entities and database models.
"""

from decimal import Decimal

from app.domain.models.time_entry import TimeEntry
from app.infrastructure.db.models import TimeEntryModel


def stored_hours(value) -> Decimal:
    """Hours read back from the database, without the padding some backends add."""
    hours = Decimal(str(value))
    if hours == hours.to_integral_value():
        return hours.quantize(Decimal(1))
    return hours.normalize()


class TimeEntryMapper:
    """Maps between TimeEntry domain entity and TimeEntryModel database model."""

    def domain_to_model(self, time_entry: TimeEntry) -> TimeEntryModel:
        """Convert TimeEntry domain entity to TimeEntryModel."""
        return TimeEntryModel(
            id=time_entry.id,
            user_id=time_entry.user_id,
            author_id=time_entry.author_id,
            project_id=time_entry.project_id,
            issue_id=time_entry.issue_id,
            spent_on=time_entry.spent_on,
            hours=time_entry.hours,
            comments=time_entry.comments
        )

    def model_to_domain(self, model: TimeEntryModel) -> TimeEntry:
        """Convert TimeEntryModel to TimeEntry domain entity."""
        return TimeEntry(
            id=model.id,
            user_id=model.user_id,
            author_id=model.author_id,
            project_id=model.project_id,
            issue_id=model.issue_id,
            spent_on=model.spent_on,
            hours=stored_hours(model.hours),
            comments=model.comments,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
