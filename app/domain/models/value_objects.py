"""
Value Objects for the domain layer.
Immutable objects that represent values and encapsulate business logic.
"""

from typing import Optional, Union, List, Tuple
from decimal import Decimal
from datetime import date, timedelta
from dataclasses import dataclass, field
import re

from app.domain.models.base import InvalidDateError, InvalidHoursError
from app.domain.models.project import Project
from app.domain.models.user import User


def parse_date(value: Union[str, date, None]) -> date:
    """
    Parse a calendar date in ISO format (YYYY-MM-DD).
    Raises InvalidDateError for anything else.
    """
    if isinstance(value, date):
        return value
    if value is None:
        raise InvalidDateError(value)
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise InvalidDateError(value)


def numeric_text(raw) -> str:
    """Text of a submitted value, with numbers written positionally (1e-07 as 0.0000001)."""
    if isinstance(raw, (int, float, Decimal)) and not isinstance(raw, bool):
        return format(Decimal(str(raw)), "f")
    return str(raw)


@dataclass(frozen=True)
class Hours:
    """
    Hours value object.

    The accepted format is an optional sign, digits and an optional fractional
    part. Exponents, thousands separators and whitespace are rejected. Negative
    values, including ``-0.0``, are accepted. Numeric input is matched in
    positional notation.
    """

    value: Decimal

    PATTERN = re.compile(r"[+-]?\d+(\.\d+)?")

    @classmethod
    def is_numeric(cls, raw: Union[str, int, float, Decimal, None]) -> bool:
        if raw is None or isinstance(raw, bool):
            return False
        return cls.PATTERN.fullmatch(numeric_text(raw)) is not None

    @classmethod
    def parse(cls, raw: Union[str, int, float, Decimal, None]) -> "Hours":
        if not cls.is_numeric(raw):
            raise InvalidHoursError(raw)
        return cls(Decimal(numeric_text(raw)))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ReportRange:
    """
    Inclusive date window used to filter time entries.
    ``from_date <= to_date`` is not enforced; an inverted range simply matches
    nothing.
    """

    from_date: date
    to_date: date

    @classmethod
    def trailing_days(cls, days: int, today: Optional[date] = None) -> "ReportRange":
        """Window ending today and starting ``days`` days before."""
        today = today or date.today()
        return cls(today - timedelta(days=days), today)

    @property
    def is_inverted(self) -> bool:
        return self.from_date > self.to_date

    def contains(self, day: date) -> bool:
        return self.from_date <= day <= self.to_date

    def extended_to_include(self, day: date) -> "ReportRange":
        """
        Return a range widened so that ``day`` is displayed.
        Only one bound moves and the range never shrinks.
        """
        if day > self.to_date:
            return ReportRange(self.from_date, day)
        elif day < self.from_date:
            return ReportRange(day, self.to_date)
        return self

    def days(self) -> List[date]:
        if self.is_inverted:
            return []
        span = (self.to_date - self.from_date).days
        return [self.from_date + timedelta(days=offset) for offset in range(span + 1)]

    def as_tuple(self) -> Tuple[date, date]:
        return (self.from_date, self.to_date)


@dataclass(frozen=True)
class VisibilityScope:
    """
    Users and projects an actor may see time entries for.
    ``projects`` set to None means unrestricted: entries are filtered by owner
    instead of by project.
    """

    users: Tuple[User, ...] = field(default_factory=tuple)
    projects: Optional[Tuple[Project, ...]] = None

    @property
    def user_ids(self) -> List[int]:
        return [user.id for user in self.users]

    @property
    def project_ids(self) -> Optional[List[int]]:
        if self.projects is None:
            return None
        return [project.id for project in self.projects]

    @property
    def is_unrestricted(self) -> bool:
        return self.projects is None

    def includes_user(self, user_id: int) -> bool:
        return user_id in self.user_ids
