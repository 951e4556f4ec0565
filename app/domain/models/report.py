"""
Spent time report dataset.
Entries of one user over a date window, grouped per day and per project.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from app.domain.models.time_entry import TimeEntry
from app.domain.models.value_objects import ReportRange


@dataclass
class DaySummary:
    """Entries spent on a single day and their total hours."""

    spent_on: date
    entries: List[TimeEntry] = field(default_factory=list)

    @property
    def total_hours(self) -> Decimal:
        return sum((entry.hours for entry in self.entries), Decimal("0"))


@dataclass
class ReportResult:
    """
    Report for one user over an inclusive range.
    ``entries`` are ordered most recent first.
    """

    user_id: int
    report_range: ReportRange
    entries: List[TimeEntry] = field(default_factory=list)
    project_ids: Optional[List[int]] = None

    @classmethod
    def build(
        cls,
        user_id: int,
        report_range: ReportRange,
        entries: List[TimeEntry],
        project_ids: Optional[List[int]] = None
    ) -> "ReportResult":
        ordered = sorted(entries, key=lambda e: (e.spent_on, e.id or 0), reverse=True)
        return cls(user_id=user_id, report_range=report_range, entries=ordered, project_ids=project_ids)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @property
    def days(self) -> List[DaySummary]:
        """Per-day groups, most recent day first."""
        groups: "OrderedDict[date, DaySummary]" = OrderedDict()
        for entry in self.entries:
            groups.setdefault(entry.spent_on, DaySummary(entry.spent_on)).entries.append(entry)
        return list(groups.values())

    @property
    def totals_by_project(self) -> Dict[int, Decimal]:
        totals: Dict[int, Decimal] = {}
        for entry in self.entries:
            totals[entry.project_id] = totals.get(entry.project_id, Decimal("0")) + entry.hours
        return totals

    @property
    def total_hours(self) -> Decimal:
        return sum((entry.hours for entry in self.entries), Decimal("0"))
