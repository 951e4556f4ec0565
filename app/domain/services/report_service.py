"""Report service.
Builds spent time reports and the assigned issues panel.
"""

from datetime import date
from typing import List, Optional, Iterable, Union

from app.domain.models.issue import Issue
from app.domain.models.report import ReportResult
from app.domain.models.value_objects import ReportRange, parse_date
from app.domain.repositories.issue_repository import IssueRepository
from app.domain.repositories.time_entry_repository import TimeEntryRepository


class ReportAggregator:
    """
    Domain service for report aggregation.
    Trusts its input: deciding who may be reported on is up to the caller.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        issue_repository: IssueRepository,
        default_period_days: int
    ):
        self.time_entry_repository = time_entry_repository
        self.issue_repository = issue_repository
        self.default_period_days = default_period_days

    def default_range(self, today: Optional[date] = None) -> ReportRange:
        """Window shown when the caller does not submit one."""
        return ReportRange.trailing_days(self.default_period_days, today)

    def resolve_range(
        self,
        from_value: Union[str, date, None] = None,
        to_value: Union[str, date, None] = None,
        today: Optional[date] = None
    ) -> ReportRange:
        """
        Build a range from optional bounds.
        A missing bound is taken from the default range; a malformed one
        raises InvalidDateError.
        """
        default = self.default_range(today)
        from_date = parse_date(from_value) if from_value else default.from_date
        to_date = parse_date(to_value) if to_value else default.to_date
        return ReportRange(from_date, to_date)

    async def aggregate(
        self,
        report_user_id: int,
        report_range: Optional[ReportRange] = None,
        project_ids: Optional[Iterable[int]] = None
    ) -> ReportResult:
        """
        Report the entries of ``report_user_id`` spent inside the range.
        ``project_ids`` of None means no project restriction.
        """
        report_range = report_range or self.default_range()
        scope = list(project_ids) if project_ids is not None else None

        if report_range.is_inverted or scope == []:
            entries = []
        else:
            entries = await self.time_entry_repository.find_by_user_and_date_range(
                report_user_id,
                report_range.from_date,
                report_range.to_date,
                scope
            )

        return ReportResult.build(report_user_id, report_range, entries, scope)

    async def assigned_issues(self, user_id: int, project_id: Optional[int] = None) -> List[Issue]:
        """Open issues assigned to the user, with no date filter."""
        return await self.issue_repository.find_open_assigned_to(user_id, project_id)
