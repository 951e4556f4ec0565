"""
Spent time DTOs for the application layer.
Data Transfer Objects for reports and time entry operations.
"""

from typing import Optional, List
from datetime import date
from pydantic import Field, validator

from app.domain.models.issue import Issue
from app.domain.models.project import Project
from app.domain.models.report import ReportResult
from app.domain.models.time_entry import TimeEntry
from app.domain.models.user import User
from app.domain.models.value_objects import VisibilityScope, numeric_text
from .base_dto import BaseDTO, ResponseDTO, RangeRequestDTO


# Request DTOs
class GetReportRequestDTO(RangeRequestDTO):
    """DTO for a report on one user."""

    user_id: int = Field(description="User whose time entries are reported")


class CreateTimeEntryRequestDTO(RangeRequestDTO):
    """
    DTO for time entry creation.
    Date and hours are kept as submitted; the creation pipeline validates them.
    A negative project ID means "use the project of the submitted issue".
    """

    project_id: int = Field(description="Project ID, or negative to take it from the issue")
    issue_id: Optional[int] = Field(default=None, description="Issue ID")
    spent_on: Optional[str] = Field(default=None, description="Day the time was spent (YYYY-MM-DD)")
    hours: Optional[str] = Field(default=None, description="Hours spent")
    comments: Optional[str] = Field(default=None, max_length=1024, description="Free-form comments")

    @validator('hours', 'spent_on', pre=True)
    def coerce_to_string(cls, v):
        """Keep the submitted value textual so the pipeline sees it as typed."""
        if v is None or isinstance(v, str):
            return v
        return numeric_text(v)


class DeleteTimeEntryRequestDTO(RangeRequestDTO):
    """DTO for time entry deletion."""

    entry_id: int = Field(description="Time entry ID")


class RefreshProjectIssuesRequestDTO(RangeRequestDTO):
    """DTO for reloading the issue selector after a project change."""

    project_id: int = Field(description="Newly selected project ID")


# Response DTOs
class UserSummaryDTO(ResponseDTO):
    """Minimal user representation."""

    login: str
    name: str

    @classmethod
    def from_domain(cls, user: User) -> "UserSummaryDTO":
        return cls(id=user.id, login=user.login, name=user.name)


class ProjectSummaryDTO(ResponseDTO):
    """Minimal project representation."""

    name: str
    identifier: str = ""
    allows_time_logging: bool = True

    @classmethod
    def from_domain(cls, project: Project) -> "ProjectSummaryDTO":
        return cls(
            id=project.id,
            name=project.name,
            identifier=project.identifier,
            allows_time_logging=project.allows_time_logging
        )


class IssueSummaryDTO(ResponseDTO):
    """Minimal issue representation."""

    project_id: int
    subject: str

    @classmethod
    def from_domain(cls, issue: Issue) -> "IssueSummaryDTO":
        return cls(id=issue.id, project_id=issue.project_id, subject=issue.subject)


class TimeEntryResponseDTO(ResponseDTO):
    """DTO for time entry responses."""

    user_id: int
    author_id: int
    project_id: int
    issue_id: Optional[int] = None
    spent_on: date
    hours: float
    comments: Optional[str] = None

    @classmethod
    def from_domain(cls, entry: TimeEntry) -> "TimeEntryResponseDTO":
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            author_id=entry.author_id,
            project_id=entry.project_id,
            issue_id=entry.issue_id,
            spent_on=entry.spent_on,
            hours=float(entry.hours),
            comments=entry.comments
        )


class DaySummaryDTO(BaseDTO):
    """Entries of one day and their total."""

    spent_on: date
    total_hours: float
    entries: List[TimeEntryResponseDTO] = Field(default_factory=list)


class ProjectTotalDTO(BaseDTO):
    """Hours spent on one project."""

    project_id: int
    total_hours: float


class ReportResponseDTO(BaseDTO):
    """DTO for a spent time report."""

    user_id: int
    from_date: date = Field(serialization_alias="from")
    to_date: date = Field(serialization_alias="to")
    entries: List[TimeEntryResponseDTO] = Field(default_factory=list)
    days: List[DaySummaryDTO] = Field(default_factory=list)
    project_totals: List[ProjectTotalDTO] = Field(default_factory=list)
    total_hours: float = 0.0
    same_user: Optional[bool] = None

    @classmethod
    def from_domain(cls, report: ReportResult, same_user: Optional[bool] = None) -> "ReportResponseDTO":
        return cls(
            user_id=report.user_id,
            from_date=report.report_range.from_date,
            to_date=report.report_range.to_date,
            entries=[TimeEntryResponseDTO.from_domain(e) for e in report.entries],
            days=[
                DaySummaryDTO(
                    spent_on=day.spent_on,
                    total_hours=float(day.total_hours),
                    entries=[TimeEntryResponseDTO.from_domain(e) for e in day.entries]
                )
                for day in report.days
            ],
            project_totals=[
                ProjectTotalDTO(project_id=project_id, total_hours=float(hours))
                for project_id, hours in sorted(report.totals_by_project.items())
            ],
            total_hours=float(report.total_hours),
            same_user=same_user
        )


class InitialViewResponseDTO(BaseDTO):
    """DTO for the initial spent time view."""

    users: List[UserSummaryDTO] = Field(default_factory=list)
    projects: Optional[List[ProjectSummaryDTO]] = None
    report: ReportResponseDTO
    assigned_issues: List[IssueSummaryDTO] = Field(default_factory=list)
    same_user: bool = True

    @classmethod
    def from_domain(
        cls,
        scope: VisibilityScope,
        report: ReportResult,
        assigned_issues: List[Issue]
    ) -> "InitialViewResponseDTO":
        return cls(
            users=[UserSummaryDTO.from_domain(u) for u in scope.users],
            projects=(
                None if scope.projects is None
                else [ProjectSummaryDTO.from_domain(p) for p in scope.projects]
            ),
            report=ReportResponseDTO.from_domain(report, same_user=True),
            assigned_issues=[IssueSummaryDTO.from_domain(i) for i in assigned_issues],
            same_user=True
        )


class ProjectIssuesResponseDTO(BaseDTO):
    """DTO for the issue selector of a project."""

    project_id: int
    project: Optional[ProjectSummaryDTO] = None
    issues: List[IssueSummaryDTO] = Field(default_factory=list)
    from_date: date = Field(serialization_alias="from")
    to_date: date = Field(serialization_alias="to")
