"""
Spent time use cases for the application layer.
Implements the report views and the time entry create/delete workflows.
"""

import logging
from typing import Optional

from app.application.use_cases.base_use_case import (
    QueryUseCase, CreateUseCase, DeleteUseCase
)
from app.application.dto.time_entry_dto import (
    GetReportRequestDTO, CreateTimeEntryRequestDTO, DeleteTimeEntryRequestDTO,
    RefreshProjectIssuesRequestDTO, ReportResponseDTO, InitialViewResponseDTO,
    ProjectIssuesResponseDTO, ProjectSummaryDTO, IssueSummaryDTO
)
from app.domain.models.actor import Actor, Capability
from app.domain.models.base import (
    DomainException, ForbiddenError, RefreshRedirectError, CreationFailedError,
    UserNotFoundError, ProjectNotFoundError, ProjectNotAllowedError,
    IssueNotFoundError, IssueProjectMismatchError, MissingIssueError,
    TimeEntryNotFoundError, AccessDeniedError
)
from app.domain.models.issue import Issue
from app.domain.models.project import Project
from app.domain.models.time_entry import TimeEntry
from app.domain.models.value_objects import Hours, parse_date
from app.domain.repositories.issue_repository import IssueRepository
from app.domain.repositories.project_repository import ProjectRepository
from app.domain.repositories.time_entry_repository import TimeEntryRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.services.permission_service import PermissionOracle
from app.domain.services.report_service import ReportAggregator
from app.domain.services.visibility_service import VisibilityResolver

logger = logging.getLogger(__name__)


class GetInitialViewUseCase(QueryUseCase[None, InitialViewResponseDTO]):
    """
    Use case for the initial spent time view.
    Returns the selectable users and projects, the actor's report over the
    default window and the issues assigned to the actor.
    """

    def __init__(self, visibility_resolver: VisibilityResolver, report_aggregator: ReportAggregator):
        super().__init__()
        self.visibility_resolver = visibility_resolver
        self.report_aggregator = report_aggregator

    async def _execute_business_logic(self, request: None, actor: Actor) -> InitialViewResponseDTO:
        scope = await self.visibility_resolver.resolve(actor)
        report = await self.report_aggregator.aggregate(actor.id, self.report_aggregator.default_range())
        assigned_issues = await self.report_aggregator.assigned_issues(actor.id)
        return InitialViewResponseDTO.from_domain(scope, report, assigned_issues)


class GetReportUseCase(QueryUseCase[GetReportRequestDTO, ReportResponseDTO]):
    """Use case for the report of one user between two dates."""

    def __init__(
        self,
        user_repository: UserRepository,
        visibility_resolver: VisibilityResolver,
        report_aggregator: ReportAggregator
    ):
        super().__init__()
        self.user_repository = user_repository
        self.visibility_resolver = visibility_resolver
        self.report_aggregator = report_aggregator

    async def _execute_business_logic(self, request: GetReportRequestDTO, actor: Actor) -> ReportResponseDTO:
        report_user = await self.user_repository.find_by_id(request.user_id)
        if not report_user:
            raise UserNotFoundError(request.user_id)

        if report_user.id == actor.id:
            projects = await self.visibility_resolver.report_projects(actor)
        else:
            scope = await self.visibility_resolver.resolve(actor)
            if not scope.includes_user(report_user.id):
                raise ForbiddenError("You are not allowed to see the spent time of this user")
            projects = scope.projects

        report_range = self.report_aggregator.resolve_range(request.from_date, request.to_date)
        project_ids = None if projects is None else [project.id for project in projects]
        report = await self.report_aggregator.aggregate(report_user.id, report_range, project_ids)

        return ReportResponseDTO.from_domain(report, same_user=(report_user.id == actor.id))


class CreateTimeEntryUseCase(CreateUseCase[CreateTimeEntryRequestDTO, ReportResponseDTO]):
    """
    Use case for logging time.

    Stages run in a fixed order and the first failure aborts before anything
    is written:

    1. resolve the project (from the issue when the project ID is negative)
    2. parse the spent-on date
    3. validate the hours
    4. check the project exists and accepts time entries
    5. resolve the issue and check it belongs to the project
    6. check the actor may log time on the project
    7. save the entry
    8. widen the current range so the new entry is visible
    9. rebuild the actor's report over that range
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        project_repository: ProjectRepository,
        issue_repository: IssueRepository,
        permission_oracle: PermissionOracle,
        report_aggregator: ReportAggregator
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.project_repository = project_repository
        self.issue_repository = issue_repository
        self.permission_oracle = permission_oracle
        self.report_aggregator = report_aggregator

    async def _execute_command_logic(self, request: CreateTimeEntryRequestDTO, actor: Actor) -> ReportResponseDTO:
        project_id = await self._resolve_project_id(request)
        spent_on = parse_date(request.spent_on)
        hours = Hours.parse(request.hours)
        current_range = self.report_aggregator.resolve_range(request.from_date, request.to_date)

        project = await self._find_loggable_project(project_id)
        issue = await self._find_issue(project, request)

        if not self.permission_oracle.allowed_to(actor, Capability.LOG_TIME, project):
            raise AccessDeniedError(Capability.LOG_TIME.value, project.id)

        time_entry = TimeEntry(
            user_id=actor.id,
            author_id=actor.id,
            project_id=project.id,
            spent_on=spent_on,
            hours=hours.value,
            comments=request.comments
        )
        time_entry.attach_issue(issue)

        logger.info("Saving time entry for user: %s", actor)
        saved_entry = await self.time_entry_repository.add(time_entry)

        report_range = current_range.extended_to_include(saved_entry.spent_on)
        report = await self.report_aggregator.aggregate(actor.id, report_range)
        logger.info("Time entry %s saved, rendering report %s..%s",
                    saved_entry.id, report_range.from_date, report_range.to_date)

        return ReportResponseDTO.from_domain(report, same_user=True)

    def _normalize_exception(self, exc: Exception) -> Exception:
        if isinstance(exc, DomainException):
            return exc
        logger.error("Error saving time entry: %s", exc, exc_info=exc)
        return CreationFailedError(f"Error saving time entry: {exc}")

    @staticmethod
    def _submitted_issue_id(request: CreateTimeEntryRequestDTO) -> Optional[int]:
        """Issue ID of the request, or None when absent or unset (zero or negative)."""
        if request.issue_id is None or request.issue_id <= 0:
            return None
        return request.issue_id

    async def _resolve_project_id(self, request: CreateTimeEntryRequestDTO) -> int:
        if request.project_id >= 0:
            return request.project_id

        issue_id = self._submitted_issue_id(request)
        if issue_id is None:
            raise MissingIssueError()

        issue = await self.issue_repository.find_by_id(issue_id)
        if not issue:
            raise IssueNotFoundError(issue_id)
        return issue.project_id

    async def _find_loggable_project(self, project_id: int) -> Project:
        project = await self.project_repository.find_by_id(project_id)
        if not project:
            raise ProjectNotFoundError(project_id)
        if not project.allows_time_logging:
            raise ProjectNotAllowedError(project.name)
        return project

    async def _find_issue(self, project: Project, request: CreateTimeEntryRequestDTO) -> Issue:
        issue_id = self._submitted_issue_id(request)
        if issue_id is None:
            raise MissingIssueError()

        issue = await self.issue_repository.find_by_id(issue_id)
        if not issue:
            raise IssueNotFoundError(issue_id)
        if not issue.belongs_to(project.id):
            raise IssueProjectMismatchError(issue.id, project.id)
        return issue


class DeleteTimeEntryUseCase(DeleteUseCase[DeleteTimeEntryRequestDTO, ReportResponseDTO]):
    """
    Use case for deleting a time entry and refreshing the actor's report.
    A refresh that cannot be produced is reported as RefreshRedirectError; the
    entry stays deleted.
    """

    def __init__(
        self,
        time_entry_repository: TimeEntryRepository,
        permission_oracle: PermissionOracle,
        report_aggregator: ReportAggregator
    ):
        super().__init__()
        self.time_entry_repository = time_entry_repository
        self.permission_oracle = permission_oracle
        self.report_aggregator = report_aggregator

    async def _execute_command_logic(self, request: DeleteTimeEntryRequestDTO, actor: Actor) -> ReportResponseDTO:
        time_entry = await self.time_entry_repository.find_by_id(request.entry_id)
        if not time_entry:
            raise TimeEntryNotFoundError(request.entry_id)

        if not self.permission_oracle.editable_by(time_entry, actor):
            raise ForbiddenError("You are not allowed to delete this time entry")

        await self.time_entry_repository.delete(time_entry.id)
        logger.info("Time entry %s deleted by user %s", time_entry.id, actor.id)

        try:
            report_range = self.report_aggregator.resolve_range(request.from_date, request.to_date)
            report = await self.report_aggregator.aggregate(actor.id, report_range)
        except Exception as exc:
            logger.warning("Could not refresh report after deleting time entry %s: %s", time_entry.id, exc)
            raise RefreshRedirectError(f"Report could not be refreshed: {exc}") from exc

        return ReportResponseDTO.from_domain(report, same_user=True)


class RefreshProjectIssuesUseCase(QueryUseCase[RefreshProjectIssuesRequestDTO, ProjectIssuesResponseDTO]):
    """
    Use case for reloading the issue selector when another project is chosen.
    An unknown project yields an empty list rather than an error.
    """

    def __init__(self, project_repository: ProjectRepository, report_aggregator: ReportAggregator):
        super().__init__()
        self.project_repository = project_repository
        self.report_aggregator = report_aggregator

    async def _execute_business_logic(
        self,
        request: RefreshProjectIssuesRequestDTO,
        actor: Actor
    ) -> ProjectIssuesResponseDTO:
        report_range = self.report_aggregator.resolve_range(request.from_date, request.to_date)

        project = await self.project_repository.find_by_id(request.project_id)
        if project is None:
            logger.info("Project %s not found, returning no issues", request.project_id)
            issues = []
        else:
            issues = await self.report_aggregator.assigned_issues(actor.id, project.id)

        return ProjectIssuesResponseDTO(
            project_id=request.project_id,
            project=ProjectSummaryDTO.from_domain(project) if project else None,
            issues=[IssueSummaryDTO.from_domain(issue) for issue in issues],
            from_date=report_range.from_date,
            to_date=report_range.to_date
        )
