"""
Spent time router.
Handles the spent time view, reports, and time entry creation and deletion.
"""

from typing import Annotated, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.responses import RedirectResponse

from app.config import settings
from app.infrastructure.auth import get_current_actor
from app.application.use_cases.base_use_case import UseCaseResult
from app.application.use_cases.time_entry_use_cases import (
    GetInitialViewUseCase,
    GetReportUseCase,
    CreateTimeEntryUseCase,
    DeleteTimeEntryUseCase,
    RefreshProjectIssuesUseCase
)
from app.application.dto.time_entry_dto import (
    GetReportRequestDTO,
    CreateTimeEntryRequestDTO,
    DeleteTimeEntryRequestDTO,
    RefreshProjectIssuesRequestDTO,
    ReportResponseDTO,
    InitialViewResponseDTO,
    ProjectIssuesResponseDTO
)
from app.domain.models.actor import Actor
from app.domain.models.base import DomainException, RefreshRedirectError
from app.domain.services.permission_service import MembershipPermissionOracle, PermissionOracle
from app.domain.services.report_service import ReportAggregator
from app.domain.services.visibility_service import VisibilityResolver
from app.infrastructure.db.database import get_db
from app.infrastructure.repositories.issue_repository import SQLAlchemyIssueRepository
from app.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from app.infrastructure.repositories.time_entry_repository import SQLAlchemyTimeEntryRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.infrastructure.web.middleware.error_handler import (
    status_for_exception, public_message
)


router = APIRouter()

INITIAL_VIEW_PATH = f"{settings.api_prefix}/spent-time"


def get_user_repository(session=Depends(get_db)):
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


def get_project_repository(session=Depends(get_db)):
    """Dependency to get project repository."""
    return SQLAlchemyProjectRepository(session)


def get_issue_repository(session=Depends(get_db)):
    """Dependency to get issue repository."""
    return SQLAlchemyIssueRepository(session)


def get_time_entry_repository(session=Depends(get_db)):
    """Dependency to get time entry repository."""
    return SQLAlchemyTimeEntryRepository(session)


def get_permission_oracle() -> PermissionOracle:
    """Dependency to get the permission oracle."""
    return MembershipPermissionOracle()


def get_report_aggregator(
    time_entry_repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    issue_repository: Annotated[SQLAlchemyIssueRepository, Depends(get_issue_repository)]
) -> ReportAggregator:
    """Dependency to get the report aggregator."""
    return ReportAggregator(time_entry_repository, issue_repository, settings.default_report_period_days)


def get_visibility_resolver(
    user_repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)],
    permission_oracle: Annotated[PermissionOracle, Depends(get_permission_oracle)]
) -> VisibilityResolver:
    """Dependency to get the visibility resolver."""
    return VisibilityResolver(user_repository, project_repository, permission_oracle)


def raise_for_failure(result: UseCaseResult) -> None:
    """Translate a failed use case result into an HTTP error."""
    exc = result.exception
    if isinstance(exc, DomainException):
        status_code = status_for_exception(exc)
        message = public_message(exc)
    else:
        status_code = status.HTTP_400_BAD_REQUEST
        message = result.error or "Request failed"

    raise HTTPException(
        status_code=status_code,
        detail={"message": message, "error_code": result.error_code}
    )


@router.get("", response_model=InitialViewResponseDTO)
async def get_initial_view(
    actor: Annotated[Actor, Depends(get_current_actor)],
    visibility_resolver: Annotated[VisibilityResolver, Depends(get_visibility_resolver)],
    report_aggregator: Annotated[ReportAggregator, Depends(get_report_aggregator)]
):
    """
    Initial spent time view.

    Returns the users and projects the actor may report on, the actor's own
    report over the default window and the open issues assigned to them.
    """
    use_case = GetInitialViewUseCase(visibility_resolver, report_aggregator)
    result = await use_case.execute(None, actor)
    if result.failed:
        raise_for_failure(result)
    return result.data


@router.get("/report", response_model=ReportResponseDTO)
async def get_report(
    actor: Annotated[Actor, Depends(get_current_actor)],
    user_repository: Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)],
    visibility_resolver: Annotated[VisibilityResolver, Depends(get_visibility_resolver)],
    report_aggregator: Annotated[ReportAggregator, Depends(get_report_aggregator)],
    user_id: int = Query(..., description="User whose spent time is reported"),
    from_date: Optional[str] = Query(None, alias="from", description="Range start (YYYY-MM-DD)"),
    to_date: Optional[str] = Query(None, alias="to", description="Range end (YYYY-MM-DD)")
):
    """
    Report of one user between two dates.

    - **user_id**: User to report on; must be visible to the actor
    - **from** / **to**: Inclusive range, defaulting to the last days
    """
    use_case = GetReportUseCase(user_repository, visibility_resolver, report_aggregator)
    request = GetReportRequestDTO(user_id=user_id, from_date=from_date, to_date=to_date)
    result = await use_case.execute(request, actor)
    if result.failed:
        raise_for_failure(result)
    return result.data


@router.post("/entries", status_code=status.HTTP_201_CREATED, response_model=ReportResponseDTO)
async def create_time_entry(
    request: CreateTimeEntryRequestDTO,
    actor: Annotated[Actor, Depends(get_current_actor)],
    time_entry_repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)],
    issue_repository: Annotated[SQLAlchemyIssueRepository, Depends(get_issue_repository)],
    permission_oracle: Annotated[PermissionOracle, Depends(get_permission_oracle)],
    report_aggregator: Annotated[ReportAggregator, Depends(get_report_aggregator)]
):
    """
    Log time for the actor.

    - **project_id**: Project to log on, or negative to use the issue's project
    - **issue_id**: Issue the time was spent on (required)
    - **spent_on**: Day the time was spent (YYYY-MM-DD)
    - **hours**: Hours spent
    - **comments**: Optional comments
    - **from** / **to**: Range currently displayed; widened to show the new entry
    """
    use_case = CreateTimeEntryUseCase(
        time_entry_repository,
        project_repository,
        issue_repository,
        permission_oracle,
        report_aggregator
    )
    result = await use_case.execute(request, actor)
    if result.failed:
        raise_for_failure(result)
    return result.data


@router.delete("/entries/{entry_id}", response_model=ReportResponseDTO)
async def delete_time_entry(
    entry_id: int,
    actor: Annotated[Actor, Depends(get_current_actor)],
    time_entry_repository: Annotated[SQLAlchemyTimeEntryRepository, Depends(get_time_entry_repository)],
    permission_oracle: Annotated[PermissionOracle, Depends(get_permission_oracle)],
    report_aggregator: Annotated[ReportAggregator, Depends(get_report_aggregator)],
    from_date: Optional[str] = Query(None, alias="from", description="Range start (YYYY-MM-DD)"),
    to_date: Optional[str] = Query(None, alias="to", description="Range end (YYYY-MM-DD)")
):
    """
    Delete a time entry and return the actor's refreshed report.

    When the report cannot be refreshed the caller is redirected to the
    initial view; the entry is deleted either way.
    """
    use_case = DeleteTimeEntryUseCase(time_entry_repository, permission_oracle, report_aggregator)
    request = DeleteTimeEntryRequestDTO(entry_id=entry_id, from_date=from_date, to_date=to_date)
    result = await use_case.execute(request, actor)
    if result.failed:
        if isinstance(result.exception, RefreshRedirectError):
            return RedirectResponse(INITIAL_VIEW_PATH, status_code=status.HTTP_303_SEE_OTHER)
        raise_for_failure(result)
    return result.data


@router.get("/projects/{project_id}/issues", response_model=ProjectIssuesResponseDTO)
async def refresh_project_issues(
    project_id: int,
    actor: Annotated[Actor, Depends(get_current_actor)],
    project_repository: Annotated[SQLAlchemyProjectRepository, Depends(get_project_repository)],
    report_aggregator: Annotated[ReportAggregator, Depends(get_report_aggregator)],
    from_date: Optional[str] = Query(None, alias="from", description="Range start (YYYY-MM-DD)"),
    to_date: Optional[str] = Query(None, alias="to", description="Range end (YYYY-MM-DD)")
):
    """
    Issues selectable after switching to another project.
    The submitted range is returned unchanged.
    """
    use_case = RefreshProjectIssuesUseCase(project_repository, report_aggregator)
    request = RefreshProjectIssuesRequestDTO(project_id=project_id, from_date=from_date, to_date=to_date)
    result = await use_case.execute(request, actor)
    if result.failed:
        raise_for_failure(result)
    return result.data
