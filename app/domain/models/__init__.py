"""
Domain models for the spent time system.
This module exports all domain entities, value objects and exceptions.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    EntityNotFoundError,
    NotFoundError,
    ForbiddenError,
    RefreshRedirectError,
    InvalidDateError,
    InvalidHoursError,
    MissingIssueError,
    IssueProjectMismatchError,
    ProjectNotAllowedError,
    UserNotFoundError,
    ProjectNotFoundError,
    IssueNotFoundError,
    TimeEntryNotFoundError,
    AccessDeniedError,
    CreationFailedError
)

# Domain entities
from .user import User, UserStatus
from .project import Project, ProjectStatus, Membership
from .issue import Issue
from .time_entry import TimeEntry
from .actor import Actor, Capability

# Value Objects
from .value_objects import Hours, ReportRange, VisibilityScope, parse_date
from .report import ReportResult, DaySummary

__all__ = [
    # Base classes
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "NotFoundError",
    "ForbiddenError",
    "RefreshRedirectError",
    "InvalidDateError",
    "InvalidHoursError",
    "MissingIssueError",
    "IssueProjectMismatchError",
    "ProjectNotAllowedError",
    "UserNotFoundError",
    "ProjectNotFoundError",
    "IssueNotFoundError",
    "TimeEntryNotFoundError",
    "AccessDeniedError",
    "CreationFailedError",

    # Entities
    "User",
    "UserStatus",
    "Project",
    "ProjectStatus",
    "Membership",
    "Issue",
    "TimeEntry",
    "Actor",
    "Capability",

    # Value objects
    "Hours",
    "ReportRange",
    "VisibilityScope",
    "parse_date",
    "ReportResult",
    "DaySummary",
]
