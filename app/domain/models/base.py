"""
Base entity and exceptions for the domain layer.
This module contains the foundational classes for all domain entities.
"""

from datetime import datetime
from typing import Optional, Any, Dict
from abc import ABC
from dataclasses import dataclass, field


@dataclass
class BaseEntity(ABC):
    """
    Base class for all domain entities.
    Provides common attributes and behavior for all entities.
    """

    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self):
        """Initialize entity after creation."""
        if self.created_at is None:
            self.created_at = datetime.utcnow()
        if self.updated_at is None:
            self.updated_at = datetime.utcnow()
        self.validate()

    def __eq__(self, other: Any) -> bool:
        """Entities are equal if they have the same ID and are of the same type."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on entity ID."""
        if self.id is None:
            return hash(id(self))
        return hash((self.__class__.__name__, self.id))

    def mark_as_updated(self) -> None:
        """Update the updated_at timestamp."""
        self.updated_at = datetime.utcnow()

    @property
    def is_new(self) -> bool:
        """Check if entity is new (not persisted)."""
        return self.id is None

    def validate(self) -> None:
        """
        Validate the entity's state.
        Should be overridden by subclasses to implement specific validation rules.
        Raises ValidationError if the entity is in an invalid state.
        """
        pass

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary representation."""
        data = {}
        for key, value in self.__dict__.items():
            if not key.startswith('_'):
                if isinstance(value, datetime):
                    data[key] = value.isoformat()
                elif isinstance(value, BaseEntity):
                    data[key] = value.to_dict()
                else:
                    data[key] = value
        return data


class DomainException(Exception):
    """Base exception for domain errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class ValidationError(DomainException):
    """Exception raised when submitted data is invalid and the user can correct it."""

    def __init__(self, message: str, field: Optional[str] = None, code: Optional[str] = None):
        super().__init__(message, code or "VALIDATION_ERROR")
        self.field = field


class BusinessRuleViolation(DomainException):
    """Exception raised when a business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message, "BUSINESS_RULE_VIOLATION")


class EntityNotFoundError(DomainException):
    """Exception raised when an entity is not found."""

    def __init__(self, entity_type: str, entity_id: Any, code: Optional[str] = None):
        message = f"{entity_type} with id {entity_id} not found"
        super().__init__(message, code or "ENTITY_NOT_FOUND")
        self.entity_type = entity_type
        self.entity_id = entity_id


NotFoundError = EntityNotFoundError


class ForbiddenError(DomainException):
    """Exception raised when the actor may not perform the requested action."""

    def __init__(self, message: str = "You are not authorized to perform this action", code: Optional[str] = None):
        super().__init__(message, code or "FORBIDDEN")


class RefreshRedirectError(DomainException):
    """
    Raised when a report refresh cannot be produced after a mutation.
    The caller is expected to fall back to the initial view.
    """

    def __init__(self, message: str = "Report could not be refreshed"):
        super().__init__(message, "REFRESH_REDIRECT")


# Time entry creation failures

class InvalidDateError(ValidationError):
    """The submitted spent-on value is not a calendar date."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid date: {value!r}", "spent_on", "INVALID_DATE")
        self.value = value


class InvalidHoursError(ValidationError):
    """The submitted hours value is not numeric."""

    def __init__(self, value: Any):
        super().__init__(f"Invalid hours: {value!r}", "hours", "INVALID_HOURS")
        self.value = value


class MissingIssueError(ValidationError):
    """A time entry cannot be logged without an issue."""

    def __init__(self):
        super().__init__("Validation failed: No issue specified", "issue_id", "MISSING_ISSUE")


class IssueProjectMismatchError(ValidationError):
    """The submitted issue does not belong to the resolved project."""

    def __init__(self, issue_id: int, project_id: int):
        super().__init__(
            f"Issue #{issue_id} does not belong to project {project_id}",
            "issue_id",
            "ISSUE_PROJECT_MISMATCH"
        )
        self.issue_id = issue_id
        self.project_id = project_id


class ProjectNotAllowedError(ValidationError):
    """The project exists but does not accept time entries."""

    def __init__(self, project_name: str):
        super().__init__(
            f"Time logging is not allowed on project {project_name}",
            "project_id",
            "PROJECT_NOT_ALLOWED"
        )
        self.project_name = project_name


class UserNotFoundError(EntityNotFoundError):
    def __init__(self, user_id: Any):
        super().__init__("User", user_id, "USER_NOT_FOUND")


class ProjectNotFoundError(EntityNotFoundError):
    def __init__(self, project_id: Any):
        super().__init__("Project", project_id, "PROJECT_NOT_FOUND")


class IssueNotFoundError(EntityNotFoundError):
    def __init__(self, issue_id: Any):
        super().__init__("Issue", issue_id, "ISSUE_NOT_FOUND")


class TimeEntryNotFoundError(EntityNotFoundError):
    def __init__(self, entry_id: Any):
        super().__init__("TimeEntry", entry_id, "TIME_ENTRY_NOT_FOUND")


class AccessDeniedError(ForbiddenError):
    """The actor lacks the capability required for the operation."""

    def __init__(self, capability: str, project_id: Optional[int] = None):
        message = f"Access denied: '{capability}' is required"
        if project_id is not None:
            message = f"{message} on project {project_id}"
        super().__init__(message, "ACCESS_DENIED")
        self.capability = capability
        self.project_id = project_id


class CreationFailedError(DomainException):
    """Any unexpected failure while creating a time entry."""

    def __init__(self, message: str):
        super().__init__(message, "CREATION_FAILED")
