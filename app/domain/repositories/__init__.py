"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .user_repository import UserRepository
from .project_repository import ProjectRepository
from .issue_repository import IssueRepository
from .time_entry_repository import TimeEntryRepository

__all__ = [
    "UserRepository",
    "ProjectRepository",
    "IssueRepository",
    "TimeEntryRepository",
]
