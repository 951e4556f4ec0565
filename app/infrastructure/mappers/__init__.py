"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .user_mapper import UserMapper
from .project_mapper import ProjectMapper
from .issue_mapper import IssueMapper
from .time_entry_mapper import TimeEntryMapper

__all__ = [
    "UserMapper",
    "ProjectMapper",
    "IssueMapper",
    "TimeEntryMapper",
]
