"""
Database infrastructure for the spent time service.
"""

from .database import engine, SessionLocal, get_db, session_scope, Base, build_engine
from .models import *

__all__ = [
    "engine",
    "SessionLocal",
    "get_db",
    "session_scope",
    "Base",
    "build_engine",
    "UserModel",
    "ProjectModel",
    "MemberModel",
    "IssueModel",
    "TimeEntryModel",
    "create_all_tables",
    "drop_all_tables",
]
