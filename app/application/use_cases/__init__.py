"""
Application layer use cases.
Business logic for the spent time system.
"""

from .base_use_case import *
from .time_entry_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "CreateUseCase",
    "DeleteUseCase",
    "UseCaseResult",

    # Spent time
    "GetInitialViewUseCase",
    "GetReportUseCase",
    "CreateTimeEntryUseCase",
    "DeleteTimeEntryUseCase",
    "RefreshProjectIssuesUseCase",
]
