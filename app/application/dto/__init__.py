"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .time_entry_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "RangeRequestDTO",
    "HealthCheckResponseDTO",

    # Spent time DTOs
    "GetReportRequestDTO",
    "CreateTimeEntryRequestDTO",
    "DeleteTimeEntryRequestDTO",
    "RefreshProjectIssuesRequestDTO",
    "UserSummaryDTO",
    "ProjectSummaryDTO",
    "IssueSummaryDTO",
    "TimeEntryResponseDTO",
    "DaySummaryDTO",
    "ProjectTotalDTO",
    "ReportResponseDTO",
    "InitialViewResponseDTO",
    "ProjectIssuesResponseDTO",
]
