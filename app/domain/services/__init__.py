"""
Domain services for the spent time system.
This module exports all domain services for complex business logic.
"""

from .permission_service import PermissionOracle, MembershipPermissionOracle
from .visibility_service import VisibilityResolver
from .report_service import ReportAggregator

__all__ = [
    "PermissionOracle",
    "MembershipPermissionOracle",
    "VisibilityResolver",
    "ReportAggregator",
]
