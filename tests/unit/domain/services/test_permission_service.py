"""
Unit tests for the membership-based permission oracle.
"""

from datetime import date
from decimal import Decimal

from app.domain.models.actor import Actor, Capability
from app.domain.models.project import Project, ProjectStatus, Membership
from app.domain.models.time_entry import TimeEntry
from app.domain.models.user import User
from app.domain.services.permission_service import MembershipPermissionOracle


class TestMembershipPermissionOracle:
    """Test cases for MembershipPermissionOracle."""

    def setup_method(self):
        """Set up test fixtures."""
        self.oracle = MembershipPermissionOracle()
        self.project = Project(id=1, name="Website")
        self.archived = Project(id=2, name="Old", status=ProjectStatus.ARCHIVED)
        self.member = Actor.from_memberships(User(id=10, login="member"), [
            Membership(10, 1, frozenset({Capability.LOG_TIME.value, Capability.EDIT_OWN_TIME_ENTRIES.value})),
            Membership(10, 2, frozenset({Capability.LOG_TIME.value})),
        ])
        self.manager = Actor.from_memberships(User(id=11, login="manager"), [
            Membership(11, 1, frozenset({Capability.EDIT_TIME_ENTRIES.value})),
        ])
        self.admin = Actor.from_memberships(User(id=12, login="admin", admin=True), [])

    def entry(self, user_id, project_id=1):
        return TimeEntry(
            id=5, user_id=user_id, author_id=user_id, project_id=project_id,
            spent_on=date(2024, 1, 1), hours=Decimal("1")
        )

    def test_project_capability(self):
        assert self.oracle.allowed_to(self.member, Capability.LOG_TIME, self.project)
        assert not self.oracle.allowed_to(self.manager, Capability.LOG_TIME, self.project)

    def test_archived_project_grants_nothing(self):
        assert not self.oracle.allowed_to(self.member, Capability.LOG_TIME, self.archived)
        assert not self.oracle.allowed_to(self.admin, Capability.LOG_TIME, self.archived)

    def test_admin_holds_everything(self):
        assert self.oracle.allowed_to(self.admin, Capability.VIEW_EVERY_PROJECT_SPENT_TIME)
        assert self.oracle.allowed_to(self.admin, Capability.LOG_TIME, self.project)

    def test_global_check_uses_any_project(self):
        assert self.oracle.allowed_to(self.member, Capability.LOG_TIME)
        assert not self.oracle.allowed_to(self.member, Capability.VIEW_OTHERS_SPENT_TIME)

    def test_owner_may_edit_own_entry(self):
        assert self.oracle.editable_by(self.entry(user_id=10), self.member)

    def test_member_may_not_edit_others_entry(self):
        assert not self.oracle.editable_by(self.entry(user_id=11), self.member)

    def test_own_entry_needs_edit_own_capability(self):
        assert not self.oracle.editable_by(self.entry(user_id=10, project_id=2), self.member)

    def test_manager_may_edit_any_entry_of_project(self):
        assert self.oracle.editable_by(self.entry(user_id=10), self.manager)
        assert not self.oracle.editable_by(self.entry(user_id=10, project_id=2), self.manager)

    def test_admin_may_edit_any_entry(self):
        assert self.oracle.editable_by(self.entry(user_id=10, project_id=2), self.admin)
