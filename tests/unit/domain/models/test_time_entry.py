"""
Unit tests for the time entry, actor and report models.
"""

import pytest
from datetime import date
from decimal import Decimal

from app.domain.models.actor import Actor, Capability
from app.domain.models.base import ValidationError
from app.domain.models.issue import Issue
from app.domain.models.project import Project, ProjectStatus, Membership
from app.domain.models.report import ReportResult
from app.domain.models.time_entry import TimeEntry
from app.domain.models.user import User
from app.domain.models.value_objects import ReportRange


def make_entry(entry_id, spent_on, hours="1", project_id=1, user_id=1):
    return TimeEntry(
        id=entry_id,
        user_id=user_id,
        author_id=user_id,
        project_id=project_id,
        spent_on=spent_on,
        hours=Decimal(hours)
    )


class TestTimeEntry:
    """Test cases for TimeEntry domain model."""

    def test_create_time_entry(self):
        entry = TimeEntry(user_id=1, author_id=1, project_id=7, spent_on=date(2024, 1, 10), hours="2.5")

        assert entry.hours == Decimal("2.5")
        assert entry.issue_id is None
        assert entry.is_owned_by(1)
        assert not entry.is_owned_by(2)

    def test_requires_project(self):
        with pytest.raises(ValidationError, match="Project ID is required"):
            TimeEntry(user_id=1, author_id=1, project_id=None, spent_on=date(2024, 1, 10), hours=Decimal("1"))

    def test_attach_issue_of_same_project(self):
        entry = make_entry(None, date(2024, 1, 10), project_id=7)
        issue = Issue(id=42, project_id=7, subject="Fix login")

        entry.attach_issue(issue)

        assert entry.issue_id == 42

    def test_attach_issue_of_other_project_fails(self):
        entry = make_entry(None, date(2024, 1, 10), project_id=7)
        issue = Issue(id=42, project_id=8, subject="Fix login")

        with pytest.raises(ValidationError):
            entry.attach_issue(issue)
        assert entry.issue_id is None

    def test_falls_within_is_inclusive(self):
        entry = make_entry(1, date(2024, 1, 7))

        assert entry.falls_within(date(2024, 1, 1), date(2024, 1, 7))
        assert not entry.falls_within(date(2024, 1, 8), date(2024, 1, 9))


class TestProjectAndUser:
    """Test cases for project and user helpers."""

    def test_logging_needs_active_project_with_time_tracking(self):
        assert Project(name="Open").allows_time_logging
        assert not Project(name="Closed", status=ProjectStatus.CLOSED).allows_time_logging
        assert not Project(name="Untracked", time_tracking_enabled=False).allows_time_logging

    def test_user_name_falls_back_to_login(self):
        assert User(login="jdoe", firstname="Jane", lastname="Doe").name == "Jane Doe"
        assert User(login="jdoe").name == "jdoe"


class TestActor:
    """Test cases for the actor."""

    def test_capabilities_from_memberships(self):
        user = User(id=1, login="alice")
        actor = Actor.from_memberships(user, [
            Membership(1, 10, frozenset({Capability.LOG_TIME.value})),
            Membership(1, 11, frozenset({Capability.VIEW_OTHERS_SPENT_TIME.value})),
            Membership(2, 12, frozenset({Capability.EDIT_TIME_ENTRIES.value})),
        ])

        assert actor.project_ids == frozenset({10, 11})
        assert actor.holds(Capability.LOG_TIME, 10)
        assert not actor.holds(Capability.LOG_TIME, 11)
        assert actor.holds(Capability.VIEW_OTHERS_SPENT_TIME)
        assert not actor.holds(Capability.EDIT_TIME_ENTRIES)

    def test_global_capabilities(self):
        actor = Actor.from_memberships(
            User(id=1, login="alice"), [],
            global_capabilities=[Capability.VIEW_EVERY_PROJECT_SPENT_TIME.value]
        )

        assert actor.holds(Capability.VIEW_EVERY_PROJECT_SPENT_TIME)
        assert actor.holds(Capability.VIEW_EVERY_PROJECT_SPENT_TIME, 99)


class TestReportResult:
    """Test cases for the report dataset."""

    def test_entries_are_most_recent_first(self):
        entries = [
            make_entry(1, date(2024, 1, 2)),
            make_entry(3, date(2024, 1, 5)),
            make_entry(2, date(2024, 1, 5)),
        ]

        report = ReportResult.build(1, ReportRange(date(2024, 1, 1), date(2024, 1, 7)), entries)

        assert [e.id for e in report.entries] == [3, 2, 1]

    def test_totals(self):
        entries = [
            make_entry(1, date(2024, 1, 2), "1.5", project_id=1),
            make_entry(2, date(2024, 1, 2), "2", project_id=2),
            make_entry(3, date(2024, 1, 3), "0.5", project_id=1),
        ]

        report = ReportResult.build(1, ReportRange(date(2024, 1, 1), date(2024, 1, 7)), entries)

        assert report.total_hours == Decimal("4.0")
        assert report.totals_by_project == {1: Decimal("2.0"), 2: Decimal("2")}
        assert [(d.spent_on, d.total_hours) for d in report.days] == [
            (date(2024, 1, 3), Decimal("0.5")),
            (date(2024, 1, 2), Decimal("3.5")),
        ]

    def test_empty_report(self):
        report = ReportResult.build(1, ReportRange(date(2024, 1, 1), date(2024, 1, 7)), [])

        assert report.is_empty
        assert report.total_hours == 0
        assert report.days == []
