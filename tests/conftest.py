"""
Shared fixtures: in-memory repositories and a small membership graph.
"""

from typing import Dict, Iterable, List, Optional
from datetime import date
from decimal import Decimal

import pytest_asyncio

from app.domain.models.actor import Actor, Capability
from app.domain.models.issue import Issue
from app.domain.models.project import Project, ProjectStatus, Membership
from app.domain.models.time_entry import TimeEntry
from app.domain.models.user import User
from app.domain.repositories import (
    UserRepository, ProjectRepository, IssueRepository, TimeEntryRepository
)
from app.domain.services.permission_service import MembershipPermissionOracle
from app.domain.services.report_service import ReportAggregator
from app.domain.services.visibility_service import VisibilityResolver


class InMemoryUserRepository(UserRepository):
    def __init__(self):
        self.data: Dict[int, User] = {}
        self.next_id = 1

    async def find_by_id(self, user_id: int) -> Optional[User]:
        return self.data.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[int], active_only: bool = False) -> List[User]:
        found = [self.data[i] for i in user_ids if i in self.data]
        return [u for u in found if u.is_active] if active_only else found

    async def find_active_ordered_by_firstname(self) -> List[User]:
        active = [u for u in self.data.values() if u.is_active]
        return sorted(active, key=lambda u: (u.firstname, u.lastname, u.id))

    async def save(self, user: User) -> User:
        if user.id is None:
            user.id = self.next_id
            self.next_id += 1
        self.data[user.id] = user
        return user


class InMemoryProjectRepository(ProjectRepository):
    def __init__(self):
        self.data: Dict[int, Project] = {}
        self.memberships: List[Membership] = []
        self.next_id = 1

    async def find_by_id(self, project_id: int) -> Optional[Project]:
        return self.data.get(project_id)

    async def find_by_ids(self, project_ids: Iterable[int]) -> List[Project]:
        found = [self.data[i] for i in project_ids if i in self.data]
        return sorted(found, key=lambda p: (p.name, p.id))

    async def find_not_archived(self) -> List[Project]:
        found = [p for p in self.data.values() if not p.is_archived]
        return sorted(found, key=lambda p: (p.name, p.id))

    async def find_memberships_for_user(self, user_id: int) -> List[Membership]:
        return [
            m for m in self.memberships
            if m.user_id == user_id and not self.data[m.project_id].is_archived
        ]

    async def find_member_ids(self, project_ids: Iterable[int]) -> List[int]:
        ids = set(project_ids)
        return [m.user_id for m in self.memberships if m.project_id in ids]

    async def save(self, project: Project) -> Project:
        if project.id is None:
            project.id = self.next_id
            self.next_id += 1
        self.data[project.id] = project
        return project

    async def add_membership(self, membership: Membership) -> Membership:
        self.memberships.append(membership)
        return membership


class InMemoryIssueRepository(IssueRepository):
    def __init__(self):
        self.data: Dict[int, Issue] = {}
        self.next_id = 1

    async def find_by_id(self, issue_id: int) -> Optional[Issue]:
        return self.data.get(issue_id)

    async def find_open_assigned_to(self, user_id: int, project_id: Optional[int] = None) -> List[Issue]:
        found = [
            i for i in self.data.values()
            if i.is_open and i.is_assigned_to(user_id)
            and (project_id is None or i.project_id == project_id)
        ]
        return sorted(found, key=lambda i: (i.project_id, i.id))

    async def save(self, issue: Issue) -> Issue:
        if issue.id is None:
            issue.id = self.next_id
            self.next_id += 1
        self.data[issue.id] = issue
        return issue


class InMemoryTimeEntryRepository(TimeEntryRepository):
    def __init__(self):
        self.data: Dict[int, TimeEntry] = {}
        self.next_id = 1
        self.queries = 0
        self.should_fail = False

    async def add(self, time_entry: TimeEntry) -> TimeEntry:
        if self.should_fail:
            raise RuntimeError("Database unavailable")
        time_entry.id = self.next_id
        self.next_id += 1
        self.data[time_entry.id] = time_entry
        return time_entry

    async def find_by_id(self, entry_id: int) -> Optional[TimeEntry]:
        return self.data.get(entry_id)

    async def find_by_user_and_date_range(
        self,
        user_id: int,
        start_date: date,
        end_date: date,
        project_ids: Optional[Iterable[int]] = None
    ) -> List[TimeEntry]:
        self.queries += 1
        scope = set(project_ids) if project_ids is not None else None
        return [
            e for e in self.data.values()
            if e.user_id == user_id and e.falls_within(start_date, end_date)
            and (scope is None or e.project_id in scope)
        ]

    async def delete(self, entry_id: int) -> bool:
        return self.data.pop(entry_id, None) is not None


MEMBER = frozenset({
    Capability.VIEW_TIME_ENTRIES.value,
    Capability.LOG_TIME.value,
    Capability.EDIT_OWN_TIME_ENTRIES.value,
})
MANAGER = MEMBER | {Capability.VIEW_OTHERS_SPENT_TIME.value, Capability.EDIT_TIME_ENTRIES.value}


class World:
    """
    Users, projects, issues and memberships used across the unit tests.

    - alice: member of Website and Backend with manager capabilities
    - bob: member of Website
    - carol: member of Backend
    - dave: member of Archive (archived project) only
    - root: admin, no memberships
    """

    def __init__(self):
        self.users = InMemoryUserRepository()
        self.projects = InMemoryProjectRepository()
        self.issues = InMemoryIssueRepository()
        self.time_entries = InMemoryTimeEntryRepository()
        self.oracle = MembershipPermissionOracle()
        self.aggregator = ReportAggregator(self.time_entries, self.issues, 7)
        self.resolver = VisibilityResolver(self.users, self.projects, self.oracle)

    async def populate(self) -> "World":
        self.alice = await self.users.save(User(login="alice", firstname="Alice", lastname="Anders"))
        self.bob = await self.users.save(User(login="bob", firstname="Bob", lastname="Brown"))
        self.carol = await self.users.save(User(login="carol", firstname="Carol", lastname="Cole"))
        self.dave = await self.users.save(User(login="dave", firstname="Dave", lastname="Doe"))
        self.root = await self.users.save(User(login="root", firstname="Root", admin=True))

        self.website = await self.projects.save(Project(name="Website", identifier="website"))
        self.backend = await self.projects.save(Project(name="Backend", identifier="backend"))
        self.archive = await self.projects.save(
            Project(name="Archive", identifier="archive", status=ProjectStatus.ARCHIVED)
        )
        self.closed = await self.projects.save(
            Project(name="Closed", identifier="closed", status=ProjectStatus.CLOSED)
        )

        await self.projects.add_membership(Membership(self.alice.id, self.website.id, MANAGER))
        await self.projects.add_membership(Membership(self.alice.id, self.backend.id, MANAGER))
        await self.projects.add_membership(Membership(self.bob.id, self.website.id, MEMBER))
        await self.projects.add_membership(Membership(self.carol.id, self.backend.id, MEMBER))
        await self.projects.add_membership(Membership(self.dave.id, self.archive.id, MANAGER))
        await self.projects.add_membership(Membership(self.bob.id, self.closed.id, MEMBER))

        self.landing = await self.issues.save(
            Issue(project_id=self.website.id, subject="Landing page", assigned_to_id=self.bob.id)
        )
        self.api = await self.issues.save(
            Issue(project_id=self.backend.id, subject="Report API", assigned_to_id=self.alice.id)
        )
        self.done = await self.issues.save(
            Issue(project_id=self.website.id, subject="Done", assigned_to_id=self.bob.id, is_closed=True)
        )
        self.legacy = await self.issues.save(
            Issue(project_id=self.closed.id, subject="Legacy", assigned_to_id=self.bob.id)
        )
        return self

    async def actor_for(self, user: User) -> Actor:
        memberships = await self.projects.find_memberships_for_user(user.id)
        return Actor.from_memberships(user, memberships)

    async def log(self, user: User, project: Project, spent_on: date, hours: str, issue: Optional[Issue] = None):
        entry = TimeEntry(
            user_id=user.id,
            author_id=user.id,
            project_id=project.id,
            spent_on=spent_on,
            hours=Decimal(hours),
            issue_id=issue.id if issue else None
        )
        return await self.time_entries.add(entry)


@pytest_asyncio.fixture
async def world() -> World:
    """Populated in-memory world."""
    return await World().populate()
