"""
Fixtures for tests against an in-memory SQLite database.
"""

from types import SimpleNamespace

import pytest
import pytest_asyncio
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.domain.models.actor import Capability
from app.domain.models.issue import Issue
from app.domain.models.project import Project, ProjectStatus, Membership
from app.domain.models.user import User, UserStatus
from app.infrastructure.db.models import create_all_tables, drop_all_tables
from app.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyIssueRepository,
    SQLAlchemyTimeEntryRepository
)

MEMBER = frozenset({
    Capability.VIEW_TIME_ENTRIES.value,
    Capability.LOG_TIME.value,
    Capability.EDIT_OWN_TIME_ENTRIES.value,
})
MANAGER = MEMBER | {Capability.VIEW_OTHERS_SPENT_TIME.value, Capability.EDIT_TIME_ENTRIES.value}


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    create_all_tables(engine)
    yield engine
    drop_all_tables(engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def repositories(session):
    return SimpleNamespace(
        users=SQLAlchemyUserRepository(session),
        projects=SQLAlchemyProjectRepository(session),
        issues=SQLAlchemyIssueRepository(session),
        time_entries=SQLAlchemyTimeEntryRepository(session)
    )


@pytest_asyncio.fixture
async def seeded(repositories):
    """
    - manager: Website and Backend with manager capabilities
    - member: Website
    - locked: Website, locked account
    """
    users = repositories.users
    projects = repositories.projects
    issues = repositories.issues

    data = SimpleNamespace()
    data.manager = await users.save(User(login="manager", firstname="Maria", lastname="Manager"))
    data.member = await users.save(User(login="member", firstname="Ben", lastname="Member"))
    data.locked = await users.save(User(login="locked", firstname="Al", status=UserStatus.LOCKED))

    data.website = await projects.save(Project(name="Website", identifier="website"))
    data.backend = await projects.save(Project(name="Backend", identifier="backend"))
    data.archive = await projects.save(Project(name="Archive", status=ProjectStatus.ARCHIVED))

    await projects.add_membership(Membership(data.manager.id, data.website.id, MANAGER))
    await projects.add_membership(Membership(data.manager.id, data.backend.id, MANAGER))
    await projects.add_membership(Membership(data.member.id, data.website.id, MEMBER))
    await projects.add_membership(Membership(data.member.id, data.archive.id, MANAGER))
    await projects.add_membership(Membership(data.locked.id, data.website.id, MEMBER))

    data.landing = await issues.save(
        Issue(project_id=data.website.id, subject="Landing page", assigned_to_id=data.member.id)
    )
    data.api = await issues.save(
        Issue(project_id=data.backend.id, subject="Report API", assigned_to_id=data.manager.id)
    )
    data.closed = await issues.save(
        Issue(project_id=data.website.id, subject="Old bug", assigned_to_id=data.member.id, is_closed=True)
    )
    return data
