#!/usr/bin/env python3
"""
Database management script for the spent time backend.
Handles table creation, teardown, and seeding of demo data.
"""

import sys
import asyncio
from datetime import date, timedelta
from decimal import Decimal
from pathlib import Path

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from app.domain.models.actor import Capability
from app.domain.models.issue import Issue
from app.domain.models.project import Project, Membership
from app.domain.models.time_entry import TimeEntry
from app.domain.models.user import User
from app.infrastructure.auth.jwt_handler import JWTHandler
from app.infrastructure.db.database import engine, session_scope
from app.infrastructure.db.models import create_all_tables, drop_all_tables
from app.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProjectRepository,
    SQLAlchemyIssueRepository,
    SQLAlchemyTimeEntryRepository
)

MEMBER_CAPABILITIES = frozenset({
    Capability.VIEW_TIME_ENTRIES.value,
    Capability.LOG_TIME.value,
    Capability.EDIT_OWN_TIME_ENTRIES.value,
})
MANAGER_CAPABILITIES = MEMBER_CAPABILITIES | {
    Capability.VIEW_OTHERS_SPENT_TIME.value,
    Capability.EDIT_TIME_ENTRIES.value,
}


def create_tables():
    """Create all tables."""
    print("Creating tables...")
    create_all_tables(engine)


def drop_tables():
    """Drop all tables - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Dropping tables...")
        drop_all_tables(engine)
    else:
        print("Drop cancelled.")


def reset_database():
    """Reset database - WARNING: This will drop all data!"""
    response = input("This will drop ALL data. Type 'yes' to continue: ")
    if response.lower() == 'yes':
        print("Resetting database...")
        drop_all_tables(engine)
        create_all_tables(engine)
    else:
        print("Database reset cancelled.")


async def seed_database():
    """Insert a small set of users, projects, issues and time entries."""
    create_all_tables(engine)
    with session_scope() as session:
        users = SQLAlchemyUserRepository(session)
        projects = SQLAlchemyProjectRepository(session)
        issues = SQLAlchemyIssueRepository(session)
        time_entries = SQLAlchemyTimeEntryRepository(session)

        admin = await users.save(User(login="admin", firstname="Ada", lastname="Admin", admin=True))
        manager = await users.save(User(login="mgr", firstname="Maria", lastname="Manager"))
        developer = await users.save(User(login="dev", firstname="Dan", lastname="Developer"))

        website = await projects.save(Project(name="Website", identifier="website"))
        backend = await projects.save(Project(name="Backend", identifier="backend"))

        await projects.add_membership(Membership(manager.id, website.id, MANAGER_CAPABILITIES))
        await projects.add_membership(Membership(manager.id, backend.id, MANAGER_CAPABILITIES))
        await projects.add_membership(Membership(developer.id, website.id, MEMBER_CAPABILITIES))

        landing = await issues.save(Issue(project_id=website.id, subject="Landing page", assigned_to_id=developer.id))
        await issues.save(Issue(project_id=backend.id, subject="Reporting API", assigned_to_id=manager.id))

        today = date.today()
        for offset, hours in ((0, "2.5"), (1, "4"), (3, "1.25")):
            entry = TimeEntry(
                user_id=developer.id,
                author_id=developer.id,
                project_id=website.id,
                spent_on=today - timedelta(days=offset),
                hours=Decimal(hours),
                comments="Seeded entry"
            )
            entry.attach_issue(landing)
            await time_entries.add(entry)

        print(f"Seeded users: {admin.login}, {manager.login}, {developer.login}")


def issue_token(user_id: str):
    """Print a bearer token for a user, for local testing."""
    print(JWTHandler().create_access_token(int(user_id)))


def main():
    """Main CLI function."""
    if len(sys.argv) < 2:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  create         - Create all tables")
        print("  drop           - Drop all tables (WARNING: drops all data)")
        print("  reset          - Reset database (WARNING: drops all data)")
        print("  seed           - Insert demo data")
        print("  token <id>     - Print a bearer token for a user")
        return

    command_name = sys.argv[1]

    if command_name == "create":
        create_tables()
    elif command_name == "drop":
        drop_tables()
    elif command_name == "reset":
        reset_database()
    elif command_name == "seed":
        asyncio.run(seed_database())
    elif command_name == "token" and len(sys.argv) > 2:
        issue_token(sys.argv[2])
    else:
        print(f"Unknown command: {command_name}")


if __name__ == "__main__":
    main()
