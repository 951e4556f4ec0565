"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Boolean,
    Numeric, Date, ForeignKey, JSON, Enum as SQLEnum,
    Index, UniqueConstraint
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.domain.models.project import ProjectStatus
from app.domain.models.user import UserStatus
from app.infrastructure.db.database import Base


class UserModel(Base):
    """Users table"""
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True, autoincrement=True)
    login = Column(String(255), nullable=False, unique=True)
    firstname = Column(String(255), nullable=False, default="")
    lastname = Column(String(255), nullable=False, default="")
    status = Column(SQLEnum(UserStatus), nullable=False, default=UserStatus.ACTIVE)
    admin = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    memberships = relationship("MemberModel", back_populates="user", cascade="all, delete-orphan")
    time_entries = relationship("TimeEntryModel", back_populates="user", foreign_keys="TimeEntryModel.user_id")

    __table_args__ = (
        Index('idx_users_status_firstname', 'status', 'firstname'),
    )


class ProjectModel(Base):
    """Projects table"""
    __tablename__ = 'projects'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    identifier = Column(String(100), nullable=False, default="")
    status = Column(SQLEnum(ProjectStatus), nullable=False, default=ProjectStatus.ACTIVE)
    time_tracking_enabled = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    members = relationship("MemberModel", back_populates="project", cascade="all, delete-orphan")
    issues = relationship("IssueModel", back_populates="project")
    time_entries = relationship("TimeEntryModel", back_populates="project")

    __table_args__ = (
        Index('idx_projects_status', 'status'),
    )


class MemberModel(Base):
    """Project memberships table"""
    __tablename__ = 'members'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id'), nullable=False)

    # Capability names granted by the member's roles
    permissions = Column(JSON, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("UserModel", back_populates="memberships")
    project = relationship("ProjectModel", back_populates="members")

    __table_args__ = (
        UniqueConstraint('user_id', 'project_id', name='uq_members_user_project'),
        Index('idx_members_project', 'project_id'),
    )


class IssueModel(Base):
    """Issues table"""
    __tablename__ = 'issues'

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey('projects.id'), nullable=False)
    assigned_to_id = Column(Integer, ForeignKey('users.id'))

    subject = Column(String(255), nullable=False)
    is_closed = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    project = relationship("ProjectModel", back_populates="issues")
    assignee = relationship("UserModel", foreign_keys=[assigned_to_id])
    time_entries = relationship("TimeEntryModel", back_populates="issue")

    __table_args__ = (
        Index('idx_issues_assignee_project', 'assigned_to_id', 'project_id'),
    )


class TimeEntryModel(Base):
    """Time entry table"""
    __tablename__ = 'time_entries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    author_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    project_id = Column(Integer, ForeignKey('projects.id'), nullable=False)
    issue_id = Column(Integer, ForeignKey('issues.id'))

    spent_on = Column(Date, nullable=False)
    # Unscaled so hours keep every submitted fractional digit
    hours = Column(Numeric(asdecimal=True), nullable=False)
    comments = Column(Text)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    user = relationship("UserModel", back_populates="time_entries", foreign_keys=[user_id])
    author = relationship("UserModel", foreign_keys=[author_id])
    project = relationship("ProjectModel", back_populates="time_entries")
    issue = relationship("IssueModel", back_populates="time_entries")

    # Constraints and indexes
    __table_args__ = (
        Index('idx_time_entries_user_spent_on', 'user_id', 'spent_on'),
        Index('idx_time_entries_project', 'project_id'),
    )


def create_all_tables(engine):
    """Create all tables in the database"""
    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine):
    """Drop all tables in the database"""
    Base.metadata.drop_all(bind=engine)
