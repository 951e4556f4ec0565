"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional, List, Iterable
from sqlalchemy.orm import Session

from app.domain.models.user import User, UserStatus
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.db.models import UserModel
from app.infrastructure.mappers.user_mapper import UserMapper


class SQLAlchemyUserRepository(UserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = UserMapper()

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find user by ID."""
        model = self.session.get(UserModel, user_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_ids(self, user_ids: Iterable[int], active_only: bool = False) -> List[User]:
        """Find all users with the given IDs, optionally only the active ones."""
        ids = list(user_ids)
        if not ids:
            return []
        query = self.session.query(UserModel).filter(UserModel.id.in_(ids))
        if active_only:
            query = query.filter(UserModel.status == UserStatus.ACTIVE)
        models = query.all()
        return [self.mapper.model_to_domain(model) for model in models]

    async def find_active_ordered_by_firstname(self) -> List[User]:
        """Find active users ordered by first name."""
        models = self.session.query(UserModel).filter(
            UserModel.status == UserStatus.ACTIVE
        ).order_by(
            UserModel.firstname, UserModel.lastname, UserModel.id
        ).all()
        return [self.mapper.model_to_domain(model) for model in models]

    async def save(self, user: User) -> User:
        """Save a user entity."""
        model = self.session.merge(self.mapper.domain_to_model(user))
        self.session.commit()
        user.id = model.id
        return user
