"""
User mapper for converting between domain entities and database models.
"""

from app.domain.models.user import User, UserStatus
from app.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to UserModel."""
        return UserModel(
            id=user.id,
            login=user.login,
            firstname=user.firstname,
            lastname=user.lastname,
            status=user.status,
            admin=user.admin
        )

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            login=model.login,
            firstname=model.firstname or "",
            lastname=model.lastname or "",
            status=UserStatus(model.status) if model.status else UserStatus.ACTIVE,
            admin=bool(model.admin),
            created_at=model.created_at,
            updated_at=model.updated_at
        )
