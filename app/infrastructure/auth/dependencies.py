"""
Authentication dependencies for FastAPI.
Turns the bearer token into the actor every use case runs on behalf of.
"""

import logging
from typing import Annotated
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from app.domain.models.actor import Actor
from app.domain.models.base import ValidationError
from app.infrastructure.auth.jwt_handler import JWTHandler
from app.infrastructure.db.database import get_db
from app.infrastructure.repositories.project_repository import SQLAlchemyProjectRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository

logger = logging.getLogger(__name__)

# Security scheme
security = HTTPBearer()

# Global instance
jwt_handler = JWTHandler()


def get_jwt_handler() -> JWTHandler:
    """Dependency to get JWT handler."""
    return jwt_handler


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> int:
    """
    FastAPI dependency to get current authenticated user ID.

    Raises:
        HTTPException: If authentication fails
    """
    try:
        return jwt_handler.get_user_id(credentials.credentials)
    except ValidationError as e:
        raise _unauthorized(str(e))


async def get_current_actor(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)]
) -> Actor:
    """
    FastAPI dependency building the actor of the request: the active user and
    the capabilities granted by their memberships.

    Raises:
        HTTPException: If the user is unknown or not active
    """
    user = await SQLAlchemyUserRepository(db).find_by_id(user_id)
    if user is None or not user.is_active:
        logger.info("Rejected token for unknown or inactive user %s", user_id)
        raise _unauthorized("User not found or inactive")

    memberships = await SQLAlchemyProjectRepository(db).find_memberships_for_user(user.id)
    return Actor.from_memberships(user, memberships)
