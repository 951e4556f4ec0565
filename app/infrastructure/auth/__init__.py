"""
Authentication infrastructure module.
Handles JWT validation and resolution of the request actor.
"""

from .jwt_handler import JWTHandler
from .dependencies import (
    get_current_user_id,
    get_current_actor,
    get_jwt_handler
)

__all__ = [
    "JWTHandler",
    "get_current_user_id",
    "get_current_actor",
    "get_jwt_handler"
]
