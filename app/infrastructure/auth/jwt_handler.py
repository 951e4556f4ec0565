"""
JWT token handler.
Issues and validates bearer tokens whose subject is the user ID.
"""

from typing import Dict, Any, Optional
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt

from app.config import get_settings
from app.domain.models.base import ValidationError


class JWTHandler:
    """Handles JWT token validation and user extraction."""

    def __init__(self, secret_key: Optional[str] = None, algorithm: Optional[str] = None):
        self.settings = get_settings()
        self.jwt_secret = secret_key or self.settings.jwt_secret_key
        self.jwt_algorithm = algorithm or self.settings.jwt_algorithm

    def create_access_token(self, user_id: int, expires_minutes: Optional[int] = None) -> str:
        """
        Create a signed access token for a user.

        Args:
            user_id: ID of the authenticated user
            expires_minutes: Lifetime override, defaults to the configured one

        Returns:
            JWT token string
        """
        now = datetime.now(timezone.utc)
        lifetime = expires_minutes if expires_minutes is not None else self.settings.jwt_access_token_expire_minutes
        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=lifetime)).timestamp()),
        }
        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Raises:
            ValidationError: If token is invalid or expired
        """
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False}
            )
        except JWTError as e:
            raise ValidationError(f"Invalid JWT token: {str(e)}")

        if 'sub' not in payload:
            raise ValidationError("Token missing user ID (sub claim)")
        if 'exp' not in payload:
            raise ValidationError("Token missing expiration (exp claim)")

        return payload

    def get_user_id(self, token: str) -> int:
        """
        Extract user ID from JWT token.

        Raises:
            ValidationError: If token is invalid or the subject is not a user ID
        """
        payload = self.verify_token(token)
        try:
            return int(payload['sub'])
        except (TypeError, ValueError):
            raise ValidationError("Token subject is not a user ID")

    def is_token_valid(self, token: str) -> bool:
        """Check if token is valid without raising exceptions."""
        try:
            self.verify_token(token)
            return True
        except ValidationError:
            return False
