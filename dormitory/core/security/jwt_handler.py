"""
JWT session token management.

Session tokens carry the caller's id, role, display name and user type,
signed with the application secret.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from dormitory.core.exceptions import InvalidTokenError, TokenExpiredError
from dormitory.core.logging import get_logger
from dormitory.core.permissions import Principal

logger = get_logger(__name__)


class JWTManager:
    """
    JWT token manager for session authentication.
    """

    DEFAULT_ALGORITHM = "HS256"
    DEFAULT_EXPIRE_HOURS = 24

    def __init__(
        self,
        secret_key: str,
        algorithm: str = DEFAULT_ALGORITHM,
        expire_hours: int = DEFAULT_EXPIRE_HOURS,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_hours = expire_hours

    def create_session_token(
        self,
        principal: Principal,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """
        Create a signed session token for an authenticated principal.

        Args:
            principal: Authenticated caller
            expires_delta: Custom expiration time

        Returns:
            Encoded JWT token
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(hours=self.expire_hours))

        payload = {
            "sub": principal.user_id,
            "role": principal.role,
            "name": principal.name,
            "user_type": principal.user_type,
            "email": principal.email,
            "iat": now,
            "exp": expire,
            "jti": secrets.token_hex(16),
        }

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        logger.debug(f"Session token created for {principal.user_id}")
        return token

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a session token.

        Raises:
            TokenExpiredError: If the token has expired
            InvalidTokenError: If the token is malformed or badly signed
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("Session token expired")
            raise TokenExpiredError() from e
        except jwt.InvalidTokenError as e:
            logger.warning(f"Invalid session token: {e}")
            raise InvalidTokenError(reason=str(e)) from e

        if not payload.get("role"):
            raise InvalidTokenError(reason="missing role claim")
        return payload

    def principal_from_token(self, token: str) -> Principal:
        payload = self.verify_token(token)
        return Principal(
            user_id=payload["sub"],
            role=payload["role"],
            name=payload.get("name") or "",
            user_type=payload.get("user_type") or "employee",
            email=payload.get("email"),
        )


def get_jwt_manager() -> JWTManager:
    from dormitory.config import settings

    return JWTManager(
        secret_key=settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
        expire_hours=settings.SESSION_EXPIRE_HOURS,
    )
