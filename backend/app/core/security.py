"""
Security utilities — JWT tokens, password hashing and the role guard.

Uses:
  - bcrypt for password hashing (direct, no passlib)
  - python-jose for JWT token creation/verification
"""
import logging
import uuid
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional

import bcrypt
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.database import get_db
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.models.user import User, ValidRoles

logger = logging.getLogger(__name__)

# ── OAuth2 scheme ─────────────────────────────────────────────────
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)

# ── JWT config ────────────────────────────────────────────────────
ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    """Hash a password with bcrypt."""
    pwd_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(pwd_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


class TokenIssuer:
    """
    Signs and verifies stateless bearer tokens keyed to a user id.

    Payload: {"sub": <user id>, "exp": <expiry>, "type": "access"}.
    Nothing is stored server-side; every request re-verifies the signature.
    """

    def __init__(self, secret_key: str, expire_minutes: int, algorithm: str = ALGORITHM):
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes
        self.algorithm = algorithm

    def issue(self, user_id: uuid.UUID | str, expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed access token for a user."""
        expire = datetime.now(timezone.utc) + (
            expires_delta or timedelta(minutes=self.expire_minutes)
        )
        to_encode = {"sub": str(user_id), "exp": expire, "type": "access"}
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict[str, Any]:
        """Decode and validate a token, returning its payload."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            raise UnauthorizedError("Token not valid")

        if payload.get("type") != "access":
            raise UnauthorizedError("Token not valid")
        return payload


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Process-wide token issuer built from settings."""
    settings = get_settings()
    return TokenIssuer(settings.secret_key, settings.access_token_expire_minutes)


async def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> User:
    """
    FastAPI dependency — extract current user from JWT token.
    Rejects unknown and deactivated users.
    """
    if token is None:
        raise UnauthorizedError("Unauthorized")

    payload = token_issuer.verify(token)

    try:
        user_id = uuid.UUID(payload.get("sub") or "")
    except ValueError:
        raise UnauthorizedError("Token not valid")

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()

    if user is None:
        raise UnauthorizedError("Token not valid")
    if not user.is_active:
        raise UnauthorizedError("User is inactive, talk with an admin")

    return user


def require_roles(*roles: ValidRoles):
    """
    Build a dependency that admits only users holding one of ``roles``.

    With no roles, any authenticated user passes.
    """
    valid = [role.value for role in roles]

    async def _guard(current_user: User = Depends(get_current_user)) -> User:
        if not valid:
            return current_user
        if any(role in valid for role in current_user.roles or []):
            return current_user
        logger.info("User %s rejected by role guard %s", current_user.id, valid)
        raise ForbiddenError(f"User {current_user.full_name} need a valid role: {valid}")

    return _guard
