"""
Auth Service — registration, login and token re-issue.

bcrypt runs in a worker thread so hashing never blocks the event loop.
"""
import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only

from app.core.database import transaction
from app.core.exceptions import UnauthorizedError, handle_db_exceptions
from app.core.security import TokenIssuer, hash_password, verify_password
from app.models.user import User
from app.schemas.auth import (
    AuthResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Credential store operations plus token issuing."""

    def __init__(self, db: AsyncSession, token_issuer: TokenIssuer):
        self.db = db
        self.token_issuer = token_issuer

    def _auth_response(self, user: User) -> AuthResponse:
        profile = UserResponse.model_validate(user)
        return AuthResponse(**profile.model_dump(), token=self.token_issuer.issue(user.id))

    async def register(self, body: RegisterRequest) -> AuthResponse:
        """Create a user with a hashed password and return it with a token."""
        hashed = await run_in_threadpool(hash_password, body.password)
        user = User(
            email=body.email,
            full_name=body.full_name,
            hashed_password=hashed,
        )

        try:
            async with transaction(self.db):
                self.db.add(user)
                await self.db.flush()
        except Exception as error:
            handle_db_exceptions(error, logger)

        logger.info("Registered user %s", user.id)
        return self._auth_response(user)

    async def login(self, body: LoginRequest) -> LoginResponse:
        """Check credentials and issue a token."""
        result = await self.db.execute(
            select(User)
            .options(load_only(User.id, User.email, User.hashed_password))
            .where(User.email == body.email)
        )
        user = result.scalar_one_or_none()

        # TODO: collapse both messages into one to stop email enumeration
        if user is None:
            raise UnauthorizedError("Not valid credentials (email)")

        valid = await run_in_threadpool(verify_password, body.password, user.hashed_password)
        if not valid:
            raise UnauthorizedError("Not valid credentials (password)")

        return LoginResponse(
            id=user.id,
            email=user.email,
            token=self.token_issuer.issue(user.id),
        )

    def check_auth_status(self, user: User) -> AuthResponse:
        """Re-issue a fresh token for an already authenticated user."""
        return self._auth_response(user)
