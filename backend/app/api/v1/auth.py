"""
Authentication API endpoints.

POST /auth/register     — Register a new user
POST /auth/login        — Login, returns a JWT access token
GET  /auth/check-status — Re-issue a token for the current user
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.core.security import TokenIssuer, get_current_user, get_token_issuer
from app.models.user import User
from app.schemas.auth import AuthResponse, LoginRequest, LoginResponse, RegisterRequest
from app.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(db, token_issuer)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    """Register a new user account."""
    return await service.register(body)


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """Authenticate user and return a JWT token."""
    return await service.login(body)


@router.get("/check-status", response_model=AuthResponse)
async def check_auth_status(
    current_user: User = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """Current user profile with a fresh token."""
    return service.check_auth_status(current_user)
