"""Pydantic schemas for authentication."""

import re
import uuid
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*(\d|\W)).*$")


# ── Auth Request/Response ─────────────────────────────────────────

class RegisterRequest(BaseModel):
    """Registration request."""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=50)
    full_name: str = Field(..., min_length=1, max_length=255)

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: str) -> str:
        if not PASSWORD_PATTERN.match(value):
            raise ValueError(
                "The password must have a Uppercase, lowercase letter and a number"
            )
        return value


class LoginRequest(BaseModel):
    """Login request."""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=50)


# ── User Response ─────────────────────────────────────────────────

class UserResponse(BaseModel):
    """User profile in API responses. Never carries the password."""
    id: uuid.UUID
    email: str
    full_name: Optional[str] = None
    is_active: bool
    roles: list[str] = []

    model_config = {"from_attributes": True}


class AuthResponse(UserResponse):
    """User profile plus a freshly signed token."""
    token: str


class LoginResponse(BaseModel):
    """Login result: only the fields read by the credential lookup."""
    id: uuid.UUID
    email: str
    token: str
