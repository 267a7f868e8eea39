"""Pydantic schemas for the product catalog."""

import uuid
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.auth import UserResponse

Gender = Literal["men", "women", "kid", "unisex"]


class ProductCreate(BaseModel):
    """Create a product. ``images`` is an ordered list of image URLs."""
    title: str = Field(..., min_length=1)
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    slug: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    sizes: list[str]
    gender: Gender
    tags: Optional[list[str]] = None
    images: Optional[list[str]] = None


class ProductUpdate(BaseModel):
    """
    Partial update. Only explicitly sent fields are applied.
    Sending ``images`` replaces the whole image list.
    """
    title: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    slug: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    sizes: Optional[list[str]] = None
    gender: Optional[Gender] = None
    tags: Optional[list[str]] = None
    images: Optional[list[str]] = None


class ProductImageResponse(BaseModel):
    id: int
    url: str

    model_config = {"from_attributes": True}


class ProductResponse(BaseModel):
    """Product with its images and owner."""
    id: uuid.UUID
    title: str
    price: float
    description: Optional[str] = None
    slug: str
    stock: int
    sizes: list[str]
    gender: str
    tags: list[str] = []
    images: list[ProductImageResponse] = []
    user: Optional[UserResponse] = None

    model_config = {"from_attributes": True}
