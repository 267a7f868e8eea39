"""Pydantic schemas for file uploads."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Public URL of an uploaded product image."""
    secure_url: str
