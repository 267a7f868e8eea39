"""API v1 router."""

from fastapi import APIRouter

from app.api.v1.auth import router as auth_router
from app.api.v1.files import router as files_router
from app.api.v1.products import router as products_router
from app.api.v1.seed import router as seed_router

api_router = APIRouter()

# Auth
api_router.include_router(auth_router)

# Catalog
api_router.include_router(products_router)
api_router.include_router(files_router)

# Tooling
api_router.include_router(seed_router)


@api_router.get("/status")
async def status():
    """API status endpoint."""
    return {"api_version": "v1", "status": "healthy"}
