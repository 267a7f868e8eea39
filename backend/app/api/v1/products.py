"""
Products API endpoints.

POST   /products                 — Create a product (admin)
GET    /products?limit=10&offset=0
GET    /products/{term}          — By UUID, title or slug
PATCH  /products/{id}            — Partial update, ``images`` replaces all (admin)
DELETE /products/{id}            — Remove a product (admin)
"""
import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.database import get_db
from app.core.security import require_roles
from app.models.user import User, ValidRoles
from app.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from app.services.products_service import ProductsService

router = APIRouter(prefix="/products", tags=["Products"])

admin_only = require_roles(ValidRoles.admin, ValidRoles.super_user)


def get_products_service(db: AsyncSession = Depends(get_db)) -> ProductsService:
    return ProductsService(db)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate,
    current_user: User = Depends(admin_only),
    service: ProductsService = Depends(get_products_service),
):
    """Create a product owned by the caller."""
    return await service.create(body, current_user)


@router.get("", response_model=list[ProductResponse])
async def list_products(
    limit: int = Query(get_settings().default_page_limit, gt=0),
    offset: int = Query(0, ge=0),
    service: ProductsService = Depends(get_products_service),
):
    """Paginated product list."""
    return await service.find_all(limit=limit, offset=offset)


@router.get("/{term}", response_model=ProductResponse)
async def get_product(term: str, service: ProductsService = Depends(get_products_service)):
    """Find a product by id, title or slug."""
    return await service.find_one(term)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: uuid.UUID,
    body: ProductUpdate,
    current_user: User = Depends(admin_only),
    service: ProductsService = Depends(get_products_service),
):
    """Update a product; sending ``images`` replaces the full image list."""
    return await service.update(product_id, body, current_user)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: uuid.UUID,
    current_user: User = Depends(admin_only),
    service: ProductsService = Depends(get_products_service),
):
    """Remove a product and its images."""
    await service.remove(str(product_id))
