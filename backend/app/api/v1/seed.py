"""
Seed API endpoint.

GET /seed — Wipe users and products and load the fixture data
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.services.products_service import ProductsService
from app.services.seed_service import SeedService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seed", tags=["Seed"])


def get_seed_service(db: AsyncSession = Depends(get_db)) -> SeedService:
    return SeedService(db, ProductsService(db))


@router.get("")
async def execute_seed(service: SeedService = Depends(get_seed_service)):
    """Run the seeder. Destroys all existing users and products."""
    logger.warning("Seed requested: wiping users and products")
    return await service.run_seed()
