"""
Seed Service — wipe and repopulate users and products from fixture data.

Runs from ``GET /api/seed`` or directly:
    python -m app.services.seed_service
"""
import asyncio
import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_engine, get_session_maker, transaction
from app.core.exceptions import handle_db_exceptions
from app.core.security import hash_password
from app.models.user import User
from app.schemas.product import ProductCreate
from app.seed_data import SEED_PRODUCTS, SEED_USERS
from app.services.products_service import ProductsService

logger = logging.getLogger(__name__)

SEED_EXECUTED = "SEED EXECUTED"


class SeedService:
    """Replaces the whole catalog and user table with fixture data."""

    def __init__(self, db: AsyncSession, products_service: ProductsService):
        self.db = db
        self.products_service = products_service

    async def run_seed(self) -> str:
        await self._delete_tables()
        admin = await self._insert_users()
        await self._insert_new_products(admin)
        return SEED_EXECUTED

    async def _delete_tables(self) -> None:
        # products reference users, so they go first
        await self.products_service.delete_all_products()
        try:
            async with transaction(self.db):
                await self.db.execute(delete(User))
        except Exception as error:
            handle_db_exceptions(error, logger)

    async def _insert_users(self) -> User:
        users = []
        for seed_user in SEED_USERS:
            data = dict(seed_user)
            password = data.pop("password")
            hashed = await run_in_threadpool(hash_password, password)
            users.append(User(**data, hashed_password=hashed))

        try:
            async with transaction(self.db):
                self.db.add_all(users)
                await self.db.flush()
        except Exception as error:
            handle_db_exceptions(error, logger)

        logger.info("Seeded %d users", len(users))
        return users[0]

    async def _insert_new_products(self, user: User) -> None:
        for seed_product in SEED_PRODUCTS:
            await self.products_service.create(ProductCreate(**seed_product), user)
        logger.info("Seeded %d products", len(SEED_PRODUCTS))


async def main() -> None:
    async with get_session_maker()() as session:
        service = SeedService(session, ProductsService(session))
        result = await service.run_seed()
    logger.info("Seed finished: %s", result)
    await get_engine().dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
