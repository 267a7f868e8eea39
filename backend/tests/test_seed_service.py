import logging

from sqlalchemy import func, select

from app.models.product import Product
from app.models.user import User
from app.seed_data import SEED_PRODUCTS, SEED_USERS
from app.services import seed_service
from app.services.products_service import ProductsService
from app.services.seed_service import SEED_EXECUTED, SeedService


async def test_run_seed_replaces_catalog_and_users(db, admin_user):
    result = await SeedService(db, ProductsService(db)).run_seed()

    assert result == SEED_EXECUTED
    assert await db.scalar(select(func.count()).select_from(Product)) == len(SEED_PRODUCTS)
    emails = set((await db.execute(select(User.email))).scalars().all())
    assert emails == {user["email"] for user in SEED_USERS}


async def test_main_seeds_and_logs_result(engine, session_maker, monkeypatch, caplog):
    monkeypatch.setattr(seed_service, "get_session_maker", lambda: session_maker)
    monkeypatch.setattr(seed_service, "get_engine", lambda: engine)
    caplog.set_level(logging.INFO, logger=seed_service.__name__)

    await seed_service.main()

    assert f"Seed finished: {SEED_EXECUTED}" in caplog.messages
    async with session_maker() as fresh:
        assert await fresh.scalar(select(func.count()).select_from(Product)) == len(SEED_PRODUCTS)
        assert await fresh.scalar(select(func.count()).select_from(User)) == len(SEED_USERS)
