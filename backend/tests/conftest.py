"""
Shared fixtures: one SQLite database file per test (foreign keys on),
a session, seeded users and an ASGI client wired to the same database.
"""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

import app.models  # noqa: F401
from app.api.v1.files import get_files_service
from app.core.database import Base, get_db
from app.core.security import TokenIssuer, get_token_issuer, hash_password
from app.models.user import User
from app.services.files_service import FilesService

PASSWORD = "Abc123"


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def token_issuer():
    return TokenIssuer("test-secret", expire_minutes=60)


async def _make_user(db, email, roles, is_active=True):
    user = User(
        email=email,
        full_name=email.split("@")[0].title(),
        hashed_password=hash_password(PASSWORD),
        roles=roles,
        is_active=is_active,
    )
    db.add(user)
    await db.commit()
    return user


@pytest.fixture
async def admin_user(db):
    return await _make_user(db, "admin@google.com", ["admin"])


@pytest.fixture
async def plain_user(db):
    return await _make_user(db, "user@google.com", ["user"])


@pytest.fixture
async def inactive_admin(db):
    return await _make_user(db, "inactive@google.com", ["admin"], is_active=False)


@pytest.fixture
def auth_headers(token_issuer):
    def _headers(user):
        return {"Authorization": f"Bearer {token_issuer.issue(user.id)}"}
    return _headers


@pytest.fixture
def files_service(tmp_path):
    return FilesService(str(tmp_path / "static"), "http://test/api")


@pytest.fixture
async def client(session_maker, token_issuer, files_service):
    from app.main import app

    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer
    app.dependency_overrides[get_files_service] = lambda: files_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()
