import os

os.environ.setdefault("ACCESS_SECRET_KEY", "test-access-secret-key")
os.environ.setdefault("REFRESH_SECRET_KEY", "test-refresh-secret-key")
os.environ.setdefault("DEBUG", "false")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession
from tokengate.core.config import Settings
from tokengate.core import database
from tokengate.core.database import build_engine, create_tables, get_db
from tokengate.core.init_db import init_db
from tokengate.main import app
from tokengate.repositories.token_repo import InMemoryTokenRepository
from tokengate.services.token_service import TokenService

# In-memory SQLite for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ACCESS_SECRET_KEY="unit-access-secret",
        REFRESH_SECRET_KEY="unit-refresh-secret",
    )

@pytest.fixture
def token_repo():
    return InMemoryTokenRepository()

@pytest.fixture
def token_service(settings, token_repo):
    return TokenService(settings, token_repo)


# Fresh in-memory database per test, with the static catalog seeded
@pytest.fixture
async def db_engine():
    engine = build_engine(TEST_DATABASE_URL)
    await create_tables(engine)
    async with AsyncSession(engine, expire_on_commit=False) as session:
        await init_db(session)
    yield engine
    await engine.dispose()

# Database session for each test, with transaction rollback for isolation
@pytest.fixture
async def db_session(db_engine):
    connection = await db_engine.connect()
    transaction = await connection.begin()

    session = AsyncSession(bind=connection, expire_on_commit=False)

    yield session

    await session.close()
    await transaction.rollback()
    await connection.close()


@pytest.fixture
def setup_app_dependencies(db_session):

    async def override_get_db():
        yield db_session
    app.dependency_overrides[get_db] = override_get_db

    # Each test gets its own active token set
    original_token_repo = app.state.token_repo
    app.state.token_repo = InMemoryTokenRepository()

    yield app.state.token_repo

    app.dependency_overrides.clear()
    app.state.token_repo = original_token_repo


@pytest.fixture
async def client(setup_app_dependencies):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def app_token_repo(setup_app_dependencies):
    return setup_app_dependencies


# The application's own engine and get_db, reset to a fresh in-memory database per test
@pytest.fixture
async def live_database(monkeypatch):
    monkeypatch.setattr(database, "_engine", None)
    monkeypatch.setattr(database, "_async_session_local", None)
    await create_tables(database.get_engine())
    yield database.get_engine()
    await database.get_engine().dispose()


@pytest.fixture
async def live_client(live_database, monkeypatch):
    monkeypatch.setattr(app.state, "token_repo", InMemoryTokenRepository())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
