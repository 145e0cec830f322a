import asyncio
import contextlib
import weakref

from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from tokengate.core.config import get_settings



# ==================================================================
# DECLARATIVE BASE
# ==================================================================
class Base(DeclarativeBase): pass


# ==================================================================
# DATABASE ENGINE & SESSION FACTORY
# ==================================================================

_engine: AsyncEngine | None = None
_async_session_local: async_sessionmaker[AsyncSession] | None = None


def build_engine(url: str) -> AsyncEngine:
    # An in-memory SQLite database only exists for the lifetime of its connection,
    # so every session has to share a single one.
    if url.startswith("sqlite") and ":memory:" in url:
        return create_async_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url)


def get_engine() -> AsyncEngine:
    global _engine
    if _engine is None:
        _engine = build_engine(get_settings().DATABASE_URL)
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    global _async_session_local
    if _async_session_local is None:
        _async_session_local = async_sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _async_session_local


def AsyncSessionLocal() -> AsyncSession:
    return get_session_factory()()


_session_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = weakref.WeakKeyDictionary()


def session_lock() -> contextlib.AbstractAsyncContextManager:
    """
    Lock serializing sessions on a single-connection (StaticPool) engine.

    All sessions of such an engine share one connection and therefore one
    transaction, so a rollback in one request would undo another request's
    flushed rows. Engines with a real pool need no lock.
    """
    if not isinstance(get_engine().pool, StaticPool):
        return contextlib.nullcontext()
    loop = asyncio.get_running_loop()
    lock = _session_locks.get(loop)
    if lock is None:
        lock = _session_locks[loop] = asyncio.Lock()
    return lock


async def create_tables(engine: AsyncEngine) -> None:
    # Import models so they are registered on Base.metadata.
    import tokengate.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# The Dependency
async def get_db():
    session_factory = get_session_factory()
    async with session_lock():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()
