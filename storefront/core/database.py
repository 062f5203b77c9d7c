"""
Database configuration and session management

The default in-memory SQLite URL keeps every session on one shared connection
(StaticPool), otherwise each new connection would see an empty database.
"""
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from storefront.core.config import settings

Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine with a pool suited to the backend."""
    if database_url.startswith("sqlite"):
        pool_config = {
            "connect_args": {"check_same_thread": False},
        }
        if ":memory:" in database_url:
            pool_config["poolclass"] = StaticPool
    elif settings.ENVIRONMENT == "production":
        pool_config = {
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,
        }
    else:
        pool_config = {
            "pool_size": 2,
            "max_overflow": 5,
            "pool_pre_ping": True,
        }

    return create_async_engine(database_url, echo=echo, future=True, **pool_config)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

AsyncSessionLocal = build_sessionmaker(engine)


async def init_db(bind: AsyncEngine = None) -> None:
    """Create all tables that do not exist yet."""
    # Register every model on Base.metadata before create_all.
    import storefront.models  # noqa: F401

    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncSession:
    """Dependency for getting async database sessions"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


@asynccontextmanager
async def get_db_session():
    """
    Context manager for database sessions outside FastAPI request context.

    Use this in startup hooks and CLI scripts:
        async with get_db_session() as db:
            await seed_catalog(db)
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
