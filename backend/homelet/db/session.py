# homelet/db/session.py
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from homelet.core.config import settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> AsyncEngine:
    """
    SQLite ignores FOREIGN KEY / ON DELETE CASCADE unless every connection
    turns it on. Other backends are left alone.
    """
    if engine.dialect.name != "sqlite":
        return engine

    @event.listens_for(engine.sync_engine, "connect")
    def _fk_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


engine = enable_sqlite_foreign_keys(
    create_async_engine(settings.DATABASE_URL, echo=False, future=True)
)

AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# FastAPI dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
