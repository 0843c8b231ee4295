from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from dualpascal.config import settings
import logging

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine; SQLite connections get foreign key enforcement."""
    new_engine = create_async_engine(url, **kwargs)
    if new_engine.dialect.name == "sqlite":
        event.listen(new_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return new_engine


# Environment-based configurations
if settings.database_url.startswith("sqlite"):
    engine = build_engine(settings.database_url, echo=settings.debug)
elif settings.environment == "production":
    engine = build_engine(
        settings.database_url,
        pool_size=20,
        max_overflow=50,
        pool_timeout=60,
        pool_recycle=1800,
    )
else:
    engine = build_engine(
        settings.database_url,
        echo=True,  # Enable query logging in dev mode
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
    )

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_db():
    logger.debug("Opening database session...")
    async with AsyncSessionLocal() as db:
        try:
            yield db
        except Exception as e:
            logger.error(f"Database session error: {e}")
            await db.rollback()
            raise
        finally:
            try:
                await db.close()
                logger.debug("Database session closed.")
            except Exception as close_error:
                logger.warning(f"Error closing database session: {close_error}")
