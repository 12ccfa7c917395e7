from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from media_gateway.core.config import DATABASE_URL as RAW_DATABASE_URL, DB_MAX_OVERFLOW, DB_POOL_SIZE


def build_async_url(url: str) -> str:
    """Point a plain postgres:// connection string at the asyncpg driver."""
    for prefix in ("postgres://", "postgresql://", "postgresql+psycopg2://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix):]
    return url


def build_sync_url(url: str) -> str:
    """Same connection string for the psycopg2 driver (migrations)."""
    return build_async_url(url).replace("postgresql+asyncpg://", "postgresql+psycopg2://", 1)


DATABASE_URL = build_async_url(RAW_DATABASE_URL)
engine = create_async_engine(
    DATABASE_URL,
    echo=False,
    pool_pre_ping=True,
    pool_size=DB_POOL_SIZE,
    max_overflow=DB_MAX_OVERFLOW,
)
AsyncSessionLocal = async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
