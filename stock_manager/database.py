from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import declarative_base, sessionmaker
from .config import settings

# Async engine shared by the whole application
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

AsyncSessionLocal = sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base class for the models
Base = declarative_base()


async def get_db():
    """Dependency yielding a database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
