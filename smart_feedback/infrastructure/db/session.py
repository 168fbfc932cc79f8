from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from smart_feedback.core.config import settings
from smart_feedback.infrastructure.db.base import Base

engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=True,
)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

async def get_session() -> AsyncSession:
    async with SessionLocal() as session:
        yield session

async def create_schema() -> None:
    # development shortcut; alembic owns the schema everywhere else
    from smart_feedback.domain.entities import feedback, report  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
