from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.database import async_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request: commit when the handler succeeds, else roll back."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
