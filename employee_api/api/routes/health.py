import time

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api import __version__
from employee_api.api.dependencies.database import get_db

router = APIRouter(tags=["health"])


async def _check_database(db: AsyncSession) -> dict:
    try:
        start = time.monotonic()
        await db.execute(text("SELECT 1"))
        latency_ms = round((time.monotonic() - start) * 1000)
        return {"status": "up", "latency_ms": latency_ms}
    except Exception as e:
        return {"status": "down", "error": str(e)}


@router.get("/health")
async def health_check(db: AsyncSession = Depends(get_db)):
    database = await _check_database(db)
    return {
        "status": "healthy" if database["status"] == "up" else "unhealthy",
        "version": __version__,
        "checks": {"database": database},
    }
