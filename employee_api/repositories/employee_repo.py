from sqlalchemy import exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.orm.employee import Employee


def _contains_pattern(q: str) -> str:
    escaped = q.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


async def get_by_id(db: AsyncSession, employee_id: int) -> Employee | None:
    return await db.get(Employee, employee_id)


async def get_by_email(db: AsyncSession, email: str) -> Employee | None:
    result = await db.execute(select(Employee).where(Employee.email == email))
    return result.scalar_one_or_none()


async def exists_by_email(db: AsyncSession, email: str) -> bool:
    result = await db.execute(select(exists().where(Employee.email == email)))
    return bool(result.scalar())


async def get_by_phone_number(db: AsyncSession, phone_number: str) -> list[Employee]:
    result = await db.execute(
        select(Employee)
        .where(Employee.phone_number == phone_number)
        .order_by(Employee.id.asc())
    )
    return list(result.scalars().all())


async def get_by_active(db: AsyncSession, active: bool) -> list[Employee]:
    result = await db.execute(
        select(Employee).where(Employee.active.is_(active)).order_by(Employee.id.asc())
    )
    return list(result.scalars().all())


async def search_by_full_name(db: AsyncSession, q: str) -> list[Employee]:
    """Case-insensitive substring match on full name."""
    result = await db.execute(
        select(Employee)
        .where(Employee.full_name.ilike(_contains_pattern(q), escape="\\"))
        .order_by(Employee.id.asc())
    )
    return list(result.scalars().all())


async def get_page(
    db: AsyncSession, *, page: int = 0, size: int = 4,
) -> tuple[list[Employee], int]:
    """Return one zero-indexed page ordered by id, plus the total row count."""
    count_result = await db.execute(select(func.count()).select_from(Employee))
    total = count_result.scalar() or 0

    result = await db.execute(
        select(Employee).order_by(Employee.id.asc()).offset(page * size).limit(size)
    )
    return list(result.scalars().all()), total


async def create(db: AsyncSession, employee: Employee) -> Employee:
    db.add(employee)
    await db.flush()
    await db.refresh(employee)
    return employee


async def update(db: AsyncSession, employee: Employee, **fields) -> Employee:
    for key, value in fields.items():
        setattr(employee, key, value)
    await db.flush()
    await db.refresh(employee)
    return employee


async def delete(db: AsyncSession, employee: Employee) -> None:
    await db.delete(employee)
    await db.flush()
