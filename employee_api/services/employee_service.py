import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.core.exceptions import (
    BadRequestError,
    DuplicateEmailError,
    EmployeeNotFoundError,
)
from employee_api.core.security import hash_password
from employee_api.mappers.employee import employee_to_response, employees_to_page
from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeePageResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from employee_api.models.orm.employee import Employee
from employee_api.repositories import employee_repo

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


async def _get_or_404(db: AsyncSession, employee_id: int) -> Employee:
    employee = await employee_repo.get_by_id(db, employee_id)
    if not employee:
        raise EmployeeNotFoundError(employee_id)
    return employee


async def create(db: AsyncSession, body: EmployeeCreate) -> EmployeeResponse:
    if await employee_repo.exists_by_email(db, body.email):
        raise DuplicateEmailError(body.email)

    now = _utcnow()
    employee = Employee(
        full_name=body.full_name,
        email=body.email,
        date_of_birth=body.date_of_birth,
        gender=body.gender,
        phone_number=body.phone_number,
        active=body.active if body.active is not None else True,
        hashed_password=hash_password(body.password),
        created_at=now,
        updated_at=now,
    )
    try:
        employee = await employee_repo.create(db, employee)
    except IntegrityError as e:
        # Unique index on email caught a concurrent insert
        raise DuplicateEmailError(body.email) from e

    logger.info("Created employee %s", employee.id)
    return employee_to_response(employee)


async def get_all(
    db: AsyncSession, *, page: int = 0, size: int = 4,
) -> EmployeePageResponse:
    employees, total = await employee_repo.get_page(db, page=page, size=size)
    return employees_to_page(employees, page=page, size=size, total=total)


async def get_by_id(db: AsyncSession, employee_id: int) -> EmployeeResponse:
    employee = await _get_or_404(db, employee_id)
    return employee_to_response(employee)


async def update(
    db: AsyncSession, employee_id: int, body: EmployeeUpdate,
) -> EmployeeResponse:
    """Apply the fields present in ``body`` to the stored employee.

    Email is not part of the update surface, so uniqueness is not rechecked.
    """
    employee = await _get_or_404(db, employee_id)

    fields = body.changes()
    password = fields.pop("password", None)
    if password is not None:
        fields["hashed_password"] = hash_password(password)

    now = _utcnow()
    if employee.updated_at is not None and now <= employee.updated_at:
        now = employee.updated_at + timedelta(microseconds=1)
    fields["updated_at"] = now

    employee = await employee_repo.update(db, employee, **fields)
    logger.info(
        "Updated employee %s", employee.id,
        extra={"fields": sorted(k for k in fields if k != "updated_at")},
    )
    return employee_to_response(employee)


async def delete(db: AsyncSession, employee_id: int) -> None:
    employee = await _get_or_404(db, employee_id)
    await employee_repo.delete(db, employee)
    logger.info("Deleted employee %s", employee_id)


async def search(
    db: AsyncSession,
    *,
    name: str | None = None,
    active: bool | None = None,
    phone_number: str | None = None,
) -> list[EmployeeResponse]:
    """Look employees up by exactly one repository filter."""
    given = [v for v in (name, active, phone_number) if v is not None]
    if len(given) != 1:
        raise BadRequestError("Exactly one of name, active, phoneNumber is required")

    if name is not None:
        employees = await employee_repo.search_by_full_name(db, name)
    elif active is not None:
        employees = await employee_repo.get_by_active(db, active)
    else:
        employees = await employee_repo.get_by_phone_number(db, phone_number)
    return [employee_to_response(e) for e in employees]
