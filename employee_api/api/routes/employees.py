from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.api.dependencies.database import get_db
from employee_api.core.config import settings
from employee_api.models.dto.employee import (
    EmployeeCreate,
    EmployeePageResponse,
    EmployeeResponse,
    EmployeeUpdate,
)
from employee_api.services import employee_service

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post("", response_model=EmployeeResponse, status_code=201)
async def create_employee(
    body: EmployeeCreate,
    db: AsyncSession = Depends(get_db),
):
    return await employee_service.create(db, body)


@router.get("", response_model=EmployeePageResponse)
async def list_employees(
    page: int = Query(0, ge=0, le=settings.max_page_number),
    size: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    db: AsyncSession = Depends(get_db),
):
    return await employee_service.get_all(db, page=page, size=size)


@router.get("/search", response_model=list[EmployeeResponse])
async def search_employees(
    name: str | None = Query(None, min_length=1, max_length=100),
    active: bool | None = Query(None),
    phone_number: str | None = Query(None, alias="phoneNumber", pattern=r"^\d{10}$"),
    db: AsyncSession = Depends(get_db),
):
    return await employee_service.search(
        db, name=name, active=active, phone_number=phone_number,
    )


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
):
    return await employee_service.get_by_id(db, employee_id)


@router.put("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: int,
    body: EmployeeUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await employee_service.update(db, employee_id, body)


@router.delete("/{employee_id}", status_code=204)
async def delete_employee(
    employee_id: int,
    db: AsyncSession = Depends(get_db),
):
    await employee_service.delete(db, employee_id)
