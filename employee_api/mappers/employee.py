import math

from employee_api.models.dto.employee import EmployeePageResponse, EmployeeResponse
from employee_api.models.orm.employee import Employee


def employee_to_response(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse.model_validate(employee)


def employees_to_page(
    employees: list[Employee], *, page: int, size: int, total: int,
) -> EmployeePageResponse:
    total_pages = math.ceil(total / size) if size else 0
    return EmployeePageResponse(
        data=[employee_to_response(e) for e in employees],
        page_number=page,
        page_size=size,
        total_records=total,
        total_pages=total_pages,
        has_next=page < total_pages - 1,
        has_previous=page > 0,
    )
