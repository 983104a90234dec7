from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base for failures the error handlers translate into an ErrorResponse."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(status_code=status_code, detail=detail)


class NotFoundError(AppError):
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(AppError):
    def __init__(self, detail: str = "Conflict"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class BadRequestError(AppError):
    def __init__(self, detail: str = "Bad request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class EmployeeNotFoundError(NotFoundError):
    def __init__(self, employee_id: int):
        self.employee_id = employee_id
        super().__init__(detail=f"Employee not found with id: {employee_id}")


class DuplicateEmailError(ConflictError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(detail=f"Email already exists: {email}")
