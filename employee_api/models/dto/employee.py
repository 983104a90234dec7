import re
from datetime import date, datetime
from typing import Any

from pydantic import EmailStr, Field, PastDate, field_validator

from employee_api.models.dto.common import CamelModel, PaginatedResponse
from employee_api.models.orm.employee import Gender

PHONE_NUMBER_RE = re.compile(r"\d{10}", re.ASCII)
EMAIL_MAX_LENGTH = 100

_GENDER_CHOICES = ", ".join(g.value for g in Gender)


def _not_blank(v: Any) -> Any:
    if isinstance(v, str) and not v.strip():
        raise ValueError("must not be blank")
    return v


def _check_gender(v: Any) -> Any:
    if v is None or isinstance(v, Gender):
        return v
    if not isinstance(v, str) or v not in Gender.__members__:
        raise ValueError(f"must be one of {_GENDER_CHOICES}")
    return v


def _check_phone_number(v: str | None) -> str | None:
    if v is not None and not PHONE_NUMBER_RE.fullmatch(v):
        raise ValueError("must be exactly 10 digits")
    return v


class EmployeeCreate(CamelModel):
    full_name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    date_of_birth: PastDate
    gender: Gender
    phone_number: str
    active: bool | None = None
    password: str = Field(min_length=6)

    @field_validator("full_name", "email", "phone_number", "password", mode="before")
    @classmethod
    def validate_not_blank(cls, v: Any) -> Any:
        return _not_blank(v)

    @field_validator("gender", mode="before")
    @classmethod
    def validate_gender(cls, v: Any) -> Any:
        return _check_gender(v)

    @field_validator("email")
    @classmethod
    def validate_email_length(cls, v: str) -> str:
        if len(v) > EMAIL_MAX_LENGTH:
            raise ValueError(f"must be at most {EMAIL_MAX_LENGTH} characters")
        return v

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: str) -> str:
        return _check_phone_number(v)


class EmployeeUpdate(CamelModel):
    """Partial update: only fields present in the payload are applied.

    Email is immutable after creation and is not part of this payload; an
    ``email`` key sent by a client is ignored.
    """

    full_name: str | None = Field(default=None, min_length=2, max_length=100)
    date_of_birth: PastDate | None = None
    gender: Gender | None = None
    phone_number: str | None = None
    active: bool | None = None
    password: str | None = Field(default=None, min_length=6)

    @field_validator("full_name", "phone_number", "password", mode="before")
    @classmethod
    def validate_not_blank(cls, v: Any) -> Any:
        return _not_blank(v)

    @field_validator("gender", mode="before")
    @classmethod
    def validate_gender(cls, v: Any) -> Any:
        return _check_gender(v)

    @field_validator("phone_number")
    @classmethod
    def validate_phone_number(cls, v: str | None) -> str | None:
        return _check_phone_number(v)

    def changes(self) -> dict[str, Any]:
        """Fields the client sent with a non-null value, keyed by attribute name."""
        return {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name in self.model_fields_set and getattr(self, name) is not None
        }


class EmployeeResponse(CamelModel):
    id: int
    full_name: str
    email: str
    date_of_birth: date
    gender: Gender
    phone_number: str
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


EmployeePageResponse = PaginatedResponse[EmployeeResponse]
