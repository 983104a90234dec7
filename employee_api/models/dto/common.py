from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for payloads that travel as camelCase JSON."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class PaginatedResponse(CamelModel, Generic[T]):
    data: list[T]
    page_number: int
    page_size: int
    total_records: int
    total_pages: int
    has_next: bool
    has_previous: bool


class ErrorResponse(BaseModel):
    message: str | None = None
    status: int
    timestamp: datetime
    errors: list[str] | None = None
