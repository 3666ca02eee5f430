"""Department DTOs."""

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, Field

from hris_api.models.dto.common import PartialUpdate


class DepartmentCreate(BaseModel):
    """DTO for creating a department."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)


class DepartmentUpdate(PartialUpdate):
    """DTO for updating a department."""

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset({"name"})

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=2000)


class DepartmentResponse(BaseModel):
    """Department response DTO."""

    id: int
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        """Pydantic config."""

        from_attributes = True
