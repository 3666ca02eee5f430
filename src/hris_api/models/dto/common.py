"""Shared request/response building blocks."""

from typing import Any, ClassVar

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    """Base for update requests where only explicitly sent fields are applied.

    Omitted fields are left untouched. An explicit null clears a nullable
    column; for columns listed in ``non_nullable_fields`` it is rejected.
    """

    non_nullable_fields: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_fields(self) -> "PartialUpdate":
        """Reject explicit nulls for columns that cannot be cleared."""
        for name in sorted(self.model_fields_set & self.non_nullable_fields):
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields present in the request."""
        return self.model_dump(exclude_unset=True)


class DeleteResponse(BaseModel):
    """Outcome of a delete operation."""

    success: bool
