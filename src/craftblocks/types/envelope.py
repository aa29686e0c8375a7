"""Response envelope shared by list-returning endpoints."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ItemsEnvelope(BaseModel):
    """Outer ``{"items": [...]}`` wrapper. Elements are decoded separately per operation."""

    items: list[Any] = Field(..., description="Raw items, element shape depends on the endpoint")

    @field_validator("items", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # "items": null means no results; a missing key is still an error
        return [] if value is None else value


class BlockRef(BaseModel):
    """Item returned by delete and move."""

    id: str = Field(..., description="Block ID")
