"""Type definitions for search results."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PagePathElement(BaseModel):
    """One ancestor page on the path from the document root to a match."""

    id: str = Field(..., description="Page block ID")
    content: str = Field("", description="Page title")


class ContextBlock(BaseModel):
    """A block surrounding a match, as a flat copy."""

    model_config = ConfigDict(populate_by_name=True)

    block_id: str = Field(..., alias="blockId")
    markdown: str = ""


class SearchMatch(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    block_id: str = Field(..., alias="blockId", description="ID of the matched block")
    markdown: str = Field("", description="Matched markdown")
    page_block_path: list[PagePathElement] = Field(
        default_factory=list, alias="pageBlockPath", description="Ancestor pages, root first"
    )
    before_blocks: list[ContextBlock] = Field(
        default_factory=list, alias="beforeBlocks", description="Blocks preceding the match"
    )
    after_blocks: list[ContextBlock] = Field(
        default_factory=list, alias="afterBlocks", description="Blocks following the match"
    )

    @field_validator("page_block_path", "before_blocks", "after_blocks", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value
