"""Type definitions for document blocks and insertion targets."""

from collections.abc import Iterator
from enum import StrEnum
from typing import Any, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)

AUTO_WIDTH = "auto"

# Either a pixel count or the literal "auto"; both shapes round-trip unchanged.
Width = int | Literal["auto"]

# Populated by the server, dropped from every request payload.
SERVER_ONLY_FIELDS = ("mime_type", "file_size", "mimeType", "fileSize")


class BlockType(StrEnum):
    TEXT = "text"
    PAGE = "page"
    IMAGE = "image"
    VIDEO = "video"
    FILE = "file"
    URL = "url"
    CODE = "code"
    TABLE = "table"
    LINE = "line"


class TextStyle(StrEnum):
    PAGE = "page"
    CARD = "card"
    H1 = "h1"
    H2 = "h2"
    H3 = "h3"
    BODY = "body"
    TITLE = "title"
    SUBTITLE = "subtitle"
    CAPTION = "caption"


class ListStyle(StrEnum):
    NONE = "none"
    BULLET = "bullet"
    NUMBERED = "numbered"
    TODO = "todo"
    TOGGLE = "toggle"


class Block(BaseModel):
    """
    A node of the remote document tree.

    ``id`` is left unset on blocks built locally and is assigned by the server on
    insertion. ``content`` holds the ordered children of container blocks.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = Field(None, description="Server-assigned block ID")
    type: str = Field(BlockType.TEXT, description="Block type, see BlockType")
    text_style: str | None = Field(None, alias="textStyle", description="Presentation role, see TextStyle")
    markdown: str | None = Field(None, description="Markdown content of the block")
    content: list["Block"] | None = Field(None, description="Ordered child blocks")
    indentation_level: int | None = Field(None, alias="indentationLevel", ge=0)
    list_style: str | None = Field(None, alias="listStyle", description="List style, see ListStyle")
    font: str | None = None
    color: str | None = None
    url: str | None = Field(None, description="Source URL for image, video and file blocks")
    alt_text: str | None = Field(None, alias="altText")
    width: Width | None = Field(None, description="Pixel width or 'auto'")
    height: int | None = None
    file_name: str | None = Field(None, alias="fileName")
    mime_type: str | None = Field(None, alias="mimeType", description="Read-only, set by the server")
    file_size: int | None = Field(None, alias="fileSize", description="Read-only, size in bytes")

    @model_serializer(mode="wrap")
    def _drop_server_fields(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        if info.context and info.context.get("request"):
            for key in SERVER_ONLY_FIELDS:
                data.pop(key, None)
        return data

    @classmethod
    def text(cls, markdown: str, **kwargs: Any) -> "Block":
        return cls(type=BlockType.TEXT, markdown=markdown, **kwargs)

    @property
    def is_auto_width(self) -> bool:
        return self.width == AUTO_WIDTH

    def to_request(self) -> dict[str, Any]:
        """Serialize for a request body: camelCase keys, unset and server-only fields omitted."""
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, context={"request": True}
        )

    def walk(self) -> Iterator["Block"]:
        """Yield this block and every descendant, depth-first in document order."""
        yield self
        for child in self.content or ():
            yield from child.walk()

    def count(self) -> int:
        return sum(1 for _ in self.walk())


class Position(BaseModel):
    """
    Insertion or move target.

    ``start``/``end`` address a page, ``before``/``after`` address a sibling block.
    Which ID goes with which form is up to the caller; it is not checked locally.
    """

    model_config = ConfigDict(populate_by_name=True)

    position: Literal["start", "end", "before", "after"]
    page_id: str | None = Field(None, alias="pageId")
    sibling_id: str | None = Field(None, alias="siblingId")

    @classmethod
    def start(cls, page_id: str) -> "Position":
        return cls(position="start", page_id=page_id)

    @classmethod
    def end(cls, page_id: str) -> "Position":
        return cls(position="end", page_id=page_id)

    @classmethod
    def before(cls, sibling_id: str) -> "Position":
        return cls(position="before", sibling_id=sibling_id)

    @classmethod
    def after(cls, sibling_id: str) -> "Position":
        return cls(position="after", sibling_id=sibling_id)

    def to_request(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
