"""Type definitions for API requests and responses."""

from .block import AUTO_WIDTH, Block, BlockType, ListStyle, Position, TextStyle, Width
from .envelope import BlockRef, ItemsEnvelope
from .search import ContextBlock, PagePathElement, SearchMatch
from .upload import UploadLink

__all__ = [
    # Block types
    "AUTO_WIDTH",
    "Block",
    "BlockType",
    "ListStyle",
    "Position",
    "TextStyle",
    "Width",
    # Envelope types
    "BlockRef",
    "ItemsEnvelope",
    # Search types
    "ContextBlock",
    "PagePathElement",
    "SearchMatch",
    # Upload types
    "UploadLink",
]
