"""
Python SDK for the Craft Blocks API.
"""

from importlib import metadata as _metadata

from .async_client import AsyncCraftClient
from .client import CraftClient, FileUpload
from .errors import APIError, ConstructionError, CraftError, DecodeError, TransportError
from .resources import AsyncBlocksAPI, AsyncUploadsAPI, BlocksAPI, UploadsAPI
from .types import (
    AUTO_WIDTH,
    Block,
    BlockType,
    ContextBlock,
    ListStyle,
    PagePathElement,
    Position,
    SearchMatch,
    TextStyle,
    UploadLink,
)

__all__ = [
    "CraftClient",
    "AsyncCraftClient",
    "FileUpload",
    "BlocksAPI",
    "AsyncBlocksAPI",
    "UploadsAPI",
    "AsyncUploadsAPI",
    "AUTO_WIDTH",
    "Block",
    "BlockType",
    "ContextBlock",
    "ListStyle",
    "PagePathElement",
    "Position",
    "SearchMatch",
    "TextStyle",
    "UploadLink",
    "CraftError",
    "ConstructionError",
    "TransportError",
    "APIError",
    "DecodeError",
    "__version__",
]

try:
    __version__ = _metadata.version("craftblocks")
except _metadata.PackageNotFoundError:  # pragma: no cover - local/checkout usage
    __version__ = "0.0.0"
