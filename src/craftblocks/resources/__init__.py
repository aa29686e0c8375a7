from .blocks import AsyncBlocksAPI, BlocksAPI
from .uploads import AsyncUploadsAPI, UploadsAPI

__all__ = ["AsyncBlocksAPI", "AsyncUploadsAPI", "BlocksAPI", "UploadsAPI"]
