"""
Block endpoints.
"""

from collections.abc import Sequence
from typing import Any

from .._decode import decode_ids, decode_items, decode_model
from ..client_types import AsyncRequesterProtocol, RequesterProtocol
from ..errors import ConstructionError
from ..types.block import Block, Position
from ..types.search import SearchMatch
from ._call import PARTIAL_SUCCESS, APICall, bool_to_str

UNBOUNDED_DEPTH = -1


def _fetch_params(block_id: str, max_depth: int) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if block_id:
        params["id"] = block_id
    if max_depth != UNBOUNDED_DEPTH:
        params["maxDepth"] = str(max_depth)
    return params


def fetch_call(block_id: str, max_depth: int, fetch_metadata: bool) -> APICall:
    params = _fetch_params(block_id, max_depth)
    if fetch_metadata:
        params["fetchMetadata"] = bool_to_str(True)
    return APICall("GET", "/blocks", params=params or None)


def fetch_markdown_call(block_id: str, max_depth: int) -> APICall:
    return APICall(
        "GET",
        "/blocks",
        params=_fetch_params(block_id, max_depth) or None,
        headers={"Accept": "text/markdown"},
    )


def insert_call(
    position: Position,
    blocks: Sequence[Block] | None,
    markdown: str | None,
) -> APICall:
    if (blocks is None) == (markdown is None):
        raise ConstructionError("exactly one of blocks or markdown must be provided")
    payload: dict[str, Any] = {}
    if blocks is not None:
        payload["blocks"] = [block.to_request() for block in blocks]
    else:
        payload["markdown"] = markdown
    payload["position"] = position.to_request()
    return APICall("POST", "/blocks", json_data=payload)


def update_call(blocks: Sequence[Block]) -> APICall:
    for block in blocks:
        if not block.id:
            raise ConstructionError("every block passed to update must carry an id")
    return APICall("PUT", "/blocks", json_data={"blocks": [block.to_request() for block in blocks]})


def delete_call(block_ids: Sequence[str]) -> APICall:
    return APICall(
        "DELETE",
        "/blocks",
        json_data={"blockIds": list(block_ids)},
        ok_statuses=(200, PARTIAL_SUCCESS),
    )


def move_call(block_ids: Sequence[str], position: Position) -> APICall:
    return APICall(
        "PUT",
        "/blocks/move",
        json_data={"blockIds": list(block_ids), "position": position.to_request()},
        ok_statuses=(200, PARTIAL_SUCCESS),
    )


def search_call(
    pattern: str,
    case_sensitive: bool,
    before_block_count: int,
    after_block_count: int,
) -> APICall:
    params: dict[str, Any] = {"pattern": pattern}
    if case_sensitive:
        params["caseSensitive"] = bool_to_str(True)
    if before_block_count > 0:
        params["beforeBlockCount"] = str(before_block_count)
    if after_block_count > 0:
        params["afterBlockCount"] = str(after_block_count)
    return APICall("GET", "/blocks/search", params=params)


class BlocksAPI:
    """
    Operations on the document block tree.

    ``delete`` and ``move`` accept both 200 and 207. With 207 the server silently
    drops IDs it could not act on; compare the returned IDs with the requested ones
    to find them.
    """

    def __init__(self, requester: RequesterProtocol) -> None:
        self._requester = requester

    def _send(self, call: APICall):
        return self._requester.request(call.method, call.path, **call.as_kwargs())

    def fetch(
        self,
        block_id: str = "",
        *,
        max_depth: int = UNBOUNDED_DEPTH,
        fetch_metadata: bool = False,
    ) -> Block:
        """Fetch a block subtree. An empty ``block_id`` fetches the document root."""
        response = self._send(fetch_call(block_id, max_depth, fetch_metadata))
        return decode_model(response, Block)

    def fetch_markdown(self, block_id: str = "", *, max_depth: int = UNBOUNDED_DEPTH) -> str:
        return self._send(fetch_markdown_call(block_id, max_depth)).text

    def insert(
        self,
        position: Position,
        *,
        blocks: Sequence[Block] | None = None,
        markdown: str | None = None,
    ) -> list[Block]:
        response = self._send(insert_call(position, blocks, markdown))
        return decode_items(response, Block)

    def update(self, blocks: Sequence[Block]) -> list[Block]:
        return decode_items(self._send(update_call(blocks)), Block)

    def delete(self, block_ids: Sequence[str]) -> list[str]:
        return decode_ids(self._send(delete_call(block_ids)))

    def move(self, block_ids: Sequence[str], position: Position) -> list[str]:
        return decode_ids(self._send(move_call(block_ids, position)))

    def search(
        self,
        pattern: str,
        *,
        case_sensitive: bool = False,
        before_block_count: int = 0,
        after_block_count: int = 0,
    ) -> list[SearchMatch]:
        response = self._send(
            search_call(pattern, case_sensitive, before_block_count, after_block_count)
        )
        return decode_items(response, SearchMatch)


class AsyncBlocksAPI:
    def __init__(self, requester: AsyncRequesterProtocol) -> None:
        self._requester = requester

    async def _send(self, call: APICall):
        return await self._requester.request(call.method, call.path, **call.as_kwargs())

    async def fetch(
        self,
        block_id: str = "",
        *,
        max_depth: int = UNBOUNDED_DEPTH,
        fetch_metadata: bool = False,
    ) -> Block:
        response = await self._send(fetch_call(block_id, max_depth, fetch_metadata))
        return decode_model(response, Block)

    async def fetch_markdown(self, block_id: str = "", *, max_depth: int = UNBOUNDED_DEPTH) -> str:
        response = await self._send(fetch_markdown_call(block_id, max_depth))
        return response.text

    async def insert(
        self,
        position: Position,
        *,
        blocks: Sequence[Block] | None = None,
        markdown: str | None = None,
    ) -> list[Block]:
        response = await self._send(insert_call(position, blocks, markdown))
        return decode_items(response, Block)

    async def update(self, blocks: Sequence[Block]) -> list[Block]:
        return decode_items(await self._send(update_call(blocks)), Block)

    async def delete(self, block_ids: Sequence[str]) -> list[str]:
        return decode_ids(await self._send(delete_call(block_ids)))

    async def move(self, block_ids: Sequence[str], position: Position) -> list[str]:
        return decode_ids(await self._send(move_call(block_ids, position)))

    async def search(
        self,
        pattern: str,
        *,
        case_sensitive: bool = False,
        before_block_count: int = 0,
        after_block_count: int = 0,
    ) -> list[SearchMatch]:
        response = await self._send(
            search_call(pattern, case_sensitive, before_block_count, after_block_count)
        )
        return decode_items(response, SearchMatch)
