import json
from typing import Any

import httpx
import pytest
import pytest_asyncio

from craftblocks.async_client import AsyncCraftClient
from craftblocks.client import FileUpload
from craftblocks.errors import APIError, ConstructionError, TransportError
from craftblocks.types import Block, Position, UploadLink

BASE_URL = "https://craft.test/api/v1"


class Recorder:
    def __init__(self) -> None:
        self.responses: list[Any] = []
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if callable(response):
            return response(request)
        return response

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_response(status: int, payload: Any) -> httpx.Response:
    return httpx.Response(status, json=payload)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest_asyncio.fixture
async def async_client(recorder: Recorder) -> AsyncCraftClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    client = AsyncCraftClient(BASE_URL, client=http)
    try:
        yield client
    finally:
        await client.aclose()
        await http.aclose()


@pytest.mark.asyncio
async def test_async_fetch_then_insert(async_client: AsyncCraftClient, recorder: Recorder) -> None:
    recorder.responses.append(make_response(200, {"id": "0", "type": "page", "content": []}))
    recorder.responses.append(
        make_response(200, {"items": [{"id": "n1", "type": "text", "markdown": "Hello"}]})
    )

    root = await async_client.blocks.fetch(max_depth=0)
    inserted = await async_client.blocks.insert(Position.end(root.id), markdown="Hello")

    fetch_request, insert_request = recorder.requests
    assert dict(fetch_request.url.params) == {"maxDepth": "0"}
    assert json.loads(insert_request.content) == {
        "markdown": "Hello",
        "position": {"position": "end", "pageId": "0"},
    }
    assert inserted[0].id == "n1"
    assert inserted[0].markdown == "Hello"


@pytest.mark.asyncio
async def test_async_fetch_markdown(async_client: AsyncCraftClient, recorder: Recorder) -> None:
    recorder.responses.append(httpx.Response(200, text="# Root"))

    assert await async_client.blocks.fetch_markdown() == "# Root"
    assert recorder.last.headers["accept"] == "text/markdown"
    assert recorder.last.url.query == b""


@pytest.mark.asyncio
async def test_async_update(async_client: AsyncCraftClient, recorder: Recorder) -> None:
    recorder.responses.append(make_response(200, {"items": [{"id": "b1", "markdown": "new"}]}))

    updated = await async_client.blocks.update([Block(id="b1", markdown="new")])

    assert updated[0].id == "b1"
    with pytest.raises(ConstructionError):
        await async_client.blocks.update([Block.text("no id")])


@pytest.mark.asyncio
async def test_async_delete_and_move_accept_207(
    async_client: AsyncCraftClient, recorder: Recorder
) -> None:
    recorder.responses.append(make_response(207, {"items": []}))
    recorder.responses.append(make_response(207, {"items": [{"id": "a"}]}))

    assert await async_client.blocks.delete(["nonexistent"]) == []
    assert await async_client.blocks.move(["a", "b"], Position.before("s")) == ["a"]


@pytest.mark.asyncio
async def test_async_search(async_client: AsyncCraftClient, recorder: Recorder) -> None:
    recorder.responses.append(
        make_response(200, {"items": [{"blockId": "m", "markdown": "task", "afterBlocks": [{"blockId": "n"}]}]})
    )

    matches = await async_client.blocks.search("task", after_block_count=1)

    assert dict(recorder.last.url.params) == {"pattern": "task", "afterBlockCount": "1"}
    assert matches[0].after_blocks[0].block_id == "n"
    assert matches[0].page_block_path == []


@pytest.mark.asyncio
async def test_async_upload_flow(async_client: AsyncCraftClient, recorder: Recorder) -> None:
    recorder.responses.append(make_response(200, {"uploadUrl": "https://storage.test/u", "rawUrl": "https://storage.test/r"}))
    recorder.responses.append(httpx.Response(201))

    link = await async_client.uploads.generate_link("clip.mp4", mime_type="video/mp4")
    raw_url = await async_client.uploads.put(
        link, FileUpload(filename="clip.mp4", content=b"\x00\x01"), mime_type="video/mp4"
    )

    assert isinstance(link, UploadLink)
    assert recorder.last.url.host == "storage.test"
    assert recorder.last.headers["content-type"] == "video/mp4"
    assert raw_url == "https://storage.test/r"


@pytest.mark.asyncio
async def test_async_status_error(async_client: AsyncCraftClient, recorder: Recorder) -> None:
    recorder.responses.append(httpx.Response(503, text="maintenance"))

    with pytest.raises(APIError) as ctx:
        await async_client.blocks.search("x")
    assert ctx.value.status_code == 503
    assert ctx.value.body == "maintenance"


@pytest.mark.asyncio
async def test_async_transport_error(async_client: AsyncCraftClient, recorder: Recorder) -> None:
    def timeout(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    recorder.responses.append(timeout)

    with pytest.raises(TransportError):
        await async_client.blocks.fetch()


@pytest.mark.asyncio
async def test_async_injected_client_keeps_its_own_headers() -> None:
    http = httpx.AsyncClient(headers={"User-Agent": "mine/1"})
    async with AsyncCraftClient(BASE_URL, client=http):
        assert http.headers["user-agent"] == "mine/1"
    await http.aclose()
