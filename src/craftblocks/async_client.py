"""
Asynchronous client for the Craft Blocks API.
"""

from collections.abc import Collection, Mapping
from typing import Any

import httpx

from ._constants import DEFAULT_TIMEOUT
from ._decode import raise_for_status
from .client import default_headers, explicit_headers
from .errors import ConstructionError, TransportError
from .resources.blocks import AsyncBlocksAPI as AsyncBlocksAPI
from .resources.uploads import AsyncUploadsAPI as AsyncUploadsAPI


class AsyncCraftClient:
    """
    ``asyncio`` counterpart of :class:`craftblocks.CraftClient`.

    Example::

        async with AsyncCraftClient(base_url) as client:
            root = await client.blocks.fetch(max_depth=0)
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        headers: Mapping[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not base_url:
            raise ConstructionError("base_url is required")

        base_url = base_url.rstrip("/")
        merged_headers = default_headers(user_agent, headers)

        if client is not None:
            self._client = client
            self._owns_client = False
            if client.base_url == httpx.URL():
                client.base_url = httpx.URL(base_url)
            for name, value in merged_headers.items():
                if name not in client.headers:
                    client.headers[name] = value
            client.headers.update(explicit_headers(user_agent, headers))
            self._base_url = str(client.base_url).rstrip("/") or base_url
        else:
            self._client = httpx.AsyncClient(base_url=base_url, headers=merged_headers, timeout=timeout)
            self._owns_client = True
            self._base_url = base_url

        self._timeout = timeout

        self.blocks = AsyncBlocksAPI(self)
        self.uploads = AsyncUploadsAPI(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncCraftClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_data: Any = None,
        headers: Mapping[str, str] | None = None,
        ok_statuses: Collection[int] = (200,),
    ) -> httpx.Response:
        try:
            request = self._client.build_request(
                method=method,
                url=path,
                params=params,
                json=json_data,
                headers=headers,
                timeout=self._timeout,
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise ConstructionError(f"creating request: {exc}") from exc
        return await self._send(request, ok_statuses)

    async def send_external(
        self,
        method: str,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str],
        ok_statuses: Collection[int] = (200,),
    ) -> httpx.Response:
        try:
            request = httpx.Request(method, url, content=content, headers=headers)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise ConstructionError(f"creating request: {exc}") from exc
        return await self._send(request, ok_statuses)

    async def _send(self, request: httpx.Request, ok_statuses: Collection[int]) -> httpx.Response:
        try:
            response = await self._client.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(f"executing request: {exc}") from exc
        return self._handle_response(response, ok_statuses=ok_statuses)

    @staticmethod
    def _handle_response(response: httpx.Response, *, ok_statuses: Collection[int]) -> httpx.Response:
        return raise_for_status(response, ok_statuses)
