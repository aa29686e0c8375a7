"""
High-level synchronous client for the Craft Blocks API.
"""

from collections.abc import Collection, Mapping
from typing import Any

import httpx

from ._constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from ._decode import raise_for_status
from .errors import ConstructionError, TransportError
from .uploads import FileUpload as FileUpload
from .resources.blocks import BlocksAPI as BlocksAPI
from .resources.uploads import UploadsAPI as UploadsAPI


def default_headers(user_agent: str | None, extra: Mapping[str, str] | None) -> dict[str, str]:
    headers = {
        "Accept": "application/json",
        "User-Agent": user_agent or DEFAULT_USER_AGENT,
    }
    if extra:
        headers.update(extra)
    return headers


def explicit_headers(user_agent: str | None, extra: Mapping[str, str] | None) -> dict[str, str]:
    """Headers the caller asked for directly; these win over an injected client's own."""
    headers: dict[str, str] = {}
    if user_agent:
        headers["User-Agent"] = user_agent
    if extra:
        headers.update(extra)
    return headers


class CraftClient:
    """
    Synchronous HTTP client for the Craft Blocks API.

    The client keeps no state between calls beyond the pooled ``httpx.Client``, so one
    instance can be shared across threads.

    Example::

        from craftblocks import CraftClient, Position

        with CraftClient("https://connect.craft.do/links/<link>/api/v1") as client:
            root = client.blocks.fetch(max_depth=0)
            client.blocks.insert(Position.end(root.id), markdown="Hello")
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
        user_agent: str | None = None,
        headers: Mapping[str, str] | None = None,
        client: httpx.Client | None = None,
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
            self._client = httpx.Client(base_url=base_url, headers=merged_headers, timeout=timeout)
            self._owns_client = True
            self._base_url = base_url

        self._timeout = timeout

        self.blocks = BlocksAPI(self)
        self.uploads = UploadsAPI(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "CraftClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: D401 - standard context manager protocol
        self.close()

    # ------------------------------------------------------------------
    # HTTP plumbing shared by resource clients
    # ------------------------------------------------------------------
    def request(
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
        return self._send(request, ok_statuses)

    def send_external(
        self,
        method: str,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str],
        ok_statuses: Collection[int] = (200,),
    ) -> httpx.Response:
        """Send to an absolute URL outside the API, without the client's default headers."""
        try:
            request = httpx.Request(method, url, content=content, headers=headers)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise ConstructionError(f"creating request: {exc}") from exc
        return self._send(request, ok_statuses)

    def _send(self, request: httpx.Request, ok_statuses: Collection[int]) -> httpx.Response:
        try:
            response = self._client.send(request)
        except httpx.HTTPError as exc:
            raise TransportError(f"executing request: {exc}") from exc
        return self._handle_response(response, ok_statuses=ok_statuses)

    @staticmethod
    def _handle_response(response: httpx.Response, *, ok_statuses: Collection[int]) -> httpx.Response:
        return raise_for_status(response, ok_statuses)
