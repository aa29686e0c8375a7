"""
Common typing helpers used by resource modules to avoid circular imports.
"""

from collections.abc import Collection, Mapping
from typing import Any, Protocol

import httpx


class RequesterProtocol(Protocol):
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
        ...

    def send_external(
        self,
        method: str,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str],
        ok_statuses: Collection[int] = (200,),
    ) -> httpx.Response:
        ...


class AsyncRequesterProtocol(Protocol):
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
        ...

    async def send_external(
        self,
        method: str,
        url: str,
        *,
        content: bytes,
        headers: Mapping[str, str],
        ok_statuses: Collection[int] = (200,),
    ) -> httpx.Response:
        ...
